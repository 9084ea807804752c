"""Pattern search over graph walks using a Karp-Rabin rolling fingerprint."""

from __future__ import annotations

from typing import List, Tuple

from .alphabet import DIGITS, PRIME, SIGMA, is_valid
from .graph import NO_NODE, OrientedNode, SequenceGraph


def fingerprint(text: str) -> int:
    """Karp-Rabin fingerprint of ``text`` with radix SIGMA modulo PRIME."""

    value = 0
    for symbol in text:
        value = (SIGMA * value + DIGITS[symbol]) % PRIME
    return value


def scan(
    text: str,
    start: int,
    window_hash: int,
    pattern: str,
    pattern_hash: int,
    high: int,
) -> Tuple[int, bool]:
    """Advance the rolling window over ``text[start:]``.

    ``window_hash`` is the fingerprint of the trailing ``len(pattern)``
    symbols of ``text[:start]`` (or of the whole prefix while it is shorter
    than the pattern) and ``high`` is ``SIGMA ** (len(pattern) - 1) % PRIME``.
    Returns the updated fingerprint and whether a verified occurrence of
    ``pattern`` ends somewhere in ``text[start:]``.
    """

    width = len(pattern)
    for position in range(start, len(text)):
        digit = DIGITS[text[position]]
        if position < width:
            window_hash = (SIGMA * window_hash + digit) % PRIME
        else:
            leaving = DIGITS[text[position - width]]
            window_hash = (SIGMA * (window_hash - high * leaving) + digit) % PRIME
        end = position + 1
        if (
            end >= width
            and window_hash == pattern_hash
            and text[end - width : end] == pattern
        ):
            return window_hash, True
    return window_hash, False


def contains(
    graph: SequenceGraph,
    pattern: str,
    source: OrientedNode,
    destination: OrientedNode,
) -> bool:
    """Return ``True`` if ``pattern`` occurs in the text of some walk.

    Walks run from ``source`` to ``destination`` over the (acyclic) graph;
    the text of a walk is the concatenation of its node labels. Each stack
    frame carries its own text prefix and window fingerprint, so
    backtracking needs no undo step. An occurrence only counts once its walk
    reaches ``destination``, and the search stops at the first such walk.
    """

    if source == NO_NODE or destination == NO_NODE:
        return False
    if not is_valid(pattern):
        return False

    pattern_hash = fingerprint(pattern)
    high = pow(SIGMA, len(pattern) - 1, PRIME) if pattern else 0

    # (node, text before node, fingerprint of that text, pattern already seen)
    stack: List[Tuple[OrientedNode, str, int, bool]] = [
        (source, "", 0, not pattern)
    ]
    while stack:
        node, text, window_hash, found = stack.pop()
        if not found:
            start = len(text)
            text = text + graph.label(node)
            window_hash, found = scan(
                text, start, window_hash, pattern, pattern_hash, high
            )
        if node == destination:
            if found:
                return True
            continue
        if found:
            # Only reachability of the destination matters from here on.
            text = ""
        for edge in reversed(graph.out_edges(node)):
            stack.append((edge.dest, text, window_hash, found))
    return False

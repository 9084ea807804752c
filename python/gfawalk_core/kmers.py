"""K-mer frequency ranking over all walks between two nodes."""

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Dict, List, MutableMapping, Tuple

from .alphabet import DIGITS, SIGMA, decode_kmer
from .graph import OrientedNode, SequenceGraph
from .walks import iter_walks

KmerCounts = Dict[int, int]  # base-4 code -> occurrences, first-seen order


def tally_windows(text: str, k: int, counts: MutableMapping[int, int]) -> None:
    """Add every width-``k`` window of ``text`` to ``counts``.

    Windows are keyed by their base-4 code, rolled in O(1) per symbol. The
    code is exact (radix equals alphabet size), so no collision check is
    needed.
    """

    if len(text) < k:
        return
    high = SIGMA ** (k - 1)
    code = 0
    for position, symbol in enumerate(text):
        if position >= k:
            code -= DIGITS[text[position - k]] * high
        code = code * SIGMA + DIGITS[symbol]
        if position >= k - 1:
            counts[code] += 1


def count_kmers(
    graph: SequenceGraph,
    k: int,
    source: OrientedNode,
    destination: OrientedNode,
) -> KmerCounts:
    """Count width-``k`` windows over the text of every walk.

    Counts accumulate across walks as well as within a walk.
    """

    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")
    counts: KmerCounts = defaultdict(int)
    for walk in iter_walks(graph, source, destination):
        tally_windows(walk.text, k, counts)
    return dict(counts)


def top_kmers(
    graph: SequenceGraph,
    k: int,
    n: int,
    source: OrientedNode,
    destination: OrientedNode,
) -> List[Tuple[str, int]]:
    """Return up to ``n`` ``(kmer, count)`` pairs, most frequent first.

    Selection keeps a min-heap of capacity ``n``: it is seeded with the first
    ``n`` distinct k-mers (in first-seen order) and a later k-mer replaces the
    heap minimum only when its count is strictly greater, so ties keep the
    earlier k-mer. Among equal counts the output order is whatever the heap
    yields.
    """

    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    counts = count_kmers(graph, k, source, destination)
    if n == 0 or not counts:
        return []

    ranking: List[Tuple[int, int]] = []
    for code, count in counts.items():
        if len(ranking) < n:
            heapq.heappush(ranking, (count, code))
        elif count > ranking[0][0]:
            heapq.heapreplace(ranking, (count, code))

    ordered: List[Tuple[str, int]] = []
    while ranking:
        count, code = heapq.heappop(ranking)
        ordered.append((decode_kmer(code, k), count))
    ordered.reverse()
    return ordered

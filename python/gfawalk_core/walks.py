"""Exhaustive source-to-destination walk enumeration."""

from __future__ import annotations

from typing import Iterator, List, NamedTuple, Tuple

from .graph import NO_NODE, OrientedNode, SequenceGraph

Path = Tuple[OrientedNode, ...]


class Walk(NamedTuple):
    nodes: Path
    text: str


def iter_walks(
    graph: SequenceGraph,
    source: OrientedNode,
    destination: OrientedNode,
) -> Iterator[Walk]:
    """Yield every walk from ``source`` to ``destination`` in DFS order.

    The graph is assumed acyclic; no visited set is kept, so a cycle would
    never terminate. Walks end as soon as they reach ``destination``. The
    number of walks grows exponentially with the number of branch points.
    """

    if source == NO_NODE or destination == NO_NODE:
        return

    stack: List[Tuple[OrientedNode, Path, str]] = [(source, (), "")]
    while stack:
        node, prefix, text = stack.pop()
        nodes = prefix + (node,)
        text = text + graph.label(node)
        if node == destination:
            yield Walk(nodes, text)
            continue
        # Reversed so the first adjacency entry is explored first.
        for edge in reversed(graph.out_edges(node)):
            stack.append((edge.dest, nodes, text))

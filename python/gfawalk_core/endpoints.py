"""Source and destination selection on an acyclic sequence graph."""

from __future__ import annotations

from typing import Set

from .graph import NO_NODE, OrientedNode, SequenceGraph


def resolve_source(graph: SequenceGraph) -> OrientedNode:
    """Return the first node that no edge points at, or ``NO_NODE``."""

    for node in graph.nodes():
        if graph.is_source(node):
            return node
    return NO_NODE


def resolve_destination(graph: SequenceGraph, start: OrientedNode) -> OrientedNode:
    """Follow the first outgoing edge from ``start`` until reaching a sink.

    The first edge in adjacency order always wins, so on graphs with several
    reachable sinks the result is deterministic but not otherwise meaningful
    (it is neither the closest nor a canonical sink). ``NO_NODE`` is returned
    for a ``NO_NODE`` start and when the descent runs into a cycle.
    """

    if start == NO_NODE:
        return NO_NODE

    seen: Set[OrientedNode] = set()
    node = start
    while True:
        if node in seen:
            return NO_NODE
        seen.add(node)
        edges = graph.out_edges(node)
        if not edges:
            return node
        node = edges[0].dest

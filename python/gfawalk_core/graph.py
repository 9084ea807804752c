"""Bidirected sequence graph over oriented segments."""

from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple, Tuple

import networkx as nx

from .alphabet import complement, is_valid


class InvalidSegment(ValueError):
    """Raised when a segment label contains symbols outside the alphabet."""


class UnknownNode(IndexError):
    """Raised when a node refers to a segment index that does not exist."""


class OrientedNode(NamedTuple):
    """A segment index paired with an orientation (``reverse=False`` is ``+``)."""

    index: int
    reverse: bool = False

    def __str__(self) -> str:
        return f"{self.index}{'-' if self.reverse else '+'}"


class Edge(NamedTuple):
    source: OrientedNode
    dest: OrientedNode


# Returned by the endpoint resolvers when no node qualifies.
NO_NODE = OrientedNode(-1, False)


class SequenceGraph:
    """Segments of DNA joined by oriented edges.

    Every segment ``i`` contributes the nodes ``(i, +)`` and ``(i, -)``, the
    second labelled with the reverse complement of the first. Edges live in
    the bucket of their source segment and may only be followed when leaving
    that segment in the edge's source orientation. Parallel edges are kept.

    A node stays a source candidate until the first edge pointing at it is
    added; the flag is never restored.
    """

    def __init__(self) -> None:
        self._labels: List[Tuple[str, str]] = []
        self._adjacency: List[List[Edge]] = []
        self._is_source: Dict[OrientedNode, bool] = {}
        self._edge_count = 0

    def __repr__(self) -> str:
        return (
            f"SequenceGraph(segments={self.segment_count}, "
            f"edges={self.edge_count})"
        )

    @property
    def segment_count(self) -> int:
        return len(self._labels)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def add_segment(self, text: str) -> int:
        """Append a segment and return its index."""

        if not is_valid(text):
            raise InvalidSegment(f"Segment label {text!r} is not a DNA sequence")
        index = len(self._labels)
        self._labels.append((text, complement(text)))
        self._adjacency.append([])
        self._is_source[OrientedNode(index, False)] = True
        self._is_source[OrientedNode(index, True)] = True
        return index

    def add_edge(self, source: OrientedNode, dest: OrientedNode) -> None:
        source = self._check(source)
        dest = self._check(dest)
        self._adjacency[source.index].append(Edge(source, dest))
        self._is_source[dest] = False
        self._edge_count += 1

    def label(self, node: OrientedNode) -> str:
        node = self._check(node)
        return self._labels[node.index][node.reverse]

    def segment(self, index: int) -> str:
        """Forward label of segment ``index``."""

        return self.label(OrientedNode(index, False))

    def is_source(self, node: OrientedNode) -> bool:
        return self._is_source[self._check(node)]

    def nodes(self) -> Iterator[OrientedNode]:
        """Yield every node by ascending segment index, ``+`` before ``-``."""

        for index in range(self.segment_count):
            yield OrientedNode(index, False)
            yield OrientedNode(index, True)

    def out_edges(self, node: OrientedNode) -> List[Edge]:
        """Edges leaving ``node`` in its own orientation, in insertion order."""

        node = self._check(node)
        return [
            edge
            for edge in self._adjacency[node.index]
            if edge.source.reverse == node.reverse
        ]

    def edges(self) -> Iterator[Edge]:
        for bucket in self._adjacency:
            yield from bucket

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export as a ``MultiDiGraph`` keyed by :class:`OrientedNode`."""

        graph = nx.MultiDiGraph()
        for node in self.nodes():
            graph.add_node(node, label=self.label(node))
        graph.add_edges_from(self.edges())
        return graph

    def _check(self, node: Tuple[int, bool]) -> OrientedNode:
        index, reverse = node
        if not 0 <= index < self.segment_count:
            raise UnknownNode(
                f"Node {index}{'-' if reverse else '+'} refers to a missing segment "
                f"(graph has {self.segment_count})"
            )
        return OrientedNode(index, bool(reverse))

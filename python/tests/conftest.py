"""Shared graph fixtures for the gfawalk tests."""

from typing import Callable, List

import networkx as nx
import numpy as np
import pytest

from gfawalk_core import ALPHABET, OrientedNode, SequenceGraph


def build_graph(labels, edges) -> SequenceGraph:
    """Graph from labels and ``((i, rev), (j, rev))`` edge pairs."""
    graph = SequenceGraph()
    for label in labels:
        graph.add_segment(label)
    for source, dest in edges:
        graph.add_edge(OrientedNode(*source), OrientedNode(*dest))
    return graph


def oracle_walk_texts(graph: SequenceGraph, source, destination) -> List[str]:
    """Texts of every source-to-destination walk, enumerated with networkx."""
    if source == destination:
        return [graph.label(source)]
    exported = graph.to_networkx()
    return [
        "".join(graph.label(node) for node in path)
        for path in nx.all_simple_paths(exported, source, destination)
    ]


@pytest.fixture
def atg_cat():
    """Two segments, ATG and CAT, joined by 0+ -> 1+."""
    return build_graph(["ATG", "CAT"], [((0, False), (1, False))])


@pytest.fixture
def random_dag() -> Callable[[int], SequenceGraph]:
    """Factory for small random DAGs without parallel edges.

    Edges only ever go from a lower to a higher segment index, so the
    oriented graph cannot contain a cycle.
    """

    def factory(seed: int, segments: int = 6, density: float = 0.35) -> SequenceGraph:
        rng = np.random.default_rng(seed)
        labels = [
            "".join(rng.choice(ALPHABET, size=int(rng.integers(1, 5))))
            for _ in range(segments)
        ]
        edges = []
        for i in range(segments):
            for j in range(i + 1, segments):
                for from_rev in (False, True):
                    for to_rev in (False, True):
                        if rng.random() < density:
                            edges.append(((i, from_rev), (j, to_rev)))
        return build_graph(labels, edges)

    return factory

"""Tests for back-edge removal."""

import networkx as nx
import numpy as np
import pytest

from conftest import build_graph
from gfawalk_core import OrientedNode, linearize

F, R = False, True


def _out_edges_by_node(graph):
    return {node: graph.out_edges(node) for node in graph.nodes()}


def test_three_node_loop_drops_only_back_edge():
    # 0+ -> 1+ -> 2+ -> 0+ closes the loop; 0+ -> 2+ is a forward edge.
    graph = build_graph(
        ["ATG", "CC", "GA"],
        [
            ((0, F), (1, F)),
            ((0, F), (2, F)),
            ((1, F), (2, F)),
            ((2, F), (0, F)),
        ],
    )

    acyclic, was_cyclic = linearize(graph)

    assert was_cyclic
    assert acyclic.edge_count == 3
    kept = set(acyclic.edges())
    assert (OrientedNode(2, F), OrientedNode(0, F)) not in kept
    assert (OrientedNode(0, F), OrientedNode(2, F)) in kept
    assert nx.is_directed_acyclic_graph(acyclic.to_networkx())


def test_self_loop_is_a_back_edge():
    graph = build_graph(["AC"], [((0, F), (0, F)), ((0, F), (0, R))])

    acyclic, was_cyclic = linearize(graph)

    assert was_cyclic
    assert list(acyclic.edges()) == [(OrientedNode(0, F), OrientedNode(0, R))]


def test_input_graph_is_left_untouched():
    graph = build_graph(["A", "C"], [((0, F), (1, F)), ((1, F), (0, F))])

    acyclic, _ = linearize(graph)

    assert graph.edge_count == 2
    assert acyclic is not graph
    assert acyclic.edge_count == 1


def test_segments_are_copied_with_indices_and_labels():
    graph = build_graph(["ATG", "CAT", "GGC"], [])
    acyclic, was_cyclic = linearize(graph)

    assert not was_cyclic
    assert acyclic.segment_count == 3
    for node in graph.nodes():
        assert acyclic.label(node) == graph.label(node)


def test_empty_graph():
    acyclic, was_cyclic = linearize(build_graph([], []))
    assert acyclic.segment_count == 0
    assert not was_cyclic


@pytest.mark.parametrize("seed", range(8))
def test_acyclic_input_keeps_every_edge(random_dag, seed):
    graph = random_dag(seed)

    acyclic, was_cyclic = linearize(graph)

    assert not was_cyclic
    assert _out_edges_by_node(acyclic) == _out_edges_by_node(graph)


@pytest.mark.parametrize("seed", range(12))
def test_result_is_always_acyclic(seed):
    rng = np.random.default_rng(100 + seed)
    segments = int(rng.integers(1, 7))
    edges = [
        (
            (int(rng.integers(segments)), bool(rng.integers(2))),
            (int(rng.integers(segments)), bool(rng.integers(2))),
        )
        for _ in range(int(rng.integers(0, 4 * segments)))
    ]
    graph = build_graph(["ACGT"[: 1 + i % 4] for i in range(segments)], edges)

    acyclic, was_cyclic = linearize(graph)

    assert nx.is_directed_acyclic_graph(acyclic.to_networkx())
    assert was_cyclic == (not nx.is_directed_acyclic_graph(graph.to_networkx()))
    assert set(acyclic.edges()) <= set(graph.edges())


if __name__ == "__main__":
    pytest.main([__file__])

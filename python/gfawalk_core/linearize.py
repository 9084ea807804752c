"""Back-edge removal turning a sequence graph into a DAG."""

from __future__ import annotations

from typing import Iterator, List, Set, Tuple

from .graph import Edge, OrientedNode, SequenceGraph


def linearize(graph: SequenceGraph) -> Tuple[SequenceGraph, bool]:
    """Return an acyclic copy of ``graph`` and whether any edge was dropped.

    A depth-first search is rooted at every node not yet visited (ascending
    segment index, ``+`` before ``-``). Tree, forward and cross edges are
    copied to the result; edges pointing at a node still on the DFS stack are
    back edges and are left out. Which edges get cut depends on the visiting
    order, so this is not a strongly-connected-component condensation.

    The input graph is not modified.
    """

    acyclic = SequenceGraph()
    for index in range(graph.segment_count):
        acyclic.add_segment(graph.segment(index))

    visited: Set[OrientedNode] = set()
    on_stack: Set[OrientedNode] = set()
    was_cyclic = False

    for root in graph.nodes():
        if root in visited:
            continue
        visited.add(root)
        on_stack.add(root)
        stack: List[Tuple[OrientedNode, Iterator[Edge]]] = [
            (root, iter(graph.out_edges(root)))
        ]
        while stack:
            node, pending = stack[-1]
            for edge in pending:
                if edge.dest not in visited:
                    acyclic.add_edge(node, edge.dest)
                    visited.add(edge.dest)
                    on_stack.add(edge.dest)
                    stack.append((edge.dest, iter(graph.out_edges(edge.dest))))
                    break
                if edge.dest in on_stack:
                    was_cyclic = True
                else:
                    acyclic.add_edge(node, edge.dest)
            else:
                on_stack.discard(node)
                stack.pop()

    return acyclic, was_cyclic

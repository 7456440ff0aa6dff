"""Shared test fixtures."""

from typing import Iterable, Tuple

import pytest

from libgraph.core.graph import Graph


@pytest.fixture
def empty_graph() -> Graph:
    """Fixture providing an empty graph."""
    return Graph()


@pytest.fixture
def chain_graph() -> Graph:
    """
    Fixture providing a chain:
    a -> b -> c -> d
    """
    return Graph().add_edges([("a", "b"), ("b", "c"), ("c", "d")])


@pytest.fixture
def diamond_graph() -> Graph:
    """
    Fixture providing a diamond with a shortcut:
    a -> b -> c -> d
         |         ^
         +---------+
    """
    return Graph().add_edges([("a", "b"), ("b", "c"), ("c", "d"), ("b", "d")])


@pytest.fixture
def cyclic_graph() -> Graph:
    """
    Fixture providing a graph with a cycle:
    a -> b -> c -> a
              |
              v
              d
    plus a -> c
    """
    return Graph().add_edges([("a", "b"), ("a", "c"), ("b", "c"), ("c", "d"), ("c", "a")])


@pytest.fixture
def weighted_graph() -> Graph:
    """
    Fixture providing a weighted graph where the direct edge is the
    most expensive route:
    a -1-> b -2-> c
    a ----10----> c
    """
    return (
        Graph()
        .add_edge("a", "b", weight=1)
        .add_edge("b", "c", weight=2)
        .add_edge("a", "c", weight=10)
    )


def assert_indices_consistent(graph: Graph) -> None:
    """Check that the in/out adjacency indices are exact inverses."""
    state = graph.state
    out_pairs = {(k1, k2) for k1, dests in state.out_edges.items() for k2 in dests}
    in_pairs = {(k1, k2) for k2, srcs in state.in_edges.items() for k1 in srcs}
    assert out_pairs == in_pairs
    assert set(state.edges_meta) == out_pairs
    for k1, k2 in out_pairs:
        assert k1 in state.vertices
        assert k2 in state.vertices
    assert all(state.out_edges.values())
    assert all(state.in_edges.values())
    assert set(state.vertex_labels) <= set(state.vertices)


def edge_pairs(graph: Graph) -> Iterable[Tuple]:
    """Return the set of (source, destination) pairs of a graph."""
    return {(edge.v1, edge.v2) for edge in graph.edges()}


@pytest.fixture
def check_indices():
    """Fixture exposing the index consistency check."""
    return assert_indices_consistent


@pytest.fixture
def pairs():
    """Fixture exposing the edge pair extraction."""
    return edge_pairs

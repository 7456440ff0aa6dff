"""Tests for graph traversal operations."""

import pytest

from libgraph.core.graph import Graph
from libgraph.core.graph_operations.traversal import GraphTraversal


@pytest.fixture
def tree_graph() -> Graph:
    """
    Fixture providing a small tree on integer vertices, whose keys sort
    like the integers themselves:
    1 -> 2 -> 3 -> 5
         |
         v
         4
    """
    return Graph().add_edges([(1, 2), (2, 3), (2, 4), (3, 5)])


def test_preorder(tree_graph):
    """Test depth-first preorder visits children in ascending order."""
    assert tree_graph.preorder() == [1, 2, 3, 5, 4]


def test_postorder(tree_graph):
    """Test depth-first postorder."""
    assert tree_graph.postorder() == [5, 3, 4, 2, 1]


def test_orders_cover_disconnected_vertices():
    """Test that traversals restart from every unvisited vertex."""
    graph = Graph().add_edges([(1, 2), (3, 4)]).add_vertex(5)

    assert graph.preorder() == [1, 2, 3, 4, 5]
    assert graph.postorder() == [2, 1, 4, 3, 5]


def test_postorder_respects_edges_in_dag(diamond_graph):
    """Test that every edge target precedes its source in postorder."""
    position = {v: i for i, v in enumerate(diamond_graph.postorder())}
    for edge in diamond_graph.edges():
        assert position[edge.v2] < position[edge.v1]


def test_orders_on_cycles(cyclic_graph):
    """Test that traversals terminate on cyclic graphs and visit each vertex once."""
    preorder = cyclic_graph.preorder()
    postorder = cyclic_graph.postorder()

    assert sorted(preorder) == ["a", "b", "c", "d"]
    assert sorted(postorder) == ["a", "b", "c", "d"]


def test_orders_on_empty_graph(empty_graph):
    """Test traversals of an empty graph."""
    assert empty_graph.preorder() == []
    assert empty_graph.postorder() == []


def test_reachable(tree_graph):
    """Test forward reachability including the seeds."""
    assert tree_graph.reachable([2]) == [2, 3, 4, 5]
    assert set(tree_graph.reachable([3, 4])) == {3, 4, 5}
    assert tree_graph.reachable([5]) == [5]


def test_reachable_neighbors(tree_graph):
    """Test forward reachability by non-empty paths."""
    assert tree_graph.reachable_neighbors([2]) == [3, 4, 5]
    assert tree_graph.reachable_neighbors([5]) == []


def test_reachable_neighbors_includes_seed_on_cycle():
    """Test that a seed on a cycle reaches itself."""
    graph = Graph().add_edges([(1, 2), (2, 3), (3, 1), (3, 4)])

    assert set(graph.reachable_neighbors([1])) == {1, 2, 3, 4}
    assert set(Graph().add_edge(1, 1).reachable_neighbors([1])) == {1}


def test_reaching(tree_graph):
    """Test backward reachability including the seeds."""
    assert set(tree_graph.reaching([5])) == {1, 2, 3, 5}
    assert set(tree_graph.reaching([4, 5])) == {1, 2, 3, 4, 5}


def test_reaching_neighbors(tree_graph):
    """Test backward reachability by non-empty paths."""
    assert tree_graph.reaching_neighbors([5]) == [3, 2, 1]
    assert tree_graph.reaching_neighbors([1]) == []


def test_reachability_ignores_absent_seeds(chain_graph):
    """Test that absent seed vertices contribute nothing."""
    assert chain_graph.reachable(["ghost"]) == []
    assert chain_graph.reaching_neighbors(["ghost"]) == []
    assert set(chain_graph.reachable(["ghost", "c"])) == {"c", "d"}


def test_reachability_matches_transpose(diamond_graph):
    """Test that reaching on a graph equals reachable on its transpose."""
    transposed = diamond_graph.transpose()
    for v in diamond_graph.vertices():
        assert set(diamond_graph.reaching([v])) == set(transposed.reachable([v]))


def test_static_interface(tree_graph):
    """Test calling the traversal operations directly."""
    assert GraphTraversal.preorder(tree_graph) == tree_graph.preorder()
    assert GraphTraversal.reachable(tree_graph, [3]) == [3, 5]

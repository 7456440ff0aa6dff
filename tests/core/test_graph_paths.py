"""
Tests for graph path finding algorithms.
"""

import pytest

from libgraph.core.graph import Graph
from libgraph.core.graph_paths import PathFinding, PathResult, PathType, SearchLimits
from libgraph.core.graph_paths import utils
from libgraph.core.graph_paths.algorithms import AllPathsFinder, ShortestPathFinder
from libgraph.core.graph_paths.utils import PriorityQueue, calculate_path_weight, is_better_cost
from libgraph.core.models import Edge


@pytest.fixture
def grid_graph() -> Graph:
    """
    Fixture providing a 4x4 grid with edges to the right and downwards.
    Vertices are (row, column) tuples; horizontal edges cost 1, vertical 2.
    """
    graph = Graph()
    for row in range(4):
        for col in range(4):
            if col < 3:
                graph = graph.add_edge((row, col), (row, col + 1), weight=1)
            if row < 3:
                graph = graph.add_edge((row, col), (row + 1, col), weight=2)
    return graph


def path_cost(graph, path):
    return sum(graph.edge_weight(v1, v2) for v1, v2 in zip(path, path[1:]))


def test_dijkstra_prefers_lighter_route(weighted_graph):
    """Test that Dijkstra avoids the expensive direct edge."""
    assert weighted_graph.dijkstra("a", "c") == ["a", "b", "c"]

    result = PathFinding.dijkstra(weighted_graph, "a", "c")
    assert isinstance(result, PathResult)
    assert result.total_weight == 3.0
    assert len(result) == 2
    assert list(result) == ["a", "b", "c"]
    assert result.start == "a"
    assert result.end == "c"


def test_dijkstra_unweighted(diamond_graph):
    """Test that default weights make Dijkstra count edges."""
    assert diamond_graph.dijkstra("a", "d") == ["a", "b", "d"]


def test_dijkstra_after_reweighting(weighted_graph):
    """Test that edge weights drive the choice of path."""
    graph = weighted_graph.update_edge("a", "c", weight=2.5)
    assert graph.dijkstra("a", "c") == ["a", "c"]


def test_dijkstra_unreachable(chain_graph):
    """Test that an unreachable target yields None."""
    assert chain_graph.dijkstra("d", "a") is None
    assert PathFinding.dijkstra(chain_graph, "d", "a") is None


def test_dijkstra_absent_vertices(chain_graph):
    """Test that absent endpoints yield None."""
    assert chain_graph.dijkstra("ghost", "a") is None
    assert chain_graph.dijkstra("a", "ghost") is None


def test_dijkstra_same_vertex(chain_graph):
    """Test that a vertex reaches itself by the empty path."""
    assert chain_graph.dijkstra("b", "b") == ["b"]
    result = PathFinding.dijkstra(chain_graph, "b", "b")
    assert result.total_weight == 0.0
    assert len(result) == 0


def test_dijkstra_with_cycle(cyclic_graph):
    """Test shortest paths on a graph with cycles."""
    assert cyclic_graph.dijkstra("a", "d") == ["a", "c", "d"]
    assert cyclic_graph.dijkstra("b", "a") == ["b", "c", "a"]


def test_dijkstra_zero_weight_edges():
    """Test that zero-weight edges are allowed."""
    graph = Graph().add_edges(
        [Edge("a", "b", weight=0), Edge("b", "c", weight=0), Edge("a", "c", weight=1)]
    )
    result = PathFinding.dijkstra(graph, "a", "c")

    assert result.path == ["a", "b", "c"]
    assert result.total_weight == 0.0


def test_dijkstra_tiny_weights():
    """Test that weights below any float tolerance still decide the path."""
    graph = Graph().add_edges(
        [Edge("a", "c", weight=5e-11), Edge("a", "b", weight=0), Edge("b", "c", weight=0)]
    )
    result = PathFinding.dijkstra(graph, "a", "c")

    assert result.path == ["a", "b", "c"]
    assert result.total_weight == 0.0


def test_priority_queue_tiny_improvement():
    """Test that any strictly lower priority replaces the queued one."""
    queue = PriorityQueue()
    queue.add_or_update(1, 1e-10)
    queue.add_or_update(1, 5e-11)

    assert queue.pop() == (5e-11, 1)


def test_dijkstra_documented_example():
    """Test the weighted triangle a->b(2), b->c(1), a->c(5)."""
    graph = (
        Graph()
        .add_edge("a", "b", weight=2)
        .add_edge("b", "c", weight=1)
        .add_edge("a", "c", weight=5)
    )

    assert graph.dijkstra("a", "c") == ["a", "b", "c"]
    assert PathFinding.dijkstra(graph, "a", "c").total_weight == 3.0


def test_dijkstra_no_path_between_siblings():
    """Test that a target reachable only from another source yields None."""
    graph = Graph().add_edges([("a", "c"), ("b", "c"), ("b", "d")])

    assert graph.dijkstra("a", "d") is None
    assert graph.get_paths("a", "d") == []


def test_paths_with_colliding_endpoint():
    """Test that a value sharing the key of a vertex is not a path endpoint."""
    graph = Graph().add_edge(-1, "x")

    assert graph.dijkstra(-1, "x") == [-1, "x"]
    assert graph.dijkstra(-2, "x") is None
    assert graph.a_star(-2, "x", lambda v: 0) is None
    assert graph.get_paths(-2, "x") == []
    assert graph.reachable([-2]) == []
    assert graph.reaching(["x"]) == ["x", -1]


def test_get_shortest_path_alias(weighted_graph):
    """Test the shortest path alias."""
    assert weighted_graph.get_shortest_path("a", "c") == weighted_graph.dijkstra("a", "c")


def test_dijkstra_grid_cost(grid_graph):
    """Test the cost of a shortest path on a grid."""
    result = PathFinding.dijkstra(grid_graph, (0, 0), (3, 3))

    assert result.total_weight == 9.0
    assert result.start == (0, 0)
    assert result.end == (3, 3)
    assert path_cost(grid_graph, result.path) == 9


def test_a_star_zero_heuristic_matches_dijkstra(grid_graph, weighted_graph):
    """Test that A* with a zero heuristic finds paths of the same cost."""
    for graph, start, end in ((grid_graph, (0, 0), (3, 3)), (weighted_graph, "a", "c")):
        dijkstra = PathFinding.dijkstra(graph, start, end)
        a_star = PathFinding.a_star(graph, start, end, lambda v: 0)
        assert a_star.total_weight == dijkstra.total_weight


def test_a_star_admissible_heuristic(grid_graph):
    """Test A* guided by the Manhattan distance to the target."""

    def manhattan(vertex):
        row, col = vertex
        return (3 - row) * 2 + (3 - col)

    path = grid_graph.a_star((0, 0), (3, 3), manhattan)

    assert path[0] == (0, 0)
    assert path[-1] == (3, 3)
    assert path_cost(grid_graph, path) == 9


def test_a_star_unreachable(chain_graph):
    """Test that A* returns None when no path exists."""
    assert chain_graph.a_star("d", "a", lambda v: 0) is None
    assert chain_graph.a_star("a", "ghost", lambda v: 0) is None


def test_get_paths(diamond_graph):
    """Test enumerating every simple path."""
    paths = diamond_graph.get_paths("a", "d")
    assert sorted(paths) == [["a", "b", "c", "d"], ["a", "b", "d"]]


def test_get_paths_skips_cycles(cyclic_graph):
    """Test that enumerated paths never repeat a vertex."""
    paths = cyclic_graph.get_paths("a", "d")

    assert sorted(paths) == [["a", "b", "c", "d"], ["a", "c", "d"]]
    for path in paths:
        assert len(set(path)) == len(path)


def test_get_paths_edge_cases(chain_graph):
    """Test enumeration with no path, absent vertices and equal endpoints."""
    assert chain_graph.get_paths("d", "a") == []
    assert chain_graph.get_paths("ghost", "a") == []
    assert chain_graph.get_paths("a", "a") == [["a"]]


def test_get_paths_limits(diamond_graph):
    """Test bounding the enumeration."""
    assert diamond_graph.get_paths("a", "d", SearchLimits(max_length=2)) == [["a", "b", "d"]]
    assert diamond_graph.get_paths("a", "d", SearchLimits(max_length=1)) == []
    assert len(diamond_graph.get_paths("a", "d", SearchLimits(max_paths=1))) == 1


def test_get_paths_memory_limit(diamond_graph):
    """Test that a generous memory limit does not affect the result."""
    paths = diamond_graph.get_paths("a", "d", SearchLimits(max_memory_mb=1024))
    assert len(paths) == 2


def test_get_paths_grid_count(grid_graph):
    """Test the number of monotone paths across a grid."""
    # C(6, 3) ways to interleave three right and three down steps
    assert len(grid_graph.get_paths((0, 0), (3, 3))) == 20


def test_iter_paths_is_lazy(grid_graph):
    """Test that paths can be consumed one at a time."""
    paths = PathFinding.iter_paths(grid_graph, (0, 0), (3, 3))
    first = next(paths)

    assert first[0] == (0, 0)
    assert first[-1] == (3, 3)


def test_find_paths_by_type(weighted_graph):
    """Test selecting the algorithm by path type."""
    assert PathFinding.find_paths(weighted_graph, "a", "c") == [["a", "b", "c"]]
    assert PathFinding.find_paths(weighted_graph, "a", "c", PathType.A_STAR) == [["a", "b", "c"]]
    assert sorted(PathFinding.find_paths(weighted_graph, "a", "c", PathType.ALL_PATHS)) == [
        ["a", "b", "c"],
        ["a", "c"],
    ]
    assert PathFinding.find_paths(weighted_graph, "c", "a") == []


def test_all_paths_finder_single_path(diamond_graph):
    """Test that the enumeration finder can return just the first path."""
    finder = AllPathsFinder(diamond_graph)
    first = next(finder.find_paths("a", "d"))

    assert finder.find_path("a", "d") == first
    assert finder.find_path("a", "d", SearchLimits(max_length=2)) == ["a", "b", "d"]
    assert finder.find_path("d", "a") is None


def test_shortest_path_finder_find_paths(weighted_graph, chain_graph):
    """Test that the shortest path finder yields its single result."""
    results = list(ShortestPathFinder(weighted_graph).find_paths("a", "c"))

    assert len(results) == 1
    assert results[0].path == ["a", "b", "c"]
    assert list(ShortestPathFinder(chain_graph).find_paths("d", "a")) == []


def test_search_limits_validation():
    """Test that invalid limits are rejected."""
    with pytest.raises(ValueError):
        SearchLimits(max_length=-1)
    with pytest.raises(ValueError):
        SearchLimits(max_paths=0)
    with pytest.raises(ValueError):
        SearchLimits(max_memory_mb=0)
    with pytest.raises(TypeError):
        SearchLimits(max_length="3")
    with pytest.raises(TypeError):
        SearchLimits(max_paths=1.5)


def test_priority_queue_order():
    """Test that the queue pops by priority, then insertion order."""
    queue = PriorityQueue()
    queue.add_or_update(1, 2.0)
    queue.add_or_update(2, 1.0)
    queue.add_or_update(3, 1.0)
    queue.add_or_update(1, 0.5)
    queue.add_or_update(2, 5.0)  # Worse priority is ignored

    assert len(queue) == 3
    assert queue.pop() == (0.5, 1)
    assert queue.pop() == (1.0, 2)
    assert queue.pop() == (1.0, 3)
    assert queue.empty()
    assert queue.pop() is None


def test_cost_helpers(weighted_graph):
    """Test cost comparison and path weight helpers."""
    assert is_better_cost(1.0, 2.0)
    assert not is_better_cost(2.0, 2.0)
    assert is_better_cost(5e-11, 1e-10)
    assert not is_better_cost(2.0 + 1e-12, 2.0)

    state = weighted_graph.state
    keys = [k for k, v in state.vertices.items() if v == "a"]
    keys += [k for k, v in state.vertices.items() if v == "b"]
    keys += [k for k, v in state.vertices.items() if v == "c"]
    assert calculate_path_weight(state, keys) == 3.0


def test_get_paths_memory_limit_exceeded(monkeypatch, grid_graph):
    """Test that growing past the memory budget aborts the enumeration."""
    readings = iter(range(0, 10**15, 10**9))  # One more gigabyte per sample
    monkeypatch.setattr(utils, "get_memory_usage", lambda: next(readings))
    monkeypatch.setattr(utils, "MEMORY_CHECK_INTERVAL", 0)

    with pytest.raises(MemoryError):
        grid_graph.get_paths((0, 0), (3, 3), SearchLimits(max_memory_mb=1))

"""Graph path finding functionality."""

from typing import Any, Hashable, Iterator, List, Optional

from .algorithms.all_paths import AllPathsFinder
from .algorithms.shortest_path import ShortestPathFinder
from .base import PathFinder
from .models import PathResult, SearchLimits
from .types import Heuristic, PathType, VertexPath, zero_heuristic
from .utils import calculate_path_weight, get_edge_weight

__all__ = [
    "Heuristic",
    "PathFinder",
    "PathFinding",
    "PathResult",
    "PathType",
    "SearchLimits",
    "VertexPath",
    "calculate_path_weight",
    "get_edge_weight",
    "zero_heuristic",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def dijkstra(graph: Any, start: Hashable, end: Hashable) -> Optional[PathResult]:
        """Find a lowest-weight path between vertices.

        Returns None if either vertex is absent or no path exists.
        """
        return ShortestPathFinder(graph).find_path(start, end)

    @staticmethod
    def a_star(
        graph: Any, start: Hashable, end: Hashable, heuristic: Heuristic
    ) -> Optional[PathResult]:
        """Find a lowest-weight path guided by an admissible heuristic.

        Returns None if either vertex is absent or no path exists.
        """
        return ShortestPathFinder(graph).find_path(start, end, heuristic=heuristic)

    # Alias
    shortest_path = dijkstra

    @staticmethod
    def iter_paths(
        graph: Any, start: Hashable, end: Hashable, limits: Optional[SearchLimits] = None
    ) -> Iterator[VertexPath]:
        """Lazily yield simple paths between vertices."""
        return AllPathsFinder(graph).find_paths(start, end, limits)

    @staticmethod
    def all_paths(
        graph: Any, start: Hashable, end: Hashable, limits: Optional[SearchLimits] = None
    ) -> List[VertexPath]:
        """Collect every simple path between vertices."""
        return list(AllPathsFinder(graph).find_paths(start, end, limits))

    @classmethod
    def find_paths(
        cls,
        graph: Any,
        start: Hashable,
        end: Hashable,
        path_type: PathType = PathType.DIJKSTRA,
        **kwargs,
    ) -> List[VertexPath]:
        """Find paths using the specified algorithm.

        Shortest path algorithms return at most one path.
        """
        if path_type == PathType.ALL_PATHS:
            return cls.all_paths(graph, start, end, kwargs.get("limits"))
        if path_type == PathType.A_STAR:
            result = cls.a_star(graph, start, end, kwargs.get("heuristic") or zero_heuristic)
        elif path_type == PathType.DIJKSTRA:
            result = cls.dijkstra(graph, start, end)
        else:
            raise ValueError(f"Unsupported path type: {path_type}")
        return [result.path] if result is not None else []

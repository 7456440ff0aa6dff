"""
Lowest-weight path search with Dijkstra's algorithm and A*.
"""

import logging
from typing import Dict, Hashable, List, Optional

from ..base import PathFinder
from ..models import PathResult
from ..types import Heuristic, PathType, zero_heuristic
from ..utils import PriorityQueue, get_edge_weight, is_better_cost, keys_to_vertices

logger = logging.getLogger(__name__)


class ShortestPathFinder(PathFinder):
    """Shortest path implementation.

    Dijkstra's algorithm is A* with a heuristic that is zero everywhere. Edge
    weights are assumed to be non-negative and are not checked; with negative
    weights the result is unspecified.

    Among equal-cost candidates the vertex discovered first is expanded first,
    and neighbors are relaxed in ascending key order, so the returned path is
    deterministic for a given graph.
    """

    def find_path(
        self,
        start: Hashable,
        end: Hashable,
        heuristic: Optional[Heuristic] = None,
        **kwargs,
    ) -> Optional[PathResult]:
        """Find a lowest-weight path from start to end.

        Args:
            start: Source vertex
            end: Target vertex
            heuristic: Lower bound of the remaining cost from a vertex to end.
                Defaults to zero, which gives Dijkstra's algorithm.

        Returns:
            Optional[PathResult]: The path and its weight, or None if either
            vertex is absent or end is unreachable from start
        """
        endpoints = self.resolve_endpoints(start, end)
        if endpoints is None:
            logger.debug(f"Path search skipped: {start!r} or {end!r} not in graph")
            return None

        algorithm = PathType.DIJKSTRA if heuristic is None else PathType.A_STAR
        return self._search(endpoints[0], endpoints[1], heuristic or zero_heuristic, algorithm)

    def _search(
        self, source: int, target: int, heuristic: Heuristic, algorithm: PathType
    ) -> Optional[PathResult]:
        state = self.state
        logger.debug(
            f"Starting {algorithm.value} search from {state.vertices[source]!r} "
            f"to {state.vertices[target]!r}"
        )

        if source == target:
            return PathResult(path=[state.vertices[source]], total_weight=0.0)

        pq = PriorityQueue()
        pq.add_or_update(source, float(heuristic(state.vertices[source])))

        distances: Dict[int, float] = {source: 0.0}
        predecessors: Dict[int, int] = {}
        settled = set()

        while not pq.empty():
            current = pq.pop()
            if current is None:
                break
            _, node = current
            if node in settled:
                continue
            settled.add(node)

            if node == target:
                keys = self._reconstruct(predecessors, source, target)
                logger.debug(
                    f"Found path of {len(keys) - 1} edges with weight {distances[target]} "
                    f"after settling {len(settled)} vertices"
                )
                return PathResult(
                    path=keys_to_vertices(state, keys), total_weight=distances[target]
                )

            current_dist = distances[node]
            for neighbor in sorted(state.out_edges.get(node, ())):
                if neighbor in settled:
                    continue
                new_dist = current_dist + get_edge_weight(state, node, neighbor)
                if neighbor not in distances or is_better_cost(new_dist, distances[neighbor]):
                    distances[neighbor] = new_dist
                    predecessors[neighbor] = node
                    estimate = float(heuristic(state.vertices[neighbor]))
                    pq.add_or_update(neighbor, new_dist + estimate)

        logger.debug(f"No path found after settling {len(settled)} vertices")
        return None

    @staticmethod
    def _reconstruct(predecessors: Dict[int, int], source: int, target: int) -> List[int]:
        keys = [target]
        while keys[-1] != source:
            keys.append(predecessors[keys[-1]])
        keys.reverse()
        return keys

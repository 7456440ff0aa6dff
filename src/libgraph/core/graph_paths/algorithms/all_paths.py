"""All simple paths enumeration."""

import logging
from typing import Hashable, Iterator, List, Optional, Set

from ..base import PathFinder
from ..models import SearchLimits
from ..types import VertexPath
from ..utils import MemoryManager, keys_to_vertices

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class AllPathsFinder(PathFinder):
    """All simple paths implementation.

    The search is an iterative depth-first walk that never revisits a vertex
    already on the current path. Neighbors are expanded in ascending key
    order, so paths come out in a deterministic order for a given graph.
    The number of simple paths can grow exponentially with the graph size;
    use SearchLimits to bound the search.
    """

    def find_path(
        self, start: Hashable, end: Hashable, limits: Optional[SearchLimits] = None, **kwargs
    ) -> Optional[VertexPath]:
        """Find a single simple path between vertices.

        For AllPathsFinder, this returns the first path found.
        """
        max_length = limits.max_length if limits else None
        max_memory_mb = limits.max_memory_mb if limits else None
        paths = self.find_paths(start, end, SearchLimits(max_length, 1, max_memory_mb))
        return next(paths, None)

    def find_paths(
        self, start: Hashable, end: Hashable, limits: Optional[SearchLimits] = None, **kwargs
    ) -> Iterator[VertexPath]:
        """Yield every simple path from start to end.

        A path from a vertex to itself is the single-vertex path. Nothing is
        yielded if either vertex is absent.

        Raises:
            MemoryError: If ``limits.max_memory_mb`` is exceeded during the search
        """
        endpoints = self.resolve_endpoints(start, end)
        if endpoints is None:
            logger.debug(f"Path enumeration skipped: {start!r} or {end!r} not in graph")
            return
        source, target = endpoints

        limits = limits or SearchLimits()
        max_length, max_paths = limits.max_length, limits.max_paths
        memory_manager = MemoryManager(limits.max_memory_mb) if limits.max_memory_mb else None

        if source == target:
            yield [self.state.vertices[source]]
            return

        out_edges = self.state.out_edges
        path: List[int] = [source]
        on_path: Set[int] = {source}
        stack = [iter(sorted(out_edges.get(source, ())))]
        paths_found = 0

        while stack:
            if memory_manager is not None:
                memory_manager.check_memory()

            neighbor = next(stack[-1], _EXHAUSTED)
            if neighbor is _EXHAUSTED:
                stack.pop()
                on_path.discard(path.pop())
                continue
            if neighbor in on_path:
                continue

            # Number of edges once neighbor is appended
            length = len(path)
            if max_length is not None and length > max_length:
                continue

            if neighbor == target:
                yield keys_to_vertices(self.state, path + [neighbor])
                paths_found += 1
                if max_paths is not None and paths_found >= max_paths:
                    logger.debug(f"Stopping path enumeration after {paths_found} paths")
                    return
                continue

            # An intermediate vertex needs at least one more edge to reach target
            if max_length is not None and length >= max_length:
                continue

            path.append(neighbor)
            on_path.add(neighbor)
            stack.append(iter(sorted(out_edges.get(neighbor, ()))))

        logger.debug(f"Path enumeration finished with {paths_found} paths")

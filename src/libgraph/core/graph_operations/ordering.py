"""Topological ordering and shape checks for directed graphs.

Every check here is a total function: a graph that has no topological order or
no arborescence root yields ``None`` or ``False``, never an exception.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Dict, FrozenSet, Hashable, List, Optional

from .components import ComponentAnalysis

if TYPE_CHECKING:
    from ..graph import Graph

logger = logging.getLogger(__name__)

_EMPTY: FrozenSet[int] = frozenset()


class OrderingAnalysis:
    """Topological sort, acyclicity and tree-shape analysis."""

    @staticmethod
    def topsort(graph: "Graph") -> Optional[List[Hashable]]:
        """Return a topological ordering of the vertices, or None.

        Uses Kahn's algorithm: vertices with no remaining incoming edges are
        removed one at a time, lowest key first. For every edge ``a -> b``,
        ``a`` precedes ``b`` in the result.

        Returns:
            Optional[List[Hashable]]: The ordering, or None if the graph has a
            directed cycle anywhere (self-loops included).
        """
        state = graph.state
        remaining: Dict[int, int] = {k: len(state.in_edges.get(k, _EMPTY)) for k in state.vertices}
        queue = deque(sorted(k for k, degree in remaining.items() if degree == 0))
        order: List[int] = []

        while queue:
            key = queue.popleft()
            order.append(key)
            for dest in sorted(state.out_edges.get(key, _EMPTY)):
                remaining[dest] -= 1
                if remaining[dest] == 0:
                    queue.append(dest)

        if len(order) != len(state.vertices):
            logger.debug(
                f"No topological ordering: {len(state.vertices) - len(order)} vertices on cycles"
            )
            return None
        return [state.vertices[k] for k in order]

    @staticmethod
    def is_acyclic(graph: "Graph") -> bool:
        """Check whether the graph has no directed cycle."""
        return OrderingAnalysis.topsort(graph) is not None

    @staticmethod
    def is_cyclic(graph: "Graph") -> bool:
        """Check whether the graph has at least one directed cycle."""
        return not OrderingAnalysis.is_acyclic(graph)

    @staticmethod
    def _root_key(graph: "Graph") -> Optional[int]:
        """Return the key of the arborescence root, if the graph is one."""
        state = graph.state
        roots = []
        for key in state.vertices:
            degree = len(state.in_edges.get(key, _EMPTY))
            if degree == 0:
                roots.append(key)
            elif degree != 1:
                return None
        if len(roots) != 1 or not OrderingAnalysis.is_acyclic(graph):
            return None
        return roots[0]

    @staticmethod
    def is_arborescence(graph: "Graph") -> bool:
        """Check whether the graph is an arborescence.

        An arborescence is acyclic, has exactly one vertex with in-degree 0 (the
        root) and every other vertex has in-degree exactly 1, so the root has a
        unique path to every other vertex.
        """
        return OrderingAnalysis._root_key(graph) is not None

    @staticmethod
    def arborescence_root(graph: "Graph") -> Optional[Hashable]:
        """Return the root of the arborescence, or None if the graph is not one."""
        key = OrderingAnalysis._root_key(graph)
        return graph.state.vertices[key] if key is not None else None

    @staticmethod
    def is_tree(graph: "Graph") -> bool:
        """Check whether the graph is a tree.

        A tree has exactly one fewer edge than vertices and a single weakly
        connected component.
        """
        if graph.num_edges() != graph.num_vertices() - 1:
            return False
        return len(ComponentAnalysis.find_components(graph)) == 1

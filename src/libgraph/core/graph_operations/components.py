"""Connected component analysis for directed graphs.

This module provides functionality for analyzing the structural components of
a graph. It includes methods for:
- Finding weakly connected components (vertices connected when edge direction
  is ignored)
- Finding strongly connected components (vertices mutually reachable
  following edge direction)
- Finding loop vertices (vertices carrying a self-loop)

The analysis helps identify isolated subgraphs and cyclic clusters, which is
valuable for:
- Splitting a dependency graph into independent parts
- Detecting groups of mutually dependent vertices
"""

from collections import deque
from typing import TYPE_CHECKING, Dict, FrozenSet, Hashable, List, Set

if TYPE_CHECKING:
    from ..graph import Graph

_EMPTY: FrozenSet[int] = frozenset()


class ComponentAnalysis:
    """Connected component analysis for directed graphs.

    The analysis methods are implemented as static methods to provide
    utility-style functionality that can be used with any Graph instance
    without maintaining state.
    """

    @staticmethod
    def _find_component_bfs(graph: "Graph", start: int, visited: Set[int]) -> List[int]:
        """Find all vertex keys in the weak component of ``start``.

        Args:
            graph (Graph): The graph instance.
            start (int): Starting vertex key.
            visited (Set[int]): Keys already assigned to a component.

        Returns:
            List[int]: Keys of the component in discovery order.
        """
        out_edges = graph.state.out_edges
        in_edges = graph.state.in_edges
        component = [start]
        queue = deque([start])
        visited.add(start)

        while queue:
            current = queue.popleft()
            neighbors = out_edges.get(current, _EMPTY) | in_edges.get(current, _EMPTY)
            for neighbor in sorted(neighbors):
                if neighbor not in visited:
                    visited.add(neighbor)
                    component.append(neighbor)
                    queue.append(neighbor)

        return component

    @staticmethod
    def find_components(graph: "Graph") -> List[List[Hashable]]:
        """Find all weakly connected components in the graph.

        A weakly connected component is a maximal set of vertices where every
        pair is joined by a path when edge directions are ignored.

        Args:
            graph (Graph): The graph instance to analyze.

        Returns:
            List[List[Hashable]]: One list of vertices per component.

        Example:
            >>> g = Graph().add_edges([("A", "B"), ("C", "D")])
            >>> ComponentAnalysis.find_components(g)
            >>> # Two components, {"A", "B"} and {"C", "D"}

        Note:
            - Each vertex appears in exactly one component
            - Isolated vertices form their own single-vertex components
            - Order is deterministic for a graph but otherwise unspecified
        """
        vertices = graph.state.vertices
        visited: Set[int] = set()
        components = []
        for key in sorted(vertices):
            if key not in visited:
                component = ComponentAnalysis._find_component_bfs(graph, key, visited)
                components.append([vertices[k] for k in component])
        return components

    @staticmethod
    def find_strongly_connected_components(graph: "Graph") -> List[List[Hashable]]:
        """Find all strongly connected components in the directed graph.

        A strongly connected component (SCC) is a maximal set of vertices where
        every vertex is reachable from every other following edge direction.
        This uses Tarjan's algorithm with an explicit stack, so it runs in
        linear time and is not limited by the recursion depth.

        Args:
            graph (Graph): The graph instance to analyze.

        Returns:
            List[List[Hashable]]: One list of vertices per component.

        Example:
            >>> g = Graph().add_edges([("a", "b"), ("a", "c"), ("b", "c"), ("c", "d"), ("c", "a")])
            >>> ComponentAnalysis.find_strongly_connected_components(g)
            >>> # Two components, {"a", "b", "c"} and {"d"}

        Note:
            - Components are returned in reverse topological order
            - Each vertex appears in exactly one component
            - Vertices on no cycle form their own single-vertex components
        """
        vertices = graph.state.vertices
        out_edges = graph.state.out_edges
        index = 0
        indices: Dict[int, int] = {}
        lowlinks: Dict[int, int] = {}
        stack: List[int] = []
        on_stack: Set[int] = set()
        strongly_connected_components: List[List[Hashable]] = []

        for root in sorted(vertices):
            if root in indices:
                continue

            indices[root] = lowlinks[root] = index
            index += 1
            stack.append(root)
            on_stack.add(root)
            work = [(root, iter(sorted(out_edges.get(root, _EMPTY))))]

            while work:
                node, successors = work[-1]
                descended = False
                for successor in successors:
                    if successor not in indices:
                        # Successor has not yet been visited; descend into it
                        indices[successor] = lowlinks[successor] = index
                        index += 1
                        stack.append(successor)
                        on_stack.add(successor)
                        work.append((successor, iter(sorted(out_edges.get(successor, _EMPTY)))))
                        descended = True
                        break
                    if successor in on_stack:
                        lowlinks[node] = min(lowlinks[node], indices[successor])
                if descended:
                    continue

                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlinks[parent] = min(lowlinks[parent], lowlinks[node])

                # If node is root of a strongly connected component, collect it
                if lowlinks[node] == indices[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.remove(member)
                        component.append(vertices[member])
                        if member == node:
                            break
                    strongly_connected_components.append(component)

        return strongly_connected_components

    @staticmethod
    def loop_vertices(graph: "Graph") -> List[Hashable]:
        """Find the vertices included in a loop, a cycle of length one."""
        vertices = graph.state.vertices
        out_edges = graph.state.out_edges
        return [vertices[k] for k in sorted(out_edges) if k in out_edges[k]]

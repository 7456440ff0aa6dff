"""Depth-first traversal and reachability for directed graphs.

This module provides the traversal primitives used across the library:
- Depth-first preorder and postorder over the whole graph, including
  disconnected parts
- Reachability closures following edge direction (``reachable``) or against
  it (``reaching``), with or without the zero-length paths of the seeds

Traversals walk vertex keys in ascending order, both when picking the next
unvisited root and among sibling neighbors, so results are deterministic for a
given graph. All methods are read-only and never raise for absent vertices.
"""

from collections import deque
from typing import TYPE_CHECKING, FrozenSet, Hashable, Iterable, List, Mapping, Set, Tuple

from ..identity import lookup_key

if TYPE_CHECKING:
    from ..graph import Graph

Index = Mapping[int, FrozenSet[int]]

_EMPTY: FrozenSet[int] = frozenset()


class GraphTraversal:
    """Traversal operations over an immutable graph.

    Implemented as static methods, following the utility style of the other
    graph operations: every method is a pure function of its arguments.
    """

    @staticmethod
    def _depth_first(graph: "Graph") -> Tuple[List[int], List[int]]:
        """Run an iterative DFS over every vertex.

        Returns:
            Tuple[List[int], List[int]]: Vertex keys in preorder and in postorder.
        """
        out_edges = graph.state.out_edges
        visited: Set[int] = set()
        pre: List[int] = []
        post: List[int] = []

        for root in sorted(graph.state.vertices):
            if root in visited:
                continue
            visited.add(root)
            pre.append(root)
            stack = [(root, iter(sorted(out_edges.get(root, _EMPTY))))]
            while stack:
                node, neighbors = stack[-1]
                for neighbor in neighbors:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        pre.append(neighbor)
                        stack.append((neighbor, iter(sorted(out_edges.get(neighbor, _EMPTY)))))
                        break
                else:
                    stack.pop()
                    post.append(node)

        return pre, post

    @staticmethod
    def preorder(graph: "Graph") -> List[Hashable]:
        """Return all vertices in depth-first preorder.

        Each vertex is recorded when first visited. Searches start from every
        still-unvisited vertex in turn, so disconnected vertices are included.

        Example:
            >>> g = Graph().add_edges([("a", "b"), ("b", "c"), ("b", "d"), ("c", "e")])
            >>> GraphTraversal.preorder(g)  # e.g. ['a', 'b', 'c', 'e', 'd']
        """
        pre, _ = GraphTraversal._depth_first(graph)
        vertices = graph.state.vertices
        return [vertices[k] for k in pre]

    @staticmethod
    def postorder(graph: "Graph") -> List[Hashable]:
        """Return all vertices in depth-first postorder.

        A vertex is recorded once all of its out-neighbors have been fully
        explored. In an acyclic graph, every edge ``a -> b`` therefore has ``b``
        before ``a``.
        """
        _, post = GraphTraversal._depth_first(graph)
        vertices = graph.state.vertices
        return [vertices[k] for k in post]

    @staticmethod
    def _closure(
        graph: "Graph", index: Index, vs: Iterable[Hashable], include_seeds: bool
    ) -> List[Hashable]:
        """Breadth-first closure of the seed vertices over ``index``.

        Args:
            graph (Graph): The graph to search.
            index (Index): Adjacency index to follow (out or in edges).
            vs (Iterable[Hashable]): Seed vertices; absent ones are ignored.
            include_seeds (bool): Whether zero-length paths count.

        Returns:
            List[Hashable]: Vertices in discovery order.
        """
        vertices = graph.state.vertices
        seeds = sorted({key for key in (lookup_key(vertices, v) for v in vs) if key is not None})
        visited: Set[int] = set()
        order: List[int] = []
        queue = deque()

        if include_seeds:
            visited.update(seeds)
            order.extend(seeds)
            queue.extend(seeds)
        else:
            for seed in seeds:
                for neighbor in sorted(index.get(seed, _EMPTY)):
                    if neighbor not in visited:
                        visited.add(neighbor)
                        order.append(neighbor)
                        queue.append(neighbor)

        while queue:
            node = queue.popleft()
            for neighbor in sorted(index.get(node, _EMPTY)):
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    queue.append(neighbor)

        return [vertices[k] for k in order]

    @staticmethod
    def reachable(graph: "Graph", vs: Iterable[Hashable]) -> List[Hashable]:
        """Return the vertices reachable from some vertex of ``vs``.

        Paths of length zero count, so the seeds present in the graph are
        included.
        """
        return GraphTraversal._closure(graph, graph.state.out_edges, vs, include_seeds=True)

    @staticmethod
    def reachable_neighbors(graph: "Graph", vs: Iterable[Hashable]) -> List[Hashable]:
        """Return the vertices reachable from ``vs`` by a path of length one or more.

        A seed is included only if it lies on a cycle reachable from the seeds.
        """
        return GraphTraversal._closure(graph, graph.state.out_edges, vs, include_seeds=False)

    @staticmethod
    def reaching(graph: "Graph", vs: Iterable[Hashable]) -> List[Hashable]:
        """Return the vertices with a path to some vertex of ``vs``, seeds included."""
        return GraphTraversal._closure(graph, graph.state.in_edges, vs, include_seeds=True)

    @staticmethod
    def reaching_neighbors(graph: "Graph", vs: Iterable[Hashable]) -> List[Hashable]:
        """Return the vertices with a path of length one or more to ``vs``."""
        return GraphTraversal._closure(graph, graph.state.in_edges, vs, include_seeds=False)

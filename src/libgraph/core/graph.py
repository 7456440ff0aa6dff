"""
Core graph data structure with bidirectional adjacency indices.

This module provides the ``Graph`` class, an immutable directed graph. Vertices
are arbitrary hashable values, translated into integer keys by
``vertex_id``. The graph state is made of five maps:

- vertices: key -> vertex value
- vertex_labels: key -> label (only for labelled vertices)
- out_edges: key -> frozenset of destination keys
- in_edges: key -> frozenset of source keys
- edges_meta: (source key, destination key) -> EdgeMetadata

The in/out indices are exact inverses of each other, which gives constant-time
neighbor lookups in both directions. Every mutation returns a new ``Graph``;
only the maps it touches are copied, and unchanged neighbor sets and metadata
records are shared between snapshots. Earlier snapshots therefore remain valid
and can be read freely after later edits.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import (
    Any,
    Callable,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
)

from .exceptions import (
    InvalidEdgeError,
    InvalidVertexError,
    NoSuchEdgeError,
    VertexKeyCollisionError,
)
from .graph_operations.components import ComponentAnalysis
from .graph_operations.metrics import MetricsCalculator
from .graph_operations.ordering import OrderingAnalysis
from .graph_operations.traversal import GraphTraversal
from .graph_operations.serialization import GraphSerializer
from .graph_paths import PathFinding
from .graph_paths.models import SearchLimits
from .identity import lookup_key, vertex_id
from .models import Edge, EdgeMetadata, options_to_metadata
from ..utils.validation import validate_edge_options

logger = logging.getLogger(__name__)

_EMPTY: FrozenSet[int] = frozenset()
_MISSING = object()

EdgeKey = Tuple[int, int]


@dataclass(frozen=True)
class GraphState:
    """Encapsulates the state of a graph.

    The maps are never mutated once a state is built; treat them as read-only.
    """

    vertices: Mapping[int, Hashable] = field(default_factory=dict)
    vertex_labels: Mapping[int, Any] = field(default_factory=dict)
    out_edges: Mapping[int, FrozenSet[int]] = field(default_factory=dict)
    in_edges: Mapping[int, FrozenSet[int]] = field(default_factory=dict)
    edges_meta: Mapping[EdgeKey, EdgeMetadata] = field(default_factory=dict)


class _StateBuilder:
    """Copy-on-write editor producing a new GraphState from an existing one.

    Each map is copied at most once, the first time it is written.
    """

    def __init__(self, state: GraphState):
        self._base = state
        self._copies: Dict[str, dict] = {}

    def _read(self, name: str) -> Mapping:
        return self._copies.get(name, getattr(self._base, name))

    def _write(self, name: str) -> dict:
        if name not in self._copies:
            self._copies[name] = dict(getattr(self._base, name))
        return self._copies[name]

    def _link(self, name: str, key: int, member: int) -> None:
        index = self._write(name)
        index[key] = index.get(key, _EMPTY) | {member}

    def _unlink(self, name: str, key: int, member: int) -> None:
        index = self._write(name)
        remaining = index.get(key, _EMPTY) - {member}
        if remaining:
            index[key] = remaining
        else:
            index.pop(key, None)

    def lookup(self, v: Hashable) -> Optional[int]:
        return lookup_key(self._read("vertices"), v)

    def has_edge(self, k1: int, k2: int) -> bool:
        return k2 in self._read("out_edges").get(k1, _EMPTY)

    def metadata(self, k1: int, k2: int) -> EdgeMetadata:
        return self._read("edges_meta").get((k1, k2), EdgeMetadata())

    def add_vertex(self, v: Hashable, label: Any = None) -> int:
        key = vertex_id(v)
        existing = self._read("vertices").get(key, _MISSING)
        if existing is not _MISSING:
            if existing != v:
                raise VertexKeyCollisionError(v, existing)
            return key
        self._write("vertices")[key] = v
        if label is not None:
            self._write("vertex_labels")[key] = label
        return key

    def put_edge(self, k1: int, k2: int, metadata: EdgeMetadata) -> None:
        if not self.has_edge(k1, k2):
            self._link("out_edges", k1, k2)
            self._link("in_edges", k2, k1)
        self._write("edges_meta")[(k1, k2)] = metadata

    def remove_edge(self, k1: int, k2: int) -> None:
        self._unlink("out_edges", k1, k2)
        self._unlink("in_edges", k2, k1)
        self._write("edges_meta").pop((k1, k2), None)

    def remove_vertex(self, key: int) -> None:
        for dest in self._read("out_edges").get(key, _EMPTY):
            self.remove_edge(key, dest)
        for src in self._read("in_edges").get(key, _EMPTY):
            self.remove_edge(src, key)
        del self._write("vertices")[key]
        if key in self._read("vertex_labels"):
            del self._write("vertex_labels")[key]

    def rekey_vertex(self, key: int, new_key: int, new_vertex: Hashable) -> None:
        vertices = self._write("vertices")
        del vertices[key]
        vertices[new_key] = new_vertex

        if key in self._read("vertex_labels"):
            labels = self._write("vertex_labels")
            labels[new_key] = labels.pop(key)

        out_edges = self._write("out_edges")
        in_edges = self._write("in_edges")
        meta = self._write("edges_meta")
        outs = out_edges.pop(key, _EMPTY)
        ins = in_edges.pop(key, _EMPTY)

        def swap(k: int) -> int:
            return new_key if k == key else k

        for dest in outs:
            if dest != key:
                in_edges[dest] = (in_edges[dest] - {key}) | {new_key}
            record = meta.pop((key, dest), None)
            if record is not None:
                meta[(new_key, swap(dest))] = record
        for src in ins:
            if src == key:
                continue
            out_edges[src] = (out_edges[src] - {key}) | {new_key}
            record = meta.pop((src, key), None)
            if record is not None:
                meta[(src, new_key)] = record

        if outs:
            out_edges[new_key] = frozenset(swap(k) for k in outs)
        if ins:
            in_edges[new_key] = frozenset(swap(k) for k in ins)

    def build(self) -> GraphState:
        if not self._copies:
            return self._base
        return replace(self._base, **self._copies)


class Graph:
    """
    Immutable directed graph with bidirectional adjacency indices.

    Mutation methods return a new ``Graph`` and leave the receiver untouched;
    a no-op returns the receiver itself. Query methods never raise for absent
    vertices or edges: they return empty lists, zero or ``None``.

    Example:
        >>> g = Graph().add_edges([("a", "b"), ("b", "c"), ("c", "d"), ("b", "d")])
        >>> g.dijkstra("a", "d")
        ['a', 'b', 'd']
    """

    __slots__ = ("_state",)

    def __init__(self, state: Optional[GraphState] = None):
        """
        Initialize a graph.

        Args:
            state (Optional[GraphState]): Existing state to wrap; an empty graph
                is created when omitted.
        """
        self._state = state if state is not None else GraphState()

    @classmethod
    def from_edges(cls, edges: Iterable[Any]) -> "Graph":
        """Create a Graph from ``Edge`` records or ``(v1, v2)`` pairs."""
        return cls().add_edges(edges)

    @property
    def state(self) -> GraphState:
        """The underlying read-only graph state."""
        return self._state

    def _derive(self, builder: _StateBuilder) -> "Graph":
        state = builder.build()
        return self if state is self._state else Graph(state)

    def _key(self, v: Hashable) -> Optional[int]:
        """Return the key of ``v`` if it is a vertex of this graph."""
        return lookup_key(self._state.vertices, v)

    # Mutations

    def add_vertex(self, v: Hashable, label: Any = None) -> "Graph":
        """
        Add a vertex, optionally labelled.

        Adding a vertex that is already present is a no-op; in particular its
        existing label is kept.

        Raises:
            VertexKeyCollisionError: If ``v`` shares its key with a different
                registered vertex.
        """
        builder = _StateBuilder(self._state)
        builder.add_vertex(v, label)
        return self._derive(builder)

    def add_vertices(self, vs: Iterable[Hashable]) -> "Graph":
        """Add each vertex of ``vs`` in order."""
        builder = _StateBuilder(self._state)
        for v in vs:
            builder.add_vertex(v)
        return self._derive(builder)

    def label_vertex(self, v: Hashable, label: Any) -> "Graph":
        """
        Set or overwrite the label of a vertex. A ``None`` label clears it.

        Raises:
            InvalidVertexError: If ``v`` is not in the graph.
        """
        key = self._key(v)
        if key is None:
            raise InvalidVertexError(v)
        labels = dict(self._state.vertex_labels)
        if label is None:
            labels.pop(key, None)
        else:
            labels[key] = label
        return Graph(replace(self._state, vertex_labels=labels))

    def replace_vertex(self, v: Hashable, replacement: Hashable) -> "Graph":
        """
        Replace vertex ``v`` with ``replacement``, keeping all of its edges,
        edge metadata and label.

        Raises:
            InvalidVertexError: If ``v`` is not in the graph, or if
                ``replacement`` is already a distinct vertex of the graph
                (the two vertices are never merged).
            VertexKeyCollisionError: If ``replacement`` shares its key with a
                different vertex of the graph.
        """
        key = self._key(v)
        if key is None:
            raise InvalidVertexError(v)
        new_key = vertex_id(replacement)
        existing = self._state.vertices.get(new_key, _MISSING)
        if existing is not _MISSING:
            if existing != replacement:
                raise VertexKeyCollisionError(replacement, existing)
            if new_key == key:
                return self
            logger.debug(f"Rejected replacement of {v!r} by existing vertex {replacement!r}")
            raise InvalidVertexError(
                replacement, f"Replacement vertex {replacement!r} already exists in the graph"
            )

        builder = _StateBuilder(self._state)
        builder.rekey_vertex(key, new_key, replacement)
        return self._derive(builder)

    def delete_vertex(self, v: Hashable) -> "Graph":
        """Remove a vertex with its edges and label. No-op if absent."""
        return self.delete_vertices([v])

    def delete_vertices(self, vs: Iterable[Hashable]) -> "Graph":
        """Remove each vertex of ``vs``, skipping absent ones."""
        builder = _StateBuilder(self._state)
        for v in vs:
            key = builder.lookup(v)
            if key is not None:
                builder.remove_vertex(key)
        return self._derive(builder)

    def add_edge(self, v1: Hashable, v2: Hashable, **options: Any) -> "Graph":
        """
        Add an edge from ``v1`` to ``v2``, adding missing endpoints.

        Any metadata previously stored for the pair is replaced.

        Args:
            v1: Source vertex
            v2: Destination vertex
            **options: ``weight`` (number, default 1) and ``label``

        Raises:
            InvalidEdgeOptionError: If an option is unknown or has the wrong type
        """
        metadata = options_to_metadata(options)
        builder = _StateBuilder(self._state)
        k1 = builder.add_vertex(v1)
        k2 = builder.add_vertex(v2)
        builder.put_edge(k1, k2, metadata)
        return self._derive(builder)

    def add_edges(self, edges: Iterable[Any]) -> "Graph":
        """
        Add a batch of edges given as ``Edge`` records or ``(v1, v2)`` pairs.

        Raises:
            InvalidEdgeError: At the first element that is neither an ``Edge``
                nor a pair. Elements before it are not rolled back; the graph
                built from them is available as ``error.partial``.
            InvalidEdgeOptionError: If an ``Edge`` record has an invalid weight
        """
        builder = _StateBuilder(self._state)
        for edge in edges:
            if isinstance(edge, Edge):
                v1, v2 = edge.v1, edge.v2
                metadata = options_to_metadata(edge.to_metadata().to_options())
            elif isinstance(edge, tuple) and len(edge) == 2:
                v1, v2 = edge
                metadata = EdgeMetadata()
            else:
                raise InvalidEdgeError(edge, partial=self._derive(builder))
            k1 = builder.add_vertex(v1)
            k2 = builder.add_vertex(v2)
            builder.put_edge(k1, k2, metadata)
        return self._derive(builder)

    def update_edge(self, v1: Hashable, v2: Hashable, **options: Any) -> "Graph":
        """
        Merge ``options`` into the metadata of the edge from ``v1`` to ``v2``.

        If the edge does not exist but both endpoints do, it is created from
        the options. If either endpoint is absent this is a no-op.

        Raises:
            InvalidEdgeOptionError: If an option is unknown or has the wrong type
        """
        opts = validate_edge_options(options)
        k1, k2 = self._key(v1), self._key(v2)
        if k1 is None or k2 is None:
            return self
        builder = _StateBuilder(self._state)
        builder.put_edge(k1, k2, builder.metadata(k1, k2).merge(opts))
        return self._derive(builder)

    def delete_edge(self, v1: Hashable, v2: Hashable) -> "Graph":
        """Remove the edge from ``v1`` to ``v2``. No-op if absent."""
        return self.delete_edges([(v1, v2)])

    def delete_edges(self, pairs: Iterable[Any]) -> "Graph":
        """
        Remove a batch of edges given as ``(v1, v2)`` pairs.

        Raises:
            InvalidEdgeError: At the first element that is not a pair, carrying
                the partially edited graph as ``error.partial``.
        """
        builder = _StateBuilder(self._state)
        for pair in pairs:
            if not (isinstance(pair, tuple) and len(pair) == 2):
                raise InvalidEdgeError(pair, partial=self._derive(builder))
            k1, k2 = builder.lookup(pair[0]), builder.lookup(pair[1])
            if k1 is not None and k2 is not None and builder.has_edge(k1, k2):
                builder.remove_edge(k1, k2)
        return self._derive(builder)

    def split_edge(self, v1: Hashable, v2: Hashable, v3: Hashable) -> "Graph":
        """
        Replace the edge ``v1 -> v2`` by ``v1 -> v3 -> v2``.

        Both new edges carry the metadata of the original edge.

        Raises:
            NoSuchEdgeError: If there is no edge from ``v1`` to ``v2``.
        """
        keys = self._edge_keys(v1, v2)
        if keys is None:
            raise NoSuchEdgeError(v1, v2)
        k1, k2 = keys
        builder = _StateBuilder(self._state)
        metadata = builder.metadata(k1, k2)
        builder.remove_edge(k1, k2)
        k3 = builder.add_vertex(v3)
        builder.put_edge(k1, k3, metadata)
        builder.put_edge(k3, k2, metadata)
        return self._derive(builder)

    def transpose(self) -> "Graph":
        """Return the graph with the direction of every edge reversed."""
        state = self._state
        return Graph(
            replace(
                state,
                out_edges=state.in_edges,
                in_edges=state.out_edges,
                edges_meta={(k2, k1): meta for (k1, k2), meta in state.edges_meta.items()},
            )
        )

    def subgraph(self, vs: Iterable[Hashable]) -> "Graph":
        """
        Build the subgraph induced by the vertices of ``vs`` present in this
        graph, keeping vertex labels and edge metadata.
        """
        state = self._state
        allowed = {key for key in (self._key(v) for v in vs) if key is not None}

        def restrict(index: Mapping[int, FrozenSet[int]]) -> Dict[int, FrozenSet[int]]:
            restricted = {}
            for key in allowed:
                kept = index.get(key, _EMPTY) & allowed
                if kept:
                    restricted[key] = kept
            return restricted

        out_edges = restrict(state.out_edges)
        return Graph(
            GraphState(
                vertices={k: state.vertices[k] for k in allowed},
                vertex_labels={k: label for k, label in state.vertex_labels.items() if k in allowed},
                out_edges=out_edges,
                in_edges=restrict(state.in_edges),
                edges_meta={
                    (k1, k2): state.edges_meta.get((k1, k2), EdgeMetadata())
                    for k1, dests in out_edges.items()
                    for k2 in dests
                },
            )
        )

    # Queries

    def _edge_keys(self, v1: Hashable, v2: Hashable) -> Optional[EdgeKey]:
        k1, k2 = self._key(v1), self._key(v2)
        if k1 is None or k2 is None or k2 not in self._state.out_edges.get(k1, _EMPTY):
            return None
        return k1, k2

    def _edge_record(self, k1: int, k2: int) -> Edge:
        vertices = self._state.vertices
        metadata = self._state.edges_meta.get((k1, k2), EdgeMetadata())
        return Edge.from_metadata(vertices[k1], vertices[k2], metadata)

    def vertices(self) -> List[Hashable]:
        """Get all vertices in the graph."""
        return list(self._state.vertices.values())

    def edges(self) -> List[Edge]:
        """Get all edges in the graph as ``Edge`` records."""
        return [
            self._edge_record(k1, k2)
            for k1, dests in self._state.out_edges.items()
            for k2 in sorted(dests)
        ]

    def num_vertices(self) -> int:
        """Get the number of vertices in the graph."""
        return len(self._state.vertices)

    def num_edges(self) -> int:
        """Get the number of edges in the graph."""
        return sum(len(dests) for dests in self._state.out_edges.values())

    def has_vertex(self, v: Hashable) -> bool:
        """Check if a vertex exists in the graph."""
        return self._key(v) is not None

    def has_edge(self, v1: Hashable, v2: Hashable) -> bool:
        """Check if an edge exists from ``v1`` to ``v2``."""
        return self._edge_keys(v1, v2) is not None

    def edge(self, v1: Hashable, v2: Hashable) -> Optional[Edge]:
        """Get the edge from ``v1`` to ``v2`` if it exists."""
        keys = self._edge_keys(v1, v2)
        if keys is None:
            return None
        return self._edge_record(*keys)

    def vertex_label(self, v: Hashable) -> Any:
        """Get the label of a vertex, or None if it has none."""
        return self._state.vertex_labels.get(self._key(v))

    def edge_label(self, v1: Hashable, v2: Hashable) -> Any:
        """Get the label of an edge, or None."""
        metadata = self._state.edges_meta.get(self._edge_keys(v1, v2))
        return metadata.label if metadata is not None else None

    def edge_weight(self, v1: Hashable, v2: Hashable) -> Optional[Any]:
        """Get the weight of an edge, or None if the edge does not exist."""
        edge = self.edge(v1, v2)
        return edge.weight if edge is not None else None

    def in_degree(self, v: Hashable) -> int:
        """Get the number of edges directed into ``v``."""
        return len(self._state.in_edges.get(self._key(v), _EMPTY))

    def out_degree(self, v: Hashable) -> int:
        """Get the number of edges directed out of ``v``."""
        return len(self._state.out_edges.get(self._key(v), _EMPTY))

    def _neighbors(self, index: Mapping[int, FrozenSet[int]], v: Hashable) -> List[Hashable]:
        vertices = self._state.vertices
        return [vertices[k] for k in sorted(index.get(self._key(v), _EMPTY))]

    def in_neighbors(self, v: Hashable) -> List[Hashable]:
        """Get the vertices with an edge into ``v``."""
        return self._neighbors(self._state.in_edges, v)

    def out_neighbors(self, v: Hashable) -> List[Hashable]:
        """Get the vertices ``v`` has an edge to."""
        return self._neighbors(self._state.out_edges, v)

    def in_edges(self, v: Hashable) -> List[Edge]:
        """Get the edges directed into ``v``."""
        key = self._key(v)
        return [
            self._edge_record(src, key) for src in sorted(self._state.in_edges.get(key, _EMPTY))
        ]

    def out_edges(self, v: Hashable) -> List[Edge]:
        """Get the edges directed out of ``v``."""
        key = self._key(v)
        return [
            self._edge_record(key, dest) for dest in sorted(self._state.out_edges.get(key, _EMPTY))
        ]

    def is_subgraph(self, other: "Graph") -> bool:
        """
        Check if this graph is a subgraph of ``other``: every vertex of this
        graph is in ``other`` and every edge of this graph is in ``other``.
        """
        theirs = other.state
        if any(theirs.vertices.get(key, _MISSING) != v for key, v in self._state.vertices.items()):
            return False
        return all(
            dests <= theirs.out_edges.get(key, _EMPTY)
            for key, dests in self._state.out_edges.items()
        )

    def info(self) -> Dict[str, int]:
        """Get summary information: vertex and edge counts and approximate size."""
        return MetricsCalculator.info(self)

    def to_dot(self) -> str:
        """Render the graph in Graphviz DOT format."""
        return GraphSerializer(self).to_dot()

    # Algorithms

    def preorder(self) -> List[Hashable]:
        """See ``GraphTraversal.preorder``."""
        return GraphTraversal.preorder(self)

    def postorder(self) -> List[Hashable]:
        """See ``GraphTraversal.postorder``."""
        return GraphTraversal.postorder(self)

    def reachable(self, vs: Iterable[Hashable]) -> List[Hashable]:
        """See ``GraphTraversal.reachable``."""
        return GraphTraversal.reachable(self, vs)

    def reachable_neighbors(self, vs: Iterable[Hashable]) -> List[Hashable]:
        """See ``GraphTraversal.reachable_neighbors``."""
        return GraphTraversal.reachable_neighbors(self, vs)

    def reaching(self, vs: Iterable[Hashable]) -> List[Hashable]:
        """See ``GraphTraversal.reaching``."""
        return GraphTraversal.reaching(self, vs)

    def reaching_neighbors(self, vs: Iterable[Hashable]) -> List[Hashable]:
        """See ``GraphTraversal.reaching_neighbors``."""
        return GraphTraversal.reaching_neighbors(self, vs)

    def components(self) -> List[List[Hashable]]:
        """See ``ComponentAnalysis.find_components``."""
        return ComponentAnalysis.find_components(self)

    def strong_components(self) -> List[List[Hashable]]:
        """See ``ComponentAnalysis.find_strongly_connected_components``."""
        return ComponentAnalysis.find_strongly_connected_components(self)

    def loop_vertices(self) -> List[Hashable]:
        """See ``ComponentAnalysis.loop_vertices``."""
        return ComponentAnalysis.loop_vertices(self)

    def topsort(self) -> Optional[List[Hashable]]:
        """See ``OrderingAnalysis.topsort``."""
        return OrderingAnalysis.topsort(self)

    def is_acyclic(self) -> bool:
        """See ``OrderingAnalysis.is_acyclic``."""
        return OrderingAnalysis.is_acyclic(self)

    def is_cyclic(self) -> bool:
        """See ``OrderingAnalysis.is_cyclic``."""
        return OrderingAnalysis.is_cyclic(self)

    def is_arborescence(self) -> bool:
        """See ``OrderingAnalysis.is_arborescence``."""
        return OrderingAnalysis.is_arborescence(self)

    def arborescence_root(self) -> Optional[Hashable]:
        """See ``OrderingAnalysis.arborescence_root``."""
        return OrderingAnalysis.arborescence_root(self)

    def is_tree(self) -> bool:
        """See ``OrderingAnalysis.is_tree``."""
        return OrderingAnalysis.is_tree(self)

    def dijkstra(self, v1: Hashable, v2: Hashable) -> Optional[List[Hashable]]:
        """Get the vertices of a lowest-weight path from ``v1`` to ``v2``, or None."""
        result = PathFinding.dijkstra(self, v1, v2)
        return result.path if result is not None else None

    get_shortest_path = dijkstra

    def a_star(
        self, v1: Hashable, v2: Hashable, heuristic: Callable[[Hashable], float]
    ) -> Optional[List[Hashable]]:
        """Like ``dijkstra``, guided by an admissible ``heuristic``."""
        result = PathFinding.a_star(self, v1, v2, heuristic)
        return result.path if result is not None else None

    def get_paths(
        self, v1: Hashable, v2: Hashable, limits: Optional[SearchLimits] = None
    ) -> List[List[Hashable]]:
        """Get every simple path from ``v1`` to ``v2``."""
        return PathFinding.all_paths(self, v1, v2, limits)

    # Protocols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._state == other._state

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return self.num_vertices()

    def __contains__(self, v: object) -> bool:
        return self.has_vertex(v)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"<Graph num_vertices={self.num_vertices()} num_edges={self.num_edges()}>"

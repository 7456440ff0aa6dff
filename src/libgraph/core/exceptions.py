"""
Custom exceptions for the graph library.

This module defines the hierarchy of exceptions raised by targeted graph
mutations and input validation. Structural queries and graph algorithms never
raise these; they report absence with empty results or ``None`` instead.

Because every mutation produces a new graph snapshot, raising one of these
exceptions never alters the graph the caller already holds.
"""

from typing import Any, Optional


class ValidationError(Exception):
    """
    Raised when input validation fails.

    This exception is raised when arguments passed to a mutation do not have
    the expected shape, such as malformed edge options or batch elements that
    are not edges.

    Examples:
        * Unknown edge option keys
        * Non-numeric edge weights
        * Batch elements that are neither edges nor vertex pairs
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when a targeted mutation refers to graph elements
    that do not exist, or would break the integrity of the vertex registry.

    Examples:
        * Labelling a vertex that is not in the graph
        * Splitting an edge that does not exist
        * Vertex key collisions
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class InvalidVertexError(GraphOperationError):
    """
    Raised when a targeted mutation references an unusable vertex.

    Raised by ``label_vertex`` and ``replace_vertex`` when the vertex is absent,
    and by ``replace_vertex`` when the replacement would merge two distinct
    vertices.
    """

    def __init__(self, vertex: Any, message: Optional[str] = None):
        self.vertex = vertex
        super().__init__(message or f"Vertex {vertex!r} not found in the graph")


class VertexKeyCollisionError(GraphOperationError):
    """
    Raised when two unequal vertex values map to the same vertex key.

    Key derivation assumes injectivity over the values of one graph; this
    exception surfaces a violation instead of silently merging the vertices.
    """

    def __init__(self, vertex: Any, existing: Any):
        self.vertex = vertex
        self.existing = existing
        super().__init__(f"Vertex {vertex!r} collides with existing vertex {existing!r}")


class NoSuchEdgeError(GraphOperationError):
    """
    Raised when a targeted mutation references an edge that does not exist.

    Examples:
        * Splitting a missing edge
    """

    def __init__(self, v1: Any, v2: Any):
        self.v1 = v1
        self.v2 = v2
        super().__init__(f"No edge exists from {v1!r} to {v2!r}")


class InvalidEdgeOptionError(ValidationError):
    """
    Raised when edge options contain an unknown key or a wrong-typed value.
    """

    def __init__(self, option: Any, message: str):
        self.option = option
        super().__init__(message)


class InvalidEdgeError(ValidationError):
    """
    Raised when a batch edge operation receives an invalid element.

    Batch operations are applied element by element and are not rolled back:
    ``partial`` holds the graph built from the elements processed before the
    invalid one.
    """

    def __init__(self, edge: Any, partial: Any = None):
        self.edge = edge
        self.partial = partial
        super().__init__(f"Invalid edge {edge!r}")

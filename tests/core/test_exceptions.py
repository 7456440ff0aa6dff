"""
Tests for custom exceptions.
"""

import pytest

from libgraph.core.exceptions import (
    GraphOperationError,
    InvalidEdgeError,
    InvalidEdgeOptionError,
    InvalidVertexError,
    NoSuchEdgeError,
    ValidationError,
    VertexKeyCollisionError,
)
from libgraph.core.graph import Graph


def test_validation_error_message():
    """Test validation error message formatting."""
    error = ValidationError("test message")
    assert str(error) == "Validation Error: test message"


def test_graph_operation_error_message():
    """Test graph operation error message formatting."""
    error = GraphOperationError("test message")
    assert str(error) == "Graph Operation Error: test message"


def test_exception_hierarchy():
    """Test that specific errors derive from the two base errors."""
    assert issubclass(InvalidVertexError, GraphOperationError)
    assert issubclass(VertexKeyCollisionError, GraphOperationError)
    assert issubclass(NoSuchEdgeError, GraphOperationError)
    assert issubclass(InvalidEdgeOptionError, ValidationError)
    assert issubclass(InvalidEdgeError, ValidationError)


def test_invalid_vertex_error():
    """Test the default and custom vertex error messages."""
    error = InvalidVertexError("v")
    assert error.vertex == "v"
    assert str(error) == "Graph Operation Error: Vertex 'v' not found in the graph"

    custom = InvalidVertexError("v", "custom")
    assert str(custom) == "Graph Operation Error: custom"


def test_no_such_edge_error():
    """Test the missing edge error."""
    error = NoSuchEdgeError("a", "b")
    assert (error.v1, error.v2) == ("a", "b")
    assert str(error) == "Graph Operation Error: No edge exists from 'a' to 'b'"


def test_invalid_edge_error():
    """Test the invalid batch element error."""
    partial = Graph().add_edge("a", "b")
    error = InvalidEdgeError(42, partial=partial)

    assert error.edge == 42
    assert error.partial is partial
    assert str(error) == "Validation Error: Invalid edge 42"


def test_invalid_edge_option_error():
    """Test the edge option error."""
    error = InvalidEdgeOptionError("colour", "Unknown edge option 'colour'")
    assert error.option == "colour"
    assert str(error) == "Validation Error: Unknown edge option 'colour'"


def test_errors_leave_graph_unchanged(chain_graph):
    """Test that a failed mutation never alters the receiver."""
    before = chain_graph.state
    with pytest.raises(GraphOperationError):
        chain_graph.split_edge("a", "c", "m")
    with pytest.raises(ValidationError):
        chain_graph.add_edge("x", "y", colour="red")

    assert chain_graph.state is before
    assert not chain_graph.has_vertex("x")

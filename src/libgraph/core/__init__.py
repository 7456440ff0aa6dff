"""Core graph functionality."""

from .exceptions import (
    GraphOperationError,
    InvalidEdgeError,
    InvalidEdgeOptionError,
    InvalidVertexError,
    NoSuchEdgeError,
    ValidationError,
    VertexKeyCollisionError,
)
from .models import DEFAULT_EDGE_WEIGHT, Edge, EdgeMetadata
from .identity import vertex_id
from .graph import Graph, GraphState
from .graph_operations.components import ComponentAnalysis
from .graph_operations.metrics import GraphInfo, MetricsCalculator
from .graph_operations.ordering import OrderingAnalysis
from .graph_operations.serialization import GraphSerializer
from .graph_operations.traversal import GraphTraversal
from .graph_paths import PathFinding, PathResult, PathType, SearchLimits

__all__ = [
    "ComponentAnalysis",
    "DEFAULT_EDGE_WEIGHT",
    "Edge",
    "EdgeMetadata",
    "Graph",
    "GraphInfo",
    "GraphOperationError",
    "GraphSerializer",
    "GraphState",
    "GraphTraversal",
    "InvalidEdgeError",
    "InvalidEdgeOptionError",
    "InvalidVertexError",
    "MetricsCalculator",
    "NoSuchEdgeError",
    "OrderingAnalysis",
    "PathFinding",
    "PathResult",
    "PathType",
    "SearchLimits",
    "ValidationError",
    "VertexKeyCollisionError",
    "vertex_id",
]

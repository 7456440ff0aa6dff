"""
libgraph - Immutable directed graphs and graph algorithms

This package provides an in-memory directed graph whose every mutation
returns a new snapshot, together with the algorithms commonly run over
dependency graphs, workflow DAGs and call graphs:

- Traversal and reachability
- Weak and strong connectivity, loops and cycle detection
- Topological ordering, arborescence and tree checks
- Dijkstra, A* and simple path enumeration
- DOT export and size summaries
"""

__version__ = "0.1.0"

from .core.exceptions import (
    GraphOperationError,
    InvalidEdgeError,
    InvalidEdgeOptionError,
    InvalidVertexError,
    NoSuchEdgeError,
    ValidationError,
    VertexKeyCollisionError,
)
from .core.graph import Graph
from .core.graph_paths import PathResult, SearchLimits
from .core.models import Edge

__all__ = [
    "Edge",
    "Graph",
    "GraphOperationError",
    "InvalidEdgeError",
    "InvalidEdgeOptionError",
    "InvalidVertexError",
    "NoSuchEdgeError",
    "PathResult",
    "SearchLimits",
    "ValidationError",
    "VertexKeyCollisionError",
]

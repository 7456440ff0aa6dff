"""Read-only graph analysis operations."""

from .components import ComponentAnalysis
from .metrics import GraphInfo, MetricsCalculator
from .ordering import OrderingAnalysis
from .serialization import GraphSerializer
from .traversal import GraphTraversal

__all__ = [
    "ComponentAnalysis",
    "GraphInfo",
    "GraphSerializer",
    "GraphTraversal",
    "MetricsCalculator",
    "OrderingAnalysis",
]

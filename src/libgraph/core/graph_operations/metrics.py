"""Graph summary metrics."""

import sys
from dataclasses import asdict, dataclass, fields
from typing import TYPE_CHECKING, Any, Dict, List, Set

if TYPE_CHECKING:
    from ..graph import Graph


@dataclass
class GraphInfo:
    """Container for graph summary results."""

    num_vertices: int
    num_edges: int
    size_in_bytes: int


class MetricsCalculator:
    """
    Calculates summary metrics of a graph.

    The size estimate walks the containers of the graph state with
    ``sys.getsizeof`` and counts every object once, so structure shared with
    other snapshots is included. It is approximate and never influences
    algorithm results.
    """

    @staticmethod
    def size_in_bytes(graph: "Graph") -> int:
        """Estimate the memory footprint of a graph state in bytes."""
        seen: Set[int] = set()
        pending: List[Any] = [graph.state]
        total = 0

        while pending:
            obj = pending.pop()
            if id(obj) in seen:
                continue
            seen.add(id(obj))
            total += sys.getsizeof(obj)

            if isinstance(obj, dict):
                pending.extend(obj.keys())
                pending.extend(obj.values())
            elif isinstance(obj, (list, tuple, set, frozenset)):
                pending.extend(obj)
            elif hasattr(obj, "__dataclass_fields__") and not isinstance(obj, type):
                pending.extend(getattr(obj, f.name) for f in fields(obj))

        return total

    @staticmethod
    def summary(graph: "Graph") -> GraphInfo:
        """Calculate the summary metrics of a graph."""
        return GraphInfo(
            num_vertices=graph.num_vertices(),
            num_edges=graph.num_edges(),
            size_in_bytes=MetricsCalculator.size_in_bytes(graph),
        )

    @staticmethod
    def info(graph: "Graph") -> Dict[str, int]:
        """Return the summary metrics as a dict."""
        return asdict(MetricsCalculator.summary(graph))

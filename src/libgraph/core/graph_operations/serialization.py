"""Graph serialization to the Graphviz DOT format.

This module provides a one-way export used for visualization:
- Vertices are rendered by their label when set, otherwise by ``str(vertex)``
- Edges carry ``label`` and ``weight`` attributes when they differ from the
  defaults

The output can be rendered with Graphviz, e.g. ``dot -Tpng out.dot > out.png``.
"""

import re
from typing import TYPE_CHECKING, Any, List

from ..models import DEFAULT_EDGE_WEIGHT

if TYPE_CHECKING:
    from ..graph import Graph

# Unquoted DOT identifiers: alphanumeric strings and numerals
_DOT_ID = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*|-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?))$")
_DOT_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}

INDENT = "    "


class GraphSerializer:
    """Handles graph serialization operations."""

    def __init__(self, graph: "Graph"):
        """Initialize serializer.

        Args:
            graph: The graph to export
        """
        self.graph = graph

    @staticmethod
    def encode_id(value: Any) -> str:
        """Render a value as a DOT identifier, quoting it when required."""
        text = str(value)
        if _DOT_ID.match(text) and text.lower() not in _DOT_KEYWORDS:
            return text
        escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
        return f'"{escaped}"'

    def _vertex_id(self, key: int) -> str:
        state = self.graph.state
        label = state.vertex_labels.get(key)
        return self.encode_id(label if label is not None else state.vertices[key])

    def to_dot(self) -> str:
        """Convert the graph to DOT text.

        Returns:
            A ``strict digraph`` definition listing every vertex, then every edge
        """
        state = self.graph.state
        lines: List[str] = ["strict digraph {"]

        for key in state.vertices:
            lines.append(f"{INDENT}{self._vertex_id(key)}")

        for k1, dests in state.out_edges.items():
            for k2 in sorted(dests):
                line = f"{INDENT}{self._vertex_id(k1)} -> {self._vertex_id(k2)}"
                metadata = state.edges_meta.get((k1, k2))
                attributes = []
                if metadata is not None and metadata.label is not None:
                    attributes.append(f"label={self.encode_id(metadata.label)}")
                if metadata is not None and metadata.weight != DEFAULT_EDGE_WEIGHT:
                    attributes.append(f"weight={self.encode_id(metadata.weight)}")
                if attributes:
                    line += f" [{', '.join(attributes)}]"
                lines.append(line)

        lines.append("}")
        return "\n".join(lines) + "\n"

"""
Edge models for the graph library.

This module defines the two representations of an edge:

- ``EdgeMetadata``: the per-pair record stored inside the graph (weight and
  optional label), keyed by the ordered pair of vertex keys.
- ``Edge``: the public record returned by edge queries and accepted by batch
  insertion, carrying the endpoint vertex values alongside the metadata.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Hashable, Mapping, Union

from ...utils.validation import validate_edge_options

DEFAULT_EDGE_WEIGHT = 1

Number = Union[int, float]


@dataclass(frozen=True)
class EdgeMetadata:
    """
    Metadata associated with an edge.

    Attributes:
        weight (Number): Edge cost used by path finding (default: 1)
        label (Any): Optional opaque label; ``None`` means no label
    """

    weight: Number = DEFAULT_EDGE_WEIGHT
    label: Any = None

    def merge(self, options: Mapping[str, Any]) -> "EdgeMetadata":
        """Return a copy with the given (validated) options applied on top."""
        return replace(self, **options)

    def to_options(self) -> Dict[str, Any]:
        """Return the metadata as edge options."""
        return {"weight": self.weight, "label": self.label}


@dataclass(frozen=True)
class Edge:
    """
    Public record of a directed edge.

    Attributes:
        v1 (Hashable): Source vertex
        v2 (Hashable): Destination vertex
        weight (Number): Edge weight (default: 1)
        label (Any): Optional edge label
    """

    v1: Hashable
    v2: Hashable
    weight: Number = DEFAULT_EDGE_WEIGHT
    label: Any = None

    @classmethod
    def from_metadata(cls, v1: Hashable, v2: Hashable, metadata: "EdgeMetadata") -> "Edge":
        """Create an edge record from endpoints and stored metadata."""
        return cls(v1, v2, weight=metadata.weight, label=metadata.label)

    def to_metadata(self) -> EdgeMetadata:
        """Return the metadata portion of this edge."""
        return EdgeMetadata(weight=self.weight, label=self.label)


def options_to_metadata(options: Mapping[str, Any]) -> EdgeMetadata:
    """
    Build edge metadata from edge options.

    Missing options fall back to the defaults (weight 1, no label).

    Raises:
        InvalidEdgeOptionError: If an option is unknown or has the wrong type
    """
    return EdgeMetadata().merge(validate_edge_options(options))

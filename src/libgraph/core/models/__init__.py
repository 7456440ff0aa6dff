"""Core data models."""

from .edge import DEFAULT_EDGE_WEIGHT, Edge, EdgeMetadata, options_to_metadata

__all__ = ["DEFAULT_EDGE_WEIGHT", "Edge", "EdgeMetadata", "options_to_metadata"]

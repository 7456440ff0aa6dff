"""Validation helpers for graph inputs."""

from .schema import EDGE_OPTION_KEYS, EDGE_OPTIONS_SCHEMA, validate_edge_options

__all__ = ["EDGE_OPTION_KEYS", "EDGE_OPTIONS_SCHEMA", "validate_edge_options"]

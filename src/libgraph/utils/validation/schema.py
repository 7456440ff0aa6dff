"""
Schema validation for edge options.

Edge options (``weight`` and ``label``) arrive as keyword arguments on the
mutation API. This module validates them against a JSON schema so that
unknown keys and wrong-typed values are rejected with a single, consistent
error before any metadata is written.
"""

from typing import Any, Dict, Mapping

from jsonschema import Draft7Validator
from jsonschema import ValidationError as JsonSchemaError

from ...core.exceptions import InvalidEdgeOptionError

EDGE_OPTION_KEYS = frozenset({"weight", "label"})

EDGE_OPTIONS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        # jsonschema's number type excludes bool
        "weight": {"type": "number"},
        "label": {},
    },
    "additionalProperties": False,
}

_EDGE_OPTIONS_VALIDATOR = Draft7Validator(EDGE_OPTIONS_SCHEMA)


def validate_edge_options(options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate edge options against the edge options schema.

    Args:
        options: Mapping of option names to values

    Returns:
        Dict[str, Any]: A plain dict copy of the validated options

    Raises:
        InvalidEdgeOptionError: If an option key is unknown or a value has
            the wrong type
    """
    opts = dict(options)
    try:
        _EDGE_OPTIONS_VALIDATOR.validate(opts)
    except JsonSchemaError as e:
        if e.validator == "additionalProperties":
            unknown = sorted(set(opts) - EDGE_OPTION_KEYS, key=str)
            option = unknown[0] if unknown else None
            raise InvalidEdgeOptionError(option, f"Unknown edge option {option!r}") from e
        option = e.path[0] if e.path else None
        raise InvalidEdgeOptionError(
            option, f"Invalid value for edge option {option!r}: {e.message}"
        ) from e
    return opts

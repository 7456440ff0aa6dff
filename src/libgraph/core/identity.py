"""
Vertex identity mapping.

Every application vertex value is translated into a non-negative integer
key before it touches the adjacency indices. Keys are derived from Python's
``hash``, so equal values (including ``1 == 1.0 == True``) always share a key.

Keys are stable within a process only: string hashing is salted per
interpreter run, so key order, and therefore traversal order, may differ
between runs.
"""

from typing import Hashable, Mapping, Optional

# Mask folding negative hashes into the non-negative 64-bit range.
_KEY_MASK = (1 << 64) - 1
_MISSING = object()


def vertex_id(value: Hashable) -> int:
    """Return the internal key for a vertex value.

    Precondition: the mapping is injective over the distinct values used in
    one graph. CPython hashes ``-1`` and ``-2`` to the same value; the graph
    store raises ``VertexKeyCollisionError`` when such a value is inserted, and
    lookups through ``lookup_key`` treat it as absent.

    Raises:
        TypeError: If the value is unhashable.
    """
    return hash(value) & _KEY_MASK


def lookup_key(vertices: Mapping[int, Hashable], value: Hashable) -> Optional[int]:
    """Return the key of ``value`` if it is stored in ``vertices``.

    A different value stored under the same key does not count as present.
    """
    key = vertex_id(value)
    stored = vertices.get(key, _MISSING)
    if stored is _MISSING or stored != value:
        return None
    return key

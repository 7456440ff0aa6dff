"""
Data models for graph path finding.

This module provides the data structures used throughout the path finding
package:
- PathResult: Container for a path and its total weight
- SearchLimits: Optional bounds for exhaustive path enumeration

Example:
    >>> result = PathFinding.dijkstra(graph, "a", "c")
    >>> result.path
    ['a', 'b', 'c']
    >>> result.total_weight
    3.0
"""

from dataclasses import dataclass
from typing import Hashable, Iterator, List, Optional


@dataclass(frozen=True)
class PathResult:
    """
    Container for path finding results.

    Attributes:
        path: Sequence of vertices from start to end, both included
        total_weight: Sum of the edge weights along the path
    """

    path: List[Hashable]
    total_weight: float

    def __len__(self) -> int:
        """Return the number of edges in the path."""
        return max(len(self.path) - 1, 0)

    def __iter__(self) -> Iterator[Hashable]:
        """Return an iterator over the path vertices."""
        return iter(self.path)

    @property
    def start(self) -> Hashable:
        """First vertex of the path."""
        return self.path[0]

    @property
    def end(self) -> Hashable:
        """Last vertex of the path."""
        return self.path[-1]


@dataclass(frozen=True)
class SearchLimits:
    """
    Bounds for exhaustive path enumeration.

    All limits are optional; the enumeration runs to exhaustion by default.

    Attributes:
        max_length: Maximum number of edges in a path
        max_paths: Stop after this many paths have been found
        max_memory_mb: Abort with MemoryError once the process has grown by more
            than this many megabytes during the search
    """

    max_length: Optional[int] = None
    max_paths: Optional[int] = None
    max_memory_mb: Optional[float] = None

    def __post_init__(self):
        """Validate limit values."""
        if self.max_length is not None:
            if not isinstance(self.max_length, int) or isinstance(self.max_length, bool):
                raise TypeError("max_length must be an integer")
            if self.max_length < 0:
                raise ValueError("max_length must be non-negative")
        if self.max_paths is not None:
            if not isinstance(self.max_paths, int) or isinstance(self.max_paths, bool):
                raise TypeError("max_paths must be an integer")
            if self.max_paths <= 0:
                raise ValueError("max_paths must be positive")
        if self.max_memory_mb is not None:
            if not isinstance(self.max_memory_mb, (int, float)):
                raise TypeError("max_memory_mb must be a numeric value")
            if self.max_memory_mb <= 0:
                raise ValueError("max_memory_mb must be positive")

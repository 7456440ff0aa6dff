"""Type definitions for graph path finding."""

from enum import Enum
from typing import Callable, Hashable, List, Union


class PathType(Enum):
    """Enumeration of path finding types."""

    DIJKSTRA = "dijkstra"  # Non-negative weights
    A_STAR = "a_star"  # Non-negative weights, admissible heuristic
    ALL_PATHS = "all_paths"  # Exhaustive simple path enumeration


# Type alias for heuristic functions: lower bound of the remaining cost from a
# vertex to the target
Heuristic = Callable[[Hashable], Union[int, float]]

# Type alias for a path expressed as its vertices
VertexPath = List[Hashable]


def zero_heuristic(vertex: Hashable) -> float:
    """Heuristic that never estimates any remaining cost; turns A* into Dijkstra."""
    return 0.0

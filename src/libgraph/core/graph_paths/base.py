from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Hashable, Iterator, Optional, Tuple

from ..identity import lookup_key

if TYPE_CHECKING:
    from ..graph import Graph


class PathFinder(ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: "Graph"):
        """Initialize finder with graph."""
        self.graph = graph
        self.state = graph.state

    @abstractmethod
    def find_path(self, start: Hashable, end: Hashable, **kwargs: Any) -> Optional[Any]:
        """Find path between vertices."""
        pass

    def find_paths(self, start: Hashable, end: Hashable, **kwargs: Any) -> Iterator[Any]:
        """Find multiple paths between vertices.

        Default implementation yields single path from find_path.
        Subclasses may override this to provide more efficient implementations.
        """
        path = self.find_path(start, end, **kwargs)
        if path is not None:
            yield path

    def resolve_endpoints(self, start: Hashable, end: Hashable) -> Optional[Tuple[int, int]]:
        """Return the keys of both endpoints, or None if either is absent."""
        k1, k2 = lookup_key(self.state.vertices, start), lookup_key(self.state.vertices, end)
        if k1 is None or k2 is None:
            return None
        return k1, k2


"""Path finding algorithms."""

from .all_paths import AllPathsFinder
from .shortest_path import ShortestPathFinder

__all__ = ["AllPathsFinder", "ShortestPathFinder"]

"""
Utility functions for path finding operations.
"""

import logging
import os
import time
from heapq import heappop, heappush
from typing import TYPE_CHECKING, Dict, Hashable, List, Optional, Sequence, Tuple

import psutil

from ..models import DEFAULT_EDGE_WEIGHT

if TYPE_CHECKING:
    from ..graph import GraphState

logger = logging.getLogger(__name__)

# Constants
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between resident memory samples


def get_edge_weight(state: "GraphState", k1: int, k2: int) -> float:
    """Get the weight of the edge between two vertex keys."""
    metadata = state.edges_meta.get((k1, k2))
    if metadata is None:
        return float(DEFAULT_EDGE_WEIGHT)
    return float(metadata.weight)


def calculate_path_weight(state: "GraphState", keys: Sequence[int]) -> float:
    """Calculate the total weight of a path given as vertex keys."""
    total = 0.0
    for k1, k2 in zip(keys, keys[1:]):
        total += get_edge_weight(state, k1, k2)
    return total


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Return True if new_cost is strictly lower than old_cost."""
    return new_cost < old_cost


class PriorityQueue:
    """Priority queue with decrease-key.

    Entries of equal priority pop in insertion order. An update re-inserts the
    item, so it then ranks after the items already queued at that priority.
    """

    def __init__(self):
        self._queue: List[Tuple[float, int, int]] = []
        self._entry_finder: Dict[int, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties

    def add_or_update(self, item: int, priority: float) -> None:
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            # Only update if new priority is lower (better)
            if not is_better_cost(priority, old_priority):
                return

        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1

    def pop(self) -> Optional[Tuple[float, int]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            if self._entry_finder.get(item) == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


class MemoryManager:
    """Tracks resident memory growth of a long running search."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._last_check = time.monotonic()

    def check_memory(self) -> None:
        """Raise MemoryError if memory grew beyond the limit since construction."""
        if not self.max_memory:
            return

        current_time = time.monotonic()
        if current_time - self._last_check < MEMORY_CHECK_INTERVAL:
            return
        self._last_check = current_time

        current = get_memory_usage()
        if current - self.start_memory > self.max_memory:
            logger.debug(f"Memory limit exceeded: {current - self.start_memory} bytes in use")
            raise MemoryError(
                f"Memory usage {(current - self.start_memory)/1024/1024:.1f}MB exceeds "
                f"limit of {self.max_memory/1024/1024:.1f}MB"
            )


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def keys_to_vertices(state: "GraphState", keys: Sequence[int]) -> List[Hashable]:
    """Map a sequence of vertex keys back to the stored vertex values."""
    return [state.vertices[key] for key in keys]

"""Priority queue of integer pairs with a custom ordering."""

from __future__ import annotations

import heapq

__all__ = ["PairPriorityQueue"]


class PairPriorityQueue:
    """Priority queue of pairs: largest first element comes out first, and
    among equal first elements the smallest second element wins."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int]] = []

    def push(self, first: int, second: int) -> None:
        """Add the pair ``(first, second)``."""
        heapq.heappush(self._heap, (-first, second))

    def pop(self) -> tuple[int, int]:
        """Remove and return the pair with the highest priority."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        neg_first, second = heapq.heappop(self._heap)
        return -neg_first, second

    def peek(self) -> tuple[int, int]:
        """Return the pair with the highest priority without removing it."""
        if not self._heap:
            raise IndexError("peek at an empty priority queue")
        neg_first, second = self._heap[0]
        return -neg_first, second

    def __len__(self) -> int:
        return len(self._heap)
"""Binary heap ordered by a comparison function."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """A binary heap; ``higher(a, b)`` is true when a may sit above b.

    The default ``operator.ge`` gives a max-heap; ``operator.le`` a min-heap.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        higher: Callable[[T, T], bool] = operator.ge,
    ) -> None:
        self._higher = higher
        self._heap: list[T] = []
        for x in items:
            self.push(x)

    def _push_down(self, idx: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            left = 2 * idx + 1
            if left >= n:
                return
            right = left + 1 if left + 1 < n else left
            best = left if self._higher(heap[left], heap[right]) else right
            if not self._higher(heap[best], heap[idx]):
                return
            heap[best], heap[idx] = heap[idx], heap[best]
            idx = best

    def _push_up(self, idx: int) -> None:
        heap = self._heap
        while idx > 0:
            parent = (idx - 1) // 2
            if self._higher(heap[parent], heap[idx]):
                return
            heap[parent], heap[idx] = heap[idx], heap[parent]
            idx = parent

    def push(self, x: T) -> None:
        """Insert x."""
        self._heap.append(x)
        self._push_up(len(self._heap) - 1)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._heap:
            raise IndexError("pop from empty heap")
        heap = self._heap
        heap[0], heap[-1] = heap[-1], heap[0]
        top = heap.pop()
        self._push_down(0)
        return top

    def top(self) -> T:
        """The top element."""
        if not self._heap:
            raise IndexError("top of empty heap")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)
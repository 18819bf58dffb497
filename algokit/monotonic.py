"""Stack and queue that keep a running aggregate (maximum by default)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class MonotonicStack(Generic[T]):
    """A stack that knows the aggregate of everything it holds."""

    def __init__(self, operation: Callable[[T, T], T] = max, default: T = 0) -> None:
        self.operation = operation
        self.default = default
        self._items: list[T] = []
        self._aggregates: list[T] = [default]

    def push(self, x: T) -> None:
        """Push x on top."""
        self._items.append(x)
        self._aggregates.append(self.operation(self._aggregates[-1], x))

    def pop(self) -> T:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        self._aggregates.pop()
        return self._items.pop()

    def top(self) -> T:
        """The top element."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1]

    def value(self) -> T:
        """Aggregate of all elements, starting from the default."""
        return self._aggregates[-1]

    def __len__(self) -> int:
        return len(self._items)


class MonotonicQueue(Generic[T]):
    """A FIFO queue built from two aggregate stacks."""

    def __init__(self, operation: Callable[[T, T], T] = max, default: T = 0) -> None:
        self.operation = operation
        self._out: MonotonicStack[T] = MonotonicStack(operation, default)
        self._in: MonotonicStack[T] = MonotonicStack(operation, default)

    def push(self, x: T) -> None:
        """Add x at the back."""
        self._in.push(x)

    def pop(self) -> T:
        """Remove and return the front element."""
        if not self._out:
            while self._in:
                self._out.push(self._in.pop())
        if not self._out:
            raise IndexError("pop from empty queue")
        return self._out.pop()

    def value(self) -> T:
        """Aggregate of all queued elements, starting from the default."""
        return self.operation(self._out.value(), self._in.value())

    def is_good(self) -> bool:
        """Whether the aggregate equals 1."""
        return self.value() == 1

    def __len__(self) -> int:
        return len(self._out) + len(self._in)
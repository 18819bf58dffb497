"""Mapping values to their 1-based rank among a set of coordinates."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Hashable, Iterable
from typing import Any


class CoordinateCompressor:
    """Sorted distinct coordinates; a value's rank is how many are <= it."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values: list[Any] = list(values)
        self._built = False
        self.build()

    def add(self, x: Any) -> None:
        """Add a coordinate; the order is rebuilt lazily."""
        self._values.append(x)
        self._built = False

    def build(self) -> None:
        """Sort and deduplicate the coordinates."""
        self._values = sorted(set(self._values))
        self._built = True

    def _ensure(self) -> None:
        if not self._built:
            self.build()

    def get(self, x: Any) -> int:
        """Number of coordinates <= x: the 1-based rank of a known coordinate."""
        self._ensure()
        return bisect_right(self._values, x)

    def compress(self, values: Iterable[Any]) -> list[int]:
        """Ranks of each of values."""
        return [self.get(x) for x in values]

    def mapping(self, values: Iterable[Hashable]) -> dict[int, Any]:
        """Map each rank back to the value from values that has it (last one wins)."""
        return {self.get(x): x for x in values}

    def __len__(self) -> int:
        self._ensure()
        return len(self._values)
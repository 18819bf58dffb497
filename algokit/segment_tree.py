"""Segment tree answering range maximum queries over 1-based positions."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT = 0


class MaxSegmentTree:
    """Point assignment and range maximum over positions 1..size.

    Ranges that fall outside a query contribute the default 0, so a
    partial query never reports a maximum below 0.
    """

    def __init__(self, n: int = 0, nums: Iterable[int] | None = None) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        size = 1
        while size < n:
            size *= 2
        self.size = size
        self._tree = [DEFAULT] * (2 * size)
        if nums is not None:
            self.build(nums)

    def build(self, nums: Iterable[int]) -> None:
        """Place nums[i] at position i + 1."""
        values = list(nums)
        if len(values) > self.size:
            raise ValueError(f"{len(values)} values do not fit in {self.size} positions")
        self._build(values, 1, 1, self.size)

    def _build(self, nums: list[int], idx: int, lx: int, rx: int) -> None:
        if lx > len(nums):
            return
        if lx == rx:
            self._tree[idx] = nums[lx - 1]
            return
        mx = (lx + rx) // 2
        self._build(nums, 2 * idx, lx, mx)
        self._build(nums, 2 * idx + 1, mx + 1, rx)
        self._tree[idx] = max(self._tree[2 * idx], self._tree[2 * idx + 1])

    def _check(self, index: int) -> None:
        if not 1 <= index <= self.size:
            raise IndexError(f"position {index} outside 1..{self.size}")

    def update(self, index: int, value: int) -> None:
        """Set the value at position index."""
        self._check(index)
        idx, lx, rx = 1, 1, self.size
        path = []
        while lx != rx:
            path.append(idx)
            mx = (lx + rx) // 2
            if index <= mx:
                idx, rx = 2 * idx, mx
            else:
                idx, lx = 2 * idx + 1, mx + 1
        self._tree[idx] = value
        for node in reversed(path):
            self._tree[node] = max(self._tree[2 * node], self._tree[2 * node + 1])

    def _query(self, l: int, r: int, idx: int, lx: int, rx: int) -> int:
        if lx > r or l > rx:
            return DEFAULT
        if l <= lx and rx <= r:
            return self._tree[idx]
        mx = (lx + rx) // 2
        return max(
            self._query(l, r, 2 * idx, lx, mx),
            self._query(l, r, 2 * idx + 1, mx + 1, rx),
        )

    def query(self, l: int, r: int) -> int:
        """Maximum over positions l..r."""
        return self._query(l, r, 1, 1, self.size)

    def get(self, idx: int) -> int:
        """Result of querying the single position idx."""
        return self.query(idx, idx)

    def values(self) -> list[int]:
        """Values at positions 1..size."""
        return self._tree[self.size:]
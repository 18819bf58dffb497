"""Segment tree with lazy range additions and range sums."""

from __future__ import annotations

from collections.abc import Iterable


class LazySegmentTree:
    """Range add and range sum over positions 1..size, where size > n."""

    def __init__(self, n: int, nums: Iterable[int] | None = None) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        size = 1
        while size <= n:
            size *= 2
        self.size = size
        self._sum = [0] * (2 * size)
        self._lazy = [0] * (2 * size)
        if nums is not None:
            self.build(nums)

    def _rebuild(self, leaves: list[int]) -> None:
        s = self.size
        self._sum[s:] = leaves
        self._lazy = [0] * (2 * s)
        for i in range(s - 1, 0, -1):
            self._sum[i] = self._sum[2 * i] + self._sum[2 * i + 1]

    def build(self, nums: Iterable[int]) -> None:
        """Place nums[i] at position i + 1; other positions keep their values."""
        values = list(nums)
        if len(values) > self.size:
            raise ValueError(f"{len(values)} values do not fit in {self.size} positions")
        leaves = self.values()
        leaves[:len(values)] = values
        self._rebuild(leaves)

    def fill(self, value: int) -> None:
        """Set every position to value."""
        self._rebuild([value] * self.size)

    def _apply(self, idx: int, lx: int, rx: int, v: int) -> None:
        self._sum[idx] += v * (rx - lx + 1)
        self._lazy[idx] += v

    def _push(self, idx: int, lx: int, rx: int) -> None:
        v = self._lazy[idx]
        if v and lx != rx:
            mx = (lx + rx) // 2
            self._apply(2 * idx, lx, mx, v)
            self._apply(2 * idx + 1, mx + 1, rx, v)
        self._lazy[idx] = 0

    def _check(self, l: int, r: int) -> None:
        if l < 1 or r > self.size:
            raise IndexError(f"range [{l}, {r}] outside 1..{self.size}")

    def update(self, l: int, r: int, v: int) -> None:
        """Add v to every position in l..r."""
        if l > r:
            return
        self._check(l, r)
        self._update(l, r, v, 1, 1, self.size)

    def _update(self, l: int, r: int, v: int, idx: int, lx: int, rx: int) -> None:
        if r < lx or rx < l:
            return
        if l <= lx and rx <= r:
            self._apply(idx, lx, rx, v)
            return
        self._push(idx, lx, rx)
        mx = (lx + rx) // 2
        self._update(l, r, v, 2 * idx, lx, mx)
        self._update(l, r, v, 2 * idx + 1, mx + 1, rx)
        self._sum[idx] = self._sum[2 * idx] + self._sum[2 * idx + 1]

    def query(self, l: int, r: int | None = None) -> int:
        """Sum over positions l..r, or the value at l alone."""
        if r is None:
            r = l
        if l > r:
            return 0
        self._check(l, r)
        return self._query(l, r, 1, 1, self.size)

    def _query(self, l: int, r: int, idx: int, lx: int, rx: int) -> int:
        if r < lx or rx < l:
            return 0
        if l <= lx and rx <= r:
            return self._sum[idx]
        self._push(idx, lx, rx)
        mx = (lx + rx) // 2
        return self._query(l, r, 2 * idx, lx, mx) + self._query(
            l, r, 2 * idx + 1, mx + 1, rx
        )

    def values(self) -> list[int]:
        """Values at positions 1..size."""
        out: list[int] = []
        self._collect(1, 1, self.size, out)
        return out

    def _collect(self, idx: int, lx: int, rx: int, out: list[int]) -> None:
        if lx == rx:
            out.append(self._sum[idx])
            return
        self._push(idx, lx, rx)
        mx = (lx + rx) // 2
        self._collect(2 * idx, lx, mx, out)
        self._collect(2 * idx + 1, mx + 1, rx, out)
"""Persistent segment tree of maximum prefix sums with versioned roots."""

from __future__ import annotations

from collections.abc import Sequence


class _Node:
    __slots__ = ("val", "prefix", "left", "right")

    def __init__(
        self,
        val: int = 0,
        prefix: int | None = None,
        left: _Node | None = None,
        right: _Node | None = None,
    ) -> None:
        self.val = val
        self.prefix = max(0, val) if prefix is None else prefix
        self.left = self if left is None else left
        self.right = self if right is None else right


_EMPTY = _Node()


def _merge(a: _Node, b: _Node) -> _Node:
    return _Node(a.val + b.val, max(a.prefix, a.val + b.prefix), a, b)


def _combine(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return a[0] + b[0], max(a[1], a[0] + b[1])


class PersistentSegmentTree:
    """Sums and best non-negative prefix sums over positions lx..rx.

    Every version is kept: versions 0..n + 4 each have a root, and
    changing one version never alters another.
    """

    def __init__(
        self, n: int = 0, lx: int = -10**9, rx: int = 10**9, base: int = 0
    ) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        if lx > rx:
            raise ValueError("empty coordinate range")
        self.n = n
        self.lx = lx
        self.rx = rx
        self._offset = 0 if base else 1
        self._roots: list[_Node] = [_EMPTY] * (n + 5)

    def _check_time(self, time: int) -> None:
        if not 0 <= time < len(self._roots):
            raise IndexError(f"version {time} outside 0..{len(self._roots) - 1}")

    def _build(self, nums: Sequence[int], l: int, r: int) -> _Node:
        if l == r:
            return _Node(nums[l - self._offset])
        mx = l + (r - l) // 2
        return _merge(self._build(nums, l, mx), self._build(nums, mx + 1, r))

    def build(self, nums: Sequence[int]) -> None:
        """Make version 0 hold nums over positions lx..rx."""
        self._roots[0] = self._build(nums, self.lx, self.rx)

    def _update(self, node: _Node, idx: int, val: int, lx: int, rx: int) -> _Node:
        if idx < lx or idx > rx:
            return node
        if lx == rx:
            return _Node(val)
        mx = lx + (rx - lx) // 2
        return _merge(
            self._update(node.left, idx, val, lx, mx),
            self._update(node.right, idx, val, mx + 1, rx),
        )

    def insert(self, idx: int, val: int, curr_time: int, prev_time: int) -> None:
        """Make version curr_time a copy of prev_time with idx set to val."""
        self._check_time(curr_time)
        self._check_time(prev_time)
        self._roots[curr_time] = self._update(
            self._roots[prev_time], idx, val, self.lx, self.rx
        )

    def update(self, idx: int, val: int, curr_time: int) -> None:
        """Set idx to val within version curr_time."""
        self._check_time(curr_time)
        self._roots[curr_time] = self._update(
            self._roots[curr_time], idx, val, self.lx, self.rx
        )

    def _query(
        self, node: _Node, l: int, r: int, lx: int, rx: int
    ) -> tuple[int, int]:
        if lx > r or l > rx:
            return 0, 0
        if l <= lx and rx <= r:
            return node.val, node.prefix
        mx = lx + (rx - lx) // 2
        return _combine(
            self._query(node.left, l, r, lx, mx),
            self._query(node.right, l, r, mx + 1, rx),
        )

    def query(self, l: int, r: int, time: int) -> int:
        """Largest prefix sum (at least 0) of positions l..r in version time."""
        self._check_time(time)
        return self._query(self._roots[time], l, r, self.lx, self.rx)[1]

    def get(self, time: int, idx: int) -> int:
        """Value at idx in version time."""
        self._check_time(time)
        return self._query(self._roots[time], idx, idx, self.lx, self.rx)[0]
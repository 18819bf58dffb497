"""Segment tree of polynomial hashes supporting point changes."""

from __future__ import annotations

from collections.abc import Iterable

from .hashing import M1, M2, P1, P2


def _code(val: int | str) -> int:
    if isinstance(val, str):
        if len(val) != 1:
            raise ValueError("expected a single character")
        return ord(val) - ord("a") + 1
    return val


class HashSegmentTree:
    """Double hashes of ranges over positions 1..size.

    Equal sequences of values give equal hashes wherever they sit.
    """

    def __init__(self, n: int = 0, nums: Iterable[int] | None = None) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        size = 1
        while size < n:
            size *= 2
        self.size = size
        inv_p1 = pow(P1, M1 - 2, M1)
        inv_p2 = pow(P2, M2 - 2, M2)
        self._pow1 = [1] * (2 * size)
        self._pow2 = [1] * (2 * size)
        self._inv1 = [1] * (2 * size)
        self._inv2 = [1] * (2 * size)
        for i in range(1, 2 * size):
            self._pow1[i] = self._pow1[i - 1] * P1 % M1
            self._pow2[i] = self._pow2[i - 1] * P2 % M2
            self._inv1[i] = self._inv1[i - 1] * inv_p1 % M1
            self._inv2[i] = self._inv2[i - 1] * inv_p2 % M2
        self._h1 = [0] * (2 * size)
        self._h2 = [0] * (2 * size)
        if nums is not None:
            self.build(nums)

    def _set_leaf(self, index: int, val: int) -> int:
        idx = self.size + index - 1
        self._h1[idx] = val * self._pow1[idx] % M1
        self._h2[idx] = val * self._pow2[idx] % M2
        return idx

    def _pull(self, idx: int) -> None:
        self._h1[idx] = (self._h1[2 * idx] + self._h1[2 * idx + 1]) % M1
        self._h2[idx] = (self._h2[2 * idx] + self._h2[2 * idx + 1]) % M2

    def build(self, nums: Iterable[int]) -> None:
        """Place nums[i] at position i + 1."""
        values = list(nums)
        if len(values) > self.size:
            raise ValueError(f"{len(values)} values do not fit in {self.size} positions")
        for index, val in enumerate(values, 1):
            self._set_leaf(index, val)
        for idx in range(self.size - 1, 0, -1):
            self._pull(idx)

    def update(self, index: int, val: int | str) -> None:
        """Set position index; a letter stands for its place in the alphabet."""
        if not 1 <= index <= self.size:
            raise IndexError(f"position {index} outside 1..{self.size}")
        idx = self._set_leaf(index, _code(val))
        idx //= 2
        while idx:
            self._pull(idx)
            idx //= 2

    def query(self, l: int, r: int) -> tuple[int, int]:
        """Hash pair of positions l..r; (0, 0) when l > r."""
        if l > r:
            return 0, 0
        if l < 1 or r > self.size:
            raise IndexError(f"range [{l}, {r}] outside 1..{self.size}")
        a = b = 0
        lo = self.size + l - 1
        hi = self.size + r
        while lo < hi:
            if lo & 1:
                a += self._h1[lo]
                b += self._h2[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                a += self._h1[hi]
                b += self._h2[hi]
            lo //= 2
            hi //= 2
        return a % M1 * self._inv1[l - 1] % M1, b % M2 * self._inv2[l - 1] % M2
"""Binary indexed trees: point update / range sum, 2D sums, and range update / range sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _lowbit(i: int) -> int:
    return i & -i


class FenwickTree:
    """Prefix sums with point additions over positions 0..size."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._n = size + 1
        self._tree = [0] * (self._n + 1)

    def build(self, nums: Iterable[int]) -> None:
        """Add nums[i] at position i for every i."""
        for i, x in enumerate(nums):
            self.add(i, x)

    def add(self, idx: int, val: int) -> None:
        """Add val at position idx."""
        if not 0 <= idx < self._n:
            raise IndexError(f"position {idx} outside 0..{self.size}")
        i = idx + 1
        while i <= self._n:
            self._tree[i] += val
            i += _lowbit(i)

    def prefix(self, idx: int) -> int:
        """Sum of positions 0..idx; 0 for idx == -1."""
        if not -1 <= idx < self._n:
            raise IndexError(f"position {idx} outside -1..{self.size}")
        total = 0
        i = idx + 1
        while i:
            total += self._tree[i]
            i -= _lowbit(i)
        return total

    def query(self, l: int, r: int) -> int:
        """Sum of positions l..r; 0 when l > r."""
        if l > r:
            return 0
        return self.prefix(r) - self.prefix(l - 1)

    def get(self, idx: int) -> int:
        """Value at position idx."""
        return self.query(idx, idx)


class FenwickTree2D:
    """Rectangle sums with point additions over positions 0..rows by 0..cols."""

    def __init__(self, rows: int = 0, cols: int = 0) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self._n = rows + 1
        self._m = cols + 1
        self._tree = [[0] * (self._m + 1) for _ in range(self._n + 1)]

    def build(self, grid: Sequence[Sequence[int]]) -> None:
        """Add grid[i][j] at position (i + 1, j + 1), treating the grid as 1-based."""
        for i, row in enumerate(grid, 1):
            for j, x in enumerate(row, 1):
                self.add(i, j, x)

    def add(self, i: int, j: int, val: int) -> None:
        """Add val at position (i, j)."""
        if not (0 <= i < self._n and 0 <= j < self._m):
            raise IndexError(f"position ({i}, {j}) outside the tree")
        x = i + 1
        while x <= self._n:
            row = self._tree[x]
            y = j + 1
            while y <= self._m:
                row[y] += val
                y += _lowbit(y)
            x += _lowbit(x)

    def prefix(self, i: int, j: int) -> int:
        """Sum over positions (0..i, 0..j); 0 when i or j is -1."""
        if not (-1 <= i < self._n and -1 <= j < self._m):
            raise IndexError(f"position ({i}, {j}) outside the tree")
        total = 0
        x = i + 1
        while x:
            row = self._tree[x]
            y = j + 1
            while y:
                total += row[y]
                y -= _lowbit(y)
            x -= _lowbit(x)
        return total

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum over the rectangle with corners (x1, y1) and (x2, y2), inclusive."""
        if x1 > x2:
            x1, x2 = x2, x1
        if y1 > y2:
            y1, y2 = y2, y1
        return (
            self.prefix(x2, y2)
            - self.prefix(x1 - 1, y2)
            - self.prefix(x2, y1 - 1)
            + self.prefix(x1 - 1, y1 - 1)
        )


class RangeFenwickTree:
    """Range additions and range sums over positions 0..size."""

    def __init__(self, size: int = 0) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._n = size + 1
        self._slope = [0] * (self._n + 1)
        self._const = [0] * (self._n + 1)

    def build(self, nums: Iterable[int]) -> None:
        """Add nums[i] at position i for every i."""
        for i, x in enumerate(nums):
            self.add(i, i, x)

    def _add_line(self, idx: int, d_slope: int, d_const: int) -> None:
        i = idx + 1
        while i <= self._n:
            self._slope[i] += d_slope
            self._const[i] += d_const
            i += _lowbit(i)

    def add(self, l: int, r: int, val: int) -> None:
        """Add val to every position in l..r."""
        if l > r:
            raise ValueError(f"empty range [{l}, {r}]")
        if l < 0 or r >= self._n:
            raise IndexError(f"range [{l}, {r}] outside 0..{self.size}")
        self._add_line(l, val, -val * (l - 1))
        self._add_line(r + 1, -val, val * r)

    def get(self, idx: int) -> int:
        """Sum of positions 0..idx; 0 for idx == -1."""
        if not -1 <= idx < self._n:
            raise IndexError(f"position {idx} outside -1..{self.size}")
        total = 0
        i = idx + 1
        while i:
            total += idx * self._slope[i] + self._const[i]
            i -= _lowbit(i)
        return total

    def query(self, l: int, r: int) -> int:
        """Sum of positions l..r; 0 when l > r."""
        if l > r:
            return 0
        return self.get(r) - self.get(l - 1)
"""Two-dimensional prefix sums and rectangle coverage counts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate


def _suffix(values: Iterable[int]) -> list[int]:
    return list(accumulate(reversed(list(values))))[::-1]


class PrefixSum2D:
    """Rectangle sums over a fixed matrix, with 1-based coordinates."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        self.n = len(rows)
        self.m = len(rows[0]) if rows else 0
        if any(len(row) != self.m for row in rows):
            raise ValueError("matrix rows have different lengths")
        table = [[0] * (self.m + 1)]
        for row in rows:
            above = table[-1]
            running = list(accumulate(row, initial=0))
            table.append([a + b for a, b in zip(above, running)])
        self._table = table

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum over the rectangle with corners (x1, y1) and (x2, y2), inclusive."""
        if x1 > x2:
            x1, x2 = x2, x1
        if y1 > y2:
            y1, y2 = y2, y1
        if x1 < 1 or y1 < 1 or x2 > self.n or y2 > self.m:
            raise IndexError("rectangle outside the matrix")
        t = self._table
        return t[x2][y2] - t[x1 - 1][y2] - t[x2][y1 - 1] + t[x1 - 1][y1 - 1]


class PartialSum2D:
    """How many of the given rectangles cover each cell of an n by m grid (1-based)."""

    def __init__(self, n: int, m: int) -> None:
        if n < 0 or m < 0:
            raise ValueError("dimensions must be non-negative")
        self.n = n
        self.m = m
        self._diff = [[0] * (m + 2) for _ in range(n + 2)]
        self._cells = [[0] * (m + 2) for _ in range(n + 2)]

    def build(self, rectangles: Iterable[tuple[int, int, int, int]]) -> None:
        """Add one to every cell inside each rectangle (x1, y1, x2, y2)."""
        diff = self._diff
        for x1, y1, x2, y2 in rectangles:
            if x1 > x2:
                x1, x2 = x2, x1
            if y1 > y2:
                y1, y2 = y2, y1
            if x1 < 1 or y1 < 1 or x2 > self.n or y2 > self.m:
                raise ValueError(f"rectangle ({x1}, {y1}, {x2}, {y2}) outside the grid")
            diff[x2][y2] += 1
            diff[x2][y1 - 1] -= 1
            diff[x1 - 1][y2] -= 1
            diff[x1 - 1][y1 - 1] += 1
        by_row = [_suffix(row) for row in diff]
        by_col = [_suffix(col) for col in zip(*by_row)]
        self._cells = [list(row) for row in zip(*by_col)]

    def get(self, x: int, y: int) -> int:
        """Coverage count of cell (x, y)."""
        if not (1 <= x <= self.n and 1 <= y <= self.m):
            raise IndexError(f"cell ({x}, {y}) outside the grid")
        return self._cells[x][y]

    def rows(self) -> list[list[int]]:
        """Coverage counts of the whole grid, row by row."""
        return [row[1:self.m + 1] for row in self._cells[1:self.n + 1]]
"""Line container answering minimum or maximum of linear functions at a point."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass

_RIGHT = math.inf
_LEFT = -math.inf


@dataclass
class Line:
    """The line y = m * x + c; p is where it stops being best."""

    m: int
    c: int
    p: float = 0

    def value(self, x: int) -> int:
        """The line evaluated at x."""
        return self.m * x + self.c


class LineContainer:
    """Holds lines y = m * x + c and reports the lowest (or highest) at any x."""

    def __init__(self, maximum: bool = False) -> None:
        self._sign = 1 if maximum else -1
        self._lines: list[Line] = []

    def __len__(self) -> int:
        return len(self._lines)

    def _intersect(self, x_idx: int, y_idx: int) -> bool:
        lines = self._lines
        x = lines[x_idx]
        if y_idx == len(lines):
            x.p = _RIGHT
            return False
        y = lines[y_idx]
        if x.m == y.m:
            x.p = _RIGHT if x.c > y.c else _LEFT
        else:
            x.p = (y.c - x.c) // (x.m - y.m)
        return x.p >= y.p

    def add(self, m: int, c: int) -> None:
        """Add the line y = m * x + c."""
        m *= self._sign
        c *= self._sign
        lines = self._lines
        y = bisect.bisect_right(lines, m, key=lambda line: line.m)
        lines.insert(y, Line(m, c))
        z = y + 1
        while self._intersect(y, z):
            del lines[z]
        x = y
        if x != 0:
            x -= 1
            if self._intersect(x, y):
                del lines[y]
                self._intersect(x, y)
        while True:
            y = x
            if y == 0:
                break
            x = y - 1
            if lines[x].p >= lines[y].p:
                del lines[y]
                self._intersect(x, y)
            else:
                break

    def query(self, x: int) -> int:
        """Best value among the lines at x."""
        if not self._lines:
            raise IndexError("query on empty line container")
        idx = bisect.bisect_left(self._lines, x, key=lambda line: line.p)
        return self._sign * self._lines[idx].value(x)
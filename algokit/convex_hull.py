"""Convex hull of a set of points by a Graham scan."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence

from .geometry import Point


def _as_point(p: Point | Sequence[float]) -> Point:
    return p if isinstance(p, Point) else Point(*p)


def orientation(a: Point, b: Point, c: Point) -> int:
    """-1, 0 or 1 by the sign of the turn a-b-c; 0 when collinear."""
    val = (b.y - a.y) * (c.x - b.x) - (b.x - a.x) * (c.y - b.y)
    if val < 0:
        return -1
    if val > 0:
        return 1
    return 0


def is_collinear(a: Point, b: Point, c: Point) -> bool:
    """Whether a, b and c lie on one line."""
    return orientation(a, b, c) == 0


def _keeps(a: Point, b: Point, c: Point, include_collinear: bool) -> bool:
    o = orientation(a, b, c)
    return o < 0 or (include_collinear and o == 0)


def convex_hull(
    points: Iterable[Point | Sequence[float]], include_collinear: bool = False
) -> list[Point]:
    """Hull vertices counter-clockwise from the lowest (then leftmost) point."""
    pts = [_as_point(p) for p in points]
    if not pts:
        raise ValueError("no points")
    p0 = min(pts)

    def compare(a: Point, b: Point) -> int:
        o = orientation(p0, a, b)
        if o == 0:
            da, db = p0.dist(a), p0.dist(b)
            return (da > db) - (da < db)
        return -1 if o < 0 else 1

    pts.sort(key=functools.cmp_to_key(compare))
    unique = [p for i, p in enumerate(pts) if i == 0 or p != pts[i - 1]]

    if include_collinear:
        idx = len(unique) - 1
        while idx > 0 and is_collinear(p0, unique[idx], unique[-1]):
            idx -= 1
        unique[idx + 1:] = unique[idx + 1:][::-1]

    hull: list[Point] = []
    for p in unique:
        while len(hull) > 1 and not _keeps(hull[-2], hull[-1], p, include_collinear):
            hull.pop()
        hull.append(p)
    return hull
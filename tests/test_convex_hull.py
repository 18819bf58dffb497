import random

import pytest

from algokit.convex_hull import convex_hull, is_collinear, orientation
from algokit.geometry import Point


def test_orientation_flips_when_swapping():
    a, b, c = Point(0, 0), Point(3, 1), Point(1, 4)
    assert orientation(a, b, c) == -orientation(a, c, b)
    assert orientation(a, b, c) != 0


def test_collinear_points():
    assert is_collinear(Point(0, 0), Point(2, 2), Point(5, 5))
    assert not is_collinear(Point(0, 0), Point(2, 2), Point(5, 6))


def test_square_with_interior_point():
    pts = [(0, 0), (2, 0), (2, 2), (0, 2), (1, 1)]
    hull = convex_hull(pts)
    assert hull == [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]


def test_collinear_point_dropped_by_default():
    pts = [(0, 0), (1, 0), (2, 0), (2, 2), (0, 2)]
    assert Point(1, 0) not in convex_hull(pts)


def test_collinear_point_kept_on_request():
    pts = [(0, 0), (1, 0), (2, 0), (2, 2), (0, 2), (1, 1)]
    hull = convex_hull(pts, include_collinear=True)
    assert Point(1, 0) in hull
    assert Point(1, 1) not in hull


def test_duplicates_removed():
    pts = [(0, 0), (0, 0), (3, 0), (3, 0), (0, 3)]
    hull = convex_hull(pts)
    assert len(hull) == len(set(hull))
    assert set(hull) == {Point(0, 0), Point(3, 0), Point(0, 3)}


def test_starts_at_lowest_point():
    pts = [(5, 5), (1, 3), (4, -2), (0, 0), (7, 1)]
    assert convex_hull(pts)[0] == min(Point(*p) for p in pts)


def test_random_points_lie_inside_hull():
    rng = random.Random(7)
    pts = [Point(rng.randint(-20, 20), rng.randint(-20, 20)) for _ in range(60)]
    hull = convex_hull(pts)
    assert set(hull) <= set(pts)
    for i, a in enumerate(hull):
        b = hull[(i + 1) % len(hull)]
        for p in pts:
            assert orientation(a, b, p) <= 0


def test_empty_input_raises():
    with pytest.raises(ValueError):
        convex_hull([])
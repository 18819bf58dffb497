import math

import pytest

from algokit.geometry import Point


def test_add_sub_round_trip():
    a, b = Point(3, -4), Point(7, 2)
    assert (a + b) - b == a
    assert a - a == Point(0, 0)


def test_scalar_multiply_and_divide():
    a = Point(3, 6)
    assert (a * 2) / 2 == a
    assert 2 * a == a * 2


def test_dot_with_perp_is_zero():
    a = Point(5, -3)
    assert a.dot(a.perp()) == 0


def test_cross_is_antisymmetric():
    a, b = Point(2, 7), Point(-1, 4)
    assert a.cross(b) == -b.cross(a)


def test_three_point_cross_matches_vector_cross():
    o, a, b = Point(1, 1), Point(4, 2), Point(0, 5)
    assert o.cross(a, b) == (a - o).cross(b - o)


def test_dist_is_square_of_distance():
    a, b = Point(1, 2), Point(4, 6)
    assert a.distance(b) ** 2 == pytest.approx(a.dist(b))
    assert a.dist(b) == b.dist(a)


def test_distance_of_3_4_vector():
    assert Point(3, 4).distance() == 5


def test_unit_has_length_one():
    u = Point(3, -7).unit()
    assert u.distance() == pytest.approx(1)


def test_unit_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Point(0, 0).unit()


def test_normal_is_perpendicular_unit():
    a = Point(2, 9)
    n = a.normal()
    assert n.dot(a) == pytest.approx(0)
    assert n.distance() == pytest.approx(1)


def test_rotate_quarter_turn_matches_perp():
    a = Point(3, 1)
    r = a.rotate(math.pi / 2)
    assert r.x == pytest.approx(a.perp().x)
    assert r.y == pytest.approx(a.perp().y)


def test_rotate_about_center_keeps_distance():
    c = Point(1, 1)
    a = Point(4, 5)
    r = a.rotate(0.7, c)
    assert r.distance(c) == pytest.approx(a.distance(c))


def test_angle_of_perp_is_right_angle():
    a = Point(2, 3)
    assert a.angle(a.perp()) == pytest.approx(math.pi / 2)
    assert Point(0, 1).angle() == pytest.approx(math.pi / 2)


def test_ordering_by_y_then_x():
    pts = [Point(5, 1), Point(0, 2), Point(1, 1), Point(-3, 2)]
    assert sorted(pts) == [Point(1, 1), Point(5, 1), Point(-3, 2), Point(0, 2)]
    assert Point(9, 0) < Point(0, 1)
import math
import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from geometry_2d import ORIGIN, Point2, angular_distance, get_intersection, polar_to_cartesian


def test_origin_is_canvas_center():
    assert ORIGIN == Point2(400, 400)


def test_angular_distance_shorter_arc():
    assert angular_distance(10, 350) == 20
    assert angular_distance(0, 180) == 180
    assert angular_distance(0, 90) == 90


@pytest.mark.parametrize("a,b", [(0, 0), (10, 350), (359, 1), (45, 270), (120, 240)])
def test_angular_distance_symmetric_and_bounded(a, b):
    assert angular_distance(a, b) == angular_distance(b, a)
    assert 0 <= angular_distance(a, b) <= 180
    assert angular_distance(a, a) == 0


def test_polar_zero_angle():
    assert polar_to_cartesian(100, 0) == Point2(500, 400)


def test_polar_y_is_inverted():
    # 90 gradi punta verso l'alto del canvas
    p = polar_to_cartesian(100, 90)
    assert p.x == pytest.approx(400)
    assert p.y == pytest.approx(300)


@pytest.mark.parametrize("length,angle", [(1, 0), (37, 45), (120, 135), (400, 271), (250, 359)])
def test_polar_round_trip(length, angle):
    d = polar_to_cartesian(length, angle) - ORIGIN
    assert abs(d) == pytest.approx(length)
    back = math.degrees(math.atan2(-d.y, d.x)) % 360
    assert back == pytest.approx(angle)


def test_polar_negative_length_opposite_ray():
    p = polar_to_cartesian(-100, 0)
    assert p == Point2(300, 400)


def test_polar_custom_origin():
    assert polar_to_cartesian(10, 0, Point2(0, 0)) == Point2(10, 0)


def test_intersection_perpendicular():
    p = get_intersection(Point2(0, 0), Point2(10, 0), Point2(5, -5), Point2(5, 5))
    assert p == Point2(5, 0)


def test_intersection_outside_segments():
    # rette infinite, non segmenti
    p = get_intersection(Point2(0, 0), Point2(1, 0), Point2(20, 3), Point2(20, 4))
    assert p == Point2(20, 0)


def test_intersection_parallel_is_none():
    assert get_intersection(Point2(0, 0), Point2(1, 1), Point2(0, 1), Point2(1, 2)) is None


def test_intersection_coincident_is_none():
    assert get_intersection(Point2(0, 0), Point2(1, 1), Point2(2, 2), Point2(3, 3)) is None


def test_intersection_nearly_parallel_has_no_tolerance():
    p = get_intersection(Point2(0, 0), Point2(1, 0), Point2(0, 1), Point2(1, 1 + 1e-12))
    assert p is not None
    assert abs(p.x) > 1e6


def test_point_arithmetic():
    a, b = Point2(1, 2), Point2(4, 6)
    assert b - a == Point2(3, 4)
    assert abs(b - a) == 5
    assert a + b == Point2(5, 8)
    assert 2 * a == a * 2 == Point2(2, 4)
    assert a.as_tuple() == (1, 2)

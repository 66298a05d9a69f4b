import math

import pytest

from sacredgrid import circle_intersections, motif_circles, motif_intersections, petal_intersections
from sacredgrid.types import Circle, Point


def _on_circle(point, circle, tol=1e-9):
    return math.isclose(math.hypot(point.x - circle.cx, point.y - circle.cy), circle.r, abs_tol=tol)


def _rounded(points, digits=9):
    return sorted((round(p.x, digits), round(p.y, digits)) for p in points)


def test_motif_has_center_and_six_petals():
    circles = motif_circles(Point(0.0, 0.0), 10.0)
    assert len(circles) == 7
    assert circles[0] == Circle(0.0, 0.0, 10.0)
    assert circles[1] == Circle(10.0, 0.0, 10.0)
    assert circles[4] == Circle(-10.0, 0.0, 10.0)
    for petal in circles[1:]:
        assert petal.r == 10.0
        assert math.isclose(math.hypot(petal.cx, petal.cy), 10.0)


def test_petals_are_sixty_degrees_apart():
    circles = motif_circles((5.0, -3.0), 2.0)
    angles = [math.degrees(math.atan2(c.cy + 3.0, c.cx - 5.0)) % 360 for c in circles[1:]]
    for expected, angle in zip(range(0, 360, 60), angles):
        assert angle == pytest.approx(expected, abs=1e-9)


def test_two_point_intersection():
    points = circle_intersections(Circle(0.0, 0.0, 5.0), Circle(8.0, 0.0, 5.0))
    assert points == (Point(4.0, 3.0), Point(4.0, -3.0))


def test_intersection_is_symmetric():
    c1 = Circle(0.0, 0.0, 5.0)
    c2 = Circle(3.0, 4.0, 4.0)
    forward = circle_intersections(c1, c2)
    backward = circle_intersections(c2, c1)
    assert len(forward) == 2
    assert _rounded(forward) == _rounded(backward)
    for point in forward:
        assert _on_circle(point, c1)
        assert _on_circle(point, c2)


def test_external_tangency_gives_one_point():
    points = circle_intersections(Circle(0.0, 0.0, 1.0), Circle(2.0, 0.0, 1.0))
    assert len(points) == 1
    assert points[0].x == pytest.approx(1.0)
    assert points[0].y == pytest.approx(0.0)


def test_internal_tangency_gives_one_point():
    points = circle_intersections(Circle(0.0, 0.0, 2.0), Circle(1.0, 0.0, 1.0))
    assert len(points) == 1
    assert points[0].x == pytest.approx(2.0)


@pytest.mark.parametrize(
    "c1, c2",
    [
        (Circle(0.0, 0.0, 3.0), Circle(0.0, 0.0, 3.0)),  # coincident
        (Circle(0.0, 0.0, 1.0), Circle(3.0, 0.0, 1.0)),  # disjoint
        (Circle(0.0, 0.0, 5.0), Circle(1.0, 0.0, 1.0)),  # contained
        (Circle(0.0, 0.0, 2.0), Circle(0.0, 0.0, 1.0)),  # concentric
    ],
)
def test_no_representable_intersection(c1, c2):
    assert circle_intersections(c1, c2) == ()


def test_petal_shortcut_matches_general_formula():
    radius = 37.795
    center = Point(12.0, -7.0)
    central = motif_circles(center, radius)[0]
    shortcut = petal_intersections(center, radius)
    assert len(shortcut) == 6
    general = motif_intersections(center, radius)
    general_keys = set(_rounded(general, digits=6))
    for point in shortcut:
        assert _on_circle(point, central)
        assert (round(point.x, 6), round(point.y, 6)) in general_keys


@pytest.mark.parametrize("radius", [1.0, 37.795, 37.795 / 0.7, 96 * math.pi, 231.99])
@pytest.mark.parametrize("angle", [0, 30, 60, 120, 135, 250])
def test_external_tangency_at_any_radius_and_angle(radius, angle):
    ux = math.cos(math.radians(angle))
    uy = math.sin(math.radians(angle))
    c1 = Circle(3.0 + radius * ux, -2.0 + radius * uy, radius)
    c2 = Circle(3.0 - radius * ux, -2.0 - radius * uy, radius)
    points = circle_intersections(c1, c2)
    assert len(points) == 1
    assert points[0].x == pytest.approx(3.0, abs=1e-9 * radius)
    assert points[0].y == pytest.approx(-2.0, abs=1e-9 * radius)


@pytest.mark.parametrize("radius", [0.3, 37.795 / 0.7, 301.59])
@pytest.mark.parametrize("angle", [45, 200])
def test_internal_tangency_at_any_radius_and_angle(radius, angle):
    ux = math.cos(math.radians(angle))
    uy = math.sin(math.radians(angle))
    big = Circle(0.0, 0.0, 2.0 * radius)
    small = Circle(radius * ux, radius * uy, radius)
    points = circle_intersections(big, small)
    assert len(points) == 1
    assert _on_circle(points[0], big, tol=1e-9 * radius)
    assert points[0].x == pytest.approx(2.0 * radius * ux, abs=1e-9 * radius)


def test_opposite_petals_touch_at_motif_center():
    radius = 37.795 / 0.7
    circles = motif_circles(Point(0.0, 0.0), radius)
    for i in range(1, 4):
        points = circle_intersections(circles[i], circles[i + 3])
        assert len(points) == 1
        assert points[0].x == pytest.approx(0.0, abs=1e-9)
        assert points[0].y == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("radius", [1.0, 37.795, 37.795 / 0.7, 96 * math.pi / 0.3])
def test_motif_intersections_accumulate_every_pair(radius):
    circles = motif_circles(Point(0.0, 0.0), radius)
    points = motif_intersections(Point(0.0, 0.0), radius)
    # 6 center/petal, 6 adjacent and 6 skip-one pairs meet twice, 3 opposite pairs touch once
    assert len(points) == 39
    for point in points:
        assert sum(_on_circle(point, c, tol=1e-7 * radius) for c in circles) >= 2

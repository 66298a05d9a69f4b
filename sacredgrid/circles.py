"""Flower of Life motif circles and analytic circle-circle intersection."""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from .logging_utils import apply_debug_logging
from .types import Circle, IntersectionPoint, MotifCenter, Point, PointLike, as_point

logger = logging.getLogger(__name__)

_HALF_SQRT3 = math.sqrt(3.0) / 2.0

# Unit vectors at 0, 60, ..., 300 degrees. Exact table so axis-aligned
# petals land on exact coordinates (sin 180 == 0).
HEX_DIRECTIONS: Tuple[Tuple[float, float], ...] = (
    (1.0, 0.0),
    (0.5, _HALF_SQRT3),
    (-0.5, _HALF_SQRT3),
    (-1.0, 0.0),
    (-0.5, -_HALF_SQRT3),
    (0.5, -_HALF_SQRT3),
)

TANGENT_EPS = 1e-9


def petal_centers(center: PointLike, radius: float) -> Tuple[Point, ...]:
    c = as_point(center)
    return tuple(Point(c.x + radius * dx, c.y + radius * dy) for dx, dy in HEX_DIRECTIONS)


def motif_circles(center: MotifCenter, radius: float) -> Tuple[Circle, ...]:
    """The seven circles of one motif: the central circle, then six petals."""

    c = as_point(center)
    circles = [Circle(c.x, c.y, radius)]
    circles.extend(Circle(p.x, p.y, radius) for p in petal_centers(c, radius))
    return tuple(circles)


def circle_intersections(c1: Circle, c2: Circle) -> Tuple[IntersectionPoint, ...]:
    """Intersection points of two circles: zero, one (tangent) or two.

    Disjoint, nested and coincident circles have no representable
    intersection and return an empty tuple. Tangency is decided on the
    center distance with a tolerance relative to the circles' size, so
    touching circles give exactly one point at any radius.
    """

    dx = c2.cx - c1.cx
    dy = c2.cy - c1.cy
    d = math.hypot(dx, dy)
    eps = TANGENT_EPS * max(c1.r, c2.r, d, 1.0)

    if d <= eps:
        # concentric: coincident (infinitely many) or nested (none)
        return ()
    outer = c1.r + c2.r
    inner = abs(c1.r - c2.r)
    if d > outer + eps or d < inner - eps:
        return ()

    a = (c1.r * c1.r - c2.r * c2.r + d * d) / (2.0 * d)
    base_x = c1.cx + a * dx / d
    base_y = c1.cy + a * dy / d

    if abs(d - outer) <= eps or abs(d - inner) <= eps:
        return (Point(base_x, base_y),)

    h = math.sqrt(max(c1.r * c1.r - a * a, 0.0))
    rx = -dy * (h / d)
    ry = dx * (h / d)
    return (
        Point(base_x + rx, base_y + ry),
        Point(base_x - rx, base_y - ry),
    )


def petal_intersections(center: MotifCenter, radius: float) -> Tuple[IntersectionPoint, ...]:
    """Closed-form center/petal intersections for one motif.

    With equal radii and petals one radius out, every petal center lies on
    the central circle and is itself an intersection point of neighbouring
    petals, so no square roots are needed. Only valid for this symmetric
    configuration; use :func:`circle_intersections` for arbitrary pairs.
    """

    return petal_centers(center, radius)


def motif_intersections(center: MotifCenter, radius: float) -> List[IntersectionPoint]:
    """All pairwise intersections between the seven circles of a motif.

    Points shared by several circle pairs are reported once per pair.
    """

    circles = motif_circles(center, radius)
    points: List[IntersectionPoint] = []
    for i, first in enumerate(circles):
        for second in circles[i + 1 :]:
            points.extend(circle_intersections(first, second))
    return points


apply_debug_logging(globals(), logger=logger, skip={"petal_centers"})

__all__ = [
    "HEX_DIRECTIONS",
    "TANGENT_EPS",
    "circle_intersections",
    "motif_circles",
    "motif_intersections",
    "petal_centers",
    "petal_intersections",
]

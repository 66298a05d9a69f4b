"""Distances and angles between drawn points, formatted for display."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from .types import GridUnit, Point, PointLike, as_point


@dataclass(frozen=True)
class Measurement:
    distance: float
    angle: float
    start: Point
    end: Point


def distance(p: PointLike, q: PointLike) -> float:
    a = as_point(p)
    b = as_point(q)
    return math.hypot(b.x - a.x, b.y - a.y)


def angle_degrees(p: PointLike, q: PointLike) -> float:
    """Direction of ``p -> q`` against the positive x axis, in ``[0, 360)``."""

    a = as_point(p)
    b = as_point(q)
    angle = math.degrees(math.atan2(b.y - a.y, b.x - a.x))
    if angle < 0:
        angle += 360.0
    return angle


def measure(p: PointLike, q: PointLike) -> Measurement:
    return Measurement(distance(p, q), angle_degrees(p, q), as_point(p), as_point(q))


def measure_path(points: Sequence[PointLike]) -> List[Measurement]:
    return [measure(points[i], points[i + 1]) for i in range(len(points) - 1)]


def total_length(points: Sequence[PointLike]) -> float:
    return sum(m.distance for m in measure_path(points))


def format_distance(value: float, unit: GridUnit) -> str:
    suffix = "cm" if unit == "cm" else "in"
    return f"{value:.2f} {suffix}"


def format_angle(value: float) -> str:
    return f"{value:.1f}°"


__all__ = [
    "Measurement",
    "angle_degrees",
    "distance",
    "format_angle",
    "format_distance",
    "measure",
    "measure_path",
    "total_length",
]

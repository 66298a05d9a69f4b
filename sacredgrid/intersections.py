"""Viewport-wide aggregation of motif circles and their intersection points."""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial import cKDTree

from .circles import motif_circles, motif_intersections, petal_intersections
from .lattice import DEFAULT_PADDING_FACTOR, motif_centers
from .logging_utils import apply_debug_logging
from .types import Circle, IntersectionPoint, MotifCenter, PointLike, ViewportBounds, as_point

logger = logging.getLogger(__name__)

_BALL_PAD = 1e-9

IntersectionMethod = Callable[[MotifCenter, float], Sequence[IntersectionPoint]]

_METHODS: Dict[str, IntersectionMethod] = {
    "petal": petal_intersections,
    "general": motif_intersections,
}


def _resolve_method(method: str) -> IntersectionMethod:
    try:
        return _METHODS[method]
    except KeyError as exc:
        raise ValueError(f"unknown intersection method {method!r}; expected one of {', '.join(_METHODS)}") from exc


def all_intersections(
    radius: float,
    viewport: ViewportBounds,
    motif_budget: int,
    point_budget: int,
    *,
    padding_factor: float = DEFAULT_PADDING_FACTOR,
    method: str = "petal",
) -> List[IntersectionPoint]:
    """Intersection points inside ``viewport`` of every motif generated for it.

    Motifs come from the padded lattice window, but only points that land in
    ``viewport`` itself count against ``point_budget``. ``method="petal"``
    uses the closed form for the symmetric motif; ``method="general"`` solves
    every circle pair analytically. The result is cut at ``point_budget`` in
    generation order; duplicates shared between neighbouring motifs are kept.
    """

    compute = _resolve_method(method)
    points: List[IntersectionPoint] = []
    if point_budget <= 0:
        return points
    for center in motif_centers(radius, viewport, motif_budget, padding_factor=padding_factor):
        for point in compute(center, radius):
            if not viewport.contains(point):
                continue
            points.append(point)
            if len(points) >= point_budget:
                logger.debug("Intersection budget of %d reached", point_budget)
                return points
    return points


def visible_circles(
    radius: float,
    viewport: ViewportBounds,
    motif_budget: int,
    element_budget: int,
    *,
    padding_factor: float = DEFAULT_PADDING_FACTOR,
) -> List[Circle]:
    """Motif circles whose bounding box overlaps ``viewport``, capped at ``element_budget``."""

    circles: List[Circle] = []
    if element_budget <= 0:
        return circles
    for center in motif_centers(radius, viewport, motif_budget, padding_factor=padding_factor):
        for circle in motif_circles(center, radius):
            if not circle.intersects_bounds(viewport):
                continue
            circles.append(circle)
            if len(circles) >= element_budget:
                logger.debug("Element budget of %d reached", element_budget)
                return circles
    return circles


class IntersectionIndex:
    """Spatial index over the intersection points of one viewport.

    Built once per render cycle by the caller and discarded with it. Queries
    return points in their original generation order where distances tie.
    """

    def __init__(self, points: Iterable[PointLike]):
        self.points: Tuple[IntersectionPoint, ...] = tuple(as_point(p) for p in points)
        self._coords = np.array([p.as_tuple() for p in self.points], dtype=float).reshape(-1, 2)
        self._tree: Optional[cKDTree] = cKDTree(self._coords) if self.points else None

    @classmethod
    def build(
        cls,
        radius: float,
        viewport: ViewportBounds,
        motif_budget: int,
        point_budget: int,
        *,
        padding_factor: float = DEFAULT_PADDING_FACTOR,
        method: str = "petal",
    ) -> "IntersectionIndex":
        points = all_intersections(
            radius,
            viewport,
            motif_budget,
            point_budget,
            padding_factor=padding_factor,
            method=method,
        )
        logger.info("Built intersection index with %d points", len(points))
        return cls(points)

    def __len__(self) -> int:
        return len(self.points)

    def _ball(self, p: IntersectionPoint, distance: float) -> List[int]:
        # the tree compares squared distances; pad the ball and filter with hypot
        reach = distance + _BALL_PAD * max(distance, 1.0)
        indices = np.array(sorted(self._tree.query_ball_point([p.x, p.y], r=reach)), dtype=int)
        if indices.size == 0:
            return []
        distances = np.hypot(self._coords[indices, 0] - p.x, self._coords[indices, 1] - p.y)
        return indices[distances <= distance].tolist()

    def within(self, point: PointLike, distance: float) -> List[IntersectionPoint]:
        """Indexed points no farther than ``distance`` (inclusive), in generation order."""

        if self._tree is None or distance < 0:
            return []
        return [self.points[i] for i in self._ball(as_point(point), distance)]

    def nearest_index(self, point: PointLike, max_distance: float = math.inf) -> Optional[Tuple[int, float]]:
        """Position and distance of the closest indexed point within ``max_distance``.

        Exact ties go to the point generated first. Returns ``None`` when
        nothing lies within ``max_distance`` (inclusive).
        """

        if self._tree is None or max_distance < 0:
            return None
        p = as_point(point)
        if math.isfinite(max_distance):
            indices = self._ball(p, max_distance)
        else:
            indices = list(range(len(self.points)))
        if not indices:
            return None
        distances = np.hypot(self._coords[indices, 0] - p.x, self._coords[indices, 1] - p.y)
        # argmin keeps the first of equal minima
        best = int(np.argmin(distances))
        return indices[best], float(distances[best])

    def nearest(self, point: PointLike, max_distance: float = math.inf) -> Optional[Tuple[IntersectionPoint, float]]:
        """Closest indexed point within ``max_distance`` (inclusive), or ``None``."""

        found = self.nearest_index(point, max_distance)
        if found is None:
            return None
        index, distance = found
        return self.points[index], distance


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "IntersectionIndex",
    "all_intersections",
    "visible_circles",
]

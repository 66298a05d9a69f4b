"""Resolve a raw pointer position to the nearest grid feature within tolerance.

The tolerance is given in screen pixels and divided by the zoom scale, so the
logical snap radius shrinks as the user zooms in. Candidates are gathered
only from a small window around the query point, which keeps the cost of a
snap independent of how much grid is on screen.

When two candidates are exactly equally close the first one enumerated wins.
That order is an artefact of lattice generation and should not be relied on.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple, Union

from .budget import budgets_for
from .diamond import DEFAULT_DIAMOND_SIZE, ORIGIN, diamond_cells, nearest_cell_center
from .intersections import IntersectionIndex, all_intersections
from .lattice import motif_centers
from .logging_utils import apply_debug_logging
from .types import (
    GRID_TYPES,
    DeviceTier,
    FeatureKind,
    GridType,
    GridUnit,
    Point,
    PointLike,
    SnapFeature,
    SnapResult,
    Snapped,
    Unsnapped,
    ViewportBounds,
    as_point,
)
from .units import compute_radius

logger = logging.getLogger(__name__)

DEFAULT_PIXEL_TOLERANCE = 10.0

Candidate = Tuple[FeatureKind, Point]


class FeatureSource(Protocol):
    """Protocol implemented by everything the resolver can snap to."""

    def candidates(self, point: Point, half_window: float) -> List[Candidate]:
        """Features inside the square ``±half_window`` around ``point``, in enumeration order."""

    def closest(self, point: Point) -> Optional[Candidate]:
        """Closed-form nearest feature, or ``None`` to have the resolver index :meth:`candidates`."""


@dataclass(frozen=True)
class HexFeatureSource(FeatureSource):
    """Flower of Life intersections and motif centers for one radius."""

    radius: float
    tier: DeviceTier = "full"
    method: str = "petal"

    def candidates(self, point: Point, half_window: float) -> List[Candidate]:
        window = ViewportBounds.around(point, half_window)
        budgets = budgets_for(self.tier)
        motif_budget = budgets.motif_budget(window)
        found: List[Candidate] = [
            ("intersection", p)
            for p in all_intersections(
                self.radius,
                window,
                motif_budget,
                budgets.point_budget,
                padding_factor=budgets.padding_factor,
                method=self.method,
            )
        ]
        found.extend(
            ("motif_center", c)
            for c in motif_centers(self.radius, window, motif_budget, padding_factor=budgets.padding_factor)
        )
        return found


@dataclass(frozen=True)
class DiamondFeatureSource(FeatureSource):
    """Cell centers of the diamond-scale lattice."""

    cell_size: float = DEFAULT_DIAMOND_SIZE
    origin: Point = ORIGIN

    def candidates(self, point: Point, half_window: float) -> List[Candidate]:
        window = ViewportBounds.around(point, half_window)
        return [("cell_center", cell.center) for cell in diamond_cells(window, self.cell_size, self.origin)]

    def closest(self, point: Point) -> Optional[Candidate]:
        return "cell_center", nearest_cell_center(point, self.cell_size, self.origin)


def feature_source_for(
    grid_type: GridType,
    unit: GridUnit,
    scale: float,
    tier: DeviceTier = "full",
    *,
    diamond_size: float = DEFAULT_DIAMOND_SIZE,
    origin: PointLike = ORIGIN,
) -> FeatureSource:
    if grid_type == "hex":
        return HexFeatureSource(compute_radius(unit, scale), tier)
    if grid_type == "diamond":
        return DiamondFeatureSource(diamond_size, as_point(origin))
    raise ValueError(f"unknown grid type {grid_type!r}; expected one of {', '.join(GRID_TYPES)}")


def snap(
    point: PointLike,
    features: Union[FeatureSource, GridType],
    unit: GridUnit,
    scale: float,
    pixel_tolerance: float = DEFAULT_PIXEL_TOLERANCE,
    *,
    tier: DeviceTier = "full",
) -> SnapResult:
    """Snap ``point`` to the nearest feature of ``features``.

    ``features`` is either a :class:`FeatureSource` or a grid type name, in
    which case the source is built from ``unit`` and ``scale``. Returns
    :class:`Snapped` when the nearest feature lies within
    ``pixel_tolerance / scale`` (inclusive), otherwise :class:`Unsnapped`
    carrying the original point.
    """

    assert scale > 0, f"scale must be positive, got {scale!r}"
    p = as_point(point)
    source = feature_source_for(features, unit, scale, tier) if isinstance(features, str) else features
    tolerance = pixel_tolerance / scale

    closed_form = source.closest(p)
    if closed_form is not None:
        kind, target = closed_form
        distance = math.hypot(p.x - target.x, p.y - target.y)
    else:
        candidates = source.candidates(p, tolerance)
        found = IntersectionIndex(target for _, target in candidates).nearest_index(p, tolerance)
        if found is None:
            logger.debug("No snap candidates within %.6g of (%.6g, %.6g)", tolerance, p.x, p.y)
            return Unsnapped(p)
        index, distance = found
        kind, target = candidates[index]

    if distance <= tolerance:
        return Snapped(target, SnapFeature(kind, target, distance))
    return Unsnapped(p)


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "Candidate",
    "DEFAULT_PIXEL_TOLERANCE",
    "DiamondFeatureSource",
    "FeatureSource",
    "HexFeatureSource",
    "feature_source_for",
    "snap",
]

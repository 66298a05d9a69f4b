"""Advisory guide lines drawn around the pointer.

Hex guides have a constant shape: the same eight lines through the point
whether or not it snapped. Diamond guides depend on nearby features, linking
the point to every cell center close enough to matter.
"""

from __future__ import annotations

import logging
import math
from typing import List

from .circles import HEX_DIRECTIONS, motif_circles
from .diamond import DEFAULT_DIAMOND_SIZE, ORIGIN, diamond_cells
from .lattice import motif_centers
from .logging_utils import apply_debug_logging
from .snap import DEFAULT_PIXEL_TOLERANCE
from .types import GRID_TYPES, GridType, GridUnit, GuideLine, PointLike, ViewportBounds, as_point

logger = logging.getLogger(__name__)

GUIDE_HALF_LENGTH = 1000.0


def hex_guides(point: PointLike, half_length: float = GUIDE_HALF_LENGTH) -> List[GuideLine]:
    """Horizontal, vertical and six 60-degree spokes, each ``±half_length`` through ``point``."""

    p = as_point(point)
    lines = [
        GuideLine(p.x - half_length, p.y, p.x + half_length, p.y, "radial"),
        GuideLine(p.x, p.y - half_length, p.x, p.y + half_length, "radial"),
    ]
    for ux, uy in HEX_DIRECTIONS:
        dx = ux * half_length
        dy = uy * half_length
        lines.append(GuideLine(p.x - dx, p.y - dy, p.x + dx, p.y + dy, "radial"))
    return lines


def diamond_guides(
    point: PointLike,
    scale: float,
    cell_size: float = DEFAULT_DIAMOND_SIZE,
    origin: PointLike = ORIGIN,
    pixel_tolerance: float = DEFAULT_PIXEL_TOLERANCE,
) -> List[GuideLine]:
    """Lines from ``point`` to every cell center within twice the logical snap tolerance."""

    p = as_point(point)
    reach = 2.0 * pixel_tolerance / scale
    lines = []
    for cell in diamond_cells(ViewportBounds.around(p, reach), cell_size, origin):
        if math.hypot(p.x - cell.center_x, p.y - cell.center_y) <= reach:
            lines.append(GuideLine(p.x, p.y, cell.center_x, cell.center_y, "to_center"))
    return lines


def circle_center_guides(
    point: PointLike,
    radius: float,
    scale: float,
    pixel_tolerance: float = 5.0,
) -> List[GuideLine]:
    """Lines from ``point`` to the centers of motif circles whose outline passes near it.

    An alternative, feature-dependent hex guide set. Circles shared by
    neighbouring motifs are linked once per motif.
    """

    p = as_point(point)
    tolerance = pixel_tolerance / scale
    window = ViewportBounds.around(p, 3.0 * radius)
    lines = []
    for center in motif_centers(radius, window, budget=200):
        for circle in motif_circles(center, radius):
            distance = math.hypot(p.x - circle.cx, p.y - circle.cy)
            if abs(distance - circle.r) < tolerance:
                lines.append(GuideLine(p.x, p.y, circle.cx, circle.cy, "to_center"))
    return lines


def guides(
    point: PointLike,
    grid_type: GridType,
    unit: GridUnit,
    scale: float,
    *,
    pixel_tolerance: float = DEFAULT_PIXEL_TOLERANCE,
    diamond_size: float = DEFAULT_DIAMOND_SIZE,
    origin: PointLike = ORIGIN,
    half_length: float = GUIDE_HALF_LENGTH,
) -> List[GuideLine]:
    """Guide lines for the active grid type.

    ``unit`` does not change either guide shape; it is accepted so the call
    mirrors :func:`sacredgrid.snap.snap`.
    """

    assert scale > 0, f"scale must be positive, got {scale!r}"
    if grid_type == "hex":
        return hex_guides(point, half_length)
    if grid_type == "diamond":
        return diamond_guides(point, scale, diamond_size, origin, pixel_tolerance)
    raise ValueError(f"unknown grid type {grid_type!r}; expected one of {', '.join(GRID_TYPES)}")


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "GUIDE_HALF_LENGTH",
    "circle_center_guides",
    "diamond_guides",
    "guides",
    "hex_guides",
]

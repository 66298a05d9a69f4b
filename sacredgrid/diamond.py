"""Axis-aligned diamond-scale lattice."""

from __future__ import annotations

import logging
import math
from typing import List

from .logging_utils import apply_debug_logging
from .types import INNER_DIAMOND_RATIO, DiamondCell, Point, PointLike, ViewportBounds, as_point

logger = logging.getLogger(__name__)

DEFAULT_DIAMOND_SIZE = 40.0
ORIGIN = Point(0.0, 0.0)


def _check_cell_size(cell_size: float) -> None:
    if not cell_size > 0:
        raise ValueError(f"cell_size must be positive, got {cell_size!r}")


def diamond_cells(
    viewport: ViewportBounds,
    cell_size: float = DEFAULT_DIAMOND_SIZE,
    origin: PointLike = ORIGIN,
) -> List[DiamondCell]:
    """Cells whose centers cover ``viewport`` on a ``cell_size`` grid anchored at ``origin``.

    Bounds are snapped outward to whole cells; unlike the hex lattice no row
    is offset. Enumeration is column-major.
    """

    _check_cell_size(cell_size)
    o = as_point(origin)
    first_col = math.floor((viewport.min_x - o.x) / cell_size)
    last_col = math.ceil((viewport.max_x - o.x) / cell_size)
    first_row = math.floor((viewport.min_y - o.y) / cell_size)
    last_row = math.ceil((viewport.max_y - o.y) / cell_size)

    cells = [
        DiamondCell(o.x + col * cell_size, o.y + row * cell_size, cell_size)
        for col in range(first_col, last_col + 1)
        for row in range(first_row, last_row + 1)
    ]
    logger.debug("Generated %d diamond cells", len(cells))
    return cells


def nearest_cell_center(
    point: PointLike,
    cell_size: float = DEFAULT_DIAMOND_SIZE,
    origin: PointLike = ORIGIN,
) -> Point:
    """Round ``point`` to the closest cell center in O(1)."""

    _check_cell_size(cell_size)
    p = as_point(point)
    o = as_point(origin)
    return Point(
        round((p.x - o.x) / cell_size) * cell_size + o.x,
        round((p.y - o.y) / cell_size) * cell_size + o.y,
    )


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "DEFAULT_DIAMOND_SIZE",
    "INNER_DIAMOND_RATIO",
    "ORIGIN",
    "diamond_cells",
    "nearest_cell_center",
]

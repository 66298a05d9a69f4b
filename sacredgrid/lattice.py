"""Hexagonal lattice of Flower of Life motif centers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from .logging_utils import apply_debug_logging
from .types import MotifCenter, Point, PointLike, ViewportBounds, as_point

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3.0)
DEFAULT_PADDING_FACTOR = 2.0


def horizontal_spacing(radius: float) -> float:
    return 2.0 * radius


def vertical_spacing(radius: float) -> float:
    return radius * SQRT3


def row_offset(row: int, radius: float) -> float:
    """Horizontal shift of lattice row ``row``; odd rows nest between even ones."""

    return radius if row % 2 else 0.0


@dataclass(frozen=True)
class LatticeWindow:
    """Integer row/column span of the padded viewport, snapped outward to the lattice."""

    first_row: int
    last_row: int
    first_col: int
    last_col: int

    @property
    def rows(self) -> int:
        return max(self.last_row - self.first_row + 1, 0)


def lattice_window(
    radius: float, viewport: ViewportBounds, padding_factor: float = DEFAULT_PADDING_FACTOR
) -> LatticeWindow:
    hs = horizontal_spacing(radius)
    vs = vertical_spacing(radius)
    padding = radius * padding_factor
    return LatticeWindow(
        first_row=math.floor((viewport.min_y - padding) / vs),
        last_row=math.ceil((viewport.max_y + padding) / vs),
        first_col=math.floor((viewport.min_x - padding) / hs),
        last_col=math.ceil((viewport.max_x + padding) / hs),
    )


def motif_centers(
    radius: float,
    viewport: ViewportBounds,
    budget: int,
    *,
    padding_factor: float = DEFAULT_PADDING_FACTOR,
) -> Iterator[MotifCenter]:
    """Yield motif centers covering ``viewport`` row by row, top to bottom.

    Positions are computed from integer row/column indices, so the same
    inputs always produce the same sequence. Enumeration stops silently once
    ``budget`` centers have been yielded, even if later centers would be
    visible. The returned iterator is lazy; call again to restart.
    """

    if budget <= 0:
        return
    hs = horizontal_spacing(radius)
    vs = vertical_spacing(radius)
    window = lattice_window(radius, viewport, padding_factor)
    end_x = window.last_col * hs

    emitted = 0
    for row in range(window.first_row, window.last_row + 1):
        y = row * vs
        offset = row_offset(row, radius)
        col = window.first_col
        x = col * hs + offset
        while x <= end_x:
            yield Point(x, y)
            emitted += 1
            if emitted >= budget:
                logger.debug("Motif budget of %d reached at row %d", budget, row)
                return
            col += 1
            x = col * hs + offset


def nearest_motif_center(point: PointLike, radius: float) -> MotifCenter:
    """Closest lattice center to ``point``, found from the two bracketing rows."""

    p = as_point(point)
    hs = horizontal_spacing(radius)
    vs = vertical_spacing(radius)
    lower = math.floor(p.y / vs)

    best = None
    best_distance = math.inf
    for row in (lower, lower + 1):
        offset = row_offset(row, radius)
        col = round((p.x - offset) / hs)
        candidate = Point(col * hs + offset, row * vs)
        distance = math.hypot(p.x - candidate.x, p.y - candidate.y)
        if distance < best_distance:
            best, best_distance = candidate, distance
    assert best is not None
    return best


apply_debug_logging(globals(), logger=logger, skip={"row_offset", "horizontal_spacing", "vertical_spacing"})

__all__ = [
    "DEFAULT_PADDING_FACTOR",
    "LatticeWindow",
    "SQRT3",
    "horizontal_spacing",
    "lattice_window",
    "motif_centers",
    "nearest_motif_center",
    "row_offset",
    "vertical_spacing",
]

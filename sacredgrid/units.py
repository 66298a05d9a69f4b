"""Measurement units and the base radius every generator is sized from."""

from __future__ import annotations

import logging
import math

from .logging_utils import apply_debug_logging
from .types import GRID_UNITS, GridUnit

logger = logging.getLogger(__name__)

GRID_UNITS_IN_PIXELS = {
    "inch": 96.0,
    "cm": 37.795,
}

MIN_SCALE = 0.05
MAX_SCALE = 5.0


def _check_unit(unit: str) -> None:
    if unit not in GRID_UNITS:
        raise ValueError(f"unknown grid unit {unit!r}; expected one of {', '.join(GRID_UNITS)}")


def compute_radius(unit: GridUnit, scale: float) -> float:
    """Return the motif radius in logical pixels for ``unit`` at zoom ``scale``.

    Centimetre mode uses one centimetre; inch mode uses one inch times pi.
    ``scale`` must already be clamped by the caller.
    """

    assert scale > 0, f"scale must be positive, got {scale!r}"
    _check_unit(unit)
    if unit == "cm":
        return GRID_UNITS_IN_PIXELS["cm"] / scale
    return GRID_UNITS_IN_PIXELS["inch"] * math.pi / scale


def clamp_scale(scale: float, minimum: float = MIN_SCALE, maximum: float = MAX_SCALE) -> float:
    return min(max(scale, minimum), maximum)


def pixels_to_units(length_px: float, unit: GridUnit) -> float:
    """Convert a logical pixel length into centimetres or inches."""

    _check_unit(unit)
    return length_px / GRID_UNITS_IN_PIXELS[unit]


apply_debug_logging(globals(), logger=logger)

__all__ = [
    "GRID_UNITS_IN_PIXELS",
    "MAX_SCALE",
    "MIN_SCALE",
    "clamp_scale",
    "compute_radius",
    "pixels_to_units",
]

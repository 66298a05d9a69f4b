"""Facade tying the generators, snapping and guides to one grid configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

from .budget import budgets_for
from .diamond import DEFAULT_DIAMOND_SIZE, ORIGIN, diamond_cells
from .guides import guides
from .intersections import all_intersections, visible_circles
from .logging_utils import apply_debug_logging
from .snap import DEFAULT_PIXEL_TOLERANCE, FeatureSource, feature_source_for, snap
from .types import (
    DEVICE_TIERS,
    GRID_TYPES,
    GRID_UNITS,
    Circle,
    DeviceTier,
    DiamondCell,
    GridType,
    GridUnit,
    GuideLine,
    IntersectionPoint,
    Point,
    PointLike,
    SnapResult,
    UnitConfig,
    Unsnapped,
    ViewportBounds,
    as_point,
)
from .units import clamp_scale, compute_radius

logger = logging.getLogger(__name__)


class GridConfigError(ValueError):
    """Raised when a :class:`GridConfig` holds an out-of-range value."""


@dataclass(frozen=True)
class GridConfig:
    """Everything the canvas decides about the grid; the engine holds no other state.

    Attributes:
        grid_type: ``"hex"`` (Flower of Life) or ``"diamond"`` (diamond scale).
        unit: measurement unit; sets the hex motif radius.
        scale: current zoom factor, already clamped by the caller.
        tier: device tier selecting generation budgets.
        snap_to_grid: when false, pointer positions pass through unsnapped.
        show_guides: when false, no guide lines are produced.
        snap_threshold: snap tolerance in screen pixels.
        diamond_size: diamond cell size in logical units.
        origin: logical point the diamond lattice is anchored at.
        opacity: grid stroke opacity in ``[0, 1]``, passed to the renderer.
        color: grid stroke color, passed to the renderer.
        stroke_width: base stroke width in screen pixels before zoom correction.
    """

    grid_type: GridType = "hex"
    unit: GridUnit = "cm"
    scale: float = 1.0
    tier: DeviceTier = "full"
    snap_to_grid: bool = True
    show_guides: bool = True
    snap_threshold: float = DEFAULT_PIXEL_TOLERANCE
    diamond_size: float = DEFAULT_DIAMOND_SIZE
    origin: Point = ORIGIN
    opacity: float = 0.3
    color: str = "#FFFFFF"
    stroke_width: float = 0.5

    def __post_init__(self) -> None:
        if self.grid_type not in GRID_TYPES:
            raise GridConfigError(f"unknown grid type {self.grid_type!r}")
        if self.unit not in GRID_UNITS:
            raise GridConfigError(f"unknown grid unit {self.unit!r}")
        if self.tier not in DEVICE_TIERS:
            raise GridConfigError(f"unknown device tier {self.tier!r}")
        if not self.scale > 0:
            raise GridConfigError(f"scale must be positive, got {self.scale!r}")
        if self.snap_threshold < 0:
            raise GridConfigError(f"snap_threshold must be non-negative, got {self.snap_threshold!r}")
        if not self.diamond_size > 0:
            raise GridConfigError(f"diamond_size must be positive, got {self.diamond_size!r}")
        if not 0.0 <= self.opacity <= 1.0:
            raise GridConfigError(f"opacity must be within [0, 1], got {self.opacity!r}")
        if not self.stroke_width > 0:
            raise GridConfigError(f"stroke_width must be positive, got {self.stroke_width!r}")
        if not isinstance(self.origin, Point):
            object.__setattr__(self, "origin", as_point(self.origin))

    @property
    def unit_config(self) -> UnitConfig:
        return UnitConfig(self.unit, self.scale)

    def with_scale(self, scale: float) -> "GridConfig":
        return replace(self, scale=clamp_scale(scale))


@dataclass(frozen=True)
class GridStyle:
    """Zoom-corrected sizes the renderer draws with, in logical units."""

    stroke_width: float
    point_radius: float
    glow_radius: float
    opacity: float
    color: str


def grid_style(config: GridConfig) -> GridStyle:
    scale = config.scale
    return GridStyle(
        stroke_width=max(config.stroke_width / scale, 0.1),
        point_radius=max(1.0 / scale, 0.5),
        glow_radius=max(4.0 / scale, 1.0),
        opacity=config.opacity,
        color=config.color,
    )


CacheKey = Tuple[str, str, float, str, float, Tuple[float, float]]


class GeometryCache:
    """Caller-owned memo of feature sources keyed by grid configuration.

    Create one alongside the canvas and drop it (or :meth:`clear` it) when the
    canvas goes away; nothing is cached at module level.
    """

    def __init__(self) -> None:
        self._sources: Dict[CacheKey, FeatureSource] = {}

    def __len__(self) -> int:
        return len(self._sources)

    def get(self, config: GridConfig) -> FeatureSource:
        key: CacheKey = (
            config.grid_type,
            config.unit,
            config.scale,
            config.tier,
            config.diamond_size,
            config.origin.as_tuple(),
        )
        source = self._sources.get(key)
        if source is None:
            source = feature_source_for(
                config.grid_type,
                config.unit,
                config.scale,
                config.tier,
                diamond_size=config.diamond_size,
                origin=config.origin,
            )
            self._sources[key] = source
            logger.debug("Cached feature source for %s", key)
        return source

    def clear(self) -> None:
        self._sources.clear()


@dataclass
class GridPrimitives:
    """Geometry to draw for one viewport."""

    circles: List[Circle] = field(default_factory=list)
    intersections: List[IntersectionPoint] = field(default_factory=list)
    cells: List[DiamondCell] = field(default_factory=list)
    style: Optional[GridStyle] = None


@dataclass
class PointerResult:
    snap: SnapResult
    guides: List[GuideLine] = field(default_factory=list)

    @property
    def point(self) -> Point:
        return self.snap.point


class GridEngine:
    """Stateless operations bound to a :class:`GridConfig`."""

    def __init__(self, config: GridConfig, cache: Optional[GeometryCache] = None):
        self.config = config
        self.cache = cache if cache is not None else GeometryCache()

    @property
    def radius(self) -> float:
        return compute_radius(self.config.unit, self.config.scale)

    def primitives(self, viewport: ViewportBounds) -> GridPrimitives:
        config = self.config
        style = grid_style(config)
        if config.grid_type == "diamond":
            cells = diamond_cells(viewport, config.diamond_size, config.origin)
            logger.info("Diamond grid: %d cells", len(cells))
            return GridPrimitives(cells=cells, style=style)

        budgets = budgets_for(config.tier)
        radius = self.radius
        motif_budget = budgets.motif_budget(viewport)
        circles = visible_circles(
            radius,
            viewport,
            motif_budget,
            budgets.element_budget,
            padding_factor=budgets.padding_factor,
        )
        points = all_intersections(
            radius,
            viewport,
            motif_budget,
            budgets.point_budget,
            padding_factor=budgets.padding_factor,
        )
        logger.info(
            "Hex grid: radius=%.6g motif_budget=%d circles=%d intersections=%d",
            radius,
            motif_budget,
            len(circles),
            len(points),
        )
        return GridPrimitives(circles=circles, intersections=points, style=style)

    def pointer(self, point: PointLike) -> PointerResult:
        """Snap a pointer position and build the guides shown around the result."""

        config = self.config
        p = as_point(point)
        if config.snap_to_grid:
            result = snap(
                p,
                self.cache.get(config),
                config.unit,
                config.scale,
                config.snap_threshold,
                tier=config.tier,
            )
        else:
            result = Unsnapped(p)

        lines: List[GuideLine] = []
        if config.show_guides:
            lines = guides(
                result.point,
                config.grid_type,
                config.unit,
                config.scale,
                pixel_tolerance=config.snap_threshold,
                diamond_size=config.diamond_size,
                origin=config.origin,
            )
        return PointerResult(snap=result, guides=lines)


apply_debug_logging(globals(), logger=logger, skip={"GridConfig", "GridStyle", "GridPrimitives", "PointerResult"})

__all__ = [
    "GeometryCache",
    "GridConfig",
    "GridConfigError",
    "GridEngine",
    "GridPrimitives",
    "GridStyle",
    "PointerResult",
    "grid_style",
]

"""Value types shared by the grid generators, the snap resolver and guides."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple, Union

GridUnit = Literal["cm", "inch"]
GridType = Literal["hex", "diamond"]
DeviceTier = Literal["full", "constrained"]
GuideKind = Literal["radial", "to_center"]
FeatureKind = Literal["intersection", "motif_center", "cell_center"]

GRID_UNITS: Tuple[str, ...] = ("cm", "inch")
GRID_TYPES: Tuple[str, ...] = ("hex", "diamond")
DEVICE_TIERS: Tuple[str, ...] = ("full", "constrained")


@dataclass(frozen=True)
class Point:
    """A point in logical drawing coordinates."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


MotifCenter = Point
IntersectionPoint = Point

PointLike = Union[Point, Tuple[float, float]]


def as_point(value: PointLike) -> Point:
    """Return ``value`` as a :class:`Point`, accepting plain ``(x, y)`` pairs."""

    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


@dataclass(frozen=True)
class UnitConfig:
    unit: GridUnit
    scale: float


@dataclass(frozen=True)
class ViewportBounds:
    """Axis-aligned rectangle in logical coordinates (already un-zoomed and un-panned)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, point: PointLike) -> bool:
        p = as_point(point)
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    def expanded(self, margin: float) -> "ViewportBounds":
        return ViewportBounds(
            self.min_x - margin,
            self.min_y - margin,
            self.max_x + margin,
            self.max_y + margin,
        )

    @classmethod
    def around(cls, point: PointLike, half_size: float) -> "ViewportBounds":
        """Square window of side ``2 * half_size`` centred on ``point``."""

        p = as_point(point)
        return cls(p.x - half_size, p.y - half_size, p.x + half_size, p.y + half_size)

    @classmethod
    def from_view(
        cls, offset_x: float, offset_y: float, scale: float, width: float, height: float
    ) -> "ViewportBounds":
        """Bounds visible in a ``width`` x ``height`` element panned by ``offset`` at ``scale``."""

        return cls(
            -offset_x / scale,
            -offset_y / scale,
            (width - offset_x) / scale,
            (height - offset_y) / scale,
        )


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float

    @property
    def center(self) -> Point:
        return Point(self.cx, self.cy)

    def intersects_bounds(self, viewport: ViewportBounds) -> bool:
        """Return ``True`` when the circle's bounding box overlaps ``viewport``."""

        return (
            self.cx + self.r > viewport.min_x
            and self.cx - self.r < viewport.max_x
            and self.cy + self.r > viewport.min_y
            and self.cy - self.r < viewport.max_y
        )


@dataclass(frozen=True)
class SnapFeature:
    """The guide feature a point snapped to."""

    kind: FeatureKind
    point: Point
    distance: float


@dataclass(frozen=True)
class Snapped:
    point: Point
    source: SnapFeature

    @property
    def snapped(self) -> bool:
        return True


@dataclass(frozen=True)
class Unsnapped:
    point: Point

    @property
    def snapped(self) -> bool:
        return False


SnapResult = Union[Snapped, Unsnapped]


@dataclass(frozen=True)
class GuideLine:
    x1: float
    y1: float
    x2: float
    y2: float
    kind: GuideKind

    @property
    def length(self) -> float:
        return ((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2) ** 0.5


Segment = Tuple[Point, Point]

INNER_DIAMOND_RATIO = 0.6


@dataclass(frozen=True)
class DiamondCell:
    """One diamond (rotated square) of the diamond-scale lattice.

    ``size`` is the vertex-to-vertex span; the polygons and diagonals are
    derived on demand for rendering and are not snap targets.
    """

    center_x: float
    center_y: float
    size: float

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    @property
    def inner_size(self) -> float:
        return self.size * INNER_DIAMOND_RATIO

    def vertices(self) -> Tuple[Point, Point, Point, Point]:
        """Top, right, bottom and left vertices of the outer diamond."""

        return _diamond_vertices(self.center_x, self.center_y, self.size)

    def inner_vertices(self) -> Tuple[Point, Point, Point, Point]:
        return _diamond_vertices(self.center_x, self.center_y, self.inner_size)

    def diagonals(self) -> Tuple[Segment, Segment]:
        half = self.size / 2
        cx, cy = self.center_x, self.center_y
        return (
            (Point(cx - half, cy - half), Point(cx + half, cy + half)),
            (Point(cx + half, cy - half), Point(cx - half, cy + half)),
        )


def _diamond_vertices(cx: float, cy: float, size: float) -> Tuple[Point, Point, Point, Point]:
    half = size / 2
    return (
        Point(cx, cy - half),
        Point(cx + half, cy),
        Point(cx, cy + half),
        Point(cx - half, cy),
    )


__all__ = [
    "Circle",
    "DEVICE_TIERS",
    "DeviceTier",
    "DiamondCell",
    "FeatureKind",
    "GRID_TYPES",
    "GRID_UNITS",
    "GridType",
    "GridUnit",
    "GuideKind",
    "GuideLine",
    "INNER_DIAMOND_RATIO",
    "IntersectionPoint",
    "MotifCenter",
    "Point",
    "PointLike",
    "Segment",
    "SnapFeature",
    "SnapResult",
    "Snapped",
    "UnitConfig",
    "Unsnapped",
    "ViewportBounds",
    "as_point",
]

from .types import (
    Circle,
    DiamondCell,
    GuideLine,
    Point,
    SnapFeature,
    SnapResult,
    Snapped,
    UnitConfig,
    Unsnapped,
    ViewportBounds,
)
from .units import GRID_UNITS_IN_PIXELS, clamp_scale, compute_radius, pixels_to_units
from .budget import TierBudgets, budgets_for, motif_budget
from .lattice import motif_centers, nearest_motif_center
from .circles import circle_intersections, motif_circles, motif_intersections, petal_intersections
from .intersections import IntersectionIndex, all_intersections, visible_circles
from .diamond import diamond_cells, nearest_cell_center
from .snap import DiamondFeatureSource, FeatureSource, HexFeatureSource, feature_source_for, snap
from .guides import circle_center_guides, diamond_guides, guides, hex_guides
from .measurement import Measurement, angle_degrees, distance, format_angle, format_distance, measure
from .engine import GeometryCache, GridConfig, GridConfigError, GridEngine, GridPrimitives, PointerResult

__all__ = [
    'Circle',
    'DiamondCell',
    'GuideLine',
    'Point',
    'SnapFeature',
    'SnapResult',
    'Snapped',
    'UnitConfig',
    'Unsnapped',
    'ViewportBounds',
    'GRID_UNITS_IN_PIXELS',
    'clamp_scale',
    'compute_radius',
    'pixels_to_units',
    'TierBudgets',
    'budgets_for',
    'motif_budget',
    'motif_centers',
    'nearest_motif_center',
    'circle_intersections',
    'motif_circles',
    'motif_intersections',
    'petal_intersections',
    'IntersectionIndex',
    'all_intersections',
    'visible_circles',
    'diamond_cells',
    'nearest_cell_center',
    'DiamondFeatureSource',
    'FeatureSource',
    'HexFeatureSource',
    'feature_source_for',
    'snap',
    'circle_center_guides',
    'diamond_guides',
    'guides',
    'hex_guides',
    'Measurement',
    'angle_degrees',
    'distance',
    'format_angle',
    'format_distance',
    'measure',
    'GeometryCache',
    'GridConfig',
    'GridConfigError',
    'GridEngine',
    'GridPrimitives',
    'PointerResult',
]

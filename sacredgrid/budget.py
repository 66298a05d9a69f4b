"""Per-device-tier caps on how much geometry a single call may generate.

The caps are the engine's only backpressure: instead of degrading
asynchronously, every generator stops emitting once its budget is spent.
Truncation follows generation order, so features enumerated last (the bottom
and right of the padded window) are the ones that disappear.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from .types import DEVICE_TIERS, DeviceTier, ViewportBounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierBudgets:
    """Generation limits for one device tier.

    ``motif_floor``/``motif_ceiling`` bound the area-derived motif budget;
    a tier with ``motif_fixed`` set ignores the viewport area entirely.
    """

    motif_floor: int
    motif_ceiling: int
    motif_area_divisor: float
    padding_factor: float
    point_budget: int
    element_budget: int
    motif_fixed: Optional[int] = None

    def motif_budget(self, viewport: ViewportBounds) -> int:
        if self.motif_fixed is not None:
            return self.motif_fixed
        area = max(viewport.area, 0.0)
        by_area = int(area // self.motif_area_divisor)
        return min(self.motif_ceiling, max(self.motif_floor, by_area))


FULL_BUDGETS = TierBudgets(
    motif_floor=200,
    motif_ceiling=800,
    motif_area_divisor=10000.0,
    padding_factor=2.0,
    point_budget=500,
    element_budget=2000,
)

CONSTRAINED_BUDGETS = TierBudgets(
    motif_floor=25,
    motif_ceiling=25,
    motif_area_divisor=10000.0,
    padding_factor=1.5,
    point_budget=100,
    element_budget=175,
    motif_fixed=25,
)

_BUDGETS: Dict[str, TierBudgets] = {
    "full": FULL_BUDGETS,
    "constrained": CONSTRAINED_BUDGETS,
}


def budgets_for(tier: DeviceTier) -> TierBudgets:
    try:
        return _BUDGETS[tier]
    except KeyError as exc:
        raise ValueError(f"unknown device tier {tier!r}; expected one of {', '.join(DEVICE_TIERS)}") from exc


def motif_budget(viewport: ViewportBounds, tier: DeviceTier = "full") -> int:
    budget = budgets_for(tier).motif_budget(viewport)
    logger.debug("Motif budget for tier=%s area=%.6g -> %d", tier, viewport.area, budget)
    return budget


__all__ = [
    "CONSTRAINED_BUDGETS",
    "FULL_BUDGETS",
    "TierBudgets",
    "budgets_for",
    "motif_budget",
]

"""Proactive layout advice and next-step guidance."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from ...entities import Equipment
from ..ducting.constants import CFM_PER_COLLECTOR_HP
from .models import LayoutAdvice

ZONING_EQUIPMENT_THRESHOLD = 5


class LayoutAdvisor:
    """Reviews a layout and reports critical issues, warnings and tips.

    Args:
        building_width: Optional envelope width; enables far-wall checks.
        building_depth: Optional envelope depth; enables far-wall checks.
    """

    def __init__(
        self,
        building_width: float | None = None,
        building_depth: float | None = None,
    ) -> None:
        self.building_width = building_width
        self.building_depth = building_depth

    def _outside(self, equipment: Equipment, x: float, y: float) -> bool:
        if x < 0 or y < 0:
            return True
        if self.building_width is not None and x + equipment.placed_width > self.building_width:
            return True
        if self.building_depth is not None and y + equipment.placed_depth > self.building_depth:
            return True
        return False

    def analyze(
        self,
        equipment: Sequence[Equipment],
        placements: Mapping[str, tuple[float, float]],
    ) -> LayoutAdvice:
        """Check bounds and summarize utility demand.

        Args:
            equipment: Items in the layout.
            placements: Equipment id to corner (x, y).
        """
        critical = [
            f"{eq.name} is outside building bounds"
            for eq in equipment
            if eq.id in placements and self._outside(eq, *placements[eq.id])
        ]
        warnings: list[str] = []
        tips: list[str] = []

        dust = [eq for eq in equipment if eq.requires_dust]
        if dust:
            total_cfm = sum(eq.dust_cfm for eq in dust)
            tips.append(
                f"Total dust collection requirement: {total_cfm:g} CFM - "
                f"consider {math.ceil(total_cfm / CFM_PER_COLLECTOR_HP)} HP collector"
            )

        air_count = sum(1 for eq in equipment if eq.requires_air)
        if air_count:
            tips.append(f"{air_count} tools require compressed air - plan main air line route")

        total_watts = sum(eq.power_draw_watts for eq in equipment if eq.requires_electrical)
        if total_watts > 0:
            warnings.append(
                f"Total power draw: {total_watts:.0f}W - ensure adequate electrical service"
            )

        if len(equipment) > ZONING_EQUIPMENT_THRESHOLD:
            tips.append("Consider creating workflow zones for different operations")

        return LayoutAdvice(
            critical=tuple(critical), warnings=tuple(warnings), tips=tuple(tips)
        )

    @staticmethod
    def suggest_next_action(
        equipment: Sequence[Equipment],
        placements: Mapping[str, tuple[float, float]],
        has_walls: bool = True,
    ) -> str:
        """Next design step for a layout in progress."""
        if not has_walls:
            return "Start by drawing your shop walls"
        if not equipment:
            return "Add equipment to your shop layout"
        if len(placements) < len(equipment):
            return "Place remaining equipment in your shop"
        if any(eq.requires_dust for eq in equipment):
            return "Design dust collection system routing"
        if any(eq.requires_air for eq in equipment):
            return "Plan compressed air line routing"
        return "Review and optimize your layout"


__all__ = ["LayoutAdvisor"]

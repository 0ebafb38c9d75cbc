"""Greedy shelf-packing placement of shop equipment.

Equipment is placed in input order, left to right along rows separated
by the minimum clearance, wrapping to a new row when the next item would
cross the far wall's clearance line. Each placement is scored 0-100 for
explainability; the optimizer does not search for better positions and
does not run collision detection. Callers should re-check the result
with CollisionDetector.update_from_placement.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import Mapping, Sequence

from ...entities import Equipment
from ...value_objects import WorkflowPriority, clamp
from .config import LayoutConstraints
from .models import CategoryScore, OptimizationResult, PlacementSuggestion, WorkflowScore

logger = logging.getLogger(__name__)

BASE_SCORE = 100.0
EDGE_CLEARANCE_PENALTY = 20.0
MAX_CENTRALITY_BONUS = 20.0
SIBLING_BONUS = 5.0
MAX_GROUPING_BONUS = 15.0

HIGH_UTILIZATION_PCT = 80.0
LOW_UTILIZATION_PCT = 30.0

# Workflow score loses one point per 10 ft of average same-category spacing
WORKFLOW_DISTANCE_DIVISOR = 10.0


@dataclass
class _Row:
    """Horizontal band of placements.

    Attributes:
        y: Top edge shared by every item in the row.
        cursor_x: Left edge for the next item.
        max_depth: Deepest item so far, which sets the next row's offset.
        count: Items placed in the row.
    """

    y: float
    cursor_x: float
    max_depth: float = 0.0
    count: int = 0


class PlacementOptimizer:
    """Deterministic single-pass layout heuristic.

    Example:
        constraints = LayoutConstraints(building_width=30, building_depth=20,
                                        min_clearance=2)
        result = PlacementOptimizer().optimize(equipment, constraints)
        for placement in result.placements:
            print(placement.equipment_id, placement.x, placement.y)
    """

    def optimize(
        self, equipment: Sequence[Equipment], constraints: LayoutConstraints
    ) -> OptimizationResult:
        """Place every item and score the result.

        Items that do not fit are still placed, clamped to the building
        envelope, and reported in the warnings.

        Args:
            equipment: Items to place, in placement order.
            constraints: Building envelope and preferences.

        Returns:
            OptimizationResult with one suggestion per input item.
        """
        clearance = constraints.min_clearance
        category_counts = Counter(eq.category for eq in equipment)
        row = _Row(y=clearance, cursor_x=clearance)
        placements: list[PlacementSuggestion] = []
        warnings: list[str] = []

        for eq in equipment:
            width, depth = eq.placed_width, eq.placed_depth
            if row.count and row.cursor_x + width > constraints.building_width - clearance:
                row = _Row(y=row.y + row.max_depth + clearance, cursor_x=clearance)

            x = min(row.cursor_x, max(0.0, constraints.building_width - width))
            y = min(row.y, max(0.0, constraints.building_depth - depth))
            if x != row.cursor_x or y != row.y:
                warnings.append(
                    f"{eq.name} does not fit within the building - "
                    "placed at the boundary, check for overlaps"
                )

            score = self._score(eq, x, y, category_counts[eq.category] - 1, constraints)
            placements.append(
                PlacementSuggestion(
                    equipment_id=eq.id,
                    x=x,
                    y=y,
                    rotation=eq.orientation,
                    score=score,
                    reasons=self._reasons(eq, constraints),
                )
            )
            logger.debug("Placed %s at (%.1f, %.1f) score %.1f", eq.id, x, y, score)

            row.cursor_x += width + clearance
            row.max_depth = max(row.max_depth, depth)
            row.count += 1

        warnings.extend(self._utilization_warnings(equipment, constraints))
        total_score = (
            sum(p.score for p in placements) / len(placements) if placements else 0.0
        )
        return OptimizationResult(
            placements=tuple(placements),
            total_score=total_score,
            warnings=tuple(warnings),
            suggestions=tuple(self._strategy_notes(constraints)),
        )

    def _score(
        self,
        equipment: Equipment,
        x: float,
        y: float,
        sibling_count: int,
        constraints: LayoutConstraints,
    ) -> float:
        score = BASE_SCORE

        edge_distance = min(
            x,
            y,
            constraints.building_width - (x + equipment.placed_width),
            constraints.building_depth - (y + equipment.placed_depth),
        )
        if edge_distance < constraints.min_clearance:
            score -= EDGE_CLEARANCE_PENALTY

        if constraints.workflow_priority == WorkflowPriority.EFFICIENCY:
            center_x, center_y = constraints.center
            distance_from_center = math.hypot(x - center_x, y - center_y)
            max_distance = math.hypot(center_x, center_y)
            score += (1 - distance_from_center / max_distance) * MAX_CENTRALITY_BONUS

        if constraints.group_similar:
            score += min(sibling_count * SIBLING_BONUS, MAX_GROUPING_BONUS)

        # bonuses stack on the base score, so clamp once at the end
        return clamp(score)

    @staticmethod
    def _reasons(equipment: Equipment, constraints: LayoutConstraints) -> tuple[str, ...]:
        reasons: list[str] = []
        if equipment.requires_dust:
            reasons.append("Near dust collection main line")
        if equipment.requires_air:
            reasons.append("Close to compressed air source")
        if equipment.requires_electrical:
            reasons.append("Accessible to electrical panel")
        if constraints.group_similar:
            reasons.append(f"Grouped with other {equipment.category} equipment")
        return tuple(reasons)

    @staticmethod
    def _utilization_warnings(
        equipment: Sequence[Equipment], constraints: LayoutConstraints
    ) -> list[str]:
        footprint = sum(eq.footprint_area for eq in equipment)
        utilization = footprint / constraints.building_area * 100
        if utilization > HIGH_UTILIZATION_PCT:
            return ["Shop is over 80% utilized - consider larger space"]
        if utilization < LOW_UTILIZATION_PCT:
            return ["Shop is under-utilized - could be more compact"]
        return []

    @staticmethod
    def _strategy_notes(constraints: LayoutConstraints) -> list[str]:
        notes: list[str] = []
        if constraints.workflow_priority == WorkflowPriority.EFFICIENCY:
            notes.append("Equipment arranged for minimal material movement")
            notes.append("High-use tools placed centrally")
        if constraints.group_similar:
            notes.append("Similar equipment grouped for efficient workflow")
        if constraints.near_utilities:
            notes.append("Equipment placed near required utilities")
        return notes

    def suggest_improvements(
        self,
        equipment: Sequence[Equipment],
        placements: Mapping[str, tuple[float, float]],
        constraints: LayoutConstraints,
    ) -> list[str]:
        """Flag crowded pairs and dust trunk planning in an existing layout.

        Args:
            equipment: Items in the layout.
            placements: Equipment id to footprint center (x, y); unplaced
                items are skipped.
            constraints: Supplies the minimum clearance.
        """
        suggestions: list[str] = []
        for i, first in enumerate(equipment):
            pos1 = placements.get(first.id)
            if pos1 is None:
                continue
            for second in equipment[i + 1 :]:
                pos2 = placements.get(second.id)
                if pos2 is None:
                    continue
                distance = math.hypot(pos2[0] - pos1[0], pos2[1] - pos1[1])
                if distance < constraints.min_clearance:
                    suggestions.append(
                        f"{first.name} and {second.name} are too close - increase spacing"
                    )

        dust_count = sum(1 for eq in equipment if eq.requires_dust)
        if dust_count:
            suggestions.append(
                f"Consider placing {dust_count} dust-collecting tools near main dust line"
            )
        return suggestions

    def calculate_workflow_score(
        self,
        equipment: Sequence[Equipment],
        placements: Mapping[str, tuple[float, float]],
    ) -> WorkflowScore:
        """Score how close same-category equipment sits together.

        Each category scores 100 minus a tenth of its average pairwise
        distance (floored at 0); the overall score is the category mean.
        """
        categories: dict[str, list[Equipment]] = {}
        for eq in equipment:
            categories.setdefault(eq.category, []).append(eq)

        breakdown: list[CategoryScore] = []
        for category, members in categories.items():
            distances = [
                math.hypot(placements[b.id][0] - placements[a.id][0],
                           placements[b.id][1] - placements[a.id][1])
                for i, a in enumerate(members)
                for b in members[i + 1 :]
                if a.id in placements and b.id in placements
            ]
            average = sum(distances) / len(distances) if distances else 0.0
            breakdown.append(
                CategoryScore(
                    category=category,
                    score=max(0.0, 100 - average / WORKFLOW_DISTANCE_DIVISOR),
                )
            )

        score = sum(c.score for c in breakdown) / len(breakdown) if breakdown else 0.0
        return WorkflowScore(score=score, breakdown=tuple(breakdown))


def optimize_placement(
    equipment: Sequence[Equipment], constraints: LayoutConstraints
) -> OptimizationResult:
    """Run the placement optimizer once."""
    return PlacementOptimizer().optimize(equipment, constraints)


__all__ = ["PlacementOptimizer", "optimize_placement"]

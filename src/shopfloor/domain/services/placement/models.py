"""Result types for layout optimization and analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from ...entities import Equipment


@dataclass(frozen=True)
class PlacementSuggestion:
    """Proposed position for one piece of equipment.

    Attributes:
        equipment_id: Equipment being placed.
        x: Footprint left edge in feet.
        y: Footprint top edge in feet.
        rotation: Orientation in degrees.
        score: Placement quality, 0-100.
        reasons: Human-readable justifications (do not affect the score).
    """

    equipment_id: str
    x: float
    y: float
    rotation: float
    score: float
    reasons: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class OptimizationResult:
    """Output of one optimization pass.

    Attributes:
        placements: One suggestion per input item, in input order.
        total_score: Mean placement score (0 with no equipment).
        warnings: Utilization and fit warnings.
        suggestions: Notes describing the chosen strategy.
    """

    placements: tuple[PlacementSuggestion, ...] = field(default_factory=tuple)
    total_score: float = 0.0
    warnings: tuple[str, ...] = field(default_factory=tuple)
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    def positions(self) -> dict[str, tuple[float, float]]:
        """Map of equipment id to suggested corner position."""
        return {p.equipment_id: (p.x, p.y) for p in self.placements}

    def center_positions(self, equipment: Iterable[Equipment]) -> dict[str, tuple[float, float]]:
        """Map of equipment id to the center of its placed footprint.

        Placements whose equipment is not in ``equipment`` are skipped.
        """
        footprints = {eq.id: eq for eq in equipment}
        centers: dict[str, tuple[float, float]] = {}
        for p in self.placements:
            eq = footprints.get(p.equipment_id)
            if eq is None:
                continue
            centers[p.equipment_id] = (p.x + eq.placed_width / 2, p.y + eq.placed_depth / 2)
        return centers


@dataclass(frozen=True)
class CategoryScore:
    category: str
    score: float


@dataclass(frozen=True)
class WorkflowScore:
    """How tightly each equipment category is clustered."""

    score: float
    breakdown: tuple[CategoryScore, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LayoutAdvice:
    """Proactive advice about a layout, by severity."""

    critical: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    tips: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_critical(self) -> bool:
        return bool(self.critical)


__all__ = [
    "CategoryScore",
    "LayoutAdvice",
    "OptimizationResult",
    "PlacementSuggestion",
    "WorkflowScore",
]

"""Layout constraints for the placement optimizer."""

from __future__ import annotations

from dataclasses import dataclass

from ...value_objects import WorkflowPriority


@dataclass(frozen=True)
class LayoutConstraints:
    """Building envelope and placement preferences.

    Supplied fresh for each optimization call and never mutated.

    Attributes:
        building_width: Interior width along X in feet.
        building_depth: Interior depth along Y in feet.
        min_clearance: Minimum aisle between equipment and walls.
        workflow_priority: What the scoring favors.
        group_similar: Reward keeping same-category equipment together.
        near_utilities: Prefer positions near dust, air and power drops.
    """

    building_width: float
    building_depth: float
    min_clearance: float = 3.0
    workflow_priority: WorkflowPriority = WorkflowPriority.BALANCED
    group_similar: bool = False
    near_utilities: bool = False

    def __post_init__(self) -> None:
        if self.building_width <= 0 or self.building_depth <= 0:
            raise ValueError("Building dimensions must be positive")
        if self.min_clearance < 0:
            raise ValueError("min_clearance must be non-negative")

    @property
    def building_area(self) -> float:
        return self.building_width * self.building_depth

    @property
    def center(self) -> tuple[float, float]:
        return (self.building_width / 2, self.building_depth / 2)


__all__ = ["LayoutConstraints"]

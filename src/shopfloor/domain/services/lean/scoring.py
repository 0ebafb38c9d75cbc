"""Weighted composite lean score for a shop layout."""

from __future__ import annotations

from ...value_objects import clamp
from .constants import (
    ACCEPTABLE_CATEGORY_SCORE,
    GOOD_DENSITY_MAX_SQFT,
    GOOD_DENSITY_MIN_SQFT,
    MATERIAL_FLOW_WEIGHT,
    ORGANIZATION_WEIGHT,
    SAFE_SPACING_SQFT,
    SAFETY_WEIGHT,
    SPARSE_DENSITY_SQFT,
    WORKER_MOVEMENT_BANDS,
    WORKER_MOVEMENT_FLOOR_SCORE,
    WORKER_MOVEMENT_WEIGHT,
)
from .models import LeanCategory, LeanScore, WorkflowAnalysisResult
from .workflow import round_half_up

# category -> (issues, corrective recommendations, passing recommendation)
_CATEGORY_TEXT: dict[str, tuple[tuple[str, ...], tuple[str, ...], str]] = {
    "Material Flow": (
        ("High travel distance between operations", "Inefficient workflow sequence"),
        ("Relocate equipment to minimize travel", "Consider U-shaped or cellular layout"),
        "Material flow is optimized",
    ),
    "Worker Movement": (
        ("Excessive walking between stations", "Poor equipment accessibility"),
        ("Group frequently-used equipment together", "Add tool storage at each workstation"),
        "Worker movement is efficient",
    ),
    "Workspace Organization": (
        ("Cluttered workspace", "Insufficient storage"),
        ("Implement 5S methodology", "Add designated storage areas"),
        "Workspace is well-organized",
    ),
    "Safety & Ergonomics": (
        ("Insufficient safety clearances", "Poor ergonomic layout"),
        ("Add safety zones around equipment", "Ensure proper aisle widths (min 4 ft)"),
        "Safety standards met",
    ),
}


def material_flow_score(analysis: WorkflowAnalysisResult) -> int:
    return int(round_half_up(analysis.waste_score * 0.6 + analysis.efficiency * 0.4))


def worker_movement_score(total_distance: float, equipment_count: int) -> int:
    average = total_distance / max(1, equipment_count - 1)
    for upper_bound, score in WORKER_MOVEMENT_BANDS:
        if average < upper_bound:
            return score
    return WORKER_MOVEMENT_FLOOR_SCORE


def organization_score(
    equipment_count: int, layout_area: float, has_organized_storage: bool
) -> int:
    sqft_per_machine = layout_area / max(1, equipment_count)
    score = 70
    if GOOD_DENSITY_MIN_SQFT <= sqft_per_machine <= GOOD_DENSITY_MAX_SQFT:
        score += 20
    elif sqft_per_machine < GOOD_DENSITY_MIN_SQFT:
        score -= 10
    elif sqft_per_machine > SPARSE_DENSITY_SQFT:
        score -= 10
    if has_organized_storage:
        score += 10
    return int(clamp(score))


def safety_score(equipment_count: int, layout_area: float, has_safety_zones: bool) -> int:
    score = 60
    if layout_area / max(1, equipment_count) >= SAFE_SPACING_SQFT:
        score += 20
    if has_safety_zones:
        score += 20
    return int(clamp(score))


def _category(name: str, score: int, weight: float) -> LeanCategory:
    issues, fixes, passing = _CATEGORY_TEXT[name]
    if score < ACCEPTABLE_CATEGORY_SCORE:
        return LeanCategory(name, score, weight, issues=issues, recommendations=fixes)
    return LeanCategory(name, score, weight, recommendations=(passing,))


def calculate_lean_score(
    analysis: WorkflowAnalysisResult,
    equipment_count: int,
    layout_area: float,
    has_organized_storage: bool = False,
    has_safety_zones: bool = False,
) -> LeanScore:
    """Combine workflow metrics and floor density into a lean score.

    Args:
        analysis: Result of analyze_workflow.
        equipment_count: Machines in the layout.
        layout_area: Floor area in square feet.
        has_organized_storage: Shop has designated storage.
        has_safety_zones: Shop has marked safety zones.

    Returns:
        LeanScore with weights Material Flow 0.4, Worker Movement 0.3,
        Workspace Organization 0.2 and Safety & Ergonomics 0.1.
    """
    if equipment_count < 0 or layout_area < 0:
        raise ValueError("equipment_count and layout_area must be non-negative")

    material = material_flow_score(analysis)
    movement = worker_movement_score(analysis.total_distance, equipment_count)
    organization = organization_score(equipment_count, layout_area, has_organized_storage)
    safety = safety_score(equipment_count, layout_area, has_safety_zones)

    breakdown = (
        _category("Material Flow", material, MATERIAL_FLOW_WEIGHT),
        _category("Worker Movement", movement, WORKER_MOVEMENT_WEIGHT),
        _category("Workspace Organization", organization, ORGANIZATION_WEIGHT),
        _category("Safety & Ergonomics", safety, SAFETY_WEIGHT),
    )
    overall = int(round_half_up(sum(c.score * c.weight for c in breakdown)))
    return LeanScore(
        overall=overall,
        material_flow=material,
        worker_movement=movement,
        organization=organization,
        safety=safety,
        breakdown=breakdown,
    )


__all__ = [
    "calculate_lean_score",
    "material_flow_score",
    "organization_score",
    "safety_score",
    "worker_movement_score",
]

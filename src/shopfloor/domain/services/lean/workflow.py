"""Travel distance, time and waste analysis for a workflow sequence.

Every logged cycle minute is counted as value-added time, so efficiency
reflects transport waste only.
"""

from __future__ import annotations

import logging
import math

from ...entities import WorkflowSequence
from ...value_objects import clamp
from .constants import (
    BACKTRACK_SEGMENT_FT,
    CRITICAL_DISTANCE_FT,
    HIGH_EFFICIENCY_PCT,
    LOW_EFFICIENCY_PCT,
    PRIORITY_SEGMENT_FT,
    TIP_DISTANCE_FT,
    WALKING_SPEED_FPM,
    WARNING_DISTANCE_FT,
    WASTE_FEET_PER_POINT,
)
from .models import PathSegment, WorkflowAnalysisResult

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for non-negative values.

    Python's round() uses banker's rounding, which would report 94.5 as 94.
    """
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def _distance_suggestion(total_distance: float) -> str:
    if total_distance > CRITICAL_DISTANCE_FT:
        return (
            "CRITICAL: Total travel distance is very high (>500 ft). "
            "Consider major layout reorganization."
        )
    if total_distance > WARNING_DISTANCE_FT:
        return (
            "WARNING: Travel distance is high (>300 ft). "
            "Look for opportunities to relocate equipment."
        )
    if total_distance > TIP_DISTANCE_FT:
        return "TIP: Travel distance is acceptable but could be optimized further."
    return "EXCELLENT: Travel distance is minimal. Layout is well-optimized."


def detect_backtracking(segments: tuple[PathSegment, ...]) -> list[int]:
    """Indices of hops long enough to suggest material moving backward."""
    return [i for i, s in enumerate(segments) if s.distance > BACKTRACK_SEGMENT_FT]


def workflow_suggestions(
    total_distance: float,
    segments: tuple[PathSegment, ...],
    efficiency: float,
) -> list[str]:
    """Threshold-driven advice for a workflow."""
    suggestions = [_distance_suggestion(total_distance)]

    if segments:
        # first of equal-length hops wins
        longest = max(segments, key=lambda s: s.distance)
        if longest.distance > PRIORITY_SEGMENT_FT:
            suggestions.append(
                f"PRIORITY: Reduce distance between {longest.from_name} and "
                f"{longest.to_name} (currently {longest.distance:g} ft)"
            )

    if efficiency < LOW_EFFICIENCY_PCT:
        suggestions.append(
            "Low efficiency detected. Consider grouping related operations closer together."
        )
    elif efficiency > HIGH_EFFICIENCY_PCT:
        suggestions.append("Excellent workflow efficiency! Minimal transport waste.")

    backtracking = detect_backtracking(segments)
    if backtracking:
        suggestions.append(
            f"BACKTRACKING DETECTED: Material moves backward {len(backtracking)} time(s). "
            "Resequence operations or relocate equipment."
        )
    return suggestions


def analyze_workflow(sequence: WorkflowSequence) -> WorkflowAnalysisResult:
    """Compute travel distance, timing, efficiency and waste for a route.

    Args:
        sequence: Ordered stations of the route.

    Returns:
        WorkflowAnalysisResult with rounded metrics and suggestions.
    """
    steps = sequence.steps
    if len(steps) < 2:
        cycle_time = steps[0].cycle_time_minutes if steps else 0.0
        return WorkflowAnalysisResult(
            total_distance=0.0,
            total_cycle_time=cycle_time,
            value_added_time=cycle_time,
            transport_time=0.0,
            waste_score=100,
            efficiency=100,
            suggestions=("Add more steps to analyze workflow",),
        )

    total_distance = 0.0
    segments: list[PathSegment] = []
    for current, following in zip(steps, steps[1:]):
        distance = current.position.distance_to(following.position)
        total_distance += distance
        segments.append(
            PathSegment(
                from_name=current.equipment_name,
                to_name=following.equipment_name,
                distance=round_half_up(distance, 1),
            )
        )

    total_cycle_time = sum(step.cycle_time_minutes for step in steps)
    value_added_time = total_cycle_time
    transport_time = total_distance / WALKING_SPEED_FPM
    efficiency = value_added_time / (value_added_time + transport_time) * 100
    waste_score = clamp(100 - total_distance / WASTE_FEET_PER_POINT)

    path_segments = tuple(segments)
    logger.debug(
        "Workflow %r: %d steps, %.1f ft, %.1f%% efficient",
        sequence.name,
        len(steps),
        total_distance,
        efficiency,
    )
    return WorkflowAnalysisResult(
        total_distance=round_half_up(total_distance, 1),
        total_cycle_time=round_half_up(total_cycle_time, 1),
        value_added_time=round_half_up(value_added_time, 1),
        transport_time=round_half_up(transport_time, 1),
        waste_score=int(round_half_up(waste_score)),
        efficiency=int(round_half_up(efficiency)),
        suggestions=tuple(workflow_suggestions(total_distance, path_segments, efficiency)),
        path_segments=path_segments,
    )


__all__ = [
    "analyze_workflow",
    "detect_backtracking",
    "round_half_up",
    "workflow_suggestions",
]

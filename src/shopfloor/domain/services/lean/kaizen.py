"""Kaizen: improvement suggestions, impact tracking and PDCA planning.

Suggestions are rule-driven from a workflow's lean metrics and carry
rough payoff estimates. Time savings are priced as labor at
LABOR_RATE_PER_HOUR over WORKING_DAYS_PER_YEAR; fixed savings for cell
manufacturing and 5S are rules of thumb.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from .constants import (
    CELL_ANNUAL_SAVINGS,
    CELL_DISTANCE_SHARE,
    CELL_EFFICIENCY_GAIN,
    CELL_SPACING_FT,
    CRITICAL_DISTANCE_FT,
    FIVE_S_ANNUAL_SAVINGS,
    FIVE_S_EFFICIENCY_GAIN,
    FIVE_S_LEAN_SCORE,
    KAIZEN_EFFICIENCY_PCT,
    LABOR_RATE_PER_HOUR,
    NON_VALUE_ADDED_EFFICIENCY_GAIN,
    NON_VALUE_ADDED_MINUTES_SAVED,
    TOOL_STORAGE_MINUTES_SAVED,
    TRAVEL_REDUCTION_SHARE,
    WALKING_SPEED_FPM,
    WARNING_DISTANCE_FT,
    WORKING_DAYS_PER_YEAR,
)
from .models import (
    Effort,
    ImplementedImprovements,
    ImprovementCategory,
    ImprovementImpact,
    ImprovementPriority,
    ImprovementSuggestion,
    KaizenDashboard,
    KaizenEvent,
    KaizenEventType,
    KaizenMetrics,
    LeanScore,
    MetricChange,
    PDCACycle,
    SuggestionStatus,
    WorkflowAnalysisResult,
)
from .workflow import round_half_up

logger = logging.getLogger(__name__)

# ROI divides annual savings by this weight
EFFORT_WEIGHT: dict[Effort, int] = {
    Effort.LOW: 1,
    Effort.MEDIUM: 2,
    Effort.HIGH: 3,
}


def annual_labor_savings(minutes_per_day: float) -> float:
    """Dollars per year saved by recovering ``minutes_per_day`` of labor."""
    return round_half_up(
        minutes_per_day / 60 * LABOR_RATE_PER_HOUR * WORKING_DAYS_PER_YEAR, 2
    )


def generate_improvement_suggestions(
    lean_score: float,
    workflow_distance: float,
    efficiency: float,
    equipment_count: int,
    trips_per_day: float = 1.0,
    now: datetime | None = None,
) -> list[ImprovementSuggestion]:
    """Rule-based improvement suggestions for a workflow.

    Rules, in order:
    - travel over 300 ft: compact the route (critical over 500 ft)
    - efficiency under 80%: cut non-value-added time
    - stations averaging over 100 ft apart: form equipment cells
    - lean score under 70: run 5S
    - always: tool storage at workstations as a quick win

    Args:
        lean_score: Overall lean score (0-100).
        workflow_distance: Route travel distance in feet.
        efficiency: Workflow efficiency percent.
        equipment_count: Machines on the route.
        trips_per_day: Times the route is walked per day; scales the
            time saved by a shorter route.
        now: Creation timestamp; defaults to the current UTC time.

    Returns:
        Suggestions in rule order, all with status SUGGESTED.
    """
    created_at = now or datetime.now(timezone.utc)
    suggestions: list[ImprovementSuggestion] = []

    if workflow_distance > WARNING_DISTANCE_FT:
        removed_ft = workflow_distance * TRAVEL_REDUCTION_SHARE
        minutes_saved = removed_ft / WALKING_SPEED_FPM * trips_per_day
        suggestions.append(
            ImprovementSuggestion(
                id="improve-travel-distance",
                category=ImprovementCategory.WORKFLOW,
                title="Reduce Material Travel Distance",
                description=(
                    f"Current workflow requires {workflow_distance:g} ft of travel. "
                    "Relocate equipment to create a more compact workflow path."
                ),
                priority=(
                    ImprovementPriority.CRITICAL
                    if workflow_distance > CRITICAL_DISTANCE_FT
                    else ImprovementPriority.HIGH
                ),
                impact=ImprovementImpact(
                    distance_reduction=round_half_up(removed_ft, 1),
                    time_reduction=round_half_up(minutes_saved, 1),
                    cost_savings=annual_labor_savings(minutes_saved),
                ),
                effort=Effort.HIGH,
                created_at=created_at,
            )
        )

    if efficiency < KAIZEN_EFFICIENCY_PCT:
        suggestions.append(
            ImprovementSuggestion(
                id="improve-non-value-added",
                category=ImprovementCategory.WASTE_REDUCTION,
                title="Eliminate Non-Value-Added Time",
                description=(
                    f"Current efficiency is {efficiency:g}%. Reduce transport and "
                    "waiting time by optimizing equipment placement."
                ),
                priority=ImprovementPriority.HIGH,
                impact=ImprovementImpact(
                    efficiency_gain=NON_VALUE_ADDED_EFFICIENCY_GAIN,
                    time_reduction=NON_VALUE_ADDED_MINUTES_SAVED,
                    cost_savings=annual_labor_savings(NON_VALUE_ADDED_MINUTES_SAVED),
                ),
                effort=Effort.MEDIUM,
                created_at=created_at,
            )
        )

    average_spacing = workflow_distance / max(1, equipment_count - 1)
    if average_spacing > CELL_SPACING_FT:
        suggestions.append(
            ImprovementSuggestion(
                id="improve-equipment-cells",
                category=ImprovementCategory.EQUIPMENT_PLACEMENT,
                title="Create Equipment Cells",
                description=(
                    f"Equipment is spread out (avg {round_half_up(average_spacing):g} ft "
                    "apart). Group related machines into manufacturing cells."
                ),
                priority=ImprovementPriority.MEDIUM,
                impact=ImprovementImpact(
                    distance_reduction=round_half_up(
                        average_spacing * CELL_DISTANCE_SHARE * equipment_count, 1
                    ),
                    efficiency_gain=CELL_EFFICIENCY_GAIN,
                    cost_savings=CELL_ANNUAL_SAVINGS,
                ),
                effort=Effort.HIGH,
                created_at=created_at,
            )
        )

    if lean_score < FIVE_S_LEAN_SCORE:
        suggestions.append(
            ImprovementSuggestion(
                id="improve-5s",
                category=ImprovementCategory.ORGANIZATION,
                title="Implement 5S Methodology",
                description=(
                    "Low lean score indicates organization issues. Implement Sort, "
                    "Set in order, Shine, Standardize, Sustain."
                ),
                priority=ImprovementPriority.MEDIUM,
                impact=ImprovementImpact(
                    efficiency_gain=FIVE_S_EFFICIENCY_GAIN,
                    cost_savings=FIVE_S_ANNUAL_SAVINGS,
                ),
                effort=Effort.MEDIUM,
                created_at=created_at,
            )
        )

    suggestions.append(
        ImprovementSuggestion(
            id="improve-tool-storage",
            category=ImprovementCategory.ORGANIZATION,
            title="Add Tool Storage at Workstations",
            description=(
                "Reduce trips to tool crib by placing commonly-used tools at each "
                "workstation."
            ),
            priority=ImprovementPriority.LOW,
            impact=ImprovementImpact(
                time_reduction=TOOL_STORAGE_MINUTES_SAVED,
                cost_savings=annual_labor_savings(TOOL_STORAGE_MINUTES_SAVED),
            ),
            effort=Effort.LOW,
            created_at=created_at,
        )
    )

    logger.debug(
        "Generated %d kaizen suggestion(s) for %.1f ft route", len(suggestions), workflow_distance
    )
    return suggestions


def roi_score(suggestion: ImprovementSuggestion) -> float:
    """Annual savings divided by the effort weight."""
    savings = suggestion.impact.cost_savings or 0.0
    return savings / EFFORT_WEIGHT[suggestion.effort]


def prioritize_by_roi(
    suggestions: Iterable[ImprovementSuggestion],
) -> list[ImprovementSuggestion]:
    """Highest return on effort first; ties keep their input order."""
    return sorted(suggestions, key=roi_score, reverse=True)


def calculate_improvement_impact(baseline: KaizenEvent, current: KaizenEvent) -> MetricChange:
    """Metric deltas from ``baseline`` to ``current``.

    ``percent_improvement`` is the relative lean score change; it is 0
    when the baseline lean score is 0.
    """
    before, after = baseline.metrics, current.metrics
    lean_change = after.lean_score - before.lean_score
    percent = lean_change / before.lean_score * 100 if before.lean_score else 0.0
    return MetricChange(
        lean_score_change=lean_change,
        distance_change=after.total_distance - before.total_distance,
        efficiency_change=after.efficiency - before.efficiency,
        waste_score_change=after.waste_score - before.waste_score,
        percent_improvement=percent,
    )


def generate_kaizen_dashboard(
    events: Iterable[KaizenEvent],
    suggestions: Iterable[ImprovementSuggestion],
) -> KaizenDashboard:
    """Summarize a layout's improvement history.

    Current metrics come from the latest event (all zero without events).
    Realized gains sum the estimates of completed suggestions; rejected
    suggestions are neither active nor completed.
    """
    timeline = tuple(sorted(events, key=lambda e: e.date))
    suggestions = list(suggestions)
    completed = tuple(s for s in suggestions if s.status == SuggestionStatus.COMPLETED)
    active = tuple(s for s in suggestions if s.is_active)

    current = (
        timeline[-1].metrics
        if timeline
        else KaizenMetrics(lean_score=0, total_distance=0, efficiency=0, waste_score=0)
    )
    totals = ImplementedImprovements(
        total_implemented=len(completed),
        total_savings=int(round_half_up(sum(s.impact.cost_savings or 0 for s in completed))),
        distance_reduced=int(
            round_half_up(sum(s.impact.distance_reduction or 0 for s in completed))
        ),
        efficiency_gained=int(
            round_half_up(sum(s.impact.efficiency_gain or 0 for s in completed))
        ),
    )
    return KaizenDashboard(
        current_metrics=current,
        improvements=totals,
        timeline=timeline,
        active_suggestions=active,
        completed_suggestions=completed,
    )


def generate_pdca_cycle(suggestion: ImprovementSuggestion) -> PDCACycle:
    """Plan-Do-Check-Act steps for carrying out a suggestion."""
    target = suggestion.impact.efficiency_gain or 0
    return PDCACycle(
        plan=(
            f"Define objective: {suggestion.title}",
            f"Set target: {target:g}% efficiency gain",
            f"Allocate resources: {suggestion.effort.value} effort required",
            "Create implementation timeline",
        ),
        do=(
            "Implement the change in a controlled area",
            "Document the process",
            "Train affected workers",
            "Monitor initial results",
        ),
        check=(
            "Measure actual vs. expected results",
            "Collect feedback from workers",
            "Identify any issues or obstacles",
            "Calculate actual ROI",
        ),
        act=(
            "If successful: Standardize the improvement",
            "If unsuccessful: Adjust and retry",
            "Document lessons learned",
            "Share best practices with team",
        ),
    )


def record_kaizen_event(
    event_id: str,
    layout_id: str,
    analysis: WorkflowAnalysisResult,
    lean_score: LeanScore,
    event_type: KaizenEventType = KaizenEventType.MEASUREMENT,
    date: datetime | None = None,
    changes: Iterable[str] = (),
    throughput: float | None = None,
) -> KaizenEvent:
    """Snapshot a workflow analysis as a timeline event."""
    return KaizenEvent(
        id=event_id,
        layout_id=layout_id,
        event_type=event_type,
        date=date or datetime.now(timezone.utc),
        metrics=KaizenMetrics(
            lean_score=lean_score.overall,
            total_distance=analysis.total_distance,
            efficiency=analysis.efficiency,
            waste_score=analysis.waste_score,
            throughput=throughput,
        ),
        changes=tuple(changes),
    )


__all__ = [
    "EFFORT_WEIGHT",
    "annual_labor_savings",
    "calculate_improvement_impact",
    "generate_improvement_suggestions",
    "generate_kaizen_dashboard",
    "generate_pdca_cycle",
    "prioritize_by_roi",
    "record_kaizen_event",
    "roi_score",
]

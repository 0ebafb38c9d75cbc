"""Result types for lean workflow analysis and kaizen tracking."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum


@dataclass(frozen=True)
class PathSegment:
    """One hop between consecutive workflow stations."""

    from_name: str
    to_name: str
    distance: float


@dataclass(frozen=True)
class WorkflowAnalysisResult:
    """Travel and time metrics for a workflow sequence.

    Distances and times are rounded to 0.1; scores to whole numbers.

    Attributes:
        total_distance: Feet travelled across all hops.
        total_cycle_time: Sum of station cycle times (minutes).
        value_added_time: Time counted as value-adding (all cycle time).
        transport_time: Estimated walking time (minutes).
        waste_score: 0-100, 100 meaning no travel waste.
        efficiency: Value-added share of total time, percent.
        suggestions: Threshold-driven advice.
        path_segments: One entry per consecutive pair of steps.
    """

    total_distance: float
    total_cycle_time: float
    value_added_time: float
    transport_time: float
    waste_score: int
    efficiency: int
    suggestions: tuple[str, ...] = field(default_factory=tuple)
    path_segments: tuple[PathSegment, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LeanCategory:
    """Weighted lean score category with its findings."""

    category: str
    score: int
    weight: float
    issues: tuple[str, ...] = field(default_factory=tuple)
    recommendations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LeanScore:
    """Composite lean score for a layout."""

    overall: int
    material_flow: int
    worker_movement: int
    organization: int
    safety: int
    breakdown: tuple[LeanCategory, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DiagramNode:
    x: float
    y: float
    label: str


@dataclass(frozen=True)
class SpaghettiPath:
    """One hop drawn on a spaghetti diagram.

    Attributes:
        start: Origin station.
        end: Destination station.
        distance: Hop length in feet (rounded to 0.1).
        frequency: Trips per day along the hop.
        color: Hex color for the frequency band.
    """

    start: DiagramNode
    end: DiagramNode
    distance: float
    frequency: float
    color: str


@dataclass(frozen=True)
class SpaghettiDiagram:
    """Renderer-ready travel paths for a workflow."""

    paths: tuple[SpaghettiPath, ...] = field(default_factory=tuple)
    total_distance: float = 0.0
    total_trips: float = 0.0


# ==============================================================================
# Kaizen (continuous improvement)
# ==============================================================================


class ImprovementCategory(str, Enum):
    EQUIPMENT_PLACEMENT = "equipment_placement"
    WORKFLOW = "workflow"
    SAFETY = "safety"
    ORGANIZATION = "organization"
    WASTE_REDUCTION = "waste_reduction"


class ImprovementPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Effort(str, Enum):
    """Implementation effort; also the divisor used when ranking by ROI."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SuggestionStatus(str, Enum):
    SUGGESTED = "suggested"
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    REJECTED = "rejected"


class KaizenEventType(str, Enum):
    BASELINE = "baseline"
    IMPROVEMENT = "improvement"
    MEASUREMENT = "measurement"


@dataclass(frozen=True)
class ImprovementImpact:
    """Estimated payoff of an improvement. Unset figures are None.

    Attributes:
        distance_reduction: Feet of travel removed from the route.
        time_reduction: Minutes saved per working day.
        cost_savings: Labor dollars saved per year.
        efficiency_gain: Percentage points of workflow efficiency.
    """

    distance_reduction: float | None = None
    time_reduction: float | None = None
    cost_savings: float | None = None
    efficiency_gain: float | None = None


@dataclass(frozen=True)
class ImprovementSuggestion:
    """A proposed layout or process change and its tracking state."""

    id: str
    category: ImprovementCategory
    title: str
    description: str
    priority: ImprovementPriority
    impact: ImprovementImpact
    effort: Effort
    created_at: datetime
    status: SuggestionStatus = SuggestionStatus.SUGGESTED
    completed_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        """Still on the board: neither completed nor rejected."""
        return self.status not in (SuggestionStatus.COMPLETED, SuggestionStatus.REJECTED)

    def with_status(
        self, status: SuggestionStatus, at: datetime | None = None
    ) -> ImprovementSuggestion:
        """Copy with a new status; ``at`` is recorded when completing."""
        completed_at = at if status == SuggestionStatus.COMPLETED else None
        return replace(self, status=status, completed_at=completed_at)


@dataclass(frozen=True)
class KaizenMetrics:
    lean_score: float
    total_distance: float
    efficiency: float
    waste_score: float
    throughput: float | None = None


@dataclass(frozen=True)
class KaizenEvent:
    """One measurement of a layout on the improvement timeline.

    Attributes:
        id: Event identifier.
        layout_id: Layout or project the event belongs to.
        event_type: Baseline, improvement or plain measurement.
        date: When the metrics were taken.
        metrics: Lean metrics at that time.
        changes: What was changed before this measurement.
        notes: Free text.
    """

    id: str
    layout_id: str
    event_type: KaizenEventType
    date: datetime
    metrics: KaizenMetrics
    changes: tuple[str, ...] = field(default_factory=tuple)
    notes: str | None = None


@dataclass(frozen=True)
class MetricChange:
    """Difference between two measurements (current minus baseline)."""

    lean_score_change: float
    distance_change: float
    efficiency_change: float
    waste_score_change: float
    percent_improvement: float


@dataclass(frozen=True)
class ImplementedImprovements:
    total_implemented: int = 0
    total_savings: int = 0
    distance_reduced: int = 0
    efficiency_gained: int = 0


@dataclass(frozen=True)
class KaizenDashboard:
    """Current metrics, realized gains and the open improvement board."""

    current_metrics: KaizenMetrics
    improvements: ImplementedImprovements
    timeline: tuple[KaizenEvent, ...] = field(default_factory=tuple)
    active_suggestions: tuple[ImprovementSuggestion, ...] = field(default_factory=tuple)
    completed_suggestions: tuple[ImprovementSuggestion, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PDCACycle:
    """Plan-Do-Check-Act checklist for carrying out one improvement."""

    plan: tuple[str, ...]
    do: tuple[str, ...]
    check: tuple[str, ...]
    act: tuple[str, ...]


__all__ = [
    "DiagramNode",
    "Effort",
    "ImplementedImprovements",
    "ImprovementCategory",
    "ImprovementImpact",
    "ImprovementPriority",
    "ImprovementSuggestion",
    "KaizenDashboard",
    "KaizenEvent",
    "KaizenEventType",
    "KaizenMetrics",
    "LeanCategory",
    "LeanScore",
    "MetricChange",
    "PDCACycle",
    "PathSegment",
    "SpaghettiDiagram",
    "SpaghettiPath",
    "SuggestionStatus",
    "WorkflowAnalysisResult",
]

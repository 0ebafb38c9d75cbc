"""Lean manufacturing analysis for shop workflows.

Travel distance and waste for a production route, a weighted lean score
for the layout, spaghetti diagram data for an external renderer, and
kaizen tools for tracking improvements over time.

Example:
    from shopfloor.domain.services.lean import analyze_workflow, calculate_lean_score

    analysis = analyze_workflow(sequence)
    score = calculate_lean_score(analysis, equipment_count=6, layout_area=900)
"""

from .kaizen import (
    annual_labor_savings,
    calculate_improvement_impact,
    generate_improvement_suggestions,
    generate_kaizen_dashboard,
    generate_pdca_cycle,
    prioritize_by_roi,
    record_kaizen_event,
    roi_score,
)
from .models import (
    DiagramNode,
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
    LeanCategory,
    LeanScore,
    MetricChange,
    PathSegment,
    PDCACycle,
    SpaghettiDiagram,
    SpaghettiPath,
    SuggestionStatus,
    WorkflowAnalysisResult,
)
from .scoring import calculate_lean_score
from .spaghetti import frequency_color, generate_spaghetti_diagram
from .workflow import analyze_workflow, detect_backtracking, round_half_up

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
    "analyze_workflow",
    "annual_labor_savings",
    "calculate_improvement_impact",
    "calculate_lean_score",
    "detect_backtracking",
    "frequency_color",
    "generate_improvement_suggestions",
    "generate_kaizen_dashboard",
    "generate_pdca_cycle",
    "generate_spaghetti_diagram",
    "prioritize_by_roi",
    "record_kaizen_event",
    "round_half_up",
    "roi_score",
]

"""Workflow analysis and spaghetti diagram endpoints."""

from fastapi import APIRouter

from shopfloor.domain.entities import WorkflowSequence, WorkflowStep
from shopfloor.domain.services.lean import (
    analyze_workflow,
    calculate_lean_score,
    generate_improvement_suggestions,
    generate_spaghetti_diagram,
    prioritize_by_roi,
)
from shopfloor.domain.value_objects import Point2D
from shopfloor.web.schemas.common import WorkflowStepSchema
from shopfloor.web.schemas.requests import SpaghettiRequest, WorkflowAnalyzeRequest
from shopfloor.web.schemas.responses import (
    ImprovementSuggestionSchema,
    LeanScoreSchema,
    SpaghettiResponse,
    WorkflowAnalysisSchema,
    WorkflowAnalyzeResponse,
)

router = APIRouter(prefix="/workflow", tags=["workflow"])


def _sequence(name: str, steps: list[WorkflowStepSchema]) -> WorkflowSequence:
    return WorkflowSequence(
        name=name,
        steps=tuple(
            WorkflowStep(
                equipment_id=step.equipment_id,
                equipment_name=step.equipment_name,
                operation_name=step.operation_name,
                cycle_time_minutes=step.cycle_time_minutes,
                position=Point2D(step.position.x, step.position.y),
            )
            for step in steps
        ),
    )


@router.post("/analyze", response_model=WorkflowAnalyzeResponse)
async def analyze(request: WorkflowAnalyzeRequest) -> WorkflowAnalyzeResponse:
    """Travel, timing and waste metrics, the weighted lean score and kaizen ideas."""
    analysis = analyze_workflow(_sequence(request.name, request.steps))
    score = calculate_lean_score(
        analysis,
        request.equipment_count,
        request.layout_area,
        has_organized_storage=request.has_organized_storage,
        has_safety_zones=request.has_safety_zones,
    )
    improvements = generate_improvement_suggestions(
        score.overall,
        analysis.total_distance,
        analysis.efficiency,
        len(request.steps),
        trips_per_day=request.trips_per_day,
    )
    return WorkflowAnalyzeResponse(
        analysis=WorkflowAnalysisSchema.model_validate(analysis),
        lean_score=LeanScoreSchema.model_validate(score),
        improvements=[
            ImprovementSuggestionSchema.model_validate(s) for s in prioritize_by_roi(improvements)
        ],
    )


@router.post("/spaghetti", response_model=SpaghettiResponse)
async def spaghetti(request: SpaghettiRequest) -> SpaghettiResponse:
    diagram = generate_spaghetti_diagram(
        _sequence(request.name, request.steps), request.trips_per_day
    )
    return SpaghettiResponse.model_validate(diagram)

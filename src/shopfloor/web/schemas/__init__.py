"""Pydantic schemas for the REST API."""

from shopfloor.web.schemas.common import (
    BoxSchema,
    DimensionsSchema,
    DustMachineSchema,
    PointSchema,
    PositionSchema,
    WorkflowStepSchema,
)
from shopfloor.web.schemas.requests import (
    AirSizingRequest,
    BomRequest,
    CollisionRequest,
    DuctSizingRequest,
    DustSystemRequest,
    ElectricalSizingRequest,
    LayoutRequest,
    PlanRequest,
    SpaghettiRequest,
    WorkflowAnalyzeRequest,
)
from shopfloor.web.schemas.responses import (
    AirSizingResponse,
    BomResponse,
    CollisionResponse,
    DuctBranchResponse,
    DustSystemResponse,
    ElectricalSizingResponse,
    ErrorResponseSchema,
    ImprovementSuggestionSchema,
    LayoutAdviceSchema,
    LayoutResponse,
    LeanScoreSchema,
    PlacementSchema,
    SpaghettiResponse,
    WorkflowAnalysisSchema,
    WorkflowAnalyzeResponse,
)

__all__ = [
    # Common
    "BoxSchema",
    "DimensionsSchema",
    "DustMachineSchema",
    "PointSchema",
    "PositionSchema",
    "WorkflowStepSchema",
    # Requests
    "AirSizingRequest",
    "BomRequest",
    "CollisionRequest",
    "DuctSizingRequest",
    "DustSystemRequest",
    "ElectricalSizingRequest",
    "LayoutRequest",
    "PlanRequest",
    "SpaghettiRequest",
    "WorkflowAnalyzeRequest",
    # Responses
    "AirSizingResponse",
    "BomResponse",
    "CollisionResponse",
    "DuctBranchResponse",
    "DustSystemResponse",
    "ElectricalSizingResponse",
    "ErrorResponseSchema",
    "ImprovementSuggestionSchema",
    "LayoutAdviceSchema",
    "LayoutResponse",
    "LeanScoreSchema",
    "PlacementSchema",
    "SpaghettiResponse",
    "WorkflowAnalysisSchema",
    "WorkflowAnalyzeResponse",
]

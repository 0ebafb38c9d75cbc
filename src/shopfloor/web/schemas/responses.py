"""Pydantic response schemas for the REST API.

Responses are read straight off the frozen domain results
(``from_attributes``), so field names match the domain types.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shopfloor.domain.services.lean import (
    Effort,
    ImprovementCategory,
    ImprovementPriority,
    SuggestionStatus,
)
from shopfloor.domain.value_objects import BomCategory, BomUnit
from shopfloor.web.schemas.common import DustMachineSchema


class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ElectricalSizingResponse(_FromDomain):
    conductor_size: str = Field(..., description="Wire gauge (AWG/kcmil)")
    ampacity: float
    voltage_drop: float = Field(..., description="Volts")
    percent_drop: float
    breaker_amps: int
    conduit_size: str
    conductor_count: int = Field(..., description="Conductors in the conduit, ground included")
    warnings: list[str] = Field(default_factory=list)


class AirSizingResponse(_FromDomain):
    pipe_size: str
    pressure_drop: float = Field(..., description="Total drop over the run (psi)")
    velocity: float = Field(..., description="Feet per minute")
    meets_drop_limit: bool
    warnings: list[str] = Field(default_factory=list)


class DuctBranchResponse(_FromDomain):
    cfm: float
    diameter: int = Field(..., description="Inches")
    velocity: float = Field(..., description="Feet per minute")
    friction_per_100ft: float
    total_friction: float
    velocity_ok: bool
    friction_ok: bool


class MachineBranchSchema(_FromDomain):
    machine: DustMachineSchema
    branch: DuctBranchResponse


class DustSystemResponse(_FromDomain):
    branches: list[MachineBranchSchema] = Field(default_factory=list)
    main_trunk: DuctBranchResponse | None = None
    simultaneous_cfm: float
    collector_cfm: int


class PlacementSchema(_FromDomain):
    equipment_id: str
    x: float = Field(..., description="Left edge (feet)")
    y: float = Field(..., description="Top edge (feet)")
    rotation: float
    score: float
    reasons: list[str] = Field(default_factory=list)


class CollidingPairSchema(_FromDomain):
    id1: str
    id2: str


class CollisionResponse(_FromDomain):
    has_collision: bool
    collision_count: int
    colliding_pairs: list[CollidingPairSchema] = Field(default_factory=list)


class LayoutAdviceSchema(_FromDomain):
    critical: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    tips: list[str] = Field(default_factory=list)


class LayoutResponse(BaseModel):
    """Suggested placements plus an overlap re-check and advice."""

    placements: list[PlacementSchema] = Field(default_factory=list)
    total_score: float
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    collisions: CollisionResponse
    advice: LayoutAdviceSchema


class BomItemSchema(_FromDomain):
    id: str
    name: str
    description: str
    category: BomCategory
    quantity: float
    unit: BomUnit
    unit_price: float
    total_price: float


class BomResponse(_FromDomain):
    items: list[BomItemSchema] = Field(default_factory=list)
    total_cost: float
    waste_factor: float
    currency: str


class PathSegmentSchema(_FromDomain):
    from_name: str
    to_name: str
    distance: float


class WorkflowAnalysisSchema(_FromDomain):
    total_distance: float
    total_cycle_time: float
    value_added_time: float
    transport_time: float
    waste_score: int
    efficiency: int
    suggestions: list[str] = Field(default_factory=list)
    path_segments: list[PathSegmentSchema] = Field(default_factory=list)


class LeanCategorySchema(_FromDomain):
    category: str
    score: int
    weight: float
    issues: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


class LeanScoreSchema(_FromDomain):
    overall: int
    material_flow: int
    worker_movement: int
    organization: int
    safety: int
    breakdown: list[LeanCategorySchema] = Field(default_factory=list)


class ImprovementImpactSchema(_FromDomain):
    distance_reduction: float | None = Field(default=None, description="Feet of travel")
    time_reduction: float | None = Field(default=None, description="Minutes per day")
    cost_savings: float | None = Field(default=None, description="Dollars per year")
    efficiency_gain: float | None = Field(default=None, description="Percentage points")


class ImprovementSuggestionSchema(_FromDomain):
    id: str
    category: ImprovementCategory
    title: str
    description: str
    priority: ImprovementPriority
    impact: ImprovementImpactSchema
    effort: Effort
    created_at: datetime
    status: SuggestionStatus
    completed_at: datetime | None = None


class WorkflowAnalyzeResponse(BaseModel):
    analysis: WorkflowAnalysisSchema
    lean_score: LeanScoreSchema
    improvements: list[ImprovementSuggestionSchema] = Field(
        default_factory=list, description="Kaizen suggestions, best return on effort first"
    )


class DiagramNodeSchema(_FromDomain):
    x: float
    y: float
    label: str


class SpaghettiPathSchema(_FromDomain):
    start: DiagramNodeSchema
    end: DiagramNodeSchema
    distance: float
    frequency: float
    color: str


class SpaghettiResponse(_FromDomain):
    paths: list[SpaghettiPathSchema] = Field(default_factory=list)
    total_distance: float
    total_trips: float


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None

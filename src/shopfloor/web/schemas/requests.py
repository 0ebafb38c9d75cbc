"""Pydantic request schemas for the REST API.

Project-shaped pieces (equipment, routing, BOM options) reuse the project
file models so the API and JSON files accept the same structures.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

from shopfloor.application.config import (
    BomConfigSchema,
    BuildingConfig,
    ConstraintsConfig,
    EquipmentConfig,
    RoutingSegmentConfig,
)
from shopfloor.web.schemas.common import (
    BoxSchema,
    DustMachineSchema,
    WorkflowStepSchema,
)


class ElectricalSizingRequest(BaseModel):
    """Branch circuit to size."""

    volts: float = Field(..., gt=0, description="Supply voltage")
    amps: float = Field(..., ge=0, description="Load current")
    length_ft: float = Field(..., ge=0, description="One-way run length in feet")
    phase: Literal[1, 3] = Field(default=1, description="Service phase")
    power_factor: float = Field(default=1.0, gt=0, le=1)
    is_motor: bool = Field(default=False, description="Use the motor breaker rule")
    max_drop_pct: float = Field(default=3.0, gt=0, description="Allowed voltage drop percent")


class AirSizingRequest(BaseModel):
    flow_scfm: float = Field(..., ge=0)
    pressure_psi: float = Field(default=90.0, gt=0)
    length_ft: float = Field(..., ge=0)
    max_drop_per_100ft: float = Field(default=1.0, gt=0)


class DuctSizingRequest(BaseModel):
    cfm: float = Field(..., ge=0, description="Machine airflow")
    run_length_ft: float = Field(default=0.0, ge=0)


class DustSystemRequest(BaseModel):
    """Machines on one dust collection system."""

    machines: list[DustMachineSchema] = Field(..., min_length=1)
    simultaneous: int = Field(default=1, ge=1, description="Machines running at once")
    main_run_length_ft: float = Field(default=0.0, ge=0)


class LayoutRequest(BaseModel):
    """Equipment to lay out inside a building."""

    building: BuildingConfig
    constraints: ConstraintsConfig = Field(default_factory=ConstraintsConfig)
    equipment: list[EquipmentConfig] = Field(default_factory=list)


class CollisionRequest(BaseModel):
    boxes: list[BoxSchema] = Field(default_factory=list)


class BomRequest(BaseModel):
    """Routed runs in order; adjacent runs are checked for elbows."""

    segments: list[RoutingSegmentConfig] = Field(default_factory=list)
    options: BomConfigSchema = Field(default_factory=BomConfigSchema)


class WorkflowAnalyzeRequest(BaseModel):
    """Production route plus the shop facts used by the lean score."""

    name: str = Field(..., min_length=1)
    steps: list[WorkflowStepSchema] = Field(default_factory=list)
    equipment_count: int = Field(default=0, ge=0)
    layout_area: float = Field(default=0.0, ge=0, description="Floor area in square feet")
    has_organized_storage: bool = False
    has_safety_zones: bool = False
    trips_per_day: float = Field(default=1.0, ge=0, description="Route walks per day")


class SpaghettiRequest(BaseModel):
    name: str = Field(..., min_length=1)
    steps: list[WorkflowStepSchema] = Field(default_factory=list)
    trips_per_day: float = Field(default=1.0, ge=0)


class PlanRequest(BaseModel):
    """Whole project file, validated as if loaded from disk."""

    config: dict[str, Any] = Field(..., description="Project configuration")

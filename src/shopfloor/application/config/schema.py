"""Pydantic configuration schema models for shop planning projects.

This module defines the schema for JSON project files: the building
envelope, placement constraints, equipment list, routed utility runs,
an optional production workflow and BOM pricing. It uses Pydantic v2 for
validation and serialization.

Enums are reused from the domain layer so configuration values and
domain values cannot drift apart.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shopfloor.domain.services.electrical.constants import WIRE_SIZES
from shopfloor.domain.value_objects import SystemType, WorkflowPriority

# Supported schema versions for project files
# Version 1.0: Building, constraints, equipment, routing, workflow, BOM
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class BuildingConfig(BaseModel):
    """Building envelope in feet."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, description="Interior width along X (feet)")
    depth: float = Field(..., gt=0, description="Interior depth along Y (feet)")
    height: float = Field(default=12.0, gt=0, description="Ceiling height (feet)")


class ConstraintsConfig(BaseModel):
    """Placement preferences."""

    model_config = ConfigDict(extra="forbid")

    min_clearance: float = Field(
        default=3.0, ge=0, description="Minimum aisle between equipment and walls (feet)"
    )
    workflow_priority: WorkflowPriority = WorkflowPriority.BALANCED
    group_similar: bool = False
    near_utilities: bool = False


class DustDemandConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    cfm: float = Field(..., ge=0, description="Airflow required at the port")


class AirDemandConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scfm: float = Field(..., ge=0)
    psi: float = Field(default=90.0, gt=0)
    duty_cycle: float = Field(default=1.0, ge=0, le=1)


class ElectricalDemandConfig(BaseModel):
    """Electrical load of one machine.

    Attributes:
        volts: Supply voltage.
        amps: Full-load current.
        phase: 1 or 3.
        power_factor: Load power factor.
        is_motor: Motor loads get larger breakers.
        run_length_ft: Circuit length from the panel; when set, the plan
            sizes a branch circuit for this machine.
    """

    model_config = ConfigDict(extra="forbid")

    volts: float = Field(..., gt=0)
    amps: float = Field(..., ge=0)
    phase: Literal[1, 3] = 1
    power_factor: float = Field(default=1.0, gt=0, le=1)
    is_motor: bool = False
    run_length_ft: float | None = Field(default=None, ge=0)


class EquipmentConfig(BaseModel):
    """One machine or workstation.

    The requires_* flags default to the presence of the matching demand.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    category: str = "general"
    width: float = Field(..., gt=0, description="Footprint along X (feet)")
    depth: float = Field(..., gt=0, description="Footprint along Y (feet)")
    height: float = Field(default=4.0, ge=0)
    orientation: float = 0.0
    requires_dust: bool | None = None
    requires_air: bool | None = None
    requires_electrical: bool | None = None
    dust: DustDemandConfig | None = None
    air: AirDemandConfig | None = None
    electrical: ElectricalDemandConfig | None = None

    @model_validator(mode="after")
    def default_requirement_flags(self) -> EquipmentConfig:
        """Fill unset requirement flags from the declared demands."""
        if self.requires_dust is None:
            self.requires_dust = self.dust is not None
        if self.requires_air is None:
            self.requires_air = self.air is not None
        if self.requires_electrical is None:
            self.requires_electrical = self.electrical is not None
        return self


class RoutingSegmentConfig(BaseModel):
    """Straight run of wire, duct or air pipe between two 3D points."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    start: tuple[float, float, float]
    end: tuple[float, float, float]
    system_type: SystemType
    diameter: float | None = Field(default=None, gt=0, description="Inches")
    gauge: str | None = None

    @field_validator("gauge")
    @classmethod
    def validate_gauge(cls, v: str | None) -> str | None:
        if v is not None and v not in WIRE_SIZES:
            raise ValueError(f"Unknown wire gauge '{v}'. Expected one of: {list(WIRE_SIZES)}")
        return v


class PositionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: float
    y: float


class WorkflowStepConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    equipment_id: str = Field(..., min_length=1)
    equipment_name: str | None = Field(
        default=None, description="Defaults to the referenced equipment's name"
    )
    operation_name: str
    cycle_time_minutes: float = Field(..., gt=0)
    position: PositionConfig


class WorkflowConfig(BaseModel):
    """Production route plus shop facts used by the lean score."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str | None = None
    units_per_day: float | None = Field(default=None, gt=0)
    trips_per_day: float = Field(default=1.0, ge=0)
    has_organized_storage: bool = False
    has_safety_zones: bool = False
    steps: list[WorkflowStepConfig] = Field(default_factory=list)


class DustCollectionConfig(BaseModel):
    """Dust system sizing inputs."""

    model_config = ConfigDict(extra="forbid")

    simultaneous: int = Field(
        default=1, ge=1, description="Machines expected to run at the same time"
    )
    main_run_length_ft: float = Field(default=0.0, ge=0, description="Main trunk length")


class BomConfigSchema(BaseModel):
    """BOM pricing and fitting detection options."""

    model_config = ConfigDict(extra="forbid")

    waste_factor: float = Field(default=1.15, ge=1.0)
    currency: str = Field(default="USD", min_length=1)
    connection_tolerance: float = Field(default=0.1, ge=0)
    fitting_angle_threshold: float = Field(default=15.0, ge=0, le=180)
    wire_unit_price: float = Field(default=1.50, ge=0)
    duct_unit_price: float = Field(default=8.50, ge=0)
    elbow_unit_price: float = Field(default=12.00, ge=0)


class ProjectConfiguration(BaseModel):
    """Root configuration model for a shop planning project.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        building: Building envelope
        constraints: Placement preferences
        equipment: Machines to place
        routing: Routed utility runs for the BOM
        workflow: Optional production route
        bom: BOM pricing options
        dust_collection: Dust system sizing inputs

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     building=BuildingConfig(width=30, depth=20),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    building: BuildingConfig
    constraints: ConstraintsConfig = Field(default_factory=ConstraintsConfig)
    equipment: list[EquipmentConfig] = Field(default_factory=list)
    routing: list[RoutingSegmentConfig] = Field(default_factory=list)
    workflow: WorkflowConfig | None = Field(default=None, description="Production route (optional)")
    bom: BomConfigSchema = Field(default_factory=BomConfigSchema)
    dust_collection: DustCollectionConfig = Field(default_factory=DustCollectionConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_references(self) -> ProjectConfiguration:
        """Equipment ids are unique and workflow steps reference them."""
        seen: set[str] = set()
        for item in self.equipment:
            if item.id in seen:
                raise ValueError(f"Duplicate equipment id '{item.id}'")
            seen.add(item.id)

        if self.workflow is not None:
            for step in self.workflow.steps:
                if step.equipment_id not in seen:
                    raise ValueError(
                        f"Workflow step references unknown equipment '{step.equipment_id}'"
                    )
        return self


__all__ = [
    "SUPPORTED_VERSIONS",
    "AirDemandConfig",
    "BomConfigSchema",
    "BuildingConfig",
    "ConstraintsConfig",
    "DustCollectionConfig",
    "DustDemandConfig",
    "ElectricalDemandConfig",
    "EquipmentConfig",
    "PositionConfig",
    "ProjectConfiguration",
    "RoutingSegmentConfig",
    "WorkflowConfig",
    "WorkflowStepConfig",
]

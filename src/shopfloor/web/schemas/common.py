"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, ConfigDict, Field


class PointSchema(BaseModel):
    """3D point in feet (Y is vertical)."""

    x: float
    y: float
    z: float


class DimensionsSchema(BaseModel):
    """Box size in feet."""

    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    depth: float = Field(..., ge=0)


class BoxSchema(BaseModel):
    """Axis-aligned bounding box given by its center."""

    id: str = Field(..., min_length=1)
    center: PointSchema
    dimensions: DimensionsSchema


class PositionSchema(BaseModel):
    x: float
    y: float


class WorkflowStepSchema(BaseModel):
    """One station of a production route."""

    equipment_id: str = Field(..., min_length=1)
    equipment_name: str = Field(..., min_length=1)
    operation_name: str
    cycle_time_minutes: float = Field(..., gt=0)
    position: PositionSchema


class DustMachineSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., min_length=1)
    cfm: float = Field(..., ge=0)

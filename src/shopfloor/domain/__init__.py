"""Domain layer - entities, value objects and engineering calculations."""

from .entities import (
    AirDemand,
    DustDemand,
    ElectricalDemand,
    Equipment,
    WorkflowSequence,
    WorkflowStep,
)
from .exceptions import SizingError
from .value_objects import (
    BomCategory,
    BomUnit,
    BoxDimensions,
    Phase,
    Point2D,
    Point3D,
    SystemType,
    WorkflowPriority,
)

__all__ = [
    "AirDemand",
    "BomCategory",
    "BomUnit",
    "BoxDimensions",
    "DustDemand",
    "ElectricalDemand",
    "Equipment",
    "Phase",
    "Point2D",
    "Point3D",
    "SizingError",
    "SystemType",
    "WorkflowPriority",
    "WorkflowSequence",
    "WorkflowStep",
]

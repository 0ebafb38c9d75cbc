"""Value objects for the shop floor domain.

Immutable data types shared by the collision, sizing, BOM, placement and
lean services. All lengths are in feet unless an attribute says otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class SystemType(str, Enum):
    """Utility system a routed run belongs to."""

    ELECTRICAL = "electrical"
    DUCTING = "ducting"
    PNEUMATIC = "pneumatic"


class WorkflowPriority(str, Enum):
    """What the placement optimizer favors when scoring positions.

    Attributes:
        EFFICIENCY: Reward central placement to shorten material travel.
        SAFETY: No centrality bonus; edge clearance dominates the score.
        BALANCED: Same scoring as SAFETY, kept as a distinct user choice.
    """

    EFFICIENCY = "efficiency"
    SAFETY = "safety"
    BALANCED = "balanced"


class BomCategory(str, Enum):
    """Bill of materials line item categories."""

    PIPE = "pipe"
    WIRE = "wire"
    CONDUIT = "conduit"
    FITTING = "fitting"
    HARDWARE = "hardware"


class BomUnit(str, Enum):
    """Units of measure for BOM quantities."""

    FEET = "ft"
    EACH = "ea"


class Phase(int, Enum):
    """Electrical service phase."""

    SINGLE = 1
    THREE = 3


@dataclass(frozen=True)
class Point2D:
    """2D point on the shop floor plan (feet)."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Point3D:
    """3D point in building space (feet)."""

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def is_close(self, other: Point3D, tolerance: float) -> bool:
        """Check that every coordinate differs by less than tolerance."""
        return (
            abs(self.x - other.x) < tolerance
            and abs(self.y - other.y) < tolerance
            and abs(self.z - other.z) < tolerance
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class BoxDimensions:
    """Size of an axis-aligned box (feet).

    Zero is allowed on any axis; a degenerate box still occupies its
    single point or plane for overlap testing.
    """

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.depth < 0:
            raise ValueError("Box dimensions must be non-negative")


def normalize_rotation(degrees: float) -> float:
    """Return a rotation in the range [0, 360)."""
    normalized = degrees % 360.0
    # tiny negative angles round up to exactly 360.0
    return 0.0 if normalized >= 360.0 else normalized


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp a score into [low, high]."""
    return max(low, min(high, value))


__all__ = [
    "BomCategory",
    "BomUnit",
    "BoxDimensions",
    "Phase",
    "Point2D",
    "Point3D",
    "SystemType",
    "WorkflowPriority",
    "clamp",
    "normalize_rotation",
]

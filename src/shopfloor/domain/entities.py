"""Domain entities for shop floor planning.

Equipment items are created by the caller (usually from a persistence
layer or a configuration file) and handed to the engine as plain data.
Workflow sequences tie equipment to timed operations and floor positions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .value_objects import Phase, Point2D, normalize_rotation


@dataclass(frozen=True)
class DustDemand:
    """Dust collection requirement at a machine port.

    Attributes:
        cfm: Airflow the machine needs at its port, in cubic feet per minute.
    """

    cfm: float

    def __post_init__(self) -> None:
        if self.cfm < 0:
            raise ValueError("Dust CFM must be non-negative")


@dataclass(frozen=True)
class AirDemand:
    """Compressed air requirement for a pneumatic tool.

    Attributes:
        scfm: Flow consumed while running, in standard cubic feet per minute.
        psi: Working pressure required at the tool.
        duty_cycle: Fraction of time the tool is running (0-1).
    """

    scfm: float
    psi: float = 90.0
    duty_cycle: float = 1.0

    def __post_init__(self) -> None:
        if self.scfm < 0:
            raise ValueError("Air SCFM must be non-negative")
        if self.psi <= 0:
            raise ValueError("Air pressure must be positive")
        if not 0 <= self.duty_cycle <= 1:
            raise ValueError("Duty cycle must be between 0 and 1")


@dataclass(frozen=True)
class ElectricalDemand:
    """Electrical load drawn by a machine.

    Attributes:
        volts: Supply voltage.
        amps: Full-load current.
        phase: Single or three phase service.
        power_factor: Load power factor (0.85 is typical for motors).
        is_motor: Whether the load is a motor, which changes breaker sizing.
    """

    volts: float
    amps: float
    phase: Phase = Phase.SINGLE
    power_factor: float = 1.0
    is_motor: bool = False

    def __post_init__(self) -> None:
        if self.volts <= 0:
            raise ValueError("Voltage must be positive")
        if self.amps < 0:
            raise ValueError("Current must be non-negative")
        if not 0 < self.power_factor <= 1:
            raise ValueError("Power factor must be in (0, 1]")

    @property
    def watts(self) -> float:
        """Real power drawn at full load."""
        multiplier = math.sqrt(3) if self.phase == Phase.THREE else 1.0
        return self.volts * self.amps * self.power_factor * multiplier


@dataclass(frozen=True)
class Equipment:
    """A machine or workstation placed on the shop floor.

    Footprint dimensions are fixed for the duration of one optimization
    pass. Orientation is normalized into [0, 360) on construction.

    Attributes:
        id: Unique identifier.
        name: Display name.
        category: Free-text grouping (e.g. "cutting", "finishing").
        width: Footprint along the building X axis in feet.
        depth: Footprint along the building Y axis in feet.
        height: Vertical extent in feet, used for 3D bounding boxes.
        orientation: Rotation in degrees.
        requires_dust: Machine needs a dust collection drop.
        requires_air: Machine needs a compressed air drop.
        requires_electrical: Machine needs a dedicated (high voltage) circuit.
        dust: Optional dust collection demand.
        air: Optional compressed air demand.
        electrical: Optional electrical demand.
    """

    id: str
    name: str
    category: str
    width: float
    depth: float
    height: float = 4.0
    orientation: float = 0.0
    requires_dust: bool = False
    requires_air: bool = False
    requires_electrical: bool = False
    dust: DustDemand | None = None
    air: AirDemand | None = None
    electrical: ElectricalDemand | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Equipment id must not be empty")
        if self.width <= 0 or self.depth <= 0:
            raise ValueError("Equipment footprint must be positive")
        if self.height < 0:
            raise ValueError("Equipment height must be non-negative")
        object.__setattr__(self, "orientation", normalize_rotation(self.orientation))

    @property
    def footprint_area(self) -> float:
        """Floor area in square feet."""
        return self.width * self.depth

    @property
    def is_quarter_turned(self) -> bool:
        """True when rotated 90 or 270 degrees, which swaps width and depth."""
        return self.orientation in (90.0, 270.0)

    @property
    def placed_width(self) -> float:
        """X extent after rotation (axis-aligned rotations only)."""
        return self.depth if self.is_quarter_turned else self.width

    @property
    def placed_depth(self) -> float:
        """Y extent after rotation (axis-aligned rotations only)."""
        return self.width if self.is_quarter_turned else self.depth

    @property
    def dust_cfm(self) -> float:
        return self.dust.cfm if self.dust else 0.0

    @property
    def power_draw_watts(self) -> float:
        return self.electrical.watts if self.electrical else 0.0


@dataclass(frozen=True)
class WorkflowStep:
    """One operation in a production sequence.

    Attributes:
        equipment_id: Equipment performing the operation.
        equipment_name: Display name used in path labels.
        operation_name: What happens at this step.
        cycle_time_minutes: Time spent at the station (> 0).
        position: Floor position of the station.
    """

    equipment_id: str
    equipment_name: str
    operation_name: str
    cycle_time_minutes: float
    position: Point2D

    def __post_init__(self) -> None:
        if self.cycle_time_minutes <= 0:
            raise ValueError("Cycle time must be positive")


@dataclass(frozen=True)
class WorkflowSequence:
    """Ordered production route through the shop."""

    name: str
    steps: tuple[WorkflowStep, ...] = field(default_factory=tuple)
    description: str | None = None
    units_per_day: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))
        if self.units_per_day is not None and self.units_per_day <= 0:
            raise ValueError("units_per_day must be positive")


__all__ = [
    "AirDemand",
    "DustDemand",
    "ElectricalDemand",
    "Equipment",
    "WorkflowSequence",
    "WorkflowStep",
]

"""Data models for compressed air sizing."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import DEFAULT_MAX_DROP_PER_100FT


@dataclass(frozen=True)
class AirSystemParams:
    """Flow and run description for one air line.

    Attributes:
        flow_scfm: Flow through the line.
        pressure_psi: Line pressure at the source.
        length_ft: Run length.
        max_drop_per_100ft: Allowed pressure drop per 100 ft of pipe.
    """

    flow_scfm: float
    pressure_psi: float
    length_ft: float
    max_drop_per_100ft: float = DEFAULT_MAX_DROP_PER_100FT

    def __post_init__(self) -> None:
        if self.flow_scfm < 0:
            raise ValueError("Flow must be non-negative")
        if self.pressure_psi <= 0:
            raise ValueError("Pressure must be positive")
        if self.length_ft < 0:
            raise ValueError("Run length must be non-negative")
        if self.max_drop_per_100ft <= 0:
            raise ValueError("max_drop_per_100ft must be positive")


@dataclass(frozen=True)
class AirPressureDrop:
    """Pressure drop and velocity for one pipe size."""

    pressure_drop_psi: float
    pressure_drop_per_100ft: float
    velocity_fpm: float


@dataclass(frozen=True)
class AirPipeSizingResult:
    """Selected pipe for an air line.

    Attributes:
        pipe_size: Nominal pipe size.
        pressure_drop: Total drop over the run (psi).
        velocity: Air velocity in the selected pipe (ft/min).
        warnings: Velocity notes and soft violations.
    """

    pipe_size: str
    pressure_drop: float
    velocity: float
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def meets_drop_limit(self) -> bool:
        return not any("exceeds maximum" in w for w in self.warnings)


@dataclass(frozen=True)
class AirTool:
    """Pneumatic tool demand used for compressor sizing."""

    cfm: float
    duty_cycle: float

    def __post_init__(self) -> None:
        if self.cfm < 0:
            raise ValueError("Tool CFM must be non-negative")
        if not 0 <= self.duty_cycle <= 1:
            raise ValueError("Duty cycle must be between 0 and 1")


@dataclass(frozen=True)
class CompressorRequirement:
    required_cfm: float
    recommended_hp: int


@dataclass(frozen=True)
class ReceiverRecommendation:
    gallons: int
    recommendation: str


__all__ = [
    "AirPipeSizingResult",
    "AirPressureDrop",
    "AirSystemParams",
    "AirTool",
    "CompressorRequirement",
    "ReceiverRecommendation",
]

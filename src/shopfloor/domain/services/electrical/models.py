"""Data models for electrical circuit sizing."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...value_objects import Phase
from .constants import DEFAULT_DERATING_FACTOR, DEFAULT_MAX_VOLTAGE_DROP_PCT


@dataclass(frozen=True)
class ElectricalConfig:
    """Named defaults for electrical sizing.

    Attributes:
        derating_factor: Multiplier applied to table ampacity (0-1].
        max_voltage_drop_pct: Allowed voltage drop in percent.
    """

    derating_factor: float = DEFAULT_DERATING_FACTOR
    max_voltage_drop_pct: float = DEFAULT_MAX_VOLTAGE_DROP_PCT

    def __post_init__(self) -> None:
        if not 0 < self.derating_factor <= 1:
            raise ValueError("derating_factor must be in (0, 1]")
        if self.max_voltage_drop_pct <= 0:
            raise ValueError("max_voltage_drop_pct must be positive")


@dataclass(frozen=True)
class CircuitLoad:
    """Load carried by a branch circuit.

    Attributes:
        volts: Supply voltage.
        amps: Load current.
        phase: Single or three phase.
        power_factor: Load power factor.
        is_motor: Motor loads get larger breakers.
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

    @property
    def current_carrying_conductors(self) -> int:
        """Number of ungrounded plus neutral conductors in the run."""
        return 3 if self.phase == Phase.THREE else 2


@dataclass(frozen=True)
class CircuitRun:
    """A load plus the one-way length of wire feeding it."""

    load: CircuitLoad
    length_ft: float

    def __post_init__(self) -> None:
        if self.length_ft < 0:
            raise ValueError("Run length must be non-negative")


@dataclass(frozen=True)
class VoltageDropResult:
    """Voltage drop for one conductor size over a run."""

    voltage_drop: float
    percent_drop: float


@dataclass(frozen=True)
class WireSizingResult:
    """Selected conductor for a run.

    Attributes:
        wire_size: Standard conductor size (e.g. "10 AWG").
        ampacity: Table ampacity of the selected size (not derated).
        voltage_drop: Volts lost over the run.
        percent_drop: Voltage drop as percent of supply.
        warnings: Upsizing notes and soft violations.
    """

    wire_size: str
    ampacity: float
    voltage_drop: float
    percent_drop: float
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def was_upsized(self) -> bool:
        return any(w.startswith("Upsized") for w in self.warnings)


@dataclass(frozen=True)
class ElectricalSizingResult:
    """Complete branch circuit recommendation.

    Attributes:
        conductor_size: Selected conductor.
        ampacity: Table ampacity of the conductor.
        voltage_drop: Volts lost over the run.
        percent_drop: Voltage drop percent.
        breaker_amps: Recommended breaker rating.
        conduit_size: Conduit trade size for the full conductor set.
        conductor_count: Conductors in the conduit, ground included.
        warnings: Soft violations and notes.
    """

    conductor_size: str
    ampacity: float
    voltage_drop: float
    percent_drop: float
    breaker_amps: int
    conduit_size: str
    conductor_count: int
    warnings: tuple[str, ...] = field(default_factory=tuple)


__all__ = [
    "CircuitLoad",
    "CircuitRun",
    "ElectricalConfig",
    "ElectricalSizingResult",
    "VoltageDropResult",
    "WireSizingResult",
]

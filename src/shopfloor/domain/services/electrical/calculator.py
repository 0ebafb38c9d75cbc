"""Branch circuit sizing: conductors, voltage drop, conduit and breakers.

All functions are pure. Loads beyond the largest standard size raise
SizingError; excessive voltage drop is returned as a warning so the
caller can decide whether to accept the run.
"""

from __future__ import annotations

import logging

from ...exceptions import SizingError
from ...value_objects import Phase
from .constants import (
    CONDUIT_FILL_CAPACITY,
    CONTINUOUS_LOAD_FACTOR,
    DEFAULT_DERATING_FACTOR,
    DEFAULT_MAX_VOLTAGE_DROP_PCT,
    LONG_RUN_THRESHOLD_FT,
    MOTOR_BREAKER_FACTOR,
    SINGLE_PHASE_MULTIPLIER,
    STANDARD_BREAKER_SIZES,
    THREE_PHASE_MULTIPLIER,
    WIRE_AMPACITY,
    WIRE_AREA,
    WIRE_RESISTANCE,
    WIRE_SIZES,
)
from .models import (
    CircuitLoad,
    CircuitRun,
    ElectricalConfig,
    ElectricalSizingResult,
    VoltageDropResult,
    WireSizingResult,
)

logger = logging.getLogger(__name__)


def _require_wire_size(wire_size: str) -> None:
    if wire_size not in WIRE_AMPACITY:
        raise ValueError(f"Unknown wire size: {wire_size}")


def calculate_wire_size_by_ampacity(
    amps: float, derating_factor: float = DEFAULT_DERATING_FACTOR
) -> str:
    """Return the smallest conductor whose derated ampacity carries the load.

    Args:
        amps: Load current.
        derating_factor: Multiplier applied to table ampacity.

    Returns:
        Standard conductor size name.

    Raises:
        SizingError: If the load exceeds the largest conductor.
    """
    required = amps / derating_factor
    for size in WIRE_SIZES:
        if WIRE_AMPACITY[size] >= required:
            return size

    largest = WIRE_SIZES[-1]
    raise SizingError(
        f"Load of {amps}A exceeds maximum wire size ({largest})",
        quantity="wire",
        value=amps,
        limit=WIRE_AMPACITY[largest] * derating_factor,
    )


def calculate_voltage_drop(
    wire_size: str,
    length_ft: float,
    amps: float,
    volts: float,
    phase: Phase = Phase.SINGLE,
) -> VoltageDropResult:
    """Voltage drop over a run: VD = k * I * R * L / 1000.

    Args:
        wire_size: Standard conductor size.
        length_ft: One-way run length.
        amps: Load current.
        volts: Supply voltage.
        phase: Single phase uses k=2, three phase uses k=sqrt(3).

    Returns:
        VoltageDropResult with volts and percent.
    """
    _require_wire_size(wire_size)
    multiplier = THREE_PHASE_MULTIPLIER if phase == Phase.THREE else SINGLE_PHASE_MULTIPLIER
    voltage_drop = multiplier * amps * WIRE_RESISTANCE[wire_size] * length_ft / 1000
    return VoltageDropResult(
        voltage_drop=voltage_drop,
        percent_drop=voltage_drop / volts * 100,
    )


def calculate_optimal_wire_size(
    run: CircuitRun, config: ElectricalConfig | None = None
) -> WireSizingResult:
    """Pick a conductor that carries the load and meets the drop limit.

    Starts from the ampacity choice and steps up one size at a time until
    the voltage drop is within the limit or the largest size is reached.

    Raises:
        SizingError: If the load exceeds the largest conductor ampacity.
    """
    config = config or ElectricalConfig()
    load = run.load
    warnings: list[str] = []

    wire_size = calculate_wire_size_by_ampacity(load.amps, config.derating_factor)
    drop = calculate_voltage_drop(wire_size, run.length_ft, load.amps, load.volts, load.phase)

    index = WIRE_SIZES.index(wire_size)
    while drop.percent_drop > config.max_voltage_drop_pct and index < len(WIRE_SIZES) - 1:
        index += 1
        wire_size = WIRE_SIZES[index]
        drop = calculate_voltage_drop(
            wire_size, run.length_ft, load.amps, load.volts, load.phase
        )
        logger.debug("Upsized conductor to %s (%.2f%% drop)", wire_size, drop.percent_drop)
        warnings.append(f"Upsized to {wire_size} to meet voltage drop requirement")

    if drop.percent_drop > config.max_voltage_drop_pct:
        warnings.append(
            f"Voltage drop {drop.percent_drop:.2f}% exceeds {config.max_voltage_drop_pct:g}%"
        )

    if run.length_ft > LONG_RUN_THRESHOLD_FT:
        warnings.append(
            f"Long run ({run.length_ft:g}ft) - consider voltage drop carefully"
        )

    return WireSizingResult(
        wire_size=wire_size,
        ampacity=WIRE_AMPACITY[wire_size],
        voltage_drop=drop.voltage_drop,
        percent_drop=drop.percent_drop,
        warnings=tuple(warnings),
    )


def calculate_conduit_size(wire_size: str, conductor_count: int) -> str:
    """Smallest conduit whose 40% fill holds the conductors.

    Raises:
        SizingError: If no standard conduit is large enough.
    """
    _require_wire_size(wire_size)
    if conductor_count < 1:
        raise ValueError("conductor_count must be at least 1")

    total_area = WIRE_AREA[wire_size] * conductor_count
    for conduit, capacity in CONDUIT_FILL_CAPACITY.items():
        if capacity >= total_area:
            return conduit

    raise SizingError(
        f"{conductor_count} x {wire_size} conductors exceed maximum conduit size",
        quantity="conduit",
        value=total_area,
        limit=max(CONDUIT_FILL_CAPACITY.values()),
    )


def calculate_breaker_size(load_amps: float, is_motor: bool = False) -> int:
    """Next standard breaker at or above 125% (general) or 250% (motor).

    Raises:
        SizingError: If the required rating exceeds every standard size.
    """
    factor = MOTOR_BREAKER_FACTOR if is_motor else CONTINUOUS_LOAD_FACTOR
    required = load_amps * factor
    for rating in STANDARD_BREAKER_SIZES:
        if rating >= required:
            return rating

    raise SizingError(
        f"Load requires {required:g}A breaker, exceeds standard sizes",
        quantity="breaker",
        value=required,
        limit=STANDARD_BREAKER_SIZES[-1],
    )


def size_electrical_circuit(
    load: CircuitLoad,
    length_ft: float,
    max_drop_pct: float = DEFAULT_MAX_VOLTAGE_DROP_PCT,
    derating_factor: float = DEFAULT_DERATING_FACTOR,
) -> ElectricalSizingResult:
    """Size conductor, breaker and conduit for one branch circuit.

    Args:
        load: Circuit load.
        length_ft: One-way run length.
        max_drop_pct: Allowed voltage drop percent.
        derating_factor: Ampacity derating.

    Returns:
        ElectricalSizingResult for the whole circuit.

    Raises:
        SizingError: If any component exceeds its standard sizes.
        ValueError: If the run length or voltage drop limit is invalid.
    """
    config = ElectricalConfig(
        derating_factor=derating_factor, max_voltage_drop_pct=max_drop_pct
    )
    wire = calculate_optimal_wire_size(CircuitRun(load=load, length_ft=length_ft), config)
    breaker = calculate_breaker_size(load.amps, load.is_motor)
    # equipment ground travels in the same conduit
    conductor_count = load.current_carrying_conductors + 1
    conduit = calculate_conduit_size(wire.wire_size, conductor_count)

    logger.debug(
        "Sized %gA %d-phase circuit: %s, %dA breaker, %s conduit",
        load.amps,
        int(load.phase),
        wire.wire_size,
        breaker,
        conduit,
    )
    return ElectricalSizingResult(
        conductor_size=wire.wire_size,
        ampacity=wire.ampacity,
        voltage_drop=wire.voltage_drop,
        percent_drop=wire.percent_drop,
        breaker_amps=breaker,
        conduit_size=conduit,
        conductor_count=conductor_count,
        warnings=wire.warnings,
    )


__all__ = [
    "calculate_breaker_size",
    "calculate_conduit_size",
    "calculate_optimal_wire_size",
    "calculate_voltage_drop",
    "calculate_wire_size_by_ampacity",
    "size_electrical_circuit",
]

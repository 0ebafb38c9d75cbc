"""Electrical branch circuit sizing.

Conductor selection by ampacity and voltage drop, conduit fill and
breaker selection, following NEC copper THHN tables.

Example:
    from shopfloor.domain.services.electrical import CircuitLoad, size_electrical_circuit

    result = size_electrical_circuit(CircuitLoad(volts=240, amps=16), length_ft=60)
    print(result.conductor_size, result.breaker_amps, result.conduit_size)
"""

from .calculator import (
    calculate_breaker_size,
    calculate_conduit_size,
    calculate_optimal_wire_size,
    calculate_voltage_drop,
    calculate_wire_size_by_ampacity,
    size_electrical_circuit,
)
from .constants import (
    CONDUIT_FILL_CAPACITY,
    DEFAULT_DERATING_FACTOR,
    DEFAULT_MAX_VOLTAGE_DROP_PCT,
    STANDARD_BREAKER_SIZES,
    WIRE_AMPACITY,
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

__all__ = [
    # Constants
    "CONDUIT_FILL_CAPACITY",
    "DEFAULT_DERATING_FACTOR",
    "DEFAULT_MAX_VOLTAGE_DROP_PCT",
    "STANDARD_BREAKER_SIZES",
    "WIRE_AMPACITY",
    "WIRE_RESISTANCE",
    "WIRE_SIZES",
    # Models
    "CircuitLoad",
    "CircuitRun",
    "ElectricalConfig",
    "ElectricalSizingResult",
    "VoltageDropResult",
    "WireSizingResult",
    # Calculations
    "calculate_breaker_size",
    "calculate_conduit_size",
    "calculate_optimal_wire_size",
    "calculate_voltage_drop",
    "calculate_wire_size_by_ampacity",
    "size_electrical_circuit",
]

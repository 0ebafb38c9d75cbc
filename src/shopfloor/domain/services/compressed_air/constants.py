"""Pipe, compressor and receiver constants for compressed air sizing."""

from __future__ import annotations

# ==============================================================================
# Piping
# ==============================================================================

# Schedule 40 internal diameters (inches) by nominal size, smallest first
AIR_PIPE_INTERNAL_DIAMETER: dict[str, float] = {
    '1/2"': 0.622,
    '3/4"': 0.824,
    '1"': 1.049,
    '1-1/4"': 1.380,
    '1-1/2"': 1.610,
    '2"': 2.067,
    '2-1/2"': 2.469,
    '3"': 3.068,
    '4"': 4.026,
    '6"': 6.065,
}

AIR_PIPE_SIZES: tuple[str, ...] = tuple(AIR_PIPE_INTERNAL_DIAMETER)

# Empirical pressure drop coefficient and exponents
PRESSURE_DROP_COEFFICIENT: float = 0.1025
FLOW_EXPONENT: float = 1.85
DIAMETER_EXPONENT: float = 4.97

# Default allowed drop (psi per 100 ft)
DEFAULT_MAX_DROP_PER_100FT: float = 1.0

# Healthy velocity band (ft/min)
MAX_AIR_VELOCITY_FPM: float = 6000.0
MIN_AIR_VELOCITY_FPM: float = 1000.0


# ==============================================================================
# Compressor and receiver
# ==============================================================================

COMPRESSOR_SAFETY_FACTOR: float = 1.2

# Reciprocating compressor output at 90 psi
CFM_PER_HORSEPOWER: float = 4.0

ATMOSPHERIC_PSI: float = 14.7
GALLONS_PER_CUBIC_FOOT: float = 7.48

# Minutes of deficit the receiver must cover
RECEIVER_BUFFER_MINUTES: float = 1.0

DEFAULT_ALLOWABLE_RECEIVER_DROP_PSI: float = 10.0

STANDARD_TANK_SIZES_GAL: tuple[int, ...] = (60, 80, 120, 200, 240, 300, 500)
MINIMUM_TANK_GAL: int = STANDARD_TANK_SIZES_GAL[0]


__all__ = [
    "AIR_PIPE_INTERNAL_DIAMETER",
    "AIR_PIPE_SIZES",
    "ATMOSPHERIC_PSI",
    "CFM_PER_HORSEPOWER",
    "COMPRESSOR_SAFETY_FACTOR",
    "DEFAULT_ALLOWABLE_RECEIVER_DROP_PSI",
    "DEFAULT_MAX_DROP_PER_100FT",
    "DIAMETER_EXPONENT",
    "FLOW_EXPONENT",
    "GALLONS_PER_CUBIC_FOOT",
    "MAX_AIR_VELOCITY_FPM",
    "MINIMUM_TANK_GAL",
    "MIN_AIR_VELOCITY_FPM",
    "PRESSURE_DROP_COEFFICIENT",
    "RECEIVER_BUFFER_MINUTES",
    "STANDARD_TANK_SIZES_GAL",
]

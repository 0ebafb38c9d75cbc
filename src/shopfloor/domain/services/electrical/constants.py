"""Standard conductor, conduit and breaker tables for electrical sizing.

Values are for copper THHN conductors at the 75°C column of NEC Table
310.16, Chapter 9 Table 8 resistances, and Chapter 9 Table 4/5 areas.
Every table is ordered from smallest to largest size.
"""

from __future__ import annotations

# ==============================================================================
# Conductors
# ==============================================================================

# Standard conductor sizes, smallest first
WIRE_SIZES: tuple[str, ...] = (
    "14 AWG",
    "12 AWG",
    "10 AWG",
    "8 AWG",
    "6 AWG",
    "4 AWG",
    "3 AWG",
    "2 AWG",
    "1 AWG",
    "1/0 AWG",
    "2/0 AWG",
    "3/0 AWG",
    "4/0 AWG",
)

# Ampacity (amps), copper, 75°C rating
WIRE_AMPACITY: dict[str, float] = {
    "14 AWG": 20,
    "12 AWG": 25,
    "10 AWG": 35,
    "8 AWG": 50,
    "6 AWG": 65,
    "4 AWG": 85,
    "3 AWG": 100,
    "2 AWG": 115,
    "1 AWG": 130,
    "1/0 AWG": 150,
    "2/0 AWG": 175,
    "3/0 AWG": 200,
    "4/0 AWG": 230,
}

# Resistance (ohms per 1000 ft), uncoated copper
WIRE_RESISTANCE: dict[str, float] = {
    "14 AWG": 3.07,
    "12 AWG": 1.93,
    "10 AWG": 1.21,
    "8 AWG": 0.764,
    "6 AWG": 0.491,
    "4 AWG": 0.308,
    "3 AWG": 0.245,
    "2 AWG": 0.194,
    "1 AWG": 0.154,
    "1/0 AWG": 0.122,
    "2/0 AWG": 0.0967,
    "3/0 AWG": 0.0766,
    "4/0 AWG": 0.0608,
}

# Cross-sectional area including insulation (square inches), THHN
WIRE_AREA: dict[str, float] = {
    "14 AWG": 0.0097,
    "12 AWG": 0.0133,
    "10 AWG": 0.0211,
    "8 AWG": 0.0366,
    "6 AWG": 0.0507,
    "4 AWG": 0.0824,
    "3 AWG": 0.0973,
    "2 AWG": 0.1158,
    "1 AWG": 0.1562,
    "1/0 AWG": 0.1855,
    "2/0 AWG": 0.2223,
    "3/0 AWG": 0.2679,
    "4/0 AWG": 0.3237,
}

# Conduit/temperature derating applied to table ampacity
DEFAULT_DERATING_FACTOR: float = 0.8

# Maximum voltage drop for a branch circuit (percent)
DEFAULT_MAX_VOLTAGE_DROP_PCT: float = 3.0

# Runs longer than this get an explicit voltage drop reminder (feet)
LONG_RUN_THRESHOLD_FT: float = 100.0

# Voltage drop multipliers: round trip for single phase, sqrt(3) for three
SINGLE_PHASE_MULTIPLIER: float = 2.0
THREE_PHASE_MULTIPLIER: float = 1.732


# ==============================================================================
# Conduit
# ==============================================================================

# EMT trade sizes with 40% fill capacity (square inches), smallest first
CONDUIT_FILL_CAPACITY: dict[str, float] = {
    '1/2"': 0.12,
    '3/4"': 0.21,
    '1"': 0.35,
    '1-1/4"': 0.61,
    '1-1/2"': 0.83,
    '2"': 1.36,
    '2-1/2"': 2.34,
    '3"': 3.54,
    '3-1/2"': 4.62,
    '4"': 5.86,
}


# ==============================================================================
# Overcurrent protection
# ==============================================================================

# Standard inverse-time breaker ratings (amps), NEC 240.6(A) subset
STANDARD_BREAKER_SIZES: tuple[int, ...] = (
    15, 20, 25, 30, 35, 40, 45, 50, 60, 70, 80, 90, 100,
    110, 125, 150, 175, 200, 225, 250, 300, 350, 400,
)

# Continuous load factor (NEC 210.20)
CONTINUOUS_LOAD_FACTOR: float = 1.25

# Motor branch-circuit protection factor (NEC 430.52, inverse time breaker)
MOTOR_BREAKER_FACTOR: float = 2.5


__all__ = [
    "CONDUIT_FILL_CAPACITY",
    "CONTINUOUS_LOAD_FACTOR",
    "DEFAULT_DERATING_FACTOR",
    "DEFAULT_MAX_VOLTAGE_DROP_PCT",
    "LONG_RUN_THRESHOLD_FT",
    "MOTOR_BREAKER_FACTOR",
    "SINGLE_PHASE_MULTIPLIER",
    "STANDARD_BREAKER_SIZES",
    "THREE_PHASE_MULTIPLIER",
    "WIRE_AMPACITY",
    "WIRE_AREA",
    "WIRE_RESISTANCE",
    "WIRE_SIZES",
]

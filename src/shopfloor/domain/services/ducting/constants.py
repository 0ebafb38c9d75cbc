"""Velocity standards and presets for dust collection ducting."""

from __future__ import annotations

# ==============================================================================
# Transport velocities (ft/min)
# ==============================================================================

MAIN_LINE_VELOCITY_FPM: float = 3500.0
# Branches run faster so particulate stays entrained
BRANCH_LINE_VELOCITY_FPM: float = 4000.0
RETURN_AIR_VELOCITY_FPM: float = 2000.0

# Acceptable branch velocity band
MIN_BRANCH_VELOCITY_FPM: float = 3500.0
MAX_BRANCH_VELOCITY_FPM: float = 5000.0


# ==============================================================================
# Friction (round galvanized duct, in. w.g. per 100 ft)
# ==============================================================================

FRICTION_COEFFICIENT: float = 0.109136
FRICTION_FLOW_EXPONENT: float = 1.9
FRICTION_DIAMETER_EXPONENT: float = 5.02

MAX_FRICTION_PER_100FT: float = 2.0


# ==============================================================================
# Collector sizing
# ==============================================================================

COLLECTOR_SAFETY_FACTOR: float = 1.5

# CFM a collector delivers per horsepower, for rough HP guidance
CFM_PER_COLLECTOR_HP: float = 400.0


# ==============================================================================
# Machine presets (CFM at the port)
# ==============================================================================

MACHINE_CFM_PRESETS: dict[str, float] = {
    "Table Saw": 350,
    "Jointer": 400,
    "Planer": 450,
    "Band Saw": 350,
    "Router Table": 250,
    "Miter Saw": 300,
    "Drum Sander": 400,
    "Lathe": 300,
    "Disc Sander": 350,
    "CNC Router": 500,
}


__all__ = [
    "BRANCH_LINE_VELOCITY_FPM",
    "CFM_PER_COLLECTOR_HP",
    "COLLECTOR_SAFETY_FACTOR",
    "FRICTION_COEFFICIENT",
    "FRICTION_DIAMETER_EXPONENT",
    "FRICTION_FLOW_EXPONENT",
    "MACHINE_CFM_PRESETS",
    "MAIN_LINE_VELOCITY_FPM",
    "MAX_BRANCH_VELOCITY_FPM",
    "MAX_FRICTION_PER_100FT",
    "MIN_BRANCH_VELOCITY_FPM",
    "RETURN_AIR_VELOCITY_FPM",
]

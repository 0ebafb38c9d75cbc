"""Dust collection duct and collector sizing."""

from .calculator import (
    DuctBranchResult,
    DustMachine,
    DustSystemResult,
    MachineBranch,
    calculate_friction_loss_per_100ft,
    calculate_optimal_diameter,
    calculate_velocity,
    size_duct_branch,
    size_dust_system,
)
from .constants import (
    BRANCH_LINE_VELOCITY_FPM,
    CFM_PER_COLLECTOR_HP,
    MACHINE_CFM_PRESETS,
    MAIN_LINE_VELOCITY_FPM,
    RETURN_AIR_VELOCITY_FPM,
)

__all__ = [
    "BRANCH_LINE_VELOCITY_FPM",
    "CFM_PER_COLLECTOR_HP",
    "MACHINE_CFM_PRESETS",
    "MAIN_LINE_VELOCITY_FPM",
    "RETURN_AIR_VELOCITY_FPM",
    "DuctBranchResult",
    "DustMachine",
    "DustSystemResult",
    "MachineBranch",
    "calculate_friction_loss_per_100ft",
    "calculate_optimal_diameter",
    "calculate_velocity",
    "size_duct_branch",
    "size_dust_system",
]

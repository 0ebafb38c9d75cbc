"""Dust collection duct sizing.

Diameters are in inches, velocities in ft/min and friction in inches of
water gauge per 100 ft of round galvanized duct.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable

from .constants import (
    BRANCH_LINE_VELOCITY_FPM,
    COLLECTOR_SAFETY_FACTOR,
    FRICTION_COEFFICIENT,
    FRICTION_DIAMETER_EXPONENT,
    FRICTION_FLOW_EXPONENT,
    MACHINE_CFM_PRESETS,
    MAIN_LINE_VELOCITY_FPM,
    MAX_BRANCH_VELOCITY_FPM,
    MAX_FRICTION_PER_100FT,
    MIN_BRANCH_VELOCITY_FPM,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DustMachine:
    """A machine port to be served by the dust system."""

    name: str
    cfm: float

    def __post_init__(self) -> None:
        if self.cfm < 0:
            raise ValueError("Machine CFM must be non-negative")

    @classmethod
    def from_preset(cls, name: str) -> DustMachine:
        """Build a machine from the preset CFM table.

        Raises:
            KeyError: If no preset exists for name.
        """
        return cls(name=name, cfm=MACHINE_CFM_PRESETS[name])


@dataclass(frozen=True)
class DuctBranchResult:
    """Sizing for one duct run.

    Attributes:
        cfm: Flow through the run.
        diameter: Duct diameter rounded up to a whole inch.
        velocity: Actual velocity at that diameter.
        friction_per_100ft: Friction loss per 100 ft.
        total_friction: Friction over the run length.
        velocity_ok: Velocity is inside the transport band.
        friction_ok: Friction per 100 ft is below the limit.
    """

    cfm: float
    diameter: int
    velocity: float
    friction_per_100ft: float
    total_friction: float
    velocity_ok: bool
    friction_ok: bool


@dataclass(frozen=True)
class MachineBranch:
    machine: DustMachine
    branch: DuctBranchResult


@dataclass(frozen=True)
class DustSystemResult:
    """Branches, main trunk and collector size for a shop.

    Attributes:
        branches: One sized branch per machine, in input order.
        main_trunk: Trunk sized for the simultaneous demand.
        simultaneous_cfm: Demand of the machines expected to run together.
        collector_cfm: Recommended collector capacity.
    """

    branches: tuple[MachineBranch, ...] = field(default_factory=tuple)
    main_trunk: DuctBranchResult | None = None
    simultaneous_cfm: float = 0.0
    collector_cfm: int = 0


def calculate_optimal_diameter(
    cfm: float, target_velocity_fpm: float = BRANCH_LINE_VELOCITY_FPM
) -> float:
    """Diameter giving the target velocity, or 0 for non-positive input."""
    if cfm <= 0 or target_velocity_fpm <= 0:
        return 0.0
    area_sq_ft = cfm / target_velocity_fpm
    return math.sqrt(area_sq_ft * 576 / math.pi)


def calculate_velocity(cfm: float, diameter_in: float) -> float:
    """Velocity of a flow through a round duct, or 0 for no duct."""
    if diameter_in <= 0:
        return 0.0
    area_sq_ft = math.pi * (diameter_in / 24) ** 2
    return cfm / area_sq_ft


def calculate_friction_loss_per_100ft(cfm: float, diameter_in: float) -> float:
    """h = 0.109136 * Q^1.9 / d^5.02 (round galvanized duct)."""
    if diameter_in <= 0:
        return 0.0
    return (
        FRICTION_COEFFICIENT
        * max(cfm, 0.0) ** FRICTION_FLOW_EXPONENT
        / diameter_in**FRICTION_DIAMETER_EXPONENT
    )


def _size_run(cfm: float, velocity_fpm: float, run_length_ft: float) -> DuctBranchResult:
    diameter = math.ceil(calculate_optimal_diameter(cfm, velocity_fpm))
    velocity = calculate_velocity(cfm, diameter)
    friction = calculate_friction_loss_per_100ft(cfm, diameter)
    return DuctBranchResult(
        cfm=cfm,
        diameter=diameter,
        velocity=velocity,
        friction_per_100ft=friction,
        total_friction=friction / 100 * run_length_ft,
        velocity_ok=MIN_BRANCH_VELOCITY_FPM <= velocity <= MAX_BRANCH_VELOCITY_FPM,
        friction_ok=friction < MAX_FRICTION_PER_100FT,
    )


def size_duct_branch(cfm: float, run_length_ft: float = 0.0) -> DuctBranchResult:
    """Size a branch line at the branch transport velocity.

    Args:
        cfm: Flow required at the machine.
        run_length_ft: Branch length, used for total friction.

    Returns:
        DuctBranchResult with the diameter rounded up to a whole inch.
    """
    if run_length_ft < 0:
        raise ValueError("Run length must be non-negative")
    return _size_run(cfm, BRANCH_LINE_VELOCITY_FPM, run_length_ft)


def size_dust_system(
    machines: Iterable[DustMachine],
    simultaneous: int = 1,
    main_run_length_ft: float = 0.0,
) -> DustSystemResult:
    """Size branches, main trunk and collector for a set of machines.

    The trunk carries the combined flow of the `simultaneous` machines
    with the highest demand; the collector gets a 50% margin on that.

    Args:
        machines: Machines connected to the system.
        simultaneous: How many machines may run at once.
        main_run_length_ft: Trunk length, used for total friction.
    """
    if simultaneous < 1:
        raise ValueError("simultaneous must be at least 1")

    machines = list(machines)
    branches = tuple(
        MachineBranch(machine=m, branch=size_duct_branch(m.cfm)) for m in machines
    )
    if not machines:
        return DustSystemResult()

    top = sorted((m.cfm for m in machines), reverse=True)[:simultaneous]
    simultaneous_cfm = sum(top)
    main_trunk = _size_run(simultaneous_cfm, MAIN_LINE_VELOCITY_FPM, main_run_length_ft)
    collector_cfm = math.ceil(simultaneous_cfm * COLLECTOR_SAFETY_FACTOR)

    logger.debug(
        "Dust system: %d machines, %g CFM simultaneous, %d\" trunk",
        len(machines),
        simultaneous_cfm,
        main_trunk.diameter,
    )
    return DustSystemResult(
        branches=branches,
        main_trunk=main_trunk,
        simultaneous_cfm=simultaneous_cfm,
        collector_cfm=collector_cfm,
    )


__all__ = [
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

"""Compressed air line, compressor and receiver sizing.

Pressure drop uses the simplified empirical relation

    dP = 0.1025 * Q^1.85 * L / (D^4.97 * P)

with Q in SCFM, L in feet, D the internal diameter in inches and P the
line pressure in psi. A line that cannot meet the drop limit gets the
largest pipe plus a warning; nothing here raises for soft violations.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from .constants import (
    AIR_PIPE_INTERNAL_DIAMETER,
    AIR_PIPE_SIZES,
    ATMOSPHERIC_PSI,
    CFM_PER_HORSEPOWER,
    COMPRESSOR_SAFETY_FACTOR,
    DEFAULT_ALLOWABLE_RECEIVER_DROP_PSI,
    DEFAULT_MAX_DROP_PER_100FT,
    DIAMETER_EXPONENT,
    FLOW_EXPONENT,
    GALLONS_PER_CUBIC_FOOT,
    MAX_AIR_VELOCITY_FPM,
    MIN_AIR_VELOCITY_FPM,
    MINIMUM_TANK_GAL,
    PRESSURE_DROP_COEFFICIENT,
    RECEIVER_BUFFER_MINUTES,
    STANDARD_TANK_SIZES_GAL,
)
from .models import (
    AirPipeSizingResult,
    AirPressureDrop,
    AirSystemParams,
    AirTool,
    CompressorRequirement,
    ReceiverRecommendation,
)

logger = logging.getLogger(__name__)


def calculate_air_pressure_drop(pipe_size: str, params: AirSystemParams) -> AirPressureDrop:
    """Pressure drop and velocity for a pipe size.

    Raises:
        ValueError: If pipe_size is not a standard size.
    """
    if pipe_size not in AIR_PIPE_INTERNAL_DIAMETER:
        raise ValueError(f"Unknown air pipe size: {pipe_size}")

    diameter = AIR_PIPE_INTERNAL_DIAMETER[pipe_size]
    area = math.pi * (diameter / 2) ** 2
    velocity = params.flow_scfm * 144 / area

    drop_per_foot = (
        PRESSURE_DROP_COEFFICIENT
        * params.flow_scfm**FLOW_EXPONENT
        / (diameter**DIAMETER_EXPONENT * params.pressure_psi)
    )
    # per-100ft figure stays defined for zero-length runs
    return AirPressureDrop(
        pressure_drop_psi=drop_per_foot * params.length_ft,
        pressure_drop_per_100ft=drop_per_foot * 100,
        velocity_fpm=velocity,
    )


def calculate_optimal_air_pipe_size(params: AirSystemParams) -> AirPipeSizingResult:
    """Smallest standard pipe meeting the per-100ft drop limit.

    Velocity outside the healthy band adds a warning but does not change
    the selection.
    """
    for size in AIR_PIPE_SIZES:
        drop = calculate_air_pressure_drop(size, params)
        if drop.pressure_drop_per_100ft <= params.max_drop_per_100ft:
            warnings: list[str] = []
            if drop.velocity_fpm > MAX_AIR_VELOCITY_FPM:
                warnings.append(
                    f"High velocity ({drop.velocity_fpm:.0f} fpm) - may cause noise"
                )
            if drop.velocity_fpm < MIN_AIR_VELOCITY_FPM:
                warnings.append(
                    f"Low velocity ({drop.velocity_fpm:.0f} fpm) - pipe may be oversized"
                )
            return AirPipeSizingResult(
                pipe_size=size,
                pressure_drop=drop.pressure_drop_psi,
                velocity=drop.velocity_fpm,
                warnings=tuple(warnings),
            )

    largest = AIR_PIPE_SIZES[-1]
    drop = calculate_air_pressure_drop(largest, params)
    logger.debug(
        "No air pipe meets %.2f psi/100ft at %g SCFM",
        params.max_drop_per_100ft,
        params.flow_scfm,
    )
    return AirPipeSizingResult(
        pipe_size=largest,
        pressure_drop=drop.pressure_drop_psi,
        velocity=drop.velocity_fpm,
        warnings=(
            "Pressure drop exceeds maximum - consider larger pipe or shorter run",
        ),
    )


def size_air_pipe(
    flow_scfm: float,
    pressure_psi: float,
    length_ft: float,
    max_drop_per_100ft: float = DEFAULT_MAX_DROP_PER_100FT,
) -> AirPipeSizingResult:
    """Size an air line from plain values."""
    return calculate_optimal_air_pipe_size(
        AirSystemParams(
            flow_scfm=flow_scfm,
            pressure_psi=pressure_psi,
            length_ft=length_ft,
            max_drop_per_100ft=max_drop_per_100ft,
        )
    )


def calculate_compressor_requirement(tools: Iterable[AirTool]) -> CompressorRequirement:
    """Average tool demand with a 20% margin, and a horsepower estimate."""
    average_cfm = sum(tool.cfm * tool.duty_cycle for tool in tools)
    required_cfm = average_cfm * COMPRESSOR_SAFETY_FACTOR
    return CompressorRequirement(
        required_cfm=required_cfm,
        recommended_hp=math.ceil(required_cfm / CFM_PER_HORSEPOWER),
    )


def calculate_receiver_size(
    compressor_cfm: float,
    peak_demand_cfm: float,
    allowable_pressure_drop_psi: float = DEFAULT_ALLOWABLE_RECEIVER_DROP_PSI,
) -> ReceiverRecommendation:
    """Receiver tank needed to ride through peak demand.

    V (cu ft) = deficit * minutes * allowable drop / atmospheric pressure,
    rounded up to a standard tank and capped at the largest one.
    """
    deficit = peak_demand_cfm - compressor_cfm
    if deficit <= 0:
        return ReceiverRecommendation(
            gallons=MINIMUM_TANK_GAL,
            recommendation=(
                "Compressor can handle peak demand. "
                f"Minimum {MINIMUM_TANK_GAL} gallon tank recommended for stability."
            ),
        )

    volume_cu_ft = deficit * RECEIVER_BUFFER_MINUTES * allowable_pressure_drop_psi / ATMOSPHERIC_PSI
    volume_gal = volume_cu_ft * GALLONS_PER_CUBIC_FOOT
    gallons = next(
        (size for size in STANDARD_TANK_SIZES_GAL if size >= volume_gal),
        STANDARD_TANK_SIZES_GAL[-1],
    )
    return ReceiverRecommendation(
        gallons=gallons,
        recommendation=(
            f"{gallons} gallon tank recommended to handle {deficit:.1f} CFM peak demand"
        ),
    )


__all__ = [
    "calculate_air_pressure_drop",
    "calculate_compressor_requirement",
    "calculate_optimal_air_pipe_size",
    "calculate_receiver_size",
    "size_air_pipe",
]

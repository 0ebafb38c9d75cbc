"""Compressed air piping, compressor and receiver tank sizing."""

from .calculator import (
    calculate_air_pressure_drop,
    calculate_compressor_requirement,
    calculate_optimal_air_pipe_size,
    calculate_receiver_size,
    size_air_pipe,
)
from .constants import (
    AIR_PIPE_INTERNAL_DIAMETER,
    AIR_PIPE_SIZES,
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

__all__ = [
    "AIR_PIPE_INTERNAL_DIAMETER",
    "AIR_PIPE_SIZES",
    "STANDARD_TANK_SIZES_GAL",
    "AirPipeSizingResult",
    "AirPressureDrop",
    "AirSystemParams",
    "AirTool",
    "CompressorRequirement",
    "ReceiverRecommendation",
    "calculate_air_pressure_drop",
    "calculate_compressor_requirement",
    "calculate_optimal_air_pipe_size",
    "calculate_receiver_size",
    "size_air_pipe",
]

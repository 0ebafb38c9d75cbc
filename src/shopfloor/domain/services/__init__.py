"""Domain services for shop floor planning.

Sizing calculators live in the electrical, compressed_air and ducting
subpackages; layout in placement; workflow analysis in lean.
"""

from .bom import BomConfig, BomReport, BomSynthesizer, RoutingSegment, synthesize_bom
from .collision import (
    BoundingBox,
    CollisionDetector,
    CollisionResult,
    LayoutCollisionValidator,
    detect_collisions,
)
from .compressed_air import size_air_pipe
from .ducting import size_duct_branch, size_dust_system
from .electrical import size_electrical_circuit
from .lean import analyze_workflow, calculate_lean_score, generate_spaghetti_diagram
from .placement import LayoutAdvisor, LayoutConstraints, PlacementOptimizer, optimize_placement

__all__ = [
    "BomConfig",
    "BomReport",
    "BomSynthesizer",
    "BoundingBox",
    "CollisionDetector",
    "CollisionResult",
    "LayoutAdvisor",
    "LayoutCollisionValidator",
    "LayoutConstraints",
    "PlacementOptimizer",
    "RoutingSegment",
    "analyze_workflow",
    "calculate_lean_score",
    "detect_collisions",
    "generate_spaghetti_diagram",
    "optimize_placement",
    "size_air_pipe",
    "size_duct_branch",
    "size_dust_system",
    "size_electrical_circuit",
    "synthesize_bom",
]

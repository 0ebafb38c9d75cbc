"""Equipment placement heuristics and layout advice.

Example:
    from shopfloor.domain.services.placement import LayoutConstraints, PlacementOptimizer

    result = PlacementOptimizer().optimize(equipment, LayoutConstraints(30, 20))
"""

from .advisor import LayoutAdvisor
from .config import LayoutConstraints
from .models import (
    CategoryScore,
    LayoutAdvice,
    OptimizationResult,
    PlacementSuggestion,
    WorkflowScore,
)
from .optimizer import PlacementOptimizer, optimize_placement

__all__ = [
    "CategoryScore",
    "LayoutAdvice",
    "LayoutAdvisor",
    "LayoutConstraints",
    "OptimizationResult",
    "PlacementOptimizer",
    "PlacementSuggestion",
    "WorkflowScore",
    "optimize_placement",
]

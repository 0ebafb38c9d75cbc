"""FastAPI dependency injection for planning services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from shopfloor.application.services import ShopPlanService
from shopfloor.domain.services.placement import PlacementOptimizer


@lru_cache(maxsize=1)
def get_optimizer() -> PlacementOptimizer:
    """Get cached PlacementOptimizer instance."""
    return PlacementOptimizer()


def get_plan_service(
    optimizer: Annotated[PlacementOptimizer, Depends(get_optimizer)],
) -> ShopPlanService:
    """Dependency for ShopPlanService."""
    return ShopPlanService(optimizer)


# Type aliases for cleaner endpoint signatures
OptimizerDep = Annotated[PlacementOptimizer, Depends(get_optimizer)]
PlanServiceDep = Annotated[ShopPlanService, Depends(get_plan_service)]

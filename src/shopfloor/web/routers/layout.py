"""Layout optimization and collision endpoints."""

from fastapi import APIRouter

from shopfloor.application.config import (
    config_to_constraints,
    config_to_equipment,
    load_config_from_dict,
)
from shopfloor.application.services import ShopPlanService
from shopfloor.domain.services.collision import BoundingBox, detect_collisions
from shopfloor.domain.services.placement import LayoutAdvisor
from shopfloor.domain.value_objects import BoxDimensions, Point3D
from shopfloor.web.dependencies import OptimizerDep
from shopfloor.web.schemas.requests import CollisionRequest, LayoutRequest
from shopfloor.web.schemas.responses import (
    CollisionResponse,
    LayoutAdviceSchema,
    LayoutResponse,
    PlacementSchema,
)

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("/optimize", response_model=LayoutResponse)
async def optimize_layout(request: LayoutRequest, optimizer: OptimizerDep) -> LayoutResponse:
    """Suggest placements, then re-check them for overlaps.

    The request is validated as a project file so equipment rules (unique
    ids, demand-derived requirement flags) match the CLI.
    """
    config = load_config_from_dict(
        {"schema_version": "1.0", **request.model_dump(mode="json")}
    )
    equipment = config_to_equipment(config)
    constraints = config_to_constraints(config)

    result = optimizer.optimize(equipment, constraints)
    collisions = ShopPlanService.check_collisions(equipment, result)
    advice = LayoutAdvisor(constraints.building_width, constraints.building_depth).analyze(
        equipment, result.positions()
    )

    return LayoutResponse(
        placements=[PlacementSchema.model_validate(p) for p in result.placements],
        total_score=result.total_score,
        warnings=list(result.warnings),
        suggestions=list(result.suggestions),
        collisions=CollisionResponse.model_validate(collisions),
        advice=LayoutAdviceSchema.model_validate(advice),
    )


@router.post("/collisions", response_model=CollisionResponse)
async def check_collisions(request: CollisionRequest) -> CollisionResponse:
    """Report every overlapping pair among the submitted boxes."""
    boxes = [
        BoundingBox(
            id=box.id,
            center=Point3D(box.center.x, box.center.y, box.center.z),
            dimensions=BoxDimensions(
                box.dimensions.width, box.dimensions.height, box.dimensions.depth
            ),
        )
        for box in request.boxes
    ]
    return CollisionResponse.model_validate(detect_collisions(boxes))

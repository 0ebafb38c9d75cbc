"""Whole-project planning endpoint."""

from typing import Any

from fastapi import APIRouter

from shopfloor.application.config import load_config_from_dict
from shopfloor.infrastructure.exporters import plan_to_dict
from shopfloor.web.dependencies import PlanServiceDep
from shopfloor.web.schemas.requests import PlanRequest

router = APIRouter(prefix="/plan", tags=["plan"])


@router.post("")
async def plan_project(request: PlanRequest, service: PlanServiceDep) -> dict[str, Any]:
    """Run the full planner on a project and return the plan as JSON.

    Invalid projects return 422 with error_type "config"; circuits beyond
    standard sizes return 422 with error_type "sizing".
    """
    config = load_config_from_dict(request.config)
    return plan_to_dict(service.plan(config))

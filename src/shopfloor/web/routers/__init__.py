"""API routers for the REST API."""

from shopfloor.web.routers.bom import router as bom_router
from shopfloor.web.routers.layout import router as layout_router
from shopfloor.web.routers.plan import router as plan_router
from shopfloor.web.routers.sizing import router as sizing_router
from shopfloor.web.routers.workflow import router as workflow_router

__all__ = [
    "bom_router",
    "layout_router",
    "plan_router",
    "sizing_router",
    "workflow_router",
]

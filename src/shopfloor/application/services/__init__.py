"""Application services - orchestration of domain services."""

from .shop_plan import CircuitPlan, ShopPlan, ShopPlanService, WorkflowReport

__all__ = ["CircuitPlan", "ShopPlan", "ShopPlanService", "WorkflowReport"]

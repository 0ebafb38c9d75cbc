"""Application layer - configuration and use-case orchestration."""

from .config import ConfigError, ProjectConfiguration, load_config, load_config_from_dict
from .services import ShopPlan, ShopPlanService

__all__ = [
    "ConfigError",
    "ProjectConfiguration",
    "ShopPlan",
    "ShopPlanService",
    "load_config",
    "load_config_from_dict",
]

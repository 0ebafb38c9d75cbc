"""Project configuration: schema, loading and conversion to domain objects.

Example:
    from pathlib import Path
    from shopfloor.application.config import load_config, config_to_equipment

    config = load_config(Path("shop.json"))
    equipment = config_to_equipment(config)
"""

from .adapter import (
    config_to_bom_config,
    config_to_constraints,
    config_to_equipment,
    config_to_segments,
    config_to_workflow,
)
from .loader import ConfigError, load_config, load_config_from_dict
from .schema import (
    SUPPORTED_VERSIONS,
    AirDemandConfig,
    BomConfigSchema,
    BuildingConfig,
    ConstraintsConfig,
    DustCollectionConfig,
    DustDemandConfig,
    ElectricalDemandConfig,
    EquipmentConfig,
    PositionConfig,
    ProjectConfiguration,
    RoutingSegmentConfig,
    WorkflowConfig,
    WorkflowStepConfig,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "AirDemandConfig",
    "BomConfigSchema",
    "BuildingConfig",
    "ConstraintsConfig",
    "DustCollectionConfig",
    "DustDemandConfig",
    "ElectricalDemandConfig",
    "EquipmentConfig",
    "PositionConfig",
    "ProjectConfiguration",
    "RoutingSegmentConfig",
    "WorkflowConfig",
    "WorkflowStepConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Adapters
    "config_to_bom_config",
    "config_to_constraints",
    "config_to_equipment",
    "config_to_segments",
    "config_to_workflow",
]

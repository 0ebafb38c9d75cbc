"""Adapters converting a ProjectConfiguration into domain objects.

Configuration models are plain validated data; these functions build the
frozen domain types the engine works with.
"""

from shopfloor.application.config.schema import (
    EquipmentConfig,
    ProjectConfiguration,
    RoutingSegmentConfig,
)
from shopfloor.domain.entities import (
    AirDemand,
    DustDemand,
    ElectricalDemand,
    Equipment,
    WorkflowSequence,
    WorkflowStep,
)
from shopfloor.domain.services.bom import BomConfig, RoutingSegment
from shopfloor.domain.services.placement import LayoutConstraints
from shopfloor.domain.value_objects import Phase, Point2D, Point3D


def _equipment_from_config(item: EquipmentConfig) -> Equipment:
    return Equipment(
        id=item.id,
        name=item.name,
        category=item.category,
        width=item.width,
        depth=item.depth,
        height=item.height,
        orientation=item.orientation,
        requires_dust=bool(item.requires_dust),
        requires_air=bool(item.requires_air),
        requires_electrical=bool(item.requires_electrical),
        dust=DustDemand(cfm=item.dust.cfm) if item.dust else None,
        air=(
            AirDemand(scfm=item.air.scfm, psi=item.air.psi, duty_cycle=item.air.duty_cycle)
            if item.air
            else None
        ),
        electrical=(
            ElectricalDemand(
                volts=item.electrical.volts,
                amps=item.electrical.amps,
                phase=Phase(item.electrical.phase),
                power_factor=item.electrical.power_factor,
                is_motor=item.electrical.is_motor,
            )
            if item.electrical
            else None
        ),
    )


def config_to_equipment(config: ProjectConfiguration) -> list[Equipment]:
    """Build domain Equipment in configuration order."""
    return [_equipment_from_config(item) for item in config.equipment]


def config_to_constraints(config: ProjectConfiguration) -> LayoutConstraints:
    """Combine the building envelope and placement preferences."""
    return LayoutConstraints(
        building_width=config.building.width,
        building_depth=config.building.depth,
        min_clearance=config.constraints.min_clearance,
        workflow_priority=config.constraints.workflow_priority,
        group_similar=config.constraints.group_similar,
        near_utilities=config.constraints.near_utilities,
    )


def _segment_from_config(segment: RoutingSegmentConfig) -> RoutingSegment:
    return RoutingSegment(
        id=segment.id,
        start=Point3D(*segment.start),
        end=Point3D(*segment.end),
        system_type=segment.system_type,
        diameter=segment.diameter,
        gauge=segment.gauge,
    )


def config_to_segments(config: ProjectConfiguration) -> list[RoutingSegment]:
    """Routing segments in configuration order (order drives fitting detection)."""
    return [_segment_from_config(segment) for segment in config.routing]


def config_to_workflow(config: ProjectConfiguration) -> WorkflowSequence | None:
    """Build the workflow, filling missing step names from the equipment list."""
    if config.workflow is None:
        return None

    names = {item.id: item.name for item in config.equipment}
    steps = tuple(
        WorkflowStep(
            equipment_id=step.equipment_id,
            equipment_name=step.equipment_name or names.get(step.equipment_id, step.equipment_id),
            operation_name=step.operation_name,
            cycle_time_minutes=step.cycle_time_minutes,
            position=Point2D(step.position.x, step.position.y),
        )
        for step in config.workflow.steps
    )
    return WorkflowSequence(
        name=config.workflow.name,
        steps=steps,
        description=config.workflow.description,
        units_per_day=config.workflow.units_per_day,
    )


def config_to_bom_config(config: ProjectConfiguration) -> BomConfig:
    return BomConfig(**config.bom.model_dump())


__all__ = [
    "config_to_bom_config",
    "config_to_constraints",
    "config_to_equipment",
    "config_to_segments",
    "config_to_workflow",
]

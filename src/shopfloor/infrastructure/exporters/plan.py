"""Shop plan exporters: a JSON document and a printable text summary."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from shopfloor.infrastructure.exporters.base import ExporterRegistry
from shopfloor.infrastructure.exporters.bom import bom_to_dict

if TYPE_CHECKING:
    from shopfloor.application.services import ShopPlan
    from shopfloor.domain.services.lean import ImprovementSuggestion

logger = logging.getLogger(__name__)


def suggestion_to_dict(suggestion: ImprovementSuggestion) -> dict[str, Any]:
    """Kaizen suggestion with ISO 8601 timestamps."""
    data = asdict(suggestion)
    data["created_at"] = suggestion.created_at.isoformat()
    if suggestion.completed_at is not None:
        data["completed_at"] = suggestion.completed_at.isoformat()
    return data


def plan_to_dict(plan: ShopPlan) -> dict[str, Any]:
    """Convert a ShopPlan to JSON-compatible primitives.

    Enum members serialize as their values since the domain enums derive
    from str and int.
    """
    data: dict[str, Any] = {
        "building": {
            "width": plan.constraints.building_width,
            "depth": plan.constraints.building_depth,
            "min_clearance": plan.constraints.min_clearance,
            "workflow_priority": plan.constraints.workflow_priority.value,
        },
        "layout": asdict(plan.layout),
        "collisions": {
            "has_collision": plan.collisions.has_collision,
            "collision_count": plan.collisions.collision_count,
            "pairs": [[p.id1, p.id2] for p in plan.collisions.colliding_pairs],
        },
        "advice": asdict(plan.advice),
        "improvements": list(plan.improvements),
        "workflow_score": asdict(plan.workflow_score) if plan.workflow_score else None,
        "circuits": [
            {
                "equipment_id": c.equipment_id,
                "equipment_name": c.equipment_name,
                "run_length_ft": c.run_length_ft,
                **asdict(c.sizing),
            }
            for c in plan.circuits
        ],
        "dust_system": asdict(plan.dust_system) if plan.dust_system else None,
        "bom": bom_to_dict(plan.bom) if plan.bom else None,
        "workflow": None,
        "warnings": plan.warnings,
    }
    if plan.workflow is not None:
        data["workflow"] = {
            "name": plan.workflow.name,
            "analysis": asdict(plan.workflow.analysis),
            "lean_score": asdict(plan.workflow.lean_score),
            "spaghetti": asdict(plan.workflow.spaghetti),
            "improvements": [suggestion_to_dict(s) for s in plan.workflow.improvements],
        }
    return data


@ExporterRegistry.register("plan-json")
class PlanJsonExporter:
    """Full plan as an indented JSON document."""

    format_name: ClassVar[str] = "plan-json"
    file_extension: ClassVar[str] = "json"

    def export(self, plan: ShopPlan, path: Path) -> None:
        path.write_text(self.export_string(plan))
        logger.info(f"Exported plan JSON to {path}")

    def export_string(self, plan: ShopPlan) -> str:
        return json.dumps(plan_to_dict(plan), indent=2)


@ExporterRegistry.register("plan-text")
class PlanTextExporter:
    """Printable plan summary for the console or a text file."""

    format_name: ClassVar[str] = "plan-text"
    file_extension: ClassVar[str] = "txt"

    def export(self, plan: ShopPlan, path: Path) -> None:
        path.write_text(self.export_string(plan))
        logger.info(f"Exported plan summary to {path}")

    def export_string(self, plan: ShopPlan) -> str:
        names = {eq.id: eq.name for eq in plan.equipment}
        c = plan.constraints

        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("SHOP PLAN")
        lines.append("=" * 60)
        lines.append(
            f"Building: {c.building_width:g} x {c.building_depth:g} ft, "
            f"clearance {c.min_clearance:g} ft, priority {c.workflow_priority.value}"
        )
        lines.append("")

        lines.append("PLACEMENTS")
        lines.append("-" * 40)
        if plan.layout.placements:
            for p in plan.layout.placements:
                lines.append(
                    f"  {names.get(p.equipment_id, p.equipment_id)}: "
                    f"({p.x:.1f}, {p.y:.1f}) rot {p.rotation:g}  score {p.score:.0f}"
                )
        else:
            lines.append("  (No equipment)")
        lines.append(f"  Layout score: {plan.layout.total_score:.1f}")
        if plan.workflow_score is not None:
            lines.append(f"  Grouping score: {plan.workflow_score.score:.1f}")
        lines.append("")

        if plan.circuits:
            lines.append("CIRCUITS")
            lines.append("-" * 40)
            for circuit in plan.circuits:
                s = circuit.sizing
                lines.append(
                    f"  {circuit.equipment_name}: {s.conductor_size}, "
                    f"{s.breaker_amps}A breaker, {s.conduit_size} conduit, "
                    f"{s.percent_drop:.2f}% drop over {circuit.run_length_ft:g} ft"
                )
            lines.append("")

        if plan.dust_system is not None:
            dust = plan.dust_system
            lines.append("DUST COLLECTION")
            lines.append("-" * 40)
            for branch in dust.branches:
                lines.append(
                    f'  {branch.machine.name}: {branch.branch.diameter}" branch, '
                    f"{branch.branch.velocity:.0f} fpm"
                )
            if dust.main_trunk is not None:
                lines.append(f'  Main trunk: {dust.main_trunk.diameter}"')
            lines.append(f"  Collector: {dust.collector_cfm} CFM")
            lines.append("")

        if plan.bom is not None:
            lines.append("BOM")
            lines.append("-" * 40)
            for item in plan.bom.items:
                lines.append(f"  {item.name}: {item.quantity:g} {item.unit.value}")
            lines.append(f"  Total: {plan.bom.total_cost:.2f} {plan.bom.currency}")
            lines.append("")

        if plan.workflow is not None:
            w = plan.workflow
            lines.append(f"WORKFLOW: {w.name}")
            lines.append("-" * 40)
            lines.append(f"  Distance: {w.analysis.total_distance:g} ft")
            lines.append(f"  Efficiency: {w.analysis.efficiency}%")
            lines.append(f"  Lean score: {w.lean_score.overall}")
            for s in w.improvements:
                lines.append(f"  Kaizen: {s.title} ({s.priority.value} priority)")
            lines.append("")

        lines.append("WARNINGS")
        lines.append("-" * 40)
        warnings = plan.warnings
        if warnings:
            lines.extend(f"  - {w}" for w in warnings)
        else:
            lines.append("  (None)")
        if plan.advice.tips:
            lines.append("")
            lines.append("TIPS")
            lines.append("-" * 40)
            lines.extend(f"  - {t}" for t in plan.advice.tips)
        lines.append("")

        return "\n".join(lines)


__all__ = ["PlanJsonExporter", "PlanTextExporter", "plan_to_dict", "suggestion_to_dict"]

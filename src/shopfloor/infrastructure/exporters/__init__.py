"""Exporter framework for shop plans.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery

Registered exporters:
- bom: Bill of materials for routed runs (text, csv or json)
- plan-json: Full plan as JSON
- plan-text: Printable plan summary

Usage:
    from shopfloor.infrastructure.exporters import ExporterRegistry

    bom_exporter = ExporterRegistry.get("bom")(output_format="csv")

    ExporterRegistry.get("plan-json")().export(plan, Path("garage.json"))
"""

from shopfloor.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
)
from shopfloor.infrastructure.exporters.bom import BOM_FORMATS, BomExporter, bom_to_dict
from shopfloor.infrastructure.exporters.plan import (
    PlanJsonExporter,
    PlanTextExporter,
    plan_to_dict,
)

__all__ = [
    "BOM_FORMATS",
    "BomExporter",
    "Exporter",
    "ExporterRegistry",
    "PlanJsonExporter",
    "PlanTextExporter",
    "bom_to_dict",
    "plan_to_dict",
]

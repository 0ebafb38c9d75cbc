"""Infrastructure layer - exporters and formatters."""

from .exporters import (
    BOM_FORMATS,
    BomExporter,
    ExporterRegistry,
    PlanJsonExporter,
    PlanTextExporter,
)

__all__ = [
    "BOM_FORMATS",
    "BomExporter",
    "ExporterRegistry",
    "PlanJsonExporter",
    "PlanTextExporter",
]

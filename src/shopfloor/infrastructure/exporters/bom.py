"""Bill of Materials exporter for routed utility runs.

Formats a BomReport as a human-readable text table, CSV rows, or JSON.
Registered as the "bom" exporter; when given a ShopPlan it exports the
plan's BOM, and the format_* methods accept a BomReport directly.

Output formats: text, csv, json
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from shopfloor.domain.services.bom import BomReport
from shopfloor.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from shopfloor.application.services import ShopPlan

logger = logging.getLogger(__name__)

BOM_FORMATS: tuple[str, ...] = ("text", "csv", "json")


@ExporterRegistry.register("bom")
class BomExporter:
    """Bill of Materials exporter.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv", or "json" based on output_format
    """

    format_name: ClassVar[str] = "bom"

    def __init__(self, output_format: str = "text") -> None:
        """Initialize the BOM exporter.

        Args:
            output_format: Output format - "text", "csv", or "json".

        Raises:
            ValueError: If the output format is unknown.
        """
        if output_format not in BOM_FORMATS:
            raise ValueError(
                f"Unknown BOM format '{output_format}'. Expected one of: {list(BOM_FORMATS)}"
            )
        self.output_format = output_format
        self._file_extension = {
            "text": "txt",
            "csv": "csv",
            "json": "json",
        }[output_format]

    @property
    def file_extension(self) -> str:
        """Get the file extension for this output format."""
        return self._file_extension

    def export(self, plan: ShopPlan, path: Path) -> None:
        content = self.export_string(plan)
        path.write_text(content)
        logger.info(f"Exported BOM to {path}")

    def export_string(self, plan: ShopPlan) -> str:
        """Format the plan's BOM; a plan without routing yields an empty BOM."""
        return self.format(plan.bom or BomReport())

    def format(self, bom: BomReport) -> str:
        if self.output_format == "csv":
            return self.format_csv(bom)
        elif self.output_format == "json":
            return self.format_json(bom)
        else:
            return self.format_text(bom)

    def format_text(self, bom: BomReport) -> str:
        """Format BOM as human-readable text.

        Args:
            bom: Bill of materials to format.

        Returns:
            Formatted text representation.
        """
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        lines.append("=" * 60)
        lines.append("")

        if bom.is_empty:
            lines.append("  (No routed runs)")
            lines.append("")
            return "\n".join(lines)

        # Group by category in first-seen order
        by_category: dict[str, list] = {}
        for item in bom.items:
            by_category.setdefault(item.category.value, []).append(item)

        for category, items in by_category.items():
            lines.append(category.upper())
            lines.append("-" * 40)
            for item in items:
                lines.append(f"  {item.name} ({item.description})")
                lines.append(
                    f"    {item.quantity:g} {item.unit.value} @ "
                    f"{item.unit_price:.2f} = {item.total_price:.2f} {bom.currency}"
                )
            lines.append("")

        lines.append("=" * 60)
        lines.append(f"  Waste factor: {bom.waste_factor:g}")
        lines.append(f"  TOTAL:        {bom.total_cost:>10.2f} {bom.currency}")
        lines.append("")

        return "\n".join(lines)

    def format_csv(self, bom: BomReport) -> str:
        """Format BOM as CSV with one row per line item."""
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(
            ["ID", "Category", "Item", "Description", "Quantity", "Unit", "Unit Price", "Total"]
        )
        for item in bom.items:
            writer.writerow(
                [
                    item.id,
                    item.category.value,
                    item.name,
                    item.description,
                    f"{item.quantity:g}",
                    item.unit.value,
                    f"{item.unit_price:.2f}",
                    f"{item.total_price:.2f}",
                ]
            )

        return output.getvalue()

    def format_json(self, bom: BomReport) -> str:
        return json.dumps(bom_to_dict(bom), indent=2)


def bom_to_dict(bom: BomReport) -> dict[str, Any]:
    """Plain dictionary form of a BOM report, shared with the plan exporter."""
    return {
        "items": [
            {
                "id": item.id,
                "name": item.name,
                "description": item.description,
                "category": item.category.value,
                "quantity": item.quantity,
                "unit": item.unit.value,
                "unit_price": item.unit_price,
                "total_price": item.total_price,
            }
            for item in bom.items
        ],
        "total_cost": bom.total_cost,
        "waste_factor": bom.waste_factor,
        "currency": bom.currency,
    }


__all__ = ["BOM_FORMATS", "BomExporter", "bom_to_dict"]

"""Exporter protocol and the format registry."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shopfloor.application.services import ShopPlan


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a ShopPlan to a specific format. Each exporter must
    define its format name and file extension, and implement at least the
    export method.

    Attributes:
        format_name: Registry name for the export format (e.g., "bom", "plan-json").
        file_extension: File extension without leading dot (e.g., "csv", "json").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, plan: ShopPlan, path: Path) -> None:
        """Export a shop plan to a file.

        Args:
            plan: The shop plan to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, plan: ShopPlan) -> str:
        """Export a shop plan as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry of exporter classes keyed by format name.

    Example:
        @ExporterRegistry.register("plan-json")
        class PlanJsonExporter:
            format_name = "plan-json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Class decorator registering an exporter under ``format_name``.

        Registering a name twice replaces the earlier exporter.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters (used by tests)."""
        cls._exporters.clear()


__all__ = ["Exporter", "ExporterRegistry"]

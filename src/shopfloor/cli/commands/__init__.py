"""CLI command implementations for the shopfloor application.

This package contains subcommands for the shopfloor CLI, including:
- validate: Validate a project file
- size: One-off sizing calculations
"""

from shopfloor.cli.commands.size import size_app
from shopfloor.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "size_app", "validate_command"]

"""Validate command for checking project files.

Loads the project, then dry-runs the planner so sizing failures and
layout warnings show up before anything is exported.
"""

from pathlib import Path
from typing import Annotated

import typer

from shopfloor.application.config import ConfigError, load_config
from shopfloor.application.services import ShopPlanService
from shopfloor.domain import SizingError


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate a shop project file.

    Checks the project file for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown equipment ids, etc.)
    - Circuits that exceed standard sizes
    - Layout warnings (overlaps, out-of-bounds equipment, voltage drop)

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors (cannot be planned)
        2 - Project is valid but the plan has warnings

    Example:
        shopfloor validate garage-shop.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    try:
        plan = ShopPlanService().plan(config)
    except SizingError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  {e.message}", err=True)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    warnings = plan.warnings
    if warnings:
        typer.echo("Warnings:")
        for warning in warnings:
            typer.echo(f"  {warning}")
        typer.echo()
        typer.echo(f"Validation passed with {len(warnings)} warning(s)")
        raise typer.Exit(code=2)

    typer.echo("Validation passed. Project is valid.")


def display_load_error(error: ConfigError) -> None:
    """Display a project loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)

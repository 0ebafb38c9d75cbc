"""Typer CLI for shop floor planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from shopfloor.application.config import (
    ConfigError,
    ProjectConfiguration,
    config_to_bom_config,
    config_to_segments,
    config_to_workflow,
    load_config,
)
from shopfloor.application.services import ShopPlanService
from shopfloor.cli.commands import display_load_error, size_app, validate_command
from shopfloor.domain import SizingError
from shopfloor.domain.services.bom import BomSynthesizer
from shopfloor.domain.services.lean import (
    analyze_workflow,
    calculate_lean_score,
    generate_improvement_suggestions,
    generate_pdca_cycle,
    generate_spaghetti_diagram,
    prioritize_by_roi,
)
from shopfloor.infrastructure.exporters import BOM_FORMATS, ExporterRegistry

app = typer.Typer(
    name="shopfloor",
    help="Plan workshop layouts, utilities, materials and workflow.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register sizing subcommand group
app.add_typer(size_app, name="size")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log planner progress to stderr")
    ] = False,
) -> None:
    """Shop floor planning tools."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load(config_file: Path) -> ProjectConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def _write(content: str, output: Path | None) -> None:
    if output is None:
        typer.echo(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content)
    typer.echo(f"Wrote {output}")


@app.command()
def plan(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text or json")
    ] = "text",
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write to a file instead of stdout")
    ] = None,
) -> None:
    """Lay out equipment, size utilities and summarize a project.

    Exit codes:
        0 - Plan completed cleanly
        1 - Project or sizing error
        2 - Plan completed with warnings
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format '{output_format}'. Use text or json.", err=True)
        raise typer.Exit(code=1)

    config = _load(config_file)
    try:
        shop_plan = ShopPlanService().plan(config)
    except SizingError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    exporter = ExporterRegistry.get(f"plan-{output_format}")()
    _write(exporter.export_string(shop_plan), output)

    if shop_plan.has_warnings:
        raise typer.Exit(code=2)


@app.command()
def bom(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: text, csv or json")
    ] = "text",
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write to a file instead of stdout")
    ] = None,
) -> None:
    """Generate the bill of materials for a project's routed runs."""
    if output_format not in BOM_FORMATS:
        typer.echo(
            f"Unknown format '{output_format}'. Use one of: {', '.join(BOM_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    config = _load(config_file)
    report = BomSynthesizer(config_to_bom_config(config)).synthesize(config_to_segments(config))

    exporter = ExporterRegistry.get("bom")(output_format=output_format)
    _write(exporter.format(report), output)


@app.command()
def workflow(
    config_file: Annotated[Path, typer.Argument(help="Path to the JSON project file")],
    trips_per_day: Annotated[
        float | None,
        typer.Option("--trips-per-day", help="Override the project's daily trip count"),
    ] = None,
    pdca: Annotated[
        bool,
        typer.Option("--pdca", help="Print a PDCA plan for the top kaizen suggestion"),
    ] = False,
) -> None:
    """Analyze the project's production route."""
    config = _load(config_file)
    sequence = config_to_workflow(config)
    if sequence is None or config.workflow is None:
        typer.echo("Error: project has no workflow", err=True)
        raise typer.Exit(code=1)

    trips = config.workflow.trips_per_day if trips_per_day is None else trips_per_day
    if trips < 0:
        typer.echo("Error: --trips-per-day must be non-negative", err=True)
        raise typer.Exit(code=1)

    analysis = analyze_workflow(sequence)
    score = calculate_lean_score(
        analysis,
        len(config.equipment),
        config.building.width * config.building.depth,
        has_organized_storage=config.workflow.has_organized_storage,
        has_safety_zones=config.workflow.has_safety_zones,
    )
    diagram = generate_spaghetti_diagram(sequence, trips)
    improvements = prioritize_by_roi(
        generate_improvement_suggestions(
            score.overall,
            analysis.total_distance,
            analysis.efficiency,
            len(sequence.steps),
            trips_per_day=trips,
        )
    )

    typer.echo(f"Workflow: {sequence.name}")
    typer.echo(f"  Total distance: {analysis.total_distance:g} ft")
    typer.echo(f"  Cycle time: {analysis.total_cycle_time:g} min")
    typer.echo(f"  Transport time: {analysis.transport_time:g} min")
    typer.echo(f"  Efficiency: {analysis.efficiency}%")
    typer.echo(f"  Waste score: {analysis.waste_score}")
    typer.echo()
    typer.echo(f"Lean score: {score.overall}")
    for category in score.breakdown:
        typer.echo(f"  {category.category}: {category.score}")
    typer.echo()
    typer.echo(
        f"Daily travel: {diagram.total_distance:g} ft over {diagram.total_trips:g} trips"
    )
    if analysis.suggestions:
        typer.echo()
        typer.echo("Suggestions:")
        for suggestion in analysis.suggestions:
            typer.echo(f"  - {suggestion}")

    typer.echo()
    typer.echo("Kaizen opportunities:")
    for item in improvements:
        savings = item.impact.cost_savings or 0
        typer.echo(
            f"  - {item.title} [{item.priority.value}, {item.effort.value} effort]: "
            f"${savings:,.2f}/yr"
        )
    if pdca and improvements:
        cycle = generate_pdca_cycle(improvements[0])
        for stage, steps in (
            ("Plan", cycle.plan),
            ("Do", cycle.do),
            ("Check", cycle.check),
            ("Act", cycle.act),
        ):
            typer.echo()
            typer.echo(f"{stage}:")
            for step in steps:
                typer.echo(f"  {step}")


if __name__ == "__main__":
    app()

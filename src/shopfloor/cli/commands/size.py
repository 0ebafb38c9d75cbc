"""Sizing commands for one-off engineering calculations.

This module provides the `size` command group:
- wire: conductor, breaker and conduit for a branch circuit
- breaker: standard breaker for a load
- conduit: conduit for a conductor bundle
- air: compressed air line
- duct: dust collection branch
"""

from typing import Annotated

import typer

from shopfloor.domain.services.compressed_air import size_air_pipe
from shopfloor.domain.services.ducting import size_duct_branch
from shopfloor.domain.services.electrical import (
    CircuitLoad,
    calculate_breaker_size,
    calculate_conduit_size,
    size_electrical_circuit,
)
from shopfloor.domain.value_objects import Phase

size_app = typer.Typer(
    name="size",
    help="Size wires, breakers, conduit, air lines and ducts.",
)


def _fail(error: ValueError) -> typer.Exit:
    """Report a rejected input or an unsizeable load and exit with code 1."""
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(code=1)


def _echo_warnings(warnings: tuple[str, ...]) -> None:
    for warning in warnings:
        typer.echo(f"  Warning: {warning}")


@size_app.command(name="wire")
def size_wire(
    amps: Annotated[float, typer.Option("--amps", "-a", help="Load current in amps")],
    length: Annotated[float, typer.Option("--length", "-l", help="One-way run length in feet")],
    volts: Annotated[float, typer.Option("--volts", help="Supply voltage")] = 240.0,
    phase: Annotated[int, typer.Option("--phase", help="Service phase: 1 or 3")] = 1,
    power_factor: Annotated[float, typer.Option("--power-factor", help="Load power factor")] = 1.0,
    motor: Annotated[bool, typer.Option("--motor", help="Size the breaker for a motor load")] = False,
    max_drop: Annotated[float, typer.Option("--max-drop", help="Allowed voltage drop percent")] = 3.0,
) -> None:
    """Size conductor, breaker and conduit for a branch circuit.

    Example:
        shopfloor size wire --amps 20 --length 50 --volts 120
    """
    try:
        load = CircuitLoad(
            volts=volts,
            amps=amps,
            phase=Phase(phase),
            power_factor=power_factor,
            is_motor=motor,
        )
        result = size_electrical_circuit(load, length, max_drop_pct=max_drop)
    except ValueError as e:
        raise _fail(e)

    typer.echo(f"Conductor: {result.conductor_size} ({result.ampacity:g}A)")
    typer.echo(f"Voltage drop: {result.voltage_drop:.2f}V ({result.percent_drop:.2f}%)")
    typer.echo(f"Breaker: {result.breaker_amps}A")
    typer.echo(f"Conduit: {result.conduit_size} ({result.conductor_count} conductors)")
    _echo_warnings(result.warnings)


@size_app.command(name="breaker")
def size_breaker(
    amps: Annotated[float, typer.Option("--amps", "-a", help="Load current in amps")],
    motor: Annotated[bool, typer.Option("--motor", help="Motor load (250% rule)")] = False,
) -> None:
    """Pick the standard breaker for a load."""
    try:
        rating = calculate_breaker_size(amps, is_motor=motor)
    except ValueError as e:
        raise _fail(e)
    typer.echo(f"Breaker: {rating}A")


@size_app.command(name="conduit")
def size_conduit(
    wire: Annotated[str, typer.Option("--wire", "-w", help="Wire gauge, e.g. \"12 AWG\" or \"4/0 AWG\"")],
    count: Annotated[int, typer.Option("--count", "-n", help="Number of conductors")],
) -> None:
    """Pick the smallest conduit for a conductor bundle at 40% fill."""
    try:
        conduit = calculate_conduit_size(wire, count)
    except ValueError as e:
        raise _fail(e)
    typer.echo(f"Conduit: {conduit}")


@size_app.command(name="air")
def size_air(
    cfm: Annotated[float, typer.Option("--cfm", help="Flow in SCFM")],
    length: Annotated[float, typer.Option("--length", "-l", help="Line length in feet")],
    psi: Annotated[float, typer.Option("--psi", help="Line pressure in psig")] = 90.0,
    max_drop: Annotated[
        float, typer.Option("--max-drop", help="Allowed drop in psi per 100 ft")
    ] = 1.0,
) -> None:
    """Size a compressed air line."""
    try:
        result = size_air_pipe(cfm, psi, length, max_drop_per_100ft=max_drop)
    except ValueError as e:
        raise _fail(e)

    typer.echo(f"Pipe: {result.pipe_size}")
    typer.echo(f"Pressure drop: {result.pressure_drop:.2f} psi")
    typer.echo(f"Velocity: {result.velocity:.0f} fpm")
    _echo_warnings(result.warnings)


@size_app.command(name="duct")
def size_duct(
    cfm: Annotated[float, typer.Option("--cfm", help="Machine airflow in CFM")],
    length: Annotated[float, typer.Option("--length", "-l", help="Branch length in feet")] = 0.0,
) -> None:
    """Size a dust collection branch."""
    try:
        result = size_duct_branch(cfm, run_length_ft=length)
    except ValueError as e:
        raise _fail(e)
    typer.echo(f'Diameter: {result.diameter}"')
    status = "" if result.velocity_ok else " (outside 3500-5000 fpm)"
    typer.echo(f"Velocity: {result.velocity:.0f} fpm{status}")
    typer.echo(
        f"Friction: {result.friction_per_100ft:.2f} in.wg/100ft, "
        f"{result.total_friction:.2f} in.wg total"
    )

"""Spaghetti diagram data for visualizing material travel."""

from __future__ import annotations

from ...entities import WorkflowSequence
from .constants import (
    HIGH_FREQUENCY_COLOR,
    HIGH_FREQUENCY_TRIPS,
    LOW_FREQUENCY_COLOR,
    MEDIUM_FREQUENCY_COLOR,
    MEDIUM_FREQUENCY_TRIPS,
)
from .models import DiagramNode, SpaghettiDiagram, SpaghettiPath
from .workflow import round_half_up


def frequency_color(trips_per_day: float) -> str:
    """Green up to 20 trips/day, orange above 20, red above 50."""
    if trips_per_day > HIGH_FREQUENCY_TRIPS:
        return HIGH_FREQUENCY_COLOR
    if trips_per_day > MEDIUM_FREQUENCY_TRIPS:
        return MEDIUM_FREQUENCY_COLOR
    return LOW_FREQUENCY_COLOR


def generate_spaghetti_diagram(
    sequence: WorkflowSequence, trips_per_day: float = 1
) -> SpaghettiDiagram:
    """Replay a workflow's hops scaled by daily trip count.

    Args:
        sequence: Ordered stations of the route.
        trips_per_day: Times the route is walked each day.

    Returns:
        SpaghettiDiagram with one path per hop.
    """
    if trips_per_day < 0:
        raise ValueError("trips_per_day must be non-negative")

    color = frequency_color(trips_per_day)
    paths: list[SpaghettiPath] = []
    total_distance = 0.0
    steps = sequence.steps
    for current, following in zip(steps, steps[1:]):
        distance = current.position.distance_to(following.position)
        total_distance += distance * trips_per_day
        paths.append(
            SpaghettiPath(
                start=DiagramNode(
                    current.position.x, current.position.y, current.equipment_name
                ),
                end=DiagramNode(
                    following.position.x, following.position.y, following.equipment_name
                ),
                distance=round_half_up(distance, 1),
                frequency=trips_per_day,
                color=color,
            )
        )

    return SpaghettiDiagram(
        paths=tuple(paths),
        total_distance=round_half_up(total_distance, 1),
        total_trips=trips_per_day * max(0, len(steps) - 1),
    )


__all__ = ["frequency_color", "generate_spaghetti_diagram"]

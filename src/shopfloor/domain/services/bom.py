"""Bill of materials synthesis from routed utility runs.

Linear material is grouped by system type and size, summed, and scaled
by a waste factor. Consecutive connected segments that turn by more
than the fitting threshold each add one adjustable elbow.

Example:
    segments = [
        RoutingSegment("a", Point3D(0, 0, 0), Point3D(10, 0, 0), SystemType.DUCTING, diameter=6),
        RoutingSegment("b", Point3D(10, 0, 0), Point3D(10, 0, 8), SystemType.DUCTING, diameter=6),
    ]
    report = synthesize_bom(segments)
    print(report.total_cost)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..value_objects import BomCategory, BomUnit, Point3D, SystemType

logger = logging.getLogger(__name__)

DEFAULT_WIRE_GAUGE = "12 AWG"
DEFAULT_DUCT_DIAMETER = 4.0
ELBOW_ITEM_ID = "fitting-elbow-90"


@dataclass(frozen=True)
class RoutingSegment:
    """Directed straight run of wire, duct or air pipe.

    Attributes:
        id: Segment identifier.
        start: Start point in building coordinates.
        end: End point in building coordinates.
        system_type: Utility system the run belongs to.
        diameter: Duct or pipe diameter in inches (non-electrical runs).
        gauge: Wire gauge (electrical runs).
    """

    id: str
    start: Point3D
    end: Point3D
    system_type: SystemType
    diameter: float | None = None
    gauge: str | None = None

    def __post_init__(self) -> None:
        if self.diameter is not None and self.diameter <= 0:
            raise ValueError("Segment diameter must be positive")

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def direction(self) -> tuple[float, float, float]:
        return (
            self.end.x - self.start.x,
            self.end.y - self.start.y,
            self.end.z - self.start.z,
        )

    @property
    def size_tag(self) -> str:
        """Wire gauge for electrical runs, diameter in inches otherwise."""
        if self.system_type == SystemType.ELECTRICAL:
            return self.gauge or DEFAULT_WIRE_GAUGE
        diameter = self.diameter or DEFAULT_DUCT_DIAMETER
        return f'{diameter:g}"'


@dataclass(frozen=True)
class BomConfig:
    """Options for BOM synthesis.

    Attributes:
        waste_factor: Multiplier on linear quantities (>= 1).
        currency: Currency tag carried on the report.
        connection_tolerance: Max per-axis gap for two segments to join.
        fitting_angle_threshold: Turns above this (degrees) need an elbow.
        wire_unit_price: Price per foot of wire.
        duct_unit_price: Price per foot of duct or pipe.
        elbow_unit_price: Price per elbow.
    """

    waste_factor: float = 1.15
    currency: str = "USD"
    connection_tolerance: float = 0.1
    fitting_angle_threshold: float = 15.0
    wire_unit_price: float = 1.50
    duct_unit_price: float = 8.50
    elbow_unit_price: float = 12.00

    def __post_init__(self) -> None:
        if self.waste_factor < 1.0:
            raise ValueError("waste_factor must be at least 1.0")
        if self.connection_tolerance < 0:
            raise ValueError("connection_tolerance must be non-negative")
        if not 0 <= self.fitting_angle_threshold <= 180:
            raise ValueError("fitting_angle_threshold must be between 0 and 180")


@dataclass(frozen=True)
class BomItem:
    """One line of the bill of materials."""

    id: str
    name: str
    description: str
    category: BomCategory
    quantity: float
    unit: BomUnit
    unit_price: float
    total_price: float


@dataclass(frozen=True)
class BomReport:
    """Bill of materials for a set of routed runs.

    Attributes:
        items: Linear items in first-seen group order, then the elbow line.
        total_cost: Sum of item totals, rounded to cents.
        waste_factor: Waste factor applied to linear items.
        currency: Currency tag.
    """

    items: tuple[BomItem, ...] = field(default_factory=tuple)
    total_cost: float = 0.0
    waste_factor: float = 1.15
    currency: str = "USD"

    @property
    def is_empty(self) -> bool:
        return not self.items

    def items_by_category(self, category: BomCategory) -> list[BomItem]:
        return [item for item in self.items if item.category == category]

    def get_item(self, item_id: str) -> BomItem | None:
        return next((item for item in self.items if item.id == item_id), None)


@dataclass
class _LinearGroup:
    system_type: SystemType
    size_tag: str
    length: float = 0.0


def turn_angle(first: RoutingSegment, second: RoutingSegment) -> float | None:
    """Angle in degrees between two segment directions.

    Returns None when either segment has zero length.
    """
    v1, v2 = first.direction, second.direction
    mag1 = math.sqrt(sum(c * c for c in v1))
    mag2 = math.sqrt(sum(c * c for c in v2))
    if mag1 == 0 or mag2 == 0:
        return None
    cosine = sum(a * b for a, b in zip(v1, v2)) / (mag1 * mag2)
    # rounding can push collinear cosines just past +/-1
    cosine = max(-1.0, min(1.0, cosine))
    return math.degrees(math.acos(cosine))


class BomSynthesizer:
    """Builds a BomReport from routing segments.

    Segment order matters for fitting detection: only consecutive pairs
    are checked for a shared joint.
    """

    def __init__(self, config: BomConfig | None = None) -> None:
        self.config = config or BomConfig()

    def synthesize(self, segments: Sequence[RoutingSegment]) -> BomReport:
        """Compute linear items, elbow fittings and the total cost."""
        segments = list(segments)
        items = self._linear_items(segments)
        elbows = self.count_elbows(segments)
        if elbows:
            items.append(self._elbow_item(elbows))

        total_cost = round(sum(item.total_price for item in items), 2)
        logger.debug(
            "BOM from %d segments: %d items, %d elbows, total %.2f",
            len(segments),
            len(items),
            elbows,
            total_cost,
        )
        return BomReport(
            items=tuple(items),
            total_cost=total_cost,
            waste_factor=self.config.waste_factor,
            currency=self.config.currency,
        )

    def count_elbows(self, segments: Sequence[RoutingSegment]) -> int:
        """Count connected consecutive pairs that turn past the threshold."""
        count = 0
        for first, second in zip(segments, segments[1:]):
            if not first.end.is_close(second.start, self.config.connection_tolerance):
                continue
            angle = turn_angle(first, second)
            if angle is not None and angle > self.config.fitting_angle_threshold:
                count += 1
        return count

    def _linear_items(self, segments: Iterable[RoutingSegment]) -> list[BomItem]:
        groups: dict[str, _LinearGroup] = {}
        for segment in segments:
            key = f"{segment.system_type.value}-{segment.size_tag}"
            group = groups.setdefault(
                key, _LinearGroup(segment.system_type, segment.size_tag)
            )
            group.length += segment.length

        return [self._linear_item(key, group) for key, group in groups.items()]

    def _linear_item(self, key: str, group: _LinearGroup) -> BomItem:
        quantity = group.length * self.config.waste_factor
        if group.system_type == SystemType.ELECTRICAL:
            name = f"{group.size_tag} Wire"
            description = f"Electrical circuit - {group.size_tag}"
            category = BomCategory.WIRE
            unit_price = self.config.wire_unit_price
        elif group.system_type == SystemType.PNEUMATIC:
            name = f"{group.size_tag} Air Pipe"
            description = f"Compressed air line - {group.size_tag}"
            category = BomCategory.PIPE
            unit_price = self.config.duct_unit_price
        else:
            name = f"{group.size_tag} Galvanized Duct"
            description = f"Dust collection line - {group.size_tag}"
            category = BomCategory.PIPE
            unit_price = self.config.duct_unit_price

        return BomItem(
            id=key,
            name=name,
            description=description,
            category=category,
            quantity=round(quantity, 2),
            unit=BomUnit.FEET,
            unit_price=unit_price,
            total_price=round(quantity * unit_price, 2),
        )

    def _elbow_item(self, count: int) -> BomItem:
        return BomItem(
            id=ELBOW_ITEM_ID,
            name="90° Adjustable Elbow",
            description="Standard adjustable elbow for routing turns",
            category=BomCategory.FITTING,
            quantity=count,
            unit=BomUnit.EACH,
            unit_price=self.config.elbow_unit_price,
            total_price=round(count * self.config.elbow_unit_price, 2),
        )


def synthesize_bom(
    segments: Sequence[RoutingSegment],
    waste_factor: float = 1.15,
    currency: str = "USD",
) -> BomReport:
    """Synthesize a BOM with default pricing."""
    config = BomConfig(waste_factor=waste_factor, currency=currency)
    return BomSynthesizer(config).synthesize(segments)


__all__ = [
    "ELBOW_ITEM_ID",
    "BomConfig",
    "BomItem",
    "BomReport",
    "BomSynthesizer",
    "RoutingSegment",
    "synthesize_bom",
    "turn_angle",
]

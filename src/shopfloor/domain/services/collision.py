"""Collision detection between equipment bounding volumes.

This module provides the stateful CollisionDetector, which keeps one
axis-aligned box per equipment id and caches the pairwise overlap result
until the next mutation, and the stateless LayoutCollisionValidator,
which checks a placed 2D layout and reports overlap areas.

Touching boundaries count as overlap: equipment must not share even an
edge. Pairwise testing is O(n^2), sized for the tens of machines in one
building.

A CollisionDetector belongs to a single layout editing session. Callers
that mutate it from several threads must serialize access themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from ..entities import Equipment
from ..value_objects import BoxDimensions, Point3D

logger = logging.getLogger(__name__)

__all__ = [
    "BoundingBox",
    "CollidingPair",
    "CollisionDetector",
    "CollisionResult",
    "FootprintCollision",
    "LayoutCollisionReport",
    "LayoutCollisionValidator",
    "PlacedFootprint",
    "detect_collisions",
]


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box built from a center point and dimensions.

    Attributes:
        id: Equipment id owning the box.
        center: Center of the box in building coordinates.
        dimensions: Full extents along each axis.
    """

    id: str
    center: Point3D
    dimensions: BoxDimensions

    @property
    def min_corner(self) -> Point3D:
        return Point3D(
            self.center.x - self.dimensions.width / 2,
            self.center.y - self.dimensions.height / 2,
            self.center.z - self.dimensions.depth / 2,
        )

    @property
    def max_corner(self) -> Point3D:
        return Point3D(
            self.center.x + self.dimensions.width / 2,
            self.center.y + self.dimensions.height / 2,
            self.center.z + self.dimensions.depth / 2,
        )

    def intersects(self, other: BoundingBox) -> bool:
        """Check for overlap on all three axes, touching included."""
        a_min, a_max = self.min_corner, self.max_corner
        b_min, b_max = other.min_corner, other.max_corner
        return (
            a_min.x <= b_max.x
            and b_min.x <= a_max.x
            and a_min.y <= b_max.y
            and b_min.y <= a_max.y
            and a_min.z <= b_max.z
            and b_min.z <= a_max.z
        )


@dataclass(frozen=True)
class CollidingPair:
    """Unordered pair of colliding ids, in box insertion order."""

    id1: str
    id2: str

    def involves(self, equipment_id: str) -> bool:
        return equipment_id in (self.id1, self.id2)

    def other(self, equipment_id: str) -> str | None:
        """Return the partner of equipment_id, or None if not in this pair."""
        if equipment_id == self.id1:
            return self.id2
        if equipment_id == self.id2:
            return self.id1
        return None


@dataclass(frozen=True)
class CollisionResult:
    """Outcome of a full pairwise collision pass."""

    has_collision: bool
    colliding_pairs: tuple[CollidingPair, ...]
    collision_count: int

    @classmethod
    def from_pairs(cls, pairs: Iterable[CollidingPair]) -> CollisionResult:
        pairs = tuple(pairs)
        return cls(
            has_collision=bool(pairs),
            colliding_pairs=pairs,
            collision_count=len(pairs),
        )


@dataclass(frozen=True)
class _Dirty:
    """Cache state: boxes changed since the last pass."""


@dataclass(frozen=True)
class _Cached:
    """Cache state: result is valid for the current set of boxes."""

    result: CollisionResult


_CacheState = _Dirty | _Cached


class CollisionDetector:
    """Incremental collision detector over equipment bounding boxes.

    Every update_box/remove_box/clear moves the cache to the dirty state;
    detect_collisions recomputes only from the dirty state, so a cached
    result is never returned for a stale set of boxes.

    Example:
        detector = CollisionDetector()
        detector.update_box("saw", Point3D(5, 2, 5), BoxDimensions(4, 4, 6))
        detector.update_box("planer", Point3D(7, 2, 5), BoxDimensions(3, 4, 3))
        if detector.is_colliding("saw"):
            print(detector.get_colliding_with("saw"))
    """

    def __init__(self) -> None:
        self._boxes: dict[str, BoundingBox] = {}
        self._state: _CacheState = _Dirty()

    @property
    def box_count(self) -> int:
        """Number of boxes currently tracked."""
        return len(self._boxes)

    @property
    def is_cached(self) -> bool:
        """True when the next detect_collisions call will reuse a result."""
        return isinstance(self._state, _Cached)

    def get_box(self, equipment_id: str) -> BoundingBox | None:
        return self._boxes.get(equipment_id)

    def update_box(
        self,
        equipment_id: str,
        center: Point3D,
        dimensions: BoxDimensions,
    ) -> None:
        """Insert or replace the box for an equipment id.

        Args:
            equipment_id: Id owning the box; any prior box is replaced.
            center: Center position of the box.
            dimensions: Full box extents.
        """
        self._boxes[equipment_id] = BoundingBox(
            id=equipment_id, center=center, dimensions=dimensions
        )
        self._state = _Dirty()

    def update_from_placement(
        self,
        equipment: Equipment,
        x: float,
        y: float,
        floor_elevation: float = 0.0,
    ) -> None:
        """Track equipment placed with its footprint corner at (x, y).

        Floor plan X maps to box X, floor plan Y maps to box Z, and the
        equipment height stands on the vertical Y axis.

        Args:
            equipment: Equipment being placed.
            x: Footprint left edge in feet.
            y: Footprint top edge in feet.
            floor_elevation: Height of the floor the equipment sits on.
        """
        width = equipment.placed_width
        depth = equipment.placed_depth
        center = Point3D(
            x + width / 2,
            floor_elevation + equipment.height / 2,
            y + depth / 2,
        )
        self.update_box(
            equipment.id,
            center,
            BoxDimensions(width=width, height=equipment.height, depth=depth),
        )

    def remove_box(self, equipment_id: str) -> None:
        """Stop tracking an equipment id. Unknown ids are ignored."""
        self._boxes.pop(equipment_id, None)
        self._state = _Dirty()

    def clear(self) -> None:
        """Remove every box."""
        self._boxes.clear()
        self._state = _Dirty()

    def detect_collisions(self) -> CollisionResult:
        """Return all colliding pairs, reusing the cached result when valid."""
        if isinstance(self._state, _Cached):
            return self._state.result

        boxes = list(self._boxes.values())
        pairs: list[CollidingPair] = []
        for i, first in enumerate(boxes):
            for second in boxes[i + 1 :]:
                if first.intersects(second):
                    pairs.append(CollidingPair(id1=first.id, id2=second.id))

        result = CollisionResult.from_pairs(pairs)
        logger.debug(
            "Collision pass over %d boxes found %d pair(s)",
            len(boxes),
            result.collision_count,
        )
        self._state = _Cached(result)
        return result

    def is_colliding(self, equipment_id: str) -> bool:
        """Check whether an equipment id overlaps any other box."""
        return any(
            pair.involves(equipment_id)
            for pair in self.detect_collisions().colliding_pairs
        )

    def get_colliding_with(self, equipment_id: str) -> list[str]:
        """Ids of every box overlapping the given equipment id."""
        partners: list[str] = []
        for pair in self.detect_collisions().colliding_pairs:
            partner = pair.other(equipment_id)
            if partner is not None:
                partners.append(partner)
        return partners


def detect_collisions(boxes: Iterable[BoundingBox]) -> CollisionResult:
    """Run a one-off collision pass over a set of boxes."""
    detector = CollisionDetector()
    for box in boxes:
        detector.update_box(box.id, box.center, box.dimensions)
    return detector.detect_collisions()


@dataclass(frozen=True)
class PlacedFootprint:
    """Equipment footprint centered at a floor position.

    Attributes:
        equipment: Equipment being placed.
        x: Footprint center X in feet.
        y: Footprint center Y in feet.
    """

    equipment: Equipment
    x: float
    y: float

    @property
    def left(self) -> float:
        return self.x - self.equipment.placed_width / 2

    @property
    def right(self) -> float:
        return self.x + self.equipment.placed_width / 2

    @property
    def top(self) -> float:
        return self.y - self.equipment.placed_depth / 2

    @property
    def bottom(self) -> float:
        return self.y + self.equipment.placed_depth / 2


@dataclass(frozen=True)
class FootprintCollision:
    """Two overlapping footprints and the shared floor area."""

    equipment1_id: str
    equipment2_id: str
    equipment1_name: str
    equipment2_name: str
    overlap_area: float


@dataclass(frozen=True)
class LayoutCollisionReport:
    """Result of validating a placed layout for footprint overlaps."""

    collisions: tuple[FootprintCollision, ...]

    @property
    def collision_count(self) -> int:
        return len(self.collisions)

    @property
    def has_collisions(self) -> bool:
        return bool(self.collisions)

    @property
    def is_valid(self) -> bool:
        return not self.collisions

    @property
    def message(self) -> str:
        if not self.collisions:
            return "Layout is collision-free"
        return f"Found {self.collision_count} collision(s)"


class LayoutCollisionValidator:
    """Stateless 2D footprint overlap check for a saved layout.

    Used when validating a layout as a whole (for example before saving
    it), where the overlap area is useful for ranking problems.
    """

    @staticmethod
    def footprint_overlap(a: PlacedFootprint, b: PlacedFootprint) -> float | None:
        """Return the overlap area of two footprints, or None if apart.

        Touching edges overlap with an area of zero.
        """
        if a.right < b.left or a.left > b.right or a.bottom < b.top or a.top > b.bottom:
            return None
        overlap_width = min(a.right, b.right) - max(a.left, b.left)
        overlap_depth = min(a.bottom, b.bottom) - max(a.top, b.top)
        return overlap_width * overlap_depth

    def validate_layout(
        self, positions: Iterable[PlacedFootprint]
    ) -> LayoutCollisionReport:
        """Check every pair of placed footprints.

        Args:
            positions: Placed footprints in any order.

        Returns:
            LayoutCollisionReport listing each overlapping pair.
        """
        placed = list(positions)
        collisions: list[FootprintCollision] = []
        for i, first in enumerate(placed):
            for second in placed[i + 1 :]:
                area = self.footprint_overlap(first, second)
                if area is not None:
                    collisions.append(
                        FootprintCollision(
                            equipment1_id=first.equipment.id,
                            equipment2_id=second.equipment.id,
                            equipment1_name=first.equipment.name,
                            equipment2_name=second.equipment.name,
                            overlap_area=area,
                        )
                    )
        return LayoutCollisionReport(collisions=tuple(collisions))

    def validate_placements(
        self,
        equipment: Iterable[Equipment],
        centers: Mapping[str, tuple[float, float]],
    ) -> LayoutCollisionReport:
        """Validate equipment against a mapping of id to center position.

        Equipment without a position is skipped.
        """
        return self.validate_layout(
            PlacedFootprint(equipment=eq, x=centers[eq.id][0], y=centers[eq.id][1])
            for eq in equipment
            if eq.id in centers
        )

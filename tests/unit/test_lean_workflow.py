"""Unit tests for lean workflow analysis.

Tests cover:
- Travel distance, time and efficiency for a route
- Threshold-driven suggestions and backtracking detection
- Composite lean score and category findings
- Spaghetti diagram paths and frequency colors
"""

from __future__ import annotations

import pytest

from shopfloor.domain.entities import WorkflowSequence, WorkflowStep
from shopfloor.domain.services.lean import (
    analyze_workflow,
    calculate_lean_score,
    frequency_color,
    generate_spaghetti_diagram,
    round_half_up,
)
from shopfloor.domain.services.lean.constants import (
    HIGH_FREQUENCY_COLOR,
    LOW_FREQUENCY_COLOR,
    MEDIUM_FREQUENCY_COLOR,
)
from shopfloor.domain.services.lean.scoring import (
    organization_score,
    safety_score,
    worker_movement_score,
)
from shopfloor.domain.value_objects import Point2D


def _step(name: str, x: float, y: float, minutes: float = 1.0) -> WorkflowStep:
    return WorkflowStep(
        equipment_id=name.lower(),
        equipment_name=name,
        operation_name=f"{name} op",
        cycle_time_minutes=minutes,
        position=Point2D(x, y),
    )


@pytest.fixture
def long_haul() -> WorkflowSequence:
    """Out to a far machine and back again."""
    return WorkflowSequence(
        name="Long haul",
        steps=(_step("Saw", 0, 0), _step("Planer", 200, 0), _step("Bench", 0, 0)),
    )


class TestRoundHalfUp:
    def test_halves_round_up(self) -> None:
        assert round_half_up(94.5) == 95
        assert round_half_up(0.15, 1) == pytest.approx(0.2)

    def test_below_half(self) -> None:
        assert round_half_up(2.449, 1) == pytest.approx(2.4)


class TestAnalyzeWorkflow:
    """Tests for route metrics."""

    def test_square_route(self, square_workflow) -> None:
        result = analyze_workflow(square_workflow)

        assert result.total_distance == pytest.approx(30.0)
        assert result.total_cycle_time == pytest.approx(8.0)
        assert result.value_added_time == pytest.approx(8.0)
        # 30 ft at 200 ft/min
        assert result.transport_time == pytest.approx(0.2)
        assert result.efficiency == 98
        assert result.waste_score == 94

    def test_path_segments(self, square_workflow) -> None:
        result = analyze_workflow(square_workflow)

        assert len(result.path_segments) == 3
        first = result.path_segments[0]
        assert (first.from_name, first.to_name, first.distance) == (
            "Station 1",
            "Station 2",
            10.0,
        )

    def test_square_route_suggestions(self, square_workflow) -> None:
        assert analyze_workflow(square_workflow).suggestions == (
            "EXCELLENT: Travel distance is minimal. Layout is well-optimized.",
            "Excellent workflow efficiency! Minimal transport waste.",
        )

    def test_long_route_suggestions(self, long_haul) -> None:
        result = analyze_workflow(long_haul)

        assert result.total_distance == pytest.approx(400.0)
        assert result.efficiency == 60
        assert result.waste_score == 20
        assert result.suggestions == (
            "WARNING: Travel distance is high (>300 ft). "
            "Look for opportunities to relocate equipment.",
            "PRIORITY: Reduce distance between Saw and Planer (currently 200 ft)",
            "Low efficiency detected. Consider grouping related operations closer together.",
            "BACKTRACKING DETECTED: Material moves backward 2 time(s). "
            "Resequence operations or relocate equipment.",
        )

    def test_very_long_route_is_critical(self) -> None:
        sequence = WorkflowSequence(
            name="Far", steps=(_step("A", 0, 0, 60), _step("B", 600, 0, 60))
        )
        result = analyze_workflow(sequence)
        assert result.suggestions[0].startswith("CRITICAL:")
        assert result.waste_score == 0

    def test_moderate_route_is_a_tip(self) -> None:
        sequence = WorkflowSequence(
            name="Mid", steps=(_step("A", 0, 0, 30), _step("B", 120, 0, 30))
        )
        result = analyze_workflow(sequence)
        assert result.suggestions[0].startswith("TIP:")

    @pytest.mark.parametrize("steps", [(), (("Saw", 0, 0),)])
    def test_fewer_than_two_steps(self, steps) -> None:
        sequence = WorkflowSequence(name="Short", steps=tuple(_step(*s) for s in steps))

        result = analyze_workflow(sequence)

        assert result.total_distance == 0
        assert result.waste_score == 100
        assert result.efficiency == 100
        assert result.suggestions == ("Add more steps to analyze workflow",)
        assert result.path_segments == ()


class TestLeanScore:
    """Tests for the weighted composite score."""

    def test_compact_square_shop(self, square_workflow) -> None:
        analysis = analyze_workflow(square_workflow)

        score = calculate_lean_score(analysis, equipment_count=4, layout_area=600)

        assert score.material_flow == 96
        assert score.worker_movement == 95
        assert score.organization == 90
        assert score.safety == 80
        assert score.overall == 93

    def test_breakdown_weights_and_passing_text(self, square_workflow) -> None:
        score = calculate_lean_score(analyze_workflow(square_workflow), 4, 600)

        assert [(c.category, c.weight) for c in score.breakdown] == [
            ("Material Flow", 0.4),
            ("Worker Movement", 0.3),
            ("Workspace Organization", 0.2),
            ("Safety & Ergonomics", 0.1),
        ]
        assert all(c.issues == () for c in score.breakdown)
        assert score.breakdown[0].recommendations == ("Material flow is optimized",)

    def test_cramped_long_route(self, long_haul) -> None:
        score = calculate_lean_score(analyze_workflow(long_haul), equipment_count=2, layout_area=100)

        assert score.material_flow == 36
        assert score.worker_movement == 30
        assert score.organization == 60
        assert score.safety == 60
        assert score.overall == 41
        assert all(c.issues for c in score.breakdown)
        assert score.breakdown[3].recommendations == (
            "Add safety zones around equipment",
            "Ensure proper aisle widths (min 4 ft)",
        )

    def test_storage_and_safety_flags(self, square_workflow) -> None:
        score = calculate_lean_score(
            analyze_workflow(square_workflow),
            4,
            600,
            has_organized_storage=True,
            has_safety_zones=True,
        )
        assert score.organization == 100
        assert score.safety == 100

    def test_negative_inputs_rejected(self, square_workflow) -> None:
        with pytest.raises(ValueError):
            calculate_lean_score(analyze_workflow(square_workflow), -1, 600)


class TestCategoryScores:
    @pytest.mark.parametrize(
        "average_hop, expected",
        [(10, 95), (50, 80), (120, 65), (199, 50), (200, 30)],
    )
    def test_worker_movement_bands(self, average_hop: float, expected: int) -> None:
        # two machines means a single hop
        assert worker_movement_score(average_hop, equipment_count=2) == expected

    def test_worker_movement_with_single_machine(self) -> None:
        assert worker_movement_score(40, equipment_count=1) == 95

    @pytest.mark.parametrize(
        "area, expected",
        [(150, 90), (50, 60), (250, 70), (400, 60)],
    )
    def test_organization_density(self, area: float, expected: int) -> None:
        assert organization_score(1, area, has_organized_storage=False) == expected

    def test_safety_spacing(self) -> None:
        assert safety_score(2, 300, has_safety_zones=False) == 80
        assert safety_score(2, 200, has_safety_zones=False) == 60

    def test_no_equipment_uses_whole_area(self) -> None:
        assert organization_score(0, 150, has_organized_storage=False) == 90


class TestSpaghettiDiagram:
    """Tests for spaghetti diagram data."""

    def test_paths_and_totals(self, square_workflow) -> None:
        diagram = generate_spaghetti_diagram(square_workflow, trips_per_day=30)

        assert len(diagram.paths) == 3
        assert diagram.total_distance == pytest.approx(900.0)
        assert diagram.total_trips == 90
        first = diagram.paths[0]
        assert (first.start.label, first.end.label) == ("Station 1", "Station 2")
        assert (first.end.x, first.end.y) == (10, 0)
        assert first.distance == pytest.approx(10.0)
        assert first.frequency == 30
        assert first.color == MEDIUM_FREQUENCY_COLOR

    def test_default_single_trip(self, square_workflow) -> None:
        diagram = generate_spaghetti_diagram(square_workflow)
        assert diagram.total_distance == pytest.approx(30.0)
        assert diagram.paths[0].color == LOW_FREQUENCY_COLOR

    def test_single_step_has_no_paths(self) -> None:
        diagram = generate_spaghetti_diagram(WorkflowSequence("One", (_step("A", 0, 0),)))
        assert diagram.paths == ()
        assert diagram.total_trips == 0

    def test_negative_trips_rejected(self, square_workflow) -> None:
        with pytest.raises(ValueError):
            generate_spaghetti_diagram(square_workflow, trips_per_day=-1)

    @pytest.mark.parametrize(
        "trips, color",
        [
            (0, LOW_FREQUENCY_COLOR),
            (20, LOW_FREQUENCY_COLOR),
            (21, MEDIUM_FREQUENCY_COLOR),
            (50, MEDIUM_FREQUENCY_COLOR),
            (51, HIGH_FREQUENCY_COLOR),
        ],
    )
    def test_frequency_color(self, trips: float, color: str) -> None:
        assert frequency_color(trips) == color

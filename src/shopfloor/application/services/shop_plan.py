"""Shop plan service that orchestrates the planning engine end to end.

Runs placement, re-checks the suggested positions for overlaps, sizes
circuits and the dust system, synthesizes the BOM and analyzes the
production workflow for one project configuration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from shopfloor.application.config import (
    ProjectConfiguration,
    config_to_bom_config,
    config_to_constraints,
    config_to_equipment,
    config_to_segments,
    config_to_workflow,
)
from shopfloor.domain.entities import Equipment
from shopfloor.domain.services.bom import BomReport, BomSynthesizer
from shopfloor.domain.services.collision import CollisionDetector, CollisionResult
from shopfloor.domain.services.ducting import DustMachine, DustSystemResult, size_dust_system
from shopfloor.domain.services.electrical import (
    CircuitLoad,
    ElectricalSizingResult,
    size_electrical_circuit,
)
from shopfloor.domain.services.lean import (
    ImprovementSuggestion,
    LeanScore,
    SpaghettiDiagram,
    WorkflowAnalysisResult,
    analyze_workflow,
    calculate_lean_score,
    generate_improvement_suggestions,
    generate_spaghetti_diagram,
    prioritize_by_roi,
)
from shopfloor.domain.services.placement import (
    LayoutAdvice,
    LayoutAdvisor,
    LayoutConstraints,
    OptimizationResult,
    PlacementOptimizer,
    WorkflowScore,
)
from shopfloor.domain.value_objects import Phase

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CircuitPlan:
    """Branch circuit sized for one machine."""

    equipment_id: str
    equipment_name: str
    run_length_ft: float
    sizing: ElectricalSizingResult


@dataclass(frozen=True)
class WorkflowReport:
    """Workflow metrics, lean score and spaghetti data for one route.

    ``improvements`` holds kaizen suggestions, best return on effort first.
    """

    name: str
    analysis: WorkflowAnalysisResult
    lean_score: LeanScore
    spaghetti: SpaghettiDiagram
    improvements: tuple[ImprovementSuggestion, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ShopPlan:
    """Complete plan for a shop project.

    Attributes:
        constraints: Building envelope and preferences used.
        equipment: Equipment in placement order.
        layout: Placement suggestions and utilization warnings.
        collisions: Overlap re-check of the suggested positions.
        advice: Bounds and utility advice for the layout.
        improvements: Crowding and dust trunk suggestions.
        workflow_score: Same-category clustering score.
        circuits: Branch circuits for machines with a run length.
        dust_system: Dust system sizing, if any machine needs collection.
        bom: Bill of materials, if routing was supplied.
        workflow: Workflow report, if a route was supplied.
    """

    constraints: LayoutConstraints
    equipment: tuple[Equipment, ...]
    layout: OptimizationResult
    collisions: CollisionResult
    advice: LayoutAdvice
    improvements: tuple[str, ...] = field(default_factory=tuple)
    workflow_score: WorkflowScore | None = None
    circuits: tuple[CircuitPlan, ...] = field(default_factory=tuple)
    dust_system: DustSystemResult | None = None
    bom: BomReport | None = None
    workflow: WorkflowReport | None = None

    @property
    def warnings(self) -> list[str]:
        """Every soft violation in the plan, for a one-line summary."""
        warnings = list(self.layout.warnings)
        warnings.extend(
            f"{pair.id1} overlaps {pair.id2}" for pair in self.collisions.colliding_pairs
        )
        warnings.extend(self.advice.critical)
        for circuit in self.circuits:
            warnings.extend(
                f"{circuit.equipment_name}: {w}"
                for w in circuit.sizing.warnings
                if not w.startswith("Upsized")
            )
        return warnings

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


class ShopPlanService:
    """Facade over the planning engine for a whole project.

    Example:
        config = load_config(Path("shop.json"))
        plan = ShopPlanService().plan(config)
        if plan.collisions.has_collision:
            ...
    """

    def __init__(self, optimizer: PlacementOptimizer | None = None) -> None:
        self._optimizer = optimizer or PlacementOptimizer()

    def plan(self, config: ProjectConfiguration) -> ShopPlan:
        """Produce a ShopPlan for a validated project.

        Raises:
            SizingError: If a machine's circuit exceeds every standard size.
        """
        equipment = config_to_equipment(config)
        constraints = config_to_constraints(config)

        layout = self._optimizer.optimize(equipment, constraints)
        positions = layout.positions()
        collisions = self.check_collisions(equipment, layout)

        advisor = LayoutAdvisor(constraints.building_width, constraints.building_depth)
        advice = advisor.analyze(equipment, positions)
        centers = layout.center_positions(equipment)
        improvements = self._optimizer.suggest_improvements(equipment, centers, constraints)
        workflow_score = self._optimizer.calculate_workflow_score(equipment, centers)

        segments = config_to_segments(config)
        bom = None
        if segments:
            bom = BomSynthesizer(config_to_bom_config(config)).synthesize(segments)

        plan = ShopPlan(
            constraints=constraints,
            equipment=tuple(equipment),
            layout=layout,
            collisions=collisions,
            advice=advice,
            improvements=tuple(improvements),
            workflow_score=workflow_score,
            circuits=tuple(self._size_circuits(config)),
            dust_system=self._size_dust_system(config, equipment),
            bom=bom,
            workflow=self._analyze_workflow(config, len(equipment), constraints.building_area),
        )
        logger.info(
            "Planned %d equipment: score %.1f, %d collision(s), %d warning(s)",
            len(equipment),
            layout.total_score,
            collisions.collision_count,
            len(plan.warnings),
        )
        return plan

    @staticmethod
    def check_collisions(
        equipment: list[Equipment], layout: OptimizationResult
    ) -> CollisionResult:
        """Feed suggested positions through a fresh CollisionDetector."""
        by_id = {eq.id: eq for eq in equipment}
        detector = CollisionDetector()
        for placement in layout.placements:
            detector.update_from_placement(by_id[placement.equipment_id], placement.x, placement.y)
        return detector.detect_collisions()

    @staticmethod
    def _size_circuits(config: ProjectConfiguration) -> list[CircuitPlan]:
        circuits: list[CircuitPlan] = []
        for item in config.equipment:
            demand = item.electrical
            if demand is None or demand.run_length_ft is None:
                continue
            load = CircuitLoad(
                volts=demand.volts,
                amps=demand.amps,
                phase=Phase(demand.phase),
                power_factor=demand.power_factor,
                is_motor=demand.is_motor,
            )
            circuits.append(
                CircuitPlan(
                    equipment_id=item.id,
                    equipment_name=item.name,
                    run_length_ft=demand.run_length_ft,
                    sizing=size_electrical_circuit(load, demand.run_length_ft),
                )
            )
        return circuits

    @staticmethod
    def _size_dust_system(
        config: ProjectConfiguration, equipment: list[Equipment]
    ) -> DustSystemResult | None:
        machines = [DustMachine(eq.name, eq.dust_cfm) for eq in equipment if eq.dust is not None]
        if not machines:
            return None
        return size_dust_system(
            machines,
            simultaneous=config.dust_collection.simultaneous,
            main_run_length_ft=config.dust_collection.main_run_length_ft,
        )

    @staticmethod
    def _analyze_workflow(
        config: ProjectConfiguration, equipment_count: int, layout_area: float
    ) -> WorkflowReport | None:
        sequence = config_to_workflow(config)
        if sequence is None or config.workflow is None:
            return None
        analysis = analyze_workflow(sequence)
        lean_score = calculate_lean_score(
            analysis,
            equipment_count,
            layout_area,
            has_organized_storage=config.workflow.has_organized_storage,
            has_safety_zones=config.workflow.has_safety_zones,
        )
        improvements = generate_improvement_suggestions(
            lean_score.overall,
            analysis.total_distance,
            analysis.efficiency,
            len(sequence.steps),
            trips_per_day=config.workflow.trips_per_day,
        )
        return WorkflowReport(
            name=sequence.name,
            analysis=analysis,
            lean_score=lean_score,
            spaghetti=generate_spaghetti_diagram(sequence, config.workflow.trips_per_day),
            improvements=tuple(prioritize_by_roi(improvements)),
        )


__all__ = ["CircuitPlan", "ShopPlan", "ShopPlanService", "WorkflowReport"]

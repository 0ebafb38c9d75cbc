"""Pytest configuration and shared fixtures for shop planning tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from shopfloor.application.config import ProjectConfiguration, load_config_from_dict
from shopfloor.application.services import ShopPlan, ShopPlanService
from shopfloor.domain.entities import (
    DustDemand,
    ElectricalDemand,
    Equipment,
    WorkflowSequence,
    WorkflowStep,
)
from shopfloor.domain.services.placement import LayoutConstraints
from shopfloor.domain.value_objects import Point2D


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


def _equipment(
    equipment_id: str,
    width: float = 5.0,
    depth: float = 5.0,
    category: str = "general",
    **kwargs: Any,
) -> Equipment:
    """Build an Equipment with sensible defaults for tests."""
    return Equipment(
        id=equipment_id,
        name=kwargs.pop("name", equipment_id.replace("-", " ").title()),
        category=category,
        width=width,
        depth=depth,
        **kwargs,
    )


@pytest.fixture
def make_equipment():
    """Factory fixture building Equipment with test defaults."""
    return _equipment


@pytest.fixture
def table_saw() -> Equipment:
    return _equipment(
        "table-saw",
        width=6.0,
        depth=4.0,
        category="cutting",
        requires_dust=True,
        requires_electrical=True,
        dust=DustDemand(cfm=350),
        electrical=ElectricalDemand(volts=240, amps=13, is_motor=True),
    )


@pytest.fixture
def small_shop() -> LayoutConstraints:
    """30 x 20 ft shop with a 2 ft aisle."""
    return LayoutConstraints(building_width=30, building_depth=20, min_clearance=2)


@pytest.fixture
def square_workflow() -> WorkflowSequence:
    """Four stations on a 10 ft square walked around three sides."""
    corners = [(0, 0), (10, 0), (10, 10), (0, 10)]
    steps = tuple(
        WorkflowStep(
            equipment_id=f"eq-{i}",
            equipment_name=f"Station {i}",
            operation_name=f"Op {i}",
            cycle_time_minutes=2.0,
            position=Point2D(x, y),
        )
        for i, (x, y) in enumerate(corners, start=1)
    )
    return WorkflowSequence(name="Square", steps=steps)


# =============================================================================
# Project file fixtures
# =============================================================================


@pytest.fixture
def project_data() -> dict[str, Any]:
    """Small but complete project: four machines, routing and a workflow."""
    return {
        "schema_version": "1.0",
        "building": {"width": 30, "depth": 20},
        "constraints": {"min_clearance": 2},
        "equipment": [
            {
                "id": "saw",
                "name": "Table Saw",
                "category": "cutting",
                "width": 5,
                "depth": 5,
                "dust": {"cfm": 350},
                "electrical": {
                    "volts": 240,
                    "amps": 13,
                    "is_motor": True,
                    "run_length_ft": 40,
                },
            },
            {
                "id": "jointer",
                "name": "Jointer",
                "category": "milling",
                "width": 5,
                "depth": 5,
                "dust": {"cfm": 400},
            },
            {
                "id": "bench",
                "name": "Workbench",
                "category": "assembly",
                "width": 5,
                "depth": 5,
            },
            {
                "id": "sprayer",
                "name": "Spray Booth",
                "category": "finishing",
                "width": 5,
                "depth": 5,
                "air": {"scfm": 8},
            },
        ],
        "routing": [
            {
                "id": "w1",
                "start": [0, 8, 0],
                "end": [10, 8, 0],
                "system_type": "electrical",
                "gauge": "12 AWG",
            },
            {
                "id": "w2",
                "start": [10, 8, 0],
                "end": [10, 8, 10],
                "system_type": "electrical",
                "gauge": "12 AWG",
            },
        ],
        "workflow": {
            "name": "Cabinet doors",
            "trips_per_day": 10,
            "steps": [
                {
                    "equipment_id": "saw",
                    "operation_name": "Rip",
                    "cycle_time_minutes": 3,
                    "position": {"x": 0, "y": 0},
                },
                {
                    "equipment_id": "jointer",
                    "operation_name": "Flatten",
                    "cycle_time_minutes": 2,
                    "position": {"x": 10, "y": 0},
                },
                {
                    "equipment_id": "bench",
                    "operation_name": "Assemble",
                    "cycle_time_minutes": 5,
                    "position": {"x": 10, "y": 10},
                },
            ],
        },
    }


@pytest.fixture
def project_file(tmp_path: Path, project_data: dict[str, Any]) -> Path:
    """project_data written to a JSON file."""
    path = tmp_path / "shop.json"
    path.write_text(json.dumps(project_data))
    return path


@pytest.fixture
def project_config(project_data: dict[str, Any]) -> ProjectConfiguration:
    return load_config_from_dict(project_data)


@pytest.fixture
def shop_plan(project_config: ProjectConfiguration) -> ShopPlan:
    """project_data run through the full planning service."""
    return ShopPlanService().plan(project_config)

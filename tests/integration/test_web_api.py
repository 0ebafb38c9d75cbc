"""Integration tests for the REST API."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from shopfloor.web import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def _step(equipment_id: str, name: str, x: float, y: float, minutes: float = 2) -> dict:
    return {
        "equipment_id": equipment_id,
        "equipment_name": name,
        "operation_name": f"{name} op",
        "cycle_time_minutes": minutes,
        "position": {"x": x, "y": y},
    }


@pytest.fixture
def square_steps() -> list[dict]:
    return [
        _step("eq-1", "Station 1", 0, 0),
        _step("eq-2", "Station 2", 10, 0),
        _step("eq-3", "Station 3", 10, 10),
        _step("eq-4", "Station 4", 0, 10),
    ]


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestSizingEndpoints:
    """Tests for /api/v1/sizing."""

    def test_electrical(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sizing/electrical",
            json={"volts": 120, "amps": 16, "length_ft": 50},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["conductor_size"] == "12 AWG"
        assert data["breaker_amps"] == 20
        assert data["conduit_size"] == '1/2"'
        assert data["conductor_count"] == 3
        assert data["percent_drop"] == pytest.approx(2.5733, rel=1e-3)

    def test_electrical_three_phase_motor(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sizing/electrical",
            json={"volts": 208, "amps": 30, "length_ft": 50, "phase": 3, "is_motor": True},
        )
        data = response.json()
        assert data["conductor_size"] == "8 AWG"
        assert data["breaker_amps"] == 80

    def test_electrical_beyond_standard_sizes(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sizing/electrical",
            json={"volts": 240, "amps": 300, "length_ft": 10},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "sizing"
        assert data["details"]["quantity"] == "wire"
        assert "exceeds maximum wire size" in data["error"]

    def test_electrical_request_validation(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sizing/electrical",
            json={"volts": 240, "amps": 10, "length_ft": 10, "phase": 2},
        )
        assert response.status_code == 422

    def test_air(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sizing/air",
            json={"flow_scfm": 20, "pressure_psi": 90, "length_ft": 100},
        )

        data = response.json()
        assert data["pipe_size"] == '2"'
        assert data["meets_drop_limit"] is True

    def test_air_no_size_qualifies(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sizing/air", json={"flow_scfm": 5000, "length_ft": 100}
        )
        data = response.json()
        assert data["pipe_size"] == '6"'
        assert data["meets_drop_limit"] is False

    def test_duct(self, client: TestClient) -> None:
        response = client.post("/api/v1/sizing/duct", json={"cfm": 1000})

        data = response.json()
        assert data["diameter"] == 7
        assert data["velocity_ok"] is True
        assert data["friction_ok"] is False

    def test_dust_system(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/sizing/dust-system",
            json={
                "machines": [
                    {"name": "Table Saw", "cfm": 350},
                    {"name": "Jointer", "cfm": 400},
                    {"name": "Planer", "cfm": 450},
                ],
                "simultaneous": 2,
            },
        )

        data = response.json()
        assert [b["machine"]["name"] for b in data["branches"]] == [
            "Table Saw",
            "Jointer",
            "Planer",
        ]
        assert data["simultaneous_cfm"] == 850
        assert data["collector_cfm"] == 1275
        assert data["main_trunk"]["diameter"] == 7

    def test_dust_system_needs_machines(self, client: TestClient) -> None:
        response = client.post("/api/v1/sizing/dust-system", json={"machines": []})
        assert response.status_code == 422


class TestLayoutEndpoints:
    """Tests for /api/v1/layout."""

    @pytest.fixture
    def layout_request(self, project_data: dict[str, Any]) -> dict[str, Any]:
        return {
            "building": project_data["building"],
            "constraints": project_data["constraints"],
            "equipment": project_data["equipment"],
        }

    def test_optimize(self, client: TestClient, layout_request: dict[str, Any]) -> None:
        response = client.post("/api/v1/layout/optimize", json=layout_request)

        assert response.status_code == 200
        data = response.json()
        assert [(p["x"], p["y"]) for p in data["placements"]] == [
            (2, 2),
            (9, 2),
            (16, 2),
            (23, 2),
        ]
        assert data["total_score"] == 100
        assert data["collisions"]["has_collision"] is False
        assert data["warnings"] == ["Shop is under-utilized - could be more compact"]
        assert data["placements"][0]["reasons"] == [
            "Near dust collection main line",
            "Accessible to electrical panel",
        ]
        assert data["advice"]["critical"] == []

    def test_optimize_duplicate_ids(
        self, client: TestClient, layout_request: dict[str, Any]
    ) -> None:
        layout_request["equipment"][1]["id"] = "saw"

        response = client.post("/api/v1/layout/optimize", json=layout_request)

        assert response.status_code == 422
        assert response.json()["error_type"] == "config"

    def test_collisions(self, client: TestClient) -> None:
        def box(box_id: str, x: float) -> dict:
            return {
                "id": box_id,
                "center": {"x": x, "y": 1, "z": 0},
                "dimensions": {"width": 2, "height": 2, "depth": 2},
            }

        response = client.post(
            "/api/v1/layout/collisions",
            json={"boxes": [box("saw", 0), box("planer", 1), box("lathe", 20)]},
        )

        data = response.json()
        assert data["collision_count"] == 1
        assert data["colliding_pairs"] == [{"id1": "saw", "id2": "planer"}]


class TestBomEndpoint:
    def test_bom(self, client: TestClient, project_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/bom", json={"segments": project_data["routing"]})

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data["items"]] == ["electrical-12 AWG", "fitting-elbow-90"]
        assert data["items"][0]["category"] == "wire"
        assert data["items"][1]["unit"] == "ea"
        assert data["total_cost"] == pytest.approx(46.5)

    def test_bom_options(self, client: TestClient, project_data: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/bom",
            json={
                "segments": project_data["routing"],
                "options": {"waste_factor": 1.0, "elbow_unit_price": 0},
            },
        )
        # 20 ft at 1.50
        assert response.json()["total_cost"] == pytest.approx(30.0)

    def test_empty(self, client: TestClient) -> None:
        data = client.post("/api/v1/bom", json={}).json()
        assert data["items"] == []
        assert data["total_cost"] == 0


class TestWorkflowEndpoints:
    def test_analyze(self, client: TestClient, square_steps: list[dict]) -> None:
        response = client.post(
            "/api/v1/workflow/analyze",
            json={
                "name": "Square",
                "steps": square_steps,
                "equipment_count": 4,
                "layout_area": 600,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["analysis"]["total_distance"] == pytest.approx(30.0)
        assert data["analysis"]["efficiency"] == 98
        assert len(data["analysis"]["path_segments"]) == 3
        assert data["lean_score"]["overall"] == 93
        assert len(data["lean_score"]["breakdown"]) == 4
        assert [i["id"] for i in data["improvements"]] == ["improve-tool-storage"]
        assert data["improvements"][0]["impact"]["cost_savings"] == pytest.approx(1562.5)

    def test_analyze_long_route_kaizen(self, client: TestClient, square_steps: list[dict]) -> None:
        square_steps[-1]["position"] = {"x": 0, "y": 400}

        response = client.post(
            "/api/v1/workflow/analyze",
            json={"name": "Square", "steps": square_steps, "trips_per_day": 10},
        )

        improvements = response.json()["improvements"]
        travel = next(i for i in improvements if i["id"] == "improve-travel-distance")
        assert travel["category"] == "workflow"
        assert travel["effort"] == "high"
        assert travel["status"] == "suggested"
        assert improvements[-1]["id"] == "improve-travel-distance"

    def test_analyze_rejects_negative_trips(
        self, client: TestClient, square_steps: list[dict]
    ) -> None:
        response = client.post(
            "/api/v1/workflow/analyze",
            json={"name": "Square", "steps": square_steps, "trips_per_day": -1},
        )
        assert response.status_code == 422

    def test_spaghetti(self, client: TestClient, square_steps: list[dict]) -> None:
        response = client.post(
            "/api/v1/workflow/spaghetti",
            json={"name": "Square", "steps": square_steps, "trips_per_day": 60},
        )

        data = response.json()
        assert len(data["paths"]) == 3
        assert data["paths"][0]["color"] == "#ef4444"
        assert data["paths"][0]["start"]["label"] == "Station 1"
        assert data["total_distance"] == pytest.approx(1800.0)
        assert data["total_trips"] == 180


class TestPlanEndpoint:
    def test_plan(self, client: TestClient, project_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/plan", json={"config": project_data})

        assert response.status_code == 200
        data = response.json()
        assert len(data["layout"]["placements"]) == 4
        assert data["bom"]["total_cost"] == pytest.approx(46.5)
        assert data["workflow"]["lean_score"]["overall"] == 93
        assert data["dust_system"]["collector_cfm"] == 600

    def test_invalid_project(self, client: TestClient, project_data: dict[str, Any]) -> None:
        project_data["building"]["width"] = 0

        response = client.post("/api/v1/plan", json={"config": project_data})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "config"
        assert data["details"][0]["path"] == "building.width"

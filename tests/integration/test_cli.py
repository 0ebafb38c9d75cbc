"""Integration tests for the shopfloor CLI.

These tests run the Typer app end to end against project files written
to a temporary directory, covering:
- plan, bom and workflow output
- validate exit codes
- one-off sizing commands
"""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from shopfloor.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def clean_project_file(tmp_path: Path, project_data: dict[str, Any]) -> Path:
    """One machine in a snug shop, which plans without warnings."""
    project_data["building"] = {"width": 8, "depth": 8}
    project_data["equipment"] = project_data["equipment"][:1]
    del project_data["workflow"]
    path = tmp_path / "clean.json"
    path.write_text(json.dumps(project_data))
    return path


class TestPlanCommand:
    """Tests for the plan command."""

    def test_text_summary(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["plan", str(project_file)])

        # under-utilized shop produces a warning
        assert result.exit_code == 2
        assert "SHOP PLAN" in result.output
        assert "Table Saw: (2.0, 2.0)" in result.output
        assert "WORKFLOW: Cabinet doors" in result.output

    def test_json(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["plan", str(project_file), "--format", "json"])

        assert result.exit_code == 2
        data = json.loads(result.output)
        assert [p["equipment_id"] for p in data["layout"]["placements"]] == [
            "saw",
            "jointer",
            "bench",
            "sprayer",
        ]
        assert data["warnings"] == ["Shop is under-utilized - could be more compact"]

    def test_output_file(self, runner: CliRunner, project_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "out" / "plan.json"

        result = runner.invoke(app, ["plan", str(project_file), "-f", "json", "-o", str(output)])

        assert result.exit_code == 2
        assert f"Wrote {output}" in result.output
        assert json.loads(output.read_text())["building"]["width"] == 30

    def test_clean_plan_exits_zero(self, runner: CliRunner, clean_project_file: Path) -> None:
        result = runner.invoke(app, ["plan", str(clean_project_file)])
        assert result.exit_code == 0
        assert "(None)" in result.output

    def test_unknown_format(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["plan", str(project_file), "--format", "dxf"])
        assert result.exit_code == 1

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["plan", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_oversized_circuit_is_an_error(
        self, runner: CliRunner, tmp_path: Path, project_data: dict[str, Any]
    ) -> None:
        project_data["equipment"][0]["electrical"]["amps"] = 300
        path = tmp_path / "big.json"
        path.write_text(json.dumps(project_data))

        result = runner.invoke(app, ["plan", str(path)])

        assert result.exit_code == 1
        assert "exceeds maximum wire size" in result.output


class TestBomCommand:
    def test_text(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["bom", str(project_file)])

        assert result.exit_code == 0
        assert "BILL OF MATERIALS" in result.output
        assert "12 AWG Wire" in result.output
        assert "46.50 USD" in result.output

    def test_csv(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["bom", str(project_file), "--format", "csv"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "ID,Category,Item,Description,Quantity,Unit,Unit Price,Total"
        assert lines[1].startswith("electrical-12 AWG,wire,12 AWG Wire")
        assert lines[2].startswith("fitting-elbow-90,fitting")

    def test_json_uses_project_pricing(
        self, runner: CliRunner, tmp_path: Path, project_data: dict[str, Any]
    ) -> None:
        project_data["bom"] = {"waste_factor": 1.0, "wire_unit_price": 2.0, "currency": "EUR"}
        path = tmp_path / "priced.json"
        path.write_text(json.dumps(project_data))

        result = runner.invoke(app, ["bom", str(path), "-f", "json"])

        data = json.loads(result.output)
        # 20 ft of wire at 2.00 plus one 12.00 elbow
        assert data["total_cost"] == pytest.approx(52.0)
        assert data["currency"] == "EUR"

    def test_unknown_format(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["bom", str(project_file), "--format", "xlsx"])
        assert result.exit_code == 1
        assert "Use one of: text, csv, json" in result.output


class TestWorkflowCommand:
    def test_report(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["workflow", str(project_file)])

        assert result.exit_code == 0
        assert "Workflow: Cabinet doors" in result.output
        assert "Total distance: 20 ft" in result.output
        assert "Efficiency: 99%" in result.output
        assert "Waste score: 96" in result.output
        assert "Lean score: 93" in result.output
        assert "Material Flow: 97" in result.output
        assert "Daily travel: 200 ft over 20 trips" in result.output
        assert "EXCELLENT" in result.output
        assert "Kaizen opportunities:" in result.output
        assert "Add Tool Storage at Workstations [low, low effort]: $1,562.50/yr" in result.output
        assert "Plan:" not in result.output

    def test_pdca_for_top_suggestion(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["workflow", str(project_file), "--pdca"])

        assert result.exit_code == 0
        assert "Define objective: Add Tool Storage at Workstations" in result.output
        assert "Check:" in result.output
        assert "Share best practices with team" in result.output

    def test_trips_override(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["workflow", str(project_file), "--trips-per-day", "60"])
        assert "Daily travel: 1200 ft over 120 trips" in result.output

    def test_negative_trips(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["workflow", str(project_file), "--trips-per-day", "-1"])
        assert result.exit_code == 1

    def test_project_without_workflow(self, runner: CliRunner, clean_project_file: Path) -> None:
        result = runner.invoke(app, ["workflow", str(clean_project_file)])
        assert result.exit_code == 1
        assert "project has no workflow" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_with_warnings(self, runner: CliRunner, project_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(project_file)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_valid_clean(self, runner: CliRunner, clean_project_file: Path) -> None:
        result = runner.invoke(app, ["validate", str(clean_project_file)])
        assert result.exit_code == 0
        assert "Validation passed. Project is valid." in result.output

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{ not json")

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_schema_error(
        self, runner: CliRunner, tmp_path: Path, project_data: dict[str, Any]
    ) -> None:
        project_data["building"]["width"] = -5
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(project_data))

        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "building.width" in result.output
        assert "Value: -5" in result.output


class TestSizeCommands:
    """Tests for the size command group."""

    def test_wire(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["size", "wire", "--amps", "16", "--length", "50", "--volts", "120"]
        )

        assert result.exit_code == 0
        assert "Conductor: 12 AWG (25A)" in result.output
        assert "Breaker: 20A" in result.output
        assert 'Conduit: 1/2" (3 conductors)' in result.output

    def test_wire_too_large(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "wire", "--amps", "300", "--length", "10"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_wire_invalid_phase(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "wire", "-a", "10", "-l", "10", "--phase", "2"])
        assert result.exit_code == 1

    def test_wire_negative_length(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "wire", "--amps", "20", "--length", "-5"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Error: Run length must be non-negative" in result.output

    def test_wire_zero_max_drop(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["size", "wire", "-a", "20", "-l", "50", "--max-drop", "0"]
        )

        assert result.exit_code == 1
        assert "Error: max_voltage_drop_pct must be positive" in result.output

    def test_air_negative_length(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "air", "--cfm", "20", "--length", "-1"])
        assert result.exit_code == 1
        assert "Error: Run length must be non-negative" in result.output

    def test_air_zero_pressure(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["size", "air", "--cfm", "20", "--length", "10", "--psi", "0"]
        )
        assert result.exit_code == 1
        assert "Error: Pressure must be positive" in result.output

    def test_breaker_motor(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "breaker", "--amps", "20", "--motor"])
        assert result.exit_code == 0
        assert "Breaker: 50A" in result.output

    def test_conduit(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "conduit", "--wire", "6 AWG", "--count", "4"])
        assert result.exit_code == 0
        assert 'Conduit: 3/4"' in result.output

    def test_conduit_unknown_wire(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "conduit", "-w", "13 AWG", "-n", "3"])
        assert result.exit_code == 1

    def test_air(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "air", "--cfm", "20", "--length", "100"])
        assert result.exit_code == 0
        assert 'Pipe: 2"' in result.output
        assert "Warning: Low velocity" in result.output

    def test_duct(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "duct", "--cfm", "1000"])
        assert result.exit_code == 0
        assert 'Diameter: 7"' in result.output

    def test_duct_low_velocity(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["size", "duct", "--cfm", "350"])
        assert "(outside 3500-5000 fpm)" in result.output

    def test_verbose_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--verbose", "size", "breaker", "--amps", "16"])
        assert result.exit_code == 0
        assert "Breaker: 20A" in result.output

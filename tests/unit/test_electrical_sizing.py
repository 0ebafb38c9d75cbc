"""Unit tests for electrical branch circuit sizing."""

from __future__ import annotations

import pytest

from shopfloor.domain import SizingError
from shopfloor.domain.services.electrical import (
    CircuitLoad,
    CircuitRun,
    ElectricalConfig,
    calculate_breaker_size,
    calculate_conduit_size,
    calculate_optimal_wire_size,
    calculate_voltage_drop,
    calculate_wire_size_by_ampacity,
    size_electrical_circuit,
)
from shopfloor.domain.value_objects import Phase


class TestWireSizeByAmpacity:
    """Tests for conductor selection by derated ampacity."""

    def test_twenty_amps_needs_12_awg(self) -> None:
        # 20A / 0.8 = 25A, exactly the 12 AWG rating
        assert calculate_wire_size_by_ampacity(20) == "12 AWG"

    def test_fifty_amps_needs_6_awg(self) -> None:
        assert calculate_wire_size_by_ampacity(50) == "6 AWG"

    def test_small_load_uses_smallest_wire(self) -> None:
        assert calculate_wire_size_by_ampacity(5) == "14 AWG"

    def test_custom_derating(self) -> None:
        assert calculate_wire_size_by_ampacity(20, derating_factor=1.0) == "14 AWG"

    def test_load_beyond_largest_wire_raises(self) -> None:
        with pytest.raises(SizingError) as exc_info:
            calculate_wire_size_by_ampacity(300)
        assert exc_info.value.quantity == "wire"
        assert "exceeds maximum wire size" in str(exc_info.value)

    def test_sizing_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            calculate_wire_size_by_ampacity(300)


class TestVoltageDrop:
    """Tests for VD = k * I * R * L / 1000."""

    def test_single_phase(self) -> None:
        result = calculate_voltage_drop("12 AWG", 100, 20, 120)
        assert result.voltage_drop == pytest.approx(7.72)
        assert result.percent_drop == pytest.approx(6.4333, rel=1e-4)

    def test_three_phase_uses_root_three(self) -> None:
        result = calculate_voltage_drop("8 AWG", 50, 30, 208, Phase.THREE)
        assert result.voltage_drop == pytest.approx(1.732 * 30 * 0.764 * 50 / 1000)

    def test_zero_length(self) -> None:
        result = calculate_voltage_drop("12 AWG", 0, 20, 120)
        assert result.voltage_drop == 0
        assert result.percent_drop == 0

    def test_unknown_wire_size(self) -> None:
        with pytest.raises(ValueError, match="Unknown wire size"):
            calculate_voltage_drop("13 AWG", 10, 10, 120)


class TestOptimalWireSize:
    """Tests for ampacity-then-voltage-drop conductor selection."""

    def test_short_run_keeps_ampacity_size(self) -> None:
        run = CircuitRun(CircuitLoad(volts=240, amps=20), length_ft=20)
        result = calculate_optimal_wire_size(run)
        assert result.wire_size == "12 AWG"
        assert result.warnings == ()
        assert not result.was_upsized

    def test_long_run_upsizes_until_drop_is_met(self) -> None:
        # 12 AWG drops 6.43%, 10 AWG 4.03%, 8 AWG 2.55%
        run = CircuitRun(CircuitLoad(volts=120, amps=20), length_ft=100)
        result = calculate_optimal_wire_size(run)

        assert result.wire_size == "8 AWG"
        assert result.percent_drop == pytest.approx(2.5467, rel=1e-3)
        assert result.was_upsized
        assert result.warnings == (
            "Upsized to 10 AWG to meet voltage drop requirement",
            "Upsized to 8 AWG to meet voltage drop requirement",
        )

    def test_run_over_100ft_warns(self) -> None:
        run = CircuitRun(CircuitLoad(volts=240, amps=10), length_ft=150)
        result = calculate_optimal_wire_size(run)
        assert "Long run (150ft) - consider voltage drop carefully" in result.warnings

    def test_unreachable_drop_is_a_warning(self) -> None:
        run = CircuitRun(CircuitLoad(volts=12, amps=100), length_ft=300)
        result = calculate_optimal_wire_size(run)

        assert result.wire_size == "4/0 AWG"
        assert any(w.startswith("Voltage drop") and "exceeds 3%" in w for w in result.warnings)

    def test_custom_drop_limit(self) -> None:
        run = CircuitRun(CircuitLoad(volts=120, amps=20), length_ft=100)
        result = calculate_optimal_wire_size(run, ElectricalConfig(max_voltage_drop_pct=5.0))
        assert result.wire_size == "10 AWG"


class TestConduitSize:
    """Tests for 40% fill conduit selection."""

    def test_three_12_awg_fit_half_inch(self) -> None:
        assert calculate_conduit_size("12 AWG", 3) == '1/2"'

    def test_four_6_awg_need_three_quarter(self) -> None:
        # 4 x 0.0507 = 0.2028 sq in, over the 1/2" capacity of 0.12
        assert calculate_conduit_size("6 AWG", 4) == '3/4"'

    def test_oversized_bundle_raises(self) -> None:
        with pytest.raises(SizingError) as exc_info:
            calculate_conduit_size("4/0 AWG", 20)
        assert exc_info.value.quantity == "conduit"

    def test_zero_conductors_rejected(self) -> None:
        with pytest.raises(ValueError):
            calculate_conduit_size("12 AWG", 0)


class TestBreakerSize:
    """Tests for breaker selection."""

    def test_general_load_uses_125_percent(self) -> None:
        assert calculate_breaker_size(16) == 20
        assert calculate_breaker_size(20) == 25

    def test_motor_load_uses_250_percent(self) -> None:
        assert calculate_breaker_size(20, is_motor=True) == 50

    def test_rounds_up_to_next_standard_size(self) -> None:
        # 41A * 1.25 = 51.25A
        assert calculate_breaker_size(41) == 60

    def test_beyond_largest_breaker_raises(self) -> None:
        with pytest.raises(SizingError) as exc_info:
            calculate_breaker_size(200, is_motor=True)
        assert exc_info.value.quantity == "breaker"
        assert exc_info.value.limit == 400


class TestSizeElectricalCircuit:
    """Tests for the full branch circuit recommendation."""

    def test_single_phase_circuit(self) -> None:
        result = size_electrical_circuit(CircuitLoad(volts=120, amps=16), length_ft=50)

        # 14 AWG would drop 4.09%, so the circuit steps up to 12 AWG
        assert result.conductor_size == "12 AWG"
        assert result.ampacity == 25
        assert result.percent_drop == pytest.approx(2.5733, rel=1e-3)
        assert result.breaker_amps == 20
        assert result.conductor_count == 3
        assert result.conduit_size == '1/2"'

    def test_three_phase_adds_conductor(self) -> None:
        load = CircuitLoad(volts=208, amps=30, phase=Phase.THREE, is_motor=True)
        result = size_electrical_circuit(load, length_ft=50)

        assert result.conductor_size == "8 AWG"
        assert result.conductor_count == 4
        assert result.breaker_amps == 80
        # 4 x 0.0366 = 0.1464 sq in
        assert result.conduit_size == '3/4"'

    def test_oversized_load_raises(self) -> None:
        with pytest.raises(SizingError):
            size_electrical_circuit(CircuitLoad(volts=240, amps=300), length_ft=10)


class TestCircuitLoad:
    def test_rejects_non_positive_voltage(self) -> None:
        with pytest.raises(ValueError):
            CircuitLoad(volts=0, amps=10)

    def test_conductor_count_by_phase(self) -> None:
        assert CircuitLoad(volts=240, amps=10).current_carrying_conductors == 2
        assert CircuitLoad(volts=208, amps=10, phase=Phase.THREE).current_carrying_conductors == 3

"""Tests for fuel consumption."""

from __future__ import annotations

import math

import pytest

from flightcalc.exceptions import FlightCalcError, FuelDepletedError, InvalidInputError
from flightcalc.fuel import remaining_fuel


class TestRemainingFuel:
    def test_reference_scenario(self) -> None:
        assert remaining_fuel(5000, 0.5, 3600) == pytest.approx(3200.0)

    def test_exactly_empty_allowed(self) -> None:
        assert remaining_fuel(3600, 1, 3600) == 0.0

    def test_rounding_to_empty_allowed(self) -> None:
        # 0.1 * 3 is 0.30000000000000004 in binary floating point
        assert remaining_fuel(0.3, 0.1, 3) == 0.0

    def test_just_over_load_depleted(self) -> None:
        with pytest.raises(FuelDepletedError):
            remaining_fuel(0.3, 0.1000001, 3)

    def test_no_burn(self) -> None:
        assert remaining_fuel(5000, 0, 3600) == 5000.0

    def test_zero_time(self) -> None:
        assert remaining_fuel(5000, 0.5, 0) == 5000.0

    @pytest.mark.parametrize(
        "fuel0,rate,t",
        [(5000.0, 0.5, 3600.0), (100.0, 0.01, 60.0), (1.0, 0.0, 1e6), (7200.0, 2.0, 3600.0)],
    )
    def test_result_within_bounds(self, fuel0, rate, t) -> None:
        result = remaining_fuel(fuel0, rate, t)
        assert 0 <= result <= fuel0

    def test_depleted(self) -> None:
        with pytest.raises(FuelDepletedError) as exc_info:
            remaining_fuel(100, 1, 3600)
        err = exc_info.value
        assert err.fuel_kg == 100.0
        assert err.consumed_kg == 3600.0
        assert err.shortfall_kg == 3500.0
        assert "Fuel depleted" in str(err)

    def test_depleted_is_flightcalc_error(self) -> None:
        with pytest.raises(FlightCalcError):
            remaining_fuel(0, 0.1, 1)

    def test_negative_burn_rate_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="burn rate"):
            remaining_fuel(5000, -0.5, 3600)

    def test_negative_fuel_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="fuel"):
            remaining_fuel(-1, 0.5, 3600)

    def test_negative_time_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="time"):
            remaining_fuel(5000, 0.5, -1)

    @pytest.mark.parametrize(
        "args",
        [("5000", 0.5, 3600), (5000, None, 3600), (5000, 0.5, math.nan), (math.inf, 0.5, 3600)],
    )
    def test_invalid_inputs(self, args) -> None:
        with pytest.raises(InvalidInputError):
            remaining_fuel(*args)

    def test_deterministic(self) -> None:
        assert remaining_fuel(5000, 0.5, 3600) == remaining_fuel(5000, 0.5, 3600)

"""Fuel consumption at a constant burn rate."""

from __future__ import annotations

import math

from flightcalc._validation import check_result, require_non_negative
from flightcalc.exceptions import FuelDepletedError

# Consumption within this relative distance of the load empties the tank exactly.
EMPTY_TANK_REL_TOL: float = 1e-9


def remaining_fuel(fuel0_kg: float, burn_rate_kg_s: float, t_s: float) -> float:
    """Return the fuel left in kg after burning for ``t_s`` seconds.

    A negative burn rate is rejected; it is not treated as refuelling.
    Ending the interval with zero fuel is allowed, including when rounding in
    ``burn_rate * t`` lands a hair above the load.

    Raises:
        InvalidInputError: On a non-numeric or non-finite input, or a negative
            starting fuel, burn rate or time.
        FuelDepletedError: If the load is used up before ``t_s`` elapses.
    """
    fuel0 = require_non_negative("fuel (kg)", fuel0_kg)
    burn_rate = require_non_negative("burn rate (kg/s)", burn_rate_kg_s)
    t = require_non_negative("time (s)", t_s)

    consumed = check_result("fuel consumed (kg)", burn_rate * t)
    remaining = fuel0 - consumed
    if remaining < 0:
        if math.isclose(consumed, fuel0, rel_tol=EMPTY_TANK_REL_TOL):
            return 0.0
        raise FuelDepletedError(fuel_kg=fuel0, consumed_kg=consumed)
    return remaining

"""Input checks shared by the unit, kinematics and fuel computations."""

from __future__ import annotations

import math

from flightcalc.exceptions import FlightCalcError, InvalidInputError


def is_finite_number(value: object) -> bool:
    """Return True for a finite int or float. Bools, strings and NaN/inf are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large to represent as a float
        return False


def require_finite(
    name: str,
    value: object,
    error: type[FlightCalcError] = InvalidInputError,
) -> float:
    """Return ``value`` as a float, or raise ``error`` if it is not a finite number."""
    if not is_finite_number(value):
        raise error(f"{name} must be a finite number, got {value!r}")
    return float(value)  # type: ignore[arg-type]


def require_non_negative(name: str, value: object) -> float:
    """Return ``value`` as a float, or raise InvalidInputError if non-finite or below zero."""
    number = require_finite(name, value)
    if number < 0:
        raise InvalidInputError(f"{name} must be >= 0, got {value!r}")
    return number


def check_result(
    name: str,
    value: float,
    error: type[FlightCalcError] = InvalidInputError,
) -> float:
    """Raise ``error`` if a computed value overflowed to infinity."""
    if not math.isfinite(value):
        raise error(f"{name} is out of range: inputs overflow a float")
    return value

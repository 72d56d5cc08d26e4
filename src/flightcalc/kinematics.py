"""Constant-acceleration velocity and distance updates."""

from __future__ import annotations

from flightcalc._validation import check_result, require_finite, require_non_negative
from flightcalc.exceptions import InvalidInputError, InvalidUnitError
from flightcalc.units import acceleration_to_km_per_h2, seconds_to_hours


def new_velocity(v0_kmh: float, acc_m_s2: float, t_s: float) -> float:
    """Return the velocity in km/h after ``t_s`` seconds at constant acceleration.

    Args:
        v0_kmh: Initial velocity in km/h.
        acc_m_s2: Constant acceleration in m/s².
        t_s: Elapsed time in seconds, must be >= 0.

    Raises:
        InvalidInputError: On a non-numeric or non-finite input, or negative time.
    """
    v0 = require_finite("velocity (km/h)", v0_kmh)
    acc = require_finite("acceleration (m/s²)", acc_m_s2)
    t_hours = seconds_to_hours(t_s)

    try:
        acc_kmh2 = acceleration_to_km_per_h2(acc)
    except InvalidUnitError as exc:
        # acc is already finite, so only overflow lands here
        raise InvalidInputError(f"acceleration (m/s²) is out of range: {acc!r}") from exc
    return check_result("velocity (km/h)", v0 + acc_kmh2 * t_hours)


def new_distance(v_kmh: float, t_s: float, d0_km: float) -> float:
    """Return the distance in km covered after ``t_s`` seconds.

    The interval is integrated with the velocity at its start (``d0 + v * t``),
    not the average of start and end velocity.

    Raises:
        InvalidInputError: On a non-numeric or non-finite input, negative time,
            or negative starting distance.
    """
    v = require_finite("velocity (km/h)", v_kmh)
    t_hours = seconds_to_hours(t_s)
    d0 = require_non_negative("distance (km)", d0_km)

    return check_result("distance (km)", d0 + v * t_hours)

"""Unit conversion at the m/s² to km/h² boundary.

Everything downstream of :func:`acceleration_to_km_per_h2` works in km, hours
and km/h². Acceleration is accepted in m/s² only; a value already expressed in
km/h² must never be passed back through the converter.

Derivation of the acceleration factor::

    1 m/s² = (1/1000 km) / (1/3600 h)²
           = 3600² / 1000 km/h²
           = 12 960 km/h²

which is the speed factor 3.6 (m/s to km/h) times 3600 (per second to per hour).
"""

from __future__ import annotations

from flightcalc._validation import check_result, require_finite, require_non_negative
from flightcalc.exceptions import InvalidUnitError

SECONDS_PER_HOUR: float = 3600.0
METERS_PER_KM: float = 1000.0

# Speed conversion: meters per second → kilometers per hour
MPS_TO_KPH: float = SECONDS_PER_HOUR / METERS_PER_KM

# Acceleration conversion: m/s² → km/h²
ACC_MPS2_TO_KMPH2: float = SECONDS_PER_HOUR**2 / METERS_PER_KM


def acceleration_to_km_per_h2(acc_m_s2: float) -> float:
    """Convert an acceleration in m/s² to km/h².

    Args:
        acc_m_s2: Acceleration in metres per second squared.

    Returns:
        The same acceleration in kilometres per hour squared.

    Raises:
        InvalidUnitError: If ``acc_m_s2`` is not a finite number.
    """
    acc = require_finite("acceleration (m/s²)", acc_m_s2, error=InvalidUnitError)
    return check_result("acceleration (km/h²)", acc * ACC_MPS2_TO_KMPH2, error=InvalidUnitError)


def seconds_to_hours(t_s: float) -> float:
    """Convert a non-negative elapsed time in seconds to hours."""
    return require_non_negative("time (s)", t_s) / SECONDS_PER_HOUR

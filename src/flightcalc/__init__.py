"""flightcalc — velocity, distance and fuel updates over a fixed time interval."""

from flightcalc.config import ScenarioConfig
from flightcalc.exceptions import (
    FlightCalcError,
    FuelDepletedError,
    InvalidInputError,
    InvalidUnitError,
)
from flightcalc.fuel import remaining_fuel
from flightcalc.kinematics import new_distance, new_velocity
from flightcalc.result import ErrorKind, Failure, Result, Success, capture
from flightcalc.scenario import (
    ScenarioReport,
    evaluate_scenario,
    format_report,
    run_scenario,
)
from flightcalc.units import acceleration_to_km_per_h2, seconds_to_hours

__all__ = [
    "ErrorKind",
    "Failure",
    "FlightCalcError",
    "FuelDepletedError",
    "InvalidInputError",
    "InvalidUnitError",
    "Result",
    "ScenarioConfig",
    "ScenarioReport",
    "Success",
    "acceleration_to_km_per_h2",
    "capture",
    "evaluate_scenario",
    "format_report",
    "new_distance",
    "new_velocity",
    "remaining_fuel",
    "run_scenario",
    "seconds_to_hours",
]

__version__ = "0.1.0"

"""Run a full velocity/distance/fuel scenario and render the result."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from flightcalc._logging import log_scenario_call
from flightcalc.config import ScenarioConfig
from flightcalc.fuel import remaining_fuel
from flightcalc.kinematics import new_distance, new_velocity
from flightcalc.result import Result, capture


class ScenarioReport(BaseModel):
    """State of the vehicle at the end of the interval."""

    model_config = ConfigDict(frozen=True)

    velocity_kmh: float
    distance_km: float
    remaining_fuel_kg: float


def _compute_report(config: ScenarioConfig) -> ScenarioReport:
    distance = new_distance(
        config.initial_velocity_kmh, config.elapsed_time_s, config.initial_distance_km,
    )
    fuel = remaining_fuel(
        config.initial_fuel_kg, config.burn_rate_kg_s, config.elapsed_time_s,
    )
    velocity = new_velocity(
        config.initial_velocity_kmh, config.acceleration_m_s2, config.elapsed_time_s,
    )
    return ScenarioReport(
        velocity_kmh=velocity,
        distance_km=distance,
        remaining_fuel_kg=fuel,
    )


@log_scenario_call
def run_scenario(config: ScenarioConfig) -> ScenarioReport:
    """Compute the end-of-interval report, raising on the first failure.

    The three quantities are independent of each other; none is reported
    unless all of them succeed.
    """
    return _compute_report(config)


@log_scenario_call
def evaluate_scenario(config: ScenarioConfig) -> Result[ScenarioReport]:
    """Like :func:`run_scenario`, but return a Success or Failure instead of raising."""
    return capture(_compute_report, config)


def format_report(report: ScenarioReport) -> str:
    """Render a report as three labelled lines with two decimals."""
    return "\n".join([
        f"New Velocity: {report.velocity_kmh:.2f} km/h",
        f"New Distance: {report.distance_km:.2f} km",
        f"Remaining Fuel: {report.remaining_fuel_kg:.2f} kg",
    ])

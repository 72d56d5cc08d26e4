"""Scenario inputs as an explicit, validated configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flightcalc.exceptions import InvalidInputError


def summarize_validation_error(exc: ValidationError) -> str:
    """Collapse a pydantic ValidationError into one ``field: message; ...`` line."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "input"
        parts.append(f"{field}: {error['msg']}")
    return "; ".join(parts)


class ScenarioConfig(BaseModel):
    """The six scalar inputs of one velocity/distance/fuel computation.

    Usage:
        config = ScenarioConfig()  # the reference scenario
        config = ScenarioConfig(acceleration_m_s2=-2.5, elapsed_time_s=600)
        config = ScenarioConfig.from_mapping({"initial_fuel_kg": 100})
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        allow_inf_nan=False,
        extra="forbid",
    )

    initial_velocity_kmh: float = Field(default=10000.0, description="Initial velocity (km/h)")
    acceleration_m_s2: float = Field(default=3.0, description="Constant acceleration (m/s²)")
    elapsed_time_s: float = Field(default=3600.0, ge=0, description="Elapsed time (s)")
    initial_distance_km: float = Field(default=0.0, ge=0, description="Initial distance (km)")
    initial_fuel_kg: float = Field(default=5000.0, ge=0, description="Initial fuel load (kg)")
    burn_rate_kg_s: float = Field(default=0.5, ge=0, description="Fuel burn rate (kg/s)")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScenarioConfig:
        """Validate a mapping of inputs, raising InvalidInputError on bad data."""
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise InvalidInputError(
                f"Invalid scenario configuration: {summarize_validation_error(exc)}"
            ) from exc

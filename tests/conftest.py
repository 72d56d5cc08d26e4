"""Shared test fixtures and sample scenario inputs."""

from __future__ import annotations

import pytest

from flightcalc import _logging
from flightcalc.config import ScenarioConfig

# Reference scenario: 10000 km/h, 3 m/s² for one hour, 5000 kg at 0.5 kg/s
SAMPLE_SCENARIO = {
    "initial_velocity_kmh": 10000.0,
    "acceleration_m_s2": 3.0,
    "elapsed_time_s": 3600.0,
    "initial_distance_km": 0.0,
    "initial_fuel_kg": 5000.0,
    "burn_rate_kg_s": 0.5,
}

# 3600 kg needed, only 100 kg on board
DEPLETED_SCENARIO = {
    **SAMPLE_SCENARIO,
    "initial_fuel_kg": 100.0,
    "burn_rate_kg_s": 1.0,
}


@pytest.fixture
def sample_config() -> ScenarioConfig:
    return ScenarioConfig.model_validate(SAMPLE_SCENARIO)


@pytest.fixture
def depleted_config() -> ScenarioConfig:
    return ScenarioConfig.model_validate(DEPLETED_SCENARIO)


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    """Send scenario logs to tmp_path and drop the cached logger around each test."""
    monkeypatch.setenv("FLIGHTCALC_LOG_DIR", str(tmp_path / "logs"))
    _logging.reset_logger()
    yield tmp_path / "logs"
    _logging.reset_logger()

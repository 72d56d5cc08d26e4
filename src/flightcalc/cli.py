"""Command-line entry point: ``flightcalc [--velocity KMH] [--fuel KG] ...``."""

from __future__ import annotations

import argparse
import sys

from flightcalc.config import ScenarioConfig
from flightcalc.exceptions import FlightCalcError
from flightcalc.scenario import format_report, run_scenario

# (option, config field, help text)
_OPTIONS: list[tuple[str, str, str]] = [
    ("--velocity", "initial_velocity_kmh", "initial velocity in km/h"),
    ("--acceleration", "acceleration_m_s2", "constant acceleration in m/s²"),
    ("--time", "elapsed_time_s", "elapsed time in seconds"),
    ("--distance", "initial_distance_km", "initial distance in km"),
    ("--fuel", "initial_fuel_kg", "initial fuel load in kg"),
    ("--burn-rate", "burn_rate_kg_s", "fuel burn rate in kg/s"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flightcalc",
        description="Compute velocity, distance and remaining fuel after a time interval.",
    )
    defaults = ScenarioConfig()
    for option, field, help_text in _OPTIONS:
        parser.add_argument(
            option,
            dest=field,
            type=float,
            default=None,
            help=f"{help_text} (default: {getattr(defaults, field)})",
        )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {
        field: value for field, value in vars(args).items() if value is not None
    }

    try:
        config = ScenarioConfig.from_mapping(overrides)
        report = run_scenario(config)
    except FlightCalcError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())

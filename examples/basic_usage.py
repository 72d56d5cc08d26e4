"""Basic usage examples for flightcalc."""

from flightcalc import (
    ErrorKind,
    Failure,
    FlightCalcError,
    ScenarioConfig,
    Success,
    capture,
    evaluate_scenario,
    format_report,
    new_velocity,
    remaining_fuel,
    run_scenario,
)


def main() -> None:
    # Reference scenario: 10000 km/h, 3 m/s² for one hour
    print("=== Reference scenario ===")
    print(format_report(run_scenario(ScenarioConfig())))

    # Individual computations
    print("\n=== Braking at 2 m/s² for 10 minutes ===")
    print(f"  {new_velocity(10000, -2.0, 600):.2f} km/h")

    # Exceptions for callers that want them
    print("\n=== Small tank ===")
    try:
        remaining_fuel(100, 1, 3600)
    except FlightCalcError as exc:
        print(f"  {exc}")

    # Tagged results for callers that prefer matching
    print("\n=== Evaluated scenarios ===")
    configs = [
        ScenarioConfig(),
        ScenarioConfig(initial_fuel_kg=100, burn_rate_kg_s=1),
    ]
    for config in configs:
        match evaluate_scenario(config):
            case Success(value=report):
                print(f"  ok: {report.remaining_fuel_kg:.2f} kg left")
            case Failure(kind=ErrorKind.FUEL_DEPLETED, message=message):
                print(f"  aborted: {message}")

    outcome = capture(new_velocity, 10000, "3", 3600)
    print(f"\n=== String acceleration ===\n  {outcome.kind.name}: {outcome.message}")


if __name__ == "__main__":
    main()

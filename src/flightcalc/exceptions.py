"""Custom exceptions for flightcalc computations."""

from __future__ import annotations


class FlightCalcError(Exception):
    """Base exception for all flightcalc errors."""


class InvalidUnitError(FlightCalcError):
    """Raised when a value handed to a unit conversion is not a finite number."""


class InvalidInputError(FlightCalcError):
    """Raised when a computation input is not a finite number or violates a sign constraint."""


class FuelDepletedError(FlightCalcError):
    """Raised when the fuel load runs out before the end of the interval."""

    def __init__(self, fuel_kg: float, consumed_kg: float) -> None:
        self.fuel_kg = fuel_kg
        self.consumed_kg = consumed_kg
        self.shortfall_kg = consumed_kg - fuel_kg
        super().__init__(
            f"Fuel depleted: {consumed_kg:.2f} kg required, "
            f"{fuel_kg:.2f} kg available ({self.shortfall_kg:.2f} kg short)"
        )

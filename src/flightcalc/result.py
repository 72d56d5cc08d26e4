"""Tagged success/failure outcomes for callers that prefer matching over try/except.

Usage:
    outcome = capture(remaining_fuel, 100.0, 1.0, 3600.0)
    match outcome:
        case Success(value=fuel):
            print(f"{fuel:.2f} kg left")
        case Failure(kind=ErrorKind.FUEL_DEPLETED):
            print("out of fuel")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar

from flightcalc.exceptions import (
    FlightCalcError,
    FuelDepletedError,
    InvalidInputError,
    InvalidUnitError,
)


T = TypeVar("T")


class ErrorKind(Enum):
    INVALID_UNIT = "invalid_unit"
    INVALID_INPUT = "invalid_input"
    FUEL_DEPLETED = "fuel_depleted"


_KIND_BY_ERROR: dict[type[FlightCalcError], ErrorKind] = {
    InvalidUnitError: ErrorKind.INVALID_UNIT,
    InvalidInputError: ErrorKind.INVALID_INPUT,
    FuelDepletedError: ErrorKind.FUEL_DEPLETED,
}


def error_kind(exc: FlightCalcError) -> ErrorKind:
    """Return the kind of ``exc``, resolved through its class hierarchy."""
    for cls in type(exc).__mro__:
        kind = _KIND_BY_ERROR.get(cls)
        if kind is not None:
            return kind
    raise TypeError(f"{type(exc).__name__} has no ErrorKind")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A computed value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A categorized computation failure wrapping the error that caused it."""

    error: FlightCalcError

    def __post_init__(self) -> None:
        error_kind(self.error)

    @classmethod
    def from_error(cls, exc: FlightCalcError) -> Failure:
        """Wrap a raised error; TypeError if it maps to no ErrorKind."""
        return cls(exc)

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return error_kind(self.error)

    @property
    def message(self) -> str:
        return str(self.error)

    def unwrap(self) -> NoReturn:
        """Re-raise the wrapped error."""
        raise self.error


Result = Success[T] | Failure


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """Call ``fn`` and wrap its value or its FlightCalcError in a tagged result.

    Exceptions outside the FlightCalcError hierarchy propagate unchanged.
    """
    try:
        return Success(fn(*args, **kwargs))
    except FlightCalcError as exc:
        return Failure.from_error(exc)

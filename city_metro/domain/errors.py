"""Typed domain errors for City Metro.

Every error a caller can recover from inherits from CityMetroError and
carries a human-readable message plus an optional root cause.

"No path between two locations" is deliberately not an error: it is
reported through the Unreachable result model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class CityMetroError(Exception):
    """Base error for the City Metro domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownLocationError(CityMetroError):
    """A referenced location name or id was never registered.

    Attributes:
        location: The offending name or id
    """

    location: Union[str, int, None] = None


@dataclass
class InvalidWeightError(CityMetroError):
    """A route weight is negative, NaN or infinite.

    Attributes:
        weight_name: Which weight was rejected ("distance" or "fare")
        value: The rejected value
    """

    weight_name: str = ""
    value: Optional[float] = None


@dataclass
class EngineInvariantError(CityMetroError):
    """The path engine reached a state that correct code cannot produce.

    Raised when the predecessor chain of a finished search does not lead
    back to the start location. Not caused by user input.
    """


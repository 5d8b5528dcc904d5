"""Immutable domain models for City Metro.

All models are frozen dataclasses with slots. They carry no behaviour
beyond small derived properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Union


class Metric(Enum):
    """Weight a path query optimises for."""

    DISTANCE = "distance"
    FARE = "fare"

    def weight_of(self, neighbor: Neighbor) -> float:
        """Project an adjacency entry onto this metric's weight."""
        if self is Metric.DISTANCE:
            return neighbor.distance
        return neighbor.fare

    @property
    def label(self) -> str:
        """Adjective used when describing a best path ("Shortest", "Cheapest")."""
        return "Shortest" if self is Metric.DISTANCE else "Cheapest"


@dataclass(frozen=True, slots=True)
class Route:
    """An undirected route between two locations.

    Attributes:
        route_id: Position of the route in the route arena
        from_id: Id of the first endpoint
        to_id: Id of the second endpoint
        distance: Length of the route in kilometers
        fare: Price of travelling the route
    """

    route_id: int
    from_id: int
    to_id: int
    distance: float
    fare: float

    def other_end(self, location_id: int) -> int:
        """Return the endpoint opposite to ``location_id``."""
        if location_id == self.from_id:
            return self.to_id
        if location_id == self.to_id:
            return self.from_id
        raise ValueError(
            f"Location {location_id} is not an endpoint of route {self.route_id}"
        )


class Neighbor(NamedTuple):
    """One adjacency entry: a reachable location and the route's weights."""

    location_id: int
    distance: float
    fare: float


@dataclass(frozen=True, slots=True)
class PathResult:
    """A best path between two locations.

    Attributes:
        names: Location names from start to end, inclusive
        total: Accumulated weight under ``metric``
        metric: The metric the path was optimised for
        location_ids: Location ids matching ``names``
    """

    names: tuple[str, ...]
    total: float
    metric: Metric = Metric.DISTANCE
    location_ids: tuple[int, ...] = field(default_factory=tuple)

    @property
    def start(self) -> str:
        return self.names[0]

    @property
    def end(self) -> str:
        return self.names[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the path."""
        return len(self.names)


@dataclass(frozen=True, slots=True)
class Unreachable:
    """No route sequence connects two registered locations.

    This is a normal query outcome, not an error.
    """

    start_name: str
    end_name: str
    metric: Metric = Metric.DISTANCE


PathOutcome = Union[PathResult, Unreachable]

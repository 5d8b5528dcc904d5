"""Graph ports - Abstractions for the transit engine and its data source.

These protocols define what the service layer and the console rely on,
so either can be driven by a test double instead of a real graph.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Protocol, Tuple

if TYPE_CHECKING:
    from ..domain.models import Metric, Neighbor, PathOutcome
    from ..graph.transit_graph import TransitGraph


class TransitGraphPort(Protocol):
    """Port for the graph engine.

    Implementation: graph/transit_graph.py (TransitGraph)
    """

    def add_location(self, name: str) -> int:
        """Register a location and return its id (idempotent)."""
        ...

    def add_route(
        self, from_name: str, to_name: str, distance: float, fare: float
    ) -> None:
        """Connect two registered locations in both directions.

        Raises:
            UnknownLocationError: If either name is not registered.
            InvalidWeightError: If a weight is negative or not finite.
        """
        ...

    def id_of(self, name: str) -> int:
        ...

    def name_of(self, location_id: int) -> str:
        ...

    def list_locations(self) -> List[Tuple[int, str]]:
        """Return every registered ``(id, name)`` pair."""
        ...

    def neighbors(self, location_id: int) -> List[Neighbor]:
        ...

    def shortest_path(self, start_id: int, end_id: int) -> PathOutcome:
        """Best path by distance, or Unreachable."""
        ...

    def cheapest_path(self, start_id: int, end_id: int) -> PathOutcome:
        """Best path by fare, or Unreachable."""
        ...

    def find_path(self, start_id: int, end_id: int, metric: Metric) -> PathOutcome:
        ...


class NetworkRepositoryPort(Protocol):
    """Port for building the network the application starts with.

    Implementations: adapters/graph/seed_repository.py
    """

    def load(self) -> TransitGraph:
        """Return a freshly built graph.

        Returns:
            A TransitGraph owned by the caller.
        """
        ...

"""Metro service - Use cases of the City Metro console.

The service wraps the graph engine with the actions a rider can take
(list locations, ask for the shortest or cheapest path, add a new
location with its routes) and renders results as text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from ..config import DisplayConfig, get_config
from ..domain.errors import UnknownLocationError
from ..domain.models import Metric, PathOutcome, PathResult, Unreachable
from ..graph.adjacency import validate_weight
from ..ports.graph import TransitGraphPort

# (neighbour name, distance, fare)
RouteSpec = Tuple[str, float, float]


@dataclass
class MetroService:
    """Main service for the City Metro console.

    Attributes:
        graph: The transit graph engine
        display: Units and labels used when rendering results
    """

    graph: TransitGraphPort
    display: DisplayConfig = field(default_factory=lambda: get_config().display)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def list_locations(self) -> List[Tuple[int, str]]:
        return self.graph.list_locations()

    def has_location(self, name: str) -> bool:
        try:
            self.graph.id_of(name)
        except UnknownLocationError:
            return False
        return True

    def find_shortest_path(self, start_id: int, end_id: int) -> PathOutcome:
        """Best path by distance.

        Raises:
            UnknownLocationError: If either id is not registered.
        """
        return self.graph.shortest_path(start_id, end_id)

    def find_cheapest_path(self, start_id: int, end_id: int) -> PathOutcome:
        """Best path by fare.

        Raises:
            UnknownLocationError: If either id is not registered.
        """
        return self.graph.cheapest_path(start_id, end_id)

    def add_location_with_routes(
        self, name: str, routes: Sequence[RouteSpec] = ()
    ) -> int:
        """Register a location and connect it to existing neighbours.

        Every neighbour and weight is checked first; if anything is
        invalid the graph is left exactly as it was.

        Args:
            name: The new location's name.
            routes: ``(neighbour_name, distance, fare)`` for each route.

        Returns:
            The id of the location.

        Raises:
            ValueError: If the name is empty.
            UnknownLocationError: If a neighbour is not registered.
            InvalidWeightError: If a weight is negative or not finite.
        """
        if not name.strip():
            raise ValueError("Location name must not be empty")

        checked: List[RouteSpec] = []
        for neighbour, distance, fare in routes:
            distance = validate_weight("distance", distance)
            fare = validate_weight("fare", fare)
            # A route back to the new location itself is allowed
            if neighbour.strip() != name.strip():
                self.graph.id_of(neighbour)
            checked.append((neighbour, distance, fare))

        location_id = self.graph.add_location(name)
        for neighbour, distance, fare in checked:
            self.graph.add_route(name, neighbour, distance, fare)

        self._logger.info(
            "Location connected",
            extra={
                "location_id": location_id,
                "location_name": name,
                "routes": len(checked),
            },
        )
        return location_id

    def describe_path(self, start_id: int, end_id: int, metric: Metric) -> str:
        """Run a path query and return a message instead of raising.

        Args:
            start_id: Id of the departure location.
            end_id: Id of the arrival location.
            metric: Weight to minimise.

        Returns:
            The formatted path, the "no path" message, or an error message
            for unknown location ids.
        """
        try:
            outcome = self.graph.find_path(start_id, end_id, metric)
        except UnknownLocationError as e:
            self._logger.warning(
                "Path query with unknown location",
                extra={"location": e.location},
            )
            return f"Error: {e.message}"
        return self.format_path(outcome)

    def format_locations(self) -> str:
        lines = ["Locations:"]
        lines.extend(
            f"{location_id}: {name}" for location_id, name in self.list_locations()
        )
        return "\n".join(lines)

    def format_path(self, outcome: PathOutcome) -> str:
        """Format a path outcome as human-readable text.

        Args:
            outcome: A PathResult or an Unreachable.

        Returns:
            Formatted result string.
        """
        if isinstance(outcome, Unreachable):
            return f"No path from {outcome.start_name} to {outcome.end_name}"

        return (
            f"{outcome.metric.label} path from {outcome.start} to {outcome.end}:\n"
            f"{' -> '.join(outcome.names)}\n"
            f"{self._format_total(outcome)}"
        )

    def _format_total(self, result: PathResult) -> str:
        if result.metric is Metric.DISTANCE:
            return f"Distance: {result.total:g} {self.display.distance_unit}"
        return f"Fare: {result.total:g} {self.display.fare_unit}"

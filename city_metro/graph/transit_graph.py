"""The graph engine: locations, routes and best-path queries.

TransitGraph composes the location registry, the adjacency store and
the shared Dijkstra implementation behind the operations the rest of
the application uses.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Tuple

from ..domain.models import Metric, Neighbor, PathOutcome, PathResult, Unreachable
from .adjacency import AdjacencyStore
from .dijkstra import dijkstra
from .registry import LocationRegistry


@dataclass
class TransitGraph:
    """Undirected transit multigraph with distance and fare weights.

    Every call holds an internal lock, so one instance may be shared
    between threads; mutations are serialized and path queries never
    see a half-registered location.

    Usage:
        graph = TransitGraph()
        graph.add_location("City Mall")
        graph.add_location("Salon")
        graph.add_route("City Mall", "Salon", distance=1.0, fare=0.5)
        result = graph.shortest_path(1, 2)
    """

    _registry: LocationRegistry = field(default_factory=LocationRegistry, repr=False)
    _adjacency: AdjacencyStore = field(default_factory=AdjacencyStore, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------ #
    # Registration
    # ------------------------------------------------------------------ #

    def add_location(self, name: str) -> int:
        """Register a location, returning its id.

        Registering an existing name returns its id and changes nothing.
        """
        with self._lock:
            location_id, created = self._registry.add_location(name)
            if created:
                self._adjacency.add_node(location_id)
                self._logger.info(
                    "Location added",
                    extra={
                        "location_id": location_id,
                        "location_name": self._registry.name_of(location_id),
                    },
                )
            return location_id

    def add_route(
        self, from_name: str, to_name: str, distance: float, fare: float
    ) -> None:
        """Connect two registered locations in both directions.

        Raises:
            UnknownLocationError: If either name is not registered.
            InvalidWeightError: If a weight is negative or not finite.
        """
        with self._lock:
            from_id = self._registry.id_of(from_name)
            to_id = self._registry.id_of(to_name)
            self._adjacency.add_route(from_id, to_id, distance, fare)

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #

    def id_of(self, name: str) -> int:
        with self._lock:
            return self._registry.id_of(name)

    def name_of(self, location_id: int) -> str:
        with self._lock:
            return self._registry.name_of(location_id)

    def list_locations(self) -> List[Tuple[int, str]]:
        """Return every ``(id, name)`` pair, in ascending id order."""
        with self._lock:
            return self._registry.list_locations()

    def neighbors(self, location_id: int) -> List[Neighbor]:
        with self._lock:
            return self._adjacency.neighbors(location_id)

    @property
    def location_count(self) -> int:
        return len(self._registry)

    @property
    def route_count(self) -> int:
        return self._adjacency.route_count

    # ------------------------------------------------------------------ #
    # Path queries
    # ------------------------------------------------------------------ #

    def shortest_path(self, start_id: int, end_id: int) -> PathOutcome:
        """Best path by total distance."""
        return self.find_path(start_id, end_id, Metric.DISTANCE)

    def cheapest_path(self, start_id: int, end_id: int) -> PathOutcome:
        """Best path by total fare."""
        return self.find_path(start_id, end_id, Metric.FARE)

    def find_path(self, start_id: int, end_id: int, metric: Metric) -> PathOutcome:
        """Find the best path between two locations under ``metric``.

        Args:
            start_id: Id of the departure location.
            end_id: Id of the arrival location.
            metric: Weight to minimise.

        Returns:
            PathResult with names and total, or Unreachable when no
            route sequence connects the two locations.

        Raises:
            UnknownLocationError: If either id is not registered.
        """
        with self._lock:
            start_name = self._registry.name_of(start_id)
            end_name = self._registry.name_of(end_id)

            self._logger.debug(
                "Solving path",
                extra={
                    "start_id": start_id,
                    "end_id": end_id,
                    "metric": metric.value,
                },
            )

            path, total = dijkstra(
                self._adjacency.neighbors,
                self._registry.ids(),
                start_id,
                end_id,
                metric.weight_of,
            )

            if not path:
                self._logger.warning(
                    "No path found",
                    extra={
                        "start": start_name,
                        "end": end_name,
                        "metric": metric.value,
                    },
                )
                return Unreachable(start_name, end_name, metric)

            result = PathResult(
                names=tuple(self._registry.name_of(node) for node in path),
                total=total,
                metric=metric,
                location_ids=tuple(path),
            )

        self._logger.info(
            "Path found",
            extra={
                "start": start_name,
                "end": end_name,
                "metric": metric.value,
                "stops": result.num_stops,
                "total": total,
            },
        )
        return result

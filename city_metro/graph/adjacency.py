"""Adjacency storage for the undirected, weighted transit multigraph.

Routes live in a flat arena; each location id indexes the positions of
the routes touching it. Parallel routes between the same pair are all
kept, path search picks the cheapest one through relaxation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List

from ..domain.errors import InvalidWeightError, UnknownLocationError
from ..domain.models import Neighbor, Route


def validate_weight(weight_name: str, value: float) -> float:
    """Return ``value`` as a float if it is a finite, non-negative weight.

    Raises:
        InvalidWeightError: If the value is negative, NaN or infinite.
    """
    try:
        weight = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidWeightError(
            f"{weight_name} must be a number, got {value!r}",
            weight_name=weight_name,
            cause=e,
        ) from e

    if not math.isfinite(weight) or weight < 0:
        raise InvalidWeightError(
            f"{weight_name} must be finite and >= 0, got {weight}",
            weight_name=weight_name,
            value=weight,
        )
    return weight


@dataclass
class AdjacencyStore:
    """Route arena indexed by endpoint."""

    _routes: List[Route] = field(default_factory=list, repr=False)
    _index: Dict[int, List[int]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_node(self, location_id: int) -> None:
        """Create an empty route list for a location (no-op if present)."""
        self._index.setdefault(location_id, [])

    def add_route(
        self, from_id: int, to_id: int, distance: float, fare: float
    ) -> Route:
        """Connect two known locations in both directions.

        Both weights and both endpoints are checked before anything is
        stored, so a rejected route leaves the store untouched.

        Args:
            from_id: Id of the first endpoint.
            to_id: Id of the second endpoint.
            distance: Route length in kilometers.
            fare: Route price.

        Returns:
            The stored route record.

        Raises:
            InvalidWeightError: If a weight is negative or not finite.
            UnknownLocationError: If an endpoint has no route list.
        """
        distance = validate_weight("distance", distance)
        fare = validate_weight("fare", fare)
        for location_id in (from_id, to_id):
            if location_id not in self._index:
                raise UnknownLocationError(
                    f"Unknown location id: {location_id}", location=location_id
                )

        route = Route(
            route_id=len(self._routes),
            from_id=from_id,
            to_id=to_id,
            distance=distance,
            fare=fare,
        )
        self._routes.append(route)
        self._index[from_id].append(route.route_id)
        self._index[to_id].append(route.route_id)

        self._logger.debug(
            "Route stored",
            extra={
                "route_id": route.route_id,
                "from_id": from_id,
                "to_id": to_id,
                "distance_km": distance,
                "fare": fare,
            },
        )
        return route

    def neighbors(self, location_id: int) -> List[Neighbor]:
        """Return ``(neighbor_id, distance, fare)`` for every route at a location.

        Raises:
            UnknownLocationError: If the location has no route list.
        """
        positions = self._index.get(location_id)
        if positions is None:
            raise UnknownLocationError(
                f"Unknown location id: {location_id}", location=location_id
            )

        result: List[Neighbor] = []
        for position in positions:
            route = self._routes[position]
            result.append(
                Neighbor(route.other_end(location_id), route.distance, route.fare)
            )
        return result

    @property
    def route_count(self) -> int:
        return len(self._routes)

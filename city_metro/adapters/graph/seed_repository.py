"""In-memory network repositories.

SeedNetworkRepository builds the reference City Metro network: six
locations around the city mall and seven routes between them.
EmptyNetworkRepository starts from nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from ...graph.transit_graph import TransitGraph

SEED_LOCATIONS: Tuple[str, ...] = (
    "City Mall",
    "Salon",
    "Grocery Store",
    "Restaurants",
    "City Park",
    "Stadium",
)

# (from, to, distance_km, fare)
SEED_ROUTES: Tuple[Tuple[str, str, float, float], ...] = (
    ("City Mall", "Salon", 1.0, 0.5),
    ("City Mall", "Grocery Store", 2.0, 1.0),
    ("City Mall", "Restaurants", 3.0, 1.5),
    ("City Mall", "City Park", 4.0, 2.0),
    ("Salon", "City Park", 1.5, 1.0),
    ("Grocery Store", "Stadium", 2.5, 1.5),
    ("Restaurants", "Stadium", 3.5, 2.0),
)


@dataclass
class SeedNetworkRepository:
    """Network repository returning a graph pre-filled with fixed data.

    This adapter implements NetworkRepositoryPort. Each call to load()
    builds a new graph, so callers never share state by accident.

    Attributes:
        locations: Location names, registered in order
        routes: ``(from, to, distance, fare)`` tuples
    """

    locations: Sequence[str] = SEED_LOCATIONS
    routes: Sequence[Tuple[str, str, float, float]] = SEED_ROUTES
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> TransitGraph:
        """Build the seeded transit graph.

        Raises:
            UnknownLocationError: If a route names a location missing
                from ``locations``.
            InvalidWeightError: If a route weight is invalid.
        """
        graph = TransitGraph()
        for name in self.locations:
            graph.add_location(name)
        for from_name, to_name, distance, fare in self.routes:
            graph.add_route(from_name, to_name, distance, fare)

        self._logger.info(
            "Seed network loaded",
            extra={
                "locations": graph.location_count,
                "routes": graph.route_count,
            },
        )
        return graph


@dataclass
class EmptyNetworkRepository:
    """Network repository returning an empty graph."""

    def load(self) -> TransitGraph:
        return TransitGraph()

"""City Metro - best routes over a small transit network.

The graph engine lives in ``city_metro.graph``; the console front-end
in ``city_metro.cli``.
"""

from .domain.errors import (
    CityMetroError,
    EngineInvariantError,
    InvalidWeightError,
    UnknownLocationError,
)
from .domain.models import Metric, PathResult, Unreachable
from .graph.transit_graph import TransitGraph

__version__ = "0.1.0"

__all__ = [
    "CityMetroError",
    "EngineInvariantError",
    "InvalidWeightError",
    "Metric",
    "PathResult",
    "TransitGraph",
    "UnknownLocationError",
    "Unreachable",
]

"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityMetroError,
    EngineInvariantError,
    InvalidWeightError,
    UnknownLocationError,
)
from .models import (
    Metric,
    Neighbor,
    PathOutcome,
    PathResult,
    Route,
    Unreachable,
)

__all__ = [
    # Models
    "Metric",
    "Neighbor",
    "PathOutcome",
    "PathResult",
    "Route",
    "Unreachable",
    # Errors
    "CityMetroError",
    "EngineInvariantError",
    "InvalidWeightError",
    "UnknownLocationError",
]

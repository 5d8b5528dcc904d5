"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- SeedNetworkRepository: Builds the reference City Metro network
- EmptyNetworkRepository: Starts from an empty network
"""

from .seed_repository import (
    SEED_LOCATIONS,
    SEED_ROUTES,
    EmptyNetworkRepository,
    SeedNetworkRepository,
)

__all__ = [
    "SEED_LOCATIONS",
    "SEED_ROUTES",
    "EmptyNetworkRepository",
    "SeedNetworkRepository",
]

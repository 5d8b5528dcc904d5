"""Services layer - Application orchestration.

Available services:
- MetroService: Location management and best-path queries for the console
"""

from .metro_service import MetroService, RouteSpec

__all__ = ["MetroService", "RouteSpec"]

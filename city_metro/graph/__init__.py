"""Graph engine for the transit network.

This subpackage holds the location registry, the route adjacency
store and the Dijkstra path search, composed by TransitGraph.
"""

from .adjacency import AdjacencyStore, validate_weight
from .dijkstra import dijkstra
from .registry import LocationRegistry
from .transit_graph import TransitGraph

__all__ = [
    "AdjacencyStore",
    "LocationRegistry",
    "TransitGraph",
    "dijkstra",
    "validate_weight",
]

"""Shortest-path computation using Dijkstra's algorithm.

One implementation serves every metric: the caller passes a weight
selector that projects an adjacency entry onto the weight to minimise.
"""

import heapq
import itertools
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from ..domain.errors import EngineInvariantError
from ..domain.models import Neighbor

NeighborLookup = Callable[[int], Sequence[Neighbor]]
WeightSelector = Callable[[Neighbor], float]


def dijkstra(
    neighbors: NeighborLookup,
    nodes: Iterable[int],
    start: int,
    end: int,
    weight: WeightSelector,
) -> Tuple[List[int], float]:
    """Compute the cheapest path between two locations under ``weight``.

    Parameters
    ----------
    neighbors:
        Returns the adjacency entries of a location id.
    nodes:
        Every registered location id.
    start:
        Id of the departure location.
    end:
        Id of the arrival location.
    weight:
        Weight selector, e.g. ``Metric.DISTANCE.weight_of``.

    Returns
    -------
    list[int], float
        The location ids from ``start`` to ``end`` (inclusive) and the
        total weight. If no path exists, returns ``([], float("inf"))``.

    Raises
    ------
    EngineInvariantError
        If the predecessor chain of ``end`` does not lead to ``start``.
    """
    best_cost: Dict[int, float] = {node: float("inf") for node in nodes}
    previous: Dict[int, Optional[int]] = {node: None for node in best_cost}
    best_cost[start] = 0.0

    # (cost, insertion order, node): equal costs pop in insertion order
    counter = itertools.count()
    frontier: List[Tuple[float, int, int]] = [(0.0, next(counter), start)]
    finalized = set()

    while frontier:
        cost, _, current = heapq.heappop(frontier)

        if current in finalized:
            continue
        finalized.add(current)

        if current == end:
            break

        for neighbor in neighbors(current):
            candidate = cost + weight(neighbor)
            target = neighbor.location_id
            if candidate < best_cost.get(target, float("inf")):
                best_cost[target] = candidate
                previous[target] = current
                heapq.heappush(frontier, (candidate, next(counter), target))

    if best_cost.get(end, float("inf")) == float("inf"):
        return [], float("inf")

    return _reconstruct(previous, start, end), best_cost[end]


def _reconstruct(
    previous: Dict[int, Optional[int]], start: int, end: int
) -> List[int]:
    path: List[int] = [end]
    current = end
    # A valid chain visits each node at most once.
    for _ in range(len(previous)):
        if current == start:
            path.reverse()
            return path
        step = previous.get(current)
        if step is None:
            break
        path.append(step)
        current = step

    if current == start:
        path.reverse()
        return path

    raise EngineInvariantError(
        f"Predecessor chain from {end} does not reach {start}"
    )

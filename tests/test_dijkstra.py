import itertools
import math

import pytest

from city_metro.domain.errors import EngineInvariantError, UnknownLocationError
from city_metro.domain.models import Metric, Neighbor, PathResult, Unreachable
from city_metro.graph import TransitGraph, dijkstra
from city_metro.graph.dijkstra import _reconstruct


def _lookup(adjacency):
    return lambda node: adjacency[node]


def _by_distance(neighbor):
    return neighbor.distance


def test_dijkstra_finds_direct_edge():
    adjacency = {
        1: [Neighbor(2, 10.0, 1.0)],
        2: [],
    }

    path, cost = dijkstra(_lookup(adjacency), adjacency, 1, 2, _by_distance)

    assert path == [1, 2]
    assert cost == 10.0


def test_dijkstra_chooses_shortest_path():
    # 1 can reach 3 directly, but 1->2->3 is shorter
    adjacency = {
        1: [Neighbor(2, 3.0, 0.0), Neighbor(3, 10.0, 0.0)],
        2: [Neighbor(3, 4.0, 0.0)],
        3: [],
    }

    path, cost = dijkstra(_lookup(adjacency), adjacency, 1, 3, _by_distance)

    assert path == [1, 2, 3]
    assert cost == 7.0


def test_dijkstra_orders_frontier_by_cost_not_by_id():
    # Popping by id would settle 2 at cost 10 before the detour via 3 is seen
    adjacency = {
        1: [Neighbor(2, 10.0, 0.0), Neighbor(3, 1.0, 0.0)],
        2: [Neighbor(1, 10.0, 0.0), Neighbor(3, 1.0, 0.0)],
        3: [Neighbor(1, 1.0, 0.0), Neighbor(2, 1.0, 0.0)],
    }

    path, cost = dijkstra(_lookup(adjacency), adjacency, 1, 2, _by_distance)

    assert path == [1, 3, 2]
    assert cost == 2.0


def test_dijkstra_no_path_returns_inf():
    adjacency = {1: [], 2: []}

    path, cost = dijkstra(_lookup(adjacency), adjacency, 1, 2, _by_distance)

    assert path == []
    assert math.isinf(cost)


def test_dijkstra_breaks_ties_by_insertion_order():
    adjacency = {
        1: [Neighbor(2, 1.0, 0.0), Neighbor(3, 1.0, 0.0)],
        2: [Neighbor(4, 1.0, 0.0)],
        3: [Neighbor(4, 1.0, 0.0)],
        4: [],
    }

    for _ in range(3):
        path, cost = dijkstra(_lookup(adjacency), adjacency, 1, 4, _by_distance)
        assert path == [1, 2, 4]
        assert cost == 2.0


def test_reconstruct_raises_when_chain_misses_start():
    with pytest.raises(EngineInvariantError):
        _reconstruct({1: None, 2: None}, 1, 2)


def test_reconstruct_raises_on_predecessor_cycle():
    with pytest.raises(EngineInvariantError):
        _reconstruct({1: None, 2: 3, 3: 2}, 1, 2)


def test_seed_shortest_path_city_mall_to_stadium(seed_graph):
    result = seed_graph.shortest_path(1, 6)

    assert isinstance(result, PathResult)
    assert result.names == ("City Mall", "Grocery Store", "Stadium")
    assert result.total == pytest.approx(4.5)
    assert result.metric is Metric.DISTANCE
    assert result.location_ids == (1, 3, 6)


def test_seed_cheapest_path_city_mall_to_stadium(seed_graph):
    result = seed_graph.cheapest_path(1, 6)

    assert isinstance(result, PathResult)
    assert result.names == ("City Mall", "Grocery Store", "Stadium")
    assert result.total == pytest.approx(2.5)
    assert result.metric is Metric.FARE


def test_seed_detour_beats_direct_route(seed_graph):
    shortest = seed_graph.shortest_path(1, 5)
    cheapest = seed_graph.cheapest_path(1, 5)

    assert shortest.names == ("City Mall", "Salon", "City Park")
    assert shortest.total == pytest.approx(2.5)
    assert cheapest.names == ("City Mall", "Salon", "City Park")
    assert cheapest.total == pytest.approx(1.5)


def test_path_to_self_has_zero_cost(seed_graph):
    for location_id, name in seed_graph.list_locations():
        for result in (
            seed_graph.shortest_path(location_id, location_id),
            seed_graph.cheapest_path(location_id, location_id),
        ):
            assert result.names == (name,)
            assert result.total == 0.0


def test_unreachable_is_reported_not_raised(seed_graph):
    island = seed_graph.add_location("Island")

    for result in (
        seed_graph.shortest_path(1, island),
        seed_graph.cheapest_path(island, 1),
    ):
        assert isinstance(result, Unreachable)

    result = seed_graph.shortest_path(1, island)
    assert result.start_name == "City Mall"
    assert result.end_name == "Island"


def test_unknown_ids_raise(seed_graph):
    with pytest.raises(UnknownLocationError):
        seed_graph.shortest_path(1, 99)
    with pytest.raises(UnknownLocationError):
        seed_graph.cheapest_path(0, 1)


def test_metrics_can_choose_different_paths():
    graph = TransitGraph()
    for name in ("A", "B", "C"):
        graph.add_location(name)
    graph.add_route("A", "B", 1.0, 10.0)
    graph.add_route("B", "C", 1.0, 10.0)
    graph.add_route("A", "C", 5.0, 1.0)

    shortest = graph.shortest_path(1, 3)
    cheapest = graph.cheapest_path(1, 3)

    assert shortest.names == ("A", "B", "C")
    assert shortest.total == 2.0
    assert cheapest.names == ("A", "C")
    assert cheapest.total == 1.0


def _brute_force_best(graph, start, end, metric):
    """Minimum cost over every simple path, following parallel routes too."""
    best = float("inf")
    stack = [(start, 0.0, {start})]
    while stack:
        node, cost, seen = stack.pop()
        if node == end:
            best = min(best, cost)
            continue
        for neighbor in graph.neighbors(node):
            if neighbor.location_id not in seen:
                stack.append(
                    (
                        neighbor.location_id,
                        cost + metric.weight_of(neighbor),
                        seen | {neighbor.location_id},
                    )
                )
    return best


@pytest.mark.parametrize("metric", [Metric.DISTANCE, Metric.FARE])
def test_seed_paths_match_brute_force(seed_graph, metric):
    ids = [location_id for location_id, _ in seed_graph.list_locations()]

    for start, end in itertools.product(ids, repeat=2):
        result = seed_graph.find_path(start, end, metric)
        expected = _brute_force_best(seed_graph, start, end, metric)

        assert isinstance(result, PathResult)
        assert result.total == pytest.approx(expected)


def test_path_total_matches_its_routes(seed_graph):
    result = seed_graph.shortest_path(2, 6)

    total = 0.0
    for current, following in zip(result.location_ids, result.location_ids[1:]):
        weights = [
            n.distance for n in seed_graph.neighbors(current) if n.location_id == following
        ]
        total += min(weights)

    assert result.total == pytest.approx(total)

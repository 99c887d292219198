import random
from collections import Counter

import pytest

from tabu_routing.models import CostCalculator, Solution
from tabu_routing.optimization import generate_neighborhood, swap_random_routes


def _solution(network, calculator):
    ids = network.load_ids
    solution = Solution(routes=[ids[0:4], ids[4:9], ids[9:15], ids[15:]])
    calculator.evaluate(solution)
    return solution


def test_neighborhood_size(scattered_network, cost_calculator):
    neighbors = generate_neighborhood(
        _solution(scattered_network, cost_calculator), 7, cost_calculator, random.Random(0)
    )

    assert len(neighbors) == 7


def test_neighbors_keep_cost_and_loads(scattered_network, cost_calculator):
    source = _solution(scattered_network, cost_calculator)

    neighbors = generate_neighborhood(source, 20, cost_calculator, random.Random(5))

    for neighbor in neighbors:
        assert neighbor.cost == pytest.approx(source.cost)
        assert Counter(neighbor.load_ids()) == Counter(scattered_network.load_ids)


def test_swap_moves_exactly_two_routes(scattered_network, cost_calculator):
    source = _solution(scattered_network, cost_calculator)

    neighbor = swap_random_routes(source, random.Random(2))

    moved = [i for i, route in enumerate(neighbor.routes) if route != source.routes[i]]
    assert len(moved) == 2
    assert neighbor.signature != source.signature
    assert sorted(neighbor.routes) == sorted(source.routes)


def test_source_is_not_modified(scattered_network, cost_calculator):
    source = _solution(scattered_network, cost_calculator)
    before = source.signature

    generate_neighborhood(source, 10, cost_calculator, random.Random(1))

    assert source.signature == before


def test_single_route_is_unchanged(line_network):
    calculator = CostCalculator(line_network)
    source = Solution(routes=[[1, 2]])
    calculator.evaluate(source)

    neighbors = generate_neighborhood(source, 3, calculator, random.Random(0))

    assert all(neighbor.routes == [[1, 2]] for neighbor in neighbors)
    assert all(neighbor.routes is not source.routes for neighbor in neighbors)

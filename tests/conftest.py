import random

import pytest

from tabu_routing.models import Load, Network, CostCalculator, CostParameters


def _make_load(load_id, pickup, dropoff):
    return Load(load_id=load_id, pickup=pickup, dropoff=dropoff)


def _grid_loads(count, seed=7):
    """Loads scattered over a 100x100 square around the depot."""
    rng = random.Random(seed)
    loads = []
    for load_id in range(1, count + 1):
        pickup = (rng.uniform(-50, 50), rng.uniform(-50, 50))
        dropoff = (rng.uniform(-50, 50), rng.uniform(-50, 50))
        loads.append(_make_load(load_id, pickup, dropoff))
    return loads


@pytest.fixture
def make_load():
    return _make_load


@pytest.fixture
def grid_loads():
    return _grid_loads


@pytest.fixture
def line_loads():
    return [
        _make_load(1, (0.0, 0.0), (10.0, 0.0)),
        _make_load(2, (10.0, 0.0), (20.0, 0.0)),
    ]


@pytest.fixture
def line_network(line_loads):
    return Network.build_from_loads(line_loads)


@pytest.fixture
def scattered_network():
    return Network.build_from_loads(_grid_loads(25))


@pytest.fixture
def cost_calculator(scattered_network):
    return CostCalculator(scattered_network, CostParameters(cost_per_driver=500.0))

import math

import pytest

from tabu_routing.models import Network, DEPOT


def test_depot_rows_use_pickup_and_dropoff(make_load):
    network = Network.build_from_loads([make_load(1, (3.0, 4.0), (6.0, 8.0))])

    assert network.distance(DEPOT, 1) == pytest.approx(5.0)
    assert network.distance(1, DEPOT) == pytest.approx(10.0)
    assert network.service_distance(1) == pytest.approx(5.0)


def test_matrix_is_asymmetric_between_loads(line_network):
    # dropoff(1) == pickup(2), but dropoff(2) is 20 away from pickup(1)
    assert line_network.distance(1, 2) == pytest.approx(0.0)
    assert line_network.distance(2, 1) == pytest.approx(20.0)


def test_matrix_size_and_graph_edges(scattered_network):
    n = len(scattered_network.loads)

    assert len(scattered_network.matrix) == n + 1
    # complete digraph without self loops over depot + loads
    assert scattered_network.graph.number_of_edges() == (n + 1) * n


def test_arbitrary_ids_keep_input_order(make_load):
    loads = [
        make_load(42, (1.0, 0.0), (2.0, 0.0)),
        make_load(7, (0.0, 1.0), (0.0, 3.0)),
    ]
    network = Network.build_from_loads(loads)

    assert network.load_ids == [42, 7]
    assert network.matrix.index[42] == 1
    assert network.matrix.index[7] == 2
    assert network.distance(42, 7) == pytest.approx(math.hypot(2.0, 1.0))


def test_round_trip_time(line_network):
    # depot -> (10,0) -> (20,0) -> depot
    assert line_network.round_trip_time(2) == pytest.approx(10.0 + 10.0 + 20.0)


def test_duplicate_ids_rejected(make_load):
    loads = [make_load(1, (0.0, 0.0), (1.0, 1.0)), make_load(1, (2.0, 2.0), (3.0, 3.0))]
    with pytest.raises(ValueError, match="Duplicate"):
        Network.build_from_loads(loads)


def test_non_positive_ids_rejected(make_load):
    with pytest.raises(ValueError, match="positive"):
        Network.build_from_loads([make_load(0, (0.0, 0.0), (1.0, 1.0))])


def test_empty_network():
    network = Network.build_from_loads([])

    assert network.load_ids == []
    assert len(network.matrix) == 1


def test_adding_loads_after_precompute_is_refused(line_network, make_load):
    with pytest.raises(RuntimeError):
        line_network.add_load(make_load(3, (1.0, 1.0), (2.0, 2.0)))

    assert line_network.load_ids == [1, 2]
    assert len(line_network.matrix) == 3

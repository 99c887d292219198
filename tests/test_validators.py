from tabu_routing.models import CostCalculator, Network, Solution
from tabu_routing.utils import SolutionValidator


def _validator(network, max_shift_time=100.0):
    return SolutionValidator(CostCalculator(network), max_shift_time)


def test_complete_solution_is_valid(line_network):
    result = _validator(line_network).validate_solution(Solution(routes=[[1, 2]]))

    assert result.is_valid
    assert result.violations == []
    assert result.warnings == []


def test_missing_and_duplicate_loads(line_network):
    result = _validator(line_network).validate_solution(Solution(routes=[[1], [1]]))

    assert not result.is_valid
    assert "Load 1 assigned 2 times" in result.violations
    assert "Load 2 is not assigned" in result.violations


def test_unknown_load(line_network):
    result = _validator(line_network).validate_solution(Solution(routes=[[1, 2, 9]]))

    assert result.violations == ["Unknown load 9 in solution"]


def test_long_route_is_a_warning(make_load):
    network = Network.build_from_loads([make_load(1, (0.0, 0.0), (300.0, 0.0))])

    result = _validator(network, max_shift_time=100.0).validate_solution(Solution(routes=[[1]]))

    assert result.is_valid
    assert len(result.warnings) == 1
    assert result.to_dict()["warnings"] == result.warnings

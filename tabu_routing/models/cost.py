"""Cost calculation model for route and solution costing."""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from tabu_routing.models.network import Network, route_nodes
from tabu_routing.models.solution import Solution


@dataclass
class CostParameters:
    """Parameters for cost calculations."""
    cost_per_driver: float = 500.0


class CostCalculator:
    """
    Scores routes and solutions.

    Route distance counts the depot legs, the empty legs between loads and
    the service distance of every load. Distance and time share one unit,
    so the same figure is used against the shift limit. A solution pays the
    sum of its route distances plus a fixed driver cost per route, which
    makes the total independent of route order.
    """

    def __init__(self, network: Network, params: Optional[CostParameters] = None):
        self.network = network
        self.params = params or CostParameters()

    def route_distance(self, route: Sequence[int]) -> float:
        """Total distance driven on one route."""
        travel = sum(self.network.distance(a, b) for a, b in route_nodes(route))
        service = sum(self.network.service_distance(load_id) for load_id in route)
        return travel + service

    def route_time(self, route: Sequence[int]) -> float:
        """Shift time consumed by one route."""
        return self.route_distance(route)

    def solution_cost(self, routes: Iterable[Sequence[int]]) -> float:
        """Total distance plus one driver cost per route."""
        # fsum is exactly rounded, so the total does not depend on route order
        distances = [self.route_distance(route) for route in routes]
        return math.fsum(distances) + len(distances) * self.params.cost_per_driver

    def evaluate(self, solution: Solution) -> float:
        """Recompute and store the cost of a solution."""
        solution.cost = self.solution_cost(solution.routes)
        return solution.cost

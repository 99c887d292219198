"""Initial solution generation by randomized greedy insertion."""

import random
import logging
from typing import List, Optional, Tuple

from tabu_routing.models import Network, CostCalculator, Solution, Route, DEPOT

logger = logging.getLogger("vrp.optimization")


class SolutionGenerator:
    """
    Builds a feasible starting solution route by route.

    Each route starts at the depot and grows by a roulette-wheel draw over
    the remaining loads, weighted by the inverse of the empty distance to
    each load's pickup. A load is only eligible if the route could still
    return to the depot within the shift after serving it. When nothing is
    eligible the route is closed and a new one is started.
    """

    def __init__(
        self,
        network: Network,
        cost_calculator: CostCalculator,
        max_shift_time: float,
        rng: Optional[random.Random] = None
    ):
        self.network = network
        self.cost_calculator = cost_calculator
        self.max_shift_time = max_shift_time
        self.rng = rng or random.Random()

    def generate(self) -> Solution:
        """
        Assign every load to exactly one route.

        Returns:
            Evaluated initial solution
        """
        remaining = self.network.load_ids
        solution = Solution()

        while remaining:
            route = self._build_route(remaining)
            solution.routes.append(route)

        self.cost_calculator.evaluate(solution)
        logger.debug(
            f"Generated {solution.num_routes} routes for "
            f"{len(self.network.loads)} loads"
        )
        return solution

    def _build_route(self, remaining: List[int]) -> Route:
        """Grow one route from the depot, removing used loads from ``remaining``."""
        route: Route = []
        current = DEPOT
        route_time = 0.0

        while remaining:
            next_load = self._select_next_load(current, remaining, route_time)
            if next_load is None:
                if route:
                    break
                # Nothing fits even on an empty route: the load is served alone
                next_load = remaining[0]
                logger.warning(
                    f"Load {next_load} needs {self.network.round_trip_time(next_load):.2f} "
                    f"which exceeds the shift limit of {self.max_shift_time:.2f}"
                )

            route.append(next_load)
            route_time += (
                self.network.distance(current, next_load)
                + self.network.service_distance(next_load)
            )
            current = next_load
            remaining.remove(next_load)

        return route

    def _feasible_candidates(
        self,
        current: int,
        remaining: List[int],
        route_time: float
    ) -> List[Tuple[int, float]]:
        """Loads that can be appended and still return to the depot in time."""
        candidates = []
        for load_id in remaining:
            distance = self.network.distance(current, load_id)
            finish = (
                route_time
                + distance
                + self.network.service_distance(load_id)
                + self.network.distance(load_id, DEPOT)
            )
            if finish <= self.max_shift_time:
                candidates.append((load_id, distance))
        return candidates

    def _select_next_load(
        self,
        current: int,
        remaining: List[int],
        route_time: float
    ) -> Optional[int]:
        """
        Pick the next load by roulette wheel, or None if nothing fits.

        Loads at zero distance have unbounded weight, so when any exist the
        draw is made uniformly among them. Otherwise weights are scaled by the
        closest distance so they stay in (0, 1] even for tiny distances.
        """
        candidates = self._feasible_candidates(current, remaining, route_time)
        if not candidates:
            return None

        adjacent = [load_id for load_id, distance in candidates if distance == 0]
        if adjacent:
            return self.rng.choice(adjacent)

        closest = min(distance for _, distance in candidates)
        return self.rng.choices(
            [load_id for load_id, _ in candidates],
            weights=[closest / distance for _, distance in candidates]
        )[0]

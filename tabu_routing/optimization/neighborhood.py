"""Neighborhood operations for solution modification."""

import random
import logging
from typing import List

from tabu_routing.models import CostCalculator, Solution

logger = logging.getLogger("vrp.optimization")


def swap_random_routes(solution: Solution, rng: random.Random) -> Solution:
    """
    Swap the positions of two distinct random routes.

    The route contents are untouched, so the cost stays the same and only
    the signature changes. With fewer than two routes the copy is returned
    as is.

    Args:
        solution: Source solution (not modified)
        rng: Random source

    Returns:
        Reordered copy of the solution
    """
    neighbor = solution.copy()
    if neighbor.num_routes < 2:
        return neighbor

    i, j = rng.sample(range(neighbor.num_routes), 2)
    neighbor.routes[i], neighbor.routes[j] = neighbor.routes[j], neighbor.routes[i]
    return neighbor


# TODO: add a move that relocates a load between two routes so neighbors can
# differ in cost, and let generate_neighborhood pick between the two moves.
def generate_neighborhood(
    solution: Solution,
    size: int,
    cost_calculator: CostCalculator,
    rng: random.Random
) -> List[Solution]:
    """
    Generate ``size`` evaluated neighbors of a solution.

    Args:
        solution: Current solution
        size: Number of neighbors to produce
        cost_calculator: Used to evaluate each neighbor
        rng: Random source

    Returns:
        Neighbors in generation order
    """
    neighbors = []
    for _ in range(size):
        neighbor = swap_random_routes(solution, rng)
        cost_calculator.evaluate(neighbor)
        neighbors.append(neighbor)
    return neighbors

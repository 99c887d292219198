"""Optimization algorithms for the load routing problem."""

from .optimizer import (
    TabuSearchOptimizer,
    TabuParameters,
    OptimizationResult,
    SearchState,
)
from .initial_solution import SolutionGenerator
from .neighborhood import (
    generate_neighborhood,
    swap_random_routes,
)
from .tabu import TabuMemory

__all__ = [
    "TabuSearchOptimizer",
    "TabuParameters",
    "OptimizationResult",
    "SearchState",
    "SolutionGenerator",
    "generate_neighborhood",
    "swap_random_routes",
    "TabuMemory",
]

"""Tabu search optimizer for the load routing problem."""

import random
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from tabu_routing.models import Network, CostCalculator, Solution
from tabu_routing.utils import SolutionValidator, ValidationResult
from tabu_routing.optimization.initial_solution import SolutionGenerator
from tabu_routing.optimization.neighborhood import generate_neighborhood
from tabu_routing.optimization.tabu import TabuMemory

logger = logging.getLogger("vrp.optimization")


class SearchState(Enum):
    """Lifecycle of a search run."""
    INITIALIZING = "initializing"
    ITERATING = "iterating"
    DONE = "done"


@dataclass
class OptimizationResult:
    """Results from the optimization run."""
    best_solution: Solution
    best_cost: float
    validation: ValidationResult
    statistics: Dict

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.validation.is_valid,
            "best_cost": self.best_cost,
            "routes": [list(route) for route in self.best_solution.routes],
            "statistics": self.statistics,
            "violations": self.validation.violations,
            "warnings": self.validation.warnings,
        }


@dataclass
class TabuParameters:
    """Tabu search parameters."""
    max_iterations: int = 100
    neighborhood_size: int = 10
    tabu_list_size: int = 10
    tabu_tenure: Optional[int] = None
    max_shift_time: float = 720.0


class TabuSearchOptimizer:
    """
    Tabu search over route structures.

    Every iteration samples a neighborhood of the current solution, moves
    to the cheapest neighbor whose signature is not tabu and records that
    signature. The current solution may get worse; the best solution seen
    is kept separately. The run stops after a fixed number of iterations.
    """

    def __init__(
        self,
        network: Network,
        cost_calculator: CostCalculator,
        params: Optional[TabuParameters] = None,
        rng: Optional[random.Random] = None,
        validator: Optional[SolutionValidator] = None
    ):
        self.network = network
        self.cost_calculator = cost_calculator
        self.params = params or TabuParameters()
        if self.params.neighborhood_size < 1:
            raise ValueError("neighborhood_size must be at least 1")
        self.rng = rng or random.Random()
        self.validator = validator or SolutionValidator(
            cost_calculator, self.params.max_shift_time
        )

        # State
        self.state = SearchState.INITIALIZING
        self.tabu_memory = TabuMemory(self.params.tabu_list_size, self.params.tabu_tenure)
        self.current_solution: Optional[Solution] = None
        self.best_solution: Optional[Solution] = None

    def optimize(self) -> OptimizationResult:
        """
        Run the optimization.

        Returns:
            OptimizationResult with best solution and statistics
        """
        self.state = SearchState.INITIALIZING
        self.tabu_memory.clear()

        logger.info("Generating initial solution...")
        generator = SolutionGenerator(
            self.network,
            self.cost_calculator,
            self.params.max_shift_time,
            self.rng
        )
        self.current_solution = generator.generate()
        self.best_solution = self.current_solution.copy()
        logger.info(
            f"Initial cost: {self.current_solution.cost:.2f} "
            f"with {self.current_solution.num_routes} routes"
        )

        stats = {
            "iterations": 0,
            "initial_cost": self.current_solution.cost,
            "improvements": 0,
            "tabu_skipped": 0,
            "tabu_fallbacks": 0,
        }

        self.state = SearchState.ITERATING
        for iteration in range(self.params.max_iterations):
            neighbors = generate_neighborhood(
                self.current_solution,
                self.params.neighborhood_size,
                self.cost_calculator,
                self.rng
            )
            candidate = self._select_candidate(neighbors, stats)

            if candidate.cost < self.best_solution.cost:
                self.best_solution = candidate.copy()
                stats["improvements"] += 1
                logger.info(f"New best: {candidate.cost:.2f} at iteration {iteration}")

            self.tabu_memory.record(candidate.signature)
            self.current_solution = candidate
            stats["iterations"] = iteration + 1

            logger.debug(
                f"Iteration {iteration}: Current={self.current_solution.cost:.2f}, "
                f"Best={self.best_solution.cost:.2f}, Tabu={len(self.tabu_memory)}"
            )

        self.state = SearchState.DONE
        validation = self.validator.validate_solution(self.best_solution)
        for warning in validation.warnings:
            logger.warning(warning)

        logger.info(f"Optimization complete. Best cost: {self.best_solution.cost:.2f}")

        return OptimizationResult(
            best_solution=self.best_solution,
            best_cost=self.best_solution.cost,
            validation=validation,
            statistics=stats
        )

    def _select_candidate(self, neighbors: List[Solution], stats: Dict) -> Solution:
        """
        Pick the cheapest non-tabu neighbor, first one on ties.

        If every neighbor is tabu the cheapest tabu neighbor is taken instead,
        so the search never moves to an empty solution.
        """
        best: Optional[Solution] = None
        fallback: Optional[Solution] = None

        for neighbor in neighbors:
            if self.tabu_memory.is_tabu(neighbor.signature):
                stats["tabu_skipped"] += 1
                if fallback is None or neighbor.cost < fallback.cost:
                    fallback = neighbor
                continue
            if best is None or neighbor.cost < best.cost:
                best = neighbor

        if best is None:
            stats["tabu_fallbacks"] += 1
            logger.debug("All neighbors are tabu, taking the cheapest tabu neighbor")
            return fallback
        return best

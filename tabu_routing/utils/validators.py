"""Solution validation utilities."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from tabu_routing.models import CostCalculator, Solution


@dataclass
class ValidationResult:
    """Results of solution validation."""
    is_valid: bool = True
    violations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_violation(self, message: str) -> None:
        """Add a validation violation."""
        self.violations.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a validation warning (non-fatal)."""
        self.warnings.append(message)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.is_valid,
            "violations": self.violations,
            "warnings": self.warnings,
        }


class SolutionValidator:
    """
    Validates solutions against the load set and the shift limit.

    Missing, duplicated or unknown loads make a solution invalid. Routes
    over the shift limit are only reported as warnings, since a load that
    cannot be served within a shift on its own still gets its own route.
    """

    def __init__(self, cost_calculator: CostCalculator, max_shift_time: float):
        self.cost_calculator = cost_calculator
        self.max_shift_time = max_shift_time

    def validate_solution(self, solution: Solution) -> ValidationResult:
        """
        Validate a complete solution.

        Args:
            solution: Solution to check

        Returns:
            ValidationResult with detailed validation information
        """
        result = ValidationResult()
        self._validate_coverage(solution, result)
        self._validate_shift_times(solution, result)
        return result

    def _validate_coverage(self, solution: Solution, result: ValidationResult) -> None:
        """Check that every load is assigned exactly once."""
        expected = set(self.cost_calculator.network.load_ids)
        counts = Counter(solution.load_ids())

        for load_id, count in sorted(counts.items()):
            if load_id not in expected:
                result.add_violation(f"Unknown load {load_id} in solution")
            elif count > 1:
                result.add_violation(f"Load {load_id} assigned {count} times")

        for load_id in sorted(expected - set(counts)):
            result.add_violation(f"Load {load_id} is not assigned")

        for index, route in enumerate(solution.routes):
            if not route:
                result.add_violation(f"Route {index} is empty")

    def _validate_shift_times(self, solution: Solution, result: ValidationResult) -> None:
        """Check every route against the shift limit."""
        known = set(self.cost_calculator.network.load_ids)
        for index, route in enumerate(solution.routes):
            if not route or any(load_id not in known for load_id in route):
                continue
            route_time = self.cost_calculator.route_time(route)
            if route_time > self.max_shift_time:
                result.add_warning(
                    f"Route {index} takes {route_time:.2f} which exceeds "
                    f"the shift limit of {self.max_shift_time:.2f}"
                )

"""Console output for optimization results."""

from tabu_routing.models import Solution
from tabu_routing.optimization import OptimizationResult


def format_routes(solution: Solution) -> str:
    """
    Format routes one per line as ``[id,id,...]``.

    Args:
        solution: The solution to format

    Returns:
        Newline separated routes
    """
    return "\n".join(
        "[" + ",".join(str(load_id) for load_id in route) + "]"
        for route in solution.routes
    )


def print_routes(solution: Solution) -> None:
    """Print the routes of a solution, one per line."""
    text = format_routes(solution)
    if text:
        print(text)


def print_results(result: OptimizationResult) -> None:
    """
    Print optimization results to console.

    Args:
        result: The optimization result to print
    """
    print("\n" + "=" * 60)
    print("OPTIMIZATION RESULTS")
    print("=" * 60)

    print(f"\nBest Solution Cost: {result.best_cost:,.2f}")
    print(f"Routes: {result.best_solution.num_routes}")
    print(f"Loads: {len(result.best_solution.load_ids())}")
    print(f"Solution Valid: {result.validation.is_valid}")

    print("\n--- Optimization Statistics ---")
    print(f"Iterations: {result.statistics['iterations']}")
    print(f"Initial Cost: {result.statistics['initial_cost']:,.2f}")
    print(f"Improvements Found: {result.statistics['improvements']}")
    print(f"Tabu Neighbors Skipped: {result.statistics['tabu_skipped']}")
    print(f"All-Tabu Fallbacks: {result.statistics['tabu_fallbacks']}")

    print("\n--- Routes ---")
    for index, route in enumerate(result.best_solution.routes):
        print(f"  {index + 1}: {' -> '.join(str(load_id) for load_id in route)}")

    if result.validation.violations:
        print("\n--- Violations ---")
        for violation in result.validation.violations:
            print(f"  ! {violation}")

    if result.validation.warnings:
        print("\n--- Warnings ---")
        for warning in result.validation.warnings:
            print(f"  ~ {warning}")

    print("\n" + "=" * 60)

#!/usr/bin/env python3
"""
Load Routing Optimization

Single-depot vehicle routing for pickup and delivery loads using tabu
search. Every vehicle starts and ends at the depot at (0, 0) and is limited
by a maximum shift duration; the cost is total distance plus a fixed cost
per driver.

Usage:
    python main.py LOADS_FILE [options]

Options:
    --max-iterations N      Tabu search iterations (default: 100)
    --neighborhood-size N   Neighbors sampled per iteration (default: 10)
    --tabu-size N           Tabu memory capacity (default: 10)
    --tabu-tenure N         Countdown for new tabu entries (default: tabu size)
    --max-shift-time T      Maximum shift duration (default: 720)
    --cost-per-driver C     Fixed cost per route (default: 500)
    --seed N                Random seed for reproducible runs
    --summary               Print a result summary instead of bare routes
    --results-file FILE     Save results as JSON
    --verbose               Enable verbose logging
"""

import argparse
import random
import sys
import logging
from typing import List, Optional

from tabu_routing import Config, OptimizerParams, setup_logging
from tabu_routing.models import Network, CostCalculator, CostParameters
from tabu_routing.optimization import TabuSearchOptimizer, TabuParameters
from tabu_routing.reporters import print_results, print_routes
from tabu_routing.utils import load_loads, save_json


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    defaults = OptimizerParams()
    parser = argparse.ArgumentParser(
        description="Load routing optimization using Tabu Search"
    )
    parser.add_argument(
        "loads_file",
        type=str,
        help="Path to the load file"
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=defaults.max_iterations,
        help="Tabu search iterations"
    )
    parser.add_argument(
        "--neighborhood-size",
        type=int,
        default=defaults.neighborhood_size,
        help="Neighbors sampled per iteration"
    )
    parser.add_argument(
        "--tabu-size",
        type=int,
        default=defaults.tabu_list_size,
        help="Tabu memory capacity"
    )
    parser.add_argument(
        "--tabu-tenure",
        type=int,
        default=None,
        help="Countdown for new tabu entries (defaults to the tabu size)"
    )
    parser.add_argument(
        "--max-shift-time",
        type=float,
        default=defaults.max_shift_time,
        help="Maximum shift duration per route"
    )
    parser.add_argument(
        "--cost-per-driver",
        type=float,
        default=defaults.cost_per_driver,
        help="Fixed cost per route"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a result summary instead of bare routes"
    )
    parser.add_argument(
        "--results-file",
        type=str,
        default=None,
        help="Filename to save results as JSON"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Logs go to stderr so stdout only carries the routes
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logger = setup_logging(level=log_level)

    try:
        config = Config(
            loads_file=args.loads_file,
            results_file=args.results_file,
            optimizer_params=OptimizerParams(
                max_shift_time=args.max_shift_time,
                cost_per_driver=args.cost_per_driver,
                tabu_list_size=args.tabu_size,
                tabu_tenure=args.tabu_tenure,
                max_iterations=args.max_iterations,
                neighborhood_size=args.neighborhood_size,
                seed=args.seed,
            ),
            log_level=log_level,
        )
        params = config.optimizer_params

        logger.info("Loading data...")
        loads = load_loads(config.loads_file)
        network = Network.build_from_loads(loads)
        logger.info(f"Loaded {len(loads)} loads")

        cost_calculator = CostCalculator(
            network, CostParameters(cost_per_driver=params.cost_per_driver)
        )
        tabu_params = TabuParameters(
            max_iterations=params.max_iterations,
            neighborhood_size=params.neighborhood_size,
            tabu_list_size=params.tabu_list_size,
            tabu_tenure=params.tabu_tenure,
            max_shift_time=params.max_shift_time,
        )
        optimizer = TabuSearchOptimizer(
            network=network,
            cost_calculator=cost_calculator,
            params=tabu_params,
            rng=random.Random(params.seed),
        )

        logger.info("Starting optimization...")
        result = optimizer.optimize()

        if args.summary:
            print_results(result)
        else:
            print_routes(result.best_solution)

        if config.results_file:
            save_json(result.to_dict(), config.results_file)
            logger.info(f"Results saved to {config.results_file}")

        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Data error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

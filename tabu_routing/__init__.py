"""Tabu search routing for single-depot pickup and delivery loads."""

from .config import Config, OptimizerParams, setup_logging

__version__ = "0.1.0"

__all__ = [
    "Config",
    "OptimizerParams",
    "setup_logging",
]

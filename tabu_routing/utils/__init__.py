"""Utility functions for loading data and checking solutions."""

from .data_loader import (
    save_json,
    parse_coordinates,
    parse_load_line,
    load_loads,
)
from .validators import (
    SolutionValidator,
    ValidationResult,
)

__all__ = [
    "save_json",
    "parse_coordinates",
    "parse_load_line",
    "load_loads",
    "SolutionValidator",
    "ValidationResult",
]

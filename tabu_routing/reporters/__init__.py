"""Result reporting utilities."""

from .console_reporter import print_results, print_routes, format_routes

__all__ = [
    "print_results",
    "print_routes",
    "format_routes",
]

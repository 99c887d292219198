"""Data models for the routing problem."""

from .load import Load, Point
from .network import Network, DistanceMatrix, DEPOT
from .solution import Solution, Route, Signature
from .cost import CostCalculator, CostParameters

__all__ = [
    "Load",
    "Point",
    "Network",
    "DistanceMatrix",
    "DEPOT",
    "Solution",
    "Route",
    "Signature",
    "CostCalculator",
    "CostParameters",
]

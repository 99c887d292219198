"""Load model representing a pickup and dropoff task."""

import math
from dataclasses import dataclass
from typing import Tuple

Point = Tuple[float, float]


def euclidean_distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


@dataclass(frozen=True)
class Load:
    """
    A single delivery task.

    The vehicle drives to ``pickup``, collects the load and carries it
    directly to ``dropoff``.
    """
    load_id: int
    pickup: Point
    dropoff: Point

    @property
    def service_distance(self) -> float:
        """Distance driven while carrying the load."""
        return euclidean_distance(self.pickup, self.dropoff)

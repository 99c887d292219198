"""Solution model: an ordered list of routes with a cached cost."""

from dataclasses import dataclass, field
from typing import List, Tuple

Route = List[int]
Signature = Tuple[Tuple[int, ...], ...]


@dataclass
class Solution:
    """
    A set of routes covering every load exactly once.

    Each route is a list of load ids; the depot at both ends is implicit.
    ``cost`` is only meaningful after the solution has been evaluated.
    """
    routes: List[Route] = field(default_factory=list)
    cost: float = float("inf")

    @property
    def signature(self) -> Signature:
        """Canonical, hashable encoding of the ordered route structure."""
        return tuple(tuple(route) for route in self.routes)

    @property
    def num_routes(self) -> int:
        return len(self.routes)

    def load_ids(self) -> List[int]:
        """All assigned load ids, route by route."""
        return [load_id for route in self.routes for load_id in route]

    def copy(self) -> "Solution":
        """Copy with independent route lists."""
        return Solution(routes=[list(route) for route in self.routes], cost=self.cost)

"""Network model holding the precomputed travel distances between loads."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

import networkx as nx

from tabu_routing.models.load import Load, Point, euclidean_distance

logger = logging.getLogger("vrp.models")

DEPOT = 0
DEPOT_LOCATION: Point = (0.0, 0.0)


@dataclass
class DistanceMatrix:
    """
    Dense, asymmetric distance table.

    Row/column 0 is the depot, rows 1..N follow the load order. Entry
    ``(i, j)`` is the distance from the end of ``i`` to the start of ``j``.
    The diagonal is unused and left at zero.
    """
    index: Dict[int, int] = field(default_factory=dict)
    values: List[List[float]] = field(default_factory=list)

    def get(self, source: int, target: int) -> float:
        """Get the distance between two nodes (load ids or DEPOT)."""
        return self.values[self.index[source]][self.index[target]]

    def __len__(self) -> int:
        return len(self.values)

    @classmethod
    def from_graph(cls, graph: nx.DiGraph, weight: str = "distance") -> "DistanceMatrix":
        """
        Build the matrix from a directed graph.

        The depot must be the first node; remaining nodes keep graph order.
        """
        nodes = list(graph.nodes())
        size = len(nodes)
        matrix = cls(
            index={node: row for row, node in enumerate(nodes)},
            values=[[0.0] * size for _ in range(size)],
        )
        for source, target, distance in graph.edges(data=weight):
            matrix.values[matrix.index[source]][matrix.index[target]] = distance
        return matrix


@dataclass
class Network:
    """
    Read-only distance model for one set of loads.

    The graph has the depot plus one node per load. A directed edge
    ``u -> v`` carries the empty driving distance from where ``u`` ends
    (a dropoff, or the depot) to where ``v`` starts (a pickup, or the depot).
    """
    loads: Dict[int, Load] = field(default_factory=dict)
    graph: nx.DiGraph = field(default_factory=nx.DiGraph)
    matrix: DistanceMatrix = field(default_factory=DistanceMatrix)
    depot_location: Point = DEPOT_LOCATION
    _service: Dict[int, float] = field(default_factory=dict, repr=False)

    @property
    def load_ids(self) -> List[int]:
        """Load ids in input order."""
        return list(self.loads)

    def distance(self, source: int, target: int) -> float:
        """Empty travel distance between two nodes."""
        return self.matrix.get(source, target)

    def service_distance(self, load_id: int) -> float:
        """Distance driven while carrying the given load."""
        return self._service[load_id]

    def round_trip_time(self, load_id: int) -> float:
        """Time to serve a single load starting and ending at the depot."""
        return (
            self.distance(DEPOT, load_id)
            + self.service_distance(load_id)
            + self.distance(load_id, DEPOT)
        )

    def add_load(self, load: Load) -> None:
        """
        Add a load node and its edges to every existing node.

        Raises:
            RuntimeError: If the distance matrix has already been built
            ValueError: If the load id is duplicated or not positive
        """
        if len(self.matrix):
            raise RuntimeError("Cannot add loads after distances are precomputed")
        if load.load_id <= 0:
            raise ValueError(f"Load id must be positive, got {load.load_id}")
        if load.load_id in self.loads:
            raise ValueError(f"Duplicate load id: {load.load_id}")

        self.loads[load.load_id] = load
        self._service[load.load_id] = load.service_distance
        self.graph.add_node(load.load_id, pickup=load.pickup, dropoff=load.dropoff)

        self.graph.add_edge(
            DEPOT, load.load_id,
            distance=euclidean_distance(self.depot_location, load.pickup),
        )
        self.graph.add_edge(
            load.load_id, DEPOT,
            distance=euclidean_distance(load.dropoff, self.depot_location),
        )
        for other_id, other in self.loads.items():
            if other_id == load.load_id:
                continue
            self.graph.add_edge(
                load.load_id, other_id,
                distance=euclidean_distance(load.dropoff, other.pickup),
            )
            self.graph.add_edge(
                other_id, load.load_id,
                distance=euclidean_distance(other.dropoff, load.pickup),
            )

    def precompute_distances(self) -> None:
        """Freeze the graph distances into a dense matrix for O(1) lookups."""
        self.matrix = DistanceMatrix.from_graph(self.graph)
        logger.debug(f"Pre-computed {len(self.matrix)}x{len(self.matrix)} distance matrix")

    @classmethod
    def build_from_loads(
        cls,
        loads: Iterable[Load],
        depot_location: Point = DEPOT_LOCATION
    ) -> "Network":
        """
        Build a network from a sequence of loads.

        Args:
            loads: Loads with unique positive ids
            depot_location: Coordinates of the single depot

        Returns:
            Network with its distance matrix computed

        Raises:
            ValueError: If a load id is duplicated or not positive
        """
        network = cls(depot_location=depot_location)
        network.graph.add_node(DEPOT, location=depot_location)

        for load in loads:
            network.add_load(load)

        network.precompute_distances()
        logger.info(f"Built network with {len(network.loads)} loads")
        return network


def route_nodes(route: Sequence[int]) -> List[Tuple[int, int]]:
    """Directed legs of a route, including both depot legs."""
    stops = [DEPOT, *route, DEPOT]
    return list(zip(stops, stops[1:]))

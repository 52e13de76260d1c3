from typing import List, Optional, Sequence

from models.connectivity import ConnectivityGraph
from models.errors import InvalidInstance
from models.line import Axis, CandidateLine
from models.point import PointRegistry
from separators.candidate_generator import generate_all_candidates
from separators.greedy_separator import GreedySeparator, SeparationResult
from utils.clustering import group_connected_points


class ProblemInstance:
    """
    Everything that belongs to one instance run: the point registry, the
    connectivity graph, both candidate sequences and the greedy result.

    Built fresh per instance and dropped afterwards; nothing is shared
    between instances.
    """

    def __init__(self, registry: PointRegistry, name: str = "0"):
        self.name = name
        self.registry = registry
        self.graph = ConnectivityGraph(registry.points)
        self.candidates = generate_all_candidates(registry)
        self.result: Optional[SeparationResult] = None

    @classmethod
    def from_points(cls, pairs: Sequence, declared_count: Optional[int] = None,
                    name: str = "0", max_points: Optional[int] = None):
        try:
            registry = PointRegistry.load(pairs, declared_count, max_points)
        except InvalidInstance as e:
            raise e.with_instance(name) from None
        return cls(registry, name)

    # ------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------
    def solve(self) -> SeparationResult:
        """Runs the greedy separator once; later calls return the same result."""
        if self.result is None:
            separator = GreedySeparator(
                self.registry,
                self.graph,
                self.candidates[Axis.X],
                self.candidates[Axis.Y],
            )
            self.result = separator.run()
        return self.result

    @property
    def lines(self) -> List[CandidateLine]:
        return self.solve().lines

    def unseparated_groups(self) -> List[List[int]]:
        """
        Groups of point indices that no committed line separates.
        Only groups of two or more points are returned.
        """
        groups = group_connected_points(len(self.registry), self.graph.is_connected)
        return [g for g in groups if len(g) > 1]

    def __repr__(self):
        return f"ProblemInstance({self.name}, n={len(self.registry)})"

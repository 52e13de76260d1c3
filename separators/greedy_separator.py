"""
Greedy separator: walks the candidate sequences of both axes in
alternating order (X, Y, X, Y, ...), committing every line that still
separates at least one connected pair and silently discarding the rest.

This module provides:
    • SeparatorState
    • SeparationResult
    • GreedySeparator
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from models.connectivity import ConnectivityGraph
from models.line import Axis, CandidateLine
from models.point import PointRegistry


class SeparatorState(Enum):
    RUNNING = "running"
    DONE = "done"            # every pair separated
    EXHAUSTED = "exhausted"  # candidates ran out with pairs still connected


@dataclass
class SeparationResult:
    """
    Outcome of one greedy run.

    lines     : committed lines, in commit order
    history   : remaining connections after every tested candidate
    """

    lines: List[CandidateLine] = field(default_factory=list)
    state: SeparatorState = SeparatorState.RUNNING
    tested: int = 0
    discarded: int = 0
    remaining: int = 0
    history: List[int] = field(default_factory=list)

    @property
    def done(self):
        return self.state is SeparatorState.DONE

    def __len__(self):
        return len(self.lines)


class GreedySeparator:
    """
    One cursor per axis into the precomputed candidate sequences, plus the
    shared connectivity graph of the instance.

    A commit disconnects every connected pair across the line's partition,
    not only the pair that made the line worth committing.
    """

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(
        self,
        registry: PointRegistry,
        graph: ConnectivityGraph,
        x_candidates: List[CandidateLine],
        y_candidates: List[CandidateLine],
    ):
        self.registry = registry
        self.graph = graph
        self.candidates: Dict[Axis, List[CandidateLine]] = {
            Axis.X: x_candidates,
            Axis.Y: y_candidates,
        }
        self.cursors: Dict[Axis, int] = {Axis.X: 0, Axis.Y: 0}
        self.result = SeparationResult(remaining=graph.remaining())

    # ------------------------------------------------------------
    # State
    # ------------------------------------------------------------
    def exhausted(self, axis: Axis) -> bool:
        return self.cursors[axis] >= len(self.candidates[axis])

    @property
    def state(self) -> SeparatorState:
        if self.graph.remaining() == 0:
            return SeparatorState.DONE
        if all(self.exhausted(axis) for axis in Axis):
            return SeparatorState.EXHAUSTED
        return SeparatorState.RUNNING

    # ------------------------------------------------------------
    # Test / commit
    # ------------------------------------------------------------
    def test(self, line: CandidateLine) -> bool:
        """
        True if any point left of `line` is still connected to a point
        right of it. Reads the graph only.
        """
        left, right = self.registry.split(line.axis, line.inter)
        return self.graph.any_connected_across(left, right)

    def commit(self, line: CandidateLine) -> int:
        """
        Appends `line` to the output and disconnects every pair it
        separates. Returns the number of pairs cleared.
        """
        line.commit(len(self.result.lines))
        self.result.lines.append(line)

        left, right = self.registry.split(line.axis, line.inter)
        return self.graph.disconnect_across(left, right)

    def step(self, axis: Axis) -> Optional[CandidateLine]:
        """
        Consumes the next candidate on `axis`: commit it if it still
        separates something, discard it otherwise. The cursor advances
        either way. Returns None if the axis has no candidates left.
        """
        if self.exhausted(axis):
            return None

        line = self.candidates[axis][self.cursors[axis]]
        self.cursors[axis] += 1
        self.result.tested += 1

        if self.test(line):
            self.commit(line)
        else:
            self.result.discarded += 1

        self.result.history.append(self.graph.remaining())
        return line

    # ------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------
    def run(self) -> SeparationResult:
        while self.state is SeparatorState.RUNNING:
            for axis in (Axis.X, Axis.Y):
                if self.graph.remaining() == 0:
                    break
                self.step(axis)

        self.result.state = self.state
        self.result.remaining = self.graph.remaining()
        return self.result

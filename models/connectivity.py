from typing import List, Sequence

import numpy as np

from models.errors import ConnectivityInvariantError
from models.point import Point


class ConnectivityGraph:
    """
    Complete graph over the points of one instance, mutated only by
    disconnection.

    The relation is kept as a dense boolean matrix: cell (i, j) is True
    while points i and j still have to be separated. Every disconnection
    clears (i, j) and (j, i) together, so the live count is always
        n * (n - 1) - 2 * (pairs disconnected so far)
    """

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, points: List[Point]):
        self.points = points
        self.initialize(len(points))

    def initialize(self, n: int):
        """
        Connects every ordered pair (i, j), i != j.
        Raises ConnectivityInvariantError if the count comes out wrong.
        """
        self.n = n
        self._connected = np.ones((n, n), dtype=bool)
        np.fill_diagonal(self._connected, False)

        self._remaining = int(self._connected.sum())
        for p in self.points:
            p.connection_count = n - 1

        if self._remaining != n * (n - 1):
            raise ConnectivityInvariantError(
                f"remaining={self._remaining}, but should be {n * (n - 1)}"
            )

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------
    def remaining(self) -> int:
        """Live ordered connections; zero means every pair is separated."""
        return self._remaining

    def is_connected(self, i: int, j: int) -> bool:
        return bool(self._connected[i, j])

    def any_connected_across(self, left: Sequence[int], right: Sequence[int]) -> bool:
        """
        True iff some i in `left` and j in `right` are still connected.
        """
        if len(left) == 0 or len(right) == 0:
            return False
        return bool(self._connected[np.ix_(left, right)].any())

    # ------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------
    def disconnect(self, i: int, j: int) -> bool:
        """
        Clears the pair (i, j) in both directions.
        Returns False (and changes nothing) if it was already cleared.
        """
        if not self._connected[i, j]:
            return False

        self._connected[i, j] = False
        self._connected[j, i] = False
        self.points[i].connection_count -= 1
        self.points[j].connection_count -= 1
        self._remaining -= 2
        return True

    def disconnect_across(self, left: Sequence[int], right: Sequence[int]) -> int:
        """
        Disconnects every still-connected pair with one point in `left` and
        the other in `right`. Returns the number of pairs cleared.
        """
        if len(left) == 0 or len(right) == 0:
            return 0

        rows = np.asarray(left, dtype=np.intp)
        cols = np.asarray(right, dtype=np.intp)
        block = self._connected[np.ix_(rows, cols)]
        cleared = int(block.sum())
        if cleared == 0:
            return 0

        # per-point bookkeeping before the block is cleared
        for i, count in zip(rows, block.sum(axis=1)):
            self.points[i].connection_count -= int(count)
        for j, count in zip(cols, block.sum(axis=0)):
            self.points[j].connection_count -= int(count)

        self._connected[np.ix_(rows, cols)] = False
        self._connected[np.ix_(cols, rows)] = False
        self._remaining -= 2 * cleared
        return cleared

    # ------------------------------------------------------------
    # Debug output
    # ------------------------------------------------------------
    def describe(self) -> str:
        """One row per point: `i: [ 0 1 1 ... ]` (1 = still connected)."""
        rows = []
        for i in range(self.n):
            cells = " ".join("1" if c else "0" for c in self._connected[i])
            rows.append(f"{i}: [ {cells} ]")
        return "\n".join(rows)

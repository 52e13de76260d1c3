from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Axis(Enum):
    """
    Axis a line is measured on.

    An X line is vertical (x = inter), a Y line is horizontal (y = inter).
    """

    X = "x"
    Y = "y"

    @property
    def tag(self):
        """Single-letter tag used in solution files: v / h."""
        return "v" if self is Axis.X else "h"

    @property
    def orientation(self):
        return "vertical" if self is Axis.X else "horizontal"


@dataclass
class CandidateLine:
    """
    A line proposed by range bisection.

    inter : interposition coordinate, strictly between two adjacent
            coordinates of the sorted view on this axis
    gap   : sorted-view position of the point just left of the line
    order : position in the committed output, None until committed
    """

    axis: Axis
    inter: float
    gap: int = -1
    committed: bool = False
    order: Optional[int] = None

    # ------------------------------------------------------------
    # Commitment
    # ------------------------------------------------------------
    def commit(self, order: int):
        self.committed = True
        self.order = order

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------
    def side_of(self, x, y):
        """
        -1 if the point lies left of (below) the line, +1 otherwise.
        A point exactly on the line counts as left, matching the split rule
        of PointRegistry.nearest_index_left_of.
        """
        coord = x if self.axis is Axis.X else y
        return -1 if coord <= self.inter else 1

    def as_tuple(self):
        return (self.axis.orientation, self.inter)

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        state = f", order={self.order}" if self.committed else ""
        return f"CandidateLine({self.axis.tag} {self.inter:g}{state})"

import math
import numbers
from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from models.errors import InvalidInstance
from models.line import Axis
from config import get_active_params


@dataclass
class Point:
    """
    One point of an instance.

    index is the stable identity (0..n-1); x and y are read-only after load.
    connection_count is the number of points this one is still connected to
    and is only ever changed by the ConnectivityGraph.
    """

    index: int
    x: float
    y: float
    connection_count: int = 0

    def coordinate(self, axis: Axis):
        return self.x if axis is Axis.X else self.y

    def __repr__(self):
        return f"Point({self.index}: {self.x}, {self.y})"


class PointRegistry:
    """
    Holds the point set of one instance and its two axis-sorted views.

    Supports:
      - validated loading from (x, y) pairs
      - sorted views by x or y (ties broken by original index)
      - locating the last point at or left of a line
      - splitting the point set by a line into left / right index sets
    """

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, points: List[Point]):
        self.points = points

        self._views: Dict[Axis, Tuple[int, ...]] = {}
        self._coords: Dict[Axis, List[float]] = {}

        for axis in Axis:
            view = tuple(sorted(
                range(len(points)),
                key=lambda i: (points[i].coordinate(axis), i)
            ))
            self._views[axis] = view
            self._coords[axis] = [points[i].coordinate(axis) for i in view]

    @classmethod
    def load(cls, pairs: Sequence, declared_count: Optional[int] = None,
             max_points: Optional[int] = None):
        """
        Builds a registry from a sequence of (x, y) pairs.

        declared_count : the count announced by the source, if any
        max_points     : upper bound, defaults to MAX_POINTS from config
        """
        if max_points is None:
            max_points = get_active_params()["MAX_POINTS"]

        pairs = list(pairs)

        if declared_count is not None and declared_count != len(pairs):
            raise InvalidInstance(
                f"declared {declared_count} points but {len(pairs)} were supplied"
            )

        if not pairs:
            raise InvalidInstance("there are no points")

        if len(pairs) > max_points:
            raise InvalidInstance(
                f"{len(pairs)} points exceed the limit of {max_points}"
            )

        points = []
        for i, pair in enumerate(pairs):
            if not hasattr(pair, "__len__") or len(pair) != 2:
                raise InvalidInstance(f"point {i} is not an (x, y) pair: {pair!r}")

            x, y = pair
            for c in (x, y):
                if isinstance(c, bool) or not isinstance(c, numbers.Real):
                    raise InvalidInstance(f"point {i} has a non-numeric coordinate: {c!r}")
                try:
                    finite = math.isfinite(c)
                except OverflowError:
                    finite = False
                if not finite:
                    raise InvalidInstance(f"point {i} has a non-finite coordinate: {c!r}")
                if c < 0:
                    raise InvalidInstance(f"point {i} lies outside the first quadrant: {pair!r}")

            points.append(Point(i, x, y))

        return cls(points)

    def __len__(self):
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]

    # ------------------------------------------------------------
    # Sorted views
    # ------------------------------------------------------------
    def sorted_by(self, axis: Axis) -> Tuple[int, ...]:
        """Point indices ordered by the coordinate on `axis`."""
        return self._views[axis]

    def sorted_coordinates(self, axis: Axis) -> List[float]:
        """Coordinates on `axis`, in sorted-view order."""
        return self._coords[axis]

    def coordinate(self, index: int, axis: Axis):
        return self.points[index].coordinate(axis)

    def has_duplicate_coordinates(self, axis: Axis) -> bool:
        coords = self._coords[axis]
        return any(a == b for a, b in zip(coords, coords[1:]))

    # ------------------------------------------------------------
    # Line placement
    # ------------------------------------------------------------
    def nearest_index_left_of(self, axis: Axis, coordinate) -> Optional[int]:
        """
        Position in the sorted view of the last point whose coordinate is
        <= `coordinate`, or None when every point lies right of it.
        """
        pos = bisect_right(self._coords[axis], coordinate) - 1
        return pos if pos >= 0 else None

    def split(self, axis: Axis, coordinate) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """
        Splits the point set by a line at `coordinate` on `axis`.

        Returns:
            left:  indices of points at or left of the line
            right: indices of points right of the line
        """
        view = self._views[axis]
        pos = self.nearest_index_left_of(axis, coordinate)
        cut = 0 if pos is None else pos + 1
        return view[:cut], view[cut:]

    # ------------------------------------------------------------
    # Debug output
    # ------------------------------------------------------------
    def describe_axis(self, axis: Axis) -> str:
        """
        Lists the points in sorted order, one per row:
            [pos](x, y)
        """
        rows = [f"Points By {axis.name}-Coord"]
        for pos, i in enumerate(self._views[axis]):
            p = self.points[i]
            rows.append(f"[{pos}]({p.x}, {p.y})")
        return "\n".join(rows)

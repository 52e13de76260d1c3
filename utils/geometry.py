"""
This module provides:
    - midpoint
    - separates
    - unseparated_pairs
    - coordinate_bounds
    - world_to_pixel
    - axis_to_pixel
"""

from itertools import combinations
from typing import List, Sequence, Tuple

from models.line import Axis, CandidateLine
from models.point import Point


# ----------------------------------------------------------------------
#  INTERPOSITION
# ----------------------------------------------------------------------

def midpoint(a, b):
    """
    Coordinate halfway between a and b.
    Strictly between them whenever a != b.
    """
    return (a + b) / 2


# ----------------------------------------------------------------------
#  SEPARATION CHECKS
# ----------------------------------------------------------------------

def separates(line: CandidateLine, p: Point, q: Point) -> bool:
    """
    True if p and q lie on opposite sides of `line`.
    """
    return line.side_of(p.x, p.y) != line.side_of(q.x, q.y)


def unseparated_pairs(points: Sequence[Point], lines: Sequence[CandidateLine]) -> List[Tuple[int, int]]:
    """
    Returns every index pair (i, j), i < j, that no line in `lines` places
    on opposite sides. An empty list means the lines separate all points.

    Works from coordinates alone, independent of any connectivity graph,
    so it can be used to cross-check a solution.
    """
    pairs = []
    for p, q in combinations(points, 2):
        if not any(separates(ln, p, q) for ln in lines):
            pairs.append((p.index, q.index))
    return pairs


# ----------------------------------------------------------------------
#  PIXEL MAPPING (used by visualization)
# ----------------------------------------------------------------------

def coordinate_bounds(points: Sequence[Point]):
    """
    (min_x, min_y, max_x, max_y) of the point set.
    A degenerate extent is widened to 1 so scaling never divides by zero.
    """
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    if max_x == min_x:
        max_x = min_x + 1
    if max_y == min_y:
        max_y = min_y + 1

    return min_x, min_y, max_x, max_y


def world_to_pixel(x, y, bounds, size: int, margin: int) -> Tuple[int, int]:
    """
    Maps a world coordinate onto a size x size canvas with a margin.

    The y axis is flipped so the first quadrant reads upward,
    as it would on paper.
    """
    min_x, min_y, max_x, max_y = bounds
    span = size - 2 * margin

    px = margin + (x - min_x) / (max_x - min_x) * span
    py = size - margin - (y - min_y) / (max_y - min_y) * span
    return int(round(px)), int(round(py))


def axis_to_pixel(line: CandidateLine, bounds, size: int, margin: int) -> int:
    """
    Pixel column (vertical line) or row (horizontal line) of `line`.
    """
    min_x, min_y, _, _ = bounds
    if line.axis is Axis.X:
        return world_to_pixel(line.inter, min_y, bounds, size, margin)[0]
    return world_to_pixel(min_x, line.inter, bounds, size, margin)[1]

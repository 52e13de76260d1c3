"""
Candidate-line generation by range bisection.

This module provides:
    • generate_candidates(registry, axis)
    • generate_all_candidates(registry)

Generation is pure: the connectivity graph is never consulted, so the same
sorted view always yields the same sequence of lines.
"""

from itertools import zip_longest
from typing import Dict, List

from models.line import Axis, CandidateLine
from models.point import PointRegistry
from utils.geometry import midpoint


# ========================================================================
# 1. RECURSIVE BISECTION
# ========================================================================

def _bisect_levels(lo: int, hi: int) -> List[List[int]]:
    """
    Splits the inclusive sorted range [lo, hi] in half and recurses into
    [lo, lo + half] and [lo + half + 1, hi].

    Returns the gap positions grouped by depth: level 0 holds the gap that
    bisects [lo, hi], level 1 the gaps bisecting its halves (left first),
    and so on. A gap at position p lies between sorted positions p and p+1.
    Level order is deliberate: every broad split is tried before any
    narrower one, on either side of the range.
    """
    if hi - lo < 1:
        return []

    half = (hi - lo) // 2
    gap = lo + half

    left = _bisect_levels(lo, gap)
    right = _bisect_levels(gap + 1, hi)

    deeper = [l + r for l, r in zip_longest(left, right, fillvalue=[])]
    return [[gap]] + deeper


# ========================================================================
# 2. CANDIDATE SEQUENCES
# ========================================================================

def generate_candidates(registry: PointRegistry, axis: Axis) -> List[CandidateLine]:
    """
    Produces the ordered candidate lines for one axis.

    Order is heap-like: the line bisecting the whole range first, then the
    lines bisecting each half, then each quarter. Each line sits at the
    midpoint of the two adjacent coordinates it falls between.

    Gaps between equal coordinates get no line, since no line can fall
    strictly between them.
    """
    coords = registry.sorted_coordinates(axis)
    candidates = []

    for level in _bisect_levels(0, len(coords) - 1):
        for gap in level:
            a, b = coords[gap], coords[gap + 1]
            if a == b:
                continue
            candidates.append(CandidateLine(axis, midpoint(a, b), gap=gap))

    return candidates


def generate_all_candidates(registry: PointRegistry) -> Dict[Axis, List[CandidateLine]]:
    return {axis: generate_candidates(registry, axis) for axis in Axis}

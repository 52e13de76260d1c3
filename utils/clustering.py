"""
This module provides:
    • group_by_connectivity()
    • group_connected_points()
"""

from typing import Any, Callable, List
from collections import deque


# -------------------------------------------------------------------------
#  CONNECTED COMPONENT GROUPING (BFS)
# -------------------------------------------------------------------------

def group_by_connectivity(items: List[Any], is_connected: Callable[[Any, Any], bool]):
    """
    Groups items based on a boolean connectivity rule.

    Used for:
        - collecting the points no committed line has separated
        - grouping points that share a cell of the line arrangement
    """
    visited = set()
    groups = []

    for i, obj in enumerate(items):
        if i in visited:
            continue

        queue = deque([i])
        comp = []

        while queue:
            idx = queue.popleft()
            if idx in visited:
                continue
            visited.add(idx)
            comp.append(items[idx])

            for j, other in enumerate(items):
                if j in visited:
                    continue
                if is_connected(items[idx], other):
                    queue.append(j)

        groups.append(comp)

    return groups


# -------------------------------------------------------------------------
#  POINT-INDEX GROUPING
# -------------------------------------------------------------------------

def group_connected_points(n: int, is_connected: Callable[[int, int], bool]) -> List[List[int]]:
    """
    Groups point indices 0..n-1 by a pairwise connectivity predicate,
    e.g. ConnectivityGraph.is_connected.

    Each group comes back sorted; groups are ordered by their smallest index.
    """
    groups = group_by_connectivity(list(range(n)), is_connected)
    return [sorted(g) for g in groups]

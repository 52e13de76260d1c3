"""
Data Models

Defines the core data structures:
- Point / PointRegistry
- Axis / CandidateLine
- ConnectivityGraph
- InvalidInstance / ConnectivityInvariantError
"""

from .errors import InvalidInstance, ConnectivityInvariantError
from .line import Axis, CandidateLine
from .point import Point, PointRegistry
from .connectivity import ConnectivityGraph

__all__ = [
    "InvalidInstance",
    "ConnectivityInvariantError",
    "Axis",
    "CandidateLine",
    "Point",
    "PointRegistry",
    "ConnectivityGraph",
]

"""
Axis Separation Package

Separates a planar point set with axis-parallel lines using a greedy
set-cover heuristic, including:

- Point registry with axis-sorted views
- Complete-graph connectivity tracking
- Candidate lines by range bisection
- Greedy commit loop alternating between axes
- Solution files and rendered output
"""
__all__ = [
    "config",
    "main",
    "models",
    "separators",
    "utils",
    "visualization",
]

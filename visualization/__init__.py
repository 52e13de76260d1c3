"""
Visualization Tools

Provides drawing utilities for:
- Points of an instance
- Committed separating lines
- Saving solution files and renderings
"""

from .draw_points import new_canvas, draw_points
from .draw_lines import draw_lines
from .save_outputs import (
    render_solution,
    save_solution,
    save_rendering,
    save_all_outputs,
)

__all__ = [
    "new_canvas",
    "draw_points",
    "draw_lines",
    "render_solution",
    "save_solution",
    "save_rendering",
    "save_all_outputs",
]

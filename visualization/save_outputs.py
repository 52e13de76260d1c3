"""
Centralized output-saving utilities for the separation pipeline.

This module provides:
    • render_solution(...)
    • save_solution(...)
    • save_rendering(...)
    • save_all_outputs(...)

Uses draw modules to visualize and utils.instance_io for filesystem handling.
"""

import os
import numpy as np
from typing import List

from models.line import CandidateLine
from models.point import PointRegistry

from visualization.draw_points import new_canvas, draw_points
from visualization.draw_lines import draw_lines
from utils.geometry import coordinate_bounds
from utils.instance_io import save_image, write_solution, ensure_output_dir
from config import get_active_params


# -------------------------------------------------------------------------
#   Rendering
# -------------------------------------------------------------------------

def render_solution(registry: PointRegistry, lines: List[CandidateLine]) -> np.ndarray:
    """
    Draws the points and the committed lines on a fresh canvas.
    Lines go down first so the points stay visible on top.
    """
    params = get_active_params()
    canvas = new_canvas(params["CANVAS_SIZE"])
    bounds = coordinate_bounds(registry.points)

    draw_lines(canvas, lines, bounds)
    draw_points(canvas, registry.points, bounds)
    return canvas


# -------------------------------------------------------------------------
#   Save individual components
# -------------------------------------------------------------------------

def save_solution(path: str, lines: List[CandidateLine]):
    """
    Writes the ordered line list in the solution text format.
    """
    write_solution(path, lines)


def save_rendering(path: str, registry: PointRegistry, lines: List[CandidateLine]):
    """
    Renders the instance with its lines and saves it as an image.
    """
    save_image(path, render_solution(registry, lines))


# -------------------------------------------------------------------------
#   Master save function (used by main.py)
# -------------------------------------------------------------------------

def save_all_outputs(
    output_dir: str,
    instance_id: str,
    registry: PointRegistry,
    lines: List[CandidateLine],
    render: bool = True
):
    """
    Saves every output artifact for one solved instance.

    Example output:
        greedy_solution_<id>
        greedy_solution_<id>.png

    Returns the list of written paths.
    """
    params = get_active_params()
    ensure_output_dir(output_dir)

    base = os.path.join(output_dir, f"{params['SOLUTION_PREFIX']}{instance_id}")
    written = []

    # 1) Solution text file
    save_solution(base, lines)
    written.append(base)

    # 2) Rendered points + lines
    if render:
        save_rendering(base + ".png", registry, lines)
        written.append(base + ".png")

    return written

"""
Visualization utilities for rendering separating lines.

This module provides:
    • draw_lines(img, lines, bounds, thickness)

It is used by:
    - visualization.save_outputs
"""

import cv2
from typing import List

from models.line import Axis, CandidateLine
from utils.geometry import axis_to_pixel
from config import get_active_params, COLOR_VERTICAL, COLOR_HORIZONTAL


def draw_lines(
    image,
    lines: List[CandidateLine],
    bounds,
    thickness: int = None
):
    """
    Draws each line across the full canvas:

        vertical (X)   → blue
        horizontal (Y) → red

    Args:
        image: BGR numpy array (modified in-place)
        lines: committed CandidateLine objects
        bounds: (min_x, min_y, max_x, max_y) from coordinate_bounds
        thickness: pixel width, LINE_THICKNESS from config by default
    """
    params = get_active_params()
    size = image.shape[0]
    margin = params["CANVAS_MARGIN"]
    if thickness is None:
        thickness = params["LINE_THICKNESS"]

    for ln in lines:
        pos = axis_to_pixel(ln, bounds, size, margin)

        if ln.axis is Axis.X:
            start, end, color = (pos, 0), (pos, size - 1), COLOR_VERTICAL
        else:
            start, end, color = (0, pos), (size - 1, pos), COLOR_HORIZONTAL

        cv2.line(image, start, end, color, thickness)

    return image

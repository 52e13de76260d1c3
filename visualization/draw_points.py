"""
Visualization utilities for rendering the point set of an instance.

This module provides:
    • new_canvas(size)
    • draw_points(img, points, bounds)

Used by:
    - save_outputs.py
"""

import cv2
import numpy as np
from typing import List

from models.point import Point
from utils.geometry import world_to_pixel
from config import get_active_params, COLOR_BACKGROUND, COLOR_POINT, COLOR_LABEL


def new_canvas(size: int) -> np.ndarray:
    """
    Blank BGR canvas filled with the background color.
    """
    canvas = np.zeros((size, size, 3), dtype=np.uint8)
    canvas[:] = COLOR_BACKGROUND
    return canvas


def draw_points(image, points: List[Point], bounds, labels: bool = True):
    """
    Draws every point as a filled circle, optionally with its index.

    Args:
        image: BGR numpy array (modified in-place)
        points: list of Point objects
        bounds: (min_x, min_y, max_x, max_y) from coordinate_bounds
        labels: write the point index next to each circle
    """
    params = get_active_params()
    size = image.shape[0]
    margin = params["CANVAS_MARGIN"]

    for p in points:
        center = world_to_pixel(p.x, p.y, bounds, size, margin)

        cv2.circle(
            image,
            center,
            params["POINT_RADIUS"],
            COLOR_POINT,
            thickness=-1
        )

        if labels:
            cv2.putText(
                image,
                str(p.index),
                (center[0] + 5, center[1] - 5),
                cv2.FONT_HERSHEY_SIMPLEX,
                params["FONT_SCALE"],
                COLOR_LABEL,
                1
            )

    return image

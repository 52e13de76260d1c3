"""
Utility Functions

Provides geometry helpers, connectivity grouping, and instance /
solution I/O used across the separators and the pipeline.
"""

from .geometry import (
    midpoint,
    separates,
    unseparated_pairs,
    coordinate_bounds,
    world_to_pixel,
    axis_to_pixel,
)
from .clustering import group_by_connectivity, group_connected_points
from .instance_io import (
    extract_numeric_id,
    find_instance_files,
    parse_instance_text,
    read_instance_file,
    format_solution,
    write_solution,
    ensure_output_dir,
    save_image,
)

__all__ = [
    "midpoint",
    "separates",
    "unseparated_pairs",
    "coordinate_bounds",
    "world_to_pixel",
    "axis_to_pixel",
    "group_by_connectivity",
    "group_connected_points",
    "extract_numeric_id",
    "find_instance_files",
    "parse_instance_text",
    "read_instance_file",
    "format_solution",
    "write_solution",
    "ensure_output_dir",
    "save_image",
]

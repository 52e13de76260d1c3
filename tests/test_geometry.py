"""Tests for utils/geometry.py and utils/clustering.py"""

from models import Axis, CandidateLine, PointRegistry
from utils.clustering import group_by_connectivity, group_connected_points
from utils.geometry import (
    axis_to_pixel,
    coordinate_bounds,
    midpoint,
    separates,
    unseparated_pairs,
    world_to_pixel,
)


class TestSeparation:
    def test_midpoint(self):
        assert midpoint(0, 3) == 1.5
        assert 2 < midpoint(2, 3) < 3

    def test_separates(self):
        reg = PointRegistry.load([(0, 0), (3, 1), (1, 4)])
        vertical = CandidateLine(Axis.X, 2.0)
        assert separates(vertical, reg[0], reg[1])
        assert not separates(vertical, reg[0], reg[2])

    def test_point_on_line_counts_left(self):
        line = CandidateLine(Axis.Y, 2)
        assert line.side_of(9, 2) == -1
        assert line.side_of(9, 2.01) == 1

    def test_unseparated_pairs(self):
        reg = PointRegistry.load([(0, 0), (0, 3), (3, 0), (3, 3)])
        lines = [CandidateLine(Axis.X, 1.5)]
        assert unseparated_pairs(reg.points, lines) == [(0, 1), (2, 3)]
        lines.append(CandidateLine(Axis.Y, 1.5))
        assert unseparated_pairs(reg.points, lines) == []


class TestPixelMapping:
    def test_corners(self):
        bounds = (0, 0, 10, 10)
        assert world_to_pixel(0, 0, bounds, 100, 10) == (10, 90)
        assert world_to_pixel(10, 10, bounds, 100, 10) == (90, 10)

    def test_degenerate_bounds_widened(self):
        reg = PointRegistry.load([(2, 5), (2, 7)])
        assert coordinate_bounds(reg.points) == (2, 5, 3, 7)

    def test_axis_to_pixel(self):
        bounds = (0, 0, 10, 10)
        assert axis_to_pixel(CandidateLine(Axis.X, 5), bounds, 100, 10) == 50
        assert axis_to_pixel(CandidateLine(Axis.Y, 2.5), bounds, 100, 10) == 70


class TestClustering:
    def test_group_connected_points(self):
        linked = {frozenset((0, 2))}
        groups = group_connected_points(4, lambda i, j: frozenset((i, j)) in linked)
        assert groups == [[0, 2], [1], [3]]

    def test_group_by_connectivity_is_transitive(self):
        items = ["a", "b", "c", "d"]
        chain = {("a", "b"), ("b", "c")}
        groups = group_by_connectivity(items, lambda p, q: (p, q) in chain or (q, p) in chain)
        assert groups == [["a", "b", "c"], ["d"]]

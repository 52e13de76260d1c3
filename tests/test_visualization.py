"""Tests for the visualization package"""

import numpy as np

from config import COLOR_BACKGROUND, COLOR_HORIZONTAL, COLOR_VERTICAL, get_active_params
from separators import ProblemInstance
from visualization import render_solution, save_all_outputs


SQUARE = [(0, 0), (0, 3), (3, 0), (3, 3)]


class TestRender:
    def test_canvas_shape(self):
        inst = ProblemInstance.from_points(SQUARE)
        canvas = render_solution(inst.registry, inst.lines)
        size = get_active_params()["CANVAS_SIZE"]
        assert canvas.shape == (size, size, 3)
        assert canvas.dtype == np.uint8

    def test_lines_drawn_by_axis(self):
        inst = ProblemInstance.from_points(SQUARE)
        canvas = render_solution(inst.registry, inst.lines)
        mid = get_active_params()["CANVAS_SIZE"] // 2

        # both lines sit at 1.5, the middle of the [0, 3] extent
        assert tuple(canvas[5, mid]) == COLOR_VERTICAL
        assert tuple(canvas[mid, 5]) == COLOR_HORIZONTAL
        assert tuple(canvas[5, 5]) == COLOR_BACKGROUND

    def test_no_lines(self):
        inst = ProblemInstance.from_points([(1, 1)])
        canvas = render_solution(inst.registry, inst.lines)
        assert tuple(canvas[0, 0]) == COLOR_BACKGROUND


class TestSaveOutputs:
    def test_writes_solution_and_image(self, tmp_path):
        inst = ProblemInstance.from_points(SQUARE)
        written = save_all_outputs(str(tmp_path), "03", inst.registry, inst.lines)

        solution = tmp_path / "greedy_solution_03"
        assert [str(solution), str(solution) + ".png"] == written
        assert solution.read_text() == "2\nv 1.500000\nh 1.500000\n"
        assert (tmp_path / "greedy_solution_03.png").stat().st_size > 0

    def test_render_disabled(self, tmp_path):
        inst = ProblemInstance.from_points(SQUARE)
        written = save_all_outputs(str(tmp_path), "03", inst.registry, inst.lines, render=False)
        assert len(written) == 1
        assert not (tmp_path / "greedy_solution_03.png").exists()

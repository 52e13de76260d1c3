"""Tests for utils/instance_io.py"""

import pytest

from models import Axis, CandidateLine, InvalidInstance
from separators import ProblemInstance
from utils.instance_io import (
    extract_numeric_id,
    find_instance_files,
    format_solution,
    parse_instance_text,
    read_instance_file,
    write_solution,
)


class TestParse:
    def test_basic(self):
        declared, pairs = parse_instance_text("2\n0 0\n3 3\n")
        assert declared == 2
        assert pairs == [(0, 0), (3, 3)]

    def test_whitespace_layout_is_free(self):
        declared, pairs = parse_instance_text("3  1 2\n3\n4 5 6")
        assert declared == 3
        assert pairs == [(1, 2), (3, 4), (5, 6)]

    def test_float_coordinates(self):
        _, pairs = parse_instance_text("1\n0.5 2.25\n")
        assert pairs == [(0.5, 2.25)]
        assert isinstance(pairs[0][0], float)

    def test_empty_file(self):
        with pytest.raises(InvalidInstance):
            parse_instance_text("   \n")

    def test_header_only_passes_parse(self):
        declared, pairs = parse_instance_text("4\n")
        assert declared == 4
        assert pairs == []

    def test_bad_header(self):
        with pytest.raises(InvalidInstance):
            parse_instance_text("2.5\n0 0\n1 1\n")
        with pytest.raises(InvalidInstance):
            parse_instance_text("-1\n")

    def test_odd_coordinate_count(self):
        with pytest.raises(InvalidInstance):
            parse_instance_text("2\n0 0\n3\n")

    def test_non_numeric(self):
        with pytest.raises(InvalidInstance):
            parse_instance_text("1\nx 3\n")


class TestReadInstanceFile:
    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInstance):
            read_instance_file(str(tmp_path / "instance01"))

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "instance01"
        path.write_bytes(b"2\n0 0\n\xff\xfe 1\n")
        with pytest.raises(InvalidInstance):
            read_instance_file(str(path))

    def test_declared_more_than_supplied(self, tmp_path):
        path = tmp_path / "instance01"
        path.write_text("5\n0 0\n1 1\n2 2\n")
        declared, pairs = read_instance_file(str(path))
        with pytest.raises(InvalidInstance):
            ProblemInstance.from_points(pairs, declared, name="01")

    def test_round_trip_to_instance(self, tmp_path):
        path = tmp_path / "instance02"
        path.write_text("4\n0 0\n0 3\n3 0\n3 3\n")
        declared, pairs = read_instance_file(str(path))
        inst = ProblemInstance.from_points(pairs, declared, name="02")
        assert len(inst.lines) == 2


class TestFilenames:
    def test_extract_numeric_id(self):
        assert extract_numeric_id("instances/instance07") == "07"
        assert extract_numeric_id("data2/instance11") == "11"
        assert extract_numeric_id("noid") == "0"

    def test_find_instance_files_ordered_numerically(self, tmp_path):
        for name in ["instance10", "instance02", "instance01", "other"]:
            (tmp_path / name).write_text("1\n0 0\n")
        (tmp_path / "instance99").mkdir()

        found = find_instance_files(str(tmp_path), "instance[0-9]*")
        assert [i for i, _ in found] == ["01", "02", "10"]

    def test_single_digit_ids_are_padded(self, tmp_path):
        for name in ["instance5", "instance12"]:
            (tmp_path / name).write_text("1\n0 0\n")

        found = find_instance_files(str(tmp_path), "instance[0-9]*")
        assert [i for i, _ in found] == ["05", "12"]

    def test_instance_limit(self, tmp_path):
        for name in ["instance00", "instance03", "instance99", "instance100"]:
            (tmp_path / name).write_text("1\n0 0\n")

        found = find_instance_files(str(tmp_path), "instance[0-9]*", max_instances=99)
        assert [i for i, _ in found] == ["03", "99"]


class TestSolutionOutput:
    def test_format(self):
        lines = [CandidateLine(Axis.X, 1.5), CandidateLine(Axis.Y, 1.5)]
        assert format_solution(lines) == "2\nv 1.500000\nh 1.500000\n"

    def test_format_empty(self):
        assert format_solution([]) == "0\n"

    def test_write_creates_directory(self, tmp_path):
        path = tmp_path / "out" / "greedy_solution_01"
        write_solution(str(path), [CandidateLine(Axis.Y, 0.25)])
        assert path.read_text() == "1\nh 0.250000\n"

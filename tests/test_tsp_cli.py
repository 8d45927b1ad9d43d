import os

import pytest

import tsp


def output_lines(capsys):
    return capsys.readouterr().out.split()


def test_prints_length_then_milliseconds(points_file, unit_square, capsys):
    assert tsp.main([points_file(unit_square)]) == 0
    length, elapsed = output_lines(capsys)
    assert float(length) == pytest.approx(4.0)
    assert float(elapsed) >= 0


def test_solves_every_file_in_directory(points_file, unit_square, tmp_path, capsys):
    points_file(unit_square, name="a.txt")
    points_file([(0, 0), (3, 4)], name="b.txt")
    assert tsp.main([str(tmp_path)]) == 0
    lines = output_lines(capsys)
    assert float(lines[0]) == pytest.approx(4.0)
    assert float(lines[2]) == pytest.approx(10.0)


def test_brute_force_cross_check(points_file, random_points):
    assert tsp.main([points_file(random_points(6)), "--brute-force"]) == 0


def test_malformed_file_exits_non_zero(points_file, capsys):
    assert tsp.main([points_file([(0, 0)], count=4)]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file_exits_non_zero(tmp_path):
    assert tsp.main([str(tmp_path / "nope.txt")]) == 1


def test_edges_file_is_printed(points_file, unit_square, tmp_path, capsys):
    edges = tmp_path / "edges.dat"
    edges.write_text("2 1\n1 2 3\n")
    assert tsp.main([points_file(unit_square), "--edges", str(edges)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("2 1\n0: 0-1 3\n1: ")


def test_write_option(points_file, unit_square, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert tsp.main([points_file(unit_square, name="square.txt"), "--write"]) == 0
    assert os.path.exists(tmp_path / "outputs" / "square.out")


def test_coincident_points_are_solved(points_file, capsys):
    assert tsp.main([points_file([(0, 0), (0, 0), (1, 0)])]) == 0
    assert float(output_lines(capsys)[0]) == pytest.approx(2.0)


def test_extra_points_are_rejected_before_solving(points_file, capsys):
    assert tsp.main([points_file([(0, 0), (2, 0), (1, 1)], count=2)]) == 1
    assert capsys.readouterr().out == ""

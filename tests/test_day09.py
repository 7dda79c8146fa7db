import pytest

from aoc2021.day09 import Grid, Solver

EXAMPLE = """\
2199943210
3987894921
9856789892
8767896789
9899965678
"""


def test_risk_level_sum():
    assert Grid.from_text(EXAMPLE).risk_level_sum() == 15


def test_largest_basins_product():
    assert Grid.from_text(EXAMPLE).largest_basins_product() == 1134


def test_lowpoints():
    assert Grid.from_text(EXAMPLE).lowpoints() == [(1, 0), (2, 2), (6, 4), (9, 0)]


def test_get_inside_and_outside():
    grid = Grid.from_text(EXAMPLE)
    assert grid.get(0, 0) == 2
    assert grid.get(9, 4) == 8
    assert grid.get(-1, 0) == 9
    assert grid.get(10, 0) == 9
    assert grid.get(0, 5) == 9


def test_dimensions():
    grid = Grid.from_text(EXAMPLE)
    assert (grid.width, grid.height) == (10, 5)


def test_solver():
    solver = Solver(EXAMPLE)
    assert solver.part1() == "15"
    assert solver.part2() == "1134"


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        Grid.from_text("")
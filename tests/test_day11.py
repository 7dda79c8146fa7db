import pytest

from aoc2021.day11 import Grid, Solver

SMALL = """\
11111
19991
19191
19991
11111
"""

EXAMPLE = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""


def test_small_steps():
    grid = Grid.from_text(SMALL).step()
    assert str(grid) == "34543\n40004\n50005\n40004\n34543\n"
    grid = grid.step()
    assert str(grid) == "45654\n51115\n61116\n51115\n45654\n"
    assert grid.total_steps == 2
    assert grid.total_flashes == 9


def test_hundred_steps():
    grid = Grid.from_text(EXAMPLE)
    for _ in range(100):
        grid = grid.step()
    assert grid.total_flashes == 1656
    assert grid.total_steps == 100


def test_step_does_not_mutate():
    grid = Grid.from_text(SMALL)
    grid.step()
    assert str(grid) == SMALL


def test_all_flash():
    grid = Grid.from_text("99\n99\n").step()
    assert grid.flashes == 4
    assert str(grid) == "00\n00\n"


def test_empty_grid():
    with pytest.raises(ValueError):
        Grid.from_text("")


def test_solver():
    solver = Solver(EXAMPLE)
    assert solver.part1() == "1656"
    assert int(solver.part2()) > 100
import pytest

from aoc2021.day02 import Command, Direction, Solver, Sub, parse_input

SAMPLE = """forward 5
down 5
forward 8
up 3
down 8
forward 2
"""


def test_follow():
    commands = parse_input(SAMPLE)
    sub = Sub()
    sub.follow(commands)
    assert sub.hpos == 15
    assert sub.depth == 10
    assert sub.answer() == 150


def test_follow2():
    commands = parse_input(SAMPLE)
    sub = Sub()
    sub.follow2(commands)
    assert sub.hpos == 15
    assert sub.depth == 60
    assert sub.answer() == 900


def test_parse_input_values():
    commands = parse_input(SAMPLE)
    assert commands[0] == Command(Direction.FORWARD, 5)
    assert commands[3] == Command(Direction.UP, 3)
    assert len(commands) == 6


def test_parse_input_skips_invalid(capsys):
    commands = parse_input("sideways 3\nforward x\ndown 2\n")
    assert commands == [Command(Direction.DOWN, 2)]
    assert "parse error" in capsys.readouterr().err


def test_parse_input_missing_units():
    with pytest.raises(ValueError):
        parse_input("forward\n")


def test_solver():
    solver = Solver(SAMPLE)
    assert solver.part1() == "150"
    assert solver.part2() == "900"
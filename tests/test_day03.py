import pytest

from aoc2021.day03 import (
    Solver,
    co2_scrubber_rating,
    oxygen_generator_rating,
    parse_input,
    power_consumption,
)

SAMPLE = """00100
11110
10110
10111
10101
01111
00111
11100
10000
11001
00010
01010
"""


def test_calc():
    values = parse_input(SAMPLE)
    assert power_consumption(values) == (22, 9)
    assert oxygen_generator_rating(values) == 23
    assert co2_scrubber_rating(values) == 10


def test_parse_input():
    assert parse_input("101\n011\n") == [5, 3]


def test_parse_input_rejects_non_binary():
    with pytest.raises(ValueError):
        parse_input("012\n")


def test_rating_without_isolation_is_zero():
    assert oxygen_generator_rating([]) == 0


def test_solver():
    solver = Solver(SAMPLE)
    assert solver.part1() == "198"
    assert solver.part2() == "230"
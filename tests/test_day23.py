import pytest

from aoc2021.day23 import Solver, parse_input, solve, unfold_input

EXAMPLE = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""


def test_cheapest_path_example():
    grid, state = parse_input(EXAMPLE)
    assert state.cheapest_path(grid) == 12521


def test_cheapest_path_unfolded():
    assert solve(unfold_input(EXAMPLE)) == 44169


def test_unfold_input_inserts_rows():
    lines = unfold_input(EXAMPLE).splitlines()
    assert len(lines) == 7
    assert lines[2] == "###B#C#B#D###"
    assert lines[3] == "  #D#C#B#A#"
    assert lines[4] == "  #D#B#A#C#"
    assert lines[5] == "  #A#D#C#A#"


def test_render_shows_burrow_and_settled_pods():
    grid, state = parse_input(EXAMPLE)
    rendered = state.render(grid).splitlines()
    assert [line.split("\t")[0] for line in rendered] == [
        "#############",
        "#...........#",
        "###B#C#B#D###",
        "###A#D#C#A#",
        "###########",
    ]
    assert rendered[0].split("\t")[1] == (
        "0/B at StartRoom(2, 3)  1/C at StartRoom(2, 5)  "
        "2/B at StartRoom(2, 7)  3/D at StartRoom(2, 9)"
    )
    assert rendered[1].split("\t")[1] == (
        "4/A at DestRoom(3)  5/D at StartRoom(3, 5)  "
        "6/C at DestRoom(3)  7/A at StartRoom(3, 9)"
    )


def test_already_sorted_costs_nothing():
    sorted_burrow = """\
#############
#...........#
###A#B#C#D###
  #A#B#C#D#
  #########
"""
    grid, state = parse_input(sorted_burrow)
    assert state.goal_reached()
    assert state.cheapest_path(grid) == 0


def test_single_swap_cost():
    burrow = """\
#############
#...........#
###B#A#C#D###
  #A#B#C#D#
  #########
"""
    # B moves out of room A and A moves across into its room.
    assert solve(burrow) == 46


def test_unexpected_character():
    with pytest.raises(ValueError):
        parse_input("#############\n#....E......#\n")


def test_solver():
    solver = Solver(EXAMPLE)
    assert solver.part1() == "12521"
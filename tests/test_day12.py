import pytest

from aoc2021.day12 import CaveType, Solver, parse_input, part1, part2

EXAMPLE1 = """\
start-A
start-b
A-c
A-b
b-d
A-end
b-end
"""

EXAMPLE2 = """\
dc-end
HN-start
start-kj
dc-start
dc-HN
LN-dc
HN-end
kj-sa
kj-HN
kj-dc
"""

EXAMPLE3 = """\
fs-end
he-DX
fs-he
start-DX
pj-DX
end-zg
zg-sl
zg-pj
pj-he
RW-he
fs-DX
pj-RW
zg-RW
start-pj
he-WI
zg-he
pj-fs
start-RW
"""


def test_parse_caves():
    system = parse_input(EXAMPLE1)
    assert len(system.caves) == 6
    assert system.caves[0].name == "start"
    assert system.caves[0].cave_type is CaveType.START
    assert system.caves[1].name == "A"
    assert system.caves[1].cave_type is CaveType.BIG
    assert system.caves[2].name == "b"
    assert system.caves[2].cave_type is CaveType.SMALL
    assert system.caves[5].name == "end"
    assert system.caves[5].cave_type is CaveType.END


def test_count_paths_direct():
    system = parse_input(EXAMPLE1)
    assert system.count_paths([5], False) == 1
    assert system.count_paths([0], False) == 10


def test_count_paths_restores_path():
    system = parse_input(EXAMPLE1)
    path = [0]
    system.count_paths(path, True)
    assert path == [0]


def test_add_cave_reuses_index():
    system = parse_input(EXAMPLE1)
    assert system.add_cave("A") == 1
    assert len(system.caves) == 6


@pytest.mark.parametrize(
    "text, expected1, expected2",
    [(EXAMPLE1, 10, 36), (EXAMPLE2, 19, 103), (EXAMPLE3, 226, 3509)],
)
def test_parts(text, expected1, expected2):
    system = parse_input(text)
    assert part1(system) == expected1
    assert part2(system) == expected2


def test_solver():
    solver = Solver(EXAMPLE1)
    assert solver.part1() == "10"
    assert solver.part2() == "36"


def test_malformed_link():
    with pytest.raises(ValueError):
        parse_input("startA\n")
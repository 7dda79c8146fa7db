import pytest

from aoc2021.day24 import Alu, Instruction, Opcode, Solver, parse_input, solve

# Each block adds its digit to z and subtracts 5: valid when the digits sum to 70.
SUM_PROGRAM = "inp w\nadd z w\nadd z -5\n" * 14


def test_negate():
    alu = Alu()
    alu.run(parse_input("inp x\nmul x -1\n"), 0, [4])
    assert alu.registers[1] == -4


def test_three_times():
    alu = Alu()
    program = parse_input("inp z\ninp x\nmul z 3\neql z x\n")
    assert alu.run(program, 0, [3, 8]) == 0
    assert alu.run(program, 0, [3, 9]) == 1


@pytest.mark.parametrize(
    "value, expected",
    [(15, [1, 1, 1, 1]), (0, [0, 0, 0, 0]), (9, [1, 0, 0, 1])],
)
def test_binary(value, expected):
    alu = Alu()
    program = parse_input(
        "inp w\nadd z w\nmod z 2\ndiv w 2\nadd y w\nmod y 2\n"
        "div w 2\nadd x w\nmod x 2\ndiv w 2\nmod w 2\n"
    )
    alu.run(program, 0, [value])
    assert alu.registers == expected


def test_division_truncates_towards_zero():
    alu = Alu()
    alu.run(parse_input("inp x\ninp y\ndiv x y\n"), 0, [-7, 2])
    assert alu.registers[1] == -3
    alu.run(parse_input("inp x\ninp y\nmod x y\n"), 0, [-7, 2])
    assert alu.registers[1] == -1


def test_start_z():
    alu = Alu()
    assert alu.run(parse_input("inp w\nadd z w\n"), 10, [5]) == 15


def test_parse_instruction():
    inst = Instruction.parse("add z -5")
    assert inst.code is Opcode.ADD
    assert inst.operand == -5
    assert str(inst) == "add z -5"


def test_unknown_code():
    with pytest.raises(ValueError):
        Instruction.parse("sub x 1")


def test_missing_input():
    with pytest.raises(ValueError):
        Alu().run(parse_input("inp x\ninp y\n"), 0, [1])


def test_solve_largest_and_smallest():
    program = parse_input(SUM_PROGRAM)
    assert solve(program, smallest=False) == 99999991111111
    assert solve(program, smallest=True) == 11111119999999


def test_solver():
    solver = Solver(SUM_PROGRAM)
    assert solver.part1() == "99999991111111"
    assert solver.part2() == "11111119999999"


def test_program_must_start_with_input():
    with pytest.raises(ValueError):
        solve(parse_input("add z 1\ninp w\n"), smallest=False)


def test_no_solution():
    with pytest.raises(ValueError):
        solve(parse_input("inp w\nadd z 1\n"), smallest=True)
"""Arithmetic logic unit: finding valid model numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

_REGISTERS = "wxyz"
_Z = 3
# z holds base-26 digits; a valid number never needs more than four of them.
_Z_LIMIT = 26**4


class Opcode(Enum):
    INP = "inp"
    ADD = "add"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    EQL = "eql"


@dataclass(frozen=True)
class Register:
    index: int

    def __str__(self) -> str:
        return _REGISTERS[self.index]


Operand = "Register | int | None"


def _register(name: str) -> Register:
    index = _REGISTERS.find(name)
    if len(name) != 1 or index < 0:
        raise ValueError(f"not a register: {name!r}")
    return Register(index)


def _operand(text: str) -> Register | int:
    if text in _REGISTERS and len(text) == 1:
        return Register(_REGISTERS.index(text))
    return int(text)


def _div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - b * _div(a, b)


_OPERATIONS = {
    Opcode.ADD: lambda a, b: a + b,
    Opcode.MUL: lambda a, b: a * b,
    Opcode.DIV: _div,
    Opcode.MOD: _mod,
    Opcode.EQL: lambda a, b: int(a == b),
}


@dataclass(frozen=True)
class Instruction:
    code: Opcode
    target: Register
    operand: Register | int | None = None

    @classmethod
    def parse(cls, line: str) -> Instruction:
        parts = line.split(" ")
        if len(parts) < 2:
            raise ValueError(f"malformed instruction: {line!r}")
        try:
            code = Opcode(parts[0])
        except ValueError:
            raise ValueError(f"unknown code {parts[0]!r}") from None
        operand = _operand(parts[2]) if len(parts) > 2 else None
        return cls(code, _register(parts[1]), operand)

    def __str__(self) -> str:
        if self.operand is None:
            return f"{self.code.value} {self.target}"
        return f"{self.code.value} {self.target} {self.operand}"


@dataclass
class Alu:
    """Four registers: w, x, y and z."""

    registers: list[int] = field(default_factory=lambda: [0, 0, 0, 0])

    def _value(self, operand: Register | int | None) -> int:
        if operand is None:
            raise ValueError("attempted to get value of empty operand")
        if isinstance(operand, Register):
            return self.registers[operand.index]
        return operand

    def run(self, program: Iterable[Instruction], start_z: int, inputs: Iterable[int]) -> int:
        """Run a program with z preset; return the final value of z."""
        self.registers[:] = [0, 0, 0, start_z]
        feed = iter(inputs)
        for inst in program:
            index = inst.target.index
            if inst.code is Opcode.INP:
                try:
                    self.registers[index] = next(feed)
                except StopIteration:
                    raise ValueError("program read more input than given") from None
            else:
                self.registers[index] = _OPERATIONS[inst.code](
                    self.registers[index], self._value(inst.operand)
                )
        return self.registers[_Z]


def parse_input(text: str) -> list[Instruction]:
    return [Instruction.parse(line) for line in text.splitlines()]


def _split_blocks(program: Iterable[Instruction]) -> list[list[Instruction]]:
    """Split the program into blocks, each starting at an inp instruction."""
    blocks: list[list[Instruction]] = []
    for inst in program:
        if inst.code is Opcode.INP:
            blocks.append([])
        elif not blocks:
            raise ValueError("program must start with an inp instruction")
        blocks[-1].append(inst)
    if not blocks:
        raise ValueError("empty program")
    return blocks


def _search(
    blocks: Sequence[Sequence[Instruction]],
    depth: int,
    start_z: int,
    cache: dict[tuple[int, int], str | None],
    smallest: bool,
    alu: Alu,
) -> str | None:
    key = (depth, start_z)
    if key in cache:
        return cache[key]
    result = None
    if start_z <= _Z_LIMIT:
        digits = range(1, 10) if smallest else range(9, 0, -1)
        last = depth == len(blocks) - 1
        for digit in digits:
            z = alu.run(blocks[depth], start_z, [digit])
            if last:
                if z == 0:
                    result = str(digit)
                    break
            else:
                rest = _search(blocks, depth + 1, z, cache, smallest, alu)
                if rest is not None:
                    result = str(digit) + rest
                    break
    cache[key] = result
    return result


def solve(program: Iterable[Instruction], smallest: bool) -> int:
    """Largest (or smallest) input of digits 1-9 that leaves z at zero."""
    blocks = _split_blocks(program)
    result = _search(blocks, 0, 0, {}, smallest, Alu())
    if result is None:
        raise ValueError("no valid model number")
    return int(result)


class Solver:
    """Puzzle solver for the MONAD program."""

    def __init__(self, text: str) -> None:
        self.program = parse_input(text)

    def part1(self) -> str:
        return str(solve(self.program, smallest=False))

    def part2(self) -> str:
        return str(solve(self.program, smallest=True))
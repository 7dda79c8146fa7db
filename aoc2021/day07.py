"""Treachery of whales: aligning crab submarines."""

from __future__ import annotations

from collections.abc import Callable, Sequence

FuelFunction = Callable[[Sequence[int], int], int]


def least_fuel(crabs: Sequence[int], fuel: FuelFunction) -> int:
    """Return the smallest fuel cost over positions 0 to the furthest crab."""
    if not crabs:
        raise ValueError("no crabs")
    return min(fuel(crabs, pos) for pos in range(max(crabs) + 1))


def measure_fuel(crabs: Sequence[int], pos: int) -> int:
    """Fuel to move every crab to pos at a constant rate."""
    return sum(abs(crab - pos) for crab in crabs)


def triangle_number(n: int) -> int:
    return n * (n + 1) // 2


def measure_fuel2(crabs: Sequence[int], pos: int) -> int:
    """Fuel to move every crab to pos when each step costs one more."""
    return sum(triangle_number(abs(crab - pos)) for crab in crabs)


def parse_input(text: str) -> list[int]:
    """Parse the comma separated positions on the first line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    return [int(n) for n in lines[0].split(",")]


class Solver:
    """Puzzle solver for the crab alignment."""

    def __init__(self, text: str) -> None:
        self.crabs = parse_input(text)

    def part1(self) -> str:
        return str(least_fuel(self.crabs, measure_fuel))

    def part2(self) -> str:
        return str(least_fuel(self.crabs, measure_fuel2))
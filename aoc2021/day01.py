"""Sonar sweep: counting depth increases."""

from __future__ import annotations

from collections.abc import Sequence


def parse_input(text: str) -> list[int]:
    """Parse one integer per line, skipping lines that are not integers."""
    values = []
    for line in text.splitlines():
        try:
            values.append(int(line))
        except ValueError:
            continue
    return values


def count_increases(values: Sequence[int]) -> int:
    """Count how many measurements are larger than the one before."""
    return sum(1 for prev, cur in zip(values, values[1:]) if cur > prev)


def count_sliding_increases(values: Sequence[int]) -> int:
    """Count increases between sums of consecutive three-measurement windows."""
    if len(values) < 3:
        raise ValueError("at least three measurements are needed")
    # Adjacent windows share two values, so only the outer ones matter.
    return sum(1 for old, new in zip(values, values[3:]) if new > old)


class Solver:
    """Puzzle solver for the sonar sweep."""

    def __init__(self, text: str) -> None:
        self.values = parse_input(text)

    def part1(self) -> str:
        return str(count_increases(self.values))

    def part2(self) -> str:
        return str(count_sliding_increases(self.values))
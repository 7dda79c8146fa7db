"""Lanternfish population growth."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

_TIMERS = 9
_RESET = 6


def simulate_population(fish: Iterable[int], days: int) -> int:
    """Return the number of fish after the given number of days."""
    counts = deque([0] * _TIMERS)
    for timer in fish:
        counts[timer] += 1
    for _ in range(days):
        breeding = counts.popleft()
        counts[_RESET] += breeding
        counts.append(breeding)
    return sum(counts)


def parse_input(text: str) -> list[int]:
    """Parse the comma separated timers on the first line."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    return [int(n) for n in lines[0].split(",")]


class Solver:
    """Puzzle solver for the lanternfish."""

    def __init__(self, text: str) -> None:
        self.fish = parse_input(text)

    def part1(self) -> str:
        return str(simulate_population(self.fish, 80))

    def part2(self) -> str:
        return str(simulate_population(self.fish, 256))
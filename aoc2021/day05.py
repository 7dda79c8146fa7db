"""Hydrothermal venture: overlapping vent lines."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __repr__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point

    def horizontal(self) -> bool:
        return self.start.y == self.end.y

    def vertical(self) -> bool:
        return self.start.x == self.end.x

    def points(self):
        """Yield every point from start to end inclusive."""
        dx = _sign(self.end.x - self.start.x)
        dy = _sign(self.end.y - self.start.y)
        pos = self.start
        while True:
            yield pos
            if pos == self.end:
                return
            pos = Point(pos.x + dx, pos.y + dy)

    def __repr__(self) -> str:
        return f"{self.start!r} -> {self.end!r}"


def count_overlapping_points(lines: Iterable[Line], diagonals: bool) -> int:
    """Count points covered by at least two lines."""
    grid: Counter[Point] = Counter()
    for line in lines:
        if not diagonals and not (line.horizontal() or line.vertical()):
            continue
        grid.update(line.points())
    return sum(1 for n in grid.values() if n > 1)


def parse_input(text: str) -> list[Line]:
    """Parse lines of the form 'x1,y1 -> x2,y2'."""
    lines = []
    for row in text.splitlines():
        nums = [int(n) for part in row.split(" -> ") for n in part.split(",")]
        if len(nums) < 4:
            raise ValueError(f"malformed line: {row!r}")
        lines.append(Line(Point(nums[0], nums[1]), Point(nums[2], nums[3])))
    return lines


class Solver:
    """Puzzle solver for the vent lines."""

    def __init__(self, text: str) -> None:
        self.lines = parse_input(text)

    def part1(self) -> str:
        return str(count_overlapping_points(self.lines, diagonals=False))

    def part2(self) -> str:
        return str(count_overlapping_points(self.lines, diagonals=True))
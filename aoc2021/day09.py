"""Smoke basin: low points and basins in a height map."""

from __future__ import annotations

import math
from dataclasses import dataclass

_EDGE = 9
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Grid:
    """A height map of single digit heights, indexed by (x, y)."""

    data: tuple[tuple[int, ...], ...]
    width: int
    height: int

    @classmethod
    def from_text(cls, text: str) -> Grid:
        data = tuple(tuple(int(c) for c in line) for line in text.splitlines())
        if not data or not data[0]:
            raise ValueError("empty height map")
        return cls(data, len(data[0]), len(data))

    def get(self, x: int, y: int) -> int:
        """Height at (x, y); positions off the map count as 9."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.data[y][x]
        return _EDGE

    def lowpoints(self) -> list[tuple[int, int]]:
        """Points lower than all four neighbours, ordered by x then y."""
        return [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if all(self.get(x + dx, y + dy) > self.get(x, y) for dx, dy in _STEPS)
        ]

    def risk_level_sum(self) -> int:
        return sum(self.get(x, y) + 1 for x, y in self.lowpoints())

    def _basin_size(self, start: tuple[int, int], seen: set[tuple[int, int]]) -> int:
        seen.add(start)
        stack = [start]
        size = 0
        while stack:
            x, y = stack.pop()
            size += 1
            here = self.get(x, y)
            for dx, dy in _STEPS:
                to = (x + dx, y + dy)
                there = self.get(*to)
                if there >= here and there != _EDGE and to not in seen:
                    seen.add(to)
                    stack.append(to)
        return size

    def largest_basins_product(self) -> int:
        """Product of the sizes of the three largest basins."""
        seen: set[tuple[int, int]] = set()
        sizes = sorted(
            (self._basin_size(start, seen) for start in self.lowpoints()),
            reverse=True,
        )
        return math.prod(sizes[:3])


class Solver:
    """Puzzle solver for the smoke basin."""

    def __init__(self, text: str) -> None:
        self.grid = Grid.from_text(text)

    def part1(self) -> str:
        return str(self.grid.risk_level_sum())

    def part2(self) -> str:
        return str(self.grid.largest_basins_product())
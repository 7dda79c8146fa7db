"""Chiton: lowest risk path through a cave."""

from __future__ import annotations

import heapq
from dataclasses import dataclass

_TILES = 5


@dataclass(frozen=True)
class Cave:
    """Risk levels indexed by (row, col)."""

    risks: tuple[tuple[int, ...], ...]
    height: int
    width: int

    @classmethod
    def from_text(cls, text: str) -> Cave:
        risks = tuple(tuple(int(c) for c in line) for line in text.splitlines())
        if not risks or not risks[0]:
            raise ValueError("empty cave")
        return cls(risks, len(risks), len(risks[0]))

    def embiggen(self) -> Cave:
        """Return the cave tiled five times in each direction, risks wrapping 9 to 1."""
        risks = tuple(
            tuple(
                (self.risks[row % self.height][col % self.width]
                 + row // self.height + col // self.width - 1) % 9 + 1
                for col in range(self.width * _TILES)
            )
            for row in range(self.height * _TILES)
        )
        return Cave(risks, self.height * _TILES, self.width * _TILES)

    def neighbours(self, pos: tuple[int, int]) -> list[tuple[int, int]]:
        row, col = pos
        result = []
        if row > 0:
            result.append((row - 1, col))
        if row < self.height - 1:
            result.append((row + 1, col))
        if col > 0:
            result.append((row, col - 1))
        if col < self.width - 1:
            result.append((row, col + 1))
        return result

    def lowest_risk(self) -> int:
        """Total risk of the cheapest path from top left to bottom right."""
        goal = (self.height - 1, self.width - 1)
        cost_so_far = {(0, 0): 0}
        frontier = [(0, (0, 0))]
        while frontier:
            cost, current = heapq.heappop(frontier)
            if current == goal:
                return cost_so_far[current]
            if cost > cost_so_far[current]:
                continue
            for nxt in self.neighbours(current):
                new_cost = cost_so_far[current] + self.risks[nxt[0]][nxt[1]]
                if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                    cost_so_far[nxt] = new_cost
                    heapq.heappush(frontier, (new_cost, nxt))
        raise ValueError("no path")


class Solver:
    """Puzzle solver for the chiton cave."""

    def __init__(self, text: str) -> None:
        self.cave = Cave.from_text(text)

    def part1(self) -> str:
        return str(self.cave.lowest_risk())

    def part2(self) -> str:
        return str(self.cave.embiggen().lowest_risk())
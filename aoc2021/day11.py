"""Dumbo octopus flashes."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Grid:
    """Octopus energy levels and flash counters."""

    state: tuple[tuple[int, ...], ...]
    rows: int
    cols: int
    flashes: int = 0
    total_flashes: int = 0
    total_steps: int = 0

    @classmethod
    def from_text(cls, text: str) -> Grid:
        state = tuple(tuple(int(c) for c in line) for line in text.splitlines())
        if not state or not state[0]:
            raise ValueError("empty grid")
        return cls(state, len(state), len(state[0]))

    def _neighbours(self, row: int, col: int):
        for r in range(max(row - 1, 0), min(row + 2, self.rows)):
            for c in range(max(col - 1, 0), min(col + 2, self.cols)):
                yield r, c

    def step(self) -> Grid:
        """Return the grid after one step."""
        state = [[v + 1 for v in row] for row in self.state]
        queue = [
            (r, c)
            for r, row in enumerate(state)
            for c, v in enumerate(row)
            if v > 9
        ]
        while queue:
            row, col = queue.pop()
            for r, c in self._neighbours(row, col):
                if state[r][c] < 10:
                    state[r][c] += 1
                    if state[r][c] > 9:
                        queue.append((r, c))

        flashes = sum(1 for row in state for v in row if v > 9)
        new_state = tuple(tuple(0 if v > 9 else v for v in row) for row in state)
        return replace(
            self,
            state=new_state,
            flashes=flashes,
            total_flashes=self.total_flashes + flashes,
            total_steps=self.total_steps + 1,
        )

    def __str__(self) -> str:
        return "".join("".join(str(v) for v in row) + "\n" for row in self.state)


class Solver:
    """Puzzle solver for the octopus grid."""

    def __init__(self, text: str) -> None:
        grid = Grid.from_text(text)
        for _ in range(100):
            grid = grid.step()
        self.grid = grid

    def part1(self) -> str:
        return str(self.grid.total_flashes)

    def part2(self) -> str:
        grid = self.grid
        while grid.flashes != grid.rows * grid.cols:
            grid = grid.step()
        return str(grid.total_steps)
"""Trench map: enhancing an infinite image."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_ALGORITHM_LENGTH = 512


@dataclass(frozen=True)
class Image:
    """Lit pixels as (row, col), plus the state of every pixel outside them."""

    grid: frozenset[tuple[int, int]]
    background: bool = False
    iterations: int = 0

    @classmethod
    def from_text(cls, text: str) -> Image:
        grid = frozenset(
            (row, col)
            for row, line in enumerate(text.splitlines())
            for col, c in enumerate(line)
            if c == "#"
        )
        return cls(grid)

    def _row_range(self) -> range:
        if not self.grid:
            raise ValueError("image has no lit pixels")
        rows = [r for r, _ in self.grid]
        return range(min(rows), max(rows) + 1)

    def _col_range(self) -> range:
        if not self.grid:
            raise ValueError("image has no lit pixels")
        cols = [c for _, c in self.grid]
        return range(min(cols), max(cols) + 1)

    def enhance(self, algorithm: Sequence[bool]) -> Image:
        """Apply the enhancement algorithm once."""
        if len(algorithm) < _ALGORITHM_LENGTH:
            raise ValueError("enhancement algorithm needs 512 entries")
        rows = self._row_range()
        cols = self._col_range()
        new_grid = set()
        for row in range(rows.start - 1, rows.stop + 1):
            for col in range(cols.start - 1, cols.stop + 1):
                rule = 0
                for r in (row - 1, row, row + 1):
                    for c in (col - 1, col, col + 1):
                        if r in rows and c in cols:
                            lit = (r, c) in self.grid
                        else:
                            lit = self.background
                        rule = (rule << 1) | lit
                if algorithm[rule]:
                    new_grid.add((row, col))
        return Image(
            frozenset(new_grid),
            algorithm[_ALGORITHM_LENGTH - 1 if self.background else 0],
            self.iterations + 1,
        )

    def __str__(self) -> str:
        if not self.grid:
            return (
                f"iterations; {self.iterations}, lit pixels: 0 "
                f"background: {str(self.background).lower()}\n(empty)"
            )
        rows = self._row_range()
        cols = self._col_range()
        picture = "".join(
            "".join("#" if (r, c) in self.grid else "." for c in cols) + "\n"
            for r in rows
        )
        return (
            f"rows: {rows.start}..{rows.stop}, cols: {cols.start}..{cols.stop}, "
            f"iterations; {self.iterations}, lit pixels: {len(self.grid)} "
            f"background: {str(self.background).lower()}\n{picture}"
        )


def enhance(image: Image, algorithm: Sequence[bool], count: int) -> Image:
    """Enhance the image count times (at least once)."""
    result = image.enhance(algorithm)
    for _ in range(1, count):
        result = result.enhance(algorithm)
    return result


def parse_input(text: str) -> tuple[list[bool], Image]:
    """Parse the algorithm line, a blank line, then the image."""
    parts = text.split("\n\n")
    if len(parts) < 2:
        raise ValueError("expected an algorithm and an image")
    algorithm = [c == "#" for c in parts[0]]
    return algorithm, Image.from_text(parts[1])


class Solver:
    """Puzzle solver for the trench map."""

    def __init__(self, text: str) -> None:
        self.algorithm, self.image = parse_input(text)

    def part1(self) -> str:
        return str(len(enhance(self.image, self.algorithm, 2).grid))

    def part2(self) -> str:
        return str(len(enhance(self.image, self.algorithm, 50).grid))
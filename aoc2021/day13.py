"""Transparent origami: folding dotted paper."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

Paper = set[tuple[int, int]]


@dataclass(frozen=True)
class Fold:
    """A fold along the line axis=position, axis being 'x' or 'y'."""

    axis: str
    position: int

    def __post_init__(self) -> None:
        if self.axis not in ("x", "y"):
            raise ValueError(f"invalid fold axis: {self.axis!r}")


def _mirror(value: int, line: int) -> int:
    if value <= line:
        return value
    folded = line - (value - line)
    if folded < 0:
        raise ValueError("fold would move a dot off the paper")
    return folded


def fold_paper(paper: Iterable[tuple[int, int]], fold: Fold) -> Paper:
    """Fold the paper; dots are (row, column)."""
    if fold.axis == "y":
        return {(_mirror(row, fold.position), col) for row, col in paper}
    return {(row, _mirror(col, fold.position)) for row, col in paper}


def render_paper(paper: Paper) -> str:
    """Draw the dots, one text line per row."""
    if not paper:
        raise ValueError("paper has no dots")
    max_row = max(row for row, _ in paper)
    max_col = max(col for _, col in paper)
    return "".join(
        "".join("█" if (row, col) in paper else " " for col in range(max_col + 1))
        + "\n"
        for row in range(max_row + 1)
    )


def parse_input(text: str) -> tuple[Paper, list[Fold]]:
    """Parse dots 'x,y', a blank line, then 'fold along a=n' lines."""
    paper: Paper = set()
    folds: list[Fold] = []
    in_folds = False
    for line in text.splitlines():
        if not line:
            in_folds = True
        elif not in_folds:
            x, y = (int(n) for n in line.split(","))
            paper.add((y, x))
        else:
            instruction, _, value = line.partition("=")
            if not instruction.startswith("fold along "):
                raise ValueError(f"invalid fold: {line!r}")
            folds.append(Fold(instruction.removeprefix("fold along "), int(value)))
    return paper, folds


class Solver:
    """Puzzle solver for the transparent paper."""

    def __init__(self, text: str) -> None:
        self.paper, self.folds = parse_input(text)

    def part1(self) -> str:
        return str(len(fold_paper(self.paper, self.folds[0])))

    def part2(self) -> str:
        paper = set(self.paper)
        for fold in self.folds:
            paper = fold_paper(paper, fold)
        return render_paper(paper)
"""Giant squid bingo."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

SIZE = 5


class Board:
    """A 5x5 bingo board with marks."""

    def __init__(self, rows: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in rows if row][:SIZE]
        if len(rows) < SIZE or any(len(row) < SIZE for row in rows):
            raise ValueError("a board needs 5 rows of 5 numbers")
        self.grid = [row[:SIZE] for row in rows]
        self.marks = [[False] * SIZE for _ in range(SIZE)]
        self.done = False

    def mark(self, number: int) -> bool:
        """Mark the first cell holding number; return True if that made bingo."""
        for y, row in enumerate(self.grid):
            for x, value in enumerate(row):
                if value == number:
                    self.marks[y][x] = True
                    if all(self.marks[y]) or all(r[x] for r in self.marks):
                        self.done = True
                        return True
                    return False
        return False

    def sum_unmarked(self) -> int:
        return sum(
            value
            for row, marks in zip(self.grid, self.marks)
            for value, marked in zip(row, marks)
            if not marked
        )

    def __repr__(self) -> str:
        lines = []
        for row, marks in zip(self.grid, self.marks):
            numbers = " ".join(f"{v:2}" for v in row)
            flags = "".join("#" if m else "." for m in marks)
            lines.append(f"{numbers}  {flags}\n")
        return "".join(lines)


@dataclass(frozen=True)
class GameResult:
    sum_of_unmarked_numbers: int
    last_number_called: int

    def score(self) -> int:
        return self.sum_of_unmarked_numbers * self.last_number_called


def play_to_win(numbers: Iterable[int], boards: list[Board]) -> GameResult:
    """Play until the first board wins. Boards are marked in place."""
    for number in numbers:
        for board in boards:
            if board.mark(number):
                return GameResult(board.sum_unmarked(), number)
    raise ValueError("no winning board")


def play_to_lose(numbers: Iterable[int], boards: list[Board]) -> GameResult:
    """Play until the last board wins. Boards are marked in place."""
    in_play = len(boards)
    for number in numbers:
        for board in boards:
            if not board.done and board.mark(number):
                in_play -= 1
                if in_play == 0:
                    return GameResult(board.sum_unmarked(), number)
    raise ValueError("final board didn't win")


def parse_input(text: str) -> tuple[list[int], list[Board]]:
    """Parse the called numbers and the boards."""
    paragraphs = text.split("\n\n")
    numbers = [int(s) for s in paragraphs[0].split(",")]
    boards = [
        Board([[int(s) for s in row.split()] for row in para.split("\n")])
        for para in paragraphs[1:]
    ]
    return numbers, boards


class Solver:
    """Puzzle solver for the bingo game."""

    def __init__(self, text: str) -> None:
        self.text = text

    def part1(self) -> str:
        numbers, boards = parse_input(self.text)
        return str(play_to_win(numbers, boards).score())

    def part2(self) -> str:
        numbers, boards = parse_input(self.text)
        return str(play_to_lose(numbers, boards).score())
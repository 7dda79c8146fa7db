"""Dirac dice: a deterministic game and a quantum one."""

from __future__ import annotations

import copy
from collections import Counter
from dataclasses import dataclass, field
from functools import cache
from itertools import product

_TRACK = 10
_DIE_SIDES = 100
_ROLLS_PER_TURN = 3
_WINNING_SCORE = 1000
_DIRAC_WINNING_SCORE = 21
# How many of the 27 quantum universes give each total of three rolls.
_DIRAC_TOTALS = Counter(sum(rolls) for rolls in product((1, 2, 3), repeat=3))


def _advance(pos: int, steps: int) -> int:
    return (pos + steps - 1) % _TRACK + 1


@cache
def _count_wins(pos: int, other_pos: int, score: int, other_score: int) -> tuple[int, int]:
    """Universes won by (player to move, other player)."""
    if other_score >= _DIRAC_WINNING_SCORE:
        return 0, 1
    mover_wins = other_wins = 0
    for total, universes in _DIRAC_TOTALS.items():
        new_pos = _advance(pos, total)
        next_mover, next_other = _count_wins(other_pos, new_pos, other_score, score + new_pos)
        mover_wins += next_other * universes
        other_wins += next_mover * universes
    return mover_wins, other_wins


@dataclass
class Game:
    """Positions and scores of both players, and how many turns were taken."""

    pos: list[int]
    score: list[int] = field(default_factory=lambda: [0, 0])
    turn_count: int = 0

    @classmethod
    def from_text(cls, text: str) -> Game:
        lines = [line for line in text.splitlines() if line]
        if len(lines) < 2:
            raise ValueError("expected two starting positions")
        return cls([int(lines[0][-1]), int(lines[1][-1])])

    def turn(self) -> None:
        """Play one turn with the deterministic 100-sided die."""
        player = self.turn_count % 2
        first = self.turn_count * _ROLLS_PER_TURN
        total = sum((first + i) % _DIE_SIDES + 1 for i in range(_ROLLS_PER_TURN))
        self.pos[player] = _advance(self.pos[player], total)
        self.score[player] += self.pos[player]
        self.turn_count += 1

    def play_until_end(self) -> None:
        while self.winner() is None:
            self.turn()

    def rolls(self) -> int:
        return self.turn_count * _ROLLS_PER_TURN

    def winner(self) -> int | None:
        """Index of the first player to reach 1000, or None."""
        for player, score in enumerate(self.score):
            if score >= _WINNING_SCORE:
                return player
        return None

    def part1(self) -> int:
        """Play to the end; losing score times the number of rolls."""
        self.play_until_end()
        winner = self.winner()
        assert winner is not None
        return self.score[1 - winner] * self.rolls()

    def part2(self) -> int:
        """Universes won by the player who wins in more of them."""
        return max(_count_wins(self.pos[0], self.pos[1], self.score[0], self.score[1]))


class Solver:
    """Puzzle solver for Dirac dice."""

    def __init__(self, text: str) -> None:
        self.game = Game.from_text(text)

    def part1(self) -> str:
        return str(copy.deepcopy(self.game).part1())

    def part2(self) -> str:
        return str(self.game.part2())
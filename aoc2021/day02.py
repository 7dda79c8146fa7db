"""Dive: steering the submarine."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


@dataclass(frozen=True)
class Command:
    direction: Direction
    units: int


@dataclass
class Sub:
    """Submarine position, depth and aim."""

    hpos: int = 0
    depth: int = 0
    aim: int = 0

    def follow(self, commands: Iterable[Command]) -> None:
        """Apply commands where up and down change depth directly."""
        for command in commands:
            if command.direction is Direction.FORWARD:
                self.hpos += command.units
            elif command.direction is Direction.DOWN:
                self.depth += command.units
            else:
                self.depth -= command.units

    def follow2(self, commands: Iterable[Command]) -> None:
        """Apply commands where up and down change the aim."""
        for command in commands:
            if command.direction is Direction.FORWARD:
                self.hpos += command.units
                self.depth += self.aim * command.units
            elif command.direction is Direction.DOWN:
                self.aim += command.units
            else:
                self.aim -= command.units

    def answer(self) -> int:
        return self.hpos * self.depth


def parse_input(text: str) -> list[Command]:
    """Parse commands, reporting and skipping lines that cannot be read."""
    commands = []
    for line in text.splitlines():
        words = line.split(" ")
        if len(words) < 2:
            raise ValueError(f"malformed command: {line!r}")
        try:
            units = int(words[1])
            if units < 0:
                raise ValueError("negative units")
        except ValueError as exc:
            print(f"parse error: {exc}: {line}", file=sys.stderr)
            continue
        for direction in Direction:
            if line.startswith(direction.value):
                commands.append(Command(direction, units))
                break
        else:
            print(f"parse error: invalid direction: {line}", file=sys.stderr)
    return commands


class Solver:
    """Puzzle solver for the submarine course."""

    def __init__(self, text: str) -> None:
        self.commands = parse_input(text)

    def part1(self) -> str:
        sub = Sub()
        sub.follow(self.commands)
        return str(sub.answer())

    def part2(self) -> str:
        sub = Sub()
        sub.follow2(self.commands)
        return str(sub.answer())
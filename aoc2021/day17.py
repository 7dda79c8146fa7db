"""Trick shot: firing a probe into a target area."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PATTERN = re.compile(r"^target area: x=(-?\d+)\.\.(-?\d+), y=(-?\d+)\.\.(-?\d+)")
# No obvious bound on the starting vertical velocity, so search up to this.
_MAX_DY = 500


@dataclass(frozen=True)
class Target:
    """Target area as half-open x and y ranges."""

    x: range
    y: range

    def contains(self, x: int, y: int) -> bool:
        return x in self.x and y in self.y


def fire(dx: int, dy: int, target: Target) -> int | None:
    """Return the highest y reached if the probe lands in the target, else None."""
    x = y = max_y = 0
    while x <= target.x.stop and y >= target.y.start:
        x += dx
        y += dy
        max_y = max(max_y, y)
        if target.contains(x, y):
            return max_y
        if dx > 0:
            dx -= 1
        dy -= 1
    return None


def _x_candidates(target: Target) -> list[int]:
    """Starting x velocities that pass through the target's x range."""
    valid = []
    for cand in range(target.x.stop):
        x, dx = 0, cand
        while x <= target.x.stop and dx > 0:
            x += dx
            if x in target.x:
                valid.append(cand)
                break
            dx -= 1
    return valid


def _y_candidates(target: Target) -> list[int]:
    """Starting y velocities that pass through the target's y range."""
    valid = []
    for cand in range(target.y.start, _MAX_DY):
        y, dy = 0, cand
        while y > target.y.start:
            y += dy
            if y in target.y:
                valid.append(cand)
                break
            dy -= 1
    return valid


def search_shots(target: Target) -> tuple[int, int]:
    """Return (highest height of any hit, number of hitting velocities)."""
    max_height = 0
    count = 0
    y_candidates = _y_candidates(target)
    for dx in _x_candidates(target):
        for dy in y_candidates:
            height = fire(dx, dy, target)
            if height is not None:
                count += 1
                max_height = max(max_height, height)
    return max_height, count


def parse_input(text: str) -> Target:
    match = _PATTERN.match(text)
    if match is None:
        raise ValueError(f"malformed target area: {text!r}")
    x0, x1, y0, y1 = (int(g) for g in match.groups())
    return Target(range(x0, x1 + 1), range(y0, y1 + 1))


class Solver:
    """Puzzle solver for the probe launch."""

    def __init__(self, text: str) -> None:
        self.result = search_shots(parse_input(text))

    def part1(self) -> str:
        return str(self.result[0])

    def part2(self) -> str:
        return str(self.result[1])
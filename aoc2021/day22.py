"""Reactor reboot: counting lit cubes after on/off cuboid steps."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

_STEP_RE = re.compile(
    r"^(on|off) x=(-?\d+)\.\.(-?\d+),y=(-?\d+)\.\.(-?\d+),z=(-?\d+)\.\.(-?\d+)$"
)
_INIT_LIMIT = 50

Range = tuple[int, int]
Cuboid = tuple[Range, Range, Range]


@dataclass(frozen=True)
class Step:
    """Turn every cube in an inclusive cuboid on or off."""

    on: bool
    x: Range
    y: Range
    z: Range

    @classmethod
    def parse(cls, line: str) -> Step:
        match = _STEP_RE.match(line)
        if match is None:
            raise ValueError(f"malformed step: {line!r}")
        n = [int(g) for g in match.groups()[1:]]
        return cls(match[1] == "on", (n[0], n[1]), (n[2], n[3]), (n[4], n[5]))

    @property
    def cuboid(self) -> Cuboid:
        return (self.x, self.y, self.z)


def _intersect(a: Cuboid, b: Cuboid) -> Cuboid | None:
    axes = []
    for (a_lo, a_hi), (b_lo, b_hi) in zip(a, b):
        lo, hi = max(a_lo, b_lo), min(a_hi, b_hi)
        if lo > hi:
            return None
        axes.append((lo, hi))
    return (axes[0], axes[1], axes[2])


def _volume(cuboid: Cuboid) -> int:
    volume = 1
    for lo, hi in cuboid:
        volume *= hi - lo + 1
    return volume


def reboot(steps: Iterable[Step]) -> int:
    """Apply the steps in order and return how many cubes are on."""
    # Signed cuboids: overlaps are cancelled out by inclusion-exclusion.
    signed: Counter[Cuboid] = Counter()
    for step in steps:
        box = step.cuboid
        changes: Counter[Cuboid] = Counter()
        for other, sign in signed.items():
            overlap = _intersect(box, other)
            if overlap is not None:
                changes[overlap] -= sign
        if step.on:
            changes[box] += 1
        signed.update(changes)
        signed = Counter({c: s for c, s in signed.items() if s})
    return sum(_volume(c) * s for c, s in signed.items())


def init_steps_only(steps: Iterable[Step]) -> list[Step]:
    """Clip steps to the initialization region (-50..50 on every axis)."""
    lo, hi = -_INIT_LIMIT, _INIT_LIMIT
    clipped = []
    for step in steps:
        if any(a_hi < lo or a_lo > hi for a_lo, a_hi in step.cuboid):
            continue
        x, y, z = ((max(a_lo, lo), min(a_hi, hi)) for a_lo, a_hi in step.cuboid)
        clipped.append(Step(step.on, x, y, z))
    return clipped


def parse_input(text: str) -> list[Step]:
    return [Step.parse(line) for line in text.splitlines()]


class Solver:
    """Puzzle solver for the reactor reboot."""

    def __init__(self, text: str) -> None:
        self.steps = parse_input(text)

    def part1(self) -> str:
        return str(reboot(init_steps_only(self.steps)))

    def part2(self) -> str:
        return str(reboot(self.steps))
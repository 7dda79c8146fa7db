"""Passage pathing: counting routes through a cave system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CaveType(Enum):
    START = "start"
    BIG = "big"
    SMALL = "small"
    END = "end"


@dataclass(frozen=True)
class Cave:
    name: str
    cave_type: CaveType


def _cave_type(name: str) -> CaveType:
    if name == "start":
        return CaveType.START
    if name == "end":
        return CaveType.END
    if not name:
        raise ValueError("empty cave name")
    return CaveType.BIG if name[0].isupper() else CaveType.SMALL


@dataclass
class CaveSystem:
    """Caves indexed by number, with links between them."""

    caves: list[Cave] = field(default_factory=list)
    links: list[list[int]] = field(default_factory=list)

    def add_cave(self, name: str) -> int:
        """Add a cave if it is new; return its index either way."""
        for index, cave in enumerate(self.caves):
            if cave.name == name:
                return index
        self.caves.append(Cave(name, _cave_type(name)))
        self.links.append([])
        return len(self.caves) - 1

    def add_link(self, left: int, right: int) -> None:
        self.links[left].append(right)
        self.links[right].append(left)

    def count_paths(self, path: list[int], revisit: bool) -> int:
        """Count paths to the end continuing from path.

        If revisit is true, one small cave may be visited twice.
        The path list is restored before returning.
        """
        here = path[-1]
        if self.caves[here].cave_type is CaveType.END:
            return 1

        total = 0
        for to in self.links[here]:
            cave_type = self.caves[to].cave_type
            if cave_type is CaveType.START:
                continue
            next_revisit = revisit
            if cave_type is CaveType.SMALL and to in path:
                if not revisit:
                    continue
                next_revisit = False
            path.append(to)
            total += self.count_paths(path, next_revisit)
            path.pop()
        return total


def parse_input(text: str) -> CaveSystem:
    """Parse 'a-b' link lines; the start cave is always index 0."""
    system = CaveSystem()
    system.add_cave("start")
    for line in text.splitlines():
        names = line.split("-")
        if len(names) < 2:
            raise ValueError(f"malformed link: {line!r}")
        system.add_link(system.add_cave(names[0]), system.add_cave(names[1]))
    return system


def part1(system: CaveSystem) -> int:
    return system.count_paths([0], revisit=False)


def part2(system: CaveSystem) -> int:
    return system.count_paths([0], revisit=True)


class Solver:
    """Puzzle solver for the cave paths."""

    def __init__(self, text: str) -> None:
        self.system = parse_input(text)

    def part1(self) -> str:
        return str(part1(self.system))

    def part2(self) -> str:
        return str(part2(self.system))
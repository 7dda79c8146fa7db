"""Seven segment search: decoding scrambled displays."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_EASY_LENGTHS = {2, 3, 4, 7}


def _first(items: Iterable[str]) -> str:
    for item in items:
        return item
    raise ValueError("cannot deduce segment wiring")


@dataclass(frozen=True)
class Entry:
    """Ten unique signal patterns and a four digit output."""

    signals: tuple[str, ...]
    output: tuple[str, ...]

    def count_easy(self) -> int:
        """Count output digits identifiable by length alone (1, 4, 7, 8)."""
        return sum(1 for s in self.output if len(s) in _EASY_LENGTHS)

    def _with_length(self, length: int) -> list[str]:
        return [s for s in self.signals if len(s) == length]

    def value(self) -> int:
        """Deduce the wiring and return the output as a number.

        Segment positions are numbered 0 (top), 1 (top left), 2 (top right),
        3 (middle), 4 (bottom left), 5 (bottom right), 6 (bottom).
        """
        one = _first(self._with_length(2))
        four = _first(self._with_length(4))
        seven = _first(self._with_length(3))
        eight = _first(self._with_length(7))
        len5 = self._with_length(5)
        len6 = self._with_length(6)

        def count_in(words: Sequence[str], c: str) -> int:
            return sum(1 for w in words if c in w)

        pos: dict[int, str] = {}
        pos[0] = _first(c for c in seven if c not in one)
        pos[1] = _first(c for c in four if count_in(len5, c) == 1)
        pos[2] = _first(c for c in one if count_in(len6, c) == 2)
        pos[3] = _first(c for c in four if c not in one and c != pos[1])
        pos[5] = _first(c for c in one if c != pos[2])
        known = set(pos.values())
        remaining = [c for c in eight if c not in known]
        pos[4] = _first(c for c in remaining if count_in(len5, c) == 1)
        pos[6] = _first(c for c in remaining if c != pos[4])

        result = 0
        for digit in self.output:
            result = result * 10 + _decode(pos, digit)
        return result


def _decode(pos: dict[int, str], output: str) -> int:
    length = len(output)
    if length == 7:
        return 8
    if length == 6:
        if pos[3] not in output:
            return 0
        if pos[2] not in output:
            return 6
        return 9
    if length == 5:
        if pos[4] in output:
            return 2
        if pos[1] not in output:
            return 3
        return 5
    if length == 4:
        return 4
    if length == 3:
        return 7
    if length == 2:
        return 1
    raise ValueError(f"invalid digit pattern: {output!r}")


def count_part1(entries: Iterable[Entry]) -> int:
    return sum(entry.count_easy() for entry in entries)


def count_part2(entries: Iterable[Entry]) -> int:
    return sum(entry.value() for entry in entries)


def parse_input(text: str) -> list[Entry]:
    """Parse lines of 'signals | output'."""
    entries = []
    for line in text.splitlines():
        parts = line.split(" | ")
        if len(parts) != 2:
            raise ValueError(f"malformed entry: {line!r}")
        signals, output = parts
        entries.append(Entry(tuple(signals.split(" ")), tuple(output.split(" "))))
    return entries


class Solver:
    """Puzzle solver for the seven segment displays."""

    def __init__(self, text: str) -> None:
        self.entries = parse_input(text)

    def part1(self) -> str:
        return str(count_part1(self.entries))

    def part2(self) -> str:
        return str(count_part2(self.entries))
"""Packet decoder: nested BITS transmissions."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field

_LITERAL = 4


@dataclass(frozen=True)
class Packet:
    version: int
    type_id: int
    literal: int | None = None
    subpackets: tuple[Packet, ...] = field(default_factory=tuple)

    def sum_versions(self) -> int:
        """Sum of this packet's version and every nested packet's version."""
        return self.version + sum(p.sum_versions() for p in self.subpackets)

    def _pair(self) -> tuple[int, int]:
        if len(self.subpackets) < 2:
            raise ValueError("comparison packet needs two subpackets")
        return self.subpackets[0].value(), self.subpackets[1].value()

    def value(self) -> int:
        """Evaluate the expression this packet represents."""
        values = (p.value() for p in self.subpackets)
        if self.type_id == 0:
            return sum(values)
        if self.type_id == 1:
            return math.prod(values)
        if self.type_id == 2:
            return min(values)
        if self.type_id == 3:
            return max(values)
        if self.type_id == _LITERAL:
            if self.literal is None:
                raise ValueError("literal packet has no value")
            return self.literal
        if self.type_id == 5:
            a, b = self._pair()
            return int(a > b)
        if self.type_id == 6:
            a, b = self._pair()
            return int(a < b)
        if self.type_id == 7:
            a, b = self._pair()
            return int(a == b)
        raise ValueError(f"unexpected type id: {self.type_id}")


def _take(size: int, bits: deque[int]) -> int:
    if len(bits) < size:
        raise ValueError("ran out of bits")
    value = 0
    for _ in range(size):
        value = (value << 1) | bits.popleft()
    return value


def parse_packet(bits: deque[int]) -> Packet:
    """Read one packet, with its subpackets, from the front of bits."""
    version = _take(3, bits)
    type_id = _take(3, bits)

    if type_id == _LITERAL:
        number = 0
        while True:
            group = _take(5, bits)
            number = (number << 4) | (group & 0xF)
            if not group & 0x10:
                break
        return Packet(version, type_id, literal=number)

    subpackets = []
    if _take(1, bits) == 0:
        length = _take(15, bits)
        start = len(bits)
        while start - len(bits) < length:
            subpackets.append(parse_packet(bits))
    else:
        count = _take(11, bits)
        subpackets = [parse_packet(bits) for _ in range(count)]
    return Packet(version, type_id, subpackets=tuple(subpackets))


def parse_bits(text: str) -> deque[int]:
    """Turn hex digits into a queue of bits; other characters are ignored."""
    bits: deque[int] = deque()
    for c in text:
        try:
            n = int(c, 16)
        except ValueError:
            continue
        bits.extend((n >> shift) & 1 for shift in (3, 2, 1, 0))
    return bits


def parse_input(text: str) -> Packet:
    return parse_packet(parse_bits(text))


class Solver:
    """Puzzle solver for the BITS transmission."""

    def __init__(self, text: str) -> None:
        self.packet = parse_input(text)

    def part1(self) -> str:
        return str(self.packet.sum_versions())

    def part2(self) -> str:
        return str(self.packet.value())
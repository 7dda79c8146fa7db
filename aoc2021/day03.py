"""Binary diagnostic: gamma, epsilon and life support ratings."""

from __future__ import annotations

from collections.abc import Sequence

_BITS = 16


def _bit_masks():
    return (1 << (_BITS - 1 - n) for n in range(_BITS))


def parse_input(text: str) -> list[int]:
    """Parse one binary number per line."""
    return [int(line, 2) for line in text.splitlines()]


def power_consumption(values: Sequence[int]) -> tuple[int, int]:
    """Return (gamma, epsilon) rates from the most and least common bits."""
    gamma = 0
    epsilon = 0
    half = len(values) // 2
    for mask in _bit_masks():
        count = sum(1 for v in values if v & mask)
        if count > 0:
            if count > half:
                gamma += mask
            else:
                epsilon += mask
    return gamma, epsilon


def _rating(values: Sequence[int], keep_common: bool) -> int:
    remaining = list(values)
    for mask in _bit_masks():
        count = sum(1 for v in remaining if v & mask)
        if count == 0:
            continue
        common_is_one = count * 2 >= len(remaining)
        want_one = common_is_one if keep_common else not common_is_one
        remaining = [v for v in remaining if bool(v & mask) == want_one]
        if len(remaining) == 1:
            return remaining[0]
    return 0


def oxygen_generator_rating(values: Sequence[int]) -> int:
    """Filter by most common bit (ties keep ones); 0 if none isolated."""
    return _rating(values, keep_common=True)


def co2_scrubber_rating(values: Sequence[int]) -> int:
    """Filter by least common bit (ties keep zeros); 0 if none isolated."""
    return _rating(values, keep_common=False)


class Solver:
    """Puzzle solver for the diagnostic report."""

    def __init__(self, text: str) -> None:
        self.values = parse_input(text)

    def part1(self) -> str:
        gamma, epsilon = power_consumption(self.values)
        return str(gamma * epsilon)

    def part2(self) -> str:
        return str(
            oxygen_generator_rating(self.values) * co2_scrubber_rating(self.values)
        )
"""Extended polymerization: pair insertion counted by element pairs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field

_END = "$"

Rules = dict[tuple[str, str], str]


@dataclass
class Polymer:
    """A polymer stored as counts of adjacent element pairs.

    The last element is paired with '$' to mark the end.
    """

    pairs: Counter[tuple[str, str]] = field(default_factory=Counter)

    @classmethod
    def from_template(cls, template: str) -> Polymer:
        pairs: Counter[tuple[str, str]] = Counter(zip(template, template[1:]))
        if template:
            pairs[(template[-1], _END)] = 1
        return cls(pairs)

    def apply(self, rules: Mapping[tuple[str, str], str]) -> Polymer:
        """Return the polymer after one round of insertions."""
        result: Counter[tuple[str, str]] = Counter()
        for (left, right), count in self.pairs.items():
            if right == _END:
                result[(left, right)] = count
                continue
            try:
                inserted = rules[(left, right)]
            except KeyError:
                raise ValueError(f"no rule for {left}{right}") from None
            result[(left, inserted)] += count
            result[(inserted, right)] += count
        return Polymer(result)

    def tally(self) -> Counter[str]:
        """Count of each element."""
        counts: Counter[str] = Counter()
        for (left, _), count in self.pairs.items():
            counts[left] += count
        return counts


def apply_rules(polymer: Polymer, rules: Mapping[tuple[str, str], str], times: int) -> int:
    """Apply the rules (at least once) and return most minus least common count."""
    result = polymer.apply(rules)
    for _ in range(1, times):
        result = result.apply(rules)
    tally = result.tally()
    return max(tally.values()) - min(tally.values())


def parse_input(text: str) -> tuple[Polymer, Rules]:
    """Parse the template, a blank line, then 'AB -> C' rules."""
    polymer = Polymer.from_template("")
    rules: Rules = {}
    in_rules = False
    for line in text.splitlines():
        if not line:
            in_rules = True
        elif not in_rules:
            polymer = Polymer.from_template(line)
        else:
            pair, sep, inserted = line.partition(" -> ")
            if not sep or len(pair) < 2 or not inserted:
                raise ValueError(f"malformed rule: {line!r}")
            rules[(pair[0], pair[1])] = inserted[0]
    return polymer, rules


class Solver:
    """Puzzle solver for the polymer."""

    def __init__(self, text: str) -> None:
        self.polymer, self.rules = parse_input(text)

    def part1(self) -> str:
        return str(apply_rules(self.polymer, self.rules, 10))

    def part2(self) -> str:
        return str(apply_rules(self.polymer, self.rules, 40))
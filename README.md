# aoc2021

Solvers for Advent of Code 2021 puzzles, one module per day.

The package has modules for these days:

`day01`, `day02`, `day03`, `day04`, `day05`, `day06`, `day07`, `day08`,
`day09`, `day11`, `day12`, `day13`, `day14`, `day15`, `day16`, `day17`,
`day19`, `day20`, `day21`, `day22`, `day23`, `day24`.

Every day module has a `Solver` class. Construct it with the text of your
puzzle input, then call `part1()` and `part2()`. Both return the answer as a
string.

```python
from pathlib import Path

from aoc2021.day01 import Solver

solver = Solver(Path("input.txt").read_text())
print(solver.part1())
print(solver.part2())
```

The modules also expose the smaller building blocks that the solvers use, so
you can work with them on their own. For example, day 6 simulates the
lanternfish population directly:

```python
from aoc2021.day06 import parse_input, simulate_population

fish = parse_input("3,4,3,1,2\n")
print(simulate_population(fish, 18))  # 26
```

and day 16 decodes a transmission into a `Packet`:

```python
from aoc2021.day16 import parse_input

packet = parse_input("C200B40A82")
print(packet.value())  # 3
```

Some solvers do their main work when constructed: the day 11, 17 and 19
solvers compute their results in `Solver(...)`, and `part1()` and `part2()`
then report them.

Day 13 part 2 does not return a number: it returns the folded paper drawn
with block characters, one text line per row. Read the letters it shows.

Malformed input raises `ValueError`, except in day 2, where a line with an
unreadable number or direction is reported on standard error and skipped.

## What the package does not do

It has no solver for the days not listed above, and it has no command-line
program or input downloader: you read your puzzle input yourself and pass its
text to a `Solver`.

## Running the tests

```
pip install -e ".[test]"
pytest
```
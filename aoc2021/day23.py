"""Amphipod: cheapest way to sort amphipods into their rooms."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, replace
from typing import Union

_TARGET_COL = {"A": 3, "B": 5, "C": 7, "D": 9}
_MOVE_COST = {"A": 1, "B": 10, "C": 100, "D": 1000}
_HALLWAY_ROW = 1
_ROOM_ENTRANCES = frozenset(_TARGET_COL.values())
_UNFOLDED_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")

# Each row of the grid holds True for open space, False for wall.
Grid = tuple[tuple[bool, ...], ...]


@dataclass(frozen=True, order=True)
class StartRoom:
    row: int
    x: int

    def __repr__(self) -> str:
        return f"StartRoom({self.row}, {self.x})"


@dataclass(frozen=True, order=True)
class Hallway:
    x: int

    def __repr__(self) -> str:
        return f"Hallway({self.x})"


@dataclass(frozen=True, order=True)
class DestRoom:
    row: int

    def __repr__(self) -> str:
        return f"DestRoom({self.row})"


Pos = Union[StartRoom, Hallway, DestRoom]


@dataclass(frozen=True)
class Pod:
    colour: str
    pos: Pos

    @property
    def target_col(self) -> int:
        return _TARGET_COL[self.colour]

    @property
    def in_dest_room(self) -> bool:
        return isinstance(self.pos, DestRoom)

    @property
    def position(self) -> tuple[int, int]:
        """(row, column) on the grid."""
        pos = self.pos
        if isinstance(pos, StartRoom):
            return pos.row, pos.x
        if isinstance(pos, Hallway):
            return _HALLWAY_ROW, pos.x
        return pos.row, self.target_col

    def __repr__(self) -> str:
        return f"{self.colour} at {self.pos!r}"


@dataclass(frozen=True)
class State:
    """Where every amphipod is."""

    pods: tuple[Pod, ...]

    def _with_move(self, index: int, pos: Pos) -> State:
        pods = list(self.pods)
        pods[index] = replace(pods[index], pos=pos)
        return State(tuple(pods))

    def _dest_room_y(self, x: int, positions: list[tuple[int, int]]) -> int | None:
        """Row a pod would settle at in the room in column x, if it may enter."""
        target_y = len(self.pods) // 4 + 1
        for pod, (y, px) in zip(self.pods, positions):
            if px == x:
                if pod.target_col != x:
                    return None
                if y <= target_y:
                    target_y = y - 1
        return target_y

    @staticmethod
    def _hallway_clear(x0: int, x1: int, positions: list[tuple[int, int]]) -> bool:
        lo, hi = min(x0, x1), max(x0, x1)
        return not any(y == _HALLWAY_ROW and lo <= x <= hi for y, x in positions)

    def neighbours(self, grid: Grid) -> list[tuple[State, int]]:
        """States reachable in one move, with the cost of that move."""
        positions = [pod.position for pod in self.pods]
        occupied = set(positions)

        def is_empty(y: int, x: int) -> bool:
            return grid[y][x] and (y, x) not in occupied

        moves = []
        for i, pod in enumerate(self.pods):
            cost = _MOVE_COST[pod.colour]
            nx = pod.target_col
            pos = pod.pos
            if isinstance(pos, StartRoom):
                y, x = pos.row, pos.x
                if any(px == x and py < y for py, px in positions):
                    continue
                ny = self._dest_room_y(nx, positions)
                if self._hallway_clear(x, nx, positions) and ny is not None:
                    moves.append((
                        self._with_move(i, DestRoom(ny)),
                        cost * (y - 1 + abs(x - nx) + ny - 1),
                    ))
                    continue
                for step in (-1, 1):
                    hx = x + step
                    while is_empty(_HALLWAY_ROW, hx):
                        if hx not in _ROOM_ENTRANCES:
                            moves.append((
                                self._with_move(i, Hallway(hx)),
                                cost * (y - 1 + abs(hx - x)),
                            ))
                        hx += step
            elif isinstance(pos, Hallway):
                x = pos.x
                path_clear = (nx > x and self._hallway_clear(x + 1, nx, positions)) or (
                    nx < x and self._hallway_clear(nx, x - 1, positions)
                )
                if path_clear:
                    ny = self._dest_room_y(nx, positions)
                    if ny is not None:
                        moves.append((
                            self._with_move(i, DestRoom(ny)),
                            cost * (abs(x - nx) + ny - 1),
                        ))
        return moves

    def goal_reached(self) -> bool:
        return all(pod.in_dest_room for pod in self.pods)

    def cheapest_path(self, grid: Grid) -> int:
        """Lowest total energy to get every amphipod home."""
        cost_so_far = {self: 0}
        tie = itertools.count()
        frontier = [(0, next(tie), self)]
        while frontier:
            cost, _, current = heapq.heappop(frontier)
            if cost > cost_so_far[current]:
                continue
            if current.goal_reached():
                return cost_so_far[current]
            for nxt, move_cost in current.neighbours(grid):
                new_cost = cost + move_cost
                if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                    cost_so_far[nxt] = new_cost
                    heapq.heappush(frontier, (new_cost, next(tie), nxt))
        raise ValueError("no path found")

    def render(self, grid: Grid) -> str:
        """Draw the burrow, annotating the first rows with pod details."""
        colours = {pod.position: pod.colour for pod in reversed(self.pods)}
        per_row = len(self.pods) // 4
        lines = []
        for rn, row in enumerate(grid):
            line = "".join(
                colours.get((rn, cn), ".") if open_space else "#"
                for cn, open_space in enumerate(row)
            )
            if rn < per_row:
                line += "\t" + "  ".join(
                    f"{n}/{self.pods[n]!r}" for n in range(rn * 4, rn * 4 + 4)
                )
            lines.append(line + "\n")
        return "".join(lines)


def parse_input(text: str) -> tuple[Grid, State]:
    """Parse the burrow; pods already home with nothing foreign below are settled."""
    grid = []
    pods = []
    for y, line in enumerate(text.splitlines()):
        row = []
        for c in line:
            if c in "# ":
                row.append(False)
            elif c == ".":
                row.append(True)
            elif c in _TARGET_COL:
                pods.append(Pod(c, StartRoom(y, len(row))))
                row.append(True)
            else:
                raise ValueError(f"unexpected: {c!r}")
        grid.append(tuple(row))

    for i, pod in enumerate(pods):
        y, x = pod.position
        if x == pod.target_col and not any(
            p.position[0] > y and p.position[1] == x and p.colour != pod.colour
            for p in pods
        ):
            pods[i] = replace(pod, pos=DestRoom(y))

    return tuple(grid), State(tuple(pods))


def unfold_input(text: str) -> str:
    """Insert the two hidden rows after the third line."""
    lines = []
    for i, line in enumerate(text.splitlines()):
        lines.append(line)
        if i == 2:
            lines.extend(_UNFOLDED_ROWS)
    return "".join(line + "\n" for line in lines)


def solve(text: str) -> int:
    grid, state = parse_input(text)
    return state.cheapest_path(grid)


class Solver:
    """Puzzle solver for the amphipod burrow."""

    def __init__(self, text: str) -> None:
        self.text = text

    def part1(self) -> str:
        return str(solve(self.text))

    def part2(self) -> str:
        return str(solve(unfold_input(self.text)))
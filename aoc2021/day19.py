"""Beacon scanner: aligning overlapping 3D scans."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_MATCHES_NEEDED = 12

# For each rotation: (source axis, sign) for the new x, y and z.
_ROTATIONS = (
    ((0, 1), (1, 1), (2, 1)),
    ((0, 1), (2, 1), (1, -1)),
    ((0, 1), (1, -1), (2, -1)),
    ((0, 1), (2, -1), (1, 1)),
    ((1, 1), (0, -1), (2, 1)),
    ((1, 1), (2, 1), (0, 1)),
    ((1, 1), (0, 1), (2, -1)),
    ((1, 1), (2, -1), (0, -1)),
    ((0, -1), (1, -1), (2, 1)),
    ((0, -1), (2, -1), (1, -1)),
    ((0, -1), (1, 1), (2, -1)),
    ((0, -1), (2, 1), (1, 1)),
    ((1, -1), (0, 1), (2, 1)),
    ((1, -1), (2, -1), (0, 1)),
    ((1, -1), (0, -1), (2, -1)),
    ((1, -1), (2, 1), (0, -1)),
    ((2, 1), (1, 1), (0, -1)),
    ((2, 1), (0, 1), (1, 1)),
    ((2, 1), (1, -1), (0, 1)),
    ((2, 1), (0, -1), (1, -1)),
    ((2, -1), (1, -1), (0, -1)),
    ((2, -1), (0, -1), (1, 1)),
    ((2, -1), (1, 1), (0, 1)),
    ((2, -1), (0, 1), (1, -1)),
)


@dataclass(frozen=True)
class Pos:
    x: int
    y: int
    z: int

    @classmethod
    def parse(cls, text: str) -> Pos:
        parts = [int(p) for p in text.split(",")]
        if len(parts) < 3:
            raise ValueError(f"malformed position: {text!r}")
        return cls(parts[0], parts[1], parts[2])

    def rotate(self, rotation: int) -> Pos:
        """Return this position under one of the 24 orientations."""
        if not 0 <= rotation < len(_ROTATIONS):
            raise ValueError(f"invalid rotation: {rotation}")
        coords = (self.x, self.y, self.z)
        return Pos(*(sign * coords[axis] for axis, sign in _ROTATIONS[rotation]))

    def offset(self, by: Pos) -> Pos:
        return Pos(self.x + by.x, self.y + by.y, self.z + by.z)

    def distance(self, other: Pos) -> int:
        """Manhattan distance."""
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def __repr__(self) -> str:
        return f"{self.x},{self.y},{self.z}"


@dataclass(frozen=True)
class Scan:
    number: int
    beacons: tuple[Pos, ...]

    @classmethod
    def parse(cls, text: str) -> Scan:
        number = 0
        beacons = []
        for line in text.splitlines():
            if line.startswith("--- scanner "):
                rest = line[len("--- scanner ") :]
                number = int(rest.split(maxsplit=1)[0] if rest.strip() else rest)
            else:
                beacons.append(Pos.parse(line))
        return cls(number, tuple(beacons))

    def __str__(self) -> str:
        return f"scanner {self.number} (sees {len(self.beacons)} beacons)"


@dataclass(frozen=True)
class _RotatedBeacons:
    scan_number: int
    rotation: int
    beacons: tuple[Pos, ...]


def parse_input(text: str) -> list[Scan]:
    return [Scan.parse(block) for block in text.split("\n\n")]


def _match_beacons(rotated: _RotatedBeacons, known: set[Pos]) -> Pos | None:
    """Return the scanner position if enough beacons line up with known ones."""
    # If no match is found before only eleven candidates remain, none can be.
    for beacon in rotated.beacons[: len(rotated.beacons) - (_MATCHES_NEEDED - 1)]:
        for target in known:
            offset = Pos(target.x - beacon.x, target.y - beacon.y, target.z - beacon.z)
            count = 0
            for b in rotated.beacons:
                if b.offset(offset) in known:
                    count += 1
                    if count == _MATCHES_NEEDED:
                        return offset
    return None


def search(scans: Sequence[Scan]) -> tuple[set[Pos], list[Pos]]:
    """Return every beacon and every scanner position, relative to scan 0."""
    if not scans:
        raise ValueError("no scans")
    beacons = set(scans[0].beacons)
    scanners = [Pos(0, 0, 0) for _ in scans]

    queue = deque(
        _RotatedBeacons(
            scan.number, rot, tuple(p.rotate(rot) for p in scan.beacons)
        )
        for scan in scans[1:]
        for rot in range(len(_ROTATIONS))
    )
    known: list[set[Pos]] = [set(scans[0].beacons)]

    misses = 0
    while queue:
        rotated = queue.popleft()
        for known_set in known:
            scanner_pos = _match_beacons(rotated, known_set)
            if scanner_pos is not None:
                placed = {p.offset(scanner_pos) for p in rotated.beacons}
                beacons |= placed
                known.append(placed)
                scanners[rotated.scan_number] = scanner_pos
                queue = deque(
                    rb for rb in queue if rb.scan_number != rotated.scan_number
                )
                misses = 0
                break
        else:
            queue.append(rotated)
            misses += 1
            if misses > len(queue):
                raise ValueError("some scans do not overlap any placed scan")

    return beacons, scanners


def max_distance(scanners: Iterable[Pos]) -> int:
    """Largest Manhattan distance between any two scanners."""
    positions = list(scanners)
    return max(
        (a.distance(b) for i, a in enumerate(positions) for b in positions[i + 1 :]),
        default=0,
    )


class Solver:
    """Puzzle solver for the beacon scanners."""

    def __init__(self, text: str) -> None:
        self.beacons, self.scanners = search(parse_input(text))

    def part1(self) -> str:
        return str(len(self.beacons))

    def part2(self) -> str:
        return str(max_distance(self.scanners))
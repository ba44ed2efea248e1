"""Hex grid primitives for the territory game."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple


class Direction(str, Enum):
    NORTH = "north"
    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"

    @property
    def delta(self) -> tuple[int, int]:
        return DIRECTION_DELTAS[self]

    @property
    def ordinal(self) -> int:
        return DIRECTIONS.index(self)

    @property
    def opposite(self) -> Direction:
        return self.rotated(3)

    def rotated(self, steps: int = 1) -> Direction:
        """Rotate clockwise by *steps* sixths of a turn (negative = counter-clockwise)."""
        return DIRECTIONS[(self.ordinal + steps) % len(DIRECTIONS)]


# Clockwise, starting at North. Weight lists are indexed in this order.
DIRECTIONS: list[Direction] = [
    Direction.NORTH,
    Direction.NORTH_EAST,
    Direction.SOUTH_EAST,
    Direction.SOUTH,
    Direction.SOUTH_WEST,
    Direction.NORTH_WEST,
]

# Axial (q, r) deltas
DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.NORTH_EAST: (1, -1),
    Direction.SOUTH_EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.SOUTH_WEST: (-1, 1),
    Direction.NORTH_WEST: (-1, 0),
}


class HexCoord(NamedTuple):
    """Axial coordinate of a hex cell."""

    q: int
    r: int

    def neighbor(self, direction: Direction) -> HexCoord:
        dq, dr = DIRECTION_DELTAS[direction]
        return HexCoord(self.q + dq, self.r + dr)

    def neighbors(self) -> list[HexCoord]:
        return [self.neighbor(d) for d in DIRECTIONS]

    def distance(self, other: HexCoord) -> int:
        dq = self.q - other.q
        dr = self.r - other.r
        return (abs(dq) + abs(dr) + abs(dq + dr)) // 2

    def scaled(self, factor: int) -> HexCoord:
        return HexCoord(self.q * factor, self.r * factor)

    @property
    def key(self) -> str:
        return hex_to_key(self.q, self.r)


ORIGIN = HexCoord(0, 0)


def hex_to_key(q: int, r: int) -> str:
    return f"{q},{r}"


def key_to_hex(key: str) -> HexCoord:
    q, r = key.split(",")
    return HexCoord(int(q), int(r))


def hex_region(radius: int) -> Iterator[HexCoord]:
    """Yield every coordinate of the hexagon of the given radius (3R²+3R+1 cells)."""
    for q in range(-radius, radius + 1):
        for r in range(-radius, radius + 1):
            if abs(q + r) <= radius:
                yield HexCoord(q, r)


def region_size(radius: int) -> int:
    return 3 * radius * radius + 3 * radius + 1

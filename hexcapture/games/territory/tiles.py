"""Tiles and the fixed-shape grid that stores them.

``TileGrid`` is the storage capability shared by the main ``Board`` and by
auxiliary boards such as ``DirectionPreview``; both hold a grid rather than
inheriting from one another.
"""

from __future__ import annotations

from typing import Iterator

from hexcapture.engine.models import Player
from hexcapture.games.territory.types import HexCoord, hex_region


class Tile:
    """A single hex cell: neutral, a wall, or owned by one player."""

    __slots__ = ("_coord", "owner", "is_wall")

    def __init__(self, coord: HexCoord) -> None:
        self._coord = coord
        self.owner: Player | None = None
        self.is_wall = False

    @property
    def coord(self) -> HexCoord:
        return self._coord

    def is_neutral(self) -> bool:
        return self.owner is None and not self.is_wall

    def build_wall(self) -> None:
        """Turn a neutral tile into a wall. Ignored for owned or walled tiles."""
        if self.is_neutral():
            self.is_wall = True

    def capture(self, player: Player) -> bool:
        """Claim this tile for *player* if it is neutral. Returns True on capture."""
        if not self.is_neutral():
            return False
        self.owner = player
        return True

    def force_capture(self, player: Player) -> None:
        """Claim unconditionally, knocking down any wall. Spawn placement only."""
        self.owner = player
        self.is_wall = False

    def clear(self) -> None:
        self.owner = None

    def is_owned_by(self, player: Player) -> bool:
        return self.owner is not None and self.owner.player_id == player.player_id

    def __repr__(self) -> str:
        if self.is_wall:
            state = "wall"
        elif self.owner is not None:
            state = f"owner={self.owner.player_id}"
        else:
            state = "neutral"
        return f"Tile({self._coord.q},{self._coord.r} {state})"


class TileGrid:
    """One ``Tile`` per coordinate of a hexagon of the given radius."""

    def __init__(self, radius: int) -> None:
        if radius < 0:
            raise ValueError(f"Radius must be nonnegative, got {radius}")
        self.radius = radius
        self._tiles: dict[HexCoord, Tile] = {
            coord: Tile(coord) for coord in hex_region(radius)
        }

    def get(self, coord: HexCoord) -> Tile | None:
        """Return the tile at *coord*, or None when it lies off the grid."""
        return self._tiles.get(coord)

    def tiles(self) -> list[Tile]:
        return list(self._tiles.values())

    def coords(self) -> list[HexCoord]:
        return list(self._tiles.keys())

    def clear(self) -> None:
        for tile in self._tiles.values():
            tile.clear()

    def __contains__(self, coord: object) -> bool:
        return coord in self._tiles

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def __len__(self) -> int:
        return len(self._tiles)

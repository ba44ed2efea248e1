"""Small direction-selector board shown next to the main board."""

from __future__ import annotations

from hexcapture.engine.models import Player
from hexcapture.games.territory.tiles import TileGrid
from hexcapture.games.territory.types import ORIGIN, Direction, HexCoord


class DirectionPreview:
    """A radius-1 grid highlighting the centre and one neighbour.

    Rebuilt on every ``show`` call; walls are never placed here.
    """

    def __init__(self) -> None:
        self.grid = TileGrid(1)
        self.direction: Direction | None = None

    def show(self, player: Player, direction: Direction) -> None:
        self.grid.clear()
        for coord in (ORIGIN, ORIGIN.neighbor(direction)):
            tile = self.grid.get(coord)
            if tile is not None:
                tile.force_capture(player)
        self.direction = direction

    def reset(self) -> None:
        self.grid.clear()
        self.direction = None

    def highlighted(self) -> HexCoord | None:
        if self.direction is None:
            return None
        return ORIGIN.neighbor(self.direction)

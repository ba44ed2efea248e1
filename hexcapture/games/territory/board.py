"""Board state for the territory game.

The board owns a ``TileGrid`` for its radius. Players grow their territory by
picking a direction: every neutral tile lying one step in that direction from
a tile they own is captured at once.
"""

from __future__ import annotations

import random

from hexcapture.engine.errors import NoSpaceAvailableError
from hexcapture.engine.models import Player
from hexcapture.games.territory.tiles import Tile, TileGrid
from hexcapture.games.territory.types import DIRECTIONS, Direction, HexCoord


class Board:
    def __init__(
        self,
        radius: int,
        wall_density: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= wall_density <= 1.0:
            raise ValueError(f"Wall density must be within [0, 1], got {wall_density}")
        self.grid = TileGrid(radius)
        self.wall_density = wall_density
        self._rng = rng or random.Random()

        # Walls go down before anyone spawns, so they never overwrite a capture
        if wall_density > 0.0:
            for tile in self.grid:
                if self._rng.random() < wall_density:
                    tile.build_wall()

    @property
    def radius(self) -> int:
        return self.grid.radius

    @property
    def tile_count(self) -> int:
        return len(self.grid)

    def get_tile(self, coord: HexCoord) -> Tile | None:
        return self.grid.get(coord)

    def neighbor_tile(self, tile: Tile, direction: Direction) -> Tile | None:
        return self.grid.get(tile.coord.neighbor(direction))

    # ── Queries ──

    def tiles_owned_by(self, player: Player) -> list[Tile]:
        return [tile for tile in self.grid if tile.is_owned_by(player)]

    def neutral_tiles(self) -> list[Tile]:
        return [tile for tile in self.grid if tile.is_neutral()]

    def wall_count(self) -> int:
        return sum(1 for tile in self.grid if tile.is_wall)

    def num_tiles_owned_by(self, player: Player) -> int:
        return len(self.tiles_owned_by(player))

    def _capture_targets(self, player: Player, direction: Direction) -> list[Tile]:
        """Neutral tiles one step in *direction* from the player's territory.

        Computed from the current state in one pass, so callers that capture
        the result never chain through tiles claimed in the same move.
        """
        targets: dict[HexCoord, Tile] = {}
        for tile in self.tiles_owned_by(player):
            neighbor = self.neighbor_tile(tile, direction)
            if neighbor is not None and neighbor.is_neutral():
                targets[neighbor.coord] = neighbor
        return list(targets.values())

    def capture_weight(self, player: Player, direction: Direction) -> int:
        """Number of tiles *player* would capture by moving in *direction*."""
        return len(self._capture_targets(player, direction))

    def capture_weights(self, player: Player) -> list[int]:
        """Capture weight for every direction, in ``DIRECTIONS`` order."""
        return [self.capture_weight(player, d) for d in DIRECTIONS]

    def has_legal_moves(self, player: Player) -> bool:
        return any(self.capture_weight(player, d) > 0 for d in DIRECTIONS)

    # ── Mutations ──

    def capture_tiles(self, player: Player, direction: Direction) -> list[HexCoord]:
        """Capture every target in *direction* simultaneously.

        Returns the captured coordinates; the count always equals
        ``capture_weight(player, direction)`` measured just before the call.
        """
        captured: list[HexCoord] = []
        for tile in self._capture_targets(player, direction):
            if tile.capture(player):
                captured.append(tile.coord)
        return captured

    def spawn(self, player: Player, coord: HexCoord) -> bool:
        """Place *player* on a neutral tile. False (and no effect) otherwise."""
        tile = self.grid.get(coord)
        if tile is None:
            return False
        return tile.capture(player)

    def force_spawn(self, player: Player, coord: HexCoord) -> bool:
        """Place *player* at *coord* even over a wall.

        Refuses (returns False) when the tile is off the board or already
        belongs to another player.
        """
        tile = self.grid.get(coord)
        if tile is None:
            return False
        if tile.owner is not None and not tile.is_owned_by(player):
            return False
        tile.force_capture(player)
        return True

    def spawn_random(self, player: Player, rng: random.Random | None = None) -> HexCoord:
        """Place *player* on a uniformly chosen neutral tile."""
        candidates = self.neutral_tiles()
        if not candidates:
            raise NoSpaceAvailableError(
                f"No neutral tile left to spawn {player.player_id} "
                f"on a radius-{self.radius} board"
            )
        tile = (rng or self._rng).choice(candidates)
        tile.capture(player)
        return tile.coord

    def clear(self) -> None:
        """Return every tile to unowned. Walls stay."""
        self.grid.clear()

    # ── Views ──

    def to_view(self) -> dict:
        """JSON-friendly snapshot for renderers."""
        return {
            "radius": self.radius,
            "tiles": [
                {
                    "q": tile.coord.q,
                    "r": tile.coord.r,
                    "owner": tile.owner.player_id if tile.owner is not None else None,
                    "wall": tile.is_wall,
                }
                for tile in self.grid
            ],
        }

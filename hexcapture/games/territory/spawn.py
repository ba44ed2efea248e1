"""Initial placement of players on a fresh board."""

from __future__ import annotations

import random

from hexcapture.engine.errors import InvalidConfigurationError
from hexcapture.engine.models import Player, SpawnMode
from hexcapture.games.territory.board import Board
from hexcapture.games.territory.types import DIRECTIONS, ORIGIN, HexCoord


def fair_spawn_coords(radius: int, count: int) -> list[HexCoord]:
    """Corner positions spread evenly around the hexagon for *count* players.

    Two players get opposite corners, three get every other corner, six get
    all of them.
    """
    if count < 1 or count > len(DIRECTIONS):
        raise ValueError(f"Fair spawn supports 1-{len(DIRECTIONS)} players, got {count}")
    corners = [ORIGIN.neighbor(d).scaled(radius) for d in DIRECTIONS]
    return [corners[i * len(DIRECTIONS) // count] for i in range(count)]


def place_players(
    board: Board,
    players: list[Player],
    mode: SpawnMode,
    rng: random.Random | None = None,
) -> dict[str, HexCoord]:
    """Give each player their first tile. Returns player_id -> spawn coordinate."""
    placements: dict[str, HexCoord] = {}

    if mode == SpawnMode.FAIR:
        if board.radius == 0 and len(players) > 1:
            raise InvalidConfigurationError(
                "Fair spawn needs a board radius of at least 1 for several players"
            )
        for player, coord in zip(players, fair_spawn_coords(board.radius, len(players))):
            board.force_spawn(player, coord)
            placements[player.player_id] = coord
    else:
        for player in players:
            placements[player.player_id] = board.spawn_random(player, rng)

    return placements

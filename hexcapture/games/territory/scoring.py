"""Scoring for the territory game (one point per owned tile)."""

from __future__ import annotations

from hexcapture.engine.models import Player
from hexcapture.games.territory.board import Board


def count_owned_tiles(board: Board, players: list[Player]) -> dict[str, int]:
    """Return {player_id: number_of_owned_tiles}."""
    counts: dict[str, int] = {p.player_id: 0 for p in players}
    for tile in board.grid:
        if tile.owner is not None and tile.owner.player_id in counts:
            counts[tile.owner.player_id] += 1
    return counts


def determine_winners(scores: dict[str, int]) -> list[str]:
    """All player ids sharing the highest score (several on a tie)."""
    if not scores:
        return []
    best = max(scores.values())
    return [pid for pid, score in scores.items() if score == best]

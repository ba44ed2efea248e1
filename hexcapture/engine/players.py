from __future__ import annotations

import logging

from hexcapture.engine.errors import InvalidConfigurationError
from hexcapture.engine.models import Color, Player, PlayerId, PlayerKind

logger = logging.getLogger(__name__)

DEFAULT_PALETTE: tuple[Color, ...] = (
    Color(name="red", red=255, green=0, blue=0),
    Color(name="green", red=0, green=160, blue=0),
    Color(name="blue", red=0, green=0, blue=255),
    Color(name="yellow", red=230, green=200, blue=0),
    Color(name="magenta", red=200, green=0, blue=200),
    Color(name="cyan", red=0, green=180, blue=200),
)


class PlayerRegistry:
    """Hands out unique colours to the players of one game session."""

    def __init__(self, palette: tuple[Color, ...] = DEFAULT_PALETTE) -> None:
        if len({c.name for c in palette}) != len(palette):
            raise ValueError("Palette colour names must be unique")
        self._palette = palette
        self._players: dict[str, Player] = {}  # colour name -> player
        self._next_seat = 0

    @property
    def capacity(self) -> int:
        return len(self._palette)

    def available_colors(self) -> list[Color]:
        return [c for c in self._palette if c.name not in self._players]

    def active_players(self) -> list[Player]:
        return sorted(self._players.values(), key=lambda p: p.seat_index)

    def allocate(
        self,
        kind: PlayerKind,
        bot_id: str | None = None,
        display_name: str | None = None,
    ) -> Player:
        available = self.available_colors()
        if not available:
            raise InvalidConfigurationError(
                f"All {self.capacity} player colours are in use"
            )
        color = available[0]
        seat = self._next_seat
        self._next_seat += 1
        player = Player(
            player_id=PlayerId(f"p{seat}"),
            display_name=display_name or color.name.capitalize(),
            seat_index=seat,
            color=color,
            kind=kind,
            bot_id=bot_id if kind == PlayerKind.AI else None,
        )
        self._players[color.name] = player
        logger.debug("Allocated %s (%s) as %s", player.player_id, color.name, kind.value)
        return player

    def release(self, player: Player) -> None:
        current = self._players.get(player.color.name)
        if current is None or current.player_id != player.player_id:
            raise KeyError(f"Player {player.player_id} is not registered")
        del self._players[player.color.name]

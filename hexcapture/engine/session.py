from __future__ import annotations

import logging
import random

from hexcapture.engine.bot_strategy import DirectionStrategy, get_strategy
from hexcapture.engine.errors import InvalidConfigurationError
from hexcapture.engine.models import GameConfig, Player, PlayerKind
from hexcapture.engine.players import DEFAULT_PALETTE, PlayerRegistry
from hexcapture.engine.scheduler import TurnScheduler
from hexcapture.games.territory.board import Board
from hexcapture.games.territory.spawn import place_players
from hexcapture.games.territory.types import Direction, HexCoord

logger = logging.getLogger(__name__)


def validate_config(config: GameConfig, palette_size: int = len(DEFAULT_PALETTE)) -> list[str]:
    """Return a list of problems with *config* (empty when it is playable)."""
    errors: list[str] = []
    if config.num_humans < 0:
        errors.append(f"num_humans must be >= 0, got {config.num_humans}")
    if config.num_ai < 0:
        errors.append(f"num_ai must be >= 0, got {config.num_ai}")
    total = config.total_players
    if total < 1:
        errors.append("At least one player (human or AI) is required")
    elif total > palette_size:
        errors.append(
            f"{total} players requested but only {palette_size} colours are available"
        )
    if config.radius < 1:
        errors.append(f"radius must be a positive integer, got {config.radius}")
    if not 0.0 <= config.wall_density <= 1.0:
        errors.append(f"wall_density must be within [0, 1], got {config.wall_density}")
    return errors


class GameSession:
    """
    Owns one game: players, board and scheduler built from a GameConfig.

    The session is the seam the presentation layer talks to. It never sleeps
    or schedules anything; bots move only when asked.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config or GameConfig()
        self.games_played = 0
        self._strategies: dict[str, DirectionStrategy] = {}
        self._start()

    def _start(self) -> None:
        errors = validate_config(self.config, len(DEFAULT_PALETTE))
        if errors:
            raise InvalidConfigurationError(errors)

        self.rng = random.Random(self.config.random_seed)
        self.registry = PlayerRegistry()
        for _ in range(self.config.num_humans):
            self.registry.allocate(PlayerKind.HUMAN)
        for _ in range(self.config.num_ai):
            self.registry.allocate(PlayerKind.AI, bot_id=self.config.ai_strategy)
        self.players: list[Player] = self.registry.active_players()

        self.board = Board(self.config.radius, self.config.wall_density, rng=self.rng)
        self.spawns: dict[str, HexCoord] = place_players(
            self.board, self.players, self.config.spawn_mode, self.rng
        )
        self.scheduler = TurnScheduler(self.board, self.players)
        self._strategies.clear()

        logger.info(
            "New game: %d humans, %d AI, radius=%d, walls=%d, spawn=%s",
            self.config.num_humans, self.config.num_ai, self.config.radius,
            self.board.wall_count(), self.config.spawn_mode.value,
        )

    def new_game(self, config: GameConfig | None = None) -> None:
        """Discard the board and scheduler and start over."""
        if config is not None:
            self.config = config
        self.games_played += 1
        self._start()

    # ------------------------------------------------------------------ #
    #  Turn helpers
    # ------------------------------------------------------------------ #

    def current_player(self) -> Player:
        return self.scheduler.current_player()

    def is_game_over(self) -> bool:
        return self.scheduler.is_game_over()

    def is_ai_turn(self) -> bool:
        return not self.is_game_over() and self.current_player().is_ai

    def attempt_capture(self, direction: Direction) -> bool:
        return self.scheduler.attempt_capture(direction)

    def strategy_for(self, player: Player) -> DirectionStrategy:
        """The cached strategy instance driving an AI player."""
        bot_id = player.bot_id or self.config.ai_strategy
        if player.player_id not in self._strategies:
            seed = self.rng.randrange(2**32)
            self._strategies[player.player_id] = get_strategy(bot_id, seed=seed)
            logger.debug("Created strategy %s for %s", bot_id, player.player_id)
        return self._strategies[player.player_id]

    def suggest_direction(
        self,
        player: Player | None = None,
        strategy: DirectionStrategy | None = None,
    ) -> Direction | None:
        player = player or self.current_player()
        strategy = strategy or self.strategy_for(player)
        return strategy.choose_direction(self.board, player)

    def play_ai_turn(self, strategy: DirectionStrategy | None = None) -> Direction | None:
        """Let the current AI player move. Returns the direction played."""
        if not self.is_ai_turn():
            return None
        direction = self.suggest_direction(strategy=strategy)
        if direction is None:
            return None
        self.scheduler.select_direction(direction)
        self.scheduler.confirm()
        return direction

    def run_until_human_or_over(self, max_turns: int = 10_000) -> int:
        """Play AI moves until a human is up or the game ends. Returns moves made."""
        moves = 0
        while moves < max_turns and self.is_ai_turn():
            if self.play_ai_turn() is None:
                break
            moves += 1
        return moves

"""BotTurnDriver: paces AI moves against the presentation layer's clock."""

from __future__ import annotations

import logging
from enum import Enum

from hexcapture.config import settings
from hexcapture.engine.bot_strategy import DirectionStrategy
from hexcapture.engine.models import PlayerId
from hexcapture.engine.scheduler import TurnScheduler
from hexcapture.engine.session import GameSession
from hexcapture.games.territory.types import Direction

logger = logging.getLogger(__name__)


class BotPhase(str, Enum):
    IDLE = "idle"
    THINKING = "thinking"
    DECIDING = "deciding"
    COMMITTED = "committed"


class BotTurnDriver:
    """Runs AI turns as IDLE -> THINKING(n) -> DECIDING -> COMMITTED.

    The host calls ``tick()`` once per frame. The direction is drawn exactly
    once, on entering DECIDING, and shown through the scheduler's selection
    until the move is committed on the following tick. How many ticks the
    bot "thinks" has no influence on which direction it picks.

    A turn in progress belongs to one player of one scheduler. If that
    player's move is made some other way, or ``new_game()`` swaps the
    scheduler, the next tick drops the stale turn instead of committing it.
    """

    def __init__(
        self,
        session: GameSession,
        think_ticks: int | None = None,
        strategy: DirectionStrategy | None = None,
    ) -> None:
        self.session = session
        self.think_ticks = settings.bot_think_ticks if think_ticks is None else think_ticks
        if self.think_ticks < 0:
            raise ValueError(f"think_ticks must be >= 0, got {self.think_ticks}")
        self.strategy = strategy
        self.phase = BotPhase.IDLE
        self.ticks_remaining = 0
        self.pending: Direction | None = None
        self._scheduler: TurnScheduler | None = None
        self._player_id: PlayerId | None = None
        self._events_seen = 0

    def tick(self) -> Direction | None:
        """Advance one step. Returns the direction when a move is committed."""
        scheduler = self.session.scheduler
        if scheduler.paused:
            return None
        if not self.session.is_ai_turn():
            self._reset()
            return None

        player_id = self.session.current_player().player_id
        if self.phase != BotPhase.IDLE and not self._owns_turn(scheduler, player_id):
            # The turn was played elsewhere or the game was replaced
            logger.debug("Dropping stale %s turn for %s", self.phase.value, self._player_id)
            self._reset()
            return None

        if self.phase == BotPhase.IDLE:
            self.phase = BotPhase.THINKING
            self.ticks_remaining = self.think_ticks
            self._scheduler = scheduler
            self._player_id = player_id
            self._events_seen = len(scheduler.events)
            logger.debug("%s starts thinking", player_id)

        if self.phase == BotPhase.THINKING:
            if self.ticks_remaining > 0:
                self.ticks_remaining -= 1
                return None
            self.phase = BotPhase.DECIDING

        if self.phase == BotPhase.DECIDING:
            self.pending = self.session.suggest_direction(strategy=self.strategy)
            if self.pending is None:
                self._reset()
                return None
            scheduler.select_direction(self.pending)
            self.phase = BotPhase.COMMITTED
            return None

        # COMMITTED
        direction = self.pending
        self._reset()
        if direction is not None and scheduler.attempt_capture(direction):
            logger.debug("%s committed %s", player_id, direction.value)
            return direction
        return None

    def _owns_turn(self, scheduler: TurnScheduler, player_id: PlayerId) -> bool:
        return (
            self._scheduler is scheduler
            and self._player_id == player_id
            and self._events_seen == len(scheduler.events)
        )

    def _reset(self) -> None:
        self.phase = BotPhase.IDLE
        self.ticks_remaining = 0
        self.pending = None
        self._scheduler = None
        self._player_id = None
        self._events_seen = 0

"""TurnScheduler: turn order, skipping and game-over detection."""

from __future__ import annotations

import logging

from hexcapture.engine.errors import GameNotActiveError, InvalidConfigurationError
from hexcapture.engine.models import Event, GameResult, GameStatus, Player, PlayerId
from hexcapture.games.territory.board import Board
from hexcapture.games.territory.scoring import count_owned_tiles, determine_winners
from hexcapture.games.territory.types import Direction

logger = logging.getLogger(__name__)


class TurnScheduler:
    """
    Drives turns over a shared Board.

    Invariant: whenever the game is ACTIVE, the current player has at least
    one legal move. Players without moves are skipped; once nobody can move
    the game is FINISHED and scores are frozen.

    Pausing is a flag for drivers only; it never blocks ``attempt_capture``.
    """

    def __init__(self, board: Board, players: list[Player]) -> None:
        if not players:
            raise InvalidConfigurationError("At least one player is required")
        ids = [p.player_id for p in players]
        if len(set(ids)) != len(ids):
            raise InvalidConfigurationError(f"Duplicate player ids: {ids}")

        self.board = board
        self.players: tuple[Player, ...] = tuple(players)
        self.current_index = 0
        self.turn_number = 0
        self.paused = False
        self.selected_direction = Direction.NORTH
        self.status = GameStatus.ACTIVE
        self.events: list[Event] = []
        self._result: GameResult | None = None

        first = self.current_player()
        if not self.board.has_legal_moves(first):
            self._record_skip(first)
            self._seek_movable_player(len(self.players) - 1)

    # ------------------------------------------------------------------ #
    #  Queries
    # ------------------------------------------------------------------ #

    def current_player(self) -> Player:
        return self.players[self.current_index]

    def is_game_over(self) -> bool:
        return self.status == GameStatus.FINISHED

    @property
    def result(self) -> GameResult | None:
        return self._result

    def scores(self) -> dict[PlayerId, int]:
        """Tile counts per player (frozen once the game is over)."""
        if self._result is not None:
            return {PlayerId(pid): n for pid, n in self._result.final_scores.items()}
        return {
            PlayerId(pid): n
            for pid, n in count_owned_tiles(self.board, list(self.players)).items()
        }

    def winners(self) -> list[Player]:
        """Players sharing the top score; empty while the game is running."""
        if self._result is None:
            return []
        winner_ids = set(self._result.winners)
        return [p for p in self.players if p.player_id in winner_ids]

    # ------------------------------------------------------------------ #
    #  Turn handling
    # ------------------------------------------------------------------ #

    def attempt_capture(self, direction: Direction) -> bool:
        """
        Play the current player's move in *direction*.

        Returns False with no state change when the direction captures
        nothing; the driver should ask for another direction.
        """
        if self.is_game_over():
            raise GameNotActiveError("The game is over")

        player = self.current_player()
        if self.board.capture_weight(player, direction) == 0:
            logger.debug(
                "Rejected %s for %s: nothing to capture", direction.value, player.player_id
            )
            return False

        captured = self.board.capture_tiles(player, direction)
        self.events.append(
            Event(
                event_type="capture",
                player_id=player.player_id,
                turn_number=self.turn_number,
                payload={
                    "direction": direction.value,
                    "captured": [c.key for c in captured],
                },
            )
        )
        logger.debug(
            "Turn %d: %s captured %d tiles going %s",
            self.turn_number, player.player_id, len(captured), direction.value,
        )
        self.advance()
        return True

    def advance(self) -> None:
        """Move to the next player who can still capture, or end the game."""
        if self.is_game_over():
            return
        self._seek_movable_player(len(self.players))

    def _seek_movable_player(self, max_steps: int) -> None:
        # Bounded by one full cycle, so this always terminates
        for _ in range(max_steps):
            self._step()
            player = self.current_player()
            if self.board.has_legal_moves(player):
                self.selected_direction = Direction.NORTH
                return
            self._record_skip(player)

        self._finish()

    def _record_skip(self, player: Player) -> None:
        self.events.append(
            Event(
                event_type="skip",
                player_id=player.player_id,
                turn_number=self.turn_number,
            )
        )
        logger.debug("Skipping %s: no legal moves", player.player_id)

    def _step(self) -> None:
        self.current_index = (self.current_index + 1) % len(self.players)
        if self.current_index == 0:
            self.turn_number += 1

    def _finish(self) -> None:
        final_scores = count_owned_tiles(self.board, list(self.players))
        winners = determine_winners(final_scores)
        self._result = GameResult(
            winners=[PlayerId(pid) for pid in winners],
            final_scores=final_scores,
            reason="draw" if len(winners) > 1 else "normal",
            turn_number=self.turn_number,
        )
        self.status = GameStatus.FINISHED
        self.events.append(
            Event(
                event_type="game_over",
                turn_number=self.turn_number,
                payload={"winners": list(winners), "scores": final_scores},
            )
        )
        logger.info(
            "Game over after %d turns: winners=%s scores=%s",
            self.turn_number, winners, final_scores,
        )

    # ------------------------------------------------------------------ #
    #  Direction selection (driver helpers)
    # ------------------------------------------------------------------ #

    def select_direction(self, direction: Direction) -> None:
        self.selected_direction = direction

    def rotate_selection(self, steps: int = 1) -> Direction:
        self.selected_direction = self.selected_direction.rotated(steps)
        return self.selected_direction

    def confirm(self) -> bool:
        """Commit the currently selected direction for the current player."""
        return self.attempt_capture(self.selected_direction)

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

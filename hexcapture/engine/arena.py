"""Bot-vs-Bot arena: run N games between strategies and report results."""

from __future__ import annotations

import logging
import math
import statistics
import time
from dataclasses import dataclass, field
from typing import Callable

from hexcapture.engine.bot_strategy import DirectionStrategy
from hexcapture.engine.models import GameConfig, GameResult, SpawnMode
from hexcapture.engine.session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class ArenaResult:
    """Territory statistics gathered over an arena run.

    ``tile_counts`` holds the final tile count of each strategy per game and
    ``tile_shares`` the same count as a fraction of all tiles claimed in that
    game, which stays comparable across board sizes and wall densities.
    ``seat_wins[i]`` counts outright wins by whoever sat in seat ``i``.
    """

    num_games: int
    wins: dict[str, int]
    draws: int = 0
    tile_counts: dict[str, list[int]] = field(default_factory=dict)
    tile_shares: dict[str, list[float]] = field(default_factory=dict)
    seat_wins: list[int] = field(default_factory=list)
    moves_per_game: list[int] = field(default_factory=list)
    game_durations_ms: list[float] = field(default_factory=list)

    def win_rate(self, name: str) -> float:
        return self.wins.get(name, 0) / max(self.num_games, 1)

    def draw_rate(self) -> float:
        return self.draws / max(self.num_games, 1)

    def seat_win_rate(self, seat: int) -> float:
        if seat >= len(self.seat_wins):
            return 0.0
        return self.seat_wins[seat] / max(self.num_games, 1)

    def mean_tiles(self, name: str) -> float:
        counts = self.tile_counts.get(name, [])
        return statistics.fmean(counts) if counts else 0.0

    def tiles_stddev(self, name: str) -> float:
        counts = self.tile_counts.get(name, [])
        return statistics.stdev(counts) if len(counts) > 1 else 0.0

    def mean_share(self, name: str) -> float:
        shares = self.tile_shares.get(name, [])
        return statistics.fmean(shares) if shares else 0.0

    def confidence_interval_95(self, name: str) -> tuple[float, float]:
        """95% Wilson score interval for the win rate of *name*."""
        n = self.num_games
        if n == 0:
            return (0.0, 0.0)
        p = self.win_rate(name)
        z = 1.96
        denom = 1 + z**2 / n
        center = (p + z**2 / (2 * n)) / denom
        margin = z * math.sqrt((p * (1 - p) + z**2 / (4 * n)) / n) / denom
        return (max(0.0, center - margin), min(1.0, center + margin))

    def summary(self) -> str:
        lines = [f"Arena Results ({self.num_games} games)", "=" * 60]
        for name in self.wins:
            lo, hi = self.confidence_interval_95(name)
            lines.append(
                f"  {name:>12s}: {self.wins[name]:3d} wins ({self.win_rate(name):5.1%}) "
                f"[95% CI: {lo:.1%}-{hi:.1%}]  "
                f"tiles={self.mean_tiles(name):5.1f} +/- {self.tiles_stddev(name):4.1f}  "
                f"share={self.mean_share(name):5.1%}"
            )
        lines.append(f"  {'Draws':>12s}: {self.draws} ({self.draw_rate():.1%})")
        if self.seat_wins:
            seats = "  ".join(
                f"seat {i}: {self.seat_win_rate(i):.1%}" for i in range(len(self.seat_wins))
            )
            lines.append(f"  {'By seat':>12s}: {seats}")
        if self.moves_per_game:
            lines.append(f"  Avg moves per game: {statistics.fmean(self.moves_per_game):.1f}")
        if self.game_durations_ms:
            lines.append(
                f"  Avg game: {statistics.fmean(self.game_durations_ms):.0f}ms  |  "
                f"Total: {sum(self.game_durations_ms) / 1000:.1f}s"
            )
        return "\n".join(lines)

def run_arena(
    strategies: dict[str, DirectionStrategy],
    num_games: int = 100,
    base_seed: int = 0,
    radius: int = 4,
    wall_density: float = 0.1,
    spawn_mode: SpawnMode = SpawnMode.FAIR,
    alternate_seats: bool = True,
    progress_callback: Callable[[int, int], None] | None = None,
) -> ArenaResult:
    """Run *num_games* between the given strategies and return aggregated stats.

    Parameters
    ----------
    strategies:
        Mapping of ``strategy_name -> DirectionStrategy``; one seat each.
    num_games:
        How many games to play.
    base_seed:
        Game *i* uses ``random_seed = base_seed + i``.
    alternate_seats:
        Rotate seat assignments each game so every strategy plays
        each seat equally.
    progress_callback:
        Called with ``(games_completed, total_games)`` after each game.
    """
    strategy_names = list(strategies.keys())
    num_players = len(strategy_names)
    if num_players < 1:
        raise ValueError("Need at least one strategy")

    result = ArenaResult(
        num_games=num_games,
        wins={n: 0 for n in strategy_names},
        tile_counts={n: [] for n in strategy_names},
        tile_shares={n: [] for n in strategy_names},
        seat_wins=[0] * num_players,
    )
    logger.info("Arena: %s, %d games", " vs ".join(strategy_names), num_games)

    for game_idx in range(num_games):
        seed = base_seed + game_idx

        # Determine seat assignment
        if alternate_seats:
            seat_assignment = [
                strategy_names[(i + game_idx) % num_players]
                for i in range(num_players)
            ]
        else:
            seat_assignment = strategy_names[:num_players]

        config = GameConfig(
            num_humans=0,
            num_ai=num_players,
            radius=radius,
            wall_density=wall_density,
            spawn_mode=spawn_mode,
            random_seed=seed,
        )

        t0 = time.monotonic()
        session = GameSession(config)
        seats = {p.player_id: p.seat_index for p in session.players}
        pid_to_name = {pid: seat_assignment[seat] for pid, seat in seats.items()}
        game_result = _play_one_game(session, pid_to_name, strategies)
        result.game_durations_ms.append((time.monotonic() - t0) * 1000)
        result.moves_per_game.append(
            sum(1 for e in session.scheduler.events if e.event_type == "capture")
        )

        # Every player keeps at least their spawn tile, so this is never zero
        claimed = sum(game_result.final_scores.values())
        for pid, tiles in game_result.final_scores.items():
            name = pid_to_name[pid]
            result.tile_counts[name].append(tiles)
            result.tile_shares[name].append(tiles / claimed)

        if len(game_result.winners) == 1:
            winner = game_result.winners[0]
            result.wins[pid_to_name[winner]] += 1
            result.seat_wins[seats[winner]] += 1
        else:
            result.draws += 1
        logger.debug(
            "Game %d (seed %d): scores=%s winners=%s",
            game_idx, seed, game_result.final_scores, game_result.winners,
        )

        if progress_callback:
            progress_callback(game_idx + 1, num_games)

    return result


def _play_one_game(
    session: GameSession,
    pid_to_name: dict[str, str],
    strategies: dict[str, DirectionStrategy],
) -> GameResult:
    """Play a single all-bot game to the end."""
    # Every move claims at least one tile, so this bounds the game length
    max_moves = session.board.tile_count
    for _ in range(max_moves):
        if session.is_game_over():
            break
        strategy = strategies[pid_to_name[session.current_player().player_id]]
        if session.play_ai_turn(strategy) is None:
            raise RuntimeError(
                f"Strategy {pid_to_name[session.current_player().player_id]!r} "
                "returned no direction for a player with legal moves"
            )

    result = session.scheduler.result
    if result is None:
        raise RuntimeError(f"Game did not finish within {max_moves} moves")
    return result

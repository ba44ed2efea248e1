"""Bot strategy abstraction: maps bot_id strings to direction-selection callables."""

from __future__ import annotations

import logging
import random as _random
from typing import Callable, Protocol, Sequence

from hexcapture.engine.models import Player
from hexcapture.games.territory.board import Board
from hexcapture.games.territory.types import DIRECTIONS, Direction

logger = logging.getLogger(__name__)


def select_weighted_bucket(
    weights: Sequence[int], rng: _random.Random | None = None
) -> int | None:
    """Pick an index with probability proportional to its weight.

    Returns None when every weight is zero.
    """
    if any(w < 0 for w in weights):
        raise ValueError(f"Weights must be nonnegative, got {list(weights)}")

    cumulative: list[int] = []
    total = 0
    for w in weights:
        total += w
        cumulative.append(total)
    if total == 0:
        return None

    draw = (rng or _random).randrange(total)
    for i, bound in enumerate(cumulative):
        if draw < bound:
            return i
    return None  # unreachable: draw < total == cumulative[-1]


class DirectionStrategy(Protocol):
    """A bot strategy picks the direction to expand in for the given player."""

    def choose_direction(self, board: Board, player: Player) -> Direction | None:
        """Return a direction with nonzero capture weight, or None if there is none."""
        ...


class WeightedCaptureStrategy:
    """Picks a direction with probability proportional to the tiles it captures."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_direction(self, board: Board, player: Player) -> Direction | None:
        weights = board.capture_weights(player)
        idx = select_weighted_bucket(weights, self._rng)
        if idx is None:
            return None
        logger.debug(
            "Weighted draw for %s: weights=%s -> %s",
            player.player_id, weights, DIRECTIONS[idx].value,
        )
        return DIRECTIONS[idx]


class RandomStrategy:
    """Picks uniformly among directions that capture at least one tile."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_direction(self, board: Board, player: Player) -> Direction | None:
        legal = [d for d in DIRECTIONS if board.capture_weight(player, d) > 0]
        if not legal:
            return None
        return self._rng.choice(legal)


class GreedyStrategy:
    """Always takes the biggest capture; ties broken at random."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def choose_direction(self, board: Board, player: Player) -> Direction | None:
        weights = board.capture_weights(player)
        best = max(weights)
        if best == 0:
            return None
        return self._rng.choice([d for d, w in zip(DIRECTIONS, weights) if w == best])


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_STRATEGY_FACTORIES: dict[str, Callable[..., DirectionStrategy]] = {
    "weighted": lambda seed=None, **_kwargs: WeightedCaptureStrategy(seed=seed),
    "random": lambda seed=None, **_kwargs: RandomStrategy(seed=seed),
    "greedy": lambda seed=None, **_kwargs: GreedyStrategy(seed=seed),
}


def get_strategy(bot_id: str, **kwargs: object) -> DirectionStrategy:
    """Create a DirectionStrategy instance for the given *bot_id*."""
    factory = _STRATEGY_FACTORIES.get(bot_id)
    if factory is None:
        raise ValueError(f"Unknown bot_id: {bot_id!r}")
    return factory(**kwargs)


def register_strategy(
    bot_id: str, factory: Callable[..., DirectionStrategy]
) -> None:
    """Register a new strategy factory."""
    _STRATEGY_FACTORIES[bot_id] = factory


def available_strategies() -> list[str]:
    return sorted(_STRATEGY_FACTORIES)

from __future__ import annotations

import pytest

from hexcapture.engine.models import Player, PlayerId, PlayerKind
from hexcapture.engine.players import DEFAULT_PALETTE


def make_player(seat: int, kind: PlayerKind = PlayerKind.HUMAN) -> Player:
    """Build a player directly, bypassing the registry."""
    return Player(
        player_id=PlayerId(f"p{seat}"),
        display_name=f"P{seat}",
        seat_index=seat,
        color=DEFAULT_PALETTE[seat],
        kind=kind,
        bot_id="weighted" if kind == PlayerKind.AI else None,
    )


@pytest.fixture
def player_factory():
    return make_player


@pytest.fixture
def alice() -> Player:
    return make_player(0)


@pytest.fixture
def bob() -> Player:
    return make_player(1)


@pytest.fixture
def carol() -> Player:
    return make_player(2)

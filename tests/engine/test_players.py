"""Tests for colour allocation."""

import pytest

from hexcapture.engine.errors import InvalidConfigurationError
from hexcapture.engine.models import Color, PlayerKind
from hexcapture.engine.players import DEFAULT_PALETTE, PlayerRegistry


def test_default_palette_has_six_unique_colours():
    assert len(DEFAULT_PALETTE) == 6
    assert len({c.name for c in DEFAULT_PALETTE}) == 6


def test_allocate_assigns_unique_colours_and_seats():
    registry = PlayerRegistry()
    players = [registry.allocate(PlayerKind.HUMAN) for _ in range(3)]

    assert [p.seat_index for p in players] == [0, 1, 2]
    assert [p.player_id for p in players] == ["p0", "p1", "p2"]
    assert len({p.color for p in players}) == 3
    assert registry.active_players() == players


def test_ai_players_carry_bot_id():
    registry = PlayerRegistry()
    human = registry.allocate(PlayerKind.HUMAN, bot_id="weighted")
    bot = registry.allocate(PlayerKind.AI, bot_id="weighted")
    assert human.bot_id is None
    assert not human.is_ai
    assert bot.bot_id == "weighted"
    assert bot.is_ai


def test_exhausted_palette_raises():
    registry = PlayerRegistry()
    for _ in range(registry.capacity):
        registry.allocate(PlayerKind.AI)
    assert registry.available_colors() == []
    with pytest.raises(InvalidConfigurationError):
        registry.allocate(PlayerKind.HUMAN)


def test_release_frees_colour():
    registry = PlayerRegistry()
    first = registry.allocate(PlayerKind.HUMAN)
    registry.allocate(PlayerKind.HUMAN)
    registry.release(first)

    assert first.color in registry.available_colors()
    again = registry.allocate(PlayerKind.AI)
    assert again.color == first.color
    assert again.player_id != first.player_id


def test_release_unknown_player_raises():
    registry = PlayerRegistry()
    other = PlayerRegistry().allocate(PlayerKind.HUMAN)
    with pytest.raises(KeyError):
        registry.release(other)


def test_registries_are_independent():
    a = PlayerRegistry()
    b = PlayerRegistry()
    for _ in range(a.capacity):
        a.allocate(PlayerKind.HUMAN)
    assert len(b.available_colors()) == b.capacity


def test_custom_palette():
    palette = (
        Color(name="black", red=0, green=0, blue=0),
        Color(name="white", red=255, green=255, blue=255),
    )
    registry = PlayerRegistry(palette)
    assert registry.capacity == 2
    assert registry.allocate(PlayerKind.HUMAN).display_name == "Black"


def test_duplicate_palette_names_rejected():
    red = DEFAULT_PALETTE[0]
    with pytest.raises(ValueError):
        PlayerRegistry((red, red))

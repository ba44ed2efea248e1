"""Tests for engine models and settings."""

import pydantic
import pytest

from hexcapture.config import Settings, settings
from hexcapture.engine.models import (
    Color,
    Event,
    GameConfig,
    GameResult,
    Player,
    PlayerId,
    PlayerKind,
    SpawnMode,
)

RED = Color(name="red", red=255, green=0, blue=0)


def test_color_string():
    assert str(RED) == "rgb(255,0,0)"


def test_player_equality_by_value():
    a = Player(player_id=PlayerId("p0"), display_name="A", seat_index=0, color=RED)
    b = Player(player_id=PlayerId("p0"), display_name="A", seat_index=0, color=RED)
    assert a == b
    assert hash(a) == hash(b)
    assert a.kind == PlayerKind.HUMAN


def test_player_identity_is_the_player_id():
    a = Player(player_id=PlayerId("p0"), display_name="A", seat_index=0, color=RED)
    renamed = a.model_copy(update={"display_name": "Renamed"})
    other = Player(player_id=PlayerId("p1"), display_name="A", seat_index=0, color=RED)

    assert renamed == a
    assert hash(renamed) == hash(a)
    assert len({a, renamed}) == 1
    assert a != other
    assert a != "p0"


def test_player_is_frozen():
    p = Player(player_id=PlayerId("p0"), display_name="A", seat_index=0, color=RED)
    with pytest.raises(pydantic.ValidationError):
        p.display_name = "B"


def test_player_kind_tag():
    bot = Player(
        player_id=PlayerId("p1"), display_name="Bot", seat_index=1,
        color=RED, kind=PlayerKind.AI, bot_id="weighted",
    )
    assert bot.is_ai
    assert bot.model_dump()["kind"] == "ai"


def test_game_config_defaults_come_from_settings():
    config = GameConfig()
    assert config.radius == settings.default_radius
    assert config.wall_density == settings.default_wall_density
    assert config.spawn_mode == SpawnMode(settings.default_spawn_mode)
    assert config.ai_strategy == settings.default_ai_strategy
    assert config.total_players == 2


def test_game_config_parses_spawn_mode_string():
    config = GameConfig(spawn_mode="random")
    assert config.spawn_mode == SpawnMode.RANDOM


def test_event_and_result_serialise():
    event = Event(event_type="capture", player_id=PlayerId("p0"), payload={"captured": ["0,1"]})
    result = GameResult(winners=[PlayerId("p0")], final_scores={"p0": 4, "p1": 3})
    assert event.model_dump()["payload"] == {"captured": ["0,1"]}
    assert result.reason == "normal"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("HEXCAPTURE_DEFAULT_RADIUS", "8")
    monkeypatch.setenv("HEXCAPTURE_BOT_THINK_TICKS", "3")
    s = Settings()
    assert s.default_radius == 8
    assert s.bot_think_ticks == 3

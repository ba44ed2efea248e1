"""Tests for the tick-driven bot turn state machine."""

from __future__ import annotations

import pytest

from hexcapture.engine.bot_runner import BotPhase, BotTurnDriver
from hexcapture.engine.models import GameConfig, SpawnMode
from hexcapture.engine.session import GameSession


def _session(
    num_humans: int = 0, num_ai: int = 2, seed: int = 5, walls: float = 0.1
) -> GameSession:
    return GameSession(
        GameConfig(
            num_humans=num_humans, num_ai=num_ai, radius=3, wall_density=walls,
            spawn_mode=SpawnMode.FAIR, random_seed=seed,
        )
    )


def test_negative_think_ticks_rejected() -> None:
    with pytest.raises(ValueError):
        BotTurnDriver(_session(), think_ticks=-1)


def test_default_think_ticks_from_settings(monkeypatch) -> None:
    from hexcapture.engine import bot_runner

    monkeypatch.setattr(bot_runner.settings, "bot_think_ticks", 4)
    assert BotTurnDriver(_session()).think_ticks == 4


def test_phase_sequence() -> None:
    session = _session()
    driver = BotTurnDriver(session, think_ticks=2)
    mover = session.current_player()

    assert driver.tick() is None
    assert driver.phase == BotPhase.THINKING
    assert driver.ticks_remaining == 1
    assert driver.tick() is None
    assert driver.ticks_remaining == 0

    assert driver.tick() is None
    assert driver.phase == BotPhase.COMMITTED
    assert driver.pending is not None
    assert session.scheduler.selected_direction == driver.pending
    assert session.current_player() == mover

    pending = driver.pending
    assert driver.tick() == pending
    assert driver.phase == BotPhase.IDLE
    assert session.current_player() != mover
    captures = [e for e in session.scheduler.events if e.event_type == "capture"]
    assert captures[-1].player_id == mover.player_id
    assert captures[-1].payload["direction"] == pending.value


def test_zero_think_ticks_commits_on_second_tick() -> None:
    driver = BotTurnDriver(_session(), think_ticks=0)
    assert driver.tick() is None
    assert driver.tick() is not None


def test_human_turn_keeps_driver_idle() -> None:
    session = _session(num_humans=1, num_ai=1)
    driver = BotTurnDriver(session, think_ticks=0)
    for _ in range(3):
        assert driver.tick() is None
    assert driver.phase == BotPhase.IDLE
    assert session.current_player().player_id == "p0"


def test_pause_freezes_progress() -> None:
    session = _session()
    driver = BotTurnDriver(session, think_ticks=3)
    driver.tick()
    remaining = driver.ticks_remaining

    session.scheduler.pause()
    for _ in range(10):
        assert driver.tick() is None
    assert driver.phase == BotPhase.THINKING
    assert driver.ticks_remaining == remaining

    session.scheduler.resume()
    driver.tick()
    assert driver.ticks_remaining == remaining - 1


@pytest.mark.parametrize("think_ticks", [1, 7])
def test_think_time_does_not_change_the_pick(think_ticks: int) -> None:
    quick = BotTurnDriver(_session(seed=11), think_ticks=0)
    slow = BotTurnDriver(_session(seed=11), think_ticks=think_ticks)

    quick_moves = [quick.tick() for _ in range(2)]
    slow_moves = [slow.tick() for _ in range(think_ticks + 2)]

    assert quick_moves[-1] is not None
    assert quick_moves[-1] == slow_moves[-1]


def test_driver_plays_an_all_ai_game_to_the_end() -> None:
    session = _session(num_ai=3)
    driver = BotTurnDriver(session, think_ticks=1)
    commits = 0
    for _ in range(session.board.tile_count * 3 + 3):
        if session.is_game_over():
            break
        if driver.tick() is not None:
            commits += 1

    assert session.is_game_over()
    assert commits == sum(1 for e in session.scheduler.events if e.event_type == "capture")
    assert driver.tick() is None


def _captures_by(session: GameSession, player_id: str) -> int:
    return sum(
        1 for e in session.scheduler.events
        if e.event_type == "capture" and e.player_id == player_id
    )


@pytest.mark.parametrize("seed", range(6))
def test_turn_played_elsewhere_is_not_committed_for_next_player(seed: int) -> None:
    session = _session(seed=seed, walls=0.0)
    driver = BotTurnDriver(session, think_ticks=0)
    first = session.current_player()

    assert driver.tick() is None
    assert driver.phase == BotPhase.COMMITTED

    session.play_ai_turn()
    second = session.current_player()
    assert second != first

    assert driver.tick() is None
    assert driver.phase == BotPhase.IDLE
    assert _captures_by(session, second.player_id) == 0

    # The next player's own turn then runs normally
    assert driver.tick() is None
    assert driver.tick() is not None
    assert _captures_by(session, second.player_id) == 1


def test_same_player_moved_elsewhere_is_not_committed_twice() -> None:
    session = _session(num_ai=1, walls=0.0)
    driver = BotTurnDriver(session, think_ticks=0)
    driver.tick()
    assert driver.phase == BotPhase.COMMITTED

    session.play_ai_turn()
    assert session.current_player().player_id == "p0"

    assert driver.tick() is None
    assert _captures_by(session, "p0") == 1


def test_new_game_mid_commit_drops_the_pending_move() -> None:
    session = _session()
    driver = BotTurnDriver(session, think_ticks=0)
    driver.tick()
    assert driver.phase == BotPhase.COMMITTED

    session.new_game(
        GameConfig(
            num_humans=0, num_ai=2, radius=1, wall_density=0.0,
            spawn_mode=SpawnMode.FAIR, random_seed=99,
        )
    )

    assert driver.tick() is None
    assert driver.phase == BotPhase.IDLE
    assert session.scheduler.events == []

    driver.tick()
    direction = driver.pending
    assert driver.tick() == direction
    assert session.scheduler.events[0].payload["direction"] == direction.value

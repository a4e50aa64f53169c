import pytest

from pipinghot.game import AppState, GameSession, PipeGameState, WarmupTimer
from pipinghot.level import Level, LevelData


def make_level():
    return Level("levels/1-1.tmx", "First", 0.0, LevelData(size=(1, 1), tiles=[0]))


def test_default_states():
    assert AppState.default() is AppState.LOADING_ASSETS
    assert PipeGameState.default() is PipeGameState.WARMUP


def test_timer_finishes_once():
    timer = WarmupTimer(1.0)
    assert timer.tick(0.5) is False
    assert timer.finished is False
    assert timer.tick(0.5) is True
    assert timer.finished is True
    assert timer.tick(0.5) is False
    assert timer.elapsed == 1.0


def test_timer_overshoot_clamps():
    timer = WarmupTimer(1.0)
    assert timer.tick(3.0) is True
    assert timer.elapsed == timer.duration


def test_timer_rejects_negative_delta():
    with pytest.raises(ValueError):
        WarmupTimer().tick(-0.1)


def test_session_warmup_then_prepare():
    session = GameSession(make_level())
    assert session.state is PipeGameState.WARMUP
    assert session.update(0.4) is PipeGameState.WARMUP
    assert session.update(0.6) is PipeGameState.PREPARE
    assert session.update(5.0) is PipeGameState.PREPARE


def test_session_scene():
    session = GameSession(make_level())
    kinds = {obj.kind: obj for obj in session.scene}
    assert kinds["camera"].position == (0.0, 15.0, 5.0)
    assert kinds["light"].position == (4.0, 10.0, 8.0)
    assert all(obj.looking_at == (0.0, 0.0, 0.0) for obj in session.scene)


def test_session_close():
    with GameSession(make_level()) as session:
        assert session.level.name == "First"
    assert session.scene == []
    assert session.timer is None
    assert session.update(2.0) is None
"""Shared fixtures for Connect Four tests."""

import pytest

from connect_four.core.bus import EventBus
from connect_four.core.config import reset_settings
from connect_four.game.engine import GameEngine

from .helpers import EventRecorder


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for key in ("GAME_HEIGHT", "GAME_WIDTH", "GAME_WIN_LENGTH",
                "PLAYER_ONE_COLOR", "PLAYER_TWO_COLOR", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder(bus):
    return EventRecorder(bus)


@pytest.fixture
def engine(bus, recorder):
    engine = GameEngine(bus=bus)
    engine.new_game()
    recorder.clear()
    return engine

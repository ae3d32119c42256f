"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from connect_four.core.config import GameSettings, Settings, get_settings, reset_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert (settings.game.height, settings.game.width) == (6, 7)
        assert settings.game.win_length == 4
        assert settings.players.one_color == "red"
        assert settings.players.two_color == "yellow"
        assert settings.log.level == "WARNING"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("GAME_WIDTH", "9")
        monkeypatch.setenv("PLAYER_TWO_COLOR", "green")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        settings = Settings()
        assert settings.game.width == 9
        assert settings.players.two_color == "green"
        assert settings.log.level == "DEBUG"

    @pytest.mark.parametrize("key, value", [
        ("GAME_HEIGHT", "0"),
        ("GAME_WIDTH", "-3"),
        ("GAME_WIN_LENGTH", "1"),
    ])
    def test_invalid_values_rejected(self, monkeypatch, key, value):
        monkeypatch.setenv(key, value)
        with pytest.raises(ValidationError):
            GameSettings()

    def test_get_settings_is_cached_until_reset(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("GAME_HEIGHT", "4")
        assert get_settings().game.height == 6

        reset_settings()
        assert get_settings().game.height == 4

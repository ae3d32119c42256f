"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation. Everything here is fixed at
game construction; there is no mid-game reconfiguration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# MODE ENUMS
# ─────────────────────────────────────────────────────────────


class LogLevel(str, Enum):
    """Logging level names accepted by the CLI and LOG_LEVEL."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class GameSettings(BaseSettings):
    """Board dimensions and line length."""

    model_config = SettingsConfigDict(env_prefix="GAME_")

    height: int = Field(default=6, ge=1, description="Number of rows")
    width: int = Field(default=7, ge=1, description="Number of columns")
    win_length: int = Field(default=4, ge=2, description="Pieces in a row to win")


class PlayerSettings(BaseSettings):
    """Display attributes of the two players."""

    model_config = SettingsConfigDict(env_prefix="PLAYER_")

    one_color: str = "red"
    two_color: str = "yellow"


class LogSettings(BaseSettings):
    """Logging configuration (applied by the CLI only)."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: LogLevel = LogLevel.WARNING


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    game: GameSettings = Field(default_factory=GameSettings)
    players: PlayerSettings = Field(default_factory=PlayerSettings)
    log: LogSettings = Field(default_factory=LogSettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (cached)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings cache (for testing)."""
    global _settings
    _settings = None

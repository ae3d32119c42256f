"""Core infrastructure for the Connect Four engine."""

from .bus import EventBus
from .config import (
    GameSettings,
    LogLevel,
    LogSettings,
    PlayerSettings,
    Settings,
    get_settings,
    reset_settings,
)
from .errors import ConnectFourError, GameNotStartedError, InvalidColumnError
from .events import Event, EventType
from .types import (
    Cell,
    GameState,
    GameStatus,
    Move,
    MoveOutcome,
    MoveResult,
    Player,
    PlayerId,
    Position,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "GameSettings",
    "PlayerSettings",
    "LogLevel",
    "LogSettings",
    # Errors
    "ConnectFourError",
    "InvalidColumnError",
    "GameNotStartedError",
    # Types
    "Cell",
    "PlayerId",
    "Player",
    "Position",
    "Move",
    "MoveOutcome",
    "MoveResult",
    "GameStatus",
    "GameState",
    # Events
    "Event",
    "EventType",
    "EventBus",
]

"""Connect Four rules engine and turn loop."""

from .core import (
    EventBus,
    EventType,
    GameStatus,
    InvalidColumnError,
    MoveOutcome,
    Player,
    PlayerId,
)
from .game import Board, Connect4Rules, GameEngine


__version__ = "0.1.0"

__all__ = [
    "Board",
    "Connect4Rules",
    "EventBus",
    "EventType",
    "GameEngine",
    "GameStatus",
    "InvalidColumnError",
    "MoveOutcome",
    "Player",
    "PlayerId",
]

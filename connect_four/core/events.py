"""
Event definitions for the Connect Four engine.

The rules core publishes events without knowing who consumes them.
Renderers subscribe to the ones they care about.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    """Types of events emitted by the engine."""

    GAME_STARTED = auto()
    PIECE_PLACED = auto()  # data: row, column, player
    TURN_CHANGED = auto()  # data: player, turn
    GAME_WON = auto()  # data: player, positions
    GAME_TIED = auto()
    GAME_RESET = auto()


@dataclass
class Event:
    """
    Base event structure.

    Attributes:
        type: The type of event
        data: Event-specific payload
        timestamp: When the event was created
        source: Which module created the event
    """

    type: EventType
    data: Any = None
    timestamp: float = field(default_factory=time.time)
    source: str = "unknown"

    def __str__(self) -> str:
        return f"[{self.source}] {self.type.name}: {self.data}"

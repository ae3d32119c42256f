"""Game logic module for Connect Four."""

from .board import Board
from .engine import GameEngine
from .rules import DIRECTIONS, Connect4Rules


__all__ = [
    "Board",
    "Connect4Rules",
    "DIRECTIONS",
    "GameEngine",
]

"""Exceptions raised by the Connect Four engine.

Ordinary invalid moves (full column, game already over) are not errors;
the engine ignores them and reports MoveOutcome.IGNORED.
"""


class ConnectFourError(Exception):
    """Base class for engine errors."""


class InvalidColumnError(ConnectFourError, ValueError):
    """A column index outside the board was supplied."""

    def __init__(self, column: int, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Invalid column {column}, must be 0-{width - 1}")


class GameNotStartedError(ConnectFourError, RuntimeError):
    """A move was attempted before new_game() was called."""

    def __init__(self) -> None:
        super().__init__("Game not started. Call new_game() first.")

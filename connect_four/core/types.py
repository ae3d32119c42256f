"""
Shared data types for the Connect Four engine.

These types are the contracts between the rules core and its consumers.
The render layer only ever sees these structures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from ..game.board import Board


# ─────────────────────────────────────────────────────────────
# PLAYERS
# ─────────────────────────────────────────────────────────────


class PlayerId(IntEnum):
    """Player identifier stored in board cells."""

    ONE = 1
    TWO = 2

    def __str__(self) -> str:
        return str(self.value)

    @property
    def other(self) -> PlayerId:
        """The opponent."""
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE


@dataclass(frozen=True)
class Player:
    """A player and their display color. No behavior."""

    id: PlayerId
    color: str

    def __str__(self) -> str:
        return self.color


# A cell is either empty (None) or holds the id of the player occupying it.
Cell = PlayerId | None


# ─────────────────────────────────────────────────────────────
# GAME STATUS
# ─────────────────────────────────────────────────────────────


class GameStatus(Enum):
    """Lifecycle of a single game."""

    IN_PROGRESS = auto()
    WON = auto()  # Terminal
    TIED = auto()  # Terminal

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class MoveOutcome(Enum):
    """What a call to play_move did."""

    IGNORED = auto()  # Full column or game already over
    CONTINUE = auto()  # Piece placed, turn passed to the opponent
    WON = auto()
    TIED = auto()


# ─────────────────────────────────────────────────────────────
# BOARD COORDINATES & MOVES
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top
    col: int  # 0 = left


@dataclass(frozen=True)
class Move:
    """A placed piece."""

    column: int
    player: PlayerId
    position: Position

    def __str__(self) -> str:
        return f"Player {self.player.value} → Column {self.column}"


@dataclass(frozen=True)
class MoveResult:
    """Result of a single play_move call, returned to the caller."""

    outcome: MoveOutcome
    move: Move | None = None
    winning_positions: tuple[Position, ...] = ()

    @property
    def applied(self) -> bool:
        """True if a piece was written to the board."""
        return self.outcome is not MoveOutcome.IGNORED


# ─────────────────────────────────────────────────────────────
# GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass
class GameState:
    """Complete state of one game.

    Owns the board and the terminal status. Players are shared value records.
    """

    board: Board
    players: tuple[Player, Player]
    current_player: PlayerId = PlayerId.ONE
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: PlayerId | None = None
    winning_positions: list[Position] = field(default_factory=list)
    move_history: list[Move] = field(default_factory=list)
    turn_number: int = 1

    def player(self, player_id: PlayerId) -> Player:
        """Look up the Player record for an id."""
        return self.players[player_id - 1]

    @property
    def active(self) -> Player:
        return self.player(self.current_player)

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def copy(self) -> GameState:
        """Create a copy of the game state with its own board."""
        return GameState(
            board=self.board.copy(),
            players=self.players,
            current_player=self.current_player,
            status=self.status,
            winner=self.winner,
            winning_positions=self.winning_positions.copy(),
            move_history=self.move_history.copy(),
            turn_number=self.turn_number,
        )

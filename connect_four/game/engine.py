"""Game engine for Connect Four turn sequencing."""

from __future__ import annotations

import logging
import threading
from collections import deque

from ..core.bus import EventBus
from ..core.config import Settings
from ..core.errors import GameNotStartedError, InvalidColumnError
from ..core.events import Event, EventType
from ..core.types import (
    GameState,
    GameStatus,
    Move,
    MoveOutcome,
    MoveResult,
    Player,
    PlayerId,
    Position,
)
from .board import Board
from .rules import Connect4Rules


logger = logging.getLogger(__name__)

SOURCE = "game_engine"

DEFAULT_PLAYERS = (Player(PlayerId.ONE, "red"), Player(PlayerId.TWO, "yellow"))


class GameEngine:
    """Manages game state and enforces rules.

    Stateful engine that:
    - Owns the current game state
    - Validates and applies moves
    - Detects wins/ties
    - Emits events for state changes

    Each engine owns exactly one game at a time; there is no shared state
    between engines unless a bus is passed in explicitly.
    """

    def __init__(
        self,
        height: int = 6,
        width: int = 7,
        players: tuple[Player, Player] = DEFAULT_PLAYERS,
        rules: Connect4Rules | None = None,
        bus: EventBus | None = None,
    ):
        """Initialize game engine.

        Args:
            height: Number of board rows
            width: Number of board columns
            players: Player records for ids 1 and 2, in that order
            rules: Game rules (uses defaults if None)
            bus: Event bus (a private one is created if None)
        """
        if [p.id for p in players] != [PlayerId.ONE, PlayerId.TWO]:
            raise ValueError("players must be ordered (PlayerId.ONE, PlayerId.TWO)")

        self.height = height
        self.width = width
        self.players = players
        self.rules = rules or Connect4Rules()
        self.bus = bus or EventBus()
        self._state: GameState | None = None
        # Held from applying a change until its events are delivered, so
        # subscribers see changes in commit order. Reentrant so handlers
        # may submit the next move.
        self._lock = threading.RLock()
        self._pending: deque[Event] = deque()
        self._dispatching = False

    @classmethod
    def from_settings(cls, settings: Settings, bus: EventBus | None = None) -> GameEngine:
        """Build an engine from application settings."""
        players = (
            Player(PlayerId.ONE, settings.players.one_color),
            Player(PlayerId.TWO, settings.players.two_color),
        )
        return cls(
            height=settings.game.height,
            width=settings.game.width,
            players=players,
            rules=Connect4Rules(win_length=settings.game.win_length),
            bus=bus,
        )

    def new_game(self) -> GameState:
        """Start a new game with an empty board and player 1 to move.

        Returns:
            Initial game state
        """
        with self._lock:
            state = GameState(
                board=Board(self.height, self.width),
                players=self.players,
            )
            self._state = state
            logger.info("New %dx%d game started", self.height, self.width)
            self._publish([self._event(EventType.GAME_STARTED, {
                "height": self.height,
                "width": self.width,
                "players": self.players,
            })])
        return state

    def play_move(self, column: int) -> MoveResult:
        """Drop the active player's piece in ``column``.

        Args:
            column: Column to drop piece in

        Returns:
            What happened. IGNORED means nothing changed and nothing was
            published (game already over, or column full).

        A move submitted by an event handler is applied immediately, but its
        events are delivered after those of the move being dispatched.

        Raises:
            GameNotStartedError: If new_game() has not been called
            InvalidColumnError: If column is outside the board
        """
        with self._lock:
            result, events = self._apply_move(column)
            self._publish(events)
        return result

    def _apply_move(self, column: int) -> tuple[MoveResult, list[Event]]:
        state = self._state
        if state is None:
            raise GameNotStartedError()
        if not state.board.is_valid_column(column):
            raise InvalidColumnError(column, state.board.width)

        if state.is_over:
            logger.debug("Ignoring column %d: game is over", column)
            return MoveResult(MoveOutcome.IGNORED), []

        row = state.board.find_drop_row(column)
        if row is None:
            logger.debug("Ignoring column %d: column is full", column)
            return MoveResult(MoveOutcome.IGNORED), []

        player = state.current_player
        state.board.place(row, column, player)
        move = Move(column=column, player=player, position=Position(row=row, col=column))
        state.move_history.append(move)
        logger.debug("Player %s placed at row %d, column %d", player, row, column)

        events = [self._event(EventType.PIECE_PLACED, {
            "row": row,
            "column": column,
            "player": player,
        })]

        # Win is decided before tie: a full board with a line is a win.
        winning_line = self.rules.find_winning_line(state.board, player)
        if winning_line:
            state.status = GameStatus.WON
            state.winner = player
            state.winning_positions = winning_line
            logger.info("Player %s (%s) won on turn %d", player, state.active.color, state.turn_number)
            events.append(self._event(EventType.GAME_WON, {
                "player": player,
                "positions": winning_line,
            }))
            return MoveResult(MoveOutcome.WON, move, tuple(winning_line)), events

        if self.rules.is_tie(state.board):
            state.status = GameStatus.TIED
            logger.info("Game tied on turn %d", state.turn_number)
            events.append(self._event(EventType.GAME_TIED))
            return MoveResult(MoveOutcome.TIED, move), events

        state.current_player = player.other
        state.turn_number += 1
        logger.debug("Turn %d: player %s to move", state.turn_number, state.current_player)
        events.append(self._event(EventType.TURN_CHANGED, {
            "player": state.current_player,
            "turn": state.turn_number,
        }))
        return MoveResult(MoveOutcome.CONTINUE, move), events

    def select_column(self, column: int) -> MoveResult:
        """Input entry point for the render layer. Same as play_move()."""
        return self.play_move(column)

    def legal_moves(self) -> list[int]:
        """Columns that can currently accept a piece (empty once the game is over)."""
        if self._state is None or self._state.is_over:
            return []
        return self.rules.get_legal_moves(self._state.board)

    def reset(self) -> None:
        """Discard the current game."""
        with self._lock:
            self._state = None
            self._publish([self._event(EventType.GAME_RESET)])

    def _event(self, event_type: EventType, data: dict | None = None) -> Event:
        return Event(type=event_type, data=data, source=SOURCE)

    def _publish(self, events: list[Event]) -> None:
        """Queue events and deliver everything pending in commit order.

        Must be called with the lock held. A nested call from a handler only
        queues; the outermost call drains the queue.
        """
        self._pending.extend(events)
        if self._dispatching:
            return

        self._dispatching = True
        try:
            while self._pending:
                self.bus.publish(self._pending.popleft())
        finally:
            self._dispatching = False

    @property
    def state(self) -> GameState | None:
        """Get current game state."""
        return self._state

    @property
    def current_player(self) -> Player | None:
        """The active player's record, or None before a game starts."""
        return self._state.active if self._state is not None else None

    @property
    def is_game_over(self) -> bool:
        """Check if game is over."""
        return self._state is not None and self._state.is_over

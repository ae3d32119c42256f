"""Text rendering for the terminal front-end.

The renderer is a plain bus subscriber: it reacts to engine events and never
touches game rules.
"""

from collections.abc import Callable, Mapping

from ..core.bus import EventBus
from ..core.events import Event, EventType
from ..core.types import Player, PlayerId
from ..game.board import Board


DEFAULT_SYMBOLS: dict[PlayerId, str] = {
    PlayerId.ONE: "X",
    PlayerId.TWO: "O",
}


def board_to_ascii(board: Board, symbols: Mapping[PlayerId, str] = DEFAULT_SYMBOLS) -> str:
    """Convert board to ASCII display."""
    lines = []
    lines.append("  " + "   ".join(str(col) for col in range(board.width)))
    lines.append("+" + "---+" * board.width)

    for row in board.rows:
        cells = [symbols[cell] if cell is not None else " " for cell in row]
        lines.append("| " + " | ".join(cells) + " |")
        lines.append("+" + "---+" * board.width)

    return "\n".join(lines)


def win_message(player: Player) -> str:
    return f"Player {player.color} won!"


TIE_MESSAGE = "Tie!"


class TerminalRenderer:
    """Prints the board and end-of-game announcements as events arrive.

    Args:
        board_source: Callable returning the board to draw
        players: Player records, used for announcements
        echo: Output function (typer.echo in the CLI)
        symbols: Cell symbol per player
    """

    def __init__(
        self,
        board_source: Callable[[], Board | None],
        players: tuple[Player, Player],
        echo: Callable[[str], None] = print,
        symbols: Mapping[PlayerId, str] = DEFAULT_SYMBOLS,
    ):
        self._board_source = board_source
        self._players = {p.id: p for p in players}
        self._echo = echo
        self._symbols = symbols

    def attach(self, bus: EventBus) -> None:
        bus.subscribe(EventType.GAME_STARTED, self.on_board_changed)
        bus.subscribe(EventType.PIECE_PLACED, self.on_board_changed)
        bus.subscribe(EventType.GAME_WON, self.on_game_won)
        bus.subscribe(EventType.GAME_TIED, self.on_game_tied)

    def detach(self, bus: EventBus) -> None:
        bus.unsubscribe(EventType.GAME_STARTED, self.on_board_changed)
        bus.unsubscribe(EventType.PIECE_PLACED, self.on_board_changed)
        bus.unsubscribe(EventType.GAME_WON, self.on_game_won)
        bus.unsubscribe(EventType.GAME_TIED, self.on_game_tied)

    def on_board_changed(self, event: Event) -> None:
        board = self._board_source()
        if board is not None:
            self._echo(board_to_ascii(board, self._symbols))

    def on_game_won(self, event: Event) -> None:
        self._echo(win_message(self._players[event.data["player"]]))

    def on_game_tied(self, event: Event) -> None:
        self._echo(TIE_MESSAGE)

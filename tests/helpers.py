"""Test helpers for Connect Four tests."""

from connect_four.core.bus import EventBus
from connect_four.core.events import Event
from connect_four.game.engine import GameEngine


# Fills a 6x7 board with alternating moves and no four-in-a-row anywhere:
# columns 0-2 and 4-6 alternate bottom-up starting with player 1,
# column 3 alternates starting with player 2.
TIE_SEQUENCE = [0] * 6 + [1] * 6 + [2] * 6 + [4, 3, 3, 4] * 3 + [5] * 6 + [6] * 6


class EventRecorder:
    """Collects every event published on a bus."""

    def __init__(self, bus: EventBus):
        self.events: list[Event] = []
        bus.subscribe_all(self.events.append)

    @property
    def types(self):
        return [e.type for e in self.events]

    def clear(self) -> None:
        self.events.clear()


def play_all(engine: GameEngine, columns):
    """Play columns in order and return the list of results."""
    return [engine.play_move(col) for col in columns]


def assert_gravity(board) -> None:
    for row in range(board.height - 1):
        for col in range(board.width):
            if board.cell(row, col) is not None:
                assert board.cell(row + 1, col) is not None, f"floating piece at {(row, col)}"

"""Connect Four win and tie rules."""

from ..core.types import PlayerId, Position
from .board import Board


# Row/column steps of the four line directions, in scan order.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),   # Horizontal (right)
    (1, 0),   # Vertical (down)
    (1, 1),   # Diagonal down-right
    (1, -1),  # Diagonal down-left
)


class Connect4Rules:
    """Connect Four rules for an arbitrary board size.

    Win condition: win_length in a row (horizontal, vertical, or diagonal)
    """

    def __init__(self, win_length: int = 4):
        """Initialize rules.

        Args:
            win_length: Number in a row to win (4 default)
        """
        if win_length < 2:
            raise ValueError(f"win_length must be at least 2, got {win_length}")
        self.win_length = win_length

    def get_legal_moves(self, board: Board) -> list[int]:
        """Get columns that aren't full.

        Args:
            board: Current board state

        Returns:
            List of column indices that can accept a piece
        """
        return [col for col in range(board.width) if board.find_drop_row(col) is not None]

    def line_from(self, row: int, col: int, dr: int, dc: int) -> list[Position]:
        """Positions of the candidate line anchored at (row, col).

        Positions may fall outside the board.
        """
        return [Position(row=row + i * dr, col=col + i * dc) for i in range(self.win_length)]

    def find_winning_line(self, board: Board, player: PlayerId) -> list[Position]:
        """Scan the whole board for a line owned entirely by ``player``.

        Every cell is tried as an anchor, in row-major order, with each of
        the four directions. Only ``player`` is checked.

        Returns:
            The first winning line found, or an empty list if none exists
        """
        for row in range(board.height):
            for col in range(board.width):
                for dr, dc in DIRECTIONS:
                    line = self.line_from(row, col, dr, dc)
                    if self._is_winning_line(board, line, player):
                        return line
        return []

    def check_for_win(self, board: Board, player: PlayerId) -> bool:
        """True if ``player`` has win_length in a row anywhere on the board."""
        return bool(self.find_winning_line(board, player))

    def _is_winning_line(self, board: Board, line: list[Position], player: PlayerId) -> bool:
        return all(
            board.in_bounds(pos.row, pos.col) and board.cell(pos.row, pos.col) == player
            for pos in line
        )

    def is_tie(self, board: Board) -> bool:
        """Check if the board is full.

        Only meaningful once the mover's win has been ruled out: a board can
        be full and winning at the same time, which is a win.
        """
        return board.is_full()

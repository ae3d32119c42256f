"""Board state for Connect Four."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..core.errors import InvalidColumnError
from ..core.types import Cell, PlayerId


class Board:
    """Grid of ``height`` rows by ``width`` columns.

    ``grid[0]`` is the top row and ``grid[height - 1]`` the bottom row.
    Each cell is None (empty) or the PlayerId occupying it. Pieces fill each
    column from the bottom up.
    """

    def __init__(self, height: int = 6, width: int = 7):
        if height < 1 or width < 1:
            raise ValueError(f"Board must be at least 1x1, got {height}x{width}")
        self.height = height
        self.width = width
        self._grid: list[list[Cell]] = [[None] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"Board(height={self.height}, width={self.width}, pieces={self.occupied_count()})"

    @property
    def rows(self) -> tuple[tuple[Cell, ...], ...]:
        """Read-only snapshot of the grid, top row first."""
        return tuple(tuple(row) for row in self._grid)

    def cell(self, row: int, column: int) -> Cell:
        return self._grid[row][column]

    def is_valid_column(self, column: int) -> bool:
        return 0 <= column < self.width

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def find_drop_row(self, column: int) -> int | None:
        """Get the row where a piece dropped in ``column`` would land.

        Args:
            column: Column to drop piece in

        Returns:
            Lowest empty row index, or None if the column is full

        Raises:
            InvalidColumnError: If column is outside the board
        """
        if not self.is_valid_column(column):
            raise InvalidColumnError(column, self.width)

        for row in range(self.height - 1, -1, -1):
            if self._grid[row][column] is None:
                return row
        return None

    def place(self, row: int, column: int, player: PlayerId) -> None:
        """Write ``player`` into a cell.

        The caller is responsible for choosing the cell via find_drop_row().
        """
        self._grid[row][column] = player

    def is_full(self) -> bool:
        return all(cell is not None for row in self._grid for cell in row)

    def occupied_count(self) -> int:
        return sum(cell is not None for row in self._grid for cell in row)

    def copy(self) -> Board:
        board = Board(self.height, self.width)
        board._grid = [row.copy() for row in self._grid]
        return board

    def as_matrix(self) -> np.ndarray:
        """Convert to a numpy matrix.

        Returns:
            int8 array of shape (height, width) where EMPTY=0, ONE=1, TWO=2
        """
        return np.array(
            [[0 if cell is None else int(cell) for cell in row] for row in self._grid],
            dtype=np.int8,
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int | None]]) -> Board:
        """Build a board from rows of 0/None (empty), 1 or 2, top row first.

        Gravity is not checked; intended for tests and analysis.
        """
        if not rows or not rows[0]:
            raise ValueError("Board rows must not be empty")
        width = len(rows[0])
        board = cls(len(rows), width)
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {width}")
            for c, value in enumerate(row):
                board._grid[r][c] = PlayerId(value) if value else None
        return board

"""Board representation for the Tetris playfield.

Boards are treated as values: every operation that changes the contents
returns a new :class:`Board` and leaves its input untouched.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Tetromino, TetrominoType


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.uint8]

# Mapping from ``TetrominoType`` to the integer stored in the grid.  The
# specific numeric values are not important as long as ``0`` represents an empty
# cell.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(TetrominoType)}
VALUE_PIECES = {v: t for t, v in PIECE_VALUES.items()}


def create_empty_grid(height: int = HEIGHT, width: int = WIDTH) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


def is_row_full(row: Sequence[int]) -> bool:
    """Return ``True`` if ``row`` has no empty cell."""

    return bool(np.all(np.asarray(row) != 0))


class Board:
    """Tetris board holding the occupied cells."""

    def __init__(self, height: int = HEIGHT, width: int = WIDTH, grid: Optional[Grid] = None) -> None:
        if grid is None:
            grid = create_empty_grid(height, width)
        self.grid: Grid = grid

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Board":
        """Build a board from nested sequences of cell values."""

        return cls(grid=np.array([list(r) for r in rows], dtype=np.uint8))

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])

    def copy(self) -> "Board":
        return Board(grid=self.grid.copy())

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def kind_at(self, row: int, col: int) -> Optional[TetrominoType]:
        """Return the piece kind stored at ``(row, col)`` or ``None``."""

        return VALUE_PIECES.get(self.get_cell(row, col))

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied.  This makes
        collision detection simpler as off-board positions are automatically
        rejected.
        """

        if 0 <= row < self.height and 0 <= col < self.width:
            return bool(self.grid[row, col] == 0)
        return False

    def filled_cells(self) -> int:
        return int(np.count_nonzero(self.grid))

    def merged(self, tetromino: Tetromino) -> "Board":
        """Return a copy of the board with ``tetromino``'s blocks written in.

        Blocks above the top edge are dropped; the piece is assumed to have
        passed the collision check already.
        """

        grid = self.grid.copy()
        value = np.uint8(PIECE_VALUES[tetromino.kind])
        for x, y in tetromino.blocks():
            if 0 <= y < self.height and 0 <= x < self.width:
                grid[y, x] = value
        return Board(grid=grid)

    def cleared(self) -> Tuple["Board", int]:
        """Return ``(board, cleared)`` with every full row removed.

        Remaining rows keep their relative order and sink to the bottom;
        ``cleared`` empty rows are added on top so the height is unchanged.
        """

        full_rows = np.all(self.grid != 0, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if not cleared:
            return self.copy(), 0
        remaining = self.grid[~full_rows]
        new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
        return Board(grid=np.vstack((new_rows, remaining))), cleared

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool(np.array_equal(self.grid, other.grid))

    def __repr__(self) -> str:
        return f"Board(height={self.height}, width={self.width}, filled={self.filled_cells()})"


def empty(height: int = HEIGHT, width: int = WIDTH) -> Board:
    return Board(height, width)


def clear_full_rows(board: Board) -> Tuple[Board, int]:
    return board.cleared()


def merge(board: Board, piece: Tetromino) -> Board:
    return board.merged(piece)


__all__ = [
    "Board",
    "Grid",
    "HEIGHT",
    "PIECE_VALUES",
    "VALUE_PIECES",
    "WIDTH",
    "clear_full_rows",
    "create_empty_grid",
    "empty",
    "is_row_full",
    "merge",
]

"""Tetromino definitions and basic behaviour.

Each piece kind owns an immutable square base matrix.  The shape of a piece in
any rotation state is derived from that base by repeated clockwise rotation,
so a :class:`Tetromino` only needs to carry its kind, rotation index and
anchor position and stays a cheap, hashable value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Sequence, Tuple

Matrix = Tuple[Tuple[int, ...], ...]

ROTATION_STATES = 4


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Spawn orientation of every piece.  The I piece lives in a 4x4 box, the O
# piece in a 2x2 box and the rest in 3x3 boxes so rotation stays centred.
BASE_SHAPES: Dict[TetrominoType, Matrix] = {
    TetrominoType.I: (
        (0, 0, 0, 0),
        (1, 1, 1, 1),
        (0, 0, 0, 0),
        (0, 0, 0, 0),
    ),
    TetrominoType.O: (
        (1, 1),
        (1, 1),
    ),
    TetrominoType.T: (
        (0, 1, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    TetrominoType.S: (
        (0, 1, 1),
        (1, 1, 0),
        (0, 0, 0),
    ),
    TetrominoType.Z: (
        (1, 1, 0),
        (0, 1, 1),
        (0, 0, 0),
    ),
    TetrominoType.J: (
        (1, 0, 0),
        (1, 1, 1),
        (0, 0, 0),
    ),
    TetrominoType.L: (
        (0, 0, 1),
        (1, 1, 1),
        (0, 0, 0),
    ),
}


def rotate_clockwise(matrix: Sequence[Sequence[int]]) -> Matrix:
    """Return ``matrix`` rotated 90 degrees clockwise.

    ``matrix`` must be square.  Cell ``(i, j)`` of the input ends up at
    ``(j, N - 1 - i)`` of the result.
    """

    size = len(matrix)
    rotated = [[0] * size for _ in range(size)]
    for i in range(size):
        for j in range(size):
            rotated[j][size - 1 - i] = matrix[i][j]
    return tuple(tuple(row) for row in rotated)


@lru_cache(maxsize=None)
def shape_matrix(kind: TetrominoType, rotation: int) -> Matrix:
    """Return the matrix for ``kind`` after ``rotation`` clockwise turns.

    The result is always derived from :data:`BASE_SHAPES`; any integer is
    accepted and wrapped into ``0..3``.
    """

    shape = BASE_SHAPES[kind]
    for _ in range(rotation % ROTATION_STATES):
        shape = rotate_clockwise(shape)
    return shape


def shape_blocks(kind: TetrominoType, rotation: int) -> List[Tuple[int, int]]:
    """Return the ``(dx, dy)`` offsets of the occupied cells of a shape."""

    return [
        (dx, dy)
        for dy, row in enumerate(shape_matrix(kind, rotation))
        for dx, cell in enumerate(row)
        if cell
    ]


@dataclass(frozen=True)
class Tetromino:
    """A piece on the board: kind, rotation state and anchor ``(x, y)``.

    ``x`` counts columns from the left edge and ``y`` rows from the top.  The
    anchor is the top-left corner of the shape's bounding square, so parts of
    it may lie outside the board while the occupied cells do not.
    """

    kind: TetrominoType
    rotation: int = 0
    x: int = 0
    y: int = 0

    @property
    def shape(self) -> Matrix:
        return current_shape(self)

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` board coordinates of the piece."""

        return [(self.x + dx, self.y + dy) for dx, dy in shape_blocks(self.kind, self.rotation)]

    def moved(self, dx: int, dy: int) -> "Tetromino":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> "Tetromino":
        """Return a copy turned one step clockwise around the same anchor."""

        return replace(self, rotation=(self.rotation + 1) % ROTATION_STATES)


def current_shape(piece: Tetromino) -> Matrix:
    return shape_matrix(piece.kind, piece.rotation)


def spawn(kind: TetrominoType, width: int = 10) -> Tetromino:
    """Return a fresh ``kind`` piece centred horizontally on the top row."""

    shape_width = len(BASE_SHAPES[kind][0])
    return Tetromino(kind, rotation=0, x=(width - shape_width) // 2, y=0)


__all__ = [
    "BASE_SHAPES",
    "Matrix",
    "ROTATION_STATES",
    "Tetromino",
    "TetrominoType",
    "current_shape",
    "rotate_clockwise",
    "shape_blocks",
    "shape_matrix",
    "spawn",
]

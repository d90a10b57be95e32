"""Super Rotation System wall kicks.

Only clockwise rotation is supported.  For each transition ``r -> r + 1`` a
list of ``(dx, dy)`` offsets is tried in order; the first one that produces a
valid placement wins.  ``dy`` grows downwards, matching board rows.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .board import Board
from .tetromino import ROTATION_STATES, Tetromino, TetrominoType
from .utils import is_valid_move

Offset = Tuple[int, int]
KickTable = Dict[Tuple[int, int], Tuple[Offset, ...]]

JLSTZ_KICKS: KickTable = {
    (0, 1): ((0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)),
    (1, 2): ((0, 0), (1, 0), (1, 1), (0, -2), (1, -2)),
    (2, 3): ((0, 0), (1, 0), (1, -1), (0, 2), (1, 2)),
    (3, 0): ((0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)),
}

I_KICKS: KickTable = {
    (0, 1): ((0, 0), (-2, 0), (1, 0), (-2, 1), (1, -2)),
    (1, 2): ((0, 0), (-1, 0), (2, 0), (-1, -2), (2, 1)),
    (2, 3): ((0, 0), (2, 0), (-1, 0), (2, -1), (-1, 2)),
    (3, 0): ((0, 0), (1, 0), (-2, 0), (1, 2), (-2, -1)),
}

# The O piece looks the same in every state and never needs a kick.
O_KICKS: Tuple[Offset, ...] = ((0, 0),)


def wall_kicks(kind: TetrominoType, rotation: int) -> Tuple[Offset, ...]:
    """Return the kick offsets for rotating ``kind`` clockwise from ``rotation``."""

    if kind == TetrominoType.O:
        return O_KICKS
    current = rotation % ROTATION_STATES
    key = (current, (current + 1) % ROTATION_STATES)
    table = I_KICKS if kind == TetrominoType.I else JLSTZ_KICKS
    return table[key]


def try_rotate(piece: Tetromino, board: Board) -> Optional[Tetromino]:
    """Rotate ``piece`` clockwise, applying wall kicks.

    Returns the kicked piece, or ``None`` when every candidate collides.
    """

    rotated = piece.rotated()
    for dx, dy in wall_kicks(piece.kind, piece.rotation):
        candidate = rotated.moved(dx, dy)
        if is_valid_move(candidate, board):
            return candidate
    return None


__all__ = ["I_KICKS", "JLSTZ_KICKS", "O_KICKS", "try_rotate", "wall_kicks"]

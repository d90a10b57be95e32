"""Collision and placement helpers for the Tetris engine."""

from __future__ import annotations

from typing import List, Optional

from .board import Board, PIECE_VALUES
from .tetromino import Tetromino

# Grid value used by :func:`render_grid` for the landing projection.
GHOST_VALUE = len(PIECE_VALUES) + 1


def is_valid_move(piece: Tetromino, board: Board) -> bool:
    """Return ``True`` if ``piece`` fits on ``board`` where it stands.

    Every block must lie between the side walls and above the floor.  Blocks
    that are still above the top edge (``y < 0``) are allowed and skip the
    occupancy test, which lets pieces spawn and rotate partly out of view.
    """

    for x, y in piece.blocks():
        if x < 0 or x >= board.width or y >= board.height:
            return False
        if y >= 0 and not board.is_empty(y, x):
            return False
    return True


def can_move(board: Board, piece: Tetromino, dx: int, dy: int) -> bool:
    """Return ``True`` if ``piece`` can be translated by ``dx``/``dy``."""

    return is_valid_move(piece.moved(dx, dy), board)


def drop_distance(piece: Tetromino, board: Board) -> int:
    """Return how many rows ``piece`` can fall before it rests."""

    distance = 0
    while is_valid_move(piece.moved(0, distance + 1), board):
        distance += 1
    return distance


def ghost_position(piece: Tetromino, board: Board) -> Tetromino:
    """Return the copy of ``piece`` sitting where a hard drop would leave it."""

    return piece.moved(0, drop_distance(piece, board))


def is_terminal(piece: Tetromino, board: Board) -> bool:
    """Return ``True`` if a freshly spawned ``piece`` has nowhere to go."""

    return not is_valid_move(piece, board)


def render_grid(
    board: Board,
    active: Optional[Tetromino] = None,
    ghost: Optional[Tetromino] = None,
) -> List[List[int]]:
    """Return a copy of the board grid with the falling piece overlaid.

    This is a convenience for renderers that want a single 2D array to draw
    without locking the piece.  Ghost cells receive :data:`GHOST_VALUE` and are
    drawn first so the active piece wins where the two overlap.
    """

    grid = [[int(v) for v in row] for row in board.grid]
    overlays = []
    if ghost is not None:
        overlays.append((ghost, GHOST_VALUE))
    if active is not None:
        overlays.append((active, PIECE_VALUES[active.kind]))
    for piece, value in overlays:
        for x, y in piece.blocks():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y][x] = value
    return grid


__all__ = [
    "GHOST_VALUE",
    "can_move",
    "drop_distance",
    "ghost_position",
    "is_terminal",
    "is_valid_move",
    "render_grid",
]

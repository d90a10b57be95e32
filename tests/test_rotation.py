from __future__ import annotations

import pytest

from tetris_core.board import Board
from tetris_core.rotation import I_KICKS, JLSTZ_KICKS, try_rotate, wall_kicks
from tetris_core.tetromino import Tetromino, TetrominoType


@pytest.mark.parametrize("rotation", range(4))
def test_o_piece_has_single_zero_kick(rotation) -> None:
    assert wall_kicks(TetrominoType.O, rotation) == ((0, 0),)


def test_kick_tables_cover_every_clockwise_transition() -> None:
    for table in (I_KICKS, JLSTZ_KICKS):
        assert set(table) == {(0, 1), (1, 2), (2, 3), (3, 0)}
        for offsets in table.values():
            assert len(offsets) == 5
            assert offsets[0] == (0, 0)
    assert wall_kicks(TetrominoType.I, 0) != wall_kicks(TetrominoType.T, 0)
    assert wall_kicks(TetrominoType.S, 3) == JLSTZ_KICKS[(3, 0)]


def test_rotation_in_open_space_keeps_anchor() -> None:
    piece = Tetromino(TetrominoType.T, x=3, y=5)
    rotated = try_rotate(piece, Board())
    assert rotated == Tetromino(TetrominoType.T, rotation=1, x=3, y=5)


def test_i_piece_kicks_off_left_wall() -> None:
    # Vertical I hugging the left wall; the horizontal state needs a kick.
    piece = Tetromino(TetrominoType.I, rotation=1, x=-2, y=5)
    rotated = try_rotate(piece, Board())
    assert rotated == Tetromino(TetrominoType.I, rotation=2, x=0, y=5)


def test_t_piece_kicks_off_left_wall() -> None:
    piece = Tetromino(TetrominoType.T, rotation=1, x=-1, y=5)
    rotated = try_rotate(piece, Board())
    assert rotated == Tetromino(TetrominoType.T, rotation=2, x=0, y=5)


def test_rotation_rejected_when_every_kick_collides() -> None:
    board = Board()
    board.grid[:, :] = 1
    piece = Tetromino(TetrominoType.T, x=3, y=18)
    for x, y in piece.blocks():
        board.grid[y, x] = 0
    assert try_rotate(piece, board) is None

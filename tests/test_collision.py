from __future__ import annotations

from tetris_core.board import PIECE_VALUES, Board
from tetris_core.tetromino import Tetromino, TetrominoType, spawn
from tetris_core.utils import (
    GHOST_VALUE,
    can_move,
    drop_distance,
    ghost_position,
    is_terminal,
    is_valid_move,
    render_grid,
)


def test_spawned_pieces_are_valid_on_empty_board() -> None:
    board = Board()
    for kind in TetrominoType:
        assert is_valid_move(spawn(kind), board)


def test_rejects_side_walls_and_floor() -> None:
    board = Board()
    assert not is_valid_move(Tetromino(TetrominoType.I, x=-1), board)
    assert is_valid_move(Tetromino(TetrominoType.I, x=6), board)
    assert not is_valid_move(Tetromino(TetrominoType.I, x=7), board)
    assert is_valid_move(Tetromino(TetrominoType.O, x=0, y=18), board)
    assert not is_valid_move(Tetromino(TetrominoType.O, x=0, y=19), board)


def test_cells_above_top_skip_occupancy_but_not_walls() -> None:
    board = Board()
    board.grid[0, :] = 1
    board.grid[0, 2] = 0
    # Vertical I in column 2 with three cells above the board.
    assert is_valid_move(Tetromino(TetrominoType.I, rotation=1, x=0, y=-3), board)
    assert not is_valid_move(Tetromino(TetrominoType.I, rotation=1, x=-3, y=-3), board)


def test_rejects_overlap() -> None:
    board = Board()
    board.grid[19, 4] = 1
    assert not is_valid_move(Tetromino(TetrominoType.O, x=4, y=18), board)
    assert not can_move(board, Tetromino(TetrominoType.O, x=4, y=17), 0, 1)
    assert can_move(board, Tetromino(TetrominoType.O, x=4, y=17), 2, 1)


def test_ghost_and_drop_distance_on_empty_board() -> None:
    board = Board()
    piece = spawn(TetrominoType.I)
    ghost = ghost_position(piece, board)
    assert ghost.y == 18
    assert piece.y == 0
    assert drop_distance(piece, board) == 18


def test_ghost_stops_on_stack() -> None:
    board = Board()
    board.grid[10, 4] = 1
    piece = spawn(TetrominoType.O)
    assert ghost_position(piece, board).y == 8
    assert drop_distance(piece, board) == 8


def test_terminal_when_spawn_blocked() -> None:
    board = Board()
    assert not is_terminal(spawn(TetrominoType.T), board)
    board.grid[1, 3:7] = 1
    assert is_terminal(spawn(TetrominoType.T), board)


def test_render_grid_overlays_without_mutating() -> None:
    board = Board()
    piece = spawn(TetrominoType.O)
    ghost = ghost_position(piece, board)

    grid = render_grid(board, piece, ghost)

    assert grid[0][4] == PIECE_VALUES[TetrominoType.O]
    assert grid[19][5] == GHOST_VALUE
    assert board.filled_cells() == 0

from __future__ import annotations

import random
from collections import Counter
from typing import Sequence

import pytest

from tetris_core.assist import (
    FALLBACK_KIND,
    AssistSelector,
    enumerate_placements,
    fill_ratio,
    find_best_placement,
    has_near_full_row,
    score_board,
)
from tetris_core.board import Board
from tetris_core.config import AssistConfig
from tetris_core.tetromino import TetrominoType


class ScriptedRandom:
    """Random source replaying a fixed list of values."""

    def __init__(self, values: Sequence[float]) -> None:
        self.values = list(values)

    def random(self) -> float:
        return self.values.pop(0)


def _opportunity_board() -> Board:
    """Eight rows filled on the right; the bottom one needs an I to clear."""

    board = Board()
    board.grid[12:20, 4:10] = 1
    return board


def test_score_board_uses_weights() -> None:
    config = AssistConfig()
    assert score_board(Board(), 0, config) == 0
    assert score_board(Board(), 2, config) == pytest.approx(-10.0)


def test_best_i_placement_on_empty_board_hugs_wall() -> None:
    placement = find_best_placement(TetrominoType.I, Board())
    assert placement is not None
    assert (placement.rotation, placement.x, placement.y) == (0, 0, 18)
    assert placement.lines_cleared == 0
    # height 1 * 0.5 + bumpiness 1 * 0.3
    assert placement.score == pytest.approx(0.8)


def test_best_placement_prefers_line_clear() -> None:
    board = Board()
    board.grid[19, 4:] = 1
    placement = find_best_placement(TetrominoType.I, board)
    assert placement is not None
    assert placement.lines_cleared == 1
    assert placement.score == pytest.approx(-5.0)


def test_enumerate_placements_only_yields_valid_positions() -> None:
    placements = list(enumerate_placements(TetrominoType.O, Board()))
    # An O fits in nine columns and every rotation looks the same.
    assert len(placements) == 4 * 9
    assert {p.x for p in placements} == set(range(9))
    assert all(p.y == 18 for p in placements)


def test_no_placement_on_full_board() -> None:
    board = Board()
    board.grid[:, :] = 1
    assert find_best_placement(TetrominoType.T, board) is None
    assert AssistSelector(random.Random(0)).best_kind(board) == FALLBACK_KIND


def test_board_helpers() -> None:
    board = _opportunity_board()
    assert fill_ratio(board) == pytest.approx(48 / 200)
    assert has_near_full_row(board, 0.6)
    assert not has_near_full_row(board, 0.7)


def test_selector_picks_best_kind_when_not_random() -> None:
    board = _opportunity_board()
    selector = AssistSelector(ScriptedRandom([0.5]))
    assert selector.best_kind(board) == TetrominoType.I
    assert selector.select(board) == TetrominoType.I


def test_selector_keeps_baseline_randomness() -> None:
    # 0.1 < random_chance, then 0.5 picks index 3 of the seven kinds.
    selector = AssistSelector(ScriptedRandom([0.1, 0.5]))
    assert selector.select(_opportunity_board()) == TetrominoType.S


def test_selector_mostly_random_without_opportunity() -> None:
    board = Board()
    board.grid[15:20, 0:5] = 1
    assert not has_near_full_row(board, 0.6)
    selector = AssistSelector(ScriptedRandom([0.3, 0.9]))
    assert selector.select(board) == TetrominoType.L


def test_selector_is_unbiased_on_mostly_empty_board() -> None:
    selector = AssistSelector(random.Random(1234))
    board = Board()
    board.grid[19, :5] = 1
    counts = Counter(selector.select(board) for _ in range(700))
    assert set(counts) == set(TetrominoType)
    assert min(counts.values()) > 50


def test_invalid_assist_config_rejected() -> None:
    with pytest.raises(ValueError):
        AssistConfig(random_chance=1.5)
    with pytest.raises(ValueError):
        AssistConfig(x_padding=-1)

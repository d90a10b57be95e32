"""Heuristic "assist" piece selection.

The selector looks at the board and, some of the time, hands out the piece
kind that can be placed best instead of a random one.  For every kind it tries
each rotation and anchor column, drops the piece straight down, clears rows on
a scratch board and scores the result with :mod:`tetris_core.features`.  Lower
scores are better.

Randomness keeps the help subtle:

* nearly empty boards always get a random kind, so the opening is untouched;
* without a nearly full row a random kind is returned most of the time;
* even with one, a random kind is still returned now and then.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from .bag import KINDS, RandomSource, random_choice
from .board import Board
from .config import AssistConfig
from .features import board_metrics
from .tetromino import ROTATION_STATES, Tetromino, TetrominoType
from .utils import ghost_position, is_valid_move

LOGGER = logging.getLogger(__name__)

# Returned when no kind has a single valid placement.
FALLBACK_KIND = TetrominoType.T


@dataclass(frozen=True)
class Placement:
    """One way of landing a piece: where it rests and what it is worth."""

    kind: TetrominoType
    rotation: int
    x: int
    y: int
    lines_cleared: int
    score: float


def score_board(board: Board, lines_cleared: int, config: AssistConfig) -> float:
    """Return the weighted badness of ``board`` after clearing ``lines_cleared`` rows."""

    metrics = board_metrics(board.grid)
    return (
        metrics.holes * config.hole_weight
        + metrics.height * config.height_weight
        + metrics.bumpiness * config.bumpiness_weight
        + lines_cleared * config.lines_weight
    )


def enumerate_placements(
    kind: TetrominoType, board: Board, config: Optional[AssistConfig] = None
) -> Iterator[Placement]:
    """Yield every valid straight-drop placement of ``kind`` on ``board``.

    Anchors range ``x_padding`` columns past both walls because the occupied
    cells of a rotated shape need not start at the anchor.
    """

    config = config or AssistConfig()
    for rotation in range(ROTATION_STATES):
        for x in range(-config.x_padding, board.width + config.x_padding):
            piece = ghost_position(Tetromino(kind, rotation, x, 0), board)
            if not is_valid_move(piece, board):
                continue
            result, cleared = board.merged(piece).cleared()
            yield Placement(
                kind=kind,
                rotation=rotation,
                x=piece.x,
                y=piece.y,
                lines_cleared=cleared,
                score=score_board(result, cleared, config),
            )


def find_best_placement(
    kind: TetrominoType, board: Board, config: Optional[AssistConfig] = None
) -> Optional[Placement]:
    """Return the lowest-scoring placement of ``kind``; ties keep the first found."""

    best: Optional[Placement] = None
    for placement in enumerate_placements(kind, board, config):
        if best is None or placement.score < best.score:
            best = placement
    return best


def fill_ratio(board: Board) -> float:
    return board.filled_cells() / float(board.width * board.height)


def has_near_full_row(board: Board, ratio: float) -> bool:
    """Return ``True`` if some row is at least ``ratio`` filled."""

    threshold = board.width * ratio
    return any(int((row != 0).sum()) >= threshold for row in board.grid)


class AssistSelector:
    """Pick the next piece kind, biased towards the best-fitting one."""

    def __init__(self, rng: RandomSource, config: Optional[AssistConfig] = None) -> None:
        self.rng = rng
        self.config = config or AssistConfig()

    def _random_kind(self, reason: str) -> TetrominoType:
        kind = random_choice(self.rng, KINDS)
        LOGGER.debug("assist: random %s (%s)", kind.value, reason)
        return kind

    def best_kind(self, board: Board) -> TetrominoType:
        """Return the kind whose best placement scores lowest."""

        best_kind = FALLBACK_KIND
        best_score = float("inf")
        for kind in KINDS:
            placement = find_best_placement(kind, board, self.config)
            if placement is not None and placement.score < best_score:
                best_kind = kind
                best_score = placement.score
        LOGGER.debug("assist: chose %s (score %.2f)", best_kind.value, best_score)
        return best_kind

    def select(self, board: Board) -> TetrominoType:
        cfg = self.config
        if fill_ratio(board) < cfg.empty_threshold:
            return self._random_kind("board mostly empty")
        if not has_near_full_row(board, cfg.near_full_ratio) and self.rng.random() < cfg.idle_random_chance:
            return self._random_kind("no row close to clearing")
        if self.rng.random() < cfg.random_chance:
            return self._random_kind("baseline chance")
        return self.best_kind(board)


__all__ = [
    "AssistSelector",
    "FALLBACK_KIND",
    "Placement",
    "enumerate_placements",
    "fill_ratio",
    "find_best_placement",
    "has_near_full_row",
    "score_board",
]

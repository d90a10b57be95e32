"""Rules engine for a falling-block puzzle game."""

from .assist import AssistSelector, Placement, find_best_placement
from .bag import PieceBag, RandomSource
from .board import Board
from .config import AssistConfig, GameConfig
from .features import BoardMetrics, board_metrics
from .game_state import Command, GamePhase, GameSnapshot, GameState
from .rotation import try_rotate, wall_kicks
from .scoring import ScoringRules, level_for_lines, score_for_lines, speed_for_level
from .tetromino import Tetromino, TetrominoType, rotate_clockwise, spawn
from .utils import drop_distance, ghost_position, is_terminal, is_valid_move, render_grid

__all__ = [
    "AssistConfig",
    "AssistSelector",
    "Board",
    "BoardMetrics",
    "Command",
    "GameConfig",
    "GamePhase",
    "GameSnapshot",
    "GameState",
    "PieceBag",
    "Placement",
    "RandomSource",
    "ScoringRules",
    "Tetromino",
    "TetrominoType",
    "board_metrics",
    "drop_distance",
    "find_best_placement",
    "ghost_position",
    "is_terminal",
    "is_valid_move",
    "level_for_lines",
    "render_grid",
    "rotate_clockwise",
    "score_for_lines",
    "speed_for_level",
    "spawn",
    "try_rotate",
    "wall_kicks",
]

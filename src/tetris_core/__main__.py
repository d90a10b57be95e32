"""Headless ASCII demo for the Tetris engine.

Run with: `python -m tetris_core --pieces 50 --assist`

A simple bot steers every piece to its best straight-drop placement using the
same evaluator as the assist selector, then the final frame is printed.  This
is a smoke test for the full lock/clear/score/spawn cycle, not a front-end.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .assist import find_best_placement
from .config import GameConfig
from .game_state import GamePhase, GameSnapshot, GameState
from .utils import GHOST_VALUE

LOGGER = logging.getLogger(__name__)


def format_grid(grid: List[List[int]]) -> str:
    chars = {0: ".", GHOST_VALUE: ":"}
    return "\n".join("".join(chars.get(cell, "#") for cell in row) for row in grid)


def play_piece(state: GameState) -> GameSnapshot:
    """Steer the active piece to its best placement and hard drop it."""

    active = state.active
    assert active is not None
    target = find_best_placement(active.kind, state.board, state.config.assist)
    if target is not None:
        for _ in range((target.rotation - active.rotation) % 4):
            state.rotate()
        # Kicks may have shifted the piece; walk until the column matches or blocks.
        while state.active is not None and state.active.x != target.x:
            before = state.active.x
            state.move(1 if target.x > before else -1)
            if state.active.x == before:
                break
    return state.hard_drop()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pieces", type=int, default=30, help="Number of pieces to drop.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece supply.")
    parser.add_argument(
        "--assist",
        action="store_true",
        help="Let the heuristic selector choose the pieces instead of the 7-bag.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def run(pieces: int, *, seed: Optional[int] = None, assist: bool = False) -> GameSnapshot:
    """Play up to ``pieces`` pieces and return the final snapshot."""

    state = GameState(GameConfig(random_seed=seed, assist_enabled=assist))
    snap = state.reset()
    dropped = 0
    while dropped < pieces and snap.phase == GamePhase.PLAYING:
        snap = play_piece(state)
        dropped += 1
    LOGGER.info("Dropped %d piece(s)", dropped)
    return snap


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    snap = run(args.pieces, seed=args.seed, assist=args.assist)
    print(format_grid(snap.render_grid()))
    print(f"Score: {snap.score}  Lines: {snap.lines}  Level: {snap.level}  Phase: {snap.phase.value}")


if __name__ == "__main__":
    main()

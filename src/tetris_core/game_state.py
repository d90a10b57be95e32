"""High level game session controller.

:class:`GameState` owns every piece of mutable session state and exposes one
method per player action plus :meth:`GameState.tick` for gravity.  Each method
returns a :class:`GameSnapshot` so a front-end can simply redraw whatever it
gets back; nothing outside this class mutates the session.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .assist import AssistSelector
from .bag import PieceBag, RandomSource
from .board import Board
from .config import GameConfig
from .rotation import try_rotate
from .tetromino import Tetromino, TetrominoType, spawn
from .utils import drop_distance, ghost_position, is_terminal, is_valid_move, render_grid

LOGGER = logging.getLogger(__name__)


class GamePhase(str, Enum):
    INITIAL = "INITIAL"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"


class Command(Enum):
    """Discrete inputs accepted from the front-end."""

    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    HOLD = "hold"
    PAUSE = "pause"
    RESET = "reset"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a session at one instant."""

    board: Board
    active: Optional[Tetromino]
    ghost: Optional[Tetromino]
    held: Optional[TetrominoType]
    can_hold: bool
    preview: Tuple[TetrominoType, ...]
    score: int
    level: int
    lines: int
    high_score: int
    phase: GamePhase
    drop_interval_ms: int
    assist: bool

    def render_grid(self) -> List[List[int]]:
        """Return the board with ghost and active piece drawn in."""

        return render_grid(self.board, self.active, self.ghost)


class GameState:
    """Mutable state for a Tetris game session."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        high_score: int = 0,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = self.config.rules
        self.rng: RandomSource = rng if rng is not None else random.Random(self.config.random_seed)
        self.bag = PieceBag(self.rng, lookahead=self.config.preview_count)
        self.selector = AssistSelector(self.rng, self.config.assist)
        self.assist = self.config.assist_enabled
        self.high_score = high_score

        self.board = Board(self.config.height, self.config.width)
        self.active: Optional[Tetromino] = None
        self.held: Optional[TetrominoType] = None
        self.can_hold = True
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = self.rules.speed_for_level(1)
        self.phase = GamePhase.INITIAL

    # Observation -------------------------------------------------------
    @property
    def preview(self) -> Tuple[TetrominoType, ...]:
        # Assist picks are made at spawn time, so there is nothing to show.
        if self.assist:
            return ()
        return self.bag.preview()

    @property
    def ghost(self) -> Optional[Tetromino]:
        if self.active is None:
            return None
        return ghost_position(self.active, self.board)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board.copy(),
            active=self.active,
            ghost=self.ghost,
            held=self.held,
            can_hold=self.can_hold,
            preview=self.preview,
            score=self.score,
            level=self.level,
            lines=self.lines,
            high_score=self.high_score,
            phase=self.phase,
            drop_interval_ms=self.drop_interval_ms,
            assist=self.assist,
        )

    @property
    def playing(self) -> bool:
        return self.phase == GamePhase.PLAYING and self.active is not None

    # Internal helpers ----------------------------------------------------
    def _next_kind(self) -> TetrominoType:
        if self.assist:
            return self.selector.select(self.board)
        return self.bag.draw()

    def _spawn(self, kind: TetrominoType) -> bool:
        """Make ``kind`` the active piece; end the game if it cannot enter."""

        piece = spawn(kind, self.board.width)
        if is_terminal(piece, self.board):
            self._game_over()
            return False
        self.active = piece
        return True

    def _game_over(self) -> None:
        self.phase = GamePhase.GAME_OVER
        self.active = None
        if self.score > self.high_score:
            self.high_score = self.score
        LOGGER.info(
            "Game over: score %d, lines %d, level %d", self.score, self.lines, self.level
        )

    def _lock(self) -> None:
        """Merge the active piece, clear rows, score them and spawn the next piece."""

        assert self.active is not None
        board, cleared = self.board.merged(self.active).cleared()
        self.board = board
        self.active = None
        if cleared:
            self.score += self.rules.score_for_lines(cleared, self.level)
            self.lines += cleared
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
            level = self.rules.level_for_lines(self.lines)
            if level != self.level:
                self.level = level
                self.drop_interval_ms = self.rules.speed_for_level(level)
                LOGGER.info("Level %d, drop interval %d ms", level, self.drop_interval_ms)
        if self._spawn(self._next_kind()):
            self.can_hold = True

    def _step_down(self, bonus: int) -> None:
        assert self.active is not None
        moved = self.active.moved(0, 1)
        if is_valid_move(moved, self.board):
            self.active = moved
            self.score += bonus
        else:
            self._lock()

    # Transitions ---------------------------------------------------------
    def reset(self) -> GameSnapshot:
        """Start a new game, keeping the high score and assist setting."""

        self.board = Board(self.config.height, self.config.width)
        self.bag.reset()
        self.active = None
        self.held = None
        self.can_hold = True
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = self.rules.speed_for_level(1)
        self.phase = GamePhase.PLAYING
        self._spawn(self._next_kind())
        LOGGER.info("Game started (assist %s)", "on" if self.assist else "off")
        return self.snapshot()

    def tick(self) -> GameSnapshot:
        """Apply one step of gravity, locking the piece if it has landed."""

        if self.playing:
            self._step_down(0)
        return self.snapshot()

    def move(self, dx: int) -> GameSnapshot:
        if self.playing:
            moved = self.active.moved(dx, 0)
            if is_valid_move(moved, self.board):
                self.active = moved
        return self.snapshot()

    def move_left(self) -> GameSnapshot:
        return self.move(-1)

    def move_right(self) -> GameSnapshot:
        return self.move(1)

    def soft_drop(self) -> GameSnapshot:
        """Move down one row for a small bonus, or lock if blocked."""

        if self.playing:
            self._step_down(self.rules.soft_drop_points)
        return self.snapshot()

    def rotate(self) -> GameSnapshot:
        if self.playing:
            rotated = try_rotate(self.active, self.board)
            if rotated is not None:
                self.active = rotated
        return self.snapshot()

    def hard_drop(self) -> GameSnapshot:
        """Drop the piece to its resting row and lock it immediately."""

        if self.playing:
            distance = drop_distance(self.active, self.board)
            self.score += distance * self.rules.hard_drop_points
            self.active = self.active.moved(0, distance)
            self._lock()
        return self.snapshot()

    def hold(self) -> GameSnapshot:
        """Implements the standard Tetris hold mechanic.

        The swap may only happen once per spawned piece; additional calls are
        ignored until another piece locks.
        """

        if not self.playing or not self.can_hold:
            return self.snapshot()

        current = self.active.kind
        incoming = self.held if self.held is not None else self._next_kind()
        self.held = current
        self.can_hold = False
        LOGGER.debug("Held %s, playing %s", current.value, incoming.value)
        self._spawn(incoming)
        return self.snapshot()

    def pause(self) -> GameSnapshot:
        """Toggle between playing and paused; other phases are unaffected."""

        if self.phase == GamePhase.PLAYING:
            self.phase = GamePhase.PAUSED
        elif self.phase == GamePhase.PAUSED:
            self.phase = GamePhase.PLAYING
        return self.snapshot()

    def set_assist(self, enabled: bool) -> GameSnapshot:
        self.assist = enabled
        return self.snapshot()

    def toggle_assist(self) -> GameSnapshot:
        return self.set_assist(not self.assist)

    def apply(self, command: Command) -> GameSnapshot:
        """Dispatch a front-end :class:`Command` to its transition."""

        handlers = {
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.SOFT_DROP: self.soft_drop,
            Command.ROTATE: self.rotate,
            Command.HARD_DROP: self.hard_drop,
            Command.HOLD: self.hold,
            Command.PAUSE: self.pause,
            Command.RESET: self.reset,
        }
        return handlers[command]()


__all__ = ["Command", "GamePhase", "GameSnapshot", "GameState"]

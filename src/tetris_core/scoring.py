"""Line-clear scoring, level progression and gravity speed."""

from __future__ import annotations

from dataclasses import dataclass

LINES_PER_LEVEL = 10
INITIAL_SPEED_MS = 1000
SPEED_STEP_MS = 100
MIN_SPEED_MS = 100
SOFT_DROP_POINTS = 1
HARD_DROP_POINTS = 2


@dataclass(frozen=True)
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (100, 300, 500, 800)
    soft_drop_points: int = SOFT_DROP_POINTS
    hard_drop_points: int = HARD_DROP_POINTS
    lines_per_level: int = LINES_PER_LEVEL
    initial_speed_ms: int = INITIAL_SPEED_MS
    speed_step_ms: int = SPEED_STEP_MS
    min_speed_ms: int = MIN_SPEED_MS

    def __post_init__(self) -> None:
        if self.lines_per_level <= 0:
            raise ValueError("lines_per_level must be positive")
        if self.min_speed_ms <= 0 or self.initial_speed_ms < self.min_speed_ms:
            raise ValueError("speeds must be positive and initial_speed_ms >= min_speed_ms")
        if self.speed_step_ms < 0:
            raise ValueError("speed_step_ms must not be negative")

    def score_for_lines(self, lines: int, level: int) -> int:
        """Return the points for clearing ``lines`` rows at once on ``level``.

        Only 1 to 4 simultaneous lines score; anything else is worth nothing.
        """

        if 1 <= lines <= len(self.line_clear_scores):
            return self.line_clear_scores[lines - 1] * level
        return 0

    def level_for_lines(self, total_lines: int) -> int:
        return total_lines // self.lines_per_level + 1

    def speed_for_level(self, level: int) -> int:
        """Return the gravity interval in milliseconds for ``level``.

        The interval shrinks by a fixed step per level and never drops below
        ``min_speed_ms``.
        """

        return max(self.min_speed_ms, self.initial_speed_ms - (level - 1) * self.speed_step_ms)


DEFAULT_RULES = ScoringRules()


def score_for_lines(lines: int, level: int) -> int:
    return DEFAULT_RULES.score_for_lines(lines, level)


def level_for_lines(total_lines: int) -> int:
    return DEFAULT_RULES.level_for_lines(total_lines)


def speed_for_level(level: int) -> int:
    return DEFAULT_RULES.speed_for_level(level)


__all__ = [
    "DEFAULT_RULES",
    "HARD_DROP_POINTS",
    "SOFT_DROP_POINTS",
    "ScoringRules",
    "level_for_lines",
    "score_for_lines",
    "speed_for_level",
]

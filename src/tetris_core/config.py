"""Tunable settings for a game session and the assist selector."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .board import HEIGHT, WIDTH
from .scoring import ScoringRules

PREVIEW_PIECES = 3


@dataclass(frozen=True)
class AssistConfig:
    """Thresholds and weights of the heuristic piece selector.

    None of these values are derived from anything; they are knobs that keep
    the assist subtle while still nudging the player towards clears.
    """

    # Boards filled below this ratio are left to pure chance.
    empty_threshold: float = 0.08
    # A row at least this full counts as an opportunity to clear.
    near_full_ratio: float = 0.6
    # Chance of a random piece when there is no such opportunity.
    idle_random_chance: float = 0.6
    # Chance of a random piece even when there is one.
    random_chance: float = 0.2
    hole_weight: float = 10.0
    height_weight: float = 0.5
    bumpiness_weight: float = 0.3
    lines_weight: float = -5.0
    # Extra anchor columns searched beyond each wall.
    x_padding: int = 3

    def __post_init__(self) -> None:
        for name in ("empty_threshold", "near_full_ratio", "idle_random_chance", "random_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.x_padding < 0:
            raise ValueError("x_padding must not be negative")


@dataclass(frozen=True)
class GameConfig:
    width: int = WIDTH
    height: int = HEIGHT
    preview_count: int = PREVIEW_PIECES
    rules: ScoringRules = field(default_factory=ScoringRules)
    assist: AssistConfig = field(default_factory=AssistConfig)
    assist_enabled: bool = False
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError("board must be at least 4x4")
        if self.preview_count < 0:
            raise ValueError("preview_count must not be negative")


__all__ = ["AssistConfig", "GameConfig", "PREVIEW_PIECES"]

"""Board-quality metrics used to rank candidate placements.

The functions accept any row-major grid (a numpy array or nested lists) where
``0`` marks an empty cell; board dimensions are taken from the grid itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

GridLike = Sequence[Sequence[int]]


@dataclass(frozen=True)
class BoardMetrics:
    """Surface and hole statistics of a board."""

    holes: int
    height: int
    bumpiness: int


def _cell_filled(grid: GridLike, row: int, col: int) -> bool:
    return bool(grid[row][col])


def _dims(grid: GridLike) -> tuple[int, int]:
    height = len(grid)
    width = len(grid[0]) if height else 0
    return height, width


def column_heights(grid: GridLike) -> list[int]:
    height, width = _dims(grid)
    heights = [0] * width
    for col in range(width):
        row = 0
        while row < height and not _cell_filled(grid, row, col):
            row += 1
        heights[col] = height - row
    return heights


def count_holes(grid: GridLike) -> int:
    """Count empty cells with at least one filled cell above in the same column."""

    height, width = _dims(grid)
    holes = 0
    for col in range(width):
        seen_block = False
        for row in range(height):
            if _cell_filled(grid, row, col):
                seen_block = True
            elif seen_block:
                holes += 1
    return holes


def stack_height(grid: GridLike) -> int:
    """Return the distance from the topmost occupied row to the floor."""

    height, _ = _dims(grid)
    for row in range(height):
        if any(grid[row]):
            return height - row
    return 0


def bumpiness(heights: Sequence[int]) -> int:
    total = 0
    for col in range(len(heights) - 1):
        total += abs(heights[col] - heights[col + 1])
    return total


def board_metrics(grid: GridLike) -> BoardMetrics:
    return BoardMetrics(
        holes=count_holes(grid),
        height=stack_height(grid),
        bumpiness=bumpiness(column_heights(grid)),
    )


__all__ = [
    "BoardMetrics",
    "board_metrics",
    "bumpiness",
    "column_heights",
    "count_holes",
    "stack_height",
]

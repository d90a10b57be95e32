"""Fair 7-bag piece supply.

All randomness goes through a :class:`RandomSource`, an object with a single
``random()`` method returning floats in ``[0, 1)``.  ``random.Random`` and
``numpy.random.Generator`` both qualify; tests pass scripted sources.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Protocol, Sequence, Tuple, TypeVar

from .tetromino import TetrominoType

T = TypeVar("T")

KINDS: Tuple[TetrominoType, ...] = tuple(TetrominoType)


class RandomSource(Protocol):
    def random(self) -> float:
        ...


def random_index(rng: RandomSource, n: int) -> int:
    """Return a uniform integer in ``[0, n)``."""

    # Guard against sources that can return exactly 1.0.
    return min(int(rng.random() * n), n - 1)


def random_choice(rng: RandomSource, items: Sequence[T]) -> T:
    return items[random_index(rng, len(items))]


def shuffled_bag(rng: RandomSource) -> List[TetrominoType]:
    """Return all seven kinds in a uniformly random order (Fisher-Yates)."""

    bag = list(KINDS)
    for i in range(len(bag) - 1, 0, -1):
        j = random_index(rng, i + 1)
        bag[i], bag[j] = bag[j], bag[i]
    return bag


class PieceBag:
    """Queue of upcoming kinds refilled one shuffled bag at a time.

    ``lookahead`` entries are always available for preview: whenever fewer
    than ``lookahead + 1`` kinds remain after a draw, another full bag is
    appended.  Bags are only ever appended whole, so every block of seven
    draws starting at a bag boundary contains each kind exactly once.
    """

    def __init__(self, rng: RandomSource, lookahead: int = 3) -> None:
        if lookahead < 0:
            raise ValueError("lookahead must not be negative")
        self._rng = rng
        self.lookahead = lookahead
        self._queue: Deque[TetrominoType] = deque()
        self.reset()

    def reset(self) -> None:
        self._queue.clear()
        self._refill()

    def _refill(self) -> None:
        while len(self._queue) < self.lookahead + 1:
            self._queue.extend(shuffled_bag(self._rng))

    def draw(self) -> TetrominoType:
        """Remove and return the next kind."""

        if not self._queue:
            self._refill()
        kind = self._queue.popleft()
        self._refill()
        return kind

    def preview(self) -> Tuple[TetrominoType, ...]:
        return tuple(self._queue)[: self.lookahead]

    def __len__(self) -> int:
        return len(self._queue)


__all__ = [
    "KINDS",
    "PieceBag",
    "RandomSource",
    "random_choice",
    "random_index",
    "shuffled_bag",
]

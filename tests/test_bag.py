from __future__ import annotations

import random

import numpy as np
import pytest

from tetris_core.bag import KINDS, PieceBag, random_index, shuffled_bag
from tetris_core.tetromino import TetrominoType


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def test_shuffled_bag_is_a_permutation() -> None:
    rng = random.Random(7)
    for _ in range(20):
        assert sorted(shuffled_bag(rng)) == sorted(KINDS)


def test_shuffle_is_driven_by_random_source() -> None:
    # j == i on every Fisher-Yates step leaves the order unchanged.
    assert shuffled_bag(FixedRandom(0.99)) == list(TetrominoType)
    assert shuffled_bag(FixedRandom(0.0)) == [
        TetrominoType.O,
        TetrominoType.T,
        TetrominoType.S,
        TetrominoType.Z,
        TetrominoType.J,
        TetrominoType.L,
        TetrominoType.I,
    ]


def test_random_index_clamps_upper_bound() -> None:
    assert random_index(FixedRandom(1.0), 7) == 6
    assert random_index(FixedRandom(0.0), 7) == 0


@pytest.mark.parametrize("rng", [random.Random(3), np.random.default_rng(3)])
def test_every_seven_draws_from_bag_boundary_hold_each_kind(rng) -> None:
    bag = PieceBag(rng, lookahead=3)
    draws = [bag.draw() for _ in range(70)]
    for start in range(0, 70, 7):
        assert sorted(draws[start : start + 7]) == sorted(KINDS)


def test_preview_matches_upcoming_draws() -> None:
    bag = PieceBag(random.Random(11), lookahead=3)
    bag.draw()
    preview = bag.preview()
    assert len(preview) == 3
    assert tuple(bag.draw() for _ in range(3)) == preview


def test_queue_never_runs_below_lookahead() -> None:
    bag = PieceBag(random.Random(5), lookahead=5)
    for _ in range(40):
        bag.draw()
        assert len(bag) >= 6
        assert len(bag.preview()) == 5


def test_reset_starts_a_fresh_bag() -> None:
    bag = PieceBag(random.Random(9), lookahead=3)
    for _ in range(3):
        bag.draw()
    bag.reset()
    assert len(bag) == 7
    assert sorted(bag.draw() for _ in range(7)) == sorted(KINDS)


def test_negative_lookahead_rejected() -> None:
    with pytest.raises(ValueError):
        PieceBag(random.Random(), lookahead=-1)

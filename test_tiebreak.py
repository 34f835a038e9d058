import random
from collections import Counter

import pytest

from tictactoe.tiebreak import TieBreaker, best_indices
from tictactoe.types import TieBreak

SCORES = [5, 7, 7, 3, 7]


def test_best_indices_ascending():
    assert best_indices(SCORES) == [1, 2, 4]
    assert best_indices([-3, -3]) == [0, 1]


def test_leftmost_and_rightmost():
    assert TieBreaker(TieBreak.LEFT).choose(SCORES) == 1
    assert TieBreaker(TieBreak.RIGHT).choose(SCORES) == 4


def test_random_mode_is_uniform_over_best():
    breaker = TieBreaker(TieBreak.RANDOM, rng=random.Random(1234))
    counts = Counter(breaker.choose(SCORES) for _ in range(3000))
    assert set(counts) == {1, 2, 4}
    for idx in (1, 2, 4):
        assert 850 <= counts[idx] <= 1150


def test_random_mode_is_reproducible_with_seed():
    a = TieBreaker("random", rng=random.Random(7))
    b = TieBreaker("random", rng=random.Random(7))
    assert [a.choose(SCORES) for _ in range(20)] == [b.choose(SCORES) for _ in range(20)]


@pytest.mark.parametrize("mode", list(TieBreak))
def test_single_candidate_short_circuits(mode):
    assert TieBreaker(mode).choose([-42]) == 0


def test_unique_maximum_ignores_mode():
    for mode in TieBreak:
        assert TieBreaker(mode, rng=random.Random(0)).choose([1, 9, 2]) == 1


def test_empty_scores_raise():
    with pytest.raises(ValueError):
        TieBreaker(TieBreak.LEFT).choose([])


def test_mode_parsing():
    assert TieBreaker("LEFT").mode is TieBreak.LEFT
    assert TieBreak.parse(" Right ") is TieBreak.RIGHT
    with pytest.raises(ValueError):
        TieBreak.parse("middle")

"""
Tie-break policy for choosing among equally scored best moves.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence, Union

from tictactoe.types import Score, TieBreak


def best_indices(scores: Sequence[Score]) -> List[int]:
    """Indices of every maximal score, in ascending order."""
    if not scores:
        raise ValueError("Cannot choose from an empty list of scores")
    biggest = max(scores)
    return [i for i, s in enumerate(scores) if s == biggest]


class TieBreaker:
    """Picks one index among the best scores according to a ``TieBreak`` mode.

    The random source is injected so callers (and tests) can seed it.
    """

    def __init__(self, mode: Union[TieBreak, str] = TieBreak.RANDOM,
                 rng: Optional[random.Random] = None) -> None:
        self.mode: TieBreak = TieBreak.parse(mode)
        self.rng: random.Random = rng if rng is not None else random.Random()

    def choose(self, scores: Sequence[Score]) -> int:
        """Return the index of the chosen best score."""
        if len(scores) == 1:
            return 0

        candidates = best_indices(scores)
        if self.mode is TieBreak.LEFT:
            return candidates[0]
        if self.mode is TieBreak.RIGHT:
            return candidates[-1]
        return self.rng.choice(candidates)

    def __repr__(self) -> str:
        return f"TieBreaker(mode={self.mode.value})"

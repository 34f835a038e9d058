"""
Minimax search over a single mutable board, plus strategy adapters.

The engine explores the full game tree down to a ply budget. It places and
removes marks on the board it was given instead of copying it per level, so
every temporary placement goes through ``Board.placed`` to guarantee the
board is restored before the call returns.
"""
from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import List, Optional, Union

import numpy as np

from tictactoe.board import Board
from tictactoe.errors import SearchError
from tictactoe.tiebreak import TieBreaker
from tictactoe.types import DRAW_SCORE, WIN_SCORE, Mark, Ply, Score, ScoredMove, TieBreak

logger = logging.getLogger(__name__)


class MinimaxEngine:
    """Plain minimax (negamax form) with a ply cutoff and no pruning."""

    def __init__(self, tiebreak: Union[TieBreak, str] = TieBreak.RANDOM,
                 rng: Optional[random.Random] = None) -> None:
        self.tiebreaker = TieBreaker(tiebreak, rng)
        self.nodes: int = 0

    @staticmethod
    def _check_args(ply: Ply, mover: Mark) -> Mark:
        if ply < 0:
            raise ValueError("ply must be non-negative")
        mover = Mark(mover)
        if mover is Mark.NONE:
            raise ValueError("mover must be X or O")
        return mover

    def _score(self, ply: Ply, board: Board, mover: Mark) -> Score:
        """Score the position just after ``mover`` moved, from ``mover``'s view."""
        # Ply is added so quicker wins score higher and quicker losses lower.
        if board.is_winner(mover):
            return WIN_SCORE + ply
        if board.is_winner(mover.opponent()):
            return -WIN_SCORE - ply
        if board.is_full():
            return DRAW_SCORE
        if ply == 0:
            return DRAW_SCORE
        return -self._minimax(ply - 1, board, mover.opponent()).score

    def _minimax(self, ply: Ply, board: Board, mover: Mark) -> ScoredMove:
        possible_moves = board.possible_moves()
        if not possible_moves:
            raise SearchError("No legal moves left to search")

        scores: List[Score] = []
        for move in possible_moves:
            self.nodes += 1
            with board.placed(move, mover):
                scores.append(self._score(ply, board, mover))

        index = self.tiebreaker.choose(scores)
        return ScoredMove(possible_moves[index], scores[index])

    def search(self, ply: Ply, board: Board, mover: Mark) -> ScoredMove:
        """Return the best move and its score for ``mover``.

        ``board`` is used as scratch space and is left exactly as it was.
        """
        mover = self._check_args(ply, mover)
        self.nodes = 0
        result = self._minimax(ply, board, mover)
        logger.debug("search ply=%d mover=%s nodes=%d best=%s score=%d",
                     ply, mover, self.nodes, result.move, result.score)
        return result

    def analyse(self, ply: Ply, board: Board, mover: Mark) -> np.ndarray:
        """Score every legal move for ``mover`` as a board-shaped array.

        Occupied cells hold NaN. Used for move hints.
        """
        mover = self._check_args(ply, mover)
        self.nodes = 0
        scores = np.full((board.size, board.size), np.nan)
        for move in board.possible_moves():
            self.nodes += 1
            with board.placed(move, mover):
                scores[move.row, move.col] = self._score(ply, board, mover)
        return scores


class SearchStrategy(ABC):
    """Abstract interface for search strategies."""

    nodes: int = 0

    @abstractmethod
    def search(self, ply: Ply, board: Board, mover: Mark) -> ScoredMove:  # pragma: no cover
        raise NotImplementedError


class MinimaxSearchStrategy(SearchStrategy):
    """Adapter around ``MinimaxEngine`` implementing the interface."""

    def __init__(self, tiebreak: Union[TieBreak, str] = TieBreak.RANDOM,
                 rng: Optional[random.Random] = None) -> None:
        self._engine = MinimaxEngine(tiebreak, rng)

    @property
    def nodes(self) -> int:
        return self._engine.nodes

    def search(self, ply: Ply, board: Board, mover: Mark) -> ScoredMove:
        return self._engine.search(ply, board, mover)


def get_engine(tiebreak: Union[TieBreak, str] = TieBreak.RANDOM,
               rng: Optional[random.Random] = None) -> MinimaxEngine:
    """Get a new search engine instance."""
    return MinimaxEngine(tiebreak, rng)


def get_search_strategy(tiebreak: Union[TieBreak, str] = TieBreak.RANDOM,
                        rng: Optional[random.Random] = None) -> SearchStrategy:
    """Factory for the default search strategy."""
    return MinimaxSearchStrategy(tiebreak, rng)


def minimax(ply: Ply, board: Board, mover: Mark,
            tiebreak: Union[TieBreak, str] = TieBreak.LEFT) -> ScoredMove:
    """One-shot convenience wrapper around ``MinimaxEngine.search``."""
    return get_engine(tiebreak).search(ply, board, mover)


__all__ = [
    "MinimaxEngine",
    "SearchStrategy",
    "MinimaxSearchStrategy",
    "get_engine",
    "get_search_strategy",
    "minimax",
]

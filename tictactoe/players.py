"""
Player strategies. Each one turns a board snapshot into a move for a given mark.
"""
from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Type, Union

from tictactoe.board import Board
from tictactoe.search import get_search_strategy
from tictactoe.types import Mark, Ply, Position, TieBreak

logger = logging.getLogger(__name__)


class Player(ABC):
    """Abstract move source.

    The mark is passed on every call instead of being stored, so a single
    player object can play either side.
    """

    name: str = "player"

    @abstractmethod
    def get_move(self, board: Board, mark: Mark) -> Position:  # pragma: no cover
        """Return a position that is currently legal on ``board``."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MinimaxPlayer(Player):
    """Plays the move chosen by a full minimax search."""

    name = "minimax"

    def __init__(self, ply: Ply = 9, tiebreak: Union[TieBreak, str] = TieBreak.RANDOM,
                 rng: Optional[random.Random] = None) -> None:
        if ply < 0:
            raise ValueError("ply must be non-negative")
        self.ply = ply
        self.tiebreak = TieBreak.parse(tiebreak)
        self.strategy = get_search_strategy(self.tiebreak, rng)

    def get_move(self, board: Board, mark: Mark) -> Position:
        move, score = self.strategy.search(self.ply, board, mark)
        logger.debug("%s picks %s (score %d, %d nodes)", mark, move, score, self.strategy.nodes)
        return move

    def __repr__(self) -> str:
        return f"MinimaxPlayer(ply={self.ply}, tiebreak={self.tiebreak.value})"


class RandomPlayer(Player):
    """Plays a uniformly random legal move."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, board: Board, mark: Mark) -> Position:
        return self.rng.choice(board.possible_moves())


class HumanPlayer(Player):
    """Reads moves from the console as 1-based cell numbers in row-major order.

    ``read_line`` and ``write`` default to ``input`` and ``print`` and can be
    replaced to drive the player from elsewhere. An optional ``hint`` callable
    is shown before each prompt.
    """

    name = "human"

    def __init__(self, read_line: Callable[[str], str] = input,
                 write: Callable[[str], Any] = print,
                 hint: Optional[Callable[[Board, Mark], Any]] = None) -> None:
        self.read_line = read_line
        self.write = write
        self.hint = hint

    def parse(self, text: str, size: int) -> Optional[Position]:
        """Turn user input into a position, or None if it is not a number."""
        try:
            cell = int(text.strip()) - 1
        except ValueError:
            return None
        if cell < 0:
            return None
        return Position.from_index(cell, size)

    def get_move(self, board: Board, mark: Mark) -> Position:
        if self.hint is not None:
            self.write(str(self.hint(board, mark)))
        while True:
            move = self.parse(self.read_line("Enter move: "), board.size)
            if move is not None and board.is_allowed(move):
                return move
            self.write("Invalid move")


PLAYER_TYPES: Dict[str, Type[Player]] = {
    MinimaxPlayer.name: MinimaxPlayer,
    RandomPlayer.name: RandomPlayer,
    HumanPlayer.name: HumanPlayer,
}


def get_player(kind: str, **kwargs: Any) -> Player:
    """Create a player by name ("minimax", "random" or "human")."""
    try:
        cls = PLAYER_TYPES[kind.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown player type {kind!r}; expected one of {sorted(PLAYER_TYPES)}") from None
    return cls(**kwargs)

"""
Exceptions raised at the board and search boundaries.
"""
from __future__ import annotations

from typing import Any, Optional


class TicTacToeError(Exception):
    """Base class for all engine errors."""


class IllegalMove(TicTacToeError):
    """A move targeted an occupied or out-of-range cell."""

    def __init__(self, message: str = "Move is not allowed",
                 position: Optional[Any] = None, mark: Optional[Any] = None) -> None:
        super().__init__(message)
        self.position = position
        self.mark = mark


class InvalidBoardData(TicTacToeError, ValueError):
    """Raw grid data was empty, not square, or held an unknown cell value."""


class SearchError(TicTacToeError):
    """The search engine was asked for a move on a board with no legal moves."""

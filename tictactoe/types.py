"""
Type definitions and protocols for the Tic-Tac-Toe engine.

This module provides:
- The ``Mark`` enum used for cell contents and for "whose turn"
- Immutable value types for board positions and scored moves
- The protocol a move source must satisfy
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, List, NamedTuple, Protocol, Sequence, Tuple, Union

if TYPE_CHECKING:
    from tictactoe.board import Board

# Basic type aliases
Score = int
Ply = int
CellValue = Union["Mark", int, str]
RawGrid = Sequence[Sequence[CellValue]]


class Mark(IntEnum):
    """Occupant of a board cell, also used to tag the side to move."""

    NONE = 0
    X = 1
    O = -1

    def opponent(self) -> "Mark":
        """Return the other side; NONE has no opponent."""
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.NONE

    @classmethod
    def parse(cls, value: CellValue) -> "Mark":
        """Convert an int, a letter or a Mark into a Mark."""
        if isinstance(value, Mark):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in ("", ".", "-", "_"):
                return cls.NONE
            if key in ("X", "O"):
                return cls[key]
            raise ValueError(f"Unknown mark {value!r}")
        return cls(int(value))

    def __str__(self) -> str:
        return " " if self is Mark.NONE else self.name

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the integer value.
        return format(str(self), format_spec)


def opponent(mark: Mark) -> Mark:
    return Mark(mark).opponent()


@dataclass(frozen=True, order=True)
class Position:
    """A zero-based (row, col) coordinate on the board."""

    row: int
    col: int

    @classmethod
    def from_index(cls, index: int, size: int) -> "Position":
        """Build a position from a zero-based row-major cell index."""
        return cls(index // size, index % size)


class ScoredMove(NamedTuple):
    """A move together with the score one level of search gave it."""

    move: Position
    score: Score


class TieBreak(Enum):
    """Rule used to pick among equally scored best moves."""

    LEFT = "left"
    RIGHT = "right"
    RANDOM = "random"

    @classmethod
    def parse(cls, value: Union["TieBreak", str]) -> "TieBreak":
        if isinstance(value, TieBreak):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = [m.value for m in cls]
            raise ValueError(f"tiebreak must be one of {valid}, got {value!r}") from None


class MoveResult(Enum):
    """Outcome of a checked board mutation."""

    OK = "ok"
    ILLEGAL = "illegal"

    def __bool__(self) -> bool:
        return self is MoveResult.OK


MoveHistory = List[Tuple[Mark, Position]]


class PlayerProtocol(Protocol):
    """Protocol for anything that can pick a move."""

    def get_move(self, board: "Board", mark: Mark) -> Position:
        """Return a position that is legal on ``board`` for ``mark``."""
        ...


# Constants
WIN_SCORE = 10
DRAW_SCORE = 0

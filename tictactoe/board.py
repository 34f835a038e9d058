"""
Mutable N x N Tic-Tac-Toe board.

Cells are kept in a plain list-of-lists of ``Mark`` values: the search engine
hits ``set``/``remove``/``is_winner`` hundreds of thousands of times per move,
and small Python lists beat numpy for grids this size. ``to_array`` and
``from_data`` convert to and from numpy grids at the edges.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Union

import numpy as np

from tictactoe.errors import IllegalMove, InvalidBoardData
from tictactoe.types import Mark, MoveResult, Position, RawGrid

Grid = List[List[Mark]]


def _copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


class Board:
    """Square grid of marks with move/undo and win detection."""

    def __init__(self, size: int = 3) -> None:
        """Create an empty ``size`` x ``size`` board."""
        if int(size) < 1:
            raise InvalidBoardData("Board size must be at least 1")
        self.size: int = int(size)
        self._grid: Grid = [[Mark.NONE] * self.size for _ in range(self.size)]

    @classmethod
    def from_data(cls, data: Union[RawGrid, np.ndarray]) -> "Board":
        """Create a board from raw grid data.

        Accepts nested sequences or a 2-D numpy array of marks, ints or
        letters. The data must be non-empty and square; it is copied, so later
        changes to ``data`` never reach the board.
        """
        size = len(data)
        if size == 0:
            raise InvalidBoardData("Data is empty.")
        for row in data:
            try:
                width = len(row)
            except TypeError:
                raise InvalidBoardData("Board is not square.") from None
            if width != size:
                raise InvalidBoardData("Board is not square.")

        grid: Grid = []
        for r, row in enumerate(data):
            cells = []
            for c, cell in enumerate(row):
                try:
                    cells.append(Mark.parse(cell))
                except (TypeError, ValueError) as exc:
                    raise InvalidBoardData(f"Invalid cell {cell!r} at ({r}, {c})") from exc
            grid.append(cells)

        board = cls(size)
        board._grid = grid
        return board

    # ----------------------------
    # Unchecked writes
    # ----------------------------
    def set(self, position: Position, mark: Mark) -> None:
        """Put ``mark`` on ``position`` without checking legality."""
        self._grid[position.row][position.col] = mark

    def remove(self, position: Position) -> None:
        """Clear the cell at ``position``."""
        self._grid[position.row][position.col] = Mark.NONE

    @contextmanager
    def placed(self, position: Position, mark: Mark) -> Iterator["Board"]:
        """Temporarily place ``mark``; the cell is cleared again on exit."""
        self.set(position, mark)
        try:
            yield self
        finally:
            self.remove(position)

    # ----------------------------
    # Checked writes
    # ----------------------------
    def set_move(self, move: Position, mark: Mark) -> None:
        """Put a move on the board, raising ``IllegalMove`` if it is not allowed."""
        if not self.is_allowed(move):
            raise IllegalMove(f"Move {move} is not allowed", position=move, mark=mark)
        self.set(move, Mark(mark))

    def try_move(self, move: Position, mark: Mark) -> MoveResult:
        """Like ``set_move`` but reports an illegal move instead of raising."""
        try:
            self.set_move(move, mark)
        except IllegalMove:
            return MoveResult.ILLEGAL
        return MoveResult.OK

    def is_allowed(self, move: Position) -> bool:
        row, col = move.row, move.col
        if row < 0 or row > self.size - 1 or col < 0 or col > self.size - 1:
            return False
        return self._grid[row][col] == Mark.NONE

    # ----------------------------
    # Queries
    # ----------------------------
    def possible_moves(self) -> List[Position]:
        """All empty cells in row-major order."""
        return [
            Position(r, c)
            for r, row in enumerate(self._grid)
            for c, cell in enumerate(row)
            if cell == Mark.NONE
        ]

    def get(self, position: Position) -> Mark:
        return Mark(self._grid[position.row][position.col])

    def get_data(self) -> Grid:
        """Deep copy of the raw grid."""
        return _copy_grid(self._grid)

    def to_array(self) -> np.ndarray:
        """The grid as an ``int8`` array (X=1, O=-1, empty=0)."""
        return np.array(self._grid, dtype=np.int8)

    def copy(self) -> "Board":
        board = Board(self.size)
        board._grid = _copy_grid(self._grid)
        return board

    def is_winner(self, mark: Mark) -> bool:
        """True if ``mark`` fills a row, a column or one of the two diagonals."""
        if mark == Mark.NONE:
            return False
        grid, n = self._grid, self.size
        return (
            any(row.count(mark) == n for row in grid)
            or any(col.count(mark) == n for col in zip(*grid))
            or [grid[i][i] for i in range(n)].count(mark) == n
            or [grid[i][n - 1 - i] for i in range(n)].count(mark) == n
        )

    def is_full(self) -> bool:
        """True when no empty cell is left, i.e. ``possible_moves()`` is empty."""
        return not any(Mark.NONE in row for row in self._grid)

    def count(self, mark: Mark) -> int:
        return sum(row.count(mark) for row in self._grid)

    # ----------------------------
    # Dunder helpers
    # ----------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(size={self.size}, moves_left={len(self.possible_moves())})"

    def __str__(self) -> str:
        return "\n".join(" |".join(f" {Mark(cell)}" for cell in row) for row in self._grid)

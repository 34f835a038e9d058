"""
Game orchestration: alternates two players on one authoritative board.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from tictactoe.board import Board
from tictactoe.types import Mark, MoveHistory, MoveResult, PlayerProtocol

logger = logging.getLogger(__name__)

EventCallback = Callable[[str, Board], None]


@dataclass
class GameResult:
    """Outcome of a finished game."""

    winner: Mark
    board: Board
    forfeit: bool = False
    moves: MoveHistory = field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return self.winner == Mark.NONE

    def describe(self) -> str:
        if self.is_draw:
            return "It's a draw"
        return f"{self.winner} won!"


class TicTacToe:
    """Runs a game between an X player and an O player.

    Each player receives a private copy of the board, so nothing a player does
    to its snapshot can touch the game's own board. An illegal move forfeits
    the game to the opponent.
    """

    def __init__(self, size: int = 3, on_event: Optional[EventCallback] = None) -> None:
        self.size = size
        self.board = Board(size)
        self.on_event = on_event
        self.moves: MoveHistory = []

    def reset(self) -> None:
        self.board = Board(self.size)
        self.moves = []

    def _emit(self, message: str) -> None:
        if self.on_event is not None:
            self.on_event(message, self.board)

    def _finish(self, winner: Mark, forfeit: bool = False) -> GameResult:
        result = GameResult(winner=winner, board=self.board.copy(),
                            forfeit=forfeit, moves=list(self.moves))
        logger.info("Game over after %d moves: %s%s", len(self.moves), result.describe(),
                    " (forfeit)" if forfeit else "")
        self._emit(result.describe())
        return result

    def play_turn(self, player: PlayerProtocol, mark: Mark) -> Optional[GameResult]:
        """Let ``player`` move as ``mark``; return a result if the game ended."""
        self._emit(f"{mark}'s turn")
        move = player.get_move(self.board.copy(), mark)

        if self.board.try_move(move, mark) is MoveResult.ILLEGAL:
            logger.warning("%s played illegal move %s and forfeits", mark, move)
            return self._finish(mark.opponent(), forfeit=True)

        self.moves.append((mark, move))
        logger.info("%s plays %s", mark, move)

        if self.board.is_winner(mark):
            return self._finish(mark)
        if self.board.is_full():
            return self._finish(Mark.NONE)
        return None

    def play_game(self, x_player: PlayerProtocol, o_player: PlayerProtocol) -> GameResult:
        """Play a full game from an empty board; X moves first."""
        self.reset()
        players = ((x_player, Mark.X), (o_player, Mark.O))
        turn = 0
        while True:
            player, mark = players[turn % 2]
            result = self.play_turn(player, mark)
            if result is not None:
                return result
            turn += 1

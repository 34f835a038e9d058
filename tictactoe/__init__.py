"""Tic-Tac-Toe package: board, minimax search, players and game loop.

Usage examples:
    from tictactoe import Board, Mark, Position
    from tictactoe import MinimaxEngine, MinimaxPlayer
    from tictactoe import TicTacToe
"""
from __future__ import annotations

# Core types and errors
from .types import Mark, Position, ScoredMove, TieBreak, MoveResult, opponent
from .errors import TicTacToeError, IllegalMove, InvalidBoardData, SearchError

# Board and search
from .board import Board
from .tiebreak import TieBreaker, best_indices
from .search import (
    MinimaxEngine,
    SearchStrategy,
    MinimaxSearchStrategy,
    get_engine,
    get_search_strategy,
    minimax,
)

# Players and game loop
from .players import Player, MinimaxPlayer, RandomPlayer, HumanPlayer, get_player
from .game import TicTacToe, GameResult

__version__ = "1.0.0"

import random

import pytest

from tictactoe.board import Board
from tictactoe.players import HumanPlayer, MinimaxPlayer, RandomPlayer, get_player
from tictactoe.search import MinimaxSearchStrategy
from tictactoe.types import Mark, Position, TieBreak

X, O = Mark.X, Mark.O


def board_from_rows(*rows):
    return Board.from_data([list(r) for r in rows])


def scripted(*lines):
    """Fake console: returns the given lines in order and records prompts."""
    feed = iter(lines)
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        return next(feed)

    return read_line, prompts


def test_minimax_player_takes_win_for_either_mark():
    board = board_from_rows("XX ", "OO ", "   ")
    player = MinimaxPlayer(ply=4, tiebreak=TieBreak.LEFT)
    assert player.get_move(board, X) == Position(0, 2)
    assert player.get_move(board, O) == Position(1, 2)


def test_minimax_player_does_not_mutate_its_board():
    board = board_from_rows("X  ", " O ", "   ")
    before = board.get_data()
    MinimaxPlayer(ply=9, tiebreak="right").get_move(board, X)
    assert board.get_data() == before


def test_minimax_player_searches_through_strategy():
    player = MinimaxPlayer(ply=2, tiebreak="left")
    assert isinstance(player.strategy, MinimaxSearchStrategy)
    assert player.tiebreak is TieBreak.LEFT
    player.get_move(board_from_rows("X  ", "   ", "   "), O)
    assert player.strategy.nodes > 0
    assert repr(player) == "MinimaxPlayer(ply=2, tiebreak=left)"


def test_minimax_player_rejects_negative_ply():
    with pytest.raises(ValueError):
        MinimaxPlayer(ply=-2)


def test_random_player_returns_legal_moves():
    rng = random.Random(42)
    player = RandomPlayer(rng)
    board = board_from_rows("XO ", " X ", "O  ")
    seen = set()
    for _ in range(200):
        move = player.get_move(board, X)
        assert board.is_allowed(move)
        seen.add(move)
    assert seen == set(board.possible_moves())


def test_human_player_reads_one_based_cells():
    read_line, prompts = scripted("5")
    player = HumanPlayer(read_line=read_line, write=lambda msg: None)
    assert player.get_move(Board(3), X) == Position(1, 1)
    assert prompts == ["Enter move: "]


def test_human_player_reprompts_on_bad_input():
    board = board_from_rows("X  ", "   ", "   ")
    read_line, prompts = scripted("abc", "1", "0", "10", "", "9")
    messages = []
    player = HumanPlayer(read_line=read_line, write=messages.append)
    assert player.get_move(board, O) == Position(2, 2)
    assert len(prompts) == 6
    assert messages == ["Invalid move"] * 5


def test_human_player_shows_hint_first():
    read_line, _ = scripted("3")
    messages = []
    player = HumanPlayer(read_line=read_line, write=messages.append,
                         hint=lambda board, mark: f"hint for {mark}")
    assert player.get_move(Board(3), O) == Position(0, 2)
    assert messages == ["hint for O"]


def test_human_player_parse():
    player = HumanPlayer(read_line=lambda p: "", write=lambda m: None)
    assert player.parse(" 4 ", 4) == Position(0, 3)
    assert player.parse("16", 4) == Position(3, 3)
    assert player.parse("x", 4) is None
    assert player.parse("0", 4) is None


def test_get_player_factory():
    assert isinstance(get_player("minimax", ply=2), MinimaxPlayer)
    assert isinstance(get_player(" Random "), RandomPlayer)
    assert isinstance(get_player("human"), HumanPlayer)
    with pytest.raises(ValueError):
        get_player("oracle")

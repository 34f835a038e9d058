from __future__ import annotations

import argparse
import random
from collections import Counter
from typing import List, Optional

from pydantic import ValidationError

from config import TicTacToeConfig, get_config, load_config_from_file, setup_logging
from tictactoe import Board, TicTacToe, get_engine, get_player
from tictactoe.players import Player


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play N x N Tic-Tac-Toe")
    ap.add_argument("--config", default=None, help="JSON config file")
    ap.add_argument("--size", type=int, default=None, help="Board size (rows and columns)")
    ap.add_argument("--x", dest="x_player", default=None, help="X player: minimax, random or human")
    ap.add_argument("--o", dest="o_player", default=None, help="O player: minimax, random or human")
    ap.add_argument("--ply", type=int, default=None, help="Minimax search depth")
    ap.add_argument("--tiebreak", default=None, help="Tie-break mode: left, right or random")
    ap.add_argument("--seed", type=int, default=None, help="Random seed")
    ap.add_argument("--games", type=int, default=1, help="Number of games to play")
    ap.add_argument("--hints", action="store_true", help="Show minimax scores before human moves")
    return ap.parse_args(argv)


def build_config(args: argparse.Namespace) -> TicTacToeConfig:
    cfg = load_config_from_file(args.config) if args.config else get_config()
    cfg.update_from_dict({
        "game": {k: v for k, v in (("board_size", args.size),
                                   ("x_player", args.x_player),
                                   ("o_player", args.o_player)) if v is not None},
        "engine": {k: v for k, v in (("ply", args.ply),
                                     ("tiebreak", args.tiebreak),
                                     ("seed", args.seed)) if v is not None},
    })
    return cfg


def make_player(kind: str, cfg: TicTacToeConfig, rng: random.Random, hints: bool) -> Player:
    if kind == "minimax":
        return get_player(kind, ply=cfg.search_ply(), tiebreak=cfg.engine.tiebreak, rng=rng)
    if kind == "random":
        return get_player(kind, rng=rng)
    if hints:
        engine = get_engine(cfg.engine.tiebreak, rng)
        return get_player(kind, hint=lambda board, mark: engine.analyse(cfg.search_ply(), board, mark))
    return get_player(kind)


def print_board_msg(message: str, board: Board) -> None:
    print()
    print(board)
    print("\n" + message)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        cfg = build_config(args)
    except (ValidationError, ValueError, OSError) as exc:
        raise SystemExit(f"Invalid configuration: {exc}")
    setup_logging(cfg.logging)

    rng = random.Random(cfg.engine.seed)
    x_player = make_player(cfg.game.x_player, cfg, rng, args.hints)
    o_player = make_player(cfg.game.o_player, cfg, rng, args.hints)

    game = TicTacToe(cfg.game.board_size, on_event=print_board_msg)
    tally: Counter = Counter()
    for _ in range(max(1, args.games)):
        result = game.play_game(x_player, o_player)
        tally[result.describe()] += 1

    if args.games > 1:
        print()
        for outcome, count in tally.most_common():
            print(f"{outcome:<14} {count}")


if __name__ == "__main__":
    main()

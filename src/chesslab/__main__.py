"""Self-play driver: ``python -m chesslab --depth 3 --plies 10``."""

from __future__ import annotations

import argparse
import logging
import sys

from chesslab.config import EngineSettings
from chesslab.core.board import create_standard_board
from chesslab.engine.minimax import is_end_game

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chesslab",
        description="Let the minimax engine play against itself.",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=EngineSettings.search_depth,
        help="search depth in plies (default: %(default)s)",
    )
    parser.add_argument(
        "--plies",
        type=int,
        default=10,
        help="maximum number of half-moves to play (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging verbosity (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        strategy = EngineSettings(search_depth=args.depth).create_strategy()
    except ValueError as exc:
        _LOGGER.error("%s", exc)
        return 2

    board = create_standard_board()
    print(board)
    for ply in range(1, args.plies + 1):
        if is_end_game(board):
            break
        player = board.current_player
        move = strategy.execute(board)
        if move is None:
            break
        transition = player.make_move(move)
        if not transition.is_done:
            _LOGGER.error("%s produced %s for %s", strategy, transition.status, move)
            return 1
        board = transition.board
        print(f"{ply}. {player}: {move}")
        print(board)
        _LOGGER.debug("Board after ply %d:\n%s", ply, board)

    player = board.current_player
    if player.is_in_checkmate():
        print(f"{player} is checkmated")
    elif player.is_in_stalemate():
        print(f"{player} is stalemated")
    return 0


if __name__ == "__main__":
    sys.exit(main())

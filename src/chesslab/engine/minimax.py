"""Plain depth-limited minimax search."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import TYPE_CHECKING, Final

from chesslab.engine.evaluator import BoardEvaluator, StandardBoardEvaluator
from chesslab.engine.strategy import MoveStrategy, SearchStats

if TYPE_CHECKING:
    from chesslab.core.board import Board
    from chesslab.core.move import Move

_LOGGER = logging.getLogger(__name__)

# Larger than any evaluation, including depth-scaled mate bonuses.
_INF_SCORE: Final = 1 << 62


def is_end_game(board: Board) -> bool:
    """Whether the side to move is checkmated or stalemated."""
    player = board.current_player
    return player.is_in_checkmate() or player.is_in_stalemate()


class MiniMax(MoveStrategy):
    """Exhaustive minimax: white maximises, black minimises.

    Every move is tried through :meth:`Player.make_move`; moves that do not
    complete (illegal or self-check) are skipped. Leaves and terminal boards
    are scored by the evaluator.
    """

    __slots__ = ("_evaluator", "_search_depth", "_boards_evaluated", "_last_stats")

    def __init__(
        self,
        search_depth: int,
        evaluator: BoardEvaluator | None = None,
    ) -> None:
        if search_depth <= 0:
            raise ValueError("Search depth must be >= 1")
        self._search_depth = search_depth
        self._evaluator: BoardEvaluator = evaluator or StandardBoardEvaluator()
        self._boards_evaluated = 0
        self._last_stats: SearchStats | None = None

    @property
    def search_depth(self) -> int:
        return self._search_depth

    @property
    def last_stats(self) -> SearchStats | None:
        """Statistics of the most recent :meth:`execute` call."""
        return self._last_stats

    def execute(self, board: Board) -> Move | None:
        """Best move for the side to move, or ``None`` if it has none."""
        started = perf_counter()
        self._boards_evaluated = 0
        player = board.current_player
        maximizing = player.alliance.is_white
        _LOGGER.info("%s is thinking with depth = %d", player, self._search_depth)

        best_move: Move | None = None
        highest_seen = -_INF_SCORE
        lowest_seen = _INF_SCORE

        for move in player.legal_moves:
            transition = player.make_move(move)
            if not transition.is_done:
                continue
            if maximizing:
                value = self.minimize(transition.board, self._search_depth - 1)
                # Ties go to the later move.
                if value >= highest_seen:
                    highest_seen = value
                    best_move = move
            else:
                value = self.maximize(transition.board, self._search_depth - 1)
                if value <= lowest_seen:
                    lowest_seen = value
                    best_move = move

        elapsed_ms = (perf_counter() - started) * 1000.0
        self._last_stats = SearchStats(
            best_move=best_move,
            score=highest_seen if maximizing else lowest_seen,
            depth=self._search_depth,
            boards_evaluated=self._boards_evaluated,
            elapsed_ms=elapsed_ms,
        )
        _LOGGER.info(
            "%s chose %s after %d boards in %.0f ms",
            player,
            best_move if best_move is not None else "no move",
            self._boards_evaluated,
            elapsed_ms,
        )
        return best_move

    def minimize(self, board: Board, depth: int) -> int:
        if depth == 0 or is_end_game(board):
            return self._evaluate(board, depth)
        lowest_seen = _INF_SCORE
        player = board.current_player
        for move in player.legal_moves:
            transition = player.make_move(move)
            if transition.is_done:
                value = self.maximize(transition.board, depth - 1)
                lowest_seen = min(lowest_seen, value)
        return lowest_seen

    def maximize(self, board: Board, depth: int) -> int:
        if depth == 0 or is_end_game(board):
            return self._evaluate(board, depth)
        highest_seen = -_INF_SCORE
        player = board.current_player
        for move in player.legal_moves:
            transition = player.make_move(move)
            if transition.is_done:
                value = self.minimize(transition.board, depth - 1)
                highest_seen = max(highest_seen, value)
        return highest_seen

    def _evaluate(self, board: Board, depth: int) -> int:
        self._boards_evaluated += 1
        return self._evaluator.evaluate(board, depth)

    def __str__(self) -> str:
        return "MiniMax"

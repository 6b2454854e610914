"""Static board evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol

if TYPE_CHECKING:
    from chesslab.core.board import Board
    from chesslab.core.player import Player

CHECK_BONUS: Final = 50
CHECK_MATE_BONUS: Final = 10_000
DEPTH_BONUS: Final = 100
CASTLE_BONUS: Final = 60


class BoardEvaluator(Protocol):
    """Zero-sum scorer: positive favours white, negative favours black."""

    def evaluate(self, board: Board, depth: int) -> int: ...


class StandardBoardEvaluator:
    """Material + mobility + check/mate/castle bonuses.

    *depth* is the remaining search depth at the scored node, so a mate found
    closer to the root (larger remaining depth) scores higher.
    """

    __slots__ = ()

    def evaluate(self, board: Board, depth: int) -> int:
        return self._score_player(board.white_player, depth) - self._score_player(
            board.black_player, depth
        )

    def _score_player(self, player: Player, depth: int) -> int:
        return (
            self._piece_value(player)
            + self._mobility(player)
            + self._check(player)
            + self._checkmate(player, depth)
            + self._castled(player)
        )

    @staticmethod
    def _piece_value(player: Player) -> int:
        return sum(piece.value for piece in player.active_pieces)

    @staticmethod
    def _mobility(player: Player) -> int:
        return len(player.legal_moves)

    @staticmethod
    def _check(player: Player) -> int:
        return CHECK_BONUS if player.opponent.is_in_check else 0

    @staticmethod
    def _checkmate(player: Player, depth: int) -> int:
        if not player.opponent.is_in_checkmate():
            return 0
        return CHECK_MATE_BONUS * _depth_bonus(depth)

    @staticmethod
    def _castled(player: Player) -> int:
        return CASTLE_BONUS if player.is_castled() else 0

    def __str__(self) -> str:
        return "StandardBoardEvaluator"


def _depth_bonus(depth: int) -> int:
    return 1 if depth == 0 else DEPTH_BONUS * depth

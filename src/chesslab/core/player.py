"""Player - one side's view over a board: legality, check, castling, mate."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from chesslab.core.enums import Alliance, MoveKind, MoveStatus, PieceType
from chesslab.core.errors import InvalidBoardError
from chesslab.core.move import Move
from chesslab.core.types import Coordinate

if TYPE_CHECKING:
    from chesslab.core.board import Board
    from chesslab.core.piece import Piece

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveTransition:
    """Result of :meth:`Player.make_move`.

    ``board`` is the new position when ``status`` is ``DONE`` and the
    unchanged original board otherwise.
    """

    board: Board
    move: Move
    status: MoveStatus

    @property
    def is_done(self) -> bool:
        return self.status.is_done


@dataclass(frozen=True, slots=True)
class _CastleLane:
    """Squares involved in one castle for one side."""

    kind: MoveKind
    king_start: Coordinate
    king_destination: Coordinate
    rook_start: Coordinate
    rook_destination: Coordinate
    must_be_empty: tuple[Coordinate, ...]
    must_be_safe: tuple[Coordinate, ...]


_CASTLE_LANES: Final[dict[Alliance, tuple[_CastleLane, ...]]] = {
    Alliance.WHITE: (
        _CastleLane(MoveKind.KING_SIDE_CASTLE, 60, 62, 63, 61, (61, 62), (61, 62)),
        _CastleLane(
            MoveKind.QUEEN_SIDE_CASTLE, 60, 58, 56, 59, (57, 58, 59), (58, 59)
        ),
    ),
    Alliance.BLACK: (
        _CastleLane(MoveKind.KING_SIDE_CASTLE, 4, 6, 7, 5, (5, 6), (5, 6)),
        _CastleLane(MoveKind.QUEEN_SIDE_CASTLE, 4, 2, 0, 3, (1, 2, 3), (2, 3)),
    ),
}


def calculate_attacks_on_tile(
    coordinate: Coordinate, moves: Iterable[Move]
) -> tuple[Move, ...]:
    """Moves among *moves* whose destination is *coordinate*."""
    return tuple(move for move in moves if move.destination == coordinate)


class Player:
    """Per-side view over a :class:`~chesslab.core.board.Board`.

    Built by the board itself from both sides' raw (pseudo-legal) moves:
    the player's legal moves are its raw moves plus any castles, and it is
    in check when an opponent raw move lands on its king.
    """

    __slots__ = (
        "_board",
        "_alliance",
        "_king",
        "_legal_moves",
        "_legal_move_set",
        "_is_in_check",
        "_has_escape_moves",
    )

    def __init__(
        self,
        board: Board,
        alliance: Alliance,
        moves: tuple[Move, ...],
        opponent_moves: tuple[Move, ...],
    ) -> None:
        self._board = board
        self._alliance = alliance
        self._king = self._establish_king()
        self._is_in_check = bool(
            calculate_attacks_on_tile(self._king.position, opponent_moves)
        )
        self._legal_moves: tuple[Move, ...] = moves + self._calculate_king_castles(
            opponent_moves
        )
        self._legal_move_set = frozenset(self._legal_moves)
        self._has_escape_moves: bool | None = None

    def _establish_king(self) -> Piece:
        for piece in self.active_pieces:
            if piece.piece_type.is_king:
                return piece
        raise InvalidBoardError(f"No {self._alliance.name} king on board")

    def _calculate_king_castles(
        self, opponent_moves: tuple[Move, ...]
    ) -> tuple[Move, ...]:
        king = self._king
        if not king.is_first_move or self._is_in_check:
            return ()

        board = self._board
        castles: list[Move] = []
        for lane in _CASTLE_LANES[self._alliance]:
            if king.position != lane.king_start:
                continue
            if any(board.get_tile(sq).is_occupied for sq in lane.must_be_empty):
                continue
            rook = board.get_tile(lane.rook_start).piece
            if (
                rook is None
                or rook.alliance != self._alliance
                or rook.piece_type != PieceType.ROOK
                or not rook.is_first_move
            ):
                continue
            if any(
                calculate_attacks_on_tile(sq, opponent_moves)
                for sq in lane.must_be_safe
            ):
                continue
            castles.append(
                Move.castle(
                    lane.kind,
                    board,
                    king,
                    lane.king_destination,
                    rook,
                    lane.rook_destination,
                )
            )
        return tuple(castles)

    # -- Accessors ----------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def alliance(self) -> Alliance:
        return self._alliance

    @property
    def king(self) -> Piece:
        return self._king

    @property
    def legal_moves(self) -> tuple[Move, ...]:
        return self._legal_moves

    @property
    def active_pieces(self) -> tuple[Piece, ...]:
        return self._board.active_pieces(self._alliance)

    @property
    def opponent(self) -> Player:
        return self._board.player(self._alliance.opposite)

    # -- Rules --------------------------------------------------------------

    @property
    def is_in_check(self) -> bool:
        return self._is_in_check

    def is_move_legal(self, move: Move) -> bool:
        return move in self._legal_move_set

    def is_castled(self) -> bool:
        return self._board.has_castled(self._alliance)

    def is_in_checkmate(self) -> bool:
        return self._is_in_check and not self.has_escape_moves()

    def is_in_stalemate(self) -> bool:
        return not self._is_in_check and not self.has_escape_moves()

    def has_escape_moves(self) -> bool:
        """Whether at least one legal move completes without exposing the king."""
        if self._has_escape_moves is None:
            self._has_escape_moves = any(
                self.make_move(move).is_done for move in self._legal_moves
            )
        return self._has_escape_moves

    def make_move(self, move: Move) -> MoveTransition:
        """Attempt *move*; the only gate through which positions change."""
        if not self.is_move_legal(move):
            _LOGGER.debug("Rejected %s for %s: not a legal move", move, self)
            return MoveTransition(self._board, move, MoveStatus.ILLEGAL_MOVE)

        transition_board = move.execute()
        # The side that just moved is now the opponent on the new board.
        mover_king = transition_board.current_player.opponent.king
        king_attacks = calculate_attacks_on_tile(
            mover_king.position, transition_board.current_player.legal_moves
        )
        if king_attacks:
            _LOGGER.debug("Rejected %s for %s: leaves king in check", move, self)
            return MoveTransition(
                self._board, move, MoveStatus.LEAVES_PLAYER_IN_CHECK
            )
        return MoveTransition(transition_board, move, MoveStatus.DONE)

    def __str__(self) -> str:
        return "White Player" if self._alliance.is_white else "Black Player"

    def __repr__(self) -> str:
        return f"Player({self._alliance.name}, moves={len(self._legal_moves)})"

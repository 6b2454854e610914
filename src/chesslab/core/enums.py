"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto
from typing import TypeVar

from chesslab.core.types import EIGHTH_RANK, FIRST_RANK, Coordinate

_T = TypeVar("_T")


class Alliance(IntEnum):
    """Side a piece or player belongs to."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Alliance:
        return Alliance(1 - self.value)

    @property
    def direction(self) -> int:
        """Sign of a pawn advance in coordinate space (white moves toward a8)."""
        return -1 if self is Alliance.WHITE else 1

    @property
    def opposite_direction(self) -> int:
        return -self.direction

    @property
    def is_white(self) -> bool:
        return self is Alliance.WHITE

    @property
    def is_black(self) -> bool:
        return self is Alliance.BLACK

    def is_pawn_promotion_square(self, coordinate: Coordinate) -> bool:
        """Whether a pawn of this side promotes on *coordinate*."""
        if self is Alliance.WHITE:
            return EIGHTH_RANK[coordinate]
        return FIRST_RANK[coordinate]

    def choose_player(self, white: _T, black: _T) -> _T:
        return white if self is Alliance.WHITE else black

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds with their letter code and material value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def letter(self) -> str:
        return _LETTERS[self]

    @property
    def piece_value(self) -> int:
        return _VALUES[self]

    @property
    def is_king(self) -> bool:
        return self is PieceType.KING

    @property
    def is_rook(self) -> bool:
        return self is PieceType.ROOK

    def __str__(self) -> str:
        return self.letter


_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 300,
    PieceType.BISHOP: 300,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 99999,
}


class MoveKind(IntEnum):
    """Tag of a :class:`~chesslab.core.move.Move` variant."""

    MAJOR = auto()
    MAJOR_ATTACK = auto()
    PAWN = auto()
    PAWN_ATTACK = auto()
    PAWN_JUMP = auto()
    PAWN_EN_PASSANT_ATTACK = auto()
    PAWN_PROMOTION = auto()
    KING_SIDE_CASTLE = auto()
    QUEEN_SIDE_CASTLE = auto()
    NULL = auto()


class MoveStatus(IntEnum):
    """Outcome of attempting a move through a player's legality filter."""

    DONE = auto()
    ILLEGAL_MOVE = auto()
    LEAVES_PLAYER_IN_CHECK = auto()

    @property
    def is_done(self) -> bool:
        return self is MoveStatus.DONE

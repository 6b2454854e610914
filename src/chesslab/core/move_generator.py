"""Pseudo-legal move generation for the six piece kinds.

Moves are produced per piece from integer offsets in 1-D coordinate space.
An offset that would wrap around the a- or h-file is rejected through a
precomputed exclusion table keyed by the offset value. King safety is not
checked here; :meth:`~chesslab.core.player.Player.make_move` filters that.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Final, TypeAlias

from chesslab.core.enums import PieceType
from chesslab.core.move import Move
from chesslab.core.piece import Piece
from chesslab.core.types import (
    EIGHTH_COLUMN,
    FIRST_COLUMN,
    NUM_TILES,
    SECOND_COLUMN,
    SECOND_RANK,
    SEVENTH_COLUMN,
    SEVENTH_RANK,
    is_valid_coordinate,
)

if TYPE_CHECKING:
    from chesslab.core.board import Board

ExclusionTable: TypeAlias = Mapping[int, tuple[bool, ...]]

KNIGHT_OFFSETS: Final = (-17, -15, -10, -6, 6, 10, 15, 17)
BISHOP_OFFSETS: Final = (-9, -7, 7, 9)
ROOK_OFFSETS: Final = (-8, -1, 1, 8)
QUEEN_OFFSETS: Final = (-9, -8, -7, -1, 1, 7, 8, 9)
KING_OFFSETS: Final = (-9, -8, -7, -1, 1, 7, 8, 9)
PAWN_OFFSETS: Final = (8, 16, 7, 9)


# -- Precomputed exclusion tables ------------------------------------------


def _build_exclusions(
    offsets: tuple[int, ...],
    columns_by_offset: dict[int, tuple[tuple[bool, ...], ...]],
) -> dict[int, tuple[bool, ...]]:
    """For each offset, which start coordinates would wrap around the board."""
    table: dict[int, tuple[bool, ...]] = {}
    for offset in offsets:
        columns = columns_by_offset.get(offset, ())
        table[offset] = tuple(
            any(column[sq] for column in columns) for sq in range(NUM_TILES)
        )
    return table


_KNIGHT_EXCLUSIONS: Final = _build_exclusions(
    KNIGHT_OFFSETS,
    {
        -17: (FIRST_COLUMN,),
        -15: (EIGHTH_COLUMN,),
        -10: (FIRST_COLUMN, SECOND_COLUMN),
        -6: (SEVENTH_COLUMN, EIGHTH_COLUMN),
        6: (FIRST_COLUMN, SECOND_COLUMN),
        10: (SEVENTH_COLUMN, EIGHTH_COLUMN),
        15: (FIRST_COLUMN,),
        17: (EIGHTH_COLUMN,),
    },
)

_DIAGONAL_COLUMNS: Final = {
    -9: (FIRST_COLUMN,),
    7: (FIRST_COLUMN,),
    -7: (EIGHTH_COLUMN,),
    9: (EIGHTH_COLUMN,),
}
_LINE_COLUMNS: Final = {
    -1: (FIRST_COLUMN,),
    1: (EIGHTH_COLUMN,),
}

_BISHOP_EXCLUSIONS: Final = _build_exclusions(BISHOP_OFFSETS, _DIAGONAL_COLUMNS)
_ROOK_EXCLUSIONS: Final = _build_exclusions(ROOK_OFFSETS, _LINE_COLUMNS)
_QUEEN_EXCLUSIONS: Final = _build_exclusions(
    QUEEN_OFFSETS, {**_DIAGONAL_COLUMNS, **_LINE_COLUMNS}
)
_KING_EXCLUSIONS: Final = _build_exclusions(
    KING_OFFSETS, {**_DIAGONAL_COLUMNS, **_LINE_COLUMNS}
)

# Pawn diagonals are stored per alliance because the offset is direction-scaled:
# white +7 lands up-right, black +7 lands down-left.
_PAWN_DIAGONAL_EXCLUSIONS: Final = (
    _build_exclusions((7, 9), {7: (EIGHTH_COLUMN,), 9: (FIRST_COLUMN,)}),
    _build_exclusions((7, 9), {7: (FIRST_COLUMN,), 9: (EIGHTH_COLUMN,)}),
)


# -- Shared helpers ----------------------------------------------------------


def _step_or_capture(
    board: Board,
    piece: Piece,
    destination: int,
    moves: list[Move],
) -> bool:
    """Append a quiet or capture move to *destination*.

    Returns True when the destination was empty (a ray may continue).
    """
    occupant = board.get_tile(destination).piece
    if occupant is None:
        moves.append(Move.major(board, piece, destination))
        return True
    if occupant.alliance != piece.alliance:
        moves.append(Move.attack(board, piece, destination, occupant))
    return False


def _sliding_moves(
    piece: Piece,
    board: Board,
    offsets: tuple[int, ...],
    exclusions: ExclusionTable,
) -> list[Move]:
    moves: list[Move] = []
    for offset in offsets:
        excluded = exclusions[offset]
        candidate = piece.position
        while True:
            if excluded[candidate]:
                break
            candidate += offset
            if not is_valid_coordinate(candidate):
                break
            if not _step_or_capture(board, piece, candidate, moves):
                break
    return moves


def _stepping_moves(
    piece: Piece,
    board: Board,
    offsets: tuple[int, ...],
    exclusions: ExclusionTable,
) -> list[Move]:
    moves: list[Move] = []
    for offset in offsets:
        if exclusions[offset][piece.position]:
            continue
        candidate = piece.position + offset
        if is_valid_coordinate(candidate):
            _step_or_capture(board, piece, candidate, moves)
    return moves


# -- Piece-specific generators ----------------------------------------------


def knight_moves(piece: Piece, board: Board) -> list[Move]:
    return _stepping_moves(piece, board, KNIGHT_OFFSETS, _KNIGHT_EXCLUSIONS)


def bishop_moves(piece: Piece, board: Board) -> list[Move]:
    return _sliding_moves(piece, board, BISHOP_OFFSETS, _BISHOP_EXCLUSIONS)


def rook_moves(piece: Piece, board: Board) -> list[Move]:
    return _sliding_moves(piece, board, ROOK_OFFSETS, _ROOK_EXCLUSIONS)


def queen_moves(piece: Piece, board: Board) -> list[Move]:
    return _sliding_moves(piece, board, QUEEN_OFFSETS, _QUEEN_EXCLUSIONS)


def king_moves(piece: Piece, board: Board) -> list[Move]:
    """One-step king moves. Castling is added by the player view."""
    return _stepping_moves(piece, board, KING_OFFSETS, _KING_EXCLUSIONS)


def pawn_moves(piece: Piece, board: Board) -> list[Move]:
    moves: list[Move] = []
    alliance = piece.alliance
    position = piece.position
    diagonal_exclusions = _PAWN_DIAGONAL_EXCLUSIONS[int(alliance)]

    for offset in PAWN_OFFSETS:
        candidate = position + alliance.direction * offset
        if not is_valid_coordinate(candidate):
            continue

        if offset == 8:
            if board.get_tile(candidate).is_occupied:
                continue
            advance = Move.pawn(board, piece, candidate)
            if alliance.is_pawn_promotion_square(candidate):
                advance = Move.promotion(advance)
            moves.append(advance)

        elif offset == 16:
            home_rank = SECOND_RANK if alliance.is_white else SEVENTH_RANK
            if not (piece.is_first_move and home_rank[position]):
                continue
            behind = position + alliance.direction * 8
            if not (
                board.get_tile(behind).is_occupied
                or board.get_tile(candidate).is_occupied
            ):
                moves.append(Move.pawn_jump(board, piece, candidate))

        else:
            if diagonal_exclusions[offset][position]:
                continue
            occupant = board.get_tile(candidate).piece
            if occupant is not None:
                if occupant.alliance == alliance:
                    continue
                capture = Move.pawn_attack(board, piece, candidate, occupant)
                if alliance.is_pawn_promotion_square(candidate):
                    capture = Move.promotion(capture)
                moves.append(capture)
                continue

            passed = board.en_passant_pawn
            if passed is None or passed.alliance == alliance:
                continue
            # The passed pawn sits beside us, on the file this diagonal enters.
            side = alliance.opposite_direction
            if offset == 9:
                side = -side
            if passed.position == position + side:
                moves.append(Move.en_passant(board, piece, candidate, passed))
    return moves


_GENERATORS: Final[dict[PieceType, Callable[[Piece, Board], list[Move]]]] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


def generate_moves(piece: Piece, board: Board) -> tuple[Move, ...]:
    """All pseudo-legal moves of *piece* on *board*, in offset order."""
    return tuple(_GENERATORS[piece.piece_type](piece, board))

"""Tests for coordinate helpers, geometry tables and enums."""

import pytest

from chesslab.core.enums import Alliance, MoveStatus, PieceType
from chesslab.core.types import (
    ALGEBRAIC_NOTATION,
    E4,
    EIGHTH_COLUMN,
    EIGHTH_RANK,
    FIRST_COLUMN,
    FIRST_RANK,
    SECOND_RANK,
    column_of,
    coordinate_name,
    is_valid_coordinate,
    parse_coordinate,
    row_of,
)


class TestCoordinates:
    def test_corners(self) -> None:
        assert coordinate_name(0) == "a8"
        assert coordinate_name(7) == "h8"
        assert coordinate_name(56) == "a1"
        assert coordinate_name(63) == "h1"

    def test_parse(self) -> None:
        assert parse_coordinate("e4") == 36 == E4
        assert parse_coordinate("a8") == 0

    @pytest.mark.parametrize("name", ["", "e9", "i1", "E4", "e44"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_coordinate(name)

    def test_notation_table_is_complete(self) -> None:
        assert len(ALGEBRAIC_NOTATION) == 64
        assert len(set(ALGEBRAIC_NOTATION)) == 64

    def test_validity(self) -> None:
        assert is_valid_coordinate(0)
        assert is_valid_coordinate(63)
        assert not is_valid_coordinate(-1)
        assert not is_valid_coordinate(64)

    def test_row_and_column(self) -> None:
        assert column_of(E4) == 4
        assert row_of(E4) == 4
        assert row_of(0) == 0
        assert column_of(63) == 7


class TestTables:
    def test_columns(self) -> None:
        assert FIRST_COLUMN[0] and FIRST_COLUMN[56]
        assert not FIRST_COLUMN[1]
        assert EIGHTH_COLUMN[7] and EIGHTH_COLUMN[63]
        assert sum(FIRST_COLUMN) == sum(EIGHTH_COLUMN) == 8

    def test_ranks(self) -> None:
        assert all(EIGHTH_RANK[sq] for sq in range(8))
        assert all(FIRST_RANK[sq] for sq in range(56, 64))
        assert all(SECOND_RANK[sq] for sq in range(48, 56))
        assert sum(EIGHTH_RANK) == sum(FIRST_RANK) == 8


class TestAlliance:
    def test_directions(self) -> None:
        assert Alliance.WHITE.direction == -1
        assert Alliance.BLACK.direction == 1
        assert Alliance.WHITE.opposite_direction == 1

    def test_opposite(self) -> None:
        assert Alliance.WHITE.opposite is Alliance.BLACK
        assert Alliance.BLACK.opposite is Alliance.WHITE

    def test_promotion_squares(self) -> None:
        assert Alliance.WHITE.is_pawn_promotion_square(3)
        assert not Alliance.WHITE.is_pawn_promotion_square(60)
        assert Alliance.BLACK.is_pawn_promotion_square(60)
        assert not Alliance.BLACK.is_pawn_promotion_square(3)

    def test_choose_player(self) -> None:
        assert Alliance.WHITE.choose_player("w", "b") == "w"
        assert Alliance.BLACK.choose_player("w", "b") == "b"

    def test_str(self) -> None:
        assert str(Alliance.WHITE) == "white"


class TestPieceType:
    def test_values(self) -> None:
        assert PieceType.PAWN.piece_value == 100
        assert PieceType.KNIGHT.piece_value == 300
        assert PieceType.BISHOP.piece_value == 300
        assert PieceType.ROOK.piece_value == 500
        assert PieceType.QUEEN.piece_value == 900
        assert PieceType.KING.piece_value == 99999

    def test_letters(self) -> None:
        assert "".join(str(t) for t in PieceType) == "PNBRQK"

    def test_status_done(self) -> None:
        assert MoveStatus.DONE.is_done
        assert not MoveStatus.ILLEGAL_MOVE.is_done
        assert not MoveStatus.LEAVES_PLAYER_IN_CHECK.is_done

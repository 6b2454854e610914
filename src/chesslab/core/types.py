"""Coordinate type alias and static board geometry tables.

Board layout (row-major, rank 8 first):
    a8=0,  b8=1,  ..., h8=7
    a7=8,  b7=9,  ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63
"""

from __future__ import annotations

from typing import Final, TypeAlias

Coordinate: TypeAlias = int  # 0–63

NUM_TILES: Final = 64
NUM_TILES_PER_ROW: Final = 8


def _init_column(column: int) -> tuple[bool, ...]:
    return tuple(sq % NUM_TILES_PER_ROW == column for sq in range(NUM_TILES))


def _init_row(row: int) -> tuple[bool, ...]:
    return tuple(sq // NUM_TILES_PER_ROW == row for sq in range(NUM_TILES))


# Column membership, a-file through h-file.
FIRST_COLUMN: Final = _init_column(0)
SECOND_COLUMN: Final = _init_column(1)
SEVENTH_COLUMN: Final = _init_column(6)
EIGHTH_COLUMN: Final = _init_column(7)

# Rank membership. Rank 8 is row 0, rank 1 is row 7.
EIGHTH_RANK: Final = _init_row(0)
SEVENTH_RANK: Final = _init_row(1)
SIXTH_RANK: Final = _init_row(2)
FIFTH_RANK: Final = _init_row(3)
FOURTH_RANK: Final = _init_row(4)
THIRD_RANK: Final = _init_row(5)
SECOND_RANK: Final = _init_row(6)
FIRST_RANK: Final = _init_row(7)

ALGEBRAIC_NOTATION: Final = tuple(
    f"{file}{rank}" for rank in "87654321" for file in "abcdefgh"
)
_COORDINATE_BY_NAME: Final = {name: idx for idx, name in enumerate(ALGEBRAIC_NOTATION)}


def is_valid_coordinate(coordinate: int) -> bool:
    """Whether *coordinate* lies on the board."""
    return 0 <= coordinate < NUM_TILES


def column_of(coordinate: Coordinate) -> int:
    """Column index 0–7 (a–h)."""
    return coordinate % NUM_TILES_PER_ROW


def row_of(coordinate: Coordinate) -> int:
    """Row index 0–7, where row 0 is rank 8."""
    return coordinate // NUM_TILES_PER_ROW


def coordinate_name(coordinate: Coordinate) -> str:
    """Algebraic name, e.g. 0 → 'a8', 63 → 'h1'."""
    return ALGEBRAIC_NOTATION[coordinate]


def parse_coordinate(name: str) -> Coordinate:
    """Parse an algebraic name, e.g. 'e4' → 36."""
    try:
        return _COORDINATE_BY_NAME[name]
    except KeyError:
        raise ValueError(f"Invalid coordinate name: {name!r}") from None


# ── Named coordinate constants ──────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = range(0, 8)
A7, B7, C7, D7, E7, F7, G7, H7 = range(8, 16)
A6, B6, C6, D6, E6, F6, G6, H6 = range(16, 24)
A5, B5, C5, D5, E5, F5, G5, H5 = range(24, 32)
A4, B4, C4, D4, E4, F4, G4, H4 = range(32, 40)
A3, B3, C3, D3, E3, F3, G3, H3 = range(40, 48)
A2, B2, C2, D2, E2, F2, G2, H2 = range(48, 56)
A1, B1, C1, D1, E1, F1, G1, H1 = range(56, 64)

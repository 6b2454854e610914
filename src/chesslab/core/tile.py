"""Tile - a single board cell, empty or occupied."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from chesslab.core.piece import Piece
from chesslab.core.types import NUM_TILES, Coordinate


@dataclass(frozen=True, slots=True)
class Tile:
    """Immutable cell of the 64-square board."""

    coordinate: Coordinate
    piece: Piece | None = None

    @property
    def is_occupied(self) -> bool:
        return self.piece is not None

    def __str__(self) -> str:
        return "-" if self.piece is None else str(self.piece)


# Empty tiles carry no state, so a single instance per coordinate is shared.
EMPTY_TILES: Final = tuple(Tile(coordinate) for coordinate in range(NUM_TILES))


def create_tile(coordinate: Coordinate, piece: Piece | None) -> Tile:
    """Occupied tile for *piece*, or the cached empty tile."""
    if piece is None:
        return EMPTY_TILES[coordinate]
    return Tile(coordinate, piece)

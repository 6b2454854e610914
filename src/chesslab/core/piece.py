"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from chesslab.core.enums import Alliance, PieceType
from chesslab.core.types import Coordinate, coordinate_name


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable chess piece standing on a coordinate.

    "Moving" a piece never mutates it: :meth:`move_to` returns a fresh value
    at the destination with the first-move flag cleared.
    """

    piece_type: PieceType
    position: Coordinate
    alliance: Alliance
    is_first_move: bool = True

    @property
    def value(self) -> int:
        """Material value used by the evaluator."""
        return self.piece_type.piece_value

    def move_to(self, destination: Coordinate) -> Piece:
        return replace(self, position=destination, is_first_move=False)

    def promoted(self, piece_type: PieceType = PieceType.QUEEN) -> Piece:
        """Replacement piece for a pawn reaching its promotion rank."""
        return Piece(piece_type, self.position, self.alliance, is_first_move=False)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """One-letter code (uppercase = white, lowercase = black)."""
        letter = self.piece_type.letter
        return letter if self.alliance.is_white else letter.lower()

    def __repr__(self) -> str:
        return (
            f"Piece({self.alliance.name} {self.piece_type.name} "
            f"@{coordinate_name(self.position)}"
            f"{'' if self.is_first_move else ', moved'})"
        )

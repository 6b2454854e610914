"""Move - a tagged union describing one state transition.

Executing a move never touches the board it was generated from; it builds a
brand-new :class:`~chesslab.core.board.Board` for the opponent to move.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from chesslab.core.enums import MoveKind, PieceType
from chesslab.core.errors import NullMoveError
from chesslab.core.piece import Piece
from chesslab.core.types import Coordinate, coordinate_name

if TYPE_CHECKING:
    from chesslab.core.board import Board, BoardConfig

PROMOTION_PIECE_TYPE: Final = PieceType.QUEEN

_ATTACK_KINDS: Final = frozenset(
    {
        MoveKind.MAJOR_ATTACK,
        MoveKind.PAWN_ATTACK,
        MoveKind.PAWN_EN_PASSANT_ATTACK,
    }
)
_CASTLE_KINDS: Final = frozenset(
    {MoveKind.KING_SIDE_CASTLE, MoveKind.QUEEN_SIDE_CASTLE}
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable move value.

    ``kind`` selects the variant; the optional payload fields are only set
    for the variants that need them:

    * ``attacked_piece`` - every attack kind (for en passant it is the
      passed pawn, which does not stand on ``destination``);
    * ``castle_rook`` / ``castle_rook_destination`` - castles;
    * ``decorated`` - the inner pawn move wrapped by a promotion.

    The originating board is kept for execution but takes no part in
    equality, hashing or repr.
    """

    kind: MoveKind
    moved_piece: Piece | None
    destination: Coordinate
    attacked_piece: Piece | None = None
    castle_rook: Piece | None = None
    castle_rook_destination: Coordinate | None = None
    decorated: Move | None = None
    board: Board | None = field(default=None, compare=False, hash=False, repr=False)

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def major(cls, board: Board, piece: Piece, destination: Coordinate) -> Move:
        """Quiet move of a non-pawn piece."""
        return cls(MoveKind.MAJOR, piece, destination, board=board)

    @classmethod
    def attack(
        cls,
        board: Board,
        piece: Piece,
        destination: Coordinate,
        attacked: Piece,
    ) -> Move:
        """Capture by a non-pawn piece."""
        return cls(
            MoveKind.MAJOR_ATTACK,
            piece,
            destination,
            attacked_piece=attacked,
            board=board,
        )

    @classmethod
    def pawn(cls, board: Board, pawn: Piece, destination: Coordinate) -> Move:
        return cls(MoveKind.PAWN, pawn, destination, board=board)

    @classmethod
    def pawn_attack(
        cls,
        board: Board,
        pawn: Piece,
        destination: Coordinate,
        attacked: Piece,
    ) -> Move:
        return cls(
            MoveKind.PAWN_ATTACK,
            pawn,
            destination,
            attacked_piece=attacked,
            board=board,
        )

    @classmethod
    def pawn_jump(cls, board: Board, pawn: Piece, destination: Coordinate) -> Move:
        """Double pawn push; the moved pawn becomes the en-passant pawn."""
        return cls(MoveKind.PAWN_JUMP, pawn, destination, board=board)

    @classmethod
    def en_passant(
        cls,
        board: Board,
        pawn: Piece,
        destination: Coordinate,
        passed_pawn: Piece,
    ) -> Move:
        return cls(
            MoveKind.PAWN_EN_PASSANT_ATTACK,
            pawn,
            destination,
            attacked_piece=passed_pawn,
            board=board,
        )

    @classmethod
    def promotion(cls, inner: Move) -> Move:
        """Wrap a pawn move or pawn capture that lands on the last rank."""
        return cls(
            MoveKind.PAWN_PROMOTION,
            inner.moved_piece,
            inner.destination,
            decorated=inner,
            board=inner.board,
        )

    @classmethod
    def castle(
        cls,
        kind: MoveKind,
        board: Board,
        king: Piece,
        destination: Coordinate,
        rook: Piece,
        rook_destination: Coordinate,
    ) -> Move:
        if kind not in _CASTLE_KINDS:
            raise ValueError(f"Not a castle kind: {kind!r}")
        return cls(
            kind,
            king,
            destination,
            castle_rook=rook,
            castle_rook_destination=rook_destination,
            board=board,
        )

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def current_coordinate(self) -> Coordinate:
        """Coordinate the moved piece starts from (-1 for the null move)."""
        if self.moved_piece is None:
            return -1
        return self.moved_piece.position

    @property
    def is_attack(self) -> bool:
        if self.decorated is not None:
            return self.decorated.is_attack
        return self.kind in _ATTACK_KINDS

    @property
    def captured_piece(self) -> Piece | None:
        """The piece removed by this move, if any."""
        if self.decorated is not None:
            return self.decorated.captured_piece
        return self.attacked_piece

    @property
    def is_castling_move(self) -> bool:
        return self.kind in _CASTLE_KINDS

    @property
    def is_null(self) -> bool:
        return self.kind is MoveKind.NULL

    # ── Execution ────────────────────────────────────────────────────────

    def execute(self) -> Board:
        """Build the board that results from playing this move."""
        if self.kind is MoveKind.NULL:
            raise NullMoveError("Cannot execute the null move")
        return self._successor_config().build()

    def _successor_config(self) -> BoardConfig:
        # Imported here: board -> move_generator -> move would otherwise cycle.
        from chesslab.core.board import BoardConfig

        if self.decorated is not None:
            return self._promote(self.decorated._successor_config())

        board = self.board
        piece = self.moved_piece
        assert board is not None and piece is not None
        alliance = piece.alliance

        castled = board.castled
        if self.is_castling_move:
            castled = castled | {alliance}
        config = BoardConfig(move_maker=alliance.opposite, castled=castled)

        for own in board.active_pieces(alliance):
            if own != piece and own != self.castle_rook:
                config.set_piece(own)
        for other in board.active_pieces(alliance.opposite):
            if other != self.attacked_piece:
                config.set_piece(other)

        moved = piece.move_to(self.destination)
        config.set_piece(moved)

        if self.castle_rook is not None and self.castle_rook_destination is not None:
            # The rook is rebuilt at its new square, so its old flag is irrelevant.
            config.set_piece(
                Piece(
                    PieceType.ROOK,
                    self.castle_rook_destination,
                    alliance,
                    is_first_move=False,
                )
            )
        if self.kind is MoveKind.PAWN_JUMP:
            config.en_passant_pawn = moved
        return config

    def _promote(self, config: BoardConfig) -> BoardConfig:
        promoted_pawn = config.pieces[self.destination]
        config.set_piece(promoted_pawn.promoted(PROMOTION_PIECE_TYPE))
        return config

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        kind = self.kind
        if kind is MoveKind.NULL or self.moved_piece is None:
            return "--"
        target = coordinate_name(self.destination)
        if kind is MoveKind.PAWN_PROMOTION and self.decorated is not None:
            return f"{self.decorated}={PROMOTION_PIECE_TYPE.letter}"
        if kind is MoveKind.KING_SIDE_CASTLE:
            return "O-O"
        if kind is MoveKind.QUEEN_SIDE_CASTLE:
            return "O-O-O"
        if kind in (MoveKind.PAWN, MoveKind.PAWN_JUMP):
            return target
        if kind in (MoveKind.PAWN_ATTACK, MoveKind.PAWN_EN_PASSANT_ATTACK):
            return f"{coordinate_name(self.current_coordinate)[0]}x{target}"
        letter = self.moved_piece.piece_type.letter
        if kind is MoveKind.MAJOR_ATTACK:
            return f"{letter}x{target}"
        return f"{letter}{target}"


NULL_MOVE: Final = Move(MoveKind.NULL, None, -1)
"""Sentinel for "no move"; executing it raises :class:`NullMoveError`."""


class MoveFactory:
    """Looks up legal moves by coordinate pair."""

    @staticmethod
    def create_move(
        board: Board,
        current_coordinate: Coordinate,
        destination: Coordinate,
    ) -> Move | None:
        """First move of either side from *current_coordinate* to *destination*.

        Returns ``None`` when no such move exists.
        """
        for move in board.all_legal_moves():
            if (
                move.current_coordinate == current_coordinate
                and move.destination == destination
            ):
                return move
        return None

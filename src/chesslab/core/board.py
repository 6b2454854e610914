"""Board - an immutable 64-tile snapshot plus both player views."""

from __future__ import annotations

from dataclasses import dataclass, field

from chesslab.core.enums import Alliance, PieceType
from chesslab.core.errors import InvalidBoardError
from chesslab.core.move import Move
from chesslab.core.move_generator import generate_moves
from chesslab.core.piece import Piece
from chesslab.core.player import Player
from chesslab.core.tile import Tile, create_tile
from chesslab.core.types import (
    NUM_TILES,
    NUM_TILES_PER_ROW,
    Coordinate,
    is_valid_coordinate,
)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(slots=True)
class BoardConfig:
    """Plain description of a position, consumed once by :class:`Board`.

    Args:
        pieces: Coordinate → piece mapping; unmapped coordinates are empty.
        move_maker: Side to move.
        en_passant_pawn: Pawn that double-stepped on the previous ply.
        castled: Alliances that have already castled.
    """

    pieces: dict[Coordinate, Piece] = field(default_factory=dict)
    move_maker: Alliance = Alliance.WHITE
    en_passant_pawn: Piece | None = None
    castled: frozenset[Alliance] = frozenset()

    def set_piece(self, piece: Piece) -> BoardConfig:
        """Place *piece* on its own position, replacing any previous occupant."""
        self.pieces[piece.position] = piece
        return self

    def build(self) -> Board:
        return Board(self)


class Board:
    """Immutable chess position.

    Construction computes every tile, both active-piece collections and both
    :class:`Player` views (including their legal moves) in one go; nothing is
    mutated afterwards. Playing a move yields a new ``Board``.
    """

    __slots__ = (
        "_tiles",
        "_white_pieces",
        "_black_pieces",
        "_en_passant_pawn",
        "_castled",
        "_white_player",
        "_black_player",
        "_current_player",
    )

    def __init__(self, config: BoardConfig) -> None:
        self._validate(config)
        self._tiles: tuple[Tile, ...] = tuple(
            create_tile(coordinate, config.pieces.get(coordinate))
            for coordinate in range(NUM_TILES)
        )
        self._white_pieces = self._active_pieces(Alliance.WHITE)
        self._black_pieces = self._active_pieces(Alliance.BLACK)
        self._en_passant_pawn = config.en_passant_pawn
        self._castled = frozenset(config.castled)

        white_moves = self._calculate_moves(self._white_pieces)
        black_moves = self._calculate_moves(self._black_pieces)
        self._white_player = Player(self, Alliance.WHITE, white_moves, black_moves)
        self._black_player = Player(self, Alliance.BLACK, black_moves, white_moves)
        self._current_player = config.move_maker.choose_player(
            self._white_player, self._black_player
        )

    @staticmethod
    def _validate(config: BoardConfig) -> None:
        for coordinate, piece in config.pieces.items():
            if not is_valid_coordinate(coordinate) or piece.position != coordinate:
                raise InvalidBoardError(
                    f"{piece!r} cannot be placed on coordinate {coordinate}"
                )
        for alliance in Alliance:
            kings = sum(
                1
                for piece in config.pieces.values()
                if piece.alliance == alliance and piece.piece_type.is_king
            )
            if kings > 1:
                raise InvalidBoardError(f"More than one {alliance.name} king")
        pawn = config.en_passant_pawn
        if pawn is not None and pawn.piece_type != PieceType.PAWN:
            raise InvalidBoardError(f"En passant piece must be a pawn: {pawn!r}")

    def _active_pieces(self, alliance: Alliance) -> tuple[Piece, ...]:
        return tuple(
            tile.piece
            for tile in self._tiles
            if tile.piece is not None and tile.piece.alliance == alliance
        )

    def _calculate_moves(self, pieces: tuple[Piece, ...]) -> tuple[Move, ...]:
        moves: list[Move] = []
        for piece in pieces:
            moves.extend(generate_moves(piece, self))
        return tuple(moves)

    # -- Element access -----------------------------------------------------

    def get_tile(self, coordinate: Coordinate) -> Tile:
        return self._tiles[coordinate]

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return self._tiles

    @property
    def white_pieces(self) -> tuple[Piece, ...]:
        return self._white_pieces

    @property
    def black_pieces(self) -> tuple[Piece, ...]:
        return self._black_pieces

    def active_pieces(self, alliance: Alliance) -> tuple[Piece, ...]:
        return alliance.choose_player(self._white_pieces, self._black_pieces)

    @property
    def en_passant_pawn(self) -> Piece | None:
        return self._en_passant_pawn

    @property
    def castled(self) -> frozenset[Alliance]:
        return self._castled

    def has_castled(self, alliance: Alliance) -> bool:
        return alliance in self._castled

    # -- Players ------------------------------------------------------------

    @property
    def white_player(self) -> Player:
        return self._white_player

    @property
    def black_player(self) -> Player:
        return self._black_player

    @property
    def current_player(self) -> Player:
        return self._current_player

    def player(self, alliance: Alliance) -> Player:
        return alliance.choose_player(self._white_player, self._black_player)

    def all_legal_moves(self) -> tuple[Move, ...]:
        """White's legal moves followed by black's."""
        return self._white_player.legal_moves + self._black_player.legal_moves

    # -- Factory ------------------------------------------------------------

    @classmethod
    def create_standard_board(cls) -> Board:
        """Standard starting position, white to move."""
        config = BoardConfig(move_maker=Alliance.WHITE)
        for column, piece_type in enumerate(_BACK_RANK):
            config.set_piece(Piece(piece_type, column, Alliance.BLACK))
            config.set_piece(Piece(PieceType.PAWN, 8 + column, Alliance.BLACK))
            config.set_piece(Piece(PieceType.PAWN, 48 + column, Alliance.WHITE))
            config.set_piece(Piece(piece_type, 56 + column, Alliance.WHITE))
        return cls(config)

    def to_config(self) -> BoardConfig:
        """Editable copy of this position's description."""
        return BoardConfig(
            pieces={piece.position: piece for piece in self._white_pieces}
            | {piece.position: piece for piece in self._black_pieces},
            move_maker=self._current_player.alliance,
            en_passant_pawn=self._en_passant_pawn,
            castled=self._castled,
        )

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        cells: list[str] = []
        for coordinate, tile in enumerate(self._tiles):
            cells.append(f"{tile!s:>3}")
            if (coordinate + 1) % NUM_TILES_PER_ROW == 0:
                cells.append("\n")
        return "".join(cells)

    def __repr__(self) -> str:
        return f"Board(to_move={self._current_player.alliance.name})\n{self}"


def create_standard_board() -> Board:
    """Module-level alias of :meth:`Board.create_standard_board`."""
    return Board.create_standard_board()

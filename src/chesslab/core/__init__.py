"""Core domain layer: pure chess rules with no external dependencies.

Quick start::

    from chesslab.core import MoveFactory, create_standard_board, parse_coordinate

    board = create_standard_board()
    move = MoveFactory.create_move(
        board, parse_coordinate("e2"), parse_coordinate("e4")
    )
    transition = board.current_player.make_move(move)
    print(transition.board)
"""

from chesslab.core.board import Board, BoardConfig, create_standard_board
from chesslab.core.enums import Alliance, MoveKind, MoveStatus, PieceType
from chesslab.core.errors import InvalidBoardError, NullMoveError
from chesslab.core.move import NULL_MOVE, Move, MoveFactory
from chesslab.core.move_generator import generate_moves
from chesslab.core.piece import Piece
from chesslab.core.player import MoveTransition, Player
from chesslab.core.tile import Tile
from chesslab.core.types import (
    ALGEBRAIC_NOTATION,
    Coordinate,
    column_of,
    coordinate_name,
    is_valid_coordinate,
    parse_coordinate,
    row_of,
)

__all__ = [
    # Enums
    "Alliance",
    "MoveKind",
    "MoveStatus",
    "PieceType",
    # Errors
    "InvalidBoardError",
    "NullMoveError",
    # Types / helpers
    "ALGEBRAIC_NOTATION",
    "Coordinate",
    "column_of",
    "coordinate_name",
    "is_valid_coordinate",
    "parse_coordinate",
    "row_of",
    # Domain objects
    "Board",
    "BoardConfig",
    "Move",
    "MoveFactory",
    "MoveTransition",
    "NULL_MOVE",
    "Piece",
    "Player",
    "Tile",
    "create_standard_board",
    "generate_moves",
]

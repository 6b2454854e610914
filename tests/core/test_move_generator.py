"""Tests for per-piece move generation and legal move counts."""

from collections.abc import Callable

import pytest

from chesslab.core.board import Board, create_standard_board
from chesslab.core.enums import Alliance, MoveKind, PieceType
from chesslab.core.move_generator import generate_moves
from chesslab.core.piece import Piece
from chesslab.core.types import (
    A1,
    A4,
    A5,
    A8,
    D4,
    E1,
    E2,
    E3,
    E4,
    E8,
    G3,
    H1,
    H4,
    H5,
    H8,
)

BoardFactory = Callable[..., Board]

WHITE_KING = Piece(PieceType.KING, E1, Alliance.WHITE)
BLACK_KING = Piece(PieceType.KING, E8, Alliance.BLACK)


def _destinations(piece: Piece, board: Board) -> set[int]:
    return {move.destination for move in generate_moves(piece, board)}


def _perft(board: Board, depth: int) -> int:
    if depth == 0:
        return 1
    player = board.current_player
    total = 0
    for move in player.legal_moves:
        transition = player.make_move(move)
        if transition.is_done:
            total += _perft(transition.board, depth - 1)
    return total


class TestStartingPosition:
    def test_twenty_moves_each(self) -> None:
        board = create_standard_board()
        assert len(board.white_player.legal_moves) == 20
        assert len(board.black_player.legal_moves) == 20

    def test_pawn_moves(self) -> None:
        board = create_standard_board()
        pawn = board.get_tile(E2).piece
        moves = generate_moves(pawn, board)
        assert [(m.kind, m.destination) for m in moves] == [
            (MoveKind.PAWN, E3),
            (MoveKind.PAWN_JUMP, E4),
        ]

    def test_knight_moves(self) -> None:
        board = create_standard_board()
        knight = board.get_tile(62).piece
        assert _destinations(knight, board) == {45, 47}

    def test_blocked_pieces(self) -> None:
        board = create_standard_board()
        for square in (A1, 58, 59, E1, 61, H1):
            assert generate_moves(board.get_tile(square).piece, board) == ()


class TestKnight:
    def test_corner_a8(self, make_board: BoardFactory) -> None:
        knight = Piece(PieceType.KNIGHT, A8, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, knight)
        assert _destinations(knight, board) == {10, 17}

    def test_corner_h1(self, make_board: BoardFactory) -> None:
        knight = Piece(PieceType.KNIGHT, H1, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, knight)
        assert _destinations(knight, board) == {G3, 53}

    def test_center(self, make_board: BoardFactory) -> None:
        knight = Piece(PieceType.KNIGHT, D4, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, knight)
        assert len(generate_moves(knight, board)) == 8

    def test_captures_but_not_own(self, make_board: BoardFactory) -> None:
        knight = Piece(PieceType.KNIGHT, A8, Alliance.WHITE)
        enemy = Piece(PieceType.PAWN, 10, Alliance.BLACK)
        friend = Piece(PieceType.PAWN, 17, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, knight, enemy, friend)
        moves = generate_moves(knight, board)
        assert len(moves) == 1
        assert moves[0].kind == MoveKind.MAJOR_ATTACK
        assert moves[0].attacked_piece == enemy


class TestSliders:
    def test_rook_stops_at_own_piece(self, make_board: BoardFactory) -> None:
        rook = Piece(PieceType.ROOK, A1, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, rook)
        destinations = _destinations(rook, board)
        assert destinations == {48, 40, 32, 24, 16, 8, 0, 57, 58, 59}

    def test_rook_captures_and_stops(self, make_board: BoardFactory) -> None:
        rook = Piece(PieceType.ROOK, A1, Alliance.WHITE)
        target = Piece(PieceType.KNIGHT, A4, Alliance.BLACK)
        board = make_board(WHITE_KING, BLACK_KING, rook, target)
        moves = generate_moves(rook, board)
        up = [m for m in moves if m.destination in (48, 40, A4, 24)]
        assert [m.destination for m in up] == [48, 40, A4]
        assert up[-1].kind == MoveKind.MAJOR_ATTACK

    def test_bishop_does_not_wrap(self, make_board: BoardFactory) -> None:
        bishop = Piece(PieceType.BISHOP, A1, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, bishop)
        assert _destinations(bishop, board) == {49, 42, 35, 28, 21, 14, 7}

    def test_queen_center(self, make_board: BoardFactory) -> None:
        queen = Piece(PieceType.QUEEN, D4, Alliance.WHITE)
        board = make_board(
            Piece(PieceType.KING, H1, Alliance.WHITE),
            Piece(PieceType.KING, A8, Alliance.BLACK),
            queen,
        )
        assert len(generate_moves(queen, board)) == 27


class TestKing:
    def test_edge_king(self, make_board: BoardFactory) -> None:
        board = make_board(WHITE_KING, BLACK_KING)
        assert _destinations(WHITE_KING, board) == {59, 61, 51, 52, 53}

    def test_corner_king(self, make_board: BoardFactory) -> None:
        king = Piece(PieceType.KING, H8, Alliance.BLACK)
        board = make_board(WHITE_KING, king)
        assert _destinations(king, board) == {6, 14, 15}


class TestPawn:
    def test_white_h_file_does_not_wrap(self, make_board: BoardFactory) -> None:
        pawn = Piece(PieceType.PAWN, H4, Alliance.WHITE)
        bait = Piece(PieceType.KNIGHT, A4, Alliance.BLACK)
        board = make_board(WHITE_KING, BLACK_KING, pawn, bait)
        assert _destinations(pawn, board) == {31}

    def test_black_a_file_does_not_wrap(self, make_board: BoardFactory) -> None:
        pawn = Piece(PieceType.PAWN, A5, Alliance.BLACK)
        bait = Piece(PieceType.KNIGHT, H5, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, pawn, bait)
        assert _destinations(pawn, board) == {A4}

    def test_jump_blocked_behind(self, make_board: BoardFactory) -> None:
        pawn = Piece(PieceType.PAWN, E2, Alliance.WHITE)
        blocker = Piece(PieceType.KNIGHT, E3, Alliance.BLACK)
        board = make_board(WHITE_KING, BLACK_KING, pawn, blocker)
        assert generate_moves(pawn, board) == ()

    def test_jump_blocked_on_destination(self, make_board: BoardFactory) -> None:
        pawn = Piece(PieceType.PAWN, E2, Alliance.WHITE)
        blocker = Piece(PieceType.KNIGHT, E4, Alliance.BLACK)
        board = make_board(WHITE_KING, BLACK_KING, pawn, blocker)
        assert _destinations(pawn, board) == {E3}

    def test_no_jump_after_moving(self, make_board: BoardFactory) -> None:
        pawn = Piece(PieceType.PAWN, E2, Alliance.WHITE, is_first_move=False)
        board = make_board(WHITE_KING, BLACK_KING, pawn)
        assert _destinations(pawn, board) == {E3}

    def test_black_pawn_captures(self, make_board: BoardFactory) -> None:
        pawn = Piece(PieceType.PAWN, 12, Alliance.BLACK)
        left = Piece(PieceType.KNIGHT, 19, Alliance.WHITE)
        right = Piece(PieceType.KNIGHT, 21, Alliance.WHITE)
        board = make_board(WHITE_KING, BLACK_KING, pawn, left, right)
        kinds = {m.destination: m.kind for m in generate_moves(pawn, board)}
        assert kinds == {
            20: MoveKind.PAWN,
            28: MoveKind.PAWN_JUMP,
            19: MoveKind.PAWN_ATTACK,
            21: MoveKind.PAWN_ATTACK,
        }

    def test_promotion_is_wrapped(self, make_board: BoardFactory) -> None:
        pawn = Piece(PieceType.PAWN, 9, Alliance.WHITE, is_first_move=False)
        board = make_board(WHITE_KING, Piece(PieceType.KING, H8, Alliance.BLACK), pawn)
        (move,) = generate_moves(pawn, board)
        assert move.kind == MoveKind.PAWN_PROMOTION
        assert move.decorated is not None
        assert move.decorated.kind == MoveKind.PAWN
        assert move.destination == 1


class TestPerft:
    def test_depth_one(self) -> None:
        assert _perft(create_standard_board(), 1) == 20

    def test_depth_two(self) -> None:
        assert _perft(create_standard_board(), 2) == 400

    @pytest.mark.slow
    def test_depth_three(self) -> None:
        assert _perft(create_standard_board(), 3) == 8902

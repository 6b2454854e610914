"""Tests for the standard board evaluator."""

from collections.abc import Callable

from chesslab.core.board import Board, create_standard_board
from chesslab.core.enums import Alliance, PieceType
from chesslab.core.move import MoveFactory
from chesslab.core.piece import Piece
from chesslab.engine.evaluator import (
    CASTLE_BONUS,
    CHECK_BONUS,
    CHECK_MATE_BONUS,
    StandardBoardEvaluator,
)

BoardFactory = Callable[..., Board]


def _fools_mate() -> Board:
    board = create_standard_board()
    for current, destination in ((53, 45), (12, 28), (54, 38), (3, 39)):
        move = MoveFactory.create_move(board, current, destination)
        board = board.current_player.make_move(move).board
    return board


class TestStandardBoardEvaluator:
    def test_start_is_balanced(self) -> None:
        assert StandardBoardEvaluator().evaluate(create_standard_board(), 0) == 0

    def test_material_and_mobility(self) -> None:
        config = create_standard_board().to_config()
        del config.pieces[1]
        # Black loses a knight (2 moves) and gains Rb8 (1 move).
        assert StandardBoardEvaluator().evaluate(config.build(), 0) == 300 + 1

    def test_castle_bonus(self) -> None:
        config = create_standard_board().to_config()
        config.castled = frozenset({Alliance.WHITE})
        assert StandardBoardEvaluator().evaluate(config.build(), 0) == CASTLE_BONUS

    def test_check_bonus(self, make_board: BoardFactory) -> None:
        board = make_board(
            Piece(PieceType.KING, 60, Alliance.WHITE),
            Piece(PieceType.KING, 7, Alliance.BLACK),
            Piece(PieceType.ROOK, 0, Alliance.WHITE),
            to_move=Alliance.BLACK,
        )
        evaluator = StandardBoardEvaluator()
        without_check = make_board(
            Piece(PieceType.KING, 60, Alliance.WHITE),
            Piece(PieceType.KING, 7, Alliance.BLACK),
            Piece(PieceType.ROOK, 8, Alliance.WHITE),
            to_move=Alliance.BLACK,
        )
        assert board.black_player.is_in_check
        assert not without_check.black_player.is_in_check
        delta = evaluator.evaluate(board, 0) - evaluator.evaluate(without_check, 0)
        white_mobility = len(board.white_player.legal_moves) - len(
            without_check.white_player.legal_moves
        )
        black_mobility = len(board.black_player.legal_moves) - len(
            without_check.black_player.legal_moves
        )
        assert delta == CHECK_BONUS + white_mobility - black_mobility

    def test_checkmate_favours_black(self) -> None:
        score = StandardBoardEvaluator().evaluate(_fools_mate(), 0)
        assert score < -CHECK_MATE_BONUS

    def test_mate_bonus_scales_with_depth(self) -> None:
        evaluator = StandardBoardEvaluator()
        board = _fools_mate()
        shallow = evaluator.evaluate(board, 0)
        deep = evaluator.evaluate(board, 2)
        assert shallow - deep == CHECK_MATE_BONUS * 200 - CHECK_MATE_BONUS

"""Chess engine package: move strategies and board evaluation.

The PyQt6 worker lives in :mod:`chesslab.engine.qt_bridge` and is imported
explicitly by GUI code.
"""

from chesslab.engine.evaluator import BoardEvaluator, StandardBoardEvaluator
from chesslab.engine.minimax import MiniMax, is_end_game
from chesslab.engine.strategy import MoveStrategy, SearchStats

__all__ = [
    "BoardEvaluator",
    "MiniMax",
    "MoveStrategy",
    "SearchStats",
    "StandardBoardEvaluator",
    "is_end_game",
]

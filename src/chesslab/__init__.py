"""chesslab - an immutable-board chess engine with a minimax player."""

__version__ = "0.1.0"

"""User-configurable engine settings."""

from __future__ import annotations

from dataclasses import dataclass

from chesslab.engine.minimax import MiniMax
from chesslab.engine.strategy import MoveStrategy


@dataclass
class EngineSettings:
    """Settings for the automated player."""

    # Plain minimax grows as ~35^depth; 3 plies is interactive in pure Python.
    search_depth: int = 3

    def __post_init__(self) -> None:
        if self.search_depth <= 0:
            raise ValueError(f"search_depth must be >= 1, got {self.search_depth}")

    def create_strategy(self) -> MoveStrategy:
        return MiniMax(self.search_depth)

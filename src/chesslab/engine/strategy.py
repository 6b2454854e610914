"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chesslab.core.board import Board
    from chesslab.core.move import Move


@dataclass(slots=True, frozen=True)
class SearchStats:
    """Bookkeeping for the most recent search."""

    best_move: Move | None
    score: int
    depth: int
    boards_evaluated: int
    elapsed_ms: float


class MoveStrategy(Protocol):
    """Protocol for automated players.

    ``execute`` is synchronous; callers decide where it runs (for example on
    a worker thread) and discard results they no longer want.
    """

    def execute(self, board: Board) -> Move | None: ...

"""Fatal error types raised by the core.

Recoverable move failures are reported through
:class:`~chesslab.core.player.MoveTransition` instead.
"""

from __future__ import annotations


class InvalidBoardError(ValueError):
    """A board violates a structural invariant (e.g. a side has no king)."""


class NullMoveError(RuntimeError):
    """The null-move sentinel was executed."""

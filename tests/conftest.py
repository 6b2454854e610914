"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from chesslab.core.board import Board, BoardConfig
from chesslab.core.enums import Alliance
from chesslab.core.piece import Piece

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

BoardFactory = Callable[..., Board]


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton Qt core application for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a board from loose pieces: ``make_board(*pieces, to_move=...)``."""

    def _make(*pieces: Piece, to_move: Alliance = Alliance.WHITE) -> Board:
        config = BoardConfig(move_maker=to_move)
        for piece in pieces:
            config.set_piece(piece)
        return config.build()

    return _make

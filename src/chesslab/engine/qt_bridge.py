"""Qt bridge to run a move strategy in a worker thread."""

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chesslab.config import EngineSettings
from chesslab.core.board import Board

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    Move the worker to a ``QThread`` and invoke :meth:`request_move` through
    a queued connection. The search itself cannot be interrupted;
    :meth:`cancel` only marks the in-flight request so its result is dropped.
    """

    best_move_ready = pyqtSignal(int, object)
    search_no_move = pyqtSignal(int)
    search_cancelled = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    def __init__(self, settings: EngineSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else EngineSettings()
        self._strategy = self._settings.create_strategy()
        self._cancel_event = threading.Event()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @pyqtSlot(object, int)
    def request_move(self, board_obj: object, request_id: int) -> None:
        """Search for the best move on *board_obj* and emit the result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        self._cancel_event.clear()
        try:
            move = self._strategy.execute(board_obj)
        except Exception as exc:
            _LOGGER.exception("Search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(request_id, move)

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the current search when it finishes."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, search_depth: int) -> None:
        """Update the search depth (takes effect on the next search).

        An invalid depth is logged and ignored; the previous settings stay.
        """
        try:
            settings = replace(self._settings, search_depth=search_depth)
        except ValueError as exc:
            _LOGGER.warning("Ignoring search depth %d: %s", search_depth, exc)
            return
        self._settings = settings
        self._strategy = settings.create_strategy()

"""Qt bridge exposing a :class:`GameController` through signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessmoves.core.move import MoveRecord
from chessmoves.core.state import GameState
from chessmoves.core.types import Square
from chessmoves.game.controller import GameController
from chessmoves.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Thread-affine adapter a presentation layer connects its widgets to.

    Board widgets call the slots with :class:`Square` values; results come
    back through the signals, never as return values across threads.
    """

    move_played = pyqtSignal(object)  # MoveRecord
    move_rejected = pyqtSignal(object, object)  # from Square, to Square
    move_undone = pyqtSignal(object)  # MoveRecord
    turn_changed = pyqtSignal(int)  # Color value
    destinations_ready = pyqtSignal(object, object)  # Square, frozenset[Square]

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller or GameController()
        self._controller.events.on_move.append(self._on_move)
        self._controller.events.on_undo.append(self._on_undo)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(object)
    def select_square(self, sq_obj: object) -> None:
        """Emit the legal destinations for the piece on *sq_obj*."""
        if not isinstance(sq_obj, Square):
            _LOGGER.warning("select_square received %r, expected Square", sq_obj)
            return
        self.destinations_ready.emit(sq_obj, self._controller.destinations(sq_obj))

    @pyqtSlot(object, object)
    def request_move(self, from_obj: object, to_obj: object) -> None:
        if not isinstance(from_obj, Square) or not isinstance(to_obj, Square):
            _LOGGER.warning("request_move received %r -> %r", from_obj, to_obj)
            self.move_rejected.emit(from_obj, to_obj)
            return
        if self._controller.submit_move(from_obj, to_obj) is None:
            self.move_rejected.emit(from_obj, to_obj)

    @pyqtSlot()
    def undo(self) -> None:
        self._controller.undo_move()

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()
        self.turn_changed.emit(int(self._controller.turn))

    def start(self, settings: GameSettings) -> None:
        """Begin a new game with *settings* and announce the side to move."""
        self._controller.new_game(settings)
        self.turn_changed.emit(int(self._controller.turn))

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, state: GameState) -> None:
        self.move_played.emit(record)
        self.turn_changed.emit(int(state.turn))

    def _on_undo(self, record: MoveRecord, state: GameState) -> None:
        self.move_undone.emit(record)
        self.turn_changed.emit(int(state.turn))

"""GameController — owns the sequence of GameStates for a single game.

The core engine keeps no state between calls; the controller threads the
current :class:`GameState` through it, retains earlier states for undo and
notifies listeners through simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessmoves.core.enums import Color
from chessmoves.core.fen import state_from_fen
from chessmoves.core.legality import is_legal, legal_destinations
from chessmoves.core.move import MoveRecord
from chessmoves.core.state import GameState
from chessmoves.core.transition import apply_move
from chessmoves.core.types import Square
from chessmoves.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]  # record, new state
UndoCallback = Callable[[MoveRecord, GameState], None]  # undone record, restored state


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates and applies moves for one game and keeps its history.

    Thread-safety: meant to be driven from a single thread.  Separate games
    need separate controllers; nothing is shared between instances.
    """

    __slots__ = ("_settings", "_states", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings or GameSettings()
        self._states: list[GameState] = [self._initial_state()]
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def state(self) -> GameState:
        return self._states[-1]

    @property
    def turn(self) -> Color:
        return self.state.turn

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return self.state.history

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        """Start over, optionally with new settings."""
        if settings is not None:
            self._settings = settings
        self._states = [self._initial_state()]
        _LOGGER.info("New game started (%s to move)", self.turn)

    def destinations(self, sq: Square) -> frozenset[Square]:
        """Legal destinations for the piece on *sq* (for highlighting)."""
        return legal_destinations(sq, self.state)

    def submit_move(self, from_sq: Square, to_sq: Square) -> MoveRecord | None:
        """Play *from_sq* -> *to_sq* if legal; return its record or ``None``."""
        state = self.state
        if not is_legal(from_sq, to_sq, state):
            _LOGGER.warning(
                "Rejected move %s%s for %s", from_sq.name, to_sq.name, state.turn
            )
            return None

        next_state = apply_move(from_sq, to_sq, state)
        self._states.append(next_state)
        record = next_state.history[-1]
        _LOGGER.info("Ply %d: %s %s", next_state.ply_count, state.turn, record)

        for cb in self.events.on_move:
            cb(record, next_state)
        return record

    def undo_move(self) -> bool:
        """Restore the state before the last move."""
        if not self._settings.allow_undo:
            _LOGGER.debug("Undo refused: disabled by settings")
            return False
        if len(self._states) < 2:
            return False

        undone = self._states.pop().history[-1]
        _LOGGER.info("Undid %s", undone)
        for cb in self.events.on_undo:
            cb(undone, self.state)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _initial_state(self) -> GameState:
        if self._settings.start_fen is None:
            return GameState.initial()
        return state_from_fen(self._settings.start_fen)

"""GameState - the complete, immutable unit of truth the engine consumes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessmoves.core.board import Board
from chessmoves.core.castling import CastlingRights
from chessmoves.core.enums import Color
from chessmoves.core.move import MoveRecord
from chessmoves.core.types import Square


@dataclass(frozen=True, slots=True)
class GameState:
    """Board, history, castling rights, en-passant target, side to move and clocks.

    Transitions build a new instance; nothing here is ever mutated, so a
    caller that wants undo simply keeps the previous value.
    """

    board: Board = field(default_factory=Board.initial)
    history: tuple[MoveRecord, ...] = ()
    castling: CastlingRights = field(default_factory=CastlingRights)
    en_passant: Square | None = None
    turn: Color = Color.WHITE
    halfmove_clock: int = 0
    fullmove_number: int = 1

    @classmethod
    def initial(cls) -> GameState:
        """Standard starting position, white to move."""
        return cls()

    @property
    def last_move(self) -> MoveRecord | None:
        return self.history[-1] if self.history else None

    @property
    def ply_count(self) -> int:
        return len(self.history)

    def evolve(self, **changes: object) -> GameState:
        """Copy with the given fields replaced."""
        return replace(self, **changes)

"""MoveRecord value object - one entry of the move history."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import Square


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Immutable record of an applied move.

    For en passant, *captured* is the pawn taken from beside the origin
    square, not whatever stood on *to_sq* (always nothing).
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    is_castling: bool = False
    is_en_passant: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_double_pawn_push(self) -> bool:
        return (
            self.piece.piece_type == PieceType.PAWN
            and self.from_sq.file == self.to_sq.file
            and abs(self.to_sq.rank - self.from_sq.rank) == 2
        )

    def __str__(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}"

"""Game-state transition: apply an accepted move and derive the next state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.legality import is_legal, simulate
from chessmoves.core.special_moves import castle_side_for, castle_squares
from chessmoves.core.types import Square

if TYPE_CHECKING:
    from chessmoves.core.state import GameState


class IllegalMoveError(ValueError):
    """Raised by :func:`apply_move` for a move :func:`is_legal` rejects."""

    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(f"Illegal move: {from_sq.name}{to_sq.name}")
        self.from_sq = from_sq
        self.to_sq = to_sq


def apply_move(from_sq: Square, to_sq: Square, state: GameState) -> GameState:
    """Return the state after *from_sq* -> *to_sq*; *state* is left untouched.

    Raises :class:`IllegalMoveError` if the move is not legal for the side
    to move.
    """
    if not is_legal(from_sq, to_sq, state):
        raise IllegalMoveError(from_sq, to_sq)

    played = simulate(from_sq, to_sq, state)
    record = played.record

    # Castling rights: the origin, a castling rook's origin, and a captured
    # rook's origin can never castle again.
    touched = [from_sq, to_sq]
    if record.is_castling:
        side = castle_side_for(from_sq, to_sq)
        assert side is not None
        touched.append(castle_squares(side, record.piece.color).rook_from)
    castling = state.castling.mark_moved(*touched)

    en_passant: Square | None = None
    if record.is_double_pawn_push:
        en_passant = Square(from_sq.file, (from_sq.rank + to_sq.rank) // 2)

    # Clocks
    if record.piece.piece_type == PieceType.PAWN or record.is_capture:
        halfmove_clock = 0
    else:
        halfmove_clock = state.halfmove_clock + 1
    fullmove_number = state.fullmove_number
    if state.turn == Color.BLACK:
        fullmove_number += 1

    return state.evolve(
        board=played.board,
        history=state.history + (record,),
        castling=castling,
        en_passant=en_passant,
        turn=state.turn.opposite,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )

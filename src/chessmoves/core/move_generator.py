"""Pseudo-legal destinations for a piece, including castling and en passant."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmoves.core.attacks import pawn_attacks, piece_destinations
from chessmoves.core.enums import CastleSide, PieceType
from chessmoves.core.special_moves import can_castle, can_en_passant, castle_squares
from chessmoves.core.types import Square

if TYPE_CHECKING:
    from chessmoves.core.state import GameState


def pseudo_legal_destinations(sq: Square, state: GameState) -> frozenset[Square]:
    """Destinations of the piece on *sq*, ignoring whether its king is exposed.

    Returns an empty set when *sq* is off the board, empty, or holds a
    piece of the side not on move.
    """
    if not sq.on_board():
        return frozenset()
    piece = state.board[sq]
    if piece is None or piece.color != state.turn:
        return frozenset()

    targets = piece_destinations(state.board, sq)

    if piece.piece_type == PieceType.PAWN:
        extra = {
            target
            for target in pawn_attacks(sq, piece.color)
            if can_en_passant(sq, target, state, piece.color)
        }
        if extra:
            targets = targets | extra

    elif piece.piece_type == PieceType.KING:
        extra = {
            castle_squares(side, piece.color).king_to
            for side in CastleSide
            if castle_squares(side, piece.color).king_from == sq
            and can_castle(side, piece.color, state)
        }
        if extra:
            targets = targets | extra

    return targets

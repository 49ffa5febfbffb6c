"""Core domain layer — pure chess move rules with zero external dependencies.

Quick start::

    from chessmoves.core import GameState, Square, apply_move, legal_destinations

    state = GameState.initial()
    e2 = Square.parse("e2")
    print(sorted(sq.name for sq in legal_destinations(e2, state)))
    state = apply_move(e2, Square.parse("e4"), state)
"""

from chessmoves.core.attacks import is_attacked, pawn_attacks, piece_destinations
from chessmoves.core.board import Board, can_land_on, piece_at, square_on_board
from chessmoves.core.castling import ORIGIN_SQUARES, CastlingRights
from chessmoves.core.enums import CastleSide, Color, PieceType
from chessmoves.core.fen import STARTING_FEN, state_from_fen, state_to_fen
from chessmoves.core.legality import (
    is_in_check,
    is_legal,
    legal_destinations,
    legal_moves,
    simulate,
)
from chessmoves.core.move import MoveRecord
from chessmoves.core.move_generator import pseudo_legal_destinations
from chessmoves.core.piece import Piece
from chessmoves.core.special_moves import can_castle, can_en_passant, castle_squares
from chessmoves.core.state import GameState
from chessmoves.core.transition import IllegalMoveError, apply_move
from chessmoves.core.types import Square, all_squares

__all__ = [
    # Enums
    "CastleSide",
    "Color",
    "PieceType",
    # Value objects
    "Board",
    "CastlingRights",
    "GameState",
    "MoveRecord",
    "ORIGIN_SQUARES",
    "Piece",
    "Square",
    "all_squares",
    # Board model
    "can_land_on",
    "piece_at",
    "square_on_board",
    # Generation / attacks
    "is_attacked",
    "pawn_attacks",
    "piece_destinations",
    "pseudo_legal_destinations",
    # Special moves
    "can_castle",
    "can_en_passant",
    "castle_squares",
    # Legality / transition
    "IllegalMoveError",
    "apply_move",
    "is_in_check",
    "is_legal",
    "legal_destinations",
    "legal_moves",
    "simulate",
    # FEN
    "STARTING_FEN",
    "state_from_fen",
    "state_to_fen",
]

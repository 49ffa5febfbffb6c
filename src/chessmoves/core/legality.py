"""Legality filter: simulate a candidate move and test the mover's king.

Pins, discovered checks and check evasion all come out of the single
simulate-and-test rule in :func:`is_legal`; there is no pin detection.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmoves.core.attacks import is_attacked
from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import MoveRecord
from chessmoves.core.move_generator import pseudo_legal_destinations
from chessmoves.core.piece import Piece
from chessmoves.core.special_moves import castle_side_for, castle_squares
from chessmoves.core.types import Square

if TYPE_CHECKING:
    from chessmoves.core.state import GameState


@dataclass(frozen=True, slots=True)
class SimulatedMove:
    """Board after a move plus the record describing it."""

    board: Board
    record: MoveRecord


def simulate(from_sq: Square, to_sq: Square, state: GameState) -> SimulatedMove:
    """Play *from_sq* -> *to_sq* on a scratch copy of the board.

    Castling (king moving two files) also relocates the rook; a pawn moving
    diagonally onto the en-passant target also removes the pawn it passed.
    The move is not validated here.
    """
    board = state.board
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece on {from_sq.name}")

    changes: dict[Square, Piece | None] = {from_sq: None, to_sq: piece}
    captured = board[to_sq]
    is_castling = False
    is_en_passant = False

    if piece.piece_type == PieceType.KING:
        side = castle_side_for(from_sq, to_sq)
        if side is not None:
            squares = castle_squares(side, piece.color)
            changes[squares.rook_from] = None
            changes[squares.rook_to] = board[squares.rook_from]
            is_castling = True

    elif (
        piece.piece_type == PieceType.PAWN
        and to_sq == state.en_passant
        and to_sq.file != from_sq.file
        and captured is None
    ):
        victim_sq = Square(to_sq.file, from_sq.rank)
        captured = board[victim_sq]
        changes[victim_sq] = None
        is_en_passant = True

    record = MoveRecord(
        from_sq=from_sq,
        to_sq=to_sq,
        piece=piece,
        captured=captured,
        is_castling=is_castling,
        is_en_passant=is_en_passant,
    )
    return SimulatedMove(board.replace(changes), record)


def king_exposed(board: Board, color: Color) -> bool:
    """Whether *color*'s king is attacked on *board* (False with no king)."""
    king_sq = board.find_king(color)
    if king_sq is None:
        return False
    return is_attacked(king_sq, board, color.opposite)


def is_legal(from_sq: Square, to_sq: Square, state: GameState) -> bool:
    """Whether the side to move may play *from_sq* -> *to_sq*."""
    if to_sq not in pseudo_legal_destinations(from_sq, state):
        return False
    scratch = simulate(from_sq, to_sq, state)
    return not king_exposed(scratch.board, state.turn)


def legal_destinations(sq: Square, state: GameState) -> frozenset[Square]:
    """Squares the piece on *sq* may actually move to."""
    return frozenset(
        to_sq
        for to_sq in pseudo_legal_destinations(sq, state)
        if not king_exposed(simulate(sq, to_sq, state).board, state.turn)
    )


def legal_moves(state: GameState) -> list[tuple[Square, Square]]:
    """Every legal ``(from, to)`` pair for the side to move, in board order."""
    moves: list[tuple[Square, Square]] = []
    for from_sq in state.board.occupied(state.turn):
        for to_sq in sorted(legal_destinations(from_sq, state)):
            moves.append((from_sq, to_sq))
    return moves


def is_in_check(state: GameState, color: Color | None = None) -> bool:
    """Is *color*'s king (default: the side to move) attacked?"""
    return king_exposed(state.board, state.turn if color is None else color)

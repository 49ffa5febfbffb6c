"""Castling and en-passant eligibility, layered on the attack rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmoves.core.attacks import is_attacked
from chessmoves.core.enums import CastleSide, Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import Square

if TYPE_CHECKING:
    from chessmoves.core.state import GameState


@dataclass(frozen=True, slots=True)
class CastleSquares:
    """Origin and destination squares of one castling move."""

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square

    @property
    def between(self) -> tuple[Square, ...]:
        """Squares strictly between king and rook; all must be empty."""
        lo, hi = sorted((self.king_from.file, self.rook_from.file))
        return tuple(Square(f, self.king_from.rank) for f in range(lo + 1, hi))

    @property
    def king_path(self) -> tuple[Square, ...]:
        """King's start, transit and destination; none may be attacked."""
        step = 1 if self.king_to.file > self.king_from.file else -1
        return tuple(
            Square(f, self.king_from.rank)
            for f in range(self.king_from.file, self.king_to.file + step, step)
        )


def castle_squares(side: CastleSide, color: Color) -> CastleSquares:
    rank = color.back_rank
    if side == CastleSide.KINGSIDE:
        return CastleSquares(
            king_from=Square(4, rank),
            king_to=Square(6, rank),
            rook_from=Square(7, rank),
            rook_to=Square(5, rank),
        )
    return CastleSquares(
        king_from=Square(4, rank),
        king_to=Square(2, rank),
        rook_from=Square(0, rank),
        rook_to=Square(3, rank),
    )


def castle_side_for(king_from: Square, king_to: Square) -> CastleSide | None:
    """Side of a castling move, or ``None`` if the king does not move two files."""
    if king_from.rank != king_to.rank:
        return None
    delta = king_to.file - king_from.file
    if delta == 2:
        return CastleSide.KINGSIDE
    if delta == -2:
        return CastleSide.QUEENSIDE
    return None


def can_castle(side: CastleSide, color: Color, state: GameState) -> bool:
    """Whether *color* may castle on *side* right now.

    Requires king and rook still on (and never having left) their origin
    squares, an empty path between them, and the king's start, transit and
    destination squares free from attack on the current board.
    """
    squares = castle_squares(side, color)
    board = state.board

    if state.castling.has_moved(squares.king_from) or state.castling.has_moved(
        squares.rook_from
    ):
        return False
    if board[squares.king_from] != Piece(color, PieceType.KING):
        return False
    if board[squares.rook_from] != Piece(color, PieceType.ROOK):
        return False

    if any(not board.is_empty(sq) for sq in squares.between):
        return False

    opponent = color.opposite
    return not any(is_attacked(sq, board, opponent) for sq in squares.king_path)


def can_en_passant(
    pawn_sq: Square,
    target_sq: Square,
    state: GameState,
    color: Color,
) -> bool:
    """Whether the *color* pawn on *pawn_sq* may capture en passant onto *target_sq*.

    Only valid on the ply straight after the opponent's two-square advance
    past *target_sq*; any intervening move forfeits it.
    """
    if state.en_passant is None or state.en_passant != target_sq:
        return False
    if not (pawn_sq.on_board() and target_sq.on_board()):
        return False
    if state.board[pawn_sq] != Piece(color, PieceType.PAWN):
        return False
    if abs(pawn_sq.file - target_sq.file) != 1:
        return False
    if target_sq.rank != pawn_sq.rank + color.forward:
        return False

    last = state.last_move
    if last is None or not last.is_double_pawn_push:
        return False
    if last.piece.color != color.opposite:
        return False
    return last.to_sq == Square(target_sq.file, pawn_sq.rank)

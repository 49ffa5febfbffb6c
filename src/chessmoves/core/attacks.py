"""Pseudo-legal movement rules per piece type and square-attack detection.

Everything here looks at the board only.  Castling and en passant need the
game history and live in :mod:`chessmoves.core.special_moves`.
"""

from __future__ import annotations

from collections.abc import Callable

from chessmoves.core.board import Board, can_land_on
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import Square, all_squares

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

PieceRule = Callable[[Board, Square, Color], frozenset[Square]]


# -- Piece-specific generators ---------------------------------------------


def _slide(
    board: Board,
    sq: Square,
    color: Color,
    directions: tuple[tuple[int, int], ...],
) -> frozenset[Square]:
    targets: set[Square] = set()
    for df, dr in directions:
        to_sq = sq.offset(df, dr)
        while to_sq.on_board():
            target = board[to_sq]
            if target is None:
                targets.add(to_sq)
                to_sq = to_sq.offset(df, dr)
                continue
            if target.color != color:
                targets.add(to_sq)
            break
    return frozenset(targets)


def _step(
    board: Board,
    sq: Square,
    color: Color,
    offsets: tuple[tuple[int, int], ...],
) -> frozenset[Square]:
    return frozenset(
        to_sq
        for to_sq in (sq.offset(df, dr) for df, dr in offsets)
        if can_land_on(board, to_sq, color)
    )


def pawn_moves(board: Board, sq: Square, color: Color) -> frozenset[Square]:
    """Pushes and ordinary diagonal captures; no en passant."""
    targets: set[Square] = set()
    forward = color.forward

    one_step = sq.offset(0, forward)
    if one_step.on_board() and board.is_empty(one_step):
        targets.add(one_step)
        two_step = sq.offset(0, 2 * forward)
        if sq.rank == color.pawn_rank and board.is_empty(two_step):
            targets.add(two_step)

    for cap_sq in pawn_attacks(sq, color):
        target = board[cap_sq]
        if target is not None and target.color != color:
            targets.add(cap_sq)
    return frozenset(targets)


def pawn_attacks(sq: Square, color: Color) -> frozenset[Square]:
    """Squares a *color* pawn on *sq* attacks: one step diagonally forward."""
    return frozenset(
        to_sq
        for to_sq in (sq.offset(-1, color.forward), sq.offset(1, color.forward))
        if to_sq.on_board()
    )


def knight_moves(board: Board, sq: Square, color: Color) -> frozenset[Square]:
    return _step(board, sq, color, KNIGHT_OFFSETS)


def bishop_moves(board: Board, sq: Square, color: Color) -> frozenset[Square]:
    return _slide(board, sq, color, BISHOP_DIRS)


def rook_moves(board: Board, sq: Square, color: Color) -> frozenset[Square]:
    return _slide(board, sq, color, ROOK_DIRS)


def queen_moves(board: Board, sq: Square, color: Color) -> frozenset[Square]:
    return _slide(board, sq, color, QUEEN_DIRS)


def king_moves(board: Board, sq: Square, color: Color) -> frozenset[Square]:
    """One-square king steps; castling is added by the move generator."""
    return _step(board, sq, color, KING_OFFSETS)


PIECE_RULES: dict[PieceType, PieceRule] = {
    PieceType.PAWN: pawn_moves,
    PieceType.KNIGHT: knight_moves,
    PieceType.BISHOP: bishop_moves,
    PieceType.ROOK: rook_moves,
    PieceType.QUEEN: queen_moves,
    PieceType.KING: king_moves,
}


# -- Public API -------------------------------------------------------------


def piece_destinations(board: Board, sq: Square) -> frozenset[Square]:
    """Basic pseudo-legal destinations of the piece on *sq*.

    Empty for empty or off-board squares.
    """
    if not sq.on_board():
        return frozenset()
    piece = board[sq]
    if piece is None:
        return frozenset()
    return PIECE_RULES[piece.piece_type](board, sq, piece.color)


def is_attacked(sq: Square, board: Board, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Works outward from *sq*: a knight a knight-jump away, a king a step
    away, a pawn on one of the two squares whose diagonal covers *sq*, or
    the first piece along a ray being a matching slider.  Pawns therefore
    attack diagonally only; their pushes never count.  A square holding a
    *by_color* piece is never attacked by that colour.
    """
    if not sq.on_board():
        return False
    occupant = board[sq]
    if occupant is not None and occupant.color == by_color:
        return False

    pawn = Piece(by_color, PieceType.PAWN)
    for df in (-1, 1):
        from_sq = sq.offset(df, -by_color.forward)
        if from_sq.on_board() and board[from_sq] == pawn:
            return True

    if _any_at(board, sq, KNIGHT_OFFSETS, Piece(by_color, PieceType.KNIGHT)):
        return True
    if _any_at(board, sq, KING_OFFSETS, Piece(by_color, PieceType.KING)):
        return True

    diagonal = (PieceType.BISHOP, PieceType.QUEEN)
    straight = (PieceType.ROOK, PieceType.QUEEN)
    return _ray_hits(board, sq, BISHOP_DIRS, by_color, diagonal) or _ray_hits(
        board, sq, ROOK_DIRS, by_color, straight
    )


def _any_at(
    board: Board,
    sq: Square,
    offsets: tuple[tuple[int, int], ...],
    piece: Piece,
) -> bool:
    for df, dr in offsets:
        from_sq = sq.offset(df, dr)
        if from_sq.on_board() and board[from_sq] == piece:
            return True
    return False


def _ray_hits(
    board: Board,
    sq: Square,
    directions: tuple[tuple[int, int], ...],
    by_color: Color,
    sliders: tuple[PieceType, ...],
) -> bool:
    for df, dr in directions:
        from_sq = sq.offset(df, dr)
        while from_sq.on_board():
            piece = board[from_sq]
            if piece is None:
                from_sq = from_sq.offset(df, dr)
                continue
            if piece.color == by_color and piece.piece_type in sliders:
                return True
            break
    return False


def attacked_squares(board: Board, by_color: Color) -> frozenset[Square]:
    """Every square attacked by *by_color*."""
    return frozenset(sq for sq in all_squares() if is_attacked(sq, board, by_color))

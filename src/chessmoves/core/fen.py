"""FEN parsing and serialization for :class:`GameState`."""

from __future__ import annotations

from chessmoves.core.board import Board
from chessmoves.core.castling import CastlingRights
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import MoveRecord
from chessmoves.core.piece import Piece
from chessmoves.core.state import GameState
from chessmoves.core.types import A1, A8, E1, E8, H1, H8, Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# FEN castling letter -> (king origin, rook origin)
_CASTLING_LETTERS: dict[str, tuple[Square, Square]] = {
    "K": (E1, H1),
    "Q": (E1, A1),
    "k": (E8, H8),
    "q": (E8, A8),
}


def state_from_fen(fen: str) -> GameState:
    """Parse a FEN string into a :class:`GameState`.

    When an en-passant square is given, the two-square pawn advance it
    implies becomes the state's only history entry, so the capture is
    available immediately.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    changes: dict[Square, Piece | None] = {}
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                changes[Square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")
    board = Board.empty().replace(changes)

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling: every origin not backed by a letter counts as moved
    castling = CastlingRights(frozenset((A1, E1, H1, A8, E8, H8)))
    if castling_part != "-":
        unmoved: set[Square] = set()
        for ch in castling_part:
            origins = _CASTLING_LETTERS.get(ch)
            if origins is None or origins[1] in unmoved:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            unmoved.update(origins)
        castling = CastlingRights(castling.moved - unmoved)

    # 4. En passant
    ep: Square | None = None
    history: tuple[MoveRecord, ...] = ()
    if ep_part != "-":
        ep = Square.parse(ep_part)
        mover = side.opposite
        if ep.rank != mover.pawn_rank + mover.forward:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        pawn_to = ep.offset(0, mover.forward)
        pawn = Piece(mover, PieceType.PAWN)
        if board[pawn_to] != pawn:
            raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
        history = (MoveRecord(ep.offset(0, -mover.forward), pawn_to, pawn),)

    # 5-6. Clocks (optional)
    halfmove = _parse_counter(
        "halfmove clock", parts[4] if len(parts) > 4 else "0", 0
    )
    fullmove = _parse_counter(
        "fullmove number", parts[5] if len(parts) > 5 else "1", 1
    )

    return GameState(
        board=board,
        history=history,
        castling=castling,
        en_passant=ep,
        turn=side,
        halfmove_clock=halfmove,
        fullmove_number=fullmove,
    )


def _parse_counter(label: str, text: str, minimum: int) -> int:
    try:
        value = int(text)
    except ValueError:
        raise ValueError(f"Invalid FEN {label}: {text!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {label}: {text!r}")
    return value


def state_to_fen(state: GameState) -> str:
    """Serialise a :class:`GameState` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for piece in state.board.rows[rank]:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if state.turn == Color.WHITE else "b"

    # 3. Castling: rights survive only while both pieces sit unmoved at home
    castling_str = ""
    for letter, (king_sq, rook_sq) in _CASTLING_LETTERS.items():
        color = Color.WHITE if letter.isupper() else Color.BLACK
        if (
            not state.castling.has_moved(king_sq)
            and not state.castling.has_moved(rook_sq)
            and state.board[king_sq] == Piece(color, PieceType.KING)
            and state.board[rook_sq] == Piece(color, PieceType.ROOK)
        ):
            castling_str += letter
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = state.en_passant.name if state.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )

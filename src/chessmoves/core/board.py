"""Board - immutable piece placement on an 8x8 grid, plus board predicates."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import Square

Grid = tuple[tuple[Piece | None, ...], ...]

_EMPTY_RANK: tuple[Piece | None, ...] = (None,) * 8

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 64-square board indexed ``[rank][file]``.

    Every change goes through :meth:`replace`, which returns a new board and
    leaves the receiver untouched.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid | None = None) -> None:
        if grid is None:
            grid = (_EMPTY_RANK,) * 8
        if len(grid) != 8 or any(len(row) != 8 for row in grid):
            raise ValueError("Board grid must be 8x8")
        self._grid: Grid = tuple(tuple(row) for row in grid)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.on_board():
            raise ValueError(f"Square off board: {sq!r}")
        return self._grid[sq.rank][sq.file]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @property
    def rows(self) -> Grid:
        """Raw ``[rank][file]`` grid."""
        return self._grid

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, a1 first, rank by rank."""
        for rank, row in enumerate(self._grid):
            for file, piece in enumerate(row):
                if piece is not None:
                    yield Square(file, rank), piece

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self if piece.color == color]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in self if piece == target]

    def find_king(self, color: Color) -> Square | None:
        kings = self.pieces(color, PieceType.KING)
        return kings[0] if kings else None

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        sq = self.find_king(color)
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with each square in *changes* set to its value."""
        if not changes:
            return self
        grid = [list(row) for row in self._grid]
        for sq, piece in changes.items():
            if not sq.on_board():
                raise ValueError(f"Square off board: {sq!r}")
            grid[sq.rank][sq.file] = piece
        return Board(tuple(tuple(row) for row in grid))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        white_back = tuple(Piece(Color.WHITE, pt) for pt in _BACK_RANK)
        black_back = tuple(Piece(Color.BLACK, pt) for pt in _BACK_RANK)
        white_pawns = (Piece(Color.WHITE, PieceType.PAWN),) * 8
        black_pawns = (Piece(Color.BLACK, PieceType.PAWN),) * 8
        return cls(
            (white_back, white_pawns)
            + (_EMPTY_RANK,) * 4
            + (black_pawns, black_back)
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self) -> int:
        return hash(self._grid)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)


# -- Board-model predicates -------------------------------------------------


def square_on_board(sq: Square) -> bool:
    """Bounds check only."""
    return sq.on_board()


def piece_at(board: Board, sq: Square) -> Piece | None:
    """Piece on *sq*, or ``None`` for empty and off-board squares."""
    if not sq.on_board():
        return None
    return board[sq]


def can_land_on(board: Board, sq: Square, color: Color) -> bool:
    """Whether a *color* piece may finish a move on *sq*.

    True when *sq* is on the board and either empty or held by the
    opposing color.
    """
    if not sq.on_board():
        return False
    target = board[sq]
    return target is None or target.color != color

"""Castling rights as a "has moved" map over the king and rook origin squares."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from chessmoves.core.types import A1, A8, E1, E8, H1, H8, Square

ORIGIN_SQUARES: tuple[Square, ...] = (A1, E1, H1, A8, E8, H8)


class CastlingRights(Mapping[Square, bool]):
    """Immutable mapping ``origin square -> has moved``.

    Only the six origin squares are tracked.  Once a square is marked it
    stays marked: a king or rook that returns home does not regain the
    right to castle.
    """

    __slots__ = ("_moved",)

    def __init__(self, moved: frozenset[Square] = frozenset()) -> None:
        self._moved = frozenset(sq for sq in moved if sq in ORIGIN_SQUARES)

    def __getitem__(self, sq: Square) -> bool:
        if sq not in ORIGIN_SQUARES:
            raise KeyError(sq)
        return sq in self._moved

    def __iter__(self) -> Iterator[Square]:
        return iter(ORIGIN_SQUARES)

    def __len__(self) -> int:
        return len(ORIGIN_SQUARES)

    def has_moved(self, sq: Square) -> bool:
        """Whether *sq* has been vacated (or captured on) since the start."""
        return sq in self._moved

    def mark_moved(self, *squares: Square) -> CastlingRights:
        """Return rights with *squares* marked; untracked squares are ignored."""
        tracked = {sq for sq in squares if sq in ORIGIN_SQUARES}
        if tracked <= self._moved:
            return self
        return CastlingRights(self._moved | tracked)

    @property
    def moved(self) -> frozenset[Square]:
        return self._moved

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CastlingRights):
            return self._moved == other._moved
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._moved)

    def __repr__(self) -> str:
        names = ", ".join(sq.name for sq in ORIGIN_SQUARES if sq in self._moved)
        return f"CastlingRights(moved={{{names}}})"

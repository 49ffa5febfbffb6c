"""Square value object and coordinate helpers.

Coordinates are ``(file, rank)`` pairs seen from white's side::

    file 0..7  ->  a..h
    rank 0..7  ->  1..8

White pawns advance toward increasing rank, black pawns toward decreasing
rank (see :attr:`Color.forward`).  A board is indexed ``[rank][file]``.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A board coordinate.

    Off-board squares can be built (ray walking steps past the edge) but
    never satisfy :meth:`on_board`.
    """

    file: int
    rank: int

    def on_board(self) -> bool:
        return 0 <= self.file < 8 and 0 <= self.rank < 8

    def offset(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Square(4, 3).name == 'e4'``."""
        if not self.on_board():
            return f"({self.file},{self.rank})"
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse an algebraic square name, e.g. 'e4' -> Square(4, 3)."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    def __str__(self) -> str:
        return self.name


def all_squares() -> list[Square]:
    """Every on-board square, a1 first, rank by rank."""
    return [Square(f, r) for r in range(8) for f in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))

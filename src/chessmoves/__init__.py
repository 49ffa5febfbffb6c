"""chessmoves — a chess legal-move engine.

The pure rules live in :mod:`chessmoves.core`; :mod:`chessmoves.game`
holds the caller-side controller and its Qt bridge.
"""

from chessmoves.core import (
    Board,
    CastleSide,
    Color,
    GameState,
    IllegalMoveError,
    MoveRecord,
    Piece,
    PieceType,
    Square,
    apply_move,
    is_attacked,
    is_legal,
    legal_destinations,
)
from chessmoves.settings import GameSettings

__version__ = "0.1.0"

__all__ = [
    "Board",
    "CastleSide",
    "Color",
    "GameSettings",
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
    "Piece",
    "PieceType",
    "Square",
    "apply_move",
    "is_attacked",
    "is_legal",
    "legal_destinations",
]

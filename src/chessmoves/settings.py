"""Game settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """All caller-configurable settings for a game."""

    # Position to start from; None means the standard starting position.
    start_fen: str | None = None

    # Whether GameController.undo_move may take moves back.
    allow_undo: bool = True

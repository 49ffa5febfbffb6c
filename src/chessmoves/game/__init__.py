"""Game management layer — a controller threading GameState through the engine.

Quick start::

    from chessmoves.core import Square
    from chessmoves.game import GameController

    ctrl = GameController()
    ctrl.submit_move(Square.parse("e2"), Square.parse("e4"))

The Qt bridge lives in :mod:`chessmoves.game.qt_bridge` and is imported
separately so the controller stays usable without a Qt event loop.
"""

from chessmoves.game.controller import GameController, GameEvents

__all__ = [
    "GameController",
    "GameEvents",
]

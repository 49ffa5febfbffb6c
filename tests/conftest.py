"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from chessmoves.core.fen import state_from_fen
from chessmoves.core.state import GameState

CASTLING_FEN = "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def initial_state() -> GameState:
    return GameState.initial()


@pytest.fixture
def castling_state() -> GameState:
    """Both sides with king and rooks at home and empty back ranks."""
    return state_from_fen(CASTLING_FEN)

"""Tests for GameController — history, undo and callbacks."""

import logging

import pytest

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import MoveRecord
from chessmoves.core.piece import Piece
from chessmoves.core.state import GameState
from chessmoves.core.types import D4, D5, D7, E2, E3, E4, E5, G1, F3
from chessmoves.game.controller import GameController
from chessmoves.settings import GameSettings

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
EP_FEN = "4k3/8/8/8/3p4/8/4P3/4K3 w - - 0 1"


class TestNewGame:
    def test_default_position(self) -> None:
        ctrl = GameController()
        assert ctrl.state == GameState.initial()
        assert ctrl.turn == Color.WHITE
        assert ctrl.history == ()

    def test_start_fen(self) -> None:
        ctrl = GameController(GameSettings(start_fen=EP_FEN))
        assert ctrl.state.board[D4] == Piece(Color.BLACK, PieceType.PAWN)

    def test_invalid_start_fen(self) -> None:
        with pytest.raises(ValueError):
            GameController(GameSettings(start_fen="garbage"))

    def test_new_game_resets(self) -> None:
        ctrl = GameController()
        ctrl.submit_move(E2, E4)
        ctrl.new_game()
        assert ctrl.state == GameState.initial()

    def test_new_game_with_settings(self) -> None:
        ctrl = GameController()
        settings = GameSettings(start_fen=EP_FEN)
        ctrl.new_game(settings)
        assert ctrl.settings is settings
        assert ctrl.state.board[E4] is None

    def test_new_game_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.INFO, logger="chessmoves.game.controller"):
            ctrl.new_game()
        assert "New game started (white to move)" in caplog.text


class TestSubmitMove:
    def test_legal_move_accepted(self) -> None:
        ctrl = GameController()
        record = ctrl.submit_move(E2, E4)
        assert record == MoveRecord(E2, E4, WHITE_PAWN)
        assert ctrl.turn == Color.BLACK
        assert ctrl.history == (record,)

    def test_illegal_move_rejected(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move(E2, E5) is None
        assert ctrl.turn == Color.WHITE
        assert ctrl.history == ()

    def test_wrong_side_rejected(self) -> None:
        ctrl = GameController()
        assert ctrl.submit_move(D7, D5) is None

    def test_rejection_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.WARNING, logger="chessmoves.game.controller"):
            ctrl.submit_move(E2, E5)
        assert "Rejected move e2e5 for white" in caplog.text

    def test_move_event_fires(self) -> None:
        ctrl = GameController()
        seen: list[tuple[MoveRecord, GameState]] = []
        ctrl.events.on_move.append(lambda rec, st: seen.append((rec, st)))
        ctrl.submit_move(G1, F3)
        assert len(seen) == 1
        record, state = seen[0]
        assert str(record) == "g1f3"
        assert state is ctrl.state

    def test_no_event_on_rejection(self) -> None:
        ctrl = GameController()
        seen: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda rec, st: seen.append(rec))
        ctrl.submit_move(E2, E5)
        assert seen == []

    def test_en_passant_from_fen(self) -> None:
        ctrl = GameController(GameSettings(start_fen=EP_FEN))
        ctrl.submit_move(E2, E4)
        assert E3 in ctrl.destinations(D4)
        record = ctrl.submit_move(D4, E3)
        assert record is not None and record.is_en_passant
        assert ctrl.state.board[E4] is None

    def test_destinations(self) -> None:
        ctrl = GameController()
        assert ctrl.destinations(E2) == frozenset({E3, E4})
        assert ctrl.destinations(D7) == frozenset()


class TestUndo:
    def test_undo_restores_previous_state(self) -> None:
        ctrl = GameController()
        before = ctrl.state
        ctrl.submit_move(E2, E4)
        assert ctrl.undo_move()
        assert ctrl.state == before

    def test_undo_at_start_refused(self) -> None:
        ctrl = GameController()
        assert not ctrl.undo_move()

    def test_undo_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController(GameSettings(allow_undo=False))
        ctrl.submit_move(E2, E4)
        with caplog.at_level(logging.DEBUG, logger="chessmoves.game.controller"):
            assert not ctrl.undo_move()
        assert ctrl.turn == Color.BLACK
        assert "Undo refused" in caplog.text

    def test_undo_event_fires(self) -> None:
        ctrl = GameController()
        seen: list[tuple[MoveRecord, GameState]] = []
        ctrl.events.on_undo.append(lambda rec, st: seen.append((rec, st)))
        record = ctrl.submit_move(E2, E4)
        ctrl.undo_move()
        assert seen == [(record, GameState.initial())]

    def test_controllers_are_independent(self) -> None:
        a = GameController()
        b = GameController()
        a.submit_move(E2, E4)
        assert b.state == GameState.initial()

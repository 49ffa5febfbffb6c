"""Tests for Board and the board-model predicates."""

import pytest

from chessmoves.core.board import Board, can_land_on, piece_at, square_on_board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4, E7,
    Square,
)

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_PAWN = Piece(Color.BLACK, PieceType.PAWN)


class TestBoardInitial:
    def test_kings(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            (A1, A8, PieceType.ROOK), (B1, B8, PieceType.KNIGHT),
            (C1, C8, PieceType.BISHOP), (D1, D8, PieceType.QUEEN),
            (E1, E8, PieceType.KING), (F1, F8, PieceType.BISHOP),
            (G1, G8, PieceType.KNIGHT), (H1, H8, PieceType.ROOK),
        ]
        for white_sq, black_sq, pt in expected:
            assert board[white_sq] == Piece(Color.WHITE, pt), white_sq.name
            assert board[black_sq] == Piece(Color.BLACK, pt), black_sq.name

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.rank == 1 for sq in white)
        assert len(black) == 8 and all(sq.rank == 6 for sq in black)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board.is_empty(Square(file, rank))

    def test_grid_indexed_rank_then_file(self) -> None:
        board = Board.initial()
        assert board.rows[1][4] == WHITE_PAWN
        assert board.rows[7][3] == Piece(Color.BLACK, PieceType.QUEEN)


class TestBoardOperations:
    def test_replace_returns_new_board(self) -> None:
        board = Board.initial()
        moved = board.replace({E2: None, E4: WHITE_PAWN})
        assert moved[E4] == WHITE_PAWN
        assert moved.is_empty(E2)
        assert board[E2] == WHITE_PAWN
        assert board.is_empty(E4)
        assert board != moved

    def test_replace_nothing_is_identity(self) -> None:
        board = Board.initial()
        assert board.replace({}) is board

    def test_replace_off_board_raises(self) -> None:
        with pytest.raises(ValueError, match="off board"):
            Board().replace({Square(8, 0): WHITE_PAWN})

    def test_off_board_lookup_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(ValueError, match="Square off board"):
            board[Square(-1, 0)]
        with pytest.raises(ValueError, match="Square off board"):
            board.is_empty(Square(0, 8))

    def test_bad_grid_shape(self) -> None:
        with pytest.raises(ValueError, match="8x8"):
            Board(((None,) * 8,) * 7)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        assert board.find_king(Color.WHITE) is None
        with pytest.raises(ValueError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_occupied_count(self) -> None:
        board = Board.initial()
        assert len(board.occupied(Color.WHITE)) == 16
        assert len(board.occupied(Color.BLACK)) == 16

    def test_iteration_yields_occupied_squares(self) -> None:
        board = Board().replace({E4: WHITE_PAWN, E7: BLACK_PAWN})
        assert list(board) == [(E4, WHITE_PAWN), (E7, BLACK_PAWN)]

    def test_equal_boards_hash_equal(self) -> None:
        assert hash(Board.initial()) == hash(Board.initial())
        assert Board.empty() == Board()

    def test_repr(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestBoardPredicates:
    def test_square_on_board(self) -> None:
        assert square_on_board(E4)
        assert not square_on_board(Square(-1, 4))
        assert not square_on_board(Square(4, 8))

    def test_piece_at(self) -> None:
        board = Board.initial()
        assert piece_at(board, E2) == WHITE_PAWN
        assert piece_at(board, E4) is None
        assert piece_at(board, Square(0, -1)) is None

    def test_can_land_on(self) -> None:
        board = Board.initial()
        assert can_land_on(board, E4, Color.WHITE)  # empty
        assert can_land_on(board, E7, Color.WHITE)  # opponent
        assert not can_land_on(board, E2, Color.WHITE)  # own piece
        assert not can_land_on(board, Square(8, 8), Color.WHITE)

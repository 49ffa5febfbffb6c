"""Tests for Square, Piece and the enums."""

import pytest

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import A1, E2, E4, H8, Square, all_squares


class TestSquare:
    def test_parse(self) -> None:
        assert Square.parse("a1") == Square(0, 0)
        assert Square.parse("e4") == Square(4, 3)
        assert Square.parse("h8") == Square(7, 7)

    def test_name(self) -> None:
        assert E4.name == "e4"
        assert str(H8) == "h8"

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44", "E4"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            Square.parse(name)

    def test_on_board(self) -> None:
        assert A1.on_board()
        assert H8.on_board()
        assert not Square(-1, 0).on_board()
        assert not Square(0, 8).on_board()
        assert not Square(8, 3).on_board()

    def test_offset(self) -> None:
        assert E2.offset(0, 2) == E4
        assert not A1.offset(-1, 0).on_board()

    def test_off_board_name_does_not_raise(self) -> None:
        assert Square(9, -1).name == "(9,-1)"

    def test_hashable_and_ordered(self) -> None:
        assert len({E4, Square(4, 3)}) == 1
        assert sorted([H8, E4, A1]) == [A1, E4, H8]

    def test_all_squares(self) -> None:
        squares = all_squares()
        assert len(squares) == 64
        assert squares[0] == A1
        assert squares[-1] == H8


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_forward(self) -> None:
        assert Color.WHITE.forward == 1
        assert Color.BLACK.forward == -1

    def test_ranks(self) -> None:
        assert (Color.WHITE.back_rank, Color.WHITE.pawn_rank) == (0, 1)
        assert (Color.BLACK.back_rank, Color.BLACK.pawn_rank) == (7, 6)

    def test_str(self) -> None:
        assert str(Color.WHITE) == "white"


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str_is_fen_char(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"
        assert str(Piece(Color.WHITE, PieceType.PAWN)) == "P"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.WHITE, PieceType.PAWN).symbol == "♙"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.BLACK, PieceType.QUEEN).symbol == "♛"

    def test_immutable(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]

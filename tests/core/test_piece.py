"""Tests for Piece, Color and PieceType."""

import pytest

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.errors import InvalidPieceColorError, InvalidPieceNameError
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_from_name(self) -> None:
        assert Color.from_name("White") == Color.WHITE
        assert Color.from_name("Black") == Color.BLACK

    @pytest.mark.parametrize("name", ["white", "BLACK", "Red", ""])
    def test_from_name_rejects(self, name: str) -> None:
        with pytest.raises(InvalidPieceColorError, match="Invalid piece color"):
            Color.from_name(name)


class TestPieceType:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Pawn", PieceType.PAWN),
            ("King", PieceType.KING),
            ("Knight", PieceType.KNIGHT),
            ("Rook", PieceType.ROOK),
            ("Bishop", PieceType.BISHOP),
            ("Queen", PieceType.QUEEN),
        ],
    )
    def test_from_name(self, name: str, expected: PieceType) -> None:
        assert PieceType.from_name(name) == expected

    @pytest.mark.parametrize("name", ["pawn", "Archbishop", "K", ""])
    def test_from_name_rejects(self, name: str) -> None:
        with pytest.raises(InvalidPieceNameError, match="Invalid piece name"):
            PieceType.from_name(name)


class TestPiece:
    def test_description_round_trips_listing_fields(self) -> None:
        piece = Piece(Color.WHITE, PieceType.QUEEN, Position(2, 7))
        assert piece.description == "Queen White 2 7"

    def test_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT, Position(1, 1))) == "N"
        assert str(Piece(Color.BLACK, PieceType.KING, Position(1, 1))) == "k"

    def test_frozen(self) -> None:
        piece = Piece(Color.WHITE, PieceType.ROOK, Position(1, 1))
        with pytest.raises(AttributeError):
            piece.position = Position(2, 2)  # type: ignore[misc]

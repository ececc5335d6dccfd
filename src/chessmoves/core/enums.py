"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum

from chessmoves.core.errors import InvalidPieceColorError, InvalidPieceNameError


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def display_name(self) -> str:
        """Name as written in board listings, e.g. ``White``."""
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> Color:
        """Parse ``White`` / ``Black`` (case-sensitive)."""
        for color in cls:
            if color.display_name == name:
                return color
        raise InvalidPieceColorError()

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @property
    def display_name(self) -> str:
        """Name as written in board listings, e.g. ``Knight``."""
        return self.name.capitalize()

    @classmethod
    def from_name(cls, name: str) -> PieceType:
        """Parse ``Pawn``, ``King``, ``Knight``, ``Rook``, ``Bishop`` or ``Queen``."""
        for piece_type in cls:
            if piece_type.display_name == name:
                return piece_type
        raise InvalidPieceNameError()

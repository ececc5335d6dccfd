"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.position import Position

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece placed on a fixed square.

    Pieces never move: the project only counts the squares they could reach.
    """

    color: Color
    piece_type: PieceType
    position: Position

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Letter (uppercase = white, lowercase = black)."""
        letter = _LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @property
    def description(self) -> str:
        """Listing form, e.g. ``Knight Black 3 5``."""
        return (
            f"{self.piece_type.display_name} {self.color.display_name} "
            f"{self.position.x} {self.position.y}"
        )

"""Exceptions raised while building a board from untrusted input.

Every error carries a fixed, user-facing message; the batch driver prints
``str(error)`` as the only output line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessmoves.core.position import Position


class ChessError(ValueError):
    """Base class for all input and board-setup failures."""

    message = "Invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class InvalidBoardSizeError(ChessError):
    message = "Invalid board size"


class InvalidNumberOfPiecesError(ChessError):
    message = "Invalid number of pieces"


class InvalidPieceNameError(ChessError):
    message = "Invalid piece name"


class InvalidPieceColorError(ChessError):
    message = "Invalid piece color"


class InvalidPiecePositionError(ChessError):
    message = "Invalid piece position"


class PositionConflictError(InvalidPiecePositionError):
    """A piece was placed on a square that is already occupied."""

    def __init__(self, position: Position) -> None:
        super().__init__()
        self.position = position


class InvalidGivenKingsError(ChessError):
    message = "Invalid given Kings"


class InvalidInputError(ChessError):
    message = "Invalid input"

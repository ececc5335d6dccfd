"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position

PlaceFn = Callable[[PieceType, Color, int, int], Piece]


@pytest.fixture
def board() -> Board:
    """Empty 8x8 board."""
    return Board(8)


@pytest.fixture
def place(board: Board) -> PlaceFn:
    """Add a piece to the ``board`` fixture and return it."""

    def _place(piece_type: PieceType, color: Color, x: int, y: int) -> Piece:
        piece = Piece(color, piece_type, Position(x, y))
        board.add_piece(piece)
        return piece

    return _place

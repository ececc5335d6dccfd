"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.board import Board
from chessmoves.core.piece import Piece


@dataclass(slots=True)
class BoardSetup:
    """A validated board together with its pieces in listing order."""

    board: Board
    pieces: list[Piece]

"""Board - sparse piece placement on an N x N board."""

from __future__ import annotations

import logging
from collections.abc import ItemsView, Iterator

from chessmoves.core.errors import PositionConflictError
from chessmoves.core.move_counter import count_captures, count_moves
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position

_LOGGER = logging.getLogger(__name__)

MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 1000

# Boards larger than this are summarised instead of drawn by repr().
_MAX_DRAWN_SIZE = 26


class Board:
    """Square board of a given size holding at most one piece per position.

    The board is filled once with :meth:`add_piece` and then only queried.
    Iteration yields pieces in the order they were added.
    """

    __slots__ = ("_size", "_pieces")

    def __init__(self, size: int) -> None:
        self._size = size
        self._pieces: dict[Position, Piece] = {}

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def __getitem__(self, position: Position) -> Piece | None:
        return self._pieces.get(position)

    def get_piece(self, position: Position) -> Piece | None:
        """Piece standing on *position*, or ``None``."""
        return self._pieces.get(position)

    def __contains__(self, position: object) -> bool:
        return position in self._pieces

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces.values())

    def __len__(self) -> int:
        return len(self._pieces)

    def occupied(self) -> ItemsView[Position, Piece]:
        """Read-only view of ``(position, piece)`` pairs."""
        return self._pieces.items()

    # -- Population ---------------------------------------------------------

    def add_piece(self, piece: Piece) -> None:
        """Place *piece*; raises :class:`PositionConflictError` if its square is taken."""
        if piece.position in self._pieces:
            raise PositionConflictError(piece.position)
        self._pieces[piece.position] = piece
        _LOGGER.debug("Placed %s on %s", piece.description, piece.position)

    # -- Queries ------------------------------------------------------------

    def possible_moves_count(self, piece: Piece) -> int:
        return count_moves(piece, self)

    def possible_captures_count(self, piece: Piece) -> int:
        return count_captures(piece, self)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._pieces == other._pieces

    def __repr__(self) -> str:
        if self._size > _MAX_DRAWN_SIZE:
            return f"Board(size={self._size}, pieces={len(self._pieces)})"
        rows: list[str] = []
        width = len(str(self._size))
        for y in range(self._size, 0, -1):
            row = []
            for x in range(1, self._size + 1):
                p = self._pieces.get(Position(x, y))
                row.append(str(p) if p else ".")
            rows.append(f"{y:>{width}} {' '.join(row)}")
        files = " ".join(chr(ord("a") + x) for x in range(self._size))
        rows.append(f"{' ' * width} {files}")
        return "\n".join(rows)

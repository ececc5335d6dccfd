"""Position — 1-indexed board coordinate."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable ``(x, y)`` coordinate, ``x`` along files and ``y`` along ranks.

    A position is not tied to a board: use :meth:`is_valid` to check it
    against a concrete board size.
    """

    x: int
    y: int

    def is_valid(self, board_size: int) -> bool:
        return 1 <= self.x <= board_size and 1 <= self.y <= board_size

    def shifted(self, dx: int, dy: int) -> Position:
        """Position offset by ``(dx, dy)``; the result may be off the board."""
        return Position(self.x + dx, self.y + dy)

    def distance_to(self, other: Position) -> int:
        """Chebyshev distance, i.e. the number of king steps to *other*."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

"""Ray scanning for sliding pieces.

A sliding piece looks along four rays (diagonal or orthogonal).  Every
occupied square is visited once and classified onto the ray it lies on,
keeping only the nearest obstruction per ray, so the cost depends on the
number of pieces rather than on the board size.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from chessmoves.core.position import Position

if TYPE_CHECKING:
    from chessmoves.core.board import Board
    from chessmoves.core.piece import Piece

Direction: TypeAlias = tuple[int, int]

# Up-right, down-right, up-left, down-left.
DIAGONAL_DIRS: tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
# Right, left, up, down.
ORTHOGONAL_DIRS: tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True, slots=True)
class EmptyRay:
    """Nothing stands on the ray up to the board edge."""

    distance_to_edge: int


@dataclass(frozen=True, slots=True)
class BlockedRay:
    """Nearest occupied square on the ray."""

    position: Position
    same_color: bool


MoveState: TypeAlias = EmptyRay | BlockedRay


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def edge_distance(origin: Position, direction: Direction, board_size: int) -> int:
    """Number of squares from *origin* to the board edge along *direction*."""
    dx, dy = direction
    limits: list[int] = []
    if dx > 0:
        limits.append(board_size - origin.x)
    elif dx < 0:
        limits.append(origin.x - 1)
    if dy > 0:
        limits.append(board_size - origin.y)
    elif dy < 0:
        limits.append(origin.y - 1)
    return min(limits)


def scan_rays(
    piece: Piece, board: Board, directions: tuple[Direction, ...]
) -> tuple[MoveState, ...]:
    """Nearest obstruction (or open distance to the edge) for each direction.

    The result is ordered like *directions*.
    """
    origin = piece.position
    states: list[MoveState] = [
        EmptyRay(edge_distance(origin, d, board.size)) for d in directions
    ]
    ray_index = {d: i for i, d in enumerate(directions)}

    for position, other in board.occupied():
        if position == origin:
            continue

        dx = position.x - origin.x
        dy = position.y - origin.y
        idx = ray_index.get((_sign(dx), _sign(dy)))
        if idx is None:
            continue
        # Same sign pattern is not enough: (2, 1) shares signs with (1, 1).
        if dx and dy and abs(dx) != abs(dy):
            continue

        current = states[idx]
        if isinstance(current, BlockedRay) and origin.distance_to(
            position
        ) >= origin.distance_to(current.position):
            continue
        states[idx] = BlockedRay(position, other.color == piece.color)

    return tuple(states)


def scan_diagonals(piece: Piece, board: Board) -> tuple[MoveState, ...]:
    return scan_rays(piece, board, DIAGONAL_DIRS)


def scan_orthogonals(piece: Piece, board: Board) -> tuple[MoveState, ...]:
    return scan_rays(piece, board, ORTHOGONAL_DIRS)

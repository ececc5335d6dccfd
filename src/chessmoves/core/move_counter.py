"""Move and capture counting for every piece type.

Each :class:`PieceType` maps to a :class:`Movement` holding two pure
functions of ``(piece, board)``.  Fixed-offset pieces (king, knight, pawn)
look at a constant list of target squares; sliding pieces (bishop, rook,
queen) go through the ray scanner.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.position import Position
from chessmoves.core.rays import BlockedRay, MoveState, scan_diagonals, scan_orthogonals

if TYPE_CHECKING:
    from chessmoves.core.board import Board
    from chessmoves.core.piece import Piece

Offsets = tuple[tuple[int, int], ...]

KNIGHT_OFFSETS: Offsets = (
    (-1, -2),
    (-1, 2),
    (-2, -1),
    (-2, 1),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# White pawns advance towards larger y, black pawns towards smaller y.
PAWN_PUSH: dict[Color, tuple[int, int]] = {
    Color.WHITE: (0, 1),
    Color.BLACK: (0, -1),
}
PAWN_CAPTURE_OFFSETS: dict[Color, Offsets] = {
    Color.WHITE: ((-1, 1), (1, 1)),
    Color.BLACK: ((-1, -1), (1, -1)),
}


@dataclass(frozen=True, slots=True)
class PieceCounts:
    """Result for one piece: reachable squares and how many are captures."""

    moves: int
    captures: int


@dataclass(frozen=True, slots=True)
class Movement:
    """Counting capability of one piece type."""

    moves: Callable[[Piece, Board], int]
    captures: Callable[[Piece, Board], int]


# -- Fixed-offset pieces ----------------------------------------------------


def _targets(origin: Position, offsets: Offsets) -> list[Position]:
    return [origin.shifted(dx, dy) for dx, dy in offsets]


def _offset_moves(piece: Piece, board: Board, offsets: Offsets) -> int:
    count = 0
    for target in _targets(piece.position, offsets):
        if not target.is_valid(board.size):
            continue
        occupant = board[target]
        if occupant is None or occupant.color == piece.color.opposite:
            count += 1
    return count


def _offset_captures(piece: Piece, board: Board, offsets: Offsets) -> int:
    # Targets are not bounds-checked here, only looked up in the occupancy.
    count = 0
    for target in _targets(piece.position, offsets):
        occupant = board[target]
        if occupant is not None and occupant.color == piece.color.opposite:
            count += 1
    return count


def _king_moves(piece: Piece, board: Board) -> int:
    return _offset_moves(piece, board, KING_OFFSETS)


def _king_captures(piece: Piece, board: Board) -> int:
    return _offset_captures(piece, board, KING_OFFSETS)


def _knight_moves(piece: Piece, board: Board) -> int:
    return _offset_moves(piece, board, KNIGHT_OFFSETS)


def _knight_captures(piece: Piece, board: Board) -> int:
    return _offset_captures(piece, board, KNIGHT_OFFSETS)


def _pawn_captures(piece: Piece, board: Board) -> int:
    return _offset_captures(piece, board, PAWN_CAPTURE_OFFSETS[piece.color])


def _pawn_moves(piece: Piece, board: Board) -> int:
    """Forward push onto an empty square plus diagonal captures."""
    push = piece.position.shifted(*PAWN_PUSH[piece.color])
    forward = 1 if push.is_valid(board.size) and board[push] is None else 0
    return forward + _pawn_captures(piece, board)


# -- Sliding pieces ---------------------------------------------------------


def _ray_moves(origin: Position, states: tuple[MoveState, ...]) -> int:
    total = 0
    for state in states:
        if isinstance(state, BlockedRay):
            total += origin.distance_to(state.position) - (1 if state.same_color else 0)
        else:
            total += state.distance_to_edge
    return total


def _ray_captures(states: tuple[MoveState, ...]) -> int:
    return sum(
        1 for state in states if isinstance(state, BlockedRay) and not state.same_color
    )


def _bishop_moves(piece: Piece, board: Board) -> int:
    return _ray_moves(piece.position, scan_diagonals(piece, board))


def _bishop_captures(piece: Piece, board: Board) -> int:
    return _ray_captures(scan_diagonals(piece, board))


def _rook_moves(piece: Piece, board: Board) -> int:
    return _ray_moves(piece.position, scan_orthogonals(piece, board))


def _rook_captures(piece: Piece, board: Board) -> int:
    return _ray_captures(scan_orthogonals(piece, board))


def _queen_moves(piece: Piece, board: Board) -> int:
    return _bishop_moves(piece, board) + _rook_moves(piece, board)


def _queen_captures(piece: Piece, board: Board) -> int:
    return _bishop_captures(piece, board) + _rook_captures(piece, board)


MOVEMENTS: dict[PieceType, Movement] = {
    PieceType.PAWN: Movement(_pawn_moves, _pawn_captures),
    PieceType.KNIGHT: Movement(_knight_moves, _knight_captures),
    PieceType.BISHOP: Movement(_bishop_moves, _bishop_captures),
    PieceType.ROOK: Movement(_rook_moves, _rook_captures),
    PieceType.QUEEN: Movement(_queen_moves, _queen_captures),
    PieceType.KING: Movement(_king_moves, _king_captures),
}


# -- Public API -------------------------------------------------------------


def count_moves(piece: Piece, board: Board) -> int:
    """Squares *piece* can move to, captures included."""
    return MOVEMENTS[piece.piece_type].moves(piece, board)


def count_captures(piece: Piece, board: Board) -> int:
    """Squares holding an opposite-color piece that *piece* can take."""
    return MOVEMENTS[piece.piece_type].captures(piece, board)


def count_all(board: Board) -> list[PieceCounts]:
    """Counts for every piece on *board*, in placement order."""
    return [
        PieceCounts(
            board.possible_moves_count(piece),
            board.possible_captures_count(piece),
        )
        for piece in board
    ]

"""Core domain layer — move and capture counting with zero external dependencies.

Quick start::

    from chessmoves.core import Board, Color, Piece, PieceType, Position

    board = Board(8)
    rook = Piece(Color.WHITE, PieceType.ROOK, Position(4, 4))
    board.add_piece(rook)
    board.possible_moves_count(rook)  # 14
"""

from chessmoves.core.board import MAX_BOARD_SIZE, MIN_BOARD_SIZE, Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.errors import (
    ChessError,
    InvalidBoardSizeError,
    InvalidGivenKingsError,
    InvalidInputError,
    InvalidNumberOfPiecesError,
    InvalidPieceColorError,
    InvalidPieceNameError,
    InvalidPiecePositionError,
    PositionConflictError,
)
from chessmoves.core.move_counter import (
    MOVEMENTS,
    Movement,
    PieceCounts,
    count_all,
    count_captures,
    count_moves,
)
from chessmoves.core.notation import (
    BoardSetup,
    format_counts,
    format_error,
    parse_board_text,
)
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position
from chessmoves.core.rays import BlockedRay, EmptyRay, MoveState

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "ChessError",
    "InvalidBoardSizeError",
    "InvalidGivenKingsError",
    "InvalidInputError",
    "InvalidNumberOfPiecesError",
    "InvalidPieceColorError",
    "InvalidPieceNameError",
    "InvalidPiecePositionError",
    "PositionConflictError",
    # Domain objects
    "MAX_BOARD_SIZE",
    "MIN_BOARD_SIZE",
    "Board",
    "Piece",
    "Position",
    # Counting
    "BlockedRay",
    "EmptyRay",
    "MoveState",
    "MOVEMENTS",
    "Movement",
    "PieceCounts",
    "count_all",
    "count_captures",
    "count_moves",
    # Notation
    "BoardSetup",
    "format_counts",
    "format_error",
    "parse_board_text",
]

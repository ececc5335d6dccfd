"""Tests for the sliding-piece ray scanner."""

from collections.abc import Callable

from chessmoves.core.board import Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position
from chessmoves.core.rays import (
    DIAGONAL_DIRS,
    ORTHOGONAL_DIRS,
    BlockedRay,
    EmptyRay,
    edge_distance,
    scan_diagonals,
    scan_orthogonals,
)

PlaceFn = Callable[[PieceType, Color, int, int], Piece]


class TestEdgeDistance:
    def test_orthogonal(self) -> None:
        origin = Position(3, 6)
        assert [edge_distance(origin, d, 8) for d in ORTHOGONAL_DIRS] == [5, 2, 2, 5]

    def test_diagonal_takes_nearer_edge(self) -> None:
        origin = Position(3, 6)
        assert [edge_distance(origin, d, 8) for d in DIAGONAL_DIRS] == [2, 5, 2, 2]

    def test_corner(self) -> None:
        origin = Position(1, 1)
        assert [edge_distance(origin, d, 8) for d in DIAGONAL_DIRS] == [7, 0, 0, 0]


class TestScanOrthogonals:
    def test_empty_board(self, place: PlaceFn, board: Board) -> None:
        rook = place(PieceType.ROOK, Color.WHITE, 2, 7)
        assert scan_orthogonals(rook, board) == (
            EmptyRay(6),
            EmptyRay(1),
            EmptyRay(1),
            EmptyRay(6),
        )

    def test_blocked_by_both_colors(self, place: PlaceFn, board: Board) -> None:
        rook = place(PieceType.ROOK, Color.WHITE, 4, 4)
        place(PieceType.PAWN, Color.BLACK, 7, 4)
        place(PieceType.PAWN, Color.WHITE, 4, 2)
        states = scan_orthogonals(rook, board)
        assert states[0] == BlockedRay(Position(7, 4), same_color=False)
        assert states[1] == EmptyRay(3)
        assert states[2] == EmptyRay(4)
        assert states[3] == BlockedRay(Position(4, 2), same_color=True)

    def test_nearest_wins_regardless_of_order(self, place: PlaceFn, board: Board) -> None:
        rook = place(PieceType.ROOK, Color.BLACK, 1, 1)
        place(PieceType.KNIGHT, Color.WHITE, 1, 6)
        place(PieceType.BISHOP, Color.BLACK, 1, 3)
        place(PieceType.QUEEN, Color.WHITE, 1, 5)
        assert scan_orthogonals(rook, board)[2] == BlockedRay(Position(1, 3), True)

    def test_ignores_off_line_pieces(self, place: PlaceFn, board: Board) -> None:
        rook = place(PieceType.ROOK, Color.WHITE, 4, 4)
        place(PieceType.PAWN, Color.BLACK, 5, 5)
        place(PieceType.PAWN, Color.BLACK, 6, 5)
        assert all(isinstance(s, EmptyRay) for s in scan_orthogonals(rook, board))


class TestScanDiagonals:
    def test_empty_board(self, place: PlaceFn, board: Board) -> None:
        bishop = place(PieceType.BISHOP, Color.WHITE, 3, 2)
        assert scan_diagonals(bishop, board) == (
            EmptyRay(5),
            EmptyRay(1),
            EmptyRay(2),
            EmptyRay(1),
        )

    def test_blocked_on_each_diagonal(self, place: PlaceFn, board: Board) -> None:
        bishop = place(PieceType.BISHOP, Color.BLACK, 5, 5)
        place(PieceType.PAWN, Color.WHITE, 7, 7)
        place(PieceType.PAWN, Color.BLACK, 6, 4)
        place(PieceType.KING, Color.WHITE, 2, 8)
        place(PieceType.KING, Color.BLACK, 2, 2)
        assert scan_diagonals(bishop, board) == (
            BlockedRay(Position(7, 7), False),
            BlockedRay(Position(6, 4), True),
            BlockedRay(Position(2, 8), False),
            BlockedRay(Position(2, 2), True),
        )

    def test_knight_offset_is_not_on_diagonal(
        self, place: PlaceFn, board: Board
    ) -> None:
        bishop = place(PieceType.BISHOP, Color.WHITE, 4, 4)
        place(PieceType.PAWN, Color.BLACK, 6, 5)
        place(PieceType.PAWN, Color.BLACK, 5, 6)
        assert all(isinstance(s, EmptyRay) for s in scan_diagonals(bishop, board))

    def test_nearer_piece_replaces_farther(self, place: PlaceFn, board: Board) -> None:
        bishop = place(PieceType.BISHOP, Color.WHITE, 1, 1)
        place(PieceType.PAWN, Color.BLACK, 6, 6)
        place(PieceType.PAWN, Color.WHITE, 3, 3)
        place(PieceType.PAWN, Color.BLACK, 5, 5)
        assert scan_diagonals(bishop, board)[0] == BlockedRay(Position(3, 3), True)

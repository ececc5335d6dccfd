"""Board listing parsing and result serialisation.

Listing format::

    8                 <- board size
    3                 <- number of pieces
    King White 1 1    <- Name Color x y, one line per piece
    King Black 8 8
    Rook White 4 4

Validation stops at the first problem and raises the matching
:class:`~chessmoves.core.errors.ChessError`; no partially built board is
ever returned.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from chessmoves.core.board import MAX_BOARD_SIZE, MIN_BOARD_SIZE, Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.errors import (
    ChessError,
    InvalidBoardSizeError,
    InvalidGivenKingsError,
    InvalidInputError,
    InvalidNumberOfPiecesError,
    InvalidPiecePositionError,
)
from chessmoves.core.move_counter import PieceCounts
from chessmoves.core.notation.models import BoardSetup
from chessmoves.core.piece import Piece
from chessmoves.core.position import Position

_LOGGER = logging.getLogger(__name__)

MIN_PIECES = 2

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str | None, low: int, high: int, error: type[ChessError]) -> int:
    if text is None or not _INT_RE.fullmatch(text):
        raise error()
    try:
        value = int(text)
    except ValueError:
        # Digit strings beyond the interpreter's conversion limit.
        raise error() from None
    if not low <= value <= high:
        raise error()
    return value


def _split_lines(text: str) -> list[str]:
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    # A terminator after the last line does not open a new one.
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _parse_piece(line: str, board_size: int) -> Piece:
    tokens = line.rstrip(" ").split(" ")
    if len(tokens) != 4:
        raise InvalidInputError()
    name, color_name, x_text, y_text = tokens

    color = Color.from_name(color_name)
    x = _parse_int(x_text, 1, board_size, InvalidPiecePositionError)
    y = _parse_int(y_text, 1, board_size, InvalidPiecePositionError)
    piece_type = PieceType.from_name(name)
    return Piece(color, piece_type, Position(x, y))


def parse_board_text(
    text: str,
    *,
    min_board_size: int = MIN_BOARD_SIZE,
    max_board_size: int = MAX_BOARD_SIZE,
    min_pieces: int = MIN_PIECES,
) -> BoardSetup:
    """Parse and validate a board listing.

    Raises:
        ChessError: the first validation failure, in listing order.
    """
    lines = _split_lines(text)

    def line_at(idx: int) -> str | None:
        return lines[idx] if idx < len(lines) else None

    size = _parse_int(line_at(0), min_board_size, max_board_size, InvalidBoardSizeError)
    count = _parse_int(line_at(1), min_pieces, size * size, InvalidNumberOfPiecesError)
    _LOGGER.debug("Listing header: size=%d, pieces=%d", size, count)

    board = Board(size)
    pieces: list[Piece] = []
    kings: set[Color] = set()

    for idx in range(2, 2 + count):
        line = line_at(idx)
        if line is None:
            raise InvalidNumberOfPiecesError()
        piece = _parse_piece(line, size)
        if piece.piece_type == PieceType.KING:
            if piece.color in kings:
                raise InvalidGivenKingsError()
            kings.add(piece.color)
        board.add_piece(piece)
        pieces.append(piece)

    if len(lines) > 2 + count:
        raise InvalidNumberOfPiecesError()
    if len(kings) != len(Color):
        raise InvalidGivenKingsError()

    return BoardSetup(board, pieces)


def format_counts(counts: Iterable[PieceCounts]) -> str:
    """One ``moves captures`` line per piece."""
    return "".join(f"{c.moves} {c.captures}\n" for c in counts)


def format_error(error: ChessError) -> str:
    return f"{error}\n"

"""Notation package: board listing parsing and result serialisation."""

from chessmoves.core.notation.board_text import (
    MIN_PIECES,
    format_counts,
    format_error,
    parse_board_text,
)
from chessmoves.core.notation.models import BoardSetup

__all__ = [
    "MIN_PIECES",
    "BoardSetup",
    "format_counts",
    "format_error",
    "parse_board_text",
]

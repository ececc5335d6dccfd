"""Application settings."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from chessmoves.core.board import MAX_BOARD_SIZE, MIN_BOARD_SIZE
from chessmoves.core.notation import MIN_PIECES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Files
    input_path: Path = Path("input.txt")
    output_path: Path = Path("output.txt")

    # Logging (stderr only, never the output file)
    log_level: str = "WARNING"

    # Listing limits
    min_board_size: int = MIN_BOARD_SIZE
    max_board_size: int = MAX_BOARD_SIZE
    min_pieces: int = MIN_PIECES

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> AppSettings:
        return cls(
            input_path=Path(args.input),
            output_path=Path(args.output),
            log_level=args.log_level.upper(),
        )

"""Application entry point.

Usage:
    chessmoves
    chessmoves --input board.txt --output counts.txt --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys

from chessmoves.core.errors import ChessError, InvalidInputError
from chessmoves.core.move_counter import count_all
from chessmoves.core.notation import format_counts, format_error, parse_board_text
from chessmoves.settings import LOG_LEVELS, AppSettings

_LOGGER = logging.getLogger(__name__)


def count_listing(text: str, settings: AppSettings | None = None) -> str:
    """Turn a board listing into the output text: counts, or one error line."""
    settings = settings if settings is not None else AppSettings()
    try:
        setup = parse_board_text(
            text,
            min_board_size=settings.min_board_size,
            max_board_size=settings.max_board_size,
            min_pieces=settings.min_pieces,
        )
    except ChessError as exc:
        _LOGGER.warning("Rejected board listing: %s", exc)
        return format_error(exc)
    return format_counts(count_all(setup.board))


def _build_parser() -> argparse.ArgumentParser:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="chessmoves",
        description="Count possible moves and captures for every piece on a board",
    )
    parser.add_argument(
        "--input",
        "-i",
        default=str(defaults.input_path),
        help=f"Board listing to read (default: {defaults.input_path})",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=str(defaults.output_path),
        help=f"File to write the counts to (default: {defaults.output_path})",
    )
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        type=str.upper,
        choices=LOG_LEVELS,
        help=f"Diagnostics level on stderr (default: {defaults.log_level})",
    )
    return parser


def run(settings: AppSettings) -> int:
    """Read the listing, count, and write the result file."""
    try:
        text = settings.input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.warning("Cannot read %s: %s", settings.input_path, exc)
        output = format_error(InvalidInputError())
    else:
        output = count_listing(text, settings)

    try:
        settings.output_path.write_text(output, encoding="utf-8")
    except OSError:
        _LOGGER.exception("Cannot write %s", settings.output_path)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Launch the batch counter."""
    args = _build_parser().parse_args(argv)
    settings = AppSettings.from_args(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())

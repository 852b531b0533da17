"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from chessmate.config import AppSettings

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Build :class:`AppSettings` from command line flags."""
    defaults = AppSettings()
    parser = argparse.ArgumentParser(
        prog="chessmate",
        description="Two-player console chess with move validation.",
    )
    parser.add_argument(
        "--no-coordinates",
        dest="show_coordinates",
        action="store_false",
        help="hide rank and file labels",
    )
    parser.add_argument(
        "--unicode",
        dest="use_unicode",
        action="store_true",
        help="draw pieces with Unicode figurines",
    )
    parser.add_argument(
        "--no-banner",
        dest="show_banner",
        action="store_false",
        help="do not print the banner above the board",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=defaults.log_level,
        type=str.upper,
    )
    ns = parser.parse_args(argv)
    return AppSettings(
        show_coordinates=ns.show_coordinates,
        use_unicode=ns.use_unicode,
        show_banner=ns.show_banner,
        log_level=ns.log_level,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Launch the console game."""
    from chessmate.console.app import ConsoleGame

    settings = parse_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return ConsoleGame(settings).run()


if __name__ == "__main__":
    sys.exit(main())

"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from checkie.ui.settings import AppSettings
from checkie.ui.styles.theme import THEME_NAMES


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="checkie", description="Two-player checkers.")
    parser.add_argument("--theme", choices=THEME_NAMES, help="board colour scheme")
    parser.add_argument(
        "--flipped", action="store_true", help="show Black's side at the bottom"
    )
    parser.add_argument(
        "--no-legal-moves",
        action="store_true",
        help="do not mark legal targets of the picked-up piece",
    )
    parser.add_argument(
        "--log-level", help="logging level, e.g. DEBUG (default: WARNING)"
    )
    return parser


def settings_from_args(argv: list[str] | None = None) -> AppSettings:
    """Environment defaults, then command-line overrides."""
    args = _build_parser().parse_args(argv)
    settings = AppSettings.from_env()
    if args.theme:
        settings.board_theme = args.theme
    if args.flipped:
        settings.flipped = True
    if args.no_legal_moves:
        settings.show_legal_moves = False
    if args.log_level:
        settings.log_level = args.log_level.upper()
    return settings


def main() -> None:
    """Launch the Checkie application."""
    from checkie.ui.bootstrap import run_application

    settings = settings_from_args(sys.argv[1:])
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    sys.exit(run_application([sys.argv[0]], settings))


if __name__ == "__main__":
    main()

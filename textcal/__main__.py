"""Command-line entry for textcal.

Prints this month's calendar by default; see ``textcal --help`` for the
month/year selection and layout flags.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from . import __url__, __version__, _init_logging
from .config_loader import load_config
from .exceptions import TextcalError
from .logging_config import configure_logging
from .months import select_months
from .renderer import CalendarRenderer
from .settings import TextcalSettings, get_settings

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the textcal CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="textcal",
        description="Outputs a configurable monthly calendar as text or markup.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  textcal                       # This month
  textcal -m 2 -y 2016          # February 2016
  textcal -y 2016               # Every month of 2016
  textcal -S -w 1 -n 5          # Last, this and next month, Monday to Friday
  textcal -c html.yaml          # Layout and wrapping from a config file
        """,
    )
    parser.add_argument(
        "-m",
        "--month",
        type=int,
        metavar="N",
        help="Shows a calendar for given month in current year (1 = January)",
    )
    parser.add_argument(
        "-y",
        "--year",
        type=int,
        metavar="N",
        help="With -m, chooses the year; otherwise shows every month of given year",
    )
    parser.add_argument(
        "-S",
        "--show-surrounding",
        action="store_true",
        help="Also shows months before and after the specified month",
    )
    parser.add_argument(
        "-w",
        "--starting-weekday",
        type=int,
        metavar="N",
        help="Starts weeks on the given day (0 = Sunday)",
    )
    parser.add_argument(
        "-n",
        "--days-per-week",
        type=int,
        metavar="N",
        help="Sets the number of days per week to show",
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="Use FILE as the configuration file (default: TEXTCAL_CONFIG_FILE env var)",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Console log level: DEBUG, INFO, WARNING, ERROR (default: TEXTCAL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s version {__version__} ~ {__url__}",
        help="Shows the version",
    )
    return parser


def run(
    args: argparse.Namespace,
    today: Optional[date] = None,
    settings: Optional[TextcalSettings] = None,
) -> str:
    """Resolve configuration from parsed arguments and render the calendars.

    Raises:
        TextcalError: If the environment, config file or month selection is invalid
    """
    settings = settings or get_settings()
    today = today or date.today()

    config_path = args.config or settings.config_file
    overrides = {
        "start_day_of_week": args.starting_weekday,
        "days_per_week": args.days_per_week,
    }
    options = load_config(config_path, overrides=overrides)

    requests = select_months(
        today, month=args.month, year=args.year, surrounding=args.show_surrounding
    )
    return CalendarRenderer(options).render_many(requests, today=today)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the textcal CLI and return the exit status."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        debug = args.debug or settings.debug
        level = "DEBUG" if debug else (args.log_level or settings.effective_log_level)
        _init_logging(level)
        configure_logging(debug_mode=debug, level_name=level)

        output = run(args, settings=settings)
    except TextcalError as exc:
        logger.debug("Calendar rendering failed", exc_info=True)
        print(f"textcal: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

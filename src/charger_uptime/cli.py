"""Command-line driver.

Usage:
    charger-uptime <input file> [--log-level LEVEL]

Or:
    python -m charger_uptime <input file>

A path starting with ``-`` must follow ``--`` (``charger-uptime -- -in.txt``).
There is no ``--help``; any argument list other than one path is an error.

On success prints ``<station id> <uptime pct>`` per station, ascending by
station ID, and exits 0.  On any failure prints ``ERROR`` on stdout, the
reason on stderr, and exits 1.
"""

from __future__ import annotations

import argparse
import sys

from charger_uptime.config.settings import UptimeSettings
from charger_uptime.engine.output import format_results
from charger_uptime.engine.parser import load_file
from charger_uptime.engine.uptime import calculate_station_uptimes
from charger_uptime.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage problems the same way as input problems."""

    def error(self, message: str) -> None:
        raise _UsageError(message)


class _UsageError(Exception):
    pass


def _build_parser() -> _ArgumentParser:
    p = _ArgumentParser(
        prog="charger-uptime",
        description="Compute per-station uptime from charger availability reports",
        add_help=False,
    )
    p.add_argument("input_file", help="Path to the stations / availability reports file")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic verbosity on stderr",
    )
    return p


def _fail(message: str) -> int:
    print("ERROR")
    print(message, file=sys.stderr)
    return EXIT_ERROR


def run(input_file: str, settings: UptimeSettings) -> int:
    """Process one input file and print results.  Returns the exit status."""
    data, error = load_file(input_file, encoding=settings.encoding)
    if error is not None:
        return _fail(error.message)

    logger.debug(
        "Parsed %d stations and %d reports from %s",
        len(data.stations), len(data.availability_reports), input_file,
    )
    for line in format_results(calculate_station_uptimes(data)):
        print(line)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    try:
        args = _build_parser().parse_args(argv)
    except _UsageError:
        return _fail("Please provide a single input file path argument.")

    settings = UptimeSettings(log_level=args.log_level)
    configure_logging(settings.log_level)

    try:
        return run(args.input_file, settings)
    except Exception as exc:
        logger.debug("Unexpected failure", exc_info=True)
        return _fail(f"Error processing file: {exc}")


if __name__ == "__main__":
    sys.exit(main())

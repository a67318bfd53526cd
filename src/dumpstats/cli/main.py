"""
Command-line interface for the dumpstats heap dump summarizer.

Usage:
    dumpstats <heap dump> <word size>

The tool decodes the heap dump, then prints one line per class ordered by
memory footprint (largest first), followed by a blank line and a totals line:

    <class name>: <footprint in bytes> <instance count>
    ...

    total: <footprint in bytes> <instance count>

The report is written to stdout only after the whole dump has been decoded, so
a failing run never prints a partial report. Diagnostics go to stderr.
"""

import argparse
import logging
import sys
from typing import List, NoReturn, Optional

from ..decoding import decode_file
from ..reporting import write_report
from ..validation import (
    DecodeError,
    UsageError,
    ValidationError,
    handle_cli_error,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

PROG = "dumpstats"
USAGE = "%(prog)s <heap dump> <word size>"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def setup_logging() -> None:
    """Send diagnostics to stderr; stdout carries only the report."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage=USAGE,
        add_help=False,
        description=(
            "Summarize a VM heap dump: per-class memory footprint and instance "
            "count, largest first."
        ),
    )
    parser.add_argument(
        "heap_dump",
        metavar="heap-dump",
        help="Path to the binary heap dump file.",
    )
    parser.add_argument(
        "word_size",
        metavar="word-size",
        help="Byte width of one machine word on the system that produced the dump.",
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> None:
    """
    Main command-line interface for dumpstats.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Raises:
        SystemExit: With status 2 on a usage error, 1 on an invalid word size,
            an unreadable file, or a malformed dump.
    """
    setup_logging()
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    try:
        # Both arguments are positional, so a leading dash never marks an option
        args = parser.parse_args(["--", *argv])
    except UsageError as e:
        parser.print_usage(sys.stderr)
        handle_cli_error(
            error=e,
            context="argument parsing",
            exit_code=2,
            logger=logger,
        )

    try:
        word_size = validate_positive_integer(args.word_size, field_name="word size")
    except ValidationError as e:
        handle_cli_error(
            error=e,
            context="word size validation",
            exit_code=1,
            logger=logger,
        )

    try:
        records = decode_file(args.heap_dump)
    except DecodeError as e:
        handle_cli_error(
            error=e,
            context=f"decoding heap dump '{args.heap_dump}'",
            exit_code=1,
            logger=logger,
        )
    except OSError as e:
        handle_cli_error(
            error=e,
            context=f"reading heap dump '{args.heap_dump}'",
            exit_code=1,
            logger=logger,
        )

    write_report(records, word_size, stream=sys.stdout)


if __name__ == "__main__":
    main_cli()

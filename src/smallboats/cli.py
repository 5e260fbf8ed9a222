"""
Command line interface

Run like:

    smallboats --input-dir input_data --output-dir output_data
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from smallboats.exceptions import (
    InvalidCountError,
    InvalidGroupingError,
    InvalidRecordError,
    MissingOptionalDependencyError,
    SourceFileError,
)
from smallboats.io import process_directory
from smallboats.processor import SmallBoatsProcessor

logger = logging.getLogger(__name__)


def get_parser() -> argparse.ArgumentParser:
    """
    Get the argument parser
    """
    parser = argparse.ArgumentParser(
        prog="smallboats",
        description=(
            "Create daily, weekly, monthly and yearly tables of small boat arrivals "
            "from the Home Office's published daily time series."
        ),
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=Path("input_data"),
        help="Directory holding the source spreadsheet (default: %(default)s)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output_data"),
        help="Directory in which to write the CSVs (default: %(default)s)",
    )
    parser.add_argument(
        "--pattern",
        default="*.ods",
        help="Glob pattern the source spreadsheet must match (default: %(default)s)",
    )
    parser.add_argument(
        "--sheet",
        default="2",
        help=(
            "Sheet holding the daily data, zero-based index or name "
            "(default: %(default)s)"
        ),
    )
    parser.add_argument(
        "--no-checks",
        action="store_true",
        help="Skip the consistency checks on the output",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug messages"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only show warnings and errors"
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the command line interface

    Parameters
    ----------
    argv
        Arguments. If not supplied, we use `sys.argv`.

    Returns
    -------
    :
        Exit code
    """
    args = get_parser().parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level, format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    sheet: int | str = int(args.sheet) if args.sheet.isdigit() else args.sheet
    try:
        process_directory(
            input_dir=args.input_dir,
            output_dir=args.output_dir,
            pattern=args.pattern,
            sheet=sheet,
            processor=SmallBoatsProcessor(run_checks=not args.no_checks),
        )
    except (
        InvalidCountError,
        InvalidGroupingError,
        InvalidRecordError,
        MissingOptionalDependencyError,
        SourceFileError,
    ) as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

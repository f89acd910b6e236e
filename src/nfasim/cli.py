"""Command line interface."""

import argparse
import logging
import sys
from typing import List, Optional

from nfasim import __version__
from nfasim.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PRESET,
    DEFAULT_SEPARATOR,
    Config,
)
from nfasim.exceptions import InputFileError, NfasimError
from nfasim.printer import print_table
from nfasim.report import StreamReporter
from nfasim.runner import run_file
from nfasim.table import PRESETS

logger = logging.getLogger(__name__)

FILE_ERROR_MESSAGE = "File not found, is not readable or has no content"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nfasim",
        description="Run every token of a file through a non-deterministic finite automaton.",
    )
    parser.add_argument(
        "path", nargs="?", help="input file; prompted for when omitted"
    )
    parser.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=DEFAULT_PRESET,
        help="transition table to simulate (default: %(default)s)",
    )
    parser.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="token separator (default: %(default)s)",
    )
    parser.add_argument(
        "--no-table",
        dest="show_table",
        action="store_false",
        help="do not print the transition table",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def prompt_path() -> str:
    sys.stdout.write("Please enter file path: ")
    sys.stdout.flush()
    return sys.stdin.readline().strip()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)

    try:
        config = Config(
            preset=args.preset,
            separator=args.separator,
            show_table=args.show_table,
            log_level="DEBUG" if args.verbose else DEFAULT_LOG_LEVEL,
        )
    except NfasimError as e:
        sys.stderr.write(f"nfasim: {e}\n")
        return 1

    logging.basicConfig(
        level=config.logging_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config.show_table:
        print_table(config.table())

    path = args.path or prompt_path()
    try:
        run_file(path, config, StreamReporter())
    except InputFileError as e:
        logger.info("Cannot run %s", e)
        print(FILE_ERROR_MESSAGE)
        return 1
    except NfasimError as e:
        sys.stderr.write(f"nfasim: {e}\n")
        return 1
    return 0

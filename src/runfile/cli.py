"""Command-line interface for runfile."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from runfile.config import RunConfig
from runfile.errors import RunfileError, UsageError
from runfile.pipeline import run


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="runfile",
        description="Run a single Rust or Python file, inferring Rust crate dependencies.",
    )
    parser.add_argument(
        "filename",
        type=Path,
        help="Source file to run (.rs or .py)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError:
        sys.stderr.write(parser.format_usage())
        return 1

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("runfile").setLevel(logging.DEBUG)

    try:
        run(args.filename, RunConfig.from_env())
    except RunfileError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

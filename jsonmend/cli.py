"""
Command line interface for jsonmend.

Reads a file (or stdin), repairs it, and writes the result to stdout, to a
target file, or back to the input file.
"""

import argparse
import logging
import sys
from typing import Optional

from . import __version__
from .core.engine import repair
from .security.exceptions import JsonRepairError
from .utils.config import RepairOptions

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``jsonmend`` command."""
    parser = argparse.ArgumentParser(
        prog="jsonmend", description="Repair broken JSON files"
    )
    parser.add_argument(
        "filename",
        nargs="?",
        help="The JSON file to repair (if omitted, reads from stdin)",
    )
    parser.add_argument(
        "-i",
        "--inline",
        action="store_true",
        help="Replace the file inline instead of writing the output to stdout",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="TARGET",
        help="Write the output to TARGET instead of stdout",
    )
    parser.add_argument(
        "--ensure-ascii",
        "--ensure_ascii",
        dest="ensure_ascii",
        action="store_true",
        help="Escape non-ASCII characters in the output",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="Number of spaces for indentation, 0 for a single line (default 2)",
    )
    parser.add_argument(
        "--allow-nan",
        action="store_true",
        help="Write NaN and Infinity as is instead of null (not valid JSON)",
    )
    parser.add_argument(
        "--skip-validation",
        action="store_true",
        help="Always run the repair parser, even on valid JSON",
    )
    parser.add_argument(
        "--log-repairs",
        action="store_true",
        help="Log every repair made (shown with --verbose)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging on stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _read_input(filename: Optional[str]) -> str:
    if filename is None:
        return sys.stdin.read()
    with open(filename, encoding="utf-8") as fp:
        return fp.read()


def _write_output(target: Optional[str], text: str) -> None:
    if target is None:
        sys.stdout.write(text + "\n")
        return
    with open(target, "w", encoding="utf-8") as fp:
        fp.write(text + "\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line interface and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.inline and args.filename is None:
        parser.print_usage(sys.stderr)
        print("jsonmend: error: --inline requires a filename", file=sys.stderr)
        return EXIT_USAGE
    if args.indent < 0:
        parser.print_usage(sys.stderr)
        print("jsonmend: error: --indent must not be negative", file=sys.stderr)
        return EXIT_USAGE

    options = RepairOptions(
        skip_fast_path=args.skip_validation,
        ensure_ascii=args.ensure_ascii,
        allow_nan=args.allow_nan,
        log_repairs=args.log_repairs,
        indent=args.indent or None,
    )

    try:
        text = _read_input(args.filename)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"jsonmend: cannot read input: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    try:
        repaired = repair(text, options)
    except JsonRepairError as exc:
        print(f"jsonmend: {exc.summary()}", file=sys.stderr)
        return exc.exit_code

    target = args.filename if args.inline else args.output
    try:
        _write_output(target, repaired)
    except OSError as exc:
        print(f"jsonmend: cannot write output: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    if target is not None:
        logger.info("Output written to %s", target)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

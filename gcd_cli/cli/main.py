"""CLI entry point for gcd-cli.

Parses the numbers given on the command line, folds GCD over them and
prints the result. This is the only place that turns errors into messages
and exit statuses.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from gcd_cli import __version__
from gcd_cli.core.engine import compute
from gcd_cli.core.parser import parse_numbers
from gcd_cli.core.types import (
    CliOptions,
    GcdError,
    GcdResult,
    InvariantViolation,
)

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gcd",
        description="Print the greatest common divisor of unsigned 64-bit integers.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Two numbers
  gcd 14 15

  # Any number of arguments, folded left to right
  gcd 6 10 15

  # Show each fold step
  gcd --verbose 5610 57057
        """,
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        metavar="NUMBER",
        help="Base-10 integer between 0 and 18446744073709551615",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log parsing and each GCD step to stderr",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logging output",
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def configure_logging(options: CliOptions) -> None:
    """Point the package logger at stderr for this invocation."""
    root = logging.getLogger("gcd_cli")
    root.handlers = []
    root.propagate = False

    if options.quiet:
        root.setLevel(logging.CRITICAL + 1)
        return

    root.setLevel(logging.DEBUG if options.verbose else logging.WARNING)
    root.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
    )


def run(numbers: list[str]) -> GcdResult:
    """
    Parse the arguments and compute their GCD.

    Args:
        numbers: Command-line arguments without the program name

    Returns:
        The parsed numbers and their GCD

    Raises:
        GcdError: Any usage, parse or engine error
    """
    return compute(parse_numbers(numbers))


def parse_cli_args(
    parser: argparse.ArgumentParser, argv: list[str] | None = None
) -> argparse.Namespace:
    """Parse options mixed in among the numbers.

    Everything after the first ``--`` is a number, even if it starts with
    a dash. parse_intermixed_args drops a bare ``--``, so split on it here.
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    tail: list[str] = []
    if "--" in argv:
        split = argv.index("--")
        argv, tail = argv[:split], argv[split + 1:]

    args = parser.parse_intermixed_args(argv)
    args.numbers = list(args.numbers) + tail
    return args


def _report(console: Console, exc: GcdError) -> None:
    message = str(exc)
    if isinstance(exc, InvariantViolation):
        message = f"internal error: {message}"
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parse_cli_args(parser, argv)

    options = CliOptions(verbose=args.verbose, quiet=args.quiet)
    configure_logging(options)

    try:
        result = run(args.numbers)
    except GcdError as exc:
        logger.debug("%s, exiting with status %d", type(exc).__name__, exc.exit_code)
        _report(Console(stderr=True), exc)
        return exc.exit_code

    print(result)
    return 0


def entry_point() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()

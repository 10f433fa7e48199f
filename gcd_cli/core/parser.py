"""Argument parser: turns command-line strings into unsigned 64-bit integers."""

from __future__ import annotations

import logging
from typing import Iterable

from gcd_cli.core.types import U64_MAX, ParseError, UsageError

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_U64_MAX_DIGITS = len(str(U64_MAX))


def parse_number(text: str) -> int:
    """
    Parse a single argument as a base-10 unsigned 64-bit integer.

    Only ASCII digits are accepted: no surrounding whitespace, no sign,
    no underscores.

    Args:
        text: The raw argument

    Returns:
        The parsed value

    Raises:
        ParseError: If the text is empty, contains a non-digit, or
            does not fit in 64 bits
    """
    if not text:
        raise ParseError(text, "cannot parse integer from empty string")
    if not _DIGITS.issuperset(text):
        raise ParseError(text, "invalid digit found in string")

    # int() refuses very long digit strings, so bound the length first
    digits = text.lstrip("0") or "0"
    if len(digits) > _U64_MAX_DIGITS or int(digits) > U64_MAX:
        raise ParseError(text, "number too large to fit in target type")
    return int(digits)


def parse_numbers(args: Iterable[str]) -> list[int]:
    """
    Parse every argument in order, stopping at the first bad one.

    Args:
        args: Command-line arguments without the program name

    Returns:
        The parsed numbers, in order of appearance

    Raises:
        ParseError: On the first argument that fails to parse
        UsageError: If no arguments were given
    """
    numbers: list[int] = []
    for arg in args:
        numbers.append(parse_number(arg))

    if not numbers:
        raise UsageError()

    logger.debug("Parsed %d number(s): %s", len(numbers), numbers)
    return numbers

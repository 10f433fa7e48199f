"""Core type definitions for gcd-cli."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Largest value an unsigned 64-bit integer can hold
U64_MAX = 2**64 - 1

USAGE = "Usage: gcd NUMBER ..."


class GcdError(Exception):
    """Base class for every error the CLI reports to the user."""

    exit_code: int = 1


class UsageError(GcdError):
    """No numbers were supplied."""

    exit_code = 1

    def __init__(self, message: str = USAGE) -> None:
        super().__init__(message)


class ParseError(GcdError):
    """A command-line argument is not a base-10 unsigned 64-bit integer."""

    exit_code = 2

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f'error parsing argument "{argument}": {reason}')


class InvariantViolation(GcdError):
    """The engine was called with an operand it cannot handle.

    This is a contract failure, not an input error: it is reported as an
    internal error rather than with usage text.
    """

    exit_code = 101


class GcdResult(BaseModel):
    """Result of folding GCD over a number list."""

    numbers: list[int] = Field(min_length=1)
    gcd: int

    def __str__(self) -> str:
        """Format the result line printed on success."""
        return f"The greatest common divisor of {self.numbers} is {self.gcd}"


class CliOptions(BaseModel):
    """Runtime options collected from the command line."""

    verbose: bool = False
    quiet: bool = False

"""Core modules for gcd-cli.

Primary modules:
- parser: argument strings to unsigned 64-bit integers
- engine: pairwise Euclid and the fold over a list
- types: result model and error hierarchy
"""

from gcd_cli.core.engine import compute, gcd, gcd_all
from gcd_cli.core.parser import parse_number, parse_numbers
from gcd_cli.core.types import (
    U64_MAX,
    GcdError,
    GcdResult,
    InvariantViolation,
    ParseError,
    UsageError,
)

__all__ = [
    # Types
    "U64_MAX",
    "GcdError",
    "GcdResult",
    "InvariantViolation",
    "ParseError",
    "UsageError",
    # Operations
    "compute",
    "gcd",
    "gcd_all",
    "parse_number",
    "parse_numbers",
]

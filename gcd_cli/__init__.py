"""gcd-cli - greatest common divisor of unsigned 64-bit integers."""

from gcd_cli.core.engine import compute, gcd, gcd_all
from gcd_cli.core.types import GcdResult

__version__ = "0.1.0"

__all__ = [
    "GcdResult",
    "compute",
    "gcd",
    "gcd_all",
]

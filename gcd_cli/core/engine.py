"""GCD engine: pairwise Euclid and the left fold over a number list."""

from __future__ import annotations

import logging
from typing import Sequence

from gcd_cli.core.types import GcdResult, InvariantViolation, UsageError

logger = logging.getLogger(__name__)


def gcd(n: int, m: int) -> int:
    """Return the greatest common divisor of two non-zero integers.

    Raises:
        InvariantViolation: If either operand is zero
    """
    if n == 0 or m == 0:
        raise InvariantViolation(
            f"gcd requires non-zero operands, got n={n}, m={m}"
        )

    while m != 0:
        if m < n:
            n, m = m, n
        m = m % n
    return n


def gcd_all(numbers: Sequence[int]) -> int:
    """Fold ``gcd`` over the list from left to right."""
    if not numbers:
        raise UsageError()

    d = numbers[0]
    for m in numbers[1:]:
        d = gcd(d, m)
        logger.debug("gcd step with %d -> %d", m, d)
    return d


def compute(numbers: Sequence[int]) -> GcdResult:
    """Compute the GCD of ``numbers`` and package it with its inputs."""
    return GcdResult(numbers=list(numbers), gcd=gcd_all(numbers))

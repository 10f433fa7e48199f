"""CLI module for gcd-cli.

Provides the ``gcd`` command-line interface.
"""

from gcd_cli.cli.main import main

__all__ = ["main"]

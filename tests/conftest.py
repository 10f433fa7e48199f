"""Pytest configuration and fixtures for gcd-cli tests."""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from gcd_cli.cli.main import main


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo the logging setup done by each CLI invocation."""
    yield
    root = logging.getLogger("gcd_cli")
    root.handlers = []
    root.propagate = True
    root.setLevel(logging.NOTSET)


@pytest.fixture
def run_cli(capsys: pytest.CaptureFixture[str]):
    """Run the CLI and return (exit code, stdout, stderr)."""

    def _run(*argv: str) -> tuple[int, str, str]:
        code = main(list(argv))
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run

# topmark:header:start
#
#   project      : EnumExtender
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running EnumExtender in a controlled working directory.

The group callback discovers ``pyproject.toml`` / ``enumextender.toml`` in the
current directory, so `run_cli_in()` switches to ``tmp_path`` first. This keeps
the repository's own configuration out of the tests.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from enumextender.cli.exit_codes import ExitCode
from enumextender.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (Sequence[str]): CLI argument vector, e.g. ``["show", "HTTPStatus"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Restore root logger handlers replaced by the group callback's `setup_logging()`."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that a CLI invocation exited with `ExitCode.SUCCESS`."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that a CLI invocation exited with ``code``."""
    assert result.exit_code == code, result.output

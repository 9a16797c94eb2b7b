# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running ``lopx`` through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from linesorpixels.cli.exit_codes import ExitCode
from linesorpixels.cli.main import cli
from linesorpixels.config import logging

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI and restore test logging afterwards.

    The CLI reconfigures the root logger on every invocation; the suite's TRACE
    setup is reinstated once the command returns.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["parse", "12px"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv)
    finally:
        logging.setup_logging(level=logging.TRACE_LEVEL)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command rejected a value (code 65)."""
    assert result.exit_code == ExitCode.DATA_ERROR, result.output

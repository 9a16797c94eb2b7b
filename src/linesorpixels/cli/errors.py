# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : errors.py
#   file_relpath : src/linesorpixels/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the lopx CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. Click prints the message on stderr.
"""

from __future__ import annotations

import click

from linesorpixels.cli.exit_codes import ExitCode


class LopxError(click.ClickException):
    """Base class for all lopx CLI errors."""

    exit_code = ExitCode.FAILURE


class LopxUsageError(LopxError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LopxDataError(LopxError):
    """Error for values that are not valid line counts or pixel amounts."""

    exit_code = ExitCode.DATA_ERROR


class LopxFileNotFoundError(LopxError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LopxIOError(LopxError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class LopxConfigError(LopxError):
    """Error for malformed TOML documents."""

    exit_code = ExitCode.CONFIG_ERROR

# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : options.py
#   file_relpath : src/linesorpixels/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and option resolution helpers."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from linesorpixels.cli.errors import LopxUsageError

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Output formats of the `parse` and `check` commands (`toml` is `check` only)."""

    TEXT = "text"
    JSON = "json"
    TOML = "toml"


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the -v/-q counts.

    Returns:
        ``-1`` when quiet, ``0`` by default, otherwise the number of ``-v`` flags (max 2).

    Raises:
        LopxUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LopxUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (default 0)."""
    obj = ctx.find_root().obj
    if not isinstance(obj, dict):
        return 0
    return int(obj.get("verbosity_level", 0))

# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : version.py
#   file_relpath : src/linesorpixels/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``lopx version`` command.

Prints the LinesOrPixels version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from linesorpixels.constants import LOPX_VERSION


@click.command(
    name="version",
    help="Show the current version of LinesOrPixels.",
)
def version_command() -> None:
    """Show the current version of LinesOrPixels."""
    click.echo(LOPX_VERSION)

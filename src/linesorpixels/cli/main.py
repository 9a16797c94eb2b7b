# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : main.py
#   file_relpath : src/linesorpixels/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``lopx`` command.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read verbosity from there. Internal logging is configured from the
``LINESORPIXELS_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import click

from linesorpixels.cli.commands.check import check_command
from linesorpixels.cli.commands.parse import parse_command
from linesorpixels.cli.commands.version import version_command
from linesorpixels.cli.options import common_verbose_options, resolve_verbosity
from linesorpixels.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, color, logging) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    setup_logging(level=level_env)

    if no_color:
        ctx.color = False
    logger.debug("CLI state: %r", ctx.obj)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Parse and check lines-or-pixels values (e.g. 3, \"12px\").",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the lopx CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'lopx parse VALUE...' to decode values.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(parse_command)

cli.add_command(check_command)

cli.add_command(version_command)

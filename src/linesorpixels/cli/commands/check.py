# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : check.py
#   file_relpath : src/linesorpixels/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``lopx check`` command.

Loads a TOML document and decodes the lines-or-pixels value stored at each
dotted ``--key`` (default ``scrolling.distance``). Valid values are printed as
``key = canonical`` (``--format text``), as a JSON report including the
diagnostics (``--format json``), or re-emitted as a canonical TOML document
(``--format toml``). Malformed values are reported as diagnostics and make the
command exit with ``DATA_ERROR``. Missing keys are only reported with ``-v``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from linesorpixels.cli.errors import (
    LopxConfigError,
    LopxDataError,
    LopxFileNotFoundError,
    LopxIOError,
    LopxUsageError,
)
from linesorpixels.cli.options import OutputFormat, get_effective_verbosity
from linesorpixels.config.io import (
    get_dotted_lines_or_pixels_value_checked,
    read_toml_dict,
    to_toml,
    values_to_table,
)
from linesorpixels.config.logging import get_logger
from linesorpixels.constants import DEFAULT_CHECK_KEY
from linesorpixels.core.codec import encode
from linesorpixels.diagnostic import DiagnosticLog

if TYPE_CHECKING:
    from linesorpixels.config.io import TomlTable
    from linesorpixels.config.logging import LopxLogger
    from linesorpixels.core.value import LinesOrPixels

logger: LopxLogger = get_logger(__name__)


def _load_document(path: Path) -> TomlTable:
    try:
        return read_toml_dict(path)
    except FileNotFoundError as exc:
        raise LopxFileNotFoundError(f"File not found: {path}") from exc
    except OSError as exc:
        raise LopxIOError(f"Cannot read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LopxConfigError(f"Invalid TOML in {path}: not valid UTF-8 ({exc})") from exc
    except TomlkitParseError as exc:
        raise LopxConfigError(f"Invalid TOML in {path}: {exc}") from exc


@click.command(
    name="check",
    help="Validate lines-or-pixels values stored in a TOML file.",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--key",
    "keys",
    multiple=True,
    default=(DEFAULT_CHECK_KEY,),
    show_default=True,
    help="Dotted key of a value to check. May be repeated.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format. 'toml' re-emits the valid values in canonical form.",
)
def check_command(*, path: Path, keys: tuple[str, ...], output_format: str) -> None:
    """Check the values stored at ``keys`` in the TOML file at ``path``.

    Args:
        path (Path): TOML document to read.
        keys (tuple[str, ...]): Dotted keys to decode.
        output_format (str): ``text``, ``json`` or ``toml``.

    Raises:
        LopxUsageError: If a key is not a valid dotted key.
        LopxDataError: If any value is malformed.
    """
    ctx = click.get_current_context()
    vlevel: int = get_effective_verbosity(ctx)
    fmt = OutputFormat(output_format)

    document: TomlTable = _load_document(path)
    diagnostics = DiagnosticLog()
    values: dict[str, LinesOrPixels] = {}

    for key in keys:
        try:
            value: LinesOrPixels | None = get_dotted_lines_or_pixels_value_checked(
                document,
                key,
                diagnostics=diagnostics,
                logger=logger,
            )
        except ValueError as exc:
            raise LopxUsageError(str(exc)) from exc
        if value is not None:
            values[key] = value

    rejected: int = len(diagnostics.rejected())
    logger.debug("Checked %d key(s) in %s, %d rejected", len(keys), path, rejected)

    if fmt is OutputFormat.JSON:
        payload: dict[str, Any] = {
            "path": str(path),
            "values": {key: encode(value) for key, value in values.items()},
            **diagnostics.summary(),
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        if fmt is OutputFormat.TOML:
            click.echo(to_toml(values_to_table(values)), nl=False)
        elif vlevel >= 0:
            for key, value in values.items():
                click.echo(f"{key} = {value.description}")
        for diag in diagnostics:
            if diag.level.rejects_value or vlevel >= 1:
                click.echo(diag.render(), err=True)

    if rejected:
        raise LopxDataError(f"{path}: {rejected} invalid value(s)")

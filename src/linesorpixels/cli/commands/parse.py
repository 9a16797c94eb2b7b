# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : parse.py
#   file_relpath : src/linesorpixels/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""``lopx parse`` command.

Decodes each VALUE argument and prints its canonical form, one per line, or a
JSON array describing every value (``--format json``). With ``-q`` only the
invalid values are reported. Invalid values are reported on stderr and make the
command exit with ``DATA_ERROR``.

Examples:
    ```bash
    lopx parse 3 12px 12.50px
    lopx parse --format json 3 12px
    ```
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from linesorpixels.cli.errors import LopxDataError
from linesorpixels.cli.options import OutputFormat, get_effective_verbosity
from linesorpixels.config.logging import get_logger
from linesorpixels.core.codec import encode, try_decode
from linesorpixels.core.value import Lines

if TYPE_CHECKING:
    from linesorpixels.core.codec import DecodeResult

logger = get_logger(__name__)


def result_to_dict(raw: str, result: DecodeResult) -> dict[str, Any]:
    """Return a JSON-friendly description of a decode result.

    Successful results carry ``kind`` (``"lines"`` or ``"pixels"``), ``value``
    (canonical text) and ``encoded`` (serialized form); failures carry ``error``.
    """
    if result.value is None:
        return {"input": raw, "error": str(result.error)}
    kind: str = "lines" if isinstance(result.value, Lines) else "pixels"
    return {
        "input": raw,
        "kind": kind,
        "value": result.value.description,
        "encoded": encode(result.value),
    }


@click.command(
    name="parse",
    help="Decode VALUES (e.g. 3, 12px, 12.5px) and print their canonical form.",
)
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([OutputFormat.TEXT.value, OutputFormat.JSON.value]),
    default=OutputFormat.TEXT.value,
    show_default=True,
    help="Output format.",
)
def parse_command(*, values: tuple[str, ...], output_format: str) -> None:
    """Decode values given on the command line.

    Args:
        values (tuple[str, ...]): Raw values to decode.
        output_format (str): ``text`` or ``json``.

    Raises:
        LopxDataError: If any value is invalid.
    """
    ctx = click.get_current_context()
    vlevel: int = get_effective_verbosity(ctx)
    fmt = OutputFormat(output_format)

    results: list[tuple[str, DecodeResult]] = [(raw, try_decode(raw)) for raw in values]
    failed: int = sum(1 for _, r in results if not r.ok)
    logger.debug("Decoded %d value(s), %d invalid", len(results), failed)

    if fmt is OutputFormat.JSON:
        click.echo(json.dumps([result_to_dict(raw, r) for raw, r in results], indent=2))
    else:
        for raw, result in results:
            if result.value is None:
                click.echo(f"{raw!r}: {result.error}", err=True)
            elif vlevel >= 0:
                line: str = result.value.description
                if vlevel > 0:
                    line = f"{raw} -> {line} ({type(result.value).__name__})"
                click.echo(line)

    if failed:
        raise LopxDataError(f"{failed} invalid value(s)")

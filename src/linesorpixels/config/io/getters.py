# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : getters.py
#   file_relpath : src/linesorpixels/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lines-or-pixels getters and setters for TOML config tables.

Two families of getters exist:
- *Unchecked* getters: return defaults and only emit **debug** logs.
- *Checked* getters: decode the value and, when it is malformed, log a warning
  and record a diagnostic in a `DiagnosticLog` instead of raising.

The checked getters are used when reading config files so that user mistakes are
surfaced without crashing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from linesorpixels.config.logging import get_logger
from linesorpixels.core.codec import encode, try_decode
from linesorpixels.core.errors import DecodeTypeError

from .guards import get_table_path_value, split_dotted_key

if TYPE_CHECKING:
    from linesorpixels.config.logging import LopxLogger
    from linesorpixels.core.codec import DecodeResult, Encoded
    from linesorpixels.core.value import LinesOrPixels
    from linesorpixels.diagnostic.model import DiagnosticLog

    from .types import TomlTable

logger: LopxLogger = get_logger(__name__)


def get_lines_or_pixels_value(
    table: TomlTable,
    key: str,
    default: LinesOrPixels | None = None,
) -> LinesOrPixels | None:
    """Extract a lines-or-pixels value from a TOML table.

    When the key is missing or the value cannot be decoded, ``default`` is returned.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        default (LinesOrPixels | None): Value returned when the key is missing or malformed.

    Returns:
        LinesOrPixels | None: The decoded value, or ``default``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return default
    result: DecodeResult = try_decode(value)
    if result.value is not None:
        return result.value
    logger.debug(
        "Cannot decode %r as lines or pixels (%s), returning default (%s)",
        value,
        result.error,
        default,
    )
    return default


def get_lines_or_pixels_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
    logger: LopxLogger,
) -> LinesOrPixels | None:
    """Return a lines-or-pixels value, recording a diagnostic when it is malformed.

    Behavior:
        - Missing key -> None, no diagnostic.
        - Neither integer nor string (including ``bool``) -> warning + None.
        - Malformed string (``InvalidValue``/``UnknownUnit``) -> error + None.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[scrolling]").
        diagnostics (DiagnosticLog): Log receiving warnings and errors.
        logger (LopxLogger): Logger for emitting warnings.

    Returns:
        LinesOrPixels | None: The decoded value, or ``None``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    result: DecodeResult = try_decode(value)
    if result.value is not None:
        return result.value

    loc: Final[str] = f"{where}.{key}"
    if isinstance(result.error, DecodeTypeError):
        logger.warning(
            "Expected integer or string in %s, got %s: %r",
            loc,
            type(value).__name__,
            value,
        )
        diagnostics.add_warning(
            loc,
            f"Expected integer or string in {loc}, got {type(value).__name__}: {value!r}",
        )
        return None

    logger.warning("Invalid value for %s: %r (%s)", loc, value, result.error)
    diagnostics.add_error(loc, f"Invalid value for {loc}: {value!r} ({result.error})")
    return None


def get_dotted_lines_or_pixels_value_checked(
    table: TomlTable,
    dotted_key: str,
    *,
    diagnostics: DiagnosticLog,
    logger: LopxLogger,
) -> LinesOrPixels | None:
    """Resolve a dotted key (``"scrolling.distance"``) and decode its value.

    A missing table or key is recorded as an ``info`` diagnostic and yields ``None``.

    Raises:
        ValueError: If ``dotted_key`` is not a valid dotted key.
    """
    path, key = split_dotted_key(dotted_key)
    where: str = f"[{'.'.join(path)}]" if path else "[]"

    parent: TomlTable | None = get_table_path_value(table, path)
    if parent is None or key not in parent:
        logger.debug("Key %s is not set", dotted_key)
        diagnostics.add_info(f"{where}.{key}", f"{dotted_key} is not set")
        return None

    return get_lines_or_pixels_value_checked(
        parent,
        key,
        where=where,
        diagnostics=diagnostics,
        logger=logger,
    )


def set_lines_or_pixels_value(table: TomlTable, key: str, value: LinesOrPixels) -> None:
    """Store the serialized form of ``value`` under ``key``.

    Line counts are stored as TOML integers, pixel amounts as ``"<n>px"`` strings.
    """
    encoded: Encoded = encode(value)
    logger.trace("Setting %s = %r", key, encoded)
    table[key] = encoded

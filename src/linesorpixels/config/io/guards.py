# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : guards.py
#   file_relpath : src/linesorpixels/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards and table navigation helpers for TOML parsing.

Documents are unwrapped to plain ``dict`` structures before they reach these
helpers, so a TOML table is a ``dict[str, Any]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

from linesorpixels.config.logging import get_logger

if TYPE_CHECKING:
    from linesorpixels.config.logging import LopxLogger

    from .types import TomlTable


logger: LopxLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.
    """
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def split_dotted_key(dotted: str) -> tuple[list[str], str]:
    """Split a dotted key into its table path and leaf key.

    Args:
        dotted (str): Key such as ``"scrolling.distance"``.

    Returns:
        tuple[list[str], str]: ``(["scrolling"], "distance")``.

    Raises:
        ValueError: If ``dotted`` is empty or contains an empty segment.
    """
    parts: list[str] = dotted.split(".")
    if any(not p for p in parts):
        raise ValueError(f"Invalid dotted key: {dotted!r}")
    return parts[:-1], parts[-1]


def get_table_path_value(table: TomlTable, path: list[str]) -> TomlTable | None:
    """Walk nested tables following ``path``.

    Args:
        table (TomlTable): Root table.
        path (list[str]): Sub-table names, outermost first.

    Returns:
        TomlTable | None: The nested table, or ``None`` when a segment is missing
            or is not a table.
    """
    current: TomlTable = table
    for segment in path:
        value: Any | None = current.get(segment)
        if not is_toml_table(value):
            logger.debug("No table at %r (segment %r is %r)", ".".join(path), segment, value)
            return None
        current = value
    return current

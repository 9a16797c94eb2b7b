# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : render.py
#   file_relpath : src/linesorpixels/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render lines-or-pixels values back to TOML.

Values are stored in their serialized form (integers for lines, ``"<n>px"``
strings for pixels) under nested tables built from their dotted keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit

from linesorpixels.config.logging import get_logger

from .getters import set_lines_or_pixels_value
from .guards import split_dotted_key

if TYPE_CHECKING:
    from collections.abc import Mapping

    from linesorpixels.config.logging import LopxLogger
    from linesorpixels.core.value import LinesOrPixels

    from .types import TomlTable

logger: LopxLogger = get_logger(__name__)


def values_to_table(values: Mapping[str, LinesOrPixels]) -> TomlTable:
    """Build a nested TOML table holding ``values`` under their dotted keys.

    Args:
        values (Mapping[str, LinesOrPixels]): Values keyed by dotted key
            (e.g. ``"scrolling.distance"``).

    Returns:
        TomlTable: ``{"scrolling": {"distance": "12.5px"}}`` and so on.

    Raises:
        ValueError: If a key is not a valid dotted key, or if it descends into a
            key that already holds a value.
    """
    root: TomlTable = {}
    for dotted_key, value in values.items():
        path, key = split_dotted_key(dotted_key)
        table: TomlTable = root
        for segment in path:
            child: Any = table.setdefault(segment, {})
            if not isinstance(child, dict):
                raise ValueError(f"Cannot nest {dotted_key!r} under the value at {segment!r}")
            table = cast("TomlTable", child)
        set_lines_or_pixels_value(table, key, value)
    logger.debug("Built TOML table for %d value(s)", len(values))
    return root


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    return tomlkit.dumps(toml_dict)

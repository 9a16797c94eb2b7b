# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __init__.py
#   file_relpath : src/linesorpixels/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for lines-or-pixels configuration values.

TOML parsing/formatting:
    `tomlkit` is used for parsing and rendering.

    - `load_toml_dict()` / `read_toml_dict()` parse on-disk TOML and return plain dicts.
    - `values_to_table()` nests values under their dotted keys; `to_toml()` renders it.

Typical flow:
    1. Load a TOML document (``load_toml_dict``).
    2. Read values with the unchecked or checked getters.
    3. Store values with ``set_lines_or_pixels_value`` (or ``values_to_table``) and
       serialize with ``to_toml``.
"""

from __future__ import annotations

from .getters import (
    get_dotted_lines_or_pixels_value_checked,
    get_lines_or_pixels_value,
    get_lines_or_pixels_value_checked,
    set_lines_or_pixels_value,
)
from .guards import (
    get_table_path_value,
    get_table_value,
    is_toml_table,
    split_dotted_key,
)
from .loaders import load_toml_dict, parse_toml_text, read_toml_dict
from .render import to_toml, values_to_table
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "get_dotted_lines_or_pixels_value_checked",
    "get_lines_or_pixels_value",
    "get_lines_or_pixels_value_checked",
    "get_table_path_value",
    "get_table_value",
    "is_toml_table",
    "load_toml_dict",
    "parse_toml_text",
    "read_toml_dict",
    "set_lines_or_pixels_value",
    "split_dotted_key",
    "to_toml",
    "values_to_table",
]

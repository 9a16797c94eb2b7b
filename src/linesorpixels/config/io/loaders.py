# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : loaders.py
#   file_relpath : src/linesorpixels/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML documents containing lines-or-pixels values.

Parsing is done with `tomlkit` and returned as plain `dict` structures, so the
getters only ever see native ``int``/``str`` tokens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linesorpixels.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from linesorpixels.config.logging import LopxLogger

    from .types import TomlTable

logger: LopxLogger = get_logger(__name__)


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.

    Returns:
        TomlTable: The unwrapped document.

    Raises:
        TomlkitParseError: If ``text`` is not valid TOML.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def read_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file, propagating errors.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
        TomlkitParseError: If the file is not valid TOML.
    """
    logger.debug("Reading TOML from %s", path)
    text: str = path.read_text(encoding="utf-8")
    return parse_toml_text(text)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return read_toml_dict(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except UnicodeDecodeError as e:
        logger.error("TOML file %s is not valid UTF-8: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}

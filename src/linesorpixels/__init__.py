# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __init__.py
#   file_relpath : src/linesorpixels/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LinesOrPixels package.

A measurement expressed either as a number of lines (``3``) or as a pixel
length (``"12.5px"``), with a codec for configuration documents, TOML helpers
and a small CLI (``lopx``).
"""

from __future__ import annotations

from linesorpixels.core import (
    DecodeResult,
    DecodeTypeError,
    InvalidValueError,
    Lines,
    LinesOrPixels,
    LinesOrPixelsError,
    Pixels,
    UnknownUnitError,
    ValueErrorKind,
    decode,
    describe,
    encode,
    try_decode,
)

__all__ = [
    "DecodeResult",
    "DecodeTypeError",
    "InvalidValueError",
    "Lines",
    "LinesOrPixels",
    "LinesOrPixelsError",
    "Pixels",
    "UnknownUnitError",
    "ValueErrorKind",
    "decode",
    "describe",
    "encode",
    "try_decode",
]

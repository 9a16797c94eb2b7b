# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : __init__.py
#   file_relpath : src/linesorpixels/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core lines-or-pixels value type and codec.

This package is pure: it performs no I/O and does not log. Errors are returned
to the caller as typed exceptions or `DecodeResult` values.
"""

from __future__ import annotations

from linesorpixels.core.codec import (
    DecodeResult,
    Encoded,
    decode,
    encode,
    parse_text,
    try_decode,
)
from linesorpixels.core.errors import (
    DecodeTypeError,
    InvalidValueError,
    LinesOrPixelsError,
    UnknownUnitError,
    ValueErrorKind,
)
from linesorpixels.core.value import PX_UNIT, Lines, LinesOrPixels, Pixels, describe

__all__ = [
    "PX_UNIT",
    "DecodeResult",
    "DecodeTypeError",
    "Encoded",
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
    "parse_text",
    "try_decode",
]

# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : codec.py
#   file_relpath : src/linesorpixels/core/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode and encode lines-or-pixels values.

Serialized forms:
    - a native integer (``3``) is a line count;
    - a digit string (``"3"``) is a line count;
    - a decimal string with a ``px`` suffix (``"12.5px"``) is a pixel amount.

Decoding runs an ordered sequence of attempts (native integer, then text). Each
attempt returns a tagged outcome: a value, a `ValueErrorKind`, or ``None`` when
the attempt does not apply to the token's type. `try_decode` wraps the final
outcome in a `DecodeResult`; `decode` raises the contained error.

Encoding emits line counts as native integers and pixel amounts as strings
(``"<fixed-point>px"``), never as numbers.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Final, TypeAlias

from linesorpixels.core.errors import (
    DecodeTypeError,
    LinesOrPixelsError,
    ValueErrorKind,
    error_for_kind,
)
from linesorpixels.core.value import PX_UNIT, Lines, LinesOrPixels, Pixels

# Digits and dots, then an optional unit. Applied with fullmatch: no whitespace,
# no trailing newline.
VALUE_PATTERN: Final[re.Pattern[str]] = re.compile(r"([0-9.]+)(px)?")

# Outcome of a single decode attempt. ``None`` means "not applicable".
Attempt: TypeAlias = LinesOrPixels | ValueErrorKind | None

# Serialized form produced by `encode`.
Encoded: TypeAlias = int | str


def _parse_lines(number_text: str) -> Lines | None:
    try:
        return Lines(int(number_text, 10))
    except ValueError:
        return None


def _parse_pixels(number_text: str) -> Pixels | None:
    try:
        return Pixels(Decimal(number_text))
    except InvalidOperation:
        return None


# Unit suffix -> numeric parser. A unit the grammar accepts but this table
# lacks surfaces as UNKNOWN_UNIT.
UNIT_PARSERS: Final[Mapping[str, Callable[[str], LinesOrPixels | None]]] = {
    Lines.unit: _parse_lines,
    PX_UNIT: _parse_pixels,
}


def parse_text(text: str) -> LinesOrPixels | ValueErrorKind:
    """Parse the textual form of a lines-or-pixels value.

    Args:
        text (str): Candidate text such as ``"3"``, ``"12px"`` or ``"12.5px"``.

    Returns:
        LinesOrPixels | ValueErrorKind: The parsed value, or the error kind
            describing why ``text`` was rejected.
    """
    match: re.Match[str] | None = VALUE_PATTERN.fullmatch(text)
    if match is None:
        return ValueErrorKind.INVALID_VALUE

    number_text: str = match.group(1)
    unit_text: str = match.group(2) or ""

    parser: Callable[[str], LinesOrPixels | None] | None = UNIT_PARSERS.get(unit_text)
    if parser is None:
        return ValueErrorKind.UNKNOWN_UNIT

    value: LinesOrPixels | None = parser(number_text)
    if value is None:
        return ValueErrorKind.INVALID_VALUE
    return value


def _attempt_native(token: object) -> Attempt:
    # Note: bool is a subclass of int; exclude it.
    if isinstance(token, int) and not isinstance(token, bool):
        return Lines(token)
    return None


def _attempt_text(token: object) -> Attempt:
    if isinstance(token, str):
        return parse_text(token)
    return None


DECODE_ATTEMPTS: Final[tuple[Callable[[object], Attempt], ...]] = (
    _attempt_native,
    _attempt_text,
)


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding a single serialized token.

    Exactly one of ``value`` and ``error`` is set.

    Attributes:
        value (LinesOrPixels | None): The decoded value on success.
        error (LinesOrPixelsError | DecodeTypeError | None): The typed error on failure.
    """

    value: LinesOrPixels | None = None
    error: LinesOrPixelsError | DecodeTypeError | None = None

    @property
    def ok(self) -> bool:
        """Return True if decoding succeeded."""
        return self.error is None

    def unwrap(self) -> LinesOrPixels:
        """Return the decoded value or raise the decoding error.

        Raises:
            LinesOrPixelsError: When the token is malformed.
            DecodeTypeError: When the token is neither an integer nor a string.
        """
        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value


def try_decode(token: object) -> DecodeResult:
    """Decode a serialized token without raising.

    Args:
        token (object): A native integer or a string, as found in a parsed document.

    Returns:
        DecodeResult: The decoded value, or the error explaining the rejection.
    """
    for attempt in DECODE_ATTEMPTS:
        outcome: Attempt = attempt(token)
        if outcome is None:
            continue
        if isinstance(outcome, ValueErrorKind):
            return DecodeResult(error=error_for_kind(outcome, token))
        return DecodeResult(value=outcome)
    return DecodeResult(error=DecodeTypeError(token))


def decode(token: object) -> LinesOrPixels:
    """Decode a serialized token into a lines-or-pixels value.

    Args:
        token (object): A native integer or a string.

    Returns:
        LinesOrPixels: ``Lines`` for integers and digit strings, ``Pixels`` for
            ``"<decimal>px"`` strings.

    Raises:
        InvalidValueError: When the token is a string that is not well formed.
        UnknownUnitError: When the token carries an unsupported unit.
        DecodeTypeError: When the token is neither an integer nor a string.
    """
    return try_decode(token).unwrap()


def encode(value: LinesOrPixels) -> Encoded:
    """Encode a lines-or-pixels value into its serialized form.

    Args:
        value (LinesOrPixels): Value to encode.

    Returns:
        Encoded: ``int`` for ``Lines``, ``"<fixed-point>px"`` for ``Pixels``.
    """
    if isinstance(value, Lines):
        return value.count
    return value.description

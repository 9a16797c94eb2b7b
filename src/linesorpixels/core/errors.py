# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : errors.py
#   file_relpath : src/linesorpixels/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised while decoding lines-or-pixels values.

Two domain error kinds exist (`ValueErrorKind`):

- ``INVALID_VALUE``: the token does not match the accepted grammar, or its
  numeric part does not parse as the number type of its unit.
- ``UNKNOWN_UNIT``: a unit other than empty or ``px`` was extracted.

Tokens that are neither integers nor strings are a format-level mismatch and
raise `DecodeTypeError` instead.
"""

from __future__ import annotations

from enum import Enum


class ValueErrorKind(str, Enum):
    """Domain error kinds for lines-or-pixels values."""

    INVALID_VALUE = "invalid_value"
    UNKNOWN_UNIT = "unknown_unit"

    @property
    def message(self) -> str:
        """Return the user-facing message for this error kind."""
        return {
            ValueErrorKind.INVALID_VALUE: (
                "value must be a number or a string representing value and unit"
            ),
            ValueErrorKind.UNKNOWN_UNIT: 'unit must be empty or "px"',
        }[self]


class LinesOrPixelsError(ValueError):
    """Base class for domain errors raised when decoding a lines-or-pixels value.

    Attributes:
        kind (ValueErrorKind): Which domain error occurred.
        value (object): The offending input token.
    """

    kind: ValueErrorKind

    def __init__(self, value: object) -> None:
        super().__init__(self.kind.message)
        self.value: object = value


class InvalidValueError(LinesOrPixelsError):
    """The token is not a well-formed line count or pixel amount."""

    kind = ValueErrorKind.INVALID_VALUE


class UnknownUnitError(LinesOrPixelsError):
    """The token carries a unit other than empty or ``px``."""

    kind = ValueErrorKind.UNKNOWN_UNIT


class DecodeTypeError(TypeError):
    """The token is neither an integer nor a string.

    Attributes:
        value (object): The offending input token.
    """

    def __init__(self, value: object) -> None:
        super().__init__(f"expected an integer or a string, got {type(value).__name__}")
        self.value: object = value


def error_for_kind(kind: ValueErrorKind, value: object) -> LinesOrPixelsError:
    """Build the exception instance matching a domain error kind.

    Args:
        kind (ValueErrorKind): Error kind produced by a decode attempt.
        value (object): The offending input token.

    Returns:
        LinesOrPixelsError: `InvalidValueError` or `UnknownUnitError`.
    """
    if kind is ValueErrorKind.UNKNOWN_UNIT:
        return UnknownUnitError(value)
    return InvalidValueError(value)

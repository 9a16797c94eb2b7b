# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : test_codec.py
#   file_relpath : tests/core/test_codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for decoding and encoding lines-or-pixels values."""

from __future__ import annotations

import re
from decimal import Decimal

import pytest

from linesorpixels.core import codec
from linesorpixels.core.codec import decode, encode, parse_text, try_decode
from linesorpixels.core.errors import (
    DecodeTypeError,
    InvalidValueError,
    UnknownUnitError,
    ValueErrorKind,
)
from linesorpixels.core.value import Lines, Pixels


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        (3, Lines(3)),
        (0, Lines(0)),
        (-2, Lines(-2)),
        ("3", Lines(3)),
        ("007", Lines(7)),
        ("12px", Pixels(Decimal(12))),
        ("12.5px", Pixels(Decimal("12.5"))),
        ("12.px", Pixels(Decimal(12))),
        (".5px", Pixels(Decimal("0.5"))),
        ("0px", Pixels(Decimal(0))),
    ],
)
def test_decode_valid_tokens(token: object, expected: Lines | Pixels) -> None:
    """Integers and digit strings are lines; ``<decimal>px`` strings are pixels."""
    value = decode(token)
    assert value == expected
    assert type(value) is type(expected)


def test_decode_big_line_count() -> None:
    """Line counts are not limited to a machine word."""
    assert decode(str(10**30)) == Lines(10**30)


@pytest.mark.parametrize(
    "token",
    [
        "abc",
        "12mm",
        "1.2.3px",
        "1.5",
        ".px",
        "",
        "px",
        " 12px",
        "12px ",
        "12px\n",
        "12 px",
        "12PX",
        "-3",
        "+3",
        "1e3px",
        "١٢",
    ],
)
def test_decode_invalid_strings(token: str) -> None:
    """Malformed strings fail with InvalidValue."""
    with pytest.raises(InvalidValueError) as exc_info:
        decode(token)
    assert exc_info.value.value == token


@pytest.mark.parametrize("token", [True, False, 1.5, None, [3], {"value": 3}, Decimal(3)])
def test_decode_wrong_type(token: object) -> None:
    """Tokens that are neither integers nor strings are a type mismatch."""
    with pytest.raises(DecodeTypeError):
        decode(token)


def test_parse_text_returns_tagged_outcomes() -> None:
    """parse_text never raises; failures are returned as error kinds."""
    assert parse_text("4") == Lines(4)
    assert parse_text("4px") == Pixels(Decimal(4))
    assert parse_text("4.0") is ValueErrorKind.INVALID_VALUE
    assert parse_text("four") is ValueErrorKind.INVALID_VALUE


def test_try_decode_success_and_failure() -> None:
    """try_decode wraps exactly one of value or error."""
    ok = try_decode("12px")
    assert ok.ok
    assert ok.value == Pixels(Decimal(12))
    assert ok.error is None
    assert ok.unwrap() == Pixels(Decimal(12))

    bad = try_decode("12mm")
    assert not bad.ok
    assert bad.value is None
    assert isinstance(bad.error, InvalidValueError)
    with pytest.raises(InvalidValueError):
        bad.unwrap()

    wrong = try_decode(2.5)
    assert isinstance(wrong.error, DecodeTypeError)


def test_unknown_unit_is_reported_when_grammar_allows_more_units(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A unit accepted by the pattern but without a parser yields UnknownUnit."""
    monkeypatch.setattr(codec, "VALUE_PATTERN", re.compile(r"([0-9.]+)(px|mm)?"))

    assert parse_text("12mm") is ValueErrorKind.UNKNOWN_UNIT
    with pytest.raises(UnknownUnitError, match='unit must be empty or "px"'):
        decode("12mm")
    assert decode("12px") == Pixels(Decimal(12))


def test_encode_lines_as_native_int() -> None:
    """Line counts are emitted as ints, not strings."""
    encoded = encode(Lines(5))
    assert encoded == 5
    assert isinstance(encoded, int)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Pixels(Decimal(5)), "5px"),
        (Pixels(Decimal("12.5")), "12.5px"),
        (Pixels(Decimal("1E-8")), "0.00000001px"),
    ],
)
def test_encode_pixels_as_string(value: Pixels, expected: str) -> None:
    """Pixel amounts are emitted as strings with a ``px`` suffix."""
    assert encode(value) == expected


def test_native_int_takes_priority() -> None:
    """A native int decodes as lines regardless of the string path."""
    assert decode(12) == Lines(12)
    assert decode(encode(Lines(12))) == Lines(12)

# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : test_value.py
#   file_relpath : tests/core/test_value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Lines` / `Pixels` value types and their canonical text."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from linesorpixels.core.value import PX_UNIT, Lines, Pixels, describe


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Lines(3), "3"),
        (Lines(0), "0"),
        (Lines(-7), "-7"),
        (Pixels(Decimal("12")), "12px"),
        (Pixels(Decimal("12.5")), "12.5px"),
        (Pixels(Decimal("12.50")), "12.50px"),
        (Pixels(Decimal("0.5")), "0.5px"),
    ],
)
def test_description(value: Lines | Pixels, expected: str) -> None:
    """The canonical form is the number, with ``px`` appended for pixels."""
    assert value.description == expected
    assert describe(value) == expected
    assert str(value) == expected


def test_pixels_description_never_uses_exponent() -> None:
    """Small and large decimals render in fixed-point notation."""
    assert Pixels(Decimal("1E-8")).description == "0.00000001px"
    assert Pixels(Decimal("1E+2")).description == "100px"


def test_units() -> None:
    """Each variant exposes its unit suffix."""
    assert Lines.unit == ""
    assert Pixels.unit == PX_UNIT == "px"


def test_pixels_accepts_int_and_stores_decimal() -> None:
    """A plain int amount is converted to Decimal."""
    px = Pixels(5)  # type: ignore[arg-type]
    assert isinstance(px.amount, Decimal)
    assert px == Pixels(Decimal("5"))
    assert px.description == "5px"


@pytest.mark.parametrize("amount", [1.5, "12", True, None])
def test_pixels_rejects_non_decimal_amounts(amount: object) -> None:
    """Floats, strings and bools are not accepted as pixel amounts."""
    with pytest.raises(TypeError):
        Pixels(amount)  # type: ignore[arg-type]


@pytest.mark.parametrize("amount", ["NaN", "sNaN", "Infinity", "-Infinity"])
def test_pixels_rejects_non_finite_amounts(amount: str) -> None:
    """NaN and infinities have no canonical pixel text and are refused."""
    with pytest.raises(ValueError, match="finite"):
        Pixels(Decimal(amount))


@pytest.mark.parametrize("count", [True, False, 1.0, "3", Decimal(3)])
def test_lines_rejects_non_int_counts(count: object) -> None:
    """Only genuine ints are line counts."""
    with pytest.raises(TypeError):
        Lines(count)  # type: ignore[arg-type]


def test_equality_compares_variant_and_numeric_payload() -> None:
    """Trailing zeros do not matter, the variant does."""
    assert Pixels(Decimal("12.50")) == Pixels(Decimal("12.5"))
    assert hash(Pixels(Decimal("12.50"))) == hash(Pixels(Decimal("12.5")))
    assert Lines(12) != Pixels(Decimal(12))
    assert Lines(3) == Lines(3)
    assert len({Lines(1), Lines(1), Pixels(Decimal(1))}) == 2


def test_values_are_immutable() -> None:
    """Values cannot be modified after construction."""
    value = Lines(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.count = 4  # type: ignore[misc]

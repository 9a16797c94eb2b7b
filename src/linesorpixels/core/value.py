# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : value.py
#   file_relpath : src/linesorpixels/core/value.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lines-or-pixels measurement values.

A measurement is either a whole number of lines (`Lines`) or a pixel length
(`Pixels`). Both variants are immutable and hashable; equality compares the
variant and the numeric payload, so ``Pixels(Decimal("12.50"))`` equals
``Pixels(Decimal("12.5"))`` while ``Lines(12)`` never equals ``Pixels(Decimal(12))``.

Pixel amounts are held as `decimal.Decimal` so the precision written in a
configuration file survives a parse/format round trip.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, TypeAlias

PX_UNIT: str = "px"


@dataclass(frozen=True)
class Lines:
    """A measurement expressed as a count of lines.

    Attributes:
        count (int): Signed number of lines. No range is enforced.
    """

    unit: ClassVar[str] = ""

    count: int

    def __post_init__(self) -> None:
        # bool is a subclass of int; a flag is not a count.
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"Lines count must be an int, got {type(self.count).__name__}")

    @property
    def description(self) -> str:
        """Return the canonical textual form (the integer, without a suffix)."""
        return str(self.count)

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class Pixels:
    """A measurement expressed as a pixel length.

    Plain integers are accepted and converted to `Decimal`; floats are rejected
    because their binary representation would leak into the textual form.

    Attributes:
        amount (Decimal): Finite pixel length. No range is enforced.

    Raises:
        TypeError: If ``amount`` is neither a `Decimal` nor an ``int``.
        ValueError: If ``amount`` is ``NaN`` or infinite.
    """

    unit: ClassVar[str] = PX_UNIT

    amount: Decimal

    def __post_init__(self) -> None:
        amount: object = self.amount
        if isinstance(amount, int) and not isinstance(amount, bool):
            amount = Decimal(amount)
            object.__setattr__(self, "amount", amount)
        elif not isinstance(amount, Decimal):
            raise TypeError(
                f"Pixels amount must be a Decimal or an int, got {type(amount).__name__}"
            )
        # NaN and infinities have no fixed-point text form.
        if not amount.is_finite():
            raise ValueError(f"Pixels amount must be finite, got {amount}")

    @property
    def description(self) -> str:
        """Return the canonical textual form: fixed-point decimal followed by ``px``.

        Fixed-point formatting keeps exponents out of the output, e.g.
        ``Decimal("1E-8")`` renders as ``0.00000001px``.
        """
        return f"{self.amount:f}{self.unit}"

    def __str__(self) -> str:
        return self.description


LinesOrPixels: TypeAlias = Lines | Pixels


def describe(value: LinesOrPixels) -> str:
    """Return the canonical textual form of a lines-or-pixels value.

    Args:
        value (LinesOrPixels): Value to format.

    Returns:
        str: ``"3"`` for ``Lines(3)``, ``"12.5px"`` for ``Pixels(Decimal("12.5"))``.
    """
    return value.description

# topmark:header:start
#
#   project      : LinesOrPixels
#   file         : strategies_lopx.py
#   file_relpath : tests/strategies_lopx.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for lines-or-pixels values and their textual forms."""

from __future__ import annotations

from decimal import Decimal

from hypothesis import strategies as st

from linesorpixels.core.codec import VALUE_PATTERN
from linesorpixels.core.value import Lines, Pixels


def s_lines() -> st.SearchStrategy[Lines]:
    """Line counts, including negative ones (the type enforces no sign)."""
    return st.builds(Lines, st.integers())


def s_pixel_amounts() -> st.SearchStrategy[Decimal]:
    """Non-negative finite decimals with up to six fractional digits."""
    return st.decimals(
        min_value=0,
        max_value=Decimal("1e9"),
        allow_nan=False,
        allow_infinity=False,
        places=6,
    ).filter(lambda d: not d.is_signed())


def s_pixels() -> st.SearchStrategy[Pixels]:
    """Pixel values whose canonical form is accepted by the grammar."""
    return st.builds(Pixels, s_pixel_amounts())


def s_digit_strings() -> st.SearchStrategy[str]:
    """Strings of ASCII digits, as written for a line count."""
    return st.from_regex(r"[0-9]{1,18}", fullmatch=True)


def s_off_grammar_text() -> st.SearchStrategy[str]:
    """Arbitrary text that does not match the accepted grammar."""
    return st.text(max_size=16).filter(lambda s: VALUE_PATTERN.fullmatch(s) is None)

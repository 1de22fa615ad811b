# topmark:header:start
#
#   project      : NumStrKit
#   file         : strategies_numstrkit.py
#   file_relpath : tests/strategies_numstrkit.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for native number strings and decimal values."""

from __future__ import annotations

from hypothesis import strategies as st

from numstrkit.core.kernel import DecimalValue
from numstrkit.core.rounding import RoundingMode

DIGITS: str = "0123456789"

s_digits: st.SearchStrategy[str] = st.text(alphabet=DIGITS, min_size=1, max_size=18)
s_fraction: st.SearchStrategy[str] = st.text(alphabet=DIGITS, min_size=0, max_size=12)

#: Deterministic modes (RANDOMLY needs a coin and is tested separately).
DETERMINISTIC_MODES: tuple[RoundingMode, ...] = tuple(
    m for m in RoundingMode if m is not RoundingMode.RANDOMLY
)


@st.composite
def s_native_text(draw: st.DrawFn) -> str:
    """A valid native number string, possibly zero-padded and possibly ``-0``."""
    sign: str = draw(st.sampled_from(["", "-"]))
    integer: str = draw(s_digits)
    fraction: str = draw(s_fraction)
    return f"{sign}{integer}.{fraction}" if fraction else f"{sign}{integer}"


@st.composite
def s_decimal_value(draw: st.DrawFn) -> DecimalValue:
    """A normalized `DecimalValue`."""
    return DecimalValue.from_digits(
        draw(s_digits),
        draw(s_fraction),
        negative=draw(st.booleans()),
    )


s_target: st.SearchStrategy[int] = st.integers(min_value=0, max_value=14)
s_mode: st.SearchStrategy[RoundingMode] = st.sampled_from(DETERMINISTIC_MODES)

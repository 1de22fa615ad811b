# topmark:header:start
#
#   project      : NumStrKit
#   file         : test_kernel.py
#   file_relpath : tests/core/test_kernel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the decimal value kernel: native parsing, dirty extraction and formatting."""

from __future__ import annotations

from decimal import Decimal

import pytest

from numstrkit.core.errors import (
    EmptyInputError,
    InvalidSeparatorError,
    MalformedNumberStringError,
    NoNumericContentError,
    NumStrError,
)
from numstrkit.core.kernel import (
    DecimalValue,
    dirty_to_native,
    format_native,
    normalize_native,
    parse_dirty,
    parse_native,
)
from tests.conftest import parametrize

# ---------------------------------------------------------------------------
# parse_native / format_native
# ---------------------------------------------------------------------------


@parametrize(
    "text, integer_digits, fractional_digits, negative",
    [
        ("0", "0", "", False),
        ("42", "42", "", False),
        ("-42", "42", "", True),
        ("3.14", "3", "14", False),
        ("-0.5", "0", "5", True),
        ("007.50", "7", "50", False),
        ("1.000", "1", "000", False),
    ],
)
def test_parse_native_splits_digits(
    text: str, integer_digits: str, fractional_digits: str, negative: bool
) -> None:
    """Native strings split into integer digits, fractional digits and a sign."""
    value: DecimalValue = parse_native(text)
    assert value.integer_digits == integer_digits
    assert value.fractional_digits == fractional_digits
    assert value.is_negative is negative


@parametrize(
    "text, expected",
    [
        ("-007.50", "-7.50"),
        ("000", "0"),
        ("-0", "0"),
        ("-0.000", "0.000"),
        ("12.30", "12.30"),
    ],
)
def test_normalize_native(text: str, expected: str) -> None:
    """Leading zeros are dropped, fractional zeros kept, and zero is never negative."""
    assert normalize_native(text) == expected


@parametrize(
    "text",
    ["+1", "1.", ".5", "1,000", " 1", "1 ", "1e5", "--1", "1-", "abc", "1.2.3", "١٢"],
)
def test_parse_native_rejects_malformed(text: str) -> None:
    """Anything outside ``[-]digits[.digits]`` is malformed."""
    with pytest.raises(MalformedNumberStringError):
        parse_native(text)


def test_parse_native_rejects_empty() -> None:
    """The empty string raises EmptyInputError, a NumStrError and a ValueError."""
    with pytest.raises(EmptyInputError) as excinfo:
        parse_native("")
    assert isinstance(excinfo.value, NumStrError)
    assert isinstance(excinfo.value, ValueError)


def test_format_native_omits_empty_fraction_and_sign() -> None:
    """A whole positive value renders without ``.`` and without ``-``."""
    assert format_native(DecimalValue("12", "", False)) == "12"
    assert format_native(DecimalValue("12", "05", True)) == "-12.05"
    assert str(DecimalValue()) == "0"


# ---------------------------------------------------------------------------
# DecimalValue
# ---------------------------------------------------------------------------


def test_decimal_value_rejects_negative_zero() -> None:
    """Direct construction refuses a negative zero."""
    with pytest.raises(MalformedNumberStringError):
        DecimalValue("0", "00", True)


@parametrize(
    "integer_digits, fractional_digits",
    [("", ""), ("1a", ""), ("1", "x"), ("-1", "")],
)
def test_decimal_value_validates_digits(integer_digits: str, fractional_digits: str) -> None:
    """Digit strings must contain only ASCII digits (integer part non-empty)."""
    with pytest.raises(MalformedNumberStringError):
        DecimalValue(integer_digits, fractional_digits)


def test_from_digits_normalizes() -> None:
    """`from_digits` strips leading zeros and drops the sign of zero."""
    assert DecimalValue.from_digits("000123", "40") == DecimalValue("123", "40", False)
    assert DecimalValue.from_digits("", "", negative=True) == DecimalValue("0", "", False)
    assert DecimalValue.from_digits("0", "000", negative=True).is_negative is False


def test_from_int_and_from_decimal() -> None:
    """Python numbers convert losslessly, keeping the Decimal exponent."""
    assert format_native(DecimalValue.from_int(-305)) == "-305"
    assert format_native(DecimalValue.from_decimal(Decimal("1.50"))) == "1.50"
    assert format_native(DecimalValue.from_decimal(Decimal("-1E+2"))) == "-100"
    assert format_native(DecimalValue.from_decimal(Decimal("-0.00"))) == "0.00"
    with pytest.raises(MalformedNumberStringError):
        DecimalValue.from_decimal(Decimal("NaN"))


def test_queries_and_transformations() -> None:
    value: DecimalValue = parse_native("-12.340")
    assert value.integer_digit_count == 2
    assert value.fractional_digit_count == 3
    assert value.sign == -1
    assert parse_native("0.0").sign == 0
    assert format_native(value.negated()) == "12.340"
    assert format_native(value.abs()) == "12.340"
    assert value.to_decimal() == Decimal("-12.340")
    assert parse_native("0.0").negated().is_negative is False


# ---------------------------------------------------------------------------
# parse_dirty
# ---------------------------------------------------------------------------


def test_parse_dirty_european_currency() -> None:
    """Grouping dots and the euro sign are noise; the comma is the radix."""
    value: DecimalValue = parse_dirty("1.123.456,78 €", ",")
    assert value.integer_digits == "1123456"
    assert value.fractional_digits == "78"
    assert value.is_negative is False


@parametrize(
    "text, separator, expected",
    [
        ("$1,254.65", ".", "1254.65"),
        ("-123.45", ".", "-123.45"),
        ("123.45-", ".", "-123.45"),
        ("(1,234.50)", ".", "-1234.50"),
        ("( 42 )", ".", "-42"),
        ("1 234,5", ",", "1234.5"),
        ("EUR 1.234,5", ",", "1234.5"),
        ("12", "", "12"),
        ("1.5", "", "15"),
        ("1.5", ",", "15"),
        ("3 d 14 c", " d ", "3.14"),
        ("1.2.3", ".", "1.23"),
        ("00012.500", ".", "12.500"),
        ("-0.00", ".", "0.00"),
        ("answer: 42!", ".", "42"),
    ],
)
def test_parse_dirty_extracts(text: str, separator: str, expected: str) -> None:
    """Digits, the first separator and sign markers are kept; the rest is ignored."""
    assert dirty_to_native(text, separator) == expected


def test_parse_dirty_closing_paren_needs_opening_paren() -> None:
    """A ``)`` without a leading ``(`` does not mark the value negative."""
    assert dirty_to_native("42)") == "42"
    assert dirty_to_native("(42") == "42"


@parametrize(
    "text, expected",
    [
        ("2025-10-18", "20251018"),
        ("555-1234", "5551234"),
        ("- 12-34", "-1234"),
        ("12-34 -", "-1234"),
        ("12 - ", "-12"),
    ],
)
def test_parse_dirty_minus_between_digits_is_noise(text: str, expected: str) -> None:
    """Only a minus before the first digit or after the last one marks a negative value."""
    assert dirty_to_native(text) == expected


def test_parse_dirty_separator_before_digits() -> None:
    """A leading separator starts the fractional part right away."""
    assert dirty_to_native(".5") == "0.5"


def test_parse_dirty_no_digits() -> None:
    with pytest.raises(NoNumericContentError):
        parse_dirty("no numbers here")


def test_parse_dirty_empty() -> None:
    with pytest.raises(EmptyInputError):
        parse_dirty("")


@parametrize("separator", ["-", "(", ")", "1", "a-b"])
def test_parse_dirty_rejects_reserved_separator(separator: str) -> None:
    """Separators may not contain sign characters or digits."""
    with pytest.raises(InvalidSeparatorError):
        parse_dirty("12", separator)

# topmark:header:start
#
#   project      : NumStrKit
#   file         : kernel.py
#   file_relpath : src/numstrkit/core/kernel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decimal value kernel: parse and emit native number strings.

A `DecimalValue` holds a signed decimal number as two digit strings (integer
and fractional part) plus a sign flag. It is created by parsing:

- `parse_native`: the strict *native* format ``[-]digits[.digits]``;
- `parse_dirty`: tolerant extraction from locale-formatted or noisy text
  (``"$1,254.65"``, ``"1.000.000,00 €"``, ``"(123.45)"``, ``"123.45-"``);

and rendered back with `format_native`. The round-trip
``parse_native(format_native(v)) == v`` holds for every value built here.

Normalization rules applied by every constructor path:
    - redundant leading zeros of the integer part are dropped (``"007"`` -> ``"7"``);
    - an empty integer part becomes ``"0"``;
    - trailing fractional zeros are kept (they carry precision);
    - zero is never negative (``"-0.00"`` parses as ``0.00``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Final

from numstrkit.config.logging import get_logger
from numstrkit.constants import NATIVE_DECIMAL_SEPARATOR, NATIVE_NEGATIVE_SIGN
from numstrkit.core.errors import (
    EmptyInputError,
    InvalidSeparatorError,
    MalformedNumberStringError,
    NoNumericContentError,
)

if TYPE_CHECKING:
    from numstrkit.config.logging import NumstrLogger

logger: NumstrLogger = get_logger(__name__)

# Only ASCII digits: str.isdigit() would also accept e.g. superscripts.
_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

_NATIVE_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<sign>-)?(?P<int>[0-9]+)(?:\.(?P<frac>[0-9]+))?"
)

# Characters a decimal separator may never contain: they carry sign semantics.
FORBIDDEN_SEPARATOR_CHARS: Final[frozenset[str]] = frozenset("-()")


def _is_digit_string(s: str) -> bool:
    return all(ch in _DIGITS for ch in s)


@dataclass(frozen=True, slots=True)
class DecimalValue:
    """Immutable signed decimal number split into integer and fractional digits.

    Prefer the module-level constructors (`parse_native`, `parse_dirty`,
    `DecimalValue.from_digits`) over calling the class directly: they apply the
    normalization rules described in the module docstring. Direct construction
    validates the digit strings but does not normalize them.

    Attributes:
        integer_digits (str): Integer digits, most significant first. Never empty.
        fractional_digits (str): Fractional digits, most significant first; empty
            for whole numbers.
        is_negative (bool): Sign flag. Always False for a zero value.
    """

    integer_digits: str = "0"
    fractional_digits: str = ""
    is_negative: bool = False

    def __post_init__(self) -> None:
        if not self.integer_digits or not _is_digit_string(self.integer_digits):
            raise MalformedNumberStringError(
                f"Integer digits must be a non-empty string of 0-9, got {self.integer_digits!r}"
            )
        if not _is_digit_string(self.fractional_digits):
            raise MalformedNumberStringError(
                f"Fractional digits must contain only 0-9, got {self.fractional_digits!r}"
            )
        if self.is_negative and self.is_zero:
            raise MalformedNumberStringError("A zero value cannot be negative")

    # --- constructors ---

    @classmethod
    def from_digits(
        cls,
        integer_digits: str,
        fractional_digits: str = "",
        *,
        negative: bool = False,
    ) -> DecimalValue:
        """Build a normalized value from raw digit strings.

        This is the single digit-assembly path shared by `parse_native`,
        `parse_dirty` and the rounding engine.

        Args:
            integer_digits (str): Integer digits (may be empty or zero-padded).
            fractional_digits (str): Fractional digits (kept verbatim).
            negative (bool): Requested sign; ignored when the value is zero.

        Returns:
            DecimalValue: The normalized value.
        """
        int_part: str = integer_digits.lstrip("0") or "0"
        is_zero: bool = int_part == "0" and not fractional_digits.strip("0")
        return cls(
            integer_digits=int_part,
            fractional_digits=fractional_digits,
            is_negative=negative and not is_zero,
        )

    @classmethod
    def from_int(cls, value: int) -> DecimalValue:
        """Build a whole-number value from a Python ``int``."""
        return cls.from_digits(str(abs(value)), negative=value < 0)

    @classmethod
    def from_decimal(cls, value: Decimal) -> DecimalValue:
        """Build a value from a finite `decimal.Decimal`, preserving its exponent.

        ``Decimal("1.50")`` keeps two fractional digits; ``Decimal("1E+2")`` becomes ``100``.

        Raises:
            MalformedNumberStringError: If ``value`` is NaN or infinite.
        """
        if not value.is_finite():
            raise MalformedNumberStringError(f"Cannot represent non-finite Decimal {value!r}")
        text: str = format(value, "f")
        negative: bool = text.startswith(NATIVE_NEGATIVE_SIGN)
        text = text.lstrip(NATIVE_NEGATIVE_SIGN)
        int_part, _, frac_part = text.partition(NATIVE_DECIMAL_SEPARATOR)
        return cls.from_digits(int_part, frac_part, negative=negative)

    # --- queries ---

    @property
    def is_zero(self) -> bool:
        """True if every digit is zero."""
        return not self.integer_digits.strip("0") and not self.fractional_digits.strip("0")

    @property
    def integer_digit_count(self) -> int:
        """Number of integer digits."""
        return len(self.integer_digits)

    @property
    def fractional_digit_count(self) -> int:
        """Number of fractional digits."""
        return len(self.fractional_digits)

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        if self.is_zero:
            return 0
        return -1 if self.is_negative else 1

    # --- transformations ---

    def negated(self) -> DecimalValue:
        """Return the value with its sign flipped (zero stays non-negative)."""
        return DecimalValue.from_digits(
            self.integer_digits, self.fractional_digits, negative=not self.is_negative
        )

    def abs(self) -> DecimalValue:
        """Return the magnitude of this value."""
        return DecimalValue(self.integer_digits, self.fractional_digits, False)

    def to_decimal(self) -> Decimal:
        """Convert to `decimal.Decimal` without loss (fractional zeros are kept)."""
        return Decimal(format_native(self))

    def __str__(self) -> str:
        return format_native(self)


def parse_native(text: str) -> DecimalValue:
    """Parse a strict native number string ``[-]digits[.digits]``.

    Args:
        text (str): The candidate native number string. No whitespace, plus sign,
            grouping separators or trailing decimal point are accepted.

    Returns:
        DecimalValue: The parsed, normalized value.

    Raises:
        EmptyInputError: If ``text`` is empty.
        MalformedNumberStringError: If ``text`` is not a native number string.
    """
    if not text:
        raise EmptyInputError("native number string")
    m: re.Match[str] | None = _NATIVE_RE.fullmatch(text)
    if m is None:
        raise MalformedNumberStringError(
            f"Malformed native number string {text!r}: expected [-]digits[.digits]"
        )
    value = DecimalValue.from_digits(
        m.group("int"),
        m.group("frac") or "",
        negative=m.group("sign") is not None,
    )
    logger.trace("parse_native(%r) -> %r", text, value)
    return value


def validate_decimal_separator(decimal_separator: str) -> None:
    """Reject decimal separators containing sign characters (``-``, ``(``, ``)``) or digits.

    An empty separator is valid and means "integer value, no fractional part".

    Raises:
        InvalidSeparatorError: If the separator contains a forbidden character.
    """
    for ch in decimal_separator:
        if ch in FORBIDDEN_SEPARATOR_CHARS or ch in _DIGITS:
            raise InvalidSeparatorError(
                f"Invalid decimal separator {decimal_separator!r}: "
                f"character {ch!r} is not allowed ('-', '(', ')' and digits are reserved)"
            )


def parse_dirty(text: str, decimal_separator: str = NATIVE_DECIMAL_SEPARATOR) -> DecimalValue:
    """Extract a decimal value from a locale-formatted or noisy number string.

    The scan keeps digits and recognizes:
        - the first occurrence of ``decimal_separator`` as the integer/fraction
          boundary (later occurrences are treated as noise);
        - a leading or trailing minus sign (``-123.45``, ``123.45-``); a ``-``
          with digits on both sides is noise, so ``"2025-10-18"`` is positive;
        - accounting parentheses: ``(`` before the first digit and ``)`` after it.

    Every other character (grouping separators, currency symbols, whitespace,
    letters) is ignored.

    Args:
        text (str): The dirty number string, e.g. ``"1.123.456,78 €"``.
        decimal_separator (str): Radix separator used in ``text``; may be several
            characters long. Empty means the value is an integer.

    Returns:
        DecimalValue: The extracted, normalized value.

    Raises:
        EmptyInputError: If ``text`` is empty.
        InvalidSeparatorError: If ``decimal_separator`` contains ``-``, ``(``, ``)`` or a digit.
        NoNumericContentError: If ``text`` contains no digits.
    """
    if not text:
        raise EmptyInputError("dirty number string")
    validate_decimal_separator(decimal_separator)

    int_digits: list[str] = []
    frac_digits: list[str] = []
    target: list[str] = int_digits
    negative = False
    trailing_minus = False
    found_digit = False
    found_decimal_sep = False
    leading_paren = False
    sep_len: int = len(decimal_separator)

    i = 0
    n: int = len(text)
    while i < n:
        ch: str = text[i]
        if ch in _DIGITS:
            target.append(ch)
            found_digit = True
            trailing_minus = False
        elif ch == "-":
            if found_digit:
                trailing_minus = True
            else:
                negative = True
        elif ch == "(" and not found_digit:
            leading_paren = True
        elif ch == ")" and leading_paren and found_digit:
            negative = True
        elif sep_len and not found_decimal_sep and text.startswith(decimal_separator, i):
            found_decimal_sep = True
            target = frac_digits
            i += sep_len
            continue
        i += 1

    if not found_digit:
        raise NoNumericContentError(text)

    negative = negative or trailing_minus
    value = DecimalValue.from_digits("".join(int_digits), "".join(frac_digits), negative=negative)
    logger.trace("parse_dirty(%r, %r) -> %r", text, decimal_separator, value)
    return value


def format_native(value: DecimalValue) -> str:
    """Render a value as a native number string ``[-]intDigits[.fracDigits]``.

    The fractional part (and its ``.``) is omitted when there are no fractional
    digits; the ``-`` is omitted when the value is non-negative.
    """
    sign: str = NATIVE_NEGATIVE_SIGN if value.is_negative else ""
    if value.fractional_digits:
        return f"{sign}{value.integer_digits}{NATIVE_DECIMAL_SEPARATOR}{value.fractional_digits}"
    return f"{sign}{value.integer_digits}"


def normalize_native(text: str) -> str:
    """Return the normalized form of a native number string (e.g. ``"-007.50"`` -> ``"-7.50"``)."""
    return format_native(parse_native(text))


def dirty_to_native(text: str, decimal_separator: str = NATIVE_DECIMAL_SEPARATOR) -> str:
    """Convert a dirty number string into a native number string."""
    return format_native(parse_dirty(text, decimal_separator))

# topmark:header:start
#
#   project      : NumStrKit
#   file         : spec.py
#   file_relpath : src/numstrkit/formatting/spec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Number format specification.

A `NumberFormatSpec` describes how a `DecimalValue` is rendered for display:
separators, digit grouping, sign style, currency symbol, optional rounding and
the padding of the result inside a fixed-width number field.

The spec is an immutable value. It is validated on construction and raises
`FormatSpecError` when its settings contradict each other; use `evolve()` to
derive a modified copy (the copy is validated too).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from numstrkit.constants import NATIVE_DECIMAL_SEPARATOR, NO_FIELD_LENGTH
from numstrkit.core.enum_mixins import KeyedStrEnum
from numstrkit.core.errors import FormatSpecError
from numstrkit.core.kernel import FORBIDDEN_SEPARATOR_CHARS
from numstrkit.core.rounding import RoundingRequest
from numstrkit.formatting.grouping import IntegerGrouping


class NegativeStyle(KeyedStrEnum):
    """How negative values are marked."""

    LEADING_MINUS = ("leading_minus", "Leading minus (-1,234.50)", ("minus", "leading"))
    TRAILING_MINUS = ("trailing_minus", "Trailing minus (1,234.50-)", ("trailing",))
    PARENTHESES = ("parentheses", "Parentheses ((1,234.50))", ("parens", "accounting"))


class CurrencyPosition(KeyedStrEnum):
    """Where the currency symbol is placed relative to the digits."""

    LEADING = ("leading", "Before the number", ("before", "prefix"))
    TRAILING = ("trailing", "After the number", ("after", "suffix"))


class Justification(KeyedStrEnum):
    """Alignment of the number text inside a fixed-width field."""

    LEFT = ("left", "Left-justified", ("l",))
    RIGHT = ("right", "Right-justified", ("r",))
    CENTER = ("center", "Centered", ("centre", "c"))


@dataclass(frozen=True, slots=True)
class NumberFormatSpec:
    """Rendering settings for `format_number`.

    Attributes:
        decimal_separator (str): Radix separator placed between integer and
            fractional digits.
        integer_separator (str): Text inserted between integer digit groups.
        grouping (IntegerGrouping): Integer grouping scheme.
        negative_style (NegativeStyle): Marking of negative values.
        positive_sign (str): Text placed before positive non-zero values.
        currency_symbol (str): Currency symbol including any spacing (``" €"``);
            empty for plain numbers.
        currency_position (CurrencyPosition): Placement of ``currency_symbol``.
        rounding (RoundingRequest | None): Rounding applied before rendering.
        field_length (int): Width of the number field, or ``-1`` for none.
        justification (Justification): Alignment inside the number field.
    """

    decimal_separator: str = NATIVE_DECIMAL_SEPARATOR
    integer_separator: str = ","
    grouping: IntegerGrouping = IntegerGrouping.THOUSANDS
    negative_style: NegativeStyle = NegativeStyle.LEADING_MINUS
    positive_sign: str = ""
    currency_symbol: str = ""
    currency_position: CurrencyPosition = CurrencyPosition.LEADING
    rounding: RoundingRequest | None = field(default=None)
    field_length: int = NO_FIELD_LENGTH
    justification: Justification = Justification.RIGHT

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not self.decimal_separator:
            raise FormatSpecError("Decimal separator must not be empty")
        bad: set[str] = {
            ch for ch in self.decimal_separator if ch in FORBIDDEN_SEPARATOR_CHARS or ch.isdigit()
        }
        if bad:
            raise FormatSpecError(
                f"Decimal separator {self.decimal_separator!r} contains reserved "
                f"characters: {', '.join(sorted(bad))}"
            )
        if any(ch.isdigit() for ch in self.integer_separator):
            raise FormatSpecError(
                f"Integer separator {self.integer_separator!r} must not contain digits"
            )
        if (
            self.grouping is not IntegerGrouping.NONE
            and self.integer_separator == self.decimal_separator
        ):
            raise FormatSpecError(
                f"Integer separator and decimal separator are both {self.decimal_separator!r}"
            )
        if any(ch.isdigit() for ch in self.currency_symbol + self.positive_sign):
            raise FormatSpecError("Currency symbol and positive sign must not contain digits")
        if isinstance(self.field_length, bool) or not isinstance(self.field_length, int):
            raise FormatSpecError(f"Field length must be an integer, got {self.field_length!r}")
        if self.field_length != NO_FIELD_LENGTH and self.field_length < 1:
            raise FormatSpecError(
                f"Field length must be {NO_FIELD_LENGTH} (no field) or >= 1, "
                f"got {self.field_length}"
            )

    @property
    def has_currency(self) -> bool:
        """True if a currency symbol is configured."""
        return bool(self.currency_symbol)

    def evolve(self, **changes: Any) -> NumberFormatSpec:
        """Return a validated copy with ``changes`` applied."""
        return replace(self, **changes)

    def with_currency(
        self,
        symbol: str,
        position: CurrencyPosition = CurrencyPosition.LEADING,
    ) -> NumberFormatSpec:
        """Return a copy rendering ``symbol`` at ``position``."""
        return replace(self, currency_symbol=symbol, currency_position=position)

    def with_rounding(self, rounding: RoundingRequest | None) -> NumberFormatSpec:
        """Return a copy applying ``rounding`` before rendering (``None`` disables it)."""
        return replace(self, rounding=rounding)

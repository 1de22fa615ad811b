# topmark:header:start
#
#   project      : NumStrKit
#   file         : render.py
#   file_relpath : src/numstrkit/formatting/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render `DecimalValue` instances as display strings.

`format_number` applies a `NumberFormatSpec` in a fixed order:

1. optional rounding (`NumberFormatSpec.rounding`);
2. integer digit grouping;
3. decimal separator and fractional digits;
4. currency symbol;
5. sign (leading minus, trailing minus or parentheses; zero is never signed);
6. padding into the number field (never truncates).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from numstrkit.config.logging import get_logger
from numstrkit.constants import NATIVE_NEGATIVE_SIGN, NO_FIELD_LENGTH
from numstrkit.formatting.grouping import group_integer_digits
from numstrkit.formatting.spec import (
    CurrencyPosition,
    Justification,
    NegativeStyle,
    NumberFormatSpec,
)

if TYPE_CHECKING:
    from numstrkit.config.logging import NumstrLogger
    from numstrkit.core.kernel import DecimalValue

logger: NumstrLogger = get_logger(__name__)


def _apply_sign(body: str, value: DecimalValue, spec: NumberFormatSpec) -> str:
    if value.is_zero:
        return body
    if not value.is_negative:
        return f"{spec.positive_sign}{body}"
    if spec.negative_style is NegativeStyle.PARENTHESES:
        return f"({body})"
    if spec.negative_style is NegativeStyle.TRAILING_MINUS:
        return f"{body}{NATIVE_NEGATIVE_SIGN}"
    return f"{NATIVE_NEGATIVE_SIGN}{body}"


def justify(text: str, field_length: int, justification: Justification) -> str:
    """Pad ``text`` with spaces to ``field_length``.

    A ``field_length`` of ``-1`` or one shorter than ``text`` returns ``text``
    unchanged. Centering puts the odd extra space on the right.
    """
    if field_length == NO_FIELD_LENGTH or field_length <= len(text):
        return text
    if justification is Justification.LEFT:
        return text.ljust(field_length)
    if justification is Justification.CENTER:
        left: int = (field_length - len(text)) // 2
        return (" " * left + text).ljust(field_length)
    return text.rjust(field_length)


def format_number(value: DecimalValue, spec: NumberFormatSpec | None = None) -> str:
    """Render ``value`` for display according to ``spec``.

    Args:
        value (DecimalValue): The value to render.
        spec (NumberFormatSpec | None): Rendering settings; defaults to
            ``NumberFormatSpec()`` (US-style grouping, leading minus).

    Returns:
        str: The display string, e.g. ``"(1,234.50)"`` or ``"1.234,50 €"``.
    """
    if spec is None:
        spec = NumberFormatSpec()
    if spec.rounding is not None:
        value = spec.rounding.apply(value)

    body: str = group_integer_digits(value.integer_digits, spec.grouping, spec.integer_separator)
    if value.fractional_digits:
        body = f"{body}{spec.decimal_separator}{value.fractional_digits}"

    if spec.currency_symbol:
        if spec.currency_position is CurrencyPosition.TRAILING:
            body = f"{body}{spec.currency_symbol}"
        else:
            body = f"{spec.currency_symbol}{body}"

    text: str = justify(_apply_sign(body, value, spec), spec.field_length, spec.justification)
    logger.trace("format_number(%s) -> %r", value, text)
    return text

# topmark:header:start
#
#   project      : NumStrKit
#   file         : cultures.py
#   file_relpath : src/numstrkit/formatting/cultures.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Country-culture presets for number formatting and dirty parsing.

Each `CountryCulture` bundles identification data (name, ISO codes, currency)
with two ready-made format specs: one for signed numbers and one for currency
amounts. Presets are module-level constants; look them up by name or code with
`get_culture`.

Example:
    ```python
    de = get_culture("de")
    format_number(parse_for_culture("1.234,5 €", de), de.currency_spec)  # "1.234,50 €"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from numstrkit.core.enum_mixins import norm_token
from numstrkit.core.errors import UnknownCultureError
from numstrkit.core.kernel import parse_dirty
from numstrkit.core.rounding import RoundingMode, RoundingRequest
from numstrkit.formatting.grouping import IntegerGrouping
from numstrkit.formatting.spec import CurrencyPosition, NegativeStyle, NumberFormatSpec

if TYPE_CHECKING:
    from collections.abc import Mapping

    from numstrkit.core.kernel import DecimalValue


@dataclass(frozen=True, slots=True)
class CountryCulture:
    """Formatting conventions of one country.

    Attributes:
        name (str): Country name, e.g. ``"Germany"``.
        code2 (str): ISO 3166-1 alpha-2 code, e.g. ``"DE"``.
        code3 (str): ISO 3166-1 alpha-3 code, e.g. ``"DEU"``.
        currency_code (str): ISO 4217 currency code, e.g. ``"EUR"``.
        currency_name (str): Currency name, e.g. ``"Euro"``.
        currency_symbol (str): Bare currency symbol, e.g. ``"€"``.
        currency_decimal_digits (int): Fractional digits of currency amounts.
        number_spec (NumberFormatSpec): Format of signed numbers.
        currency_spec (NumberFormatSpec): Format of currency amounts (includes
            rounding to ``currency_decimal_digits``).
        aliases (tuple[str, ...]): Extra lookup tokens for `get_culture`.
    """

    name: str
    code2: str
    code3: str
    currency_code: str
    currency_name: str
    currency_symbol: str
    currency_decimal_digits: int
    number_spec: NumberFormatSpec
    currency_spec: NumberFormatSpec
    aliases: tuple[str, ...] = ()

    @property
    def decimal_separator(self) -> str:
        """Radix separator used by this culture."""
        return self.number_spec.decimal_separator

    def lookup_tokens(self) -> tuple[str, ...]:
        """Return every token `get_culture` matches for this culture."""
        return (self.name, self.code2, self.code3, *self.aliases)

    def spec(self, *, currency: bool = False) -> NumberFormatSpec:
        """Return the currency spec if ``currency`` is set, else the number spec."""
        return self.currency_spec if currency else self.number_spec


def _currency_rounding(digits: int) -> RoundingRequest:
    return RoundingRequest(RoundingMode.HALF_AWAY_FROM_ZERO, digits)


_US_NUMBER: Final[NumberFormatSpec] = NumberFormatSpec(
    decimal_separator=".",
    integer_separator=",",
    grouping=IntegerGrouping.THOUSANDS,
)

UNITED_STATES: Final[CountryCulture] = CountryCulture(
    name="United States",
    code2="US",
    code3="USA",
    currency_code="USD",
    currency_name="Dollar",
    currency_symbol="$",
    currency_decimal_digits=2,
    number_spec=_US_NUMBER,
    currency_spec=_US_NUMBER.evolve(
        currency_symbol="$",
        currency_position=CurrencyPosition.LEADING,
        negative_style=NegativeStyle.PARENTHESES,
        rounding=_currency_rounding(2),
    ),
    aliases=("United States of America", "America"),
)

UNITED_KINGDOM: Final[CountryCulture] = CountryCulture(
    name="United Kingdom",
    code2="GB",
    code3="GBR",
    currency_code="GBP",
    currency_name="Pound",
    currency_symbol="£",
    currency_decimal_digits=2,
    number_spec=_US_NUMBER,
    currency_spec=_US_NUMBER.evolve(
        currency_symbol="£",
        currency_position=CurrencyPosition.LEADING,
        rounding=_currency_rounding(2),
    ),
    aliases=("UK", "Great Britain", "Britain"),
)

_FRANCE_NUMBER: Final[NumberFormatSpec] = NumberFormatSpec(
    decimal_separator=",",
    integer_separator=" ",
    grouping=IntegerGrouping.THOUSANDS,
)

FRANCE: Final[CountryCulture] = CountryCulture(
    name="France",
    code2="FR",
    code3="FRA",
    currency_code="EUR",
    currency_name="Euro",
    currency_symbol="€",
    currency_decimal_digits=2,
    number_spec=_FRANCE_NUMBER,
    currency_spec=_FRANCE_NUMBER.evolve(
        currency_symbol=" €",
        currency_position=CurrencyPosition.TRAILING,
        rounding=_currency_rounding(2),
    ),
)

_GERMANY_NUMBER: Final[NumberFormatSpec] = NumberFormatSpec(
    decimal_separator=",",
    integer_separator=".",
    grouping=IntegerGrouping.THOUSANDS,
)

GERMANY: Final[CountryCulture] = CountryCulture(
    name="Germany",
    code2="DE",
    code3="DEU",
    currency_code="EUR",
    currency_name="Euro",
    currency_symbol="€",
    currency_decimal_digits=2,
    number_spec=_GERMANY_NUMBER,
    currency_spec=_GERMANY_NUMBER.evolve(
        currency_symbol=" €",
        currency_position=CurrencyPosition.TRAILING,
        rounding=_currency_rounding(2),
    ),
    aliases=("Deutschland",),
)

CULTURES: Final[tuple[CountryCulture, ...]] = (UNITED_STATES, UNITED_KINGDOM, FRANCE, GERMANY)


def _build_index(cultures: tuple[CountryCulture, ...]) -> Mapping[str, CountryCulture]:
    index: dict[str, CountryCulture] = {}
    for culture in cultures:
        for token in culture.lookup_tokens():
            index[norm_token(token)] = culture
    return MappingProxyType(index)


_INDEX: Final[Mapping[str, CountryCulture]] = _build_index(CULTURES)


def culture_names() -> tuple[str, ...]:
    """Return the two-letter codes of all presets, lowercased (``("us", "gb", "fr", "de")``)."""
    return tuple(c.code2.lower() for c in CULTURES)


def get_culture(token: str | CountryCulture) -> CountryCulture:
    """Resolve a culture preset by name, ISO code or alias.

    Matching ignores case, spaces, ``-`` and ``_`` (``"united-states"``,
    ``"US"`` and ``"usa"`` all resolve to `UNITED_STATES`).

    Raises:
        UnknownCultureError: If no preset matches ``token``.
    """
    if isinstance(token, CountryCulture):
        return token
    culture: CountryCulture | None = _INDEX.get(norm_token(token))
    if culture is None:
        raise UnknownCultureError(token, culture_names())
    return culture


def parse_for_culture(text: str, culture: str | CountryCulture) -> DecimalValue:
    """Parse a dirty number string using the decimal separator of ``culture``."""
    return parse_dirty(text, get_culture(culture).decimal_separator)

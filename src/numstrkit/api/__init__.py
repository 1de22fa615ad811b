# topmark:header:start
#
#   project      : NumStrKit
#   file         : __init__.py
#   file_relpath : src/numstrkit/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API: number strings in, number strings out.

This facade is the stable entry point for programmatic use. It wraps the
kernel, the rounding engine and the display formatter behind three functions:

- `to_native`: normalize a native or dirty number string;
- `round_number`: round a number string with a `RoundingMode`;
- `format_number_string`: render a number string for display, using a
  country culture and/or a configuration.

Errors propagate as `NumStrError` subclasses (input problems) or `ConfigError`
(invalid configuration).

Example:
    ```python
    from numstrkit.api import format_number_string, round_number, to_native

    to_native("$1,254.65", dirty=True)                 # "1254.65"
    round_number("-7.5", "half_up_with_neg_nums", 0)   # "-7"
    format_number_string("-1234.5", culture="us", currency=True)  # "($1,234.50)"
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from numstrkit.config.model import Config, ConfigError, MutableConfig
from numstrkit.constants import NATIVE_DECIMAL_SEPARATOR
from numstrkit.core.errors import NumStrError
from numstrkit.core.kernel import DecimalValue, format_native, parse_dirty, parse_native
from numstrkit.core.rounding import RoundingMode, RoundingRequest, round_value
from numstrkit.formatting.cultures import CountryCulture, get_culture
from numstrkit.formatting.render import format_number
from numstrkit.formatting.spec import NumberFormatSpec

if TYPE_CHECKING:
    from numstrkit.core.rounding import RandomSource


def parse_value(
    text: str,
    *,
    dirty: bool = False,
    decimal_separator: str = NATIVE_DECIMAL_SEPARATOR,
) -> DecimalValue:
    """Parse ``text`` strictly (native) or tolerantly (``dirty=True``)."""
    if dirty:
        return parse_dirty(text, decimal_separator)
    return parse_native(text)


def to_native(
    text: str,
    *,
    dirty: bool = False,
    decimal_separator: str = NATIVE_DECIMAL_SEPARATOR,
) -> str:
    """Return the normalized native form of ``text``.

    Args:
        text (str): A native number string, or a dirty one when ``dirty`` is set.
        dirty (bool): Use tolerant extraction (`parse_dirty`).
        decimal_separator (str): Decimal separator of dirty input.

    Returns:
        str: The native number string, e.g. ``"-1234.50"``.
    """
    return format_native(parse_value(text, dirty=dirty, decimal_separator=decimal_separator))


def round_number(
    text: str,
    mode: RoundingMode | str,
    digits: int,
    *,
    dirty: bool = False,
    decimal_separator: str = NATIVE_DECIMAL_SEPARATOR,
    rng: RandomSource | None = None,
) -> str:
    """Round a number string and return the native result.

    Raises:
        InvalidRoundingModeError: If ``mode`` is unknown.
        InvalidRoundingTargetError: If ``digits`` is negative.
    """
    value: DecimalValue = parse_value(text, dirty=dirty, decimal_separator=decimal_separator)
    return format_native(round_value(value, mode, digits, rng=rng))


def resolve_config(config: Config | Mapping[str, Any] | None) -> Config:
    """Turn ``config`` into a frozen `Config`.

    A mapping is taken in TOML shape (``{"format": {...}, "rounding": {...}}``)
    and layered on the runtime defaults. No files are discovered.

    Raises:
        ConfigError: If the resulting configuration is invalid.
    """
    if isinstance(config, Config):
        return config
    draft: MutableConfig = MutableConfig.from_defaults()
    if config is not None:
        draft = draft.merge_table(dict(config), source="<api>")
    return draft.freeze()


def format_number_string(
    text: str,
    *,
    culture: str | CountryCulture | None = None,
    currency: bool = False,
    config: Config | Mapping[str, Any] | None = None,
    dirty: bool = False,
) -> str:
    """Render a number string for display.

    Dirty input is parsed with the culture's decimal separator when ``culture``
    is given, else with the configured ``[parse].decimal_separator``. A culture
    given here takes precedence over the config's ``[format]`` settings.

    Args:
        text (str): Native (or, with ``dirty``, dirty) number string.
        culture (str | CountryCulture | None): Culture preset, e.g. ``"de"``.
        currency (bool): Use the culture's currency format.
        config (Config | Mapping[str, Any] | None): Configuration to apply.
        dirty (bool): Parse ``text`` tolerantly.

    Returns:
        str: The display string.
    """
    cfg: Config = resolve_config(config)
    if culture is not None:
        token: str = culture.code2 if isinstance(culture, CountryCulture) else culture
        cfg = cfg.thaw().apply_cli_args({"culture": token}).freeze()

    separator: str = cfg.parse_decimal_separator
    if cfg.culture is not None:
        separator = get_culture(cfg.culture).decimal_separator
    value: DecimalValue = parse_value(text, dirty=dirty, decimal_separator=separator)
    return format_number(value, cfg.format_spec(currency=currency))


__all__: list[str] = [
    "Config",
    "ConfigError",
    "CountryCulture",
    "DecimalValue",
    "NumStrError",
    "NumberFormatSpec",
    "RoundingMode",
    "RoundingRequest",
    "format_number_string",
    "parse_value",
    "resolve_config",
    "round_number",
    "to_native",
]

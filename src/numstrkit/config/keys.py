# topmark:header:start
#
#   project      : NumStrKit
#   file         : keys.py
#   file_relpath : src/numstrkit/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for NumStrKit configuration.

These constants are the external configuration schema as it appears in
``numstrkit.toml`` and in ``[tool.numstrkit]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by NumStrKit configuration.

    The ordering mirrors the rendered defaults (`render_defaults_toml`).
    """

    # [parse]
    SECTION_PARSE: Final[str] = "parse"

    KEY_DECIMAL_SEPARATOR: Final[str] = "decimal_separator"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_CULTURE: Final[str] = "culture"
    # KEY_DECIMAL_SEPARATOR is shared with [parse]
    KEY_INTEGER_SEPARATOR: Final[str] = "integer_separator"
    KEY_GROUPING: Final[str] = "grouping"
    KEY_NEGATIVE_STYLE: Final[str] = "negative_style"
    KEY_POSITIVE_SIGN: Final[str] = "positive_sign"
    KEY_CURRENCY_SYMBOL: Final[str] = "currency_symbol"
    KEY_CURRENCY_POSITION: Final[str] = "currency_position"
    KEY_FIELD_LENGTH: Final[str] = "field_length"
    KEY_JUSTIFICATION: Final[str] = "justification"

    # [rounding]
    SECTION_ROUNDING: Final[str] = "rounding"

    KEY_MODE: Final[str] = "mode"
    KEY_DIGITS: Final[str] = "digits"

    @classmethod
    def known_keys(cls) -> dict[str, frozenset[str]]:
        """Return the accepted keys per section."""
        return {
            cls.SECTION_PARSE: frozenset({cls.KEY_DECIMAL_SEPARATOR}),
            cls.SECTION_FORMAT: frozenset(
                {
                    cls.KEY_CULTURE,
                    cls.KEY_DECIMAL_SEPARATOR,
                    cls.KEY_INTEGER_SEPARATOR,
                    cls.KEY_GROUPING,
                    cls.KEY_NEGATIVE_STYLE,
                    cls.KEY_POSITIVE_SIGN,
                    cls.KEY_CURRENCY_SYMBOL,
                    cls.KEY_CURRENCY_POSITION,
                    cls.KEY_FIELD_LENGTH,
                    cls.KEY_JUSTIFICATION,
                }
            ),
            cls.SECTION_ROUNDING: frozenset({cls.KEY_MODE, cls.KEY_DIGITS}),
        }

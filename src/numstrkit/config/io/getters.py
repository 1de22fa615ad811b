# topmark:header:start
#
#   project      : NumStrKit
#   file         : getters.py
#   file_relpath : src/numstrkit/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape of a value. A missing key yields
``None``; a value of the wrong type (or an unknown enum token) records a
**warning** in a `DiagnosticLog`, logs it, and also yields ``None``, so a
mistake in a config file never crashes loading or changes defaulting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar

from numstrkit.config.logging import get_logger
from numstrkit.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numstrkit.config.logging import NumstrLogger
    from numstrkit.core.diagnostics import DiagnosticLog

    from .types import TomlTable

logger: NumstrLogger = get_logger(__name__)

E = TypeVar("E", bound=KeyedStrEnum)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict if it is missing or not a mapping."""
    value: Any | None = table.get(key)
    return value if isinstance(value, dict) else {}


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not `str`.

    Ints, floats and bools are **not** coerced to strings.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool):
        logger.warning("Expected int in %s, got bool: %r", loc, value)
        diagnostics.add_warning(f"Expected int in {loc}, got bool: {value!r}")
        return None

    if isinstance(value, int):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Parse a keyed enum value from TOML.

    Expected input is a `str` accepted by `KeyedStrEnum.parse` (key, member
    name or alias, case-insensitive).

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        diagnostics.add_warning(
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None

    member: E | None = enum_cls.parse(raw)
    if member is None:
        allowed: str = ", ".join(enum_cls.keys())
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
    return member


def warn_unknown_keys(
    table: TomlTable,
    known: Iterable[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> None:
    """Record a warning for every key of ``table`` that is not in ``known``."""
    known_set: frozenset[str] = frozenset(known)
    for key in table:
        if key not in known_set:
            logger.warning("Unknown key %s.%s ignored", where, key)
            diagnostics.add_warning(f"Unknown key {where}.{key} ignored")

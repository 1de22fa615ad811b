# topmark:header:start
#
#   project      : NumStrKit
#   file         : loaders.py
#   file_relpath : src/numstrkit/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, discover and render TOML configuration.

This module reads NumStrKit configuration from on-disk TOML files
(``numstrkit.toml`` / ``[tool.numstrkit]`` in ``pyproject.toml``), finds the
nearest such file by walking up from a directory, and renders configuration
tables back to TOML text.

Parsing and rendering are done with `tomlkit`; tables are returned as plain
`dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from numstrkit.config.keys import Toml
from numstrkit.config.logging import get_logger
from numstrkit.constants import CONFIG_FILE_NAME, NO_FIELD_LENGTH, PYPROJECT_FILE_NAME
from numstrkit.core.rounding import RoundingMode
from numstrkit.formatting.grouping import IntegerGrouping
from numstrkit.formatting.spec import CurrencyPosition, Justification, NegativeStyle

if TYPE_CHECKING:
    from numstrkit.config.logging import NumstrLogger

    from .types import TomlTable

logger: NumstrLogger = get_logger(__name__)


class ConfigFileError(OSError):
    """A config file named explicitly by the user cannot be read or parsed."""


# --- Runtime defaults ---


def load_defaults_dict() -> TomlTable:
    """Return NumStrKit's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned dict is new on every call, so
    callers can mutate it safely. Keys align with `numstrkit.config.keys.Toml`.
    ``[rounding].digits`` is absent: by default values are not rounded.
    """
    return {
        Toml.SECTION_PARSE: {
            Toml.KEY_DECIMAL_SEPARATOR: ".",
        },
        Toml.SECTION_FORMAT: {
            Toml.KEY_DECIMAL_SEPARATOR: ".",
            Toml.KEY_INTEGER_SEPARATOR: ",",
            Toml.KEY_GROUPING: IntegerGrouping.THOUSANDS.key,
            Toml.KEY_NEGATIVE_STYLE: NegativeStyle.LEADING_MINUS.key,
            Toml.KEY_POSITIVE_SIGN: "",
            Toml.KEY_CURRENCY_SYMBOL: "",
            Toml.KEY_CURRENCY_POSITION: CurrencyPosition.LEADING.key,
            Toml.KEY_FIELD_LENGTH: NO_FIELD_LENGTH,
            Toml.KEY_JUSTIFICATION: Justification.RIGHT.key,
        },
        Toml.SECTION_ROUNDING: {
            Toml.KEY_MODE: RoundingMode.HALF_AWAY_FROM_ZERO.key,
        },
    }


# --- Rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings and lists (TOML has no `null`)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        seq: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string, dropping ``None`` values."""
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cleaned))


def render_toml(toml_dict: TomlTable, *, for_pyproject: bool = False) -> str:
    """Render a configuration table, optionally nested under ``[tool.numstrkit]``."""
    if for_pyproject:
        toml_dict = {"tool": {"numstrkit": toml_dict}}
    return to_toml(toml_dict)


def render_defaults_toml(*, for_pyproject: bool = False) -> str:
    """Render the runtime defaults as TOML text."""
    return render_toml(load_defaults_dict(), for_pyproject=for_pyproject)


# --- File I/O ---


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.
        strict (bool): Raise `ConfigFileError` instead of logging and returning ``{}``
            when the file cannot be read or parsed. Used for files the user named
            explicitly.

    Returns:
        TomlTable: The parsed TOML content (``{}`` on failure when not strict).

    Raises:
        ConfigFileError: If ``strict`` and the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        if strict:
            raise ConfigFileError(f"Cannot read config file {path}: {e}") from e
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        if strict:
            raise ConfigFileError(f"Invalid TOML in {path}: {e}") from e
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the NumStrKit table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.numstrkit]`` (``None`` when absent);
    any other file is taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool")
    section: Any = tool.get("numstrkit") if isinstance(tool, dict) else None
    return cast("TomlTable", section) if isinstance(section, dict) else None


def _has_tool_section(path: Path) -> bool:
    return extract_tool_table(load_toml_dict(path), path) is not None


def discover_config_file(start: Path) -> Path | None:
    """Return the nearest config file, walking up from ``start``.

    In each directory ``numstrkit.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.numstrkit]`` table.

    Args:
        start (Path): Directory (or file, whose parent is used) to start from.

    Returns:
        Path | None: The discovered file, or ``None`` if there is none up to the
        filesystem root.
    """
    anchor: Path = start.resolve()
    if anchor.is_file():
        anchor = anchor.parent
    for directory in (anchor, *anchor.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and _has_tool_section(pyproject):
            logger.debug("Discovered config in %s", pyproject)
            return pyproject
    logger.debug("No config file found above %s", anchor)
    return None

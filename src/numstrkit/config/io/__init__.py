# topmark:header:start
#
#   project      : NumStrKit
#   file         : __init__.py
#   file_relpath : src/numstrkit/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for NumStrKit configuration.

This package centralizes helpers for reading, validating and writing TOML used
by the configuration layer. The helpers never mutate configuration objects,
which keeps `numstrkit.config.model` focused on merge policy.

TOML parsing/formatting uses `tomlkit`.

Typical flow:
    1. Start from the runtime defaults (``load_defaults_dict``).
    2. Find and load project TOML files (``discover_config_file``, ``load_toml_dict``).
    3. Read values with the checked getters, collecting warnings.
    4. Serialize back to TOML when needed (``to_toml``, ``render_defaults_toml``).
"""

from __future__ import annotations

from .getters import (
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    warn_unknown_keys,
)
from .loaders import (
    ConfigFileError,
    discover_config_file,
    extract_tool_table,
    load_defaults_dict,
    load_toml_dict,
    render_defaults_toml,
    render_toml,
    to_toml,
)
from .types import TomlTable

__all__: list[str] = [
    "ConfigFileError",
    "TomlTable",
    "discover_config_file",
    "extract_tool_table",
    "get_enum_value_checked",
    "get_int_value_or_none_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "load_defaults_dict",
    "load_toml_dict",
    "render_defaults_toml",
    "render_toml",
    "to_toml",
    "warn_unknown_keys",
]

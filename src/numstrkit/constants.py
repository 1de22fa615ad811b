# topmark:header:start
#
#   project      : NumStrKit
#   file         : constants.py
#   file_relpath : src/numstrkit/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

NUMSTRKIT_VERSION: str = get_version("numstrkit")

# Config discovery: a dedicated file, or a [tool.numstrkit] table in pyproject.toml.
CONFIG_FILE_NAME: str = "numstrkit.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

# Environment variable consulted by `numstrkit.config.logging`.
LOG_LEVEL_ENV_VAR: str = "NUMSTRKIT_LOG_LEVEL"

NATIVE_DECIMAL_SEPARATOR: str = "."
NATIVE_NEGATIVE_SIGN: str = "-"

# No number field: render the number string at its natural width.
NO_FIELD_LENGTH: int = -1

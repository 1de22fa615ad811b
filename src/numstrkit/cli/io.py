# topmark:header:start
#
#   project      : NumStrKit
#   file         : io.py
#   file_relpath : src/numstrkit/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""STDIN handling utilities for Click commands.

Value commands take number strings as positional arguments. When none are
given, values are read from STDIN, one per line; empty lines and lines
starting with ``#`` are ignored.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from numstrkit.cli.errors import NumstrUsageError
from numstrkit.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numstrkit.config.logging import NumstrLogger

logger: NumstrLogger = get_logger(__name__)


def split_value_lines(data: str) -> list[str]:
    """Split STDIN text into values, skipping blank and comment lines."""
    lines: list[str] = [ln.strip() for ln in data.splitlines()]
    return [ln for ln in lines if ln and not ln.startswith("#")]


def read_stdin_values() -> list[str]:
    """Read values from STDIN; returns ``[]`` when STDIN is a TTY or empty."""
    if not sys.stdin or sys.stdin.isatty():
        return []
    return split_value_lines(sys.stdin.read())


def collect_values(cli_values: Iterable[str]) -> list[str]:
    """Return the values to process: CLI arguments, else STDIN lines.

    Raises:
        NumstrUsageError: If neither source provides a value.
    """
    values: list[str] = list(cli_values)
    if not values:
        values = read_stdin_values()
        logger.debug("Read %d value(s) from STDIN", len(values))
    if not values:
        raise NumstrUsageError("No values given (pass VALUES or pipe them on STDIN, one per line).")
    return values

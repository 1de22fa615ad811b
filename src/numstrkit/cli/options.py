# topmark:header:start
#
#   project      : NumStrKit
#   file         : options.py
#   file_relpath : src/numstrkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, configuration,
input parsing, rounding, output format) and their resolution logic, so
commands can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from numstrkit.cli.cli_types import EnumChoiceParam
from numstrkit.cli.emitters import OutputFormat
from numstrkit.cli.errors import NumstrUsageError
from numstrkit.config.logging import TRACE_LEVEL
from numstrkit.core.rounding import RoundingMode
from numstrkit.formatting.cultures import culture_names

P = ParamSpec("P")
R = TypeVar("R")

#: Context settings for commands taking number VALUES: lets ``-7.5`` through as a value.
VALUES_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from ``-v`` / ``-q`` counts.

    Returns:
        int: A logging-style level: WARNING by default, INFO/DEBUG/TRACE for
        one/two/three ``-v``, ERROR for ``-q``.

    Raises:
        NumstrUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise NumstrUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON/NDJSON output formats.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() in {"json", "ndjson"}:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color (auto, always, never) and --no-color."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config FILE`` (repeatable) and ``--no-config``."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover numstrkit.toml / pyproject.toml (only defaults and --config).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge, in order.",
    )(f)
    return f


def common_input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options controlling how input values are parsed."""
    f = click.option(
        "--dirty",
        is_flag=True,
        default=False,
        help="Extract numbers tolerantly (grouping separators, currency symbols, parentheses).",
    )(f)
    f = click.option(
        "--decimal-separator",
        "decimal_separator",
        default=None,
        metavar="SEP",
        help="Decimal separator of dirty input (default: from config or culture).",
    )(f)
    f = click.option(
        "--culture",
        default=None,
        metavar="CULTURE",
        help=f"Country culture preset ({', '.join(culture_names())}, or a country name).",
    )(f)
    return f


def common_rounding_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--mode`` and ``--digits``."""
    f = click.option(
        "--mode",
        "rounding_mode",
        type=EnumChoiceParam(RoundingMode),
        default=None,
        help="Rounding mode (default: from config, else half_away_from_zero).",
    )(f)
    f = click.option(
        "--digits",
        "rounding_digits",
        type=click.IntRange(min=0),
        default=None,
        help="Number of fractional digits to round to.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` (default, json, ndjson, markdown)."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(OutputFormat.keys())}).",
    )(f)

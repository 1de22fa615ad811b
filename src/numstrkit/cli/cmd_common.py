# topmark:header:start
#
#   project      : NumStrKit
#   file         : cmd_common.py
#   file_relpath : src/numstrkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
reading shared state from the Click context, building the effective
configuration, running a per-value operation and finishing with the right
exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from numstrkit.cli.console import ClickConsole
from numstrkit.cli.emitters import OutputFormat, ValueResult, emit_results, report_failures
from numstrkit.cli.errors import NumstrConfigError, NumstrDataError, NumstrUsageError
from numstrkit.config.io import ConfigFileError
from numstrkit.config.logging import get_logger
from numstrkit.config.model import ConfigError, MutableConfig
from numstrkit.core.diagnostics import DiagnosticLevel
from numstrkit.core.errors import InvalidSeparatorError, NumStrError
from numstrkit.core.kernel import validate_decimal_separator
from numstrkit.formatting.cultures import get_culture

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from numstrkit.cli.console import ConsoleLike
    from numstrkit.config.logging import NumstrLogger
    from numstrkit.config.model import Config

logger: NumstrLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context (a plain one if the group did not run)."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level (logging-style; lower is more verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def is_verbose(ctx: click.Context) -> bool:
    """Whether at least one ``-v`` was given."""
    return get_effective_verbosity(ctx) <= logging.INFO


def build_config(
    ctx: click.Context,
    *,
    config_paths: Iterable[str] = (),
    no_config: bool = False,
    overrides: dict[str, Any] | None = None,
) -> Config:
    """Load, merge and freeze the effective configuration for a command.

    Configuration warnings are printed on stderr unless ``-q`` was given.

    Args:
        ctx (click.Context): Current Click context.
        config_paths (Iterable[str]): Explicit ``--config`` files, in order.
        no_config (bool): Skip config file discovery.
        overrides (dict[str, Any] | None): CLI overrides keyed by config field name.

    Returns:
        Config: The frozen configuration.

    Raises:
        NumstrConfigError: If a config file cannot be read or the merged
            configuration is invalid.
        NumstrUsageError: If an override names an unknown culture or token.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigFileError as e:
        raise NumstrConfigError(str(e)) from e
    try:
        draft = draft.apply_cli_args(overrides or {})
    except ConfigError as e:
        raise NumstrUsageError(str(e)) from e
    try:
        config: Config = draft.freeze()
    except ConfigError as e:
        raise NumstrConfigError(str(e)) from e

    logger.debug("Effective config files: %s", config.config_files)
    if get_effective_verbosity(ctx) <= logging.WARNING:
        console: ConsoleLike = get_console(ctx)
        for diag in config.diagnostics:
            if diag.level != DiagnosticLevel.INFO:
                console.warn(f"Warning: {diag.message}")
    return config


def resolve_parse_separator(
    config: Config,
    *,
    decimal_separator: str | None,
) -> str:
    """Return the separator for dirty parsing.

    Precedence: ``--decimal-separator``, then the culture's decimal separator,
    then ``[parse].decimal_separator``.

    Raises:
        NumstrUsageError: If the explicit separator is not usable.
    """
    if decimal_separator is not None:
        try:
            validate_decimal_separator(decimal_separator)
        except InvalidSeparatorError as e:
            raise NumstrUsageError(str(e)) from e
        return decimal_separator
    if config.culture is not None:
        return get_culture(config.culture).decimal_separator
    return config.parse_decimal_separator


def process_values(values: Iterable[str], op: Callable[[str], str]) -> list[ValueResult]:
    """Apply ``op`` to every value, collecting failures instead of stopping."""
    results: list[ValueResult] = []
    for raw in values:
        try:
            results.append(ValueResult(input=raw, output=op(raw)))
        except NumStrError as e:
            logger.info("Failed to process %r: %s", raw, e)
            results.append(ValueResult(input=raw, error=str(e)))
    return results


def finish(
    ctx: click.Context,
    results: list[ValueResult],
    output_format: OutputFormat | None,
    *,
    title: str = "Output",
) -> None:
    """Emit results and report failures.

    Raises:
        NumstrDataError: If at least one value failed (after all output is written).
    """
    console: ConsoleLike = get_console(ctx)
    emit_results(console, results, output_format or OutputFormat.DEFAULT, title=title)
    failed: int = report_failures(console, results)
    if failed:
        raise NumstrDataError(f"{failed} of {len(results)} value(s) could not be processed.")

# topmark:header:start
#
#   project      : NumStrKit
#   file         : round.py
#   file_relpath : src/numstrkit/cli/commands/round.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit `round` command.

Rounds number strings to a number of fractional digits with one of the
rounding modes, and prints the native result. ``--mode`` and ``--digits``
default to ``[rounding]`` in the configuration; a digit count is required
from one or the other.

Examples:
    ```bash
    numstrkit round --mode half_to_even --digits 0 6.5 7.5   # 6, 8
    numstrkit round --mode floor --digits 1 -- -2.95         # -3.0
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numstrkit.cli.cmd_common import (
    build_config,
    finish,
    process_values,
    resolve_parse_separator,
)
from numstrkit.cli.errors import NumstrUsageError
from numstrkit.cli.io import collect_values
from numstrkit.cli.options import (
    VALUES_CONTEXT_SETTINGS,
    common_config_options,
    common_input_options,
    common_rounding_options,
    output_format_option,
)
from numstrkit.config.logging import get_logger
from numstrkit.core.kernel import format_native, parse_dirty, parse_native

if TYPE_CHECKING:
    from numstrkit.cli.emitters import OutputFormat, ValueResult
    from numstrkit.config.logging import NumstrLogger
    from numstrkit.config.model import Config
    from numstrkit.core.kernel import DecimalValue
    from numstrkit.core.rounding import RoundingMode, RoundingRequest

logger: NumstrLogger = get_logger(__name__)


@click.command(
    name="round",
    context_settings=VALUES_CONTEXT_SETTINGS,
    help="Round number strings with a rounding mode.",
)
@click.argument("values", nargs=-1, metavar="[VALUES]...")
@common_rounding_options
@common_input_options
@common_config_options
@output_format_option
def round_command(
    *,
    values: tuple[str, ...],
    rounding_mode: RoundingMode | None,
    rounding_digits: int | None,
    dirty: bool,
    decimal_separator: str | None,
    culture: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """Round number strings with a rounding mode."""
    ctx = click.get_current_context()
    config: Config = build_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "culture": culture,
            "rounding_mode": rounding_mode,
            "rounding_digits": rounding_digits,
        },
    )
    request: RoundingRequest | None = config.rounding_request()
    if request is None:
        raise NumstrUsageError(
            "No digit count: pass --digits N or set [rounding].digits in the configuration."
        )
    separator: str = resolve_parse_separator(config, decimal_separator=decimal_separator)
    inputs: list[str] = collect_values(values)
    logger.debug(
        "round: %d value(s) with %s to %d digit(s)",
        len(inputs),
        request.mode.key,
        request.target_fractional_digits,
    )

    def _op(text: str) -> str:
        value: DecimalValue = parse_dirty(text, separator) if dirty else parse_native(text)
        return format_native(request.apply(value))

    results: list[ValueResult] = process_values(inputs, _op)
    finish(ctx, results, output_format, title="Rounded")

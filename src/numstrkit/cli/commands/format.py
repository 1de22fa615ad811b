# topmark:header:start
#
#   project      : NumStrKit
#   file         : format.py
#   file_relpath : src/numstrkit/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit `format` command.

Renders number strings for display: integer grouping, decimal separator,
negative style, optional currency symbol, optional rounding and an optional
fixed-width field. Settings come from the configuration (``[format]`` and
``[rounding]``) and may be overridden on the command line.

Examples:
    ```bash
    numstrkit format --culture us --currency -- -1234.5      # ($1,234.50)
    numstrkit format --culture de 1234567.891                # 1.234.567,891
    numstrkit format --digits 2 --width 12 --justify left 3.14159
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numstrkit.cli.cli_types import EnumChoiceParam
from numstrkit.cli.cmd_common import (
    build_config,
    finish,
    process_values,
    resolve_parse_separator,
)
from numstrkit.cli.errors import NumstrConfigError
from numstrkit.cli.io import collect_values
from numstrkit.cli.options import (
    VALUES_CONTEXT_SETTINGS,
    common_config_options,
    common_input_options,
    common_rounding_options,
    output_format_option,
)
from numstrkit.config.logging import get_logger
from numstrkit.core.errors import NumStrError
from numstrkit.core.kernel import parse_dirty, parse_native
from numstrkit.formatting.render import format_number
from numstrkit.formatting.spec import Justification

if TYPE_CHECKING:
    from numstrkit.cli.emitters import OutputFormat, ValueResult
    from numstrkit.config.logging import NumstrLogger
    from numstrkit.config.model import Config
    from numstrkit.core.kernel import DecimalValue
    from numstrkit.core.rounding import RoundingMode
    from numstrkit.formatting.spec import NumberFormatSpec

logger: NumstrLogger = get_logger(__name__)


@click.command(
    name="format",
    context_settings=VALUES_CONTEXT_SETTINGS,
    help="Format number strings for display.",
)
@click.argument("values", nargs=-1, metavar="[VALUES]...")
@click.option(
    "--currency",
    is_flag=True,
    default=False,
    help="Use the culture's currency format (symbol, negative style, rounding).",
)
@click.option(
    "--width",
    "field_length",
    type=click.IntRange(min=-1),
    default=None,
    help="Field width; the number is padded to it (-1: no field).",
)
@click.option(
    "--justify",
    "justification",
    type=EnumChoiceParam(Justification),
    default=None,
    help="Alignment of the number inside the field.",
)
@common_rounding_options
@common_input_options
@common_config_options
@output_format_option
def format_command(
    *,
    values: tuple[str, ...],
    currency: bool,
    field_length: int | None,
    justification: Justification | None,
    rounding_mode: RoundingMode | None,
    rounding_digits: int | None,
    dirty: bool,
    decimal_separator: str | None,
    culture: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """Format number strings for display.

    Args:
        values (tuple[str, ...]): Number strings; read from STDIN when empty.
        currency (bool): Use the culture's currency format.
        field_length (int | None): Field width override.
        justification (Justification | None): Field alignment override.
        rounding_mode (RoundingMode | None): Rounding mode override.
        rounding_digits (int | None): Fractional digits to round to.
        dirty (bool): Extract numbers tolerantly.
        decimal_separator (str | None): Decimal separator of dirty input.
        culture (str | None): Culture preset override.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    config: Config = build_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "culture": culture,
            "rounding_mode": rounding_mode,
            "rounding_digits": rounding_digits,
            "field_length": field_length,
            "justification": justification,
        },
    )
    try:
        spec: NumberFormatSpec = config.format_spec(currency=currency)
    except NumStrError as e:
        raise NumstrConfigError(str(e)) from e
    if currency and not spec.has_currency:
        logger.info("--currency given but no currency symbol is configured")
    logger.debug("format spec: %s", spec)

    separator: str = resolve_parse_separator(config, decimal_separator=decimal_separator)
    inputs: list[str] = collect_values(values)

    def _op(text: str) -> str:
        value: DecimalValue = parse_dirty(text, separator) if dirty else parse_native(text)
        return format_number(value, spec)

    results: list[ValueResult] = process_values(inputs, _op)
    finish(ctx, results, output_format, title="Formatted")

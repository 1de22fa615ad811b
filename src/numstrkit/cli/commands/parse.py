# topmark:header:start
#
#   project      : NumStrKit
#   file         : parse.py
#   file_relpath : src/numstrkit/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit `parse` command.

Normalizes number strings to native form (``[-]digits[.digits]``). With
``--dirty``, numbers are extracted tolerantly from strings such as
``"$1,254.65"`` or ``"(1.234,50 €)"``.

Examples:
    ```bash
    numstrkit parse 007.50                          # 7.50
    numstrkit parse --dirty '$1,254.65'             # 1254.65
    numstrkit parse --dirty --culture de '1.234,5'  # 1234.5
    printf '1\\n-2.5\\n' | numstrkit parse --format json
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
from numstrkit.cli.io import collect_values
from numstrkit.cli.options import (
    VALUES_CONTEXT_SETTINGS,
    common_config_options,
    common_input_options,
    output_format_option,
)
from numstrkit.config.logging import get_logger
from numstrkit.core.kernel import format_native, parse_dirty, parse_native

if TYPE_CHECKING:
    from numstrkit.cli.emitters import OutputFormat, ValueResult
    from numstrkit.config.logging import NumstrLogger
    from numstrkit.config.model import Config

logger: NumstrLogger = get_logger(__name__)


@click.command(
    name="parse",
    context_settings=VALUES_CONTEXT_SETTINGS,
    help="Normalize number strings to native form.",
)
@click.argument("values", nargs=-1, metavar="[VALUES]...")
@common_input_options
@common_config_options
@output_format_option
def parse_command(
    *,
    values: tuple[str, ...],
    dirty: bool,
    decimal_separator: str | None,
    culture: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    output_format: OutputFormat | None,
) -> None:
    """Normalize number strings to native form.

    Args:
        values (tuple[str, ...]): Number strings; read from STDIN when empty.
        dirty (bool): Extract numbers tolerantly.
        decimal_separator (str | None): Decimal separator of dirty input.
        culture (str | None): Culture whose decimal separator dirty input uses.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    config: Config = build_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        overrides={"culture": culture},
    )
    separator: str = resolve_parse_separator(config, decimal_separator=decimal_separator)
    inputs: list[str] = collect_values(values)
    logger.debug("parse: %d value(s), dirty=%s, separator=%r", len(inputs), dirty, separator)

    def _op(text: str) -> str:
        if dirty:
            return format_native(parse_dirty(text, separator))
        return format_native(parse_native(text))

    results: list[ValueResult] = process_values(inputs, _op)
    finish(ctx, results, output_format, title="Native")

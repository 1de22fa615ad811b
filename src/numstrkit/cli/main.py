# topmark:header:start
#
#   project      : NumStrKit
#   file         : main.py
#   file_relpath : src/numstrkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit command-line interface.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read them through `numstrkit.cli.cmd_common`.

Commands:
    parse    normalize (native or dirty) number strings;
    round    round number strings with a rounding mode;
    format   render number strings for display;
    config   show the effective or default configuration;
    version  show the installed version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numstrkit.cli.commands.config import config_command
from numstrkit.cli.commands.format import format_command
from numstrkit.cli.commands.parse import parse_command
from numstrkit.cli.commands.round import round_command
from numstrkit.cli.commands.version import version_command
from numstrkit.cli.console import ClickConsole
from numstrkit.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from numstrkit.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from numstrkit.cli.console import ConsoleLike
    from numstrkit.config.logging import NumstrLogger

logger: NumstrLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%s color=%s", ctx.obj["verbosity_level"], enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NumStrKit: parse, round and format decimal number strings.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the NumStrKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'numstrkit format [VALUES...]' to format numbers.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(parse_command)

cli.add_command(round_command)

cli.add_command(format_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()

# topmark:header:start
#
#   project      : NumStrKit
#   file         : config.py
#   file_relpath : src/numstrkit/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit `config` command.

Dumps the effective configuration (defaults, discovered config file, explicit
``--config`` files) as TOML, or the built-in defaults with ``--defaults``.
The output can be saved as ``numstrkit.toml``, or pasted into
``pyproject.toml`` when rendered with ``--for-pyproject``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from numstrkit.cli.cmd_common import build_config, get_console, is_verbose
from numstrkit.cli.options import common_config_options
from numstrkit.config.io import render_defaults_toml

if TYPE_CHECKING:
    from numstrkit.cli.console import ConsoleLike
    from numstrkit.config.model import Config


@click.command(
    name="config",
    help="Show the effective (or default) configuration as TOML.",
)
@click.option(
    "--defaults",
    "show_defaults",
    is_flag=True,
    default=False,
    help="Show the built-in defaults instead of the effective configuration.",
)
@click.option(
    "--for-pyproject",
    is_flag=True,
    default=False,
    help="Nest the output under [tool.numstrkit] for use in pyproject.toml.",
)
@common_config_options
def config_command(
    *,
    show_defaults: bool,
    for_pyproject: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Show the effective (or default) configuration as TOML.

    Args:
        show_defaults (bool): Show the built-in defaults.
        for_pyproject (bool): Render under ``[tool.numstrkit]``.
        config_paths (tuple[str, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if show_defaults:
        text: str = render_defaults_toml(for_pyproject=for_pyproject)
        sources: tuple[str, ...] = ()
    else:
        config: Config = build_config(ctx, config_paths=config_paths, no_config=no_config)
        text = config.to_toml(for_pyproject=for_pyproject)
        sources = config.config_files

    if is_verbose(ctx):
        title: str = "Default configuration" if show_defaults else "Effective configuration"
        console.print(console.styled(f"# {title} (TOML)", bold=True, underline=True))
        for source in sources:
            console.print(console.styled(f"# source: {source}", fg="cyan", dim=True))

    console.print(text.rstrip("\n"))

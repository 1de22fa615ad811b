# topmark:header:start
#
#   project      : NumStrKit
#   file         : version.py
#   file_relpath : src/numstrkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NumStrKit `version` command.

Prints the current NumStrKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from numstrkit.cli.cmd_common import get_console, is_verbose
from numstrkit.cli.emitters import OutputFormat
from numstrkit.cli.options import output_format_option
from numstrkit.constants import NUMSTRKIT_VERSION

if TYPE_CHECKING:
    from numstrkit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of NumStrKit.",
)
@output_format_option
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of NumStrKit.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.print(json.dumps({"version": NUMSTRKIT_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# NumStrKit Version\n")
        console.print(f"**NumStrKit version: {NUMSTRKIT_VERSION}**")
    else:  # Plain text (default)
        if is_verbose(ctx):
            console.print(console.styled("NumStrKit version:\n", bold=True, underline=True))
            console.print(f"    {console.styled(NUMSTRKIT_VERSION, bold=True)}")
        else:
            console.print(console.styled(NUMSTRKIT_VERSION, bold=True))

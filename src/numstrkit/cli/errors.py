# topmark:header:start
#
#   project      : NumStrKit
#   file         : errors.py
#   file_relpath : src/numstrkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the NumStrKit CLI.

Raise these in commands to stop with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from numstrkit.cli.exit_codes import ExitCode


class NumstrCliError(click.ClickException):
    """Base class for all NumStrKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class NumstrUsageError(NumstrCliError):
    """Error for command-line invocation errors (missing values, conflicting flags)."""

    exit_code = ExitCode.USAGE_ERROR


class NumstrDataError(NumstrCliError):
    """Error raised after processing when at least one input value failed."""

    exit_code = ExitCode.DATA_ERROR


class NumstrConfigError(NumstrCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR

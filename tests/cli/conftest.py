# topmark:header:start
#
#   project      : NumStrKit
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running NumStrKit in a controlled working directory.

Config discovery walks up from the current working directory. `run_cli_in()`
changes the process working directory to the given `tmp_path` before invoking
the Click CLI, so that a ``numstrkit.toml`` or ``pyproject.toml`` written by
the test is picked up exactly as it would be for a user running the tool from
a project root.

Click >= 8.2 keeps stdout and stderr apart in `Result`: parse machine output
from ``result.stdout`` and look for per-value errors and warnings in
``result.stderr``.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from numstrkit.cli.exit_codes import ExitCode
from numstrkit.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["--no-color", "format", "--culture", "de", "1234.5"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input, one
            value per line.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for commands that do not depend on config files, or pass
    ``--no-config`` so the repository's own files are never discovered.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def stdout_lines(result: Result) -> list[str]:
    """Return the non-empty lines written to stdout."""
    return [ln for ln in result.stdout.splitlines() if ln.strip()]


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_DATA_ERROR(result: Result) -> None:
    """Assert that the command exited with DATA_ERROR (code 65).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    # DATA_ERROR is raised only after every value has been written
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output

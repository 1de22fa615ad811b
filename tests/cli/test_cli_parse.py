# topmark:header:start
#
#   project      : NumStrKit
#   file         : test_cli_parse.py
#   file_relpath : tests/cli/test_cli_parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `numstrkit parse`."""

from __future__ import annotations

from tests.cli.conftest import (
    assert_DATA_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    stdout_lines,
)
from tests.conftest import mark_cli


@mark_cli
def test_parse_normalizes_native_values() -> None:
    result = run_cli(["--no-color", "parse", "--no-config", "--", "007.50", "-0.0", "-12"])
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["7.50", "0.0", "-12"]
    assert result.stderr == ""


@mark_cli
def test_parse_dirty_values() -> None:
    result = run_cli(
        ["--no-color", "parse", "--no-config", "--dirty", "$1,254.65", "(42)", "12.5-"]
    )
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["1254.65", "-42", "-12.5"]


@mark_cli
def test_parse_dirty_separator_precedence() -> None:
    """--decimal-separator beats --culture, which beats the configured default."""
    by_culture = run_cli(
        ["--no-color", "parse", "--no-config", "--dirty", "--culture", "de", "1.234,5 €"]
    )
    assert_SUCCESS(by_culture)
    assert stdout_lines(by_culture) == ["1234.5"]

    explicit = run_cli(
        [
            "--no-color",
            "parse",
            "--no-config",
            "--dirty",
            "--culture",
            "de",
            "--decimal-separator",
            ".",
            "1.234,5",
        ]
    )
    assert_SUCCESS(explicit)
    assert stdout_lines(explicit) == ["1.2345"]


@mark_cli
def test_parse_reads_stdin_lines() -> None:
    result = run_cli(
        ["--no-color", "parse", "--no-config"],
        input_text="# header comment\n1.50\n\n-2\n",
    )
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["1.50", "-2"]


@mark_cli
def test_parse_reports_bad_values_and_keeps_going() -> None:
    result = run_cli(["--no-color", "parse", "--no-config", "1", "1,5", "2"])
    assert_DATA_ERROR(result)
    assert stdout_lines(result) == ["1", "2"]
    assert "'1,5': Malformed native number string" in result.stderr
    assert "1 of 3 value(s) could not be processed." in result.stderr


@mark_cli
def test_parse_rejects_unusable_separator() -> None:
    result = run_cli(
        ["--no-color", "parse", "--no-config", "--dirty", "--decimal-separator", "-", "1-5"]
    )
    assert_USAGE_ERROR(result)
    assert "Invalid decimal separator" in result.stderr

# topmark:header:start
#
#   project      : NumStrKit
#   file         : test_cli_round.py
#   file_relpath : tests/cli/test_cli_round.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `numstrkit round`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
    stdout_lines,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
@parametrize(
    "mode, expected",
    [
        ("half_to_even", ["2", "4", "-2"]),
        ("HalfToOdd", ["3", "3", "-3"]),
        ("half_up_with_neg_nums", ["3", "4", "-2"]),
        ("half-down-with-neg-nums", ["2", "3", "-3"]),
        ("truncate", ["2", "3", "-2"]),
        ("floor", ["2", "3", "-3"]),
        ("ceiling", ["3", "4", "-2"]),
    ],
)
def test_round_modes(mode: str, expected: list[str]) -> None:
    result = run_cli(
        ["--no-color", "round", "--no-config", "--mode", mode, "--digits", "0", "--"]
        + ["2.5", "3.5", "-2.5"]
    )
    assert_SUCCESS(result)
    assert stdout_lines(result) == expected


@mark_cli
def test_round_defaults_to_half_away_from_zero() -> None:
    result = run_cli(
        ["--no-color", "round", "--no-config", "--digits", "2", "--", "1.005", "-1.005"]
    )
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["1.01", "-1.01"]


@mark_cli
def test_round_very_long_value_from_stdin() -> None:
    result = run_cli(
        ["--no-color", "round", "--no-config", "--digits", "0"],
        input_text="1" * 4400 + ".5\n",
    )
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["1" * 4399 + "2"]


@mark_cli
def test_round_pads_with_zeros() -> None:
    result = run_cli(["--no-color", "round", "--no-config", "--digits", "3", "7", "0.5"])
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["7.000", "0.500"]


@mark_cli
def test_round_dirty_input_with_culture() -> None:
    result = run_cli(
        ["--no-color", "round", "--no-config", "--dirty", "--culture", "fr", "--digits", "1"]
        + ["1 234,56 €"]
    )
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["1234.6"]


@mark_cli
def test_round_needs_a_digit_count() -> None:
    result = run_cli(["--no-color", "round", "--no-config", "1.5"])
    assert_USAGE_ERROR(result)
    assert "No digit count" in result.stderr


@mark_cli
def test_round_reads_settings_from_config(tmp_path: Path) -> None:
    (tmp_path / "numstrkit.toml").write_text(
        '[rounding]\nmode = "floor"\ndigits = 1\n', encoding="utf-8"
    )
    from_file = run_cli_in(tmp_path, ["--no-color", "round", "1.29"])
    assert_SUCCESS(from_file)
    assert stdout_lines(from_file) == ["1.2"]

    overridden = run_cli_in(tmp_path, ["--no-color", "round", "--mode", "ceiling", "1.21"])
    assert_SUCCESS(overridden)
    assert stdout_lines(overridden) == ["1.3"]

    ignored = run_cli_in(tmp_path, ["--no-color", "round", "--no-config", "1.29"])
    assert_USAGE_ERROR(ignored)


@mark_cli
def test_round_rejects_bad_options() -> None:
    """Click's own parameter validation exits with status 2."""
    bad_mode = run_cli(["--no-color", "round", "--mode", "sideways", "--digits", "0", "1"])
    assert bad_mode.exit_code == 2
    assert "sideways" in bad_mode.output

    negative = run_cli(["--no-color", "round", "--digits", "-1", "1"])
    assert negative.exit_code == 2

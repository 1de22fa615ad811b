# topmark:header:start
#
#   project      : NumStrKit
#   file         : test_cli_output_formats.py
#   file_relpath : tests/cli/test_cli_output_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: machine and Markdown output formats.

JSON and NDJSON go to stdout only; per-value errors are part of the payload
and are also reported on stderr.
"""

from __future__ import annotations

import json
from typing import Any

from numstrkit.cli.emitters import OutputFormat, ValueResult, iter_markdown, render_json
from tests.cli.conftest import assert_DATA_ERROR, assert_SUCCESS, run_cli, stdout_lines
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_json_output() -> None:
    result = run_cli(
        ["--no-color", "format", "--no-config", "--format", "json", "--culture", "de", "--"]
        + ["-1234.5", "7"]
    )
    assert_SUCCESS(result)
    payload: Any = json.loads(result.stdout)
    assert payload == [
        {"input": "-1234.5", "output": "-1.234,5", "error": None},
        {"input": "7", "output": "7", "error": None},
    ]


@mark_cli
def test_json_output_includes_errors() -> None:
    result = run_cli(["--no-color", "parse", "--no-config", "--format", "json", "1", "x"])
    assert_DATA_ERROR(result)
    payload: Any = json.loads(result.stdout)
    assert payload[0] == {"input": "1", "output": "1", "error": None}
    assert payload[1]["input"] == "x"
    assert payload[1]["output"] is None
    assert "Malformed" in payload[1]["error"]
    assert "'x'" in result.stderr


@mark_cli
@parametrize("fmt", ["ndjson", "jsonl"])
def test_ndjson_output(fmt: str) -> None:
    result = run_cli(
        ["--no-color", "round", "--no-config", "--digits", "0", "--format", fmt, "2.5", "1.49"]
    )
    assert_SUCCESS(result)
    records: list[Any] = [json.loads(line) for line in stdout_lines(result)]
    assert [r["output"] for r in records] == ["3", "1"]
    assert all(r["error"] is None for r in records)


@mark_cli
def test_markdown_output() -> None:
    result = run_cli(
        ["--no-color", "parse", "--no-config", "--dirty", "--format", "md", "$1,254.65"]
    )
    assert_SUCCESS(result)
    assert stdout_lines(result) == [
        "| Input | Native | Error |",
        "| --- | --- | --- |",
        "| `$1,254.65` | `1254.65` |  |",
    ]


def test_markdown_escapes_pipes() -> None:
    rows: list[str] = list(
        iter_markdown([ValueResult(input="1|2", error="bad | value")], title="Formatted")
    )
    assert rows[0] == "| Input | Formatted | Error |"
    assert rows[2] == "| `1\\|2` |  | bad \\| value |"


def test_render_json_keeps_unicode() -> None:
    text: str = render_json([ValueResult(input="1", output="1,00 €")])
    assert "€" in text
    assert json.loads(text) == [{"input": "1", "output": "1,00 €", "error": None}]


def test_output_format_tokens() -> None:
    assert OutputFormat.parse("jsonl") is OutputFormat.NDJSON
    assert OutputFormat.parse("text") is OutputFormat.DEFAULT
    assert OutputFormat.JSON.is_machine
    assert not OutputFormat.MARKDOWN.is_machine
    assert ValueResult(input="1", output="1").ok
    assert not ValueResult(input="x", error="bad").ok

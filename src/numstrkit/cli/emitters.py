# topmark:header:start
#
#   project      : NumStrKit
#   file         : emitters.py
#   file_relpath : src/numstrkit/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render per-value results in the CLI output formats.

Serialization is kept separate from printing: ``render_*`` functions return
strings (or lines) and `emit_results` writes them through the console.

Formats:
    default:  one output per line (failed values are skipped on stdout);
    json:     a single JSON array of ``{"input", "output", "error"}`` objects;
    ndjson:   one such object per line;
    markdown: a table with one row per value.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from numstrkit.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from numstrkit.cli.console import ConsoleLike


class OutputFormat(KeyedStrEnum):
    """Output format for CLI rendering.

    Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    DEFAULT = ("default", "Human-friendly text output", ("text", "plain"))
    JSON = ("json", "A single JSON array", ())
    NDJSON = ("ndjson", "One JSON object per line", ("jsonl",))
    MARKDOWN = ("markdown", "Markdown table", ("md",))

    @property
    def is_machine(self) -> bool:
        """Whether this is a machine-readable format."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)


@dataclass(frozen=True, slots=True)
class ValueResult:
    """Outcome of processing one input value.

    Exactly one of ``output`` and ``error`` is set.
    """

    input: str
    output: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def render_json(results: Iterable[ValueResult]) -> str:
    """Serialize all results as one JSON array."""
    return json.dumps([asdict(r) for r in results], indent=2, ensure_ascii=False)


def iter_ndjson(results: Iterable[ValueResult]) -> Iterator[str]:
    """Yield one compact JSON object per result."""
    for r in results:
        yield json.dumps(asdict(r), ensure_ascii=False)


def _md_cell(text: str | None) -> str:
    if not text:
        return ""
    return "`" + text.replace("|", "\\|") + "`"


def iter_markdown(results: Iterable[ValueResult], *, title: str = "Output") -> Iterator[str]:
    """Yield the lines of a Markdown table of results."""
    yield f"| Input | {title} | Error |"
    yield "| --- | --- | --- |"
    for r in results:
        error: str = r.error.replace("|", "\\|") if r.error else ""
        yield f"| {_md_cell(r.input)} | {_md_cell(r.output)} | {error} |"


def emit_results(
    console: ConsoleLike,
    results: list[ValueResult],
    fmt: OutputFormat,
    *,
    title: str = "Output",
) -> None:
    """Write ``results`` to stdout in the requested format.

    Errors are reported on stderr separately (see `report_failures`); in the
    default format failed values produce no stdout line.
    """
    if fmt == OutputFormat.JSON:
        console.print(render_json(results))
    elif fmt == OutputFormat.NDJSON:
        for line in iter_ndjson(results):
            console.print(line)
    elif fmt == OutputFormat.MARKDOWN:
        for line in iter_markdown(results, title=title):
            console.print(line)
    else:
        for r in results:
            if r.output is not None:
                console.print(r.output)


def report_failures(console: ConsoleLike, results: Iterable[ValueResult]) -> int:
    """Print one stderr line per failed value and return the failure count."""
    count = 0
    for r in results:
        if r.error is not None:
            count += 1
            console.error(f"{r.input!r}: {r.error}")
    return count

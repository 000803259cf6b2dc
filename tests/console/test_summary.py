from __future__ import annotations

import pytest

from msbuild_console.console.line_splitter import LineEvent
from msbuild_console.console.summary import (
    ERROR_TOKEN,
    WARNING_TOKEN,
    SummaryCounter,
    parse_summary_count,
)


def _feed(counter: SummaryCounter, *lines: str) -> None:
    for line in lines:
        counter.on_line(LineEvent(text=line, raw=line.encode("utf-8") + b"\n"))


def test_counts_not_observed_before_summary() -> None:
    counter = SummaryCounter()

    assert counter.warnings == -1
    assert counter.errors == -1
    assert not counter.observed


def test_warning_summary() -> None:
    counter = SummaryCounter()
    _feed(counter, "    1 Warning(s)")

    assert counter.warnings == 1
    assert counter.errors == -1
    assert counter.observed


def test_error_summary() -> None:
    counter = SummaryCounter()
    _feed(counter, "    1 Error(s)")

    assert counter.errors == 1
    assert counter.warnings == -1


def test_warnings_and_errors() -> None:
    counter = SummaryCounter()
    _feed(counter, "    3 Warning(s)", "    5 Error(s)")

    assert counter.warnings == 3
    assert counter.errors == 5


def test_later_summary_overwrites() -> None:
    counter = SummaryCounter()
    _feed(counter, "    3 Warning(s)", "    5 Warning(s)")

    assert counter.warnings == 5


def test_zero_is_distinct_from_not_observed() -> None:
    counter = SummaryCounter()
    _feed(counter, "    0 Warning(s)", "    0 Error(s)")

    assert counter.warnings == 0
    assert counter.errors == 0


@pytest.mark.parametrize(
    "line",
    [
        "    Warnings: not a number",
        "    Errors: not a number",
        "Warning(s)",
        "abc Warning(s)",
        "    1 warning(s)",
        "Program.cs(12,17): warning CS0168: unused variable",
    ],
)
def test_non_summary_lines_ignored(line: str) -> None:
    counter = SummaryCounter()
    _feed(counter, line)

    assert counter.warnings == -1
    assert counter.errors == -1


def test_parse_failure_keeps_previous_value() -> None:
    counter = SummaryCounter()
    _feed(counter, "    2 Warning(s)", "x2 Warning(s)")

    assert counter.warnings == 2


def test_extra_leading_whitespace_and_text() -> None:
    counter = SummaryCounter()
    _feed(counter, "\t\t  12 Warning(s) reported", "Total: 7 Error(s)")

    assert counter.warnings == 12
    assert counter.errors == 7


def test_parse_summary_count_uses_token_before_literal() -> None:
    assert parse_summary_count("    17 Warning(s)", WARNING_TOKEN) == 17
    assert parse_summary_count("build 1 of 2: 4 Error(s)", ERROR_TOKEN) == 4
    assert parse_summary_count("none Warning(s)", WARNING_TOKEN) is None


@pytest.mark.parametrize("count", ["1_000", "-1", "+2", "٣"])
def test_parse_summary_count_accepts_ascii_digits_only(count: str) -> None:
    assert parse_summary_count(f"    {count} Warning(s)", WARNING_TOKEN) is None


def test_negative_count_does_not_reset_observed_value() -> None:
    counter = SummaryCounter()
    _feed(counter, "    4 Warning(s)", "    x -1 Warning(s) 2 Warning(s)")

    assert counter.warnings == 2

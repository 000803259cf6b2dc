from __future__ import annotations

import pytest

from msbuild_console.core.result import BuildOutcome, BuildSummary, evaluate_build_result


def _summary(warnings: int = -1, errors: int = -1) -> BuildSummary:
    return BuildSummary(
        summary_warnings=warnings,
        summary_errors=errors,
        diagnostic_warnings=max(warnings, 0),
        diagnostic_errors=max(errors, 0),
    )


@pytest.mark.parametrize(
    ("exit_code", "warnings", "unstable_if_warnings", "continue_on_failure", "expected"),
    [
        (0, 0, False, False, BuildOutcome.SUCCESS),
        (0, 3, False, False, BuildOutcome.SUCCESS),
        (0, 3, True, False, BuildOutcome.UNSTABLE),
        (0, 0, True, False, BuildOutcome.SUCCESS),
        (0, -1, True, False, BuildOutcome.SUCCESS),
        (1, 0, False, False, BuildOutcome.FAILURE),
        (1, 3, True, False, BuildOutcome.FAILURE),
        (1, 0, False, True, BuildOutcome.SUCCESS),
        (1, 3, True, True, BuildOutcome.UNSTABLE),
    ],
)
def test_evaluate_build_result(
    exit_code: int,
    warnings: int,
    unstable_if_warnings: bool,
    continue_on_failure: bool,
    expected: BuildOutcome,
) -> None:
    outcome = evaluate_build_result(
        exit_code,
        _summary(warnings=warnings),
        unstable_if_warnings=unstable_if_warnings,
        continue_on_build_failure=continue_on_failure,
    )

    assert outcome is expected


def test_summary_to_dict() -> None:
    summary = BuildSummary(
        summary_warnings=2,
        summary_errors=-1,
        diagnostic_warnings=2,
        diagnostic_errors=0,
        lines=40,
        bytes=1024,
    )

    assert summary.has_summary
    assert summary.to_dict() == {
        "summary": {"warnings": 2, "errors": -1},
        "diagnostics": {"warnings": 2, "errors": 0},
        "lines": 40,
        "bytes": 1024,
    }


def test_summary_without_summary_lines() -> None:
    assert not _summary().has_summary

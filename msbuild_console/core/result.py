"""Build outcome evaluation from the MSBuild exit code and console counts."""

from dataclasses import dataclass
from enum import Enum

from msbuild_console.utils.logging import get_logger

logger = get_logger(__name__)


class BuildOutcome(str, Enum):
    """Result of an MSBuild build step."""

    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"


@dataclass(frozen=True)
class BuildSummary:
    """Counts gathered from one MSBuild console stream."""

    summary_warnings: int
    summary_errors: int
    diagnostic_warnings: int
    diagnostic_errors: int
    lines: int = 0
    bytes: int = 0

    @property
    def has_summary(self) -> bool:
        return self.summary_warnings >= 0 or self.summary_errors >= 0

    def to_dict(self) -> dict:
        return {
            "summary": {
                "warnings": self.summary_warnings,
                "errors": self.summary_errors,
            },
            "diagnostics": {
                "warnings": self.diagnostic_warnings,
                "errors": self.diagnostic_errors,
            },
            "lines": self.lines,
            "bytes": self.bytes,
        }


def evaluate_build_result(
    exit_code: int,
    summary: BuildSummary,
    unstable_if_warnings: bool = False,
    continue_on_build_failure: bool = False,
) -> BuildOutcome:
    """
    Decide the outcome of a build step.

    A non-zero exit code fails the step unless ``continue_on_build_failure``
    is set. Otherwise the build is unstable when ``unstable_if_warnings`` is
    set and the summary line reported at least one warning.

    Args:
        exit_code: MSBuild process exit code
        summary: Counts gathered from the console stream
        unstable_if_warnings: Mark the build unstable on summary warnings
        continue_on_build_failure: Ignore a non-zero exit code

    Returns:
        The build outcome
    """
    if exit_code != 0 and not continue_on_build_failure:
        logger.info(f"[RESULT] MSBuild exited with code {exit_code}")
        return BuildOutcome.FAILURE

    if unstable_if_warnings and summary.summary_warnings > 0:
        logger.info("[RESULT] Set build UNSTABLE because there are warnings")
        return BuildOutcome.UNSTABLE

    return BuildOutcome.SUCCESS

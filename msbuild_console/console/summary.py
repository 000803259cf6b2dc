"""Counting of MSBuild's end-of-build summary lines."""

import re

from msbuild_console.console.line_splitter import LineEvent
from msbuild_console.utils.logging import get_logger

logger = get_logger(__name__)

WARNING_TOKEN = "Warning(s)"
ERROR_TOKEN = "Error(s)"

WARNING_SUMMARY_PATTERN = re.compile(r".*\d+\sWarning\(s\).*")
ERROR_SUMMARY_PATTERN = re.compile(r".*\d+\sError\(s\).*")

NOT_OBSERVED = -1


def parse_summary_count(line: str, token: str) -> int | None:
    """
    Parse the count reported in front of a summary token.

    The trimmed line is split on whitespace and the token immediately
    preceding ``token`` is parsed as a count of plain ASCII digits.

    Args:
        line: Console line, already known to match the summary shape
        token: ``Warning(s)`` or ``Error(s)``

    Returns:
        The parsed count, or None if no integer precedes the token
    """
    parts = line.strip().split()
    for i, part in enumerate(parts):
        if i == 0 or not part.startswith(token):
            continue
        count = parts[i - 1]
        if count.isascii() and count.isdigit():
            return int(count)
        logger.debug(f"[SUMMARY] Ignoring non-numeric count {count!r} before {token}")
    return None


class SummaryCounter:
    """
    Records the warning/error totals from MSBuild's summary lines.

    Both counts stay at -1 until a summary line is seen. A later summary
    line overwrites the earlier value; counts are never accumulated.
    """

    def __init__(self):
        self.warnings = NOT_OBSERVED
        self.errors = NOT_OBSERVED

    @property
    def observed(self) -> bool:
        return self.warnings != NOT_OBSERVED or self.errors != NOT_OBSERVED

    def on_line(self, event: LineEvent) -> None:
        line = event.text

        if WARNING_SUMMARY_PATTERN.fullmatch(line):
            count = parse_summary_count(line, WARNING_TOKEN)
            if count is not None:
                logger.debug(f"[SUMMARY] Warnings: {count}")
                self.warnings = count

        if ERROR_SUMMARY_PATTERN.fullmatch(line):
            count = parse_summary_count(line, ERROR_TOKEN)
            if count is not None:
                logger.debug(f"[SUMMARY] Errors: {count}")
                self.errors = count

"""Exceptions and build outcome evaluation."""

from msbuild_console.core.exceptions import (
    ConsoleProcessingError,
    ConsoleSinkError,
    EncodingConfigError,
)
from msbuild_console.core.result import BuildOutcome, BuildSummary, evaluate_build_result

__all__ = [
    "ConsoleProcessingError",
    "ConsoleSinkError",
    "EncodingConfigError",
    "BuildOutcome",
    "BuildSummary",
    "evaluate_build_result",
]

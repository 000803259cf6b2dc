"""MSBuild console stream processing."""

from msbuild_console.console.line_splitter import LineConsumer, LineEvent, LineSplitter
from msbuild_console.console.summary import SummaryCounter
from msbuild_console.console.notes import (
    ERROR_NOTE,
    WARNING_NOTE,
    DiagnosticKind,
    DiagnosticNote,
    MarkupText,
    classify_line,
)
from msbuild_console.console.annotator import (
    AnnotatedLine,
    AnnotationSink,
    DiagnosticClassifier,
    MarkupCollector,
)
from msbuild_console.console.pipeline import (
    ConsolePipeline,
    KeepOpenSink,
    NullSink,
    TeeSink,
    diagnostic_annotator,
    process_stream,
    summary_parser,
)
from msbuild_console.console.encoding import code_page_for, resolve_encoding

__all__ = [
    "LineConsumer",
    "LineEvent",
    "LineSplitter",
    "SummaryCounter",
    "ERROR_NOTE",
    "WARNING_NOTE",
    "DiagnosticKind",
    "DiagnosticNote",
    "MarkupText",
    "classify_line",
    "AnnotatedLine",
    "AnnotationSink",
    "DiagnosticClassifier",
    "MarkupCollector",
    "ConsolePipeline",
    "KeepOpenSink",
    "NullSink",
    "TeeSink",
    "diagnostic_annotator",
    "process_stream",
    "summary_parser",
    "code_page_for",
    "resolve_encoding",
]

"""Wiring of line splitters, counters and sinks into console pipelines."""

from typing import BinaryIO, Protocol

from msbuild_console.console.annotator import AnnotationSink, DiagnosticClassifier
from msbuild_console.console.line_splitter import LineSplitter
from msbuild_console.console.summary import SummaryCounter
from msbuild_console.core.result import BuildSummary
from msbuild_console.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CHUNK_SIZE = 8192


class ByteSink(Protocol):
    def write(self, data: bytes) -> int | None:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...


class NullSink:
    """Binary sink that discards everything written to it."""

    def __init__(self):
        self.closed = False

    def write(self, data: bytes) -> int:
        return len(data)

    def flush(self) -> None:
        pass

    def close(self) -> None:
        self.closed = True


class KeepOpenSink:
    """Wraps a shared stream (e.g. stdout) so that closing only flushes it."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def write(self, data: bytes) -> int:
        self.stream.write(data)
        return len(data)

    def flush(self) -> None:
        self.stream.flush()

    def close(self) -> None:
        self.stream.flush()


class TeeSink:
    """Duplicates every write to several sinks, in order."""

    def __init__(self, *targets: ByteSink):
        self.targets = targets

    def write(self, data: bytes) -> int:
        for target in self.targets:
            target.write(data)
        return len(data)

    def flush(self) -> None:
        for target in self.targets:
            target.flush()

    def close(self) -> None:
        # Close every target even if an earlier one fails.
        first_error: BaseException | None = None
        for target in self.targets:
            try:
                target.close()
            except Exception as e:
                if first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error


def summary_parser(out: BinaryIO, encoding: str = "utf-8") -> tuple[LineSplitter, SummaryCounter]:
    """Build a splitter that counts the MSBuild summary lines."""
    counter = SummaryCounter()
    return LineSplitter(out, encoding, consumers=[counter]), counter


def diagnostic_annotator(
    out: BinaryIO,
    encoding: str = "utf-8",
    sink: AnnotationSink | None = None,
) -> tuple[LineSplitter, DiagnosticClassifier]:
    """Build a splitter that classifies and annotates diagnostic lines."""
    classifier = DiagnosticClassifier(sink)
    return LineSplitter(out, encoding, consumers=[classifier]), classifier


class ConsolePipeline:
    """
    One splitter feeding both the summary counter and the diagnostic classifier.

    Behaves like a writable binary stream: bytes written to it reach ``out``
    unchanged, line by line.
    """

    def __init__(
        self,
        out: BinaryIO,
        encoding: str = "utf-8",
        annotation_sink: AnnotationSink | None = None,
    ):
        self.summary = SummaryCounter()
        self.diagnostics = DiagnosticClassifier(annotation_sink)
        self.splitter = LineSplitter(
            out,
            encoding,
            consumers=[self.summary, self.diagnostics],
        )

    def write(self, chunk: bytes) -> int:
        return self.splitter.write(chunk)

    def flush(self) -> None:
        self.splitter.flush()

    def close(self) -> None:
        self.splitter.close()

    def __enter__(self) -> "ConsolePipeline":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def build_summary(self) -> BuildSummary:
        return BuildSummary(
            summary_warnings=self.summary.warnings,
            summary_errors=self.summary.errors,
            diagnostic_warnings=self.diagnostics.warnings,
            diagnostic_errors=self.diagnostics.errors,
            lines=self.splitter.lines_emitted,
            bytes=self.splitter.bytes_written,
        )


def process_stream(
    reader: BinaryIO,
    target: ByteSink,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """
    Pump a readable binary stream into a pipeline, then close the pipeline.

    The pipeline is closed even when reading fails, so a trailing partial
    line is still flushed and the downstream sink released.

    Args:
        reader: Source of console bytes (pipe, file, stdin buffer)
        target: Pipeline or sink receiving the chunks
        chunk_size: Maximum bytes per read

    Returns:
        Total number of bytes read
    """
    total = 0
    try:
        while True:
            chunk = reader.read(chunk_size)
            if not chunk:
                break
            target.write(chunk)
            total += len(chunk)
    finally:
        target.close()

    logger.debug(f"[CONSOLE] Processed {total} bytes")
    return total

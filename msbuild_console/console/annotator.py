"""Classification and markup of individual diagnostic lines."""

from dataclasses import dataclass, field
from typing import Protocol

from msbuild_console.console.line_splitter import LineEvent
from msbuild_console.console.notes import (
    DiagnosticKind,
    DiagnosticNote,
    MarkupText,
    classify_line,
)
from msbuild_console.utils.logging import get_logger

logger = get_logger(__name__)


class AnnotationSink(Protocol):
    """Receives a request to style one console line."""

    def annotate(self, event: LineEvent, note: DiagnosticNote) -> None:
        ...


@dataclass
class AnnotatedLine:
    """A classified line and its rendered markup."""

    index: int
    kind: DiagnosticKind
    text: str
    markup: str


@dataclass
class MarkupCollector:
    """Annotation sink that keeps the rendered markup of every styled line."""

    lines: list[AnnotatedLine] = field(default_factory=list)

    def annotate(self, event: LineEvent, note: DiagnosticNote) -> None:
        text = MarkupText(event.text)
        note.annotate(text)
        self.lines.append(
            AnnotatedLine(
                index=len(self.lines) + 1,
                kind=note.kind,
                text=event.text,
                markup=text.render(),
            )
        )

    def of_kind(self, kind: DiagnosticKind) -> list[AnnotatedLine]:
        return [line for line in self.lines if line.kind == kind]


class DiagnosticClassifier:
    """
    Counts error and warning diagnostics as they stream past.

    Each line is tested against the error pattern first; the warning
    pattern is only tried when that fails, so a line mentioning both
    counts as a single error.
    """

    def __init__(self, sink: AnnotationSink | None = None):
        """
        Initialize classifier.

        Args:
            sink: Optional collaborator that styles classified lines
        """
        self.sink = sink
        self.warnings = 0
        self.errors = 0

    def on_line(self, event: LineEvent) -> None:
        note = classify_line(event.text)
        if note is None:
            return

        if note.kind is DiagnosticKind.ERROR:
            self.errors += 1
        else:
            self.warnings += 1
        logger.debug(f"[ANNOTATE] {note.kind.value}: {event.text}")

        if self.sink is not None:
            self.sink.annotate(event, note)

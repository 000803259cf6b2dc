"""Diagnostic line patterns and their console markup."""

import html
import re
from dataclasses import dataclass, field
from enum import Enum


class DiagnosticKind(str, Enum):
    """Severity of a classified diagnostic line."""

    ERROR = "error"
    WARNING = "warning"


class MarkupText:
    """
    A line of console text with markup tags layered over character ranges.

    The text itself is never changed; tags are inserted when rendering.
    """

    def __init__(self, text: str):
        self.text = text
        self._tags: list[tuple[int, int, str, str]] = []

    def __len__(self) -> int:
        return len(self.text)

    def add_markup(self, start: int, end: int, start_tag: str, end_tag: str) -> None:
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(f"Markup range {start}:{end} outside text of length {len(self.text)}")
        self._tags.append((start, end, start_tag, end_tag))

    def render(self, escape: bool = True) -> str:
        """Render the text with its markup, HTML-escaping the text if requested."""
        opening: dict[int, list[str]] = {}
        closing: dict[int, list[str]] = {}
        empty: dict[int, list[str]] = {}
        # Later tags nest inside earlier ones.
        for start, end, start_tag, end_tag in self._tags:
            if start == end:
                empty.setdefault(start, []).append(start_tag + end_tag)
                continue
            opening.setdefault(start, []).append(start_tag)
            closing.setdefault(end, []).insert(0, end_tag)

        out: list[str] = []
        for pos in range(len(self.text) + 1):
            out.extend(closing.get(pos, ()))
            out.extend(empty.get(pos, ()))
            out.extend(opening.get(pos, ()))
            if pos < len(self.text):
                char = self.text[pos]
                out.append(html.escape(char, quote=False) if escape else char)
        return "".join(out)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class DiagnosticNote:
    """Pattern and markup for one kind of diagnostic line."""

    kind: DiagnosticKind
    pattern: re.Pattern = field(repr=False)
    css_class: str
    display_name: str

    @property
    def start_tag(self) -> str:
        return f"<span class={self.css_class}>"

    @property
    def end_tag(self) -> str:
        return "</span>"

    def matches(self, line: str) -> re.Match | None:
        return self.pattern.fullmatch(line)

    def annotate(self, text: MarkupText) -> None:
        """Wrap the whole line in this note's styling."""
        text.add_markup(0, len(text), self.start_tag, self.end_tag)


# file(12,34): error CS1002: ; expected
# MSBUILD : error MSB1009: Project file does not exist.
ERROR_NOTE = DiagnosticNote(
    kind=DiagnosticKind.ERROR,
    pattern=re.compile(r"(.*)error\s*(([A-Za-z]+)\d+)?\s*:\s*(.*)", re.IGNORECASE),
    css_class="error-inline",
    display_name="MSBuild error",
)

# file(12,34): warning CS0168: The variable 'e' is declared but never used
# The (line[,col]) locator is required so the "N Warning(s)" summary never matches.
WARNING_NOTE = DiagnosticNote(
    kind=DiagnosticKind.WARNING,
    pattern=re.compile(
        r"(.*)\(\d+(,\d+)?\):\s*warning\s*(([A-Za-z]+)\d+)?\s*:\s*(.*)",
        re.IGNORECASE,
    ),
    css_class="warning-inline",
    display_name="MSBuild warning",
)

# Checked in order; the first match wins.
NOTES: tuple[DiagnosticNote, ...] = (ERROR_NOTE, WARNING_NOTE)


def classify_line(line: str) -> DiagnosticNote | None:
    """Return the note for a diagnostic line, or None for ordinary output."""
    for note in NOTES:
        if note.matches(line):
            return note
    return None

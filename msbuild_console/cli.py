"""Command-line interface for the MSBuild console processor."""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from msbuild_console import __version__
from msbuild_console.config import (
    ConsoleSettings,
    LoggingSettings,
    Settings,
    configure_settings,
    get_settings,
)
from msbuild_console.console.annotator import MarkupCollector
from msbuild_console.console.encoding import code_page_for
from msbuild_console.console.notes import MarkupText, classify_line
from msbuild_console.console.pipeline import (
    ConsolePipeline,
    KeepOpenSink,
    NullSink,
    process_stream,
)
from msbuild_console.core.exceptions import ConsoleProcessingError
from msbuild_console.core.result import BuildOutcome, BuildSummary, evaluate_build_result
from msbuild_console.utils.json_utils import JsonHandler
from msbuild_console.utils.logging import setup_logging

console = Console()
err_console = Console(stderr=True)


def _count(value: int) -> str:
    return "not reported" if value < 0 else str(value)


def print_summary(summary: BuildSummary, outcome: BuildOutcome) -> None:
    """Print the console summary table."""
    style = {
        BuildOutcome.SUCCESS: "green",
        BuildOutcome.UNSTABLE: "yellow",
        BuildOutcome.FAILURE: "red",
    }[outcome]

    table = Table(title="MSBuild Console Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Outcome", Text(outcome.value, style=style))
    table.add_row("Summary warnings", _count(summary.summary_warnings))
    table.add_row("Summary errors", _count(summary.summary_errors))
    table.add_row("Diagnostic warnings", str(summary.diagnostic_warnings))
    table.add_row("Diagnostic errors", str(summary.diagnostic_errors))
    table.add_row("Lines", str(summary.lines))
    table.add_row("Bytes", str(summary.bytes))

    err_console.print(table)


@click.group()
@click.version_option(version=__version__)
def main():
    """Stream MSBuild console output and count its warnings and errors."""
    pass


@main.command()
@click.argument("log", type=click.File("rb"), default="-")
@click.option(
    "--encoding",
    envvar="MSBUILD_CONSOLE_ENCODING",
    default="utf-8",
    help="Encoding of the MSBuild console output",
)
@click.option(
    "--chunk-size",
    default=8192,
    type=click.IntRange(min=1),
    help="Bytes read from the input per write",
)
@click.option(
    "--exit-code",
    default=0,
    type=int,
    help="Exit code of the MSBuild process that produced the log",
)
@click.option(
    "--unstable-if-warnings",
    is_flag=True,
    help="Report UNSTABLE when the summary line reports warnings",
)
@click.option(
    "--continue-on-build-failure",
    is_flag=True,
    help="Do not fail on a non-zero MSBuild exit code",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    help="Do not echo the console output",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the summary as JSON on stdout (implies --quiet)",
)
@click.option(
    "--summary-file",
    type=click.Path(dir_okay=False),
    help="Also write the JSON summary to this file",
)
@click.option(
    "--markup-file",
    type=click.Path(dir_okay=False),
    help="Write the marked-up error and warning lines to this file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
def parse(
    log,
    encoding: str,
    chunk_size: int,
    exit_code: int,
    unstable_if_warnings: bool,
    continue_on_build_failure: bool,
    quiet: bool,
    as_json: bool,
    summary_file: str | None,
    markup_file: str | None,
    verbose: bool,
):
    """
    Process a captured MSBuild console log.

    LOG: Log file to read, or - for stdin
    """
    try:
        defaults = get_settings()
        settings = Settings(
            console=ConsoleSettings(
                encoding=encoding,
                chunk_size=chunk_size,
                unstable_if_warnings=unstable_if_warnings or defaults.console.unstable_if_warnings,
                continue_on_build_failure=(
                    continue_on_build_failure or defaults.console.continue_on_build_failure
                ),
            ),
            logging=LoggingSettings(
                level="DEBUG" if verbose else defaults.logging.level,
                file=defaults.logging.file,
                rich_console=defaults.logging.rich_console,
            ),
        )
    except ConsoleProcessingError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(2)

    configure_settings(settings)
    setup_logging(
        level=settings.logging.level,
        log_format=settings.logging.format,
        log_file=settings.logging.file,
        rich_console=settings.logging.rich_console,
    )

    if quiet or as_json:
        out = NullSink()
    else:
        out = KeepOpenSink(click.get_binary_stream("stdout"))

    collector = MarkupCollector()
    pipeline = ConsolePipeline(out, settings.console.encoding, collector)
    try:
        process_stream(log, pipeline, settings.console.chunk_size)
    except ConsoleProcessingError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(2)

    summary = pipeline.build_summary()
    outcome = evaluate_build_result(
        exit_code,
        summary,
        unstable_if_warnings=settings.console.unstable_if_warnings,
        continue_on_build_failure=settings.console.continue_on_build_failure,
    )

    data = {**summary.to_dict(), "outcome": outcome.value, "encoding": settings.console.encoding}
    if summary_file:
        JsonHandler.dump_file(data, Path(summary_file))
    if markup_file:
        markup_path = Path(markup_file)
        markup_path.parent.mkdir(parents=True, exist_ok=True)
        markup_path.write_text(
            "".join(f"{line.markup}\n" for line in collector.lines),
            encoding="utf-8",
        )

    if as_json:
        click.echo(JsonHandler.dumps(data))
    else:
        print_summary(summary, outcome)

    sys.exit(1 if outcome is BuildOutcome.FAILURE else 0)


@main.command()
@click.argument("lines", nargs=-1, required=True)
def classify(lines: tuple[str, ...]):
    """
    Classify individual MSBuild console lines.

    LINES: Console lines to classify
    """
    table = Table(show_header=True)
    table.add_column("Kind", style="cyan")
    table.add_column("Markup", style="white")

    for line in lines:
        note = classify_line(line)
        if note is None:
            table.add_row("-", Text(line))
            continue
        text = MarkupText(line)
        note.annotate(text)
        table.add_row(note.kind.value, Text(text.render()))

    console.print(table)


@main.command()
@click.argument("encoding")
def codepage(encoding: str):
    """
    Print the Windows code page identifier for an encoding.

    ENCODING: Encoding name, e.g. utf-8 or windows-1252
    """
    click.echo(code_page_for(encoding))


if __name__ == "__main__":
    main()

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from msbuild_console.console.line_splitter import LineEvent, LineSplitter


class RecordingConsumer:
    def __init__(self) -> None:
        self.events: list[LineEvent] = []

    def on_line(self, event: LineEvent) -> None:
        self.events.append(event)

    @property
    def texts(self) -> list[str]:
        return [e.text for e in self.events]


class TrackingSink(io.BytesIO):
    """BytesIO that keeps its contents after close and counts close calls."""

    def __init__(self) -> None:
        super().__init__()
        self.close_calls = 0
        self.data = b""

    def close(self) -> None:
        self.close_calls += 1
        if not self.closed:
            self.data = self.getvalue()
        super().close()


class BrokenSink:
    def __init__(self) -> None:
        self.closed = False

    def write(self, data: bytes) -> int:
        raise OSError("console pipe broken")

    def flush(self) -> None:
        raise OSError("console pipe broken")

    def close(self) -> None:
        self.closed = True


class FlakySink(io.BytesIO):
    """BytesIO whose first write fails."""

    def __init__(self) -> None:
        super().__init__()
        self.failures = 1

    def write(self, data: bytes) -> int:
        if self.failures:
            self.failures -= 1
            raise OSError("console pipe busy")
        return super().write(data)


@pytest.fixture
def sink() -> TrackingSink:
    return TrackingSink()


@pytest.fixture
def recorder() -> RecordingConsumer:
    return RecordingConsumer()


@pytest.fixture
def broken_sink() -> BrokenSink:
    return BrokenSink()


@pytest.fixture
def flaky_sink() -> FlakySink:
    return FlakySink()


@pytest.fixture
def splitter(sink: TrackingSink, recorder: RecordingConsumer) -> LineSplitter:
    return LineSplitter(sink, "utf-8", consumers=[recorder])


@pytest.fixture
def feed() -> Callable[[LineSplitter, bytes, int], None]:
    """Write data into a splitter in fixed-size chunks, then close it."""

    def _feed(target: LineSplitter, data: bytes, size: int) -> None:
        for i in range(0, len(data), size):
            target.write(data[i:i + size])
        target.close()

    return _feed


@pytest.fixture
def msbuild_log() -> bytes:
    return (
        "Microsoft (R) Build Engine version 17.8.3+195e7f5a3\r\n"
        "Build started 18/10/2026 09:12:44.\r\n"
        "Program.cs(12,17): warning CS0168: The variable 'e' is declared but never used "
        "[C:\\src\\App\\App.csproj]\r\n"
        "Program.cs(20,5): error CS1002: ; expected [C:\\src\\App\\App.csproj]\r\n"
        "Build FAILED.\r\n"
        "\r\n"
        "    1 Warning(s)\r\n"
        "    1 Error(s)\r\n"
        "\r\n"
        "Time Elapsed 00:00:01.23\r\n"
    ).encode("utf-8")

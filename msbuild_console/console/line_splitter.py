"""Line splitting over a raw console byte stream."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import BinaryIO, Protocol

from msbuild_console.console.encoding import resolve_encoding
from msbuild_console.core.exceptions import ConsoleSinkError
from msbuild_console.utils.logging import get_logger

logger = get_logger(__name__)

LF = 0x0A
CR = 0x0D


@dataclass(frozen=True)
class LineEvent:
    """One console line: decoded text plus the exact bytes it came from."""

    text: str
    raw: bytes

    @property
    def length(self) -> int:
        return len(self.raw)


class LineConsumer(Protocol):
    """Receives every line detected by a LineSplitter."""

    def on_line(self, event: LineEvent) -> None:
        """Handle one decoded line."""
        ...


def trim_eol(text: str) -> str:
    """Strip trailing CR/LF characters from a decoded line."""
    return text.rstrip("\r\n")


class LineSplitter:
    """
    Splits a byte stream into lines and passes the bytes through unchanged.

    Chunks handed to ``write`` may end anywhere: inside a line, between CR and
    LF, or in the middle of a multi-byte character. Bytes are buffered until a
    LF is seen, so decoding only ever happens on complete lines. Every line is
    dispatched to the consumers before its raw bytes are written downstream.
    """

    def __init__(
        self,
        out: BinaryIO,
        encoding: str = "utf-8",
        consumers: Iterable[LineConsumer] = (),
    ):
        """
        Initialize splitter.

        Args:
            out: Downstream binary sink receiving the original bytes
            encoding: Encoding of the console output
            consumers: Line consumers, called in order for each line
        """
        self.out = out
        self.encoding = resolve_encoding(encoding)
        self._consumers: list[LineConsumer] = list(consumers)
        self._buffer = bytearray()
        self._scanned = 0
        self._closed = False
        self.lines_emitted = 0
        self.bytes_written = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet terminated by a LF."""
        return len(self._buffer)

    def add_consumer(self, consumer: LineConsumer) -> None:
        self._consumers.append(consumer)

    def write(self, chunk: bytes) -> int:
        """
        Append a chunk and emit every line it completes.

        Returns:
            Number of bytes accepted (always ``len(chunk)``)
        """
        if self._closed:
            raise ValueError("write to closed LineSplitter")
        if not chunk:
            return 0

        self._buffer += chunk
        start = 0
        # Bytes before _scanned are known to hold no LF.
        search_from = self._scanned
        drained = False
        try:
            while True:
                idx = self._buffer.find(LF, search_from)
                if idx < 0:
                    break
                line = bytes(self._buffer[start:idx + 1])
                start = search_from = idx + 1
                self._eol(line)
            drained = True
        finally:
            # Dispatched lines leave the buffer even if the sink failed.
            if start:
                del self._buffer[:start]
            # After a failure the remaining buffer may still hold complete lines.
            self._scanned = len(self._buffer) if drained else 0
        return len(chunk)

    def flush(self) -> None:
        try:
            self.out.flush()
        except OSError as e:
            raise ConsoleSinkError(
                f"Failed to flush console sink: {e}",
                operation="flush",
                pending_bytes=len(self._buffer),
            ) from e

    def close(self) -> None:
        """
        Emit any undelimited trailing line, then close the downstream sink.

        Calling close again emits nothing and only closes the sink again.
        """
        try:
            if self._buffer:
                tail = bytes(self._buffer)
                self._buffer.clear()
                self._scanned = 0
                self._eol(tail)
        finally:
            self._closed = True
            self._close_out()

    def _close_out(self) -> None:
        try:
            self.out.close()
        except OSError as e:
            raise ConsoleSinkError(
                f"Failed to close console sink: {e}",
                operation="close",
            ) from e

    def __enter__(self) -> "LineSplitter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _eol(self, raw: bytes) -> None:
        """Dispatch one line to the consumers and forward its bytes."""
        end = len(raw)
        if end and raw[end - 1] == LF:
            end -= 1
            if end and raw[end - 1] == CR:
                end -= 1

        text = trim_eol(raw[:end].decode(self.encoding, errors="replace"))
        event = LineEvent(text=text, raw=raw)
        self.lines_emitted += 1

        for consumer in self._consumers:
            consumer.on_line(event)

        try:
            self.out.write(raw)
        except OSError as e:
            raise ConsoleSinkError(
                f"Failed to write to console sink: {e}",
                operation="write",
                pending_bytes=len(raw),
            ) from e
        self.bytes_written += len(raw)

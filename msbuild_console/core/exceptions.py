"""Custom exceptions for the console processing pipeline."""


class ConsoleProcessingError(Exception):
    """Base exception for all console processing errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConsoleSinkError(ConsoleProcessingError):
    """The downstream console sink failed; the output channel is broken."""

    def __init__(
        self,
        message: str,
        operation: str,
        pending_bytes: int = 0,
    ):
        super().__init__(
            message,
            details={"operation": operation, "pending_bytes": pending_bytes},
        )
        self.operation = operation
        self.pending_bytes = pending_bytes


class EncodingConfigError(ConsoleProcessingError):
    """The configured console encoding is not a known codec."""

    def __init__(self, message: str, encoding: str):
        super().__init__(message, details={"encoding": encoding})
        self.encoding = encoding

"""
Error types for event model parsing and project configuration.
"""

from dataclasses import dataclass
from typing import Optional


class EventModelError(Exception):
    """Base exception for all eventmodel errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(EventModelError):
    """
    Raised when model notation cannot be parsed.

    Examples:
    - Missing delimiter, quote, or escape digits
    - No record or relationship matches at a position
    - Literal body that is not valid UTF-8

    Attributes:
        offset: Byte offset of the furthest failure reached
        expected: Expectations that were unmet at that offset
    """

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        offset: int = 0,
        expected: tuple[str, ...] = (),
    ):
        self.offset = offset
        self.expected = expected
        super().__init__(message, context)


class ConfigError(EventModelError):
    """
    Raised when the project manifest cannot be loaded.

    Examples:
    - eventmodel.toml missing
    - Malformed TOML
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Source name (file path or "<input>")
        line: Line number (1-indexed)
        column: Column number (1-indexed, in bytes)
        offset: Byte offset from the start of the buffer
        snippet: Optional source line showing the error location
    """

    file: str
    line: int
    column: int
    offset: int = 0
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "orders.evm:3:7"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the offending line with its number and an error marker."""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^^^"
        return f"{prefix}{self.snippet}\n{marker}"


def locate(data: bytes, offset: int) -> tuple[int, int, str]:
    """
    Resolve a byte offset into a line, column and source line.

    Returns:
        Tuple of (line, column, snippet); line and column are 1-indexed
    """
    offset = max(0, min(offset, len(data)))
    line_start = data.rfind(b"\n", 0, offset) + 1
    line_end = data.find(b"\n", offset)
    if line_end == -1:
        line_end = len(data)
    line = data.count(b"\n", 0, offset) + 1
    column = offset - line_start + 1
    snippet = data[line_start:line_end].rstrip(b"\r").decode("utf-8", errors="replace")
    return line, column, snippet


def make_parse_error(
    message: str,
    data: bytes,
    offset: int,
    source: str = "<input>",
    expected: tuple[str, ...] = (),
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        data: The buffer being parsed
        offset: Byte offset where the failure was detected
        source: Source name for the location prefix
        expected: Unmet expectations at the offset

    Returns:
        ParseError with context attached
    """
    line, column, snippet = locate(data, offset)
    context = ErrorContext(
        file=source,
        line=line,
        column=column,
        offset=offset,
        snippet=snippet,
    )
    return ParseError(message, context, offset=offset, expected=expected)

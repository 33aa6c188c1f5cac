"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (invalid construction arguments)
        3000-3999: Syntax errors (line assembly and escape decoding)
        4000-4999: Loading errors (file-based convenience loaders)
    """

    # Configuration errors (1000-1999)
    SOURCE_MISSING = 1001

    # Syntax errors (3000-3999)
    MALFORMED_UNICODE_ESCAPE = 3001
    LINE_TOO_LONG = 3002

    # Loading errors (4000-4999)
    SOURCE_TOO_LARGE = 4001
    UNSUPPORTED_FORMAT = 4002
    UNSAFE_PATH = 4003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Offsets are measured within the assembled logical line, after
        comments, leading whitespace and continuation backslashes have
        been removed. The line number is the physical line on which the
        logical line started.

    Attributes:
        start: Starting character offset within the logical line (0-indexed)
        end: Ending character offset (exclusive)
        line: Physical line number (1-indexed)
        column: Column number within the logical line (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for non-syntax errors)
        hint: Suggestion for fixing the error
        source_path: File the error originated from (loader errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MALFORMED_UNICODE_ESCAPE]: Malformed \\uxxxx encoding: '\\u12zz'
              --> line 3, column 5
              = help: A \\u escape must be followed by exactly four hex digits

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

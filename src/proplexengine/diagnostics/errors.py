"""Properties exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "MalformedEscapeError",
    "PropertiesConfigurationError",
    "PropertiesError",
    "PropertiesLineTooLongError",
    "PropertiesLoadError",
    "PropertiesSyntaxError",
]


class PropertiesError(Exception):
    """Base exception for all PropLexEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PropertiesError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PropertiesConfigurationError(PropertiesError):
    """Invalid construction arguments.

    Raised when a LineReader is created with neither a byte stream nor a
    character stream. Nothing has been read when this is raised.
    """


class PropertiesSyntaxError(PropertiesError):
    """Unrecoverable problem in the input text.

    Aborts the whole load operation. Entries inserted from earlier lines
    remain in the destination mapping.
    """


class MalformedEscapeError(PropertiesSyntaxError):
    """Invalid hex digit (or missing digits) in a \\uxxxx escape.

    Attributes:
        escape: The offending escape text as it appeared in the line
        offset: Position of the escape's backslash within the logical line
        line_number: Physical line on which the logical line started (0 if unknown)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        escape: str = "",
        offset: int = 0,
        line_number: int = 0,
    ) -> None:
        """Initialize MalformedEscapeError.

        Args:
            message: Error message string OR Diagnostic object
            escape: The offending escape text
            offset: Backslash position within the logical line (0-indexed)
            line_number: Physical line number (1-indexed, 0 if unknown)
        """
        super().__init__(message)
        self.escape = escape
        self.offset = offset
        self.line_number = line_number


class PropertiesLineTooLongError(PropertiesSyntaxError):
    """Logical line exceeded the reader's maximum line length."""


class PropertiesLoadError(PropertiesError):
    """File-based loading failed before any parsing took place.

    Examples:
    - Source exceeds the configured size limit
    - XML property files (unsupported format)
    - Path traversal outside the loader's base directory

    Attributes:
        path: The offending path as given by the caller
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize PropertiesLoadError.

        Args:
            message: Error message string OR Diagnostic object
            path: The offending path
        """
        super().__init__(message)
        self.path = path

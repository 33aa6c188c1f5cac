"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def source_missing() -> Diagnostic:
        """LineReader constructed without any source.

        Returns:
            Diagnostic for SOURCE_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.SOURCE_MISSING,
            message="No byte stream or character stream supplied",
            hint="Pass stream= (binary) or reader= (text) to LineReader",
        )

    @staticmethod
    def malformed_unicode_escape(escape: str, offset: int, line_number: int) -> Diagnostic:
        """Invalid or truncated \\uxxxx escape sequence.

        Args:
            escape: Escape text as found in the logical line (e.g. '\\u12zz')
            offset: Offset of the backslash within the logical line
            line_number: Physical line number where the logical line started
                (0 when unknown; the span is omitted)

        Returns:
            Diagnostic for MALFORMED_UNICODE_ESCAPE
        """
        msg = f"Malformed \\uxxxx encoding: '{escape}'"
        span = None
        if line_number > 0:
            span = SourceSpan(
                start=offset,
                end=offset + len(escape),
                line=line_number,
                column=offset + 1,
            )
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_UNICODE_ESCAPE,
            message=msg,
            span=span,
            hint="A \\u escape must be followed by exactly four hex digits",
        )

    @staticmethod
    def line_too_long(max_length: int, line_number: int) -> Diagnostic:
        """Logical line outgrew the line buffer limit.

        Args:
            max_length: The configured maximum line length
            line_number: Physical line number where the logical line started

        Returns:
            Diagnostic for LINE_TOO_LONG
        """
        msg = f"Logical line exceeds maximum length of {max_length:,} characters"
        span = None
        if line_number > 0:
            span = SourceSpan(start=0, end=max_length, line=line_number, column=1)
        return Diagnostic(
            code=DiagnosticCode.LINE_TOO_LONG,
            message=msg,
            span=span,
            hint="Check for a runaway line continuation or raise max_line_length",
        )

    @staticmethod
    def source_too_large(path: str, size: int, max_size: int) -> Diagnostic:
        """Source file exceeds the loader size limit.

        Args:
            path: File path
            size: Actual size in bytes
            max_size: Configured maximum in bytes

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} bytes) exceeds maximum ({max_size:,} bytes)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Split the file or pass a larger max_source_size",
            source_path=path,
        )

    @staticmethod
    def unsupported_format(path: str) -> Diagnostic:
        """XML property files are not supported.

        Args:
            path: File path with an .xml suffix

        Returns:
            Diagnostic for UNSUPPORTED_FORMAT
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_FORMAT,
            message="XML property files are not supported",
            hint="Convert the file to the line-oriented .properties format",
            source_path=path,
        )

    @staticmethod
    def unsafe_path(resource_id: str, reason: str) -> Diagnostic:
        """Resource id rejected by path validation.

        Args:
            resource_id: The rejected resource identifier
            reason: Short description of the violation

        Returns:
            Diagnostic for UNSAFE_PATH
        """
        msg = f"{reason} in resource_id: {resource_id!r}"
        return Diagnostic(
            code=DiagnosticCode.UNSAFE_PATH,
            message=msg,
            hint="Resource ids must be relative paths inside the base directory",
        )

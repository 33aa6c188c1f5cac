"""Enumerations for PropLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SourceKind(StrEnum):
    """Kind of raw input bound to a LineReader.

    StrEnum provides automatic string conversion: str(SourceKind.BYTES) == "bytes"
    """

    BYTES = "bytes"
    """Byte stream: each byte is zero-extended to a code point (ISO-8859-1)."""

    CHARS = "chars"
    """Character stream: text is consumed as already-decoded code points."""


__all__ = [
    "SourceKind",
]

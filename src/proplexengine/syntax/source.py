"""Raw input sources for the line reader.

A Source is the single capability the LineReader needs: read a chunk of
up to ``capacity`` raw units and return them as a string of code points.
An empty chunk signals end of input.

Two variants form a closed sum type, selected once per reader:

- ByteSource: wraps a binary stream. Each byte is zero-extended to the
  code point of the same value (ISO-8859-1), never UTF-8 decoded.
- CharSource: wraps a text stream whose characters are already code points.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from proplexengine.enums import SourceKind

__all__ = [
    "BinaryReadable",
    "ByteSource",
    "CharSource",
    "Source",
    "TextReadable",
]


class BinaryReadable(Protocol):
    """Anything with a ``read(n) -> bytes`` method (files opened 'rb', BytesIO, sockets)."""

    def read(self, size: int = -1, /) -> bytes: ...


class TextReadable(Protocol):
    """Anything with a ``read(n) -> str`` method (files opened 'r', StringIO)."""

    def read(self, size: int = -1, /) -> str: ...


@dataclass(frozen=True, slots=True)
class ByteSource:
    """Byte stream source with implicit ISO-8859-1 decoding.

    Example:
        >>> source = ByteSource.from_bytes(b"caf\\xe9")
        >>> source.read(8192)
        'café'
        >>> source.read(8192)
        ''
    """

    stream: BinaryReadable

    @property
    def kind(self) -> SourceKind:
        """Source kind tag."""
        return SourceKind.BYTES

    @classmethod
    def from_bytes(cls, data: bytes) -> ByteSource:
        """Create a source over an in-memory byte string."""
        return cls(io.BytesIO(data))

    def read(self, capacity: int) -> str:
        """Read up to ``capacity`` bytes as code points.

        Latin-1 decoding is the identity map from byte values to code
        points 0-255, so it is exactly zero extension.

        Returns:
            Decoded chunk; empty string at end of input
        """
        data = self.stream.read(capacity)
        if not data:
            return ""
        return bytes(data).decode("latin-1")


@dataclass(frozen=True, slots=True)
class CharSource:
    """Character stream source.

    Example:
        >>> source = CharSource.from_text("key=value")
        >>> source.read(3)
        'key'
    """

    reader: TextReadable

    @property
    def kind(self) -> SourceKind:
        """Source kind tag."""
        return SourceKind.CHARS

    @classmethod
    def from_text(cls, text: str) -> CharSource:
        """Create a source over an in-memory string.

        ``newline=""`` keeps CR and CRLF terminators intact so the line
        reader sees the raw characters.
        """
        return cls(io.StringIO(text, newline=""))

    def read(self, capacity: int) -> str:
        """Read up to ``capacity`` characters.

        Returns:
            Chunk of text; empty string at end of input
        """
        return self.reader.read(capacity) or ""


Source: TypeAlias = ByteSource | CharSource

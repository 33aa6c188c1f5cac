"""Key/value splitting and the per-line load loop.

For each logical line produced by the LineReader, the parser:

1. Scans for the end of the key: the first unescaped ``=``, ``:`` or
   whitespace character. The whole line is the key if none is found.
2. Skips whitespace before the value, consuming at most one ``=``/``:``
   if the key was ended by whitespace alone.
3. Decodes escapes in the key and the value independently.

Forms that resolve identically::

    key=value   key:value   key value   key = value   key :   value

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from proplexengine.constants import BACKSLASH, END_OF_INPUT, KEY_VALUE_SEPARATORS, WHITESPACE
from proplexengine.diagnostics import MalformedEscapeError
from proplexengine.syntax.escapes import CharBuffer, load_convert
from proplexengine.syntax.line_reader import LineReader
from proplexengine.syntax.source import ByteSource, CharSource

__all__ = [
    "EntrySplit",
    "PropertiesParser",
    "PropertySink",
    "parse_entry",
    "split_entry",
]

logger = logging.getLogger(__name__)


class PropertySink(Protocol):
    """Destination for decoded entries (dict, Properties, any MutableMapping)."""

    def __setitem__(self, key: str, value: str, /) -> None: ...


@dataclass(frozen=True, slots=True)
class EntrySplit:
    """Boundaries of the key and value within a logical line.

    Attributes:
        key_length: Number of code points in the (still escaped) key
        value_start: Offset of the first value code point
        has_separator: True if an ``=`` or ``:`` separator was consumed
    """

    key_length: int
    value_start: int
    has_separator: bool


def split_entry(chars: CharBuffer, limit: int) -> EntrySplit:
    """Locate the key/value boundary in ``chars[:limit]``.

    Example:
        >>> split_entry("a = b", 5)
        EntrySplit(key_length=1, value_start=4, has_separator=True)
        >>> split_entry("a", 1)
        EntrySplit(key_length=1, value_start=1, has_separator=False)
    """
    key_length = 0
    value_start = limit
    has_separator = False
    preceding_backslash = False

    while key_length < limit:
        c = chars[key_length]
        if not preceding_backslash:
            if c in KEY_VALUE_SEPARATORS:
                value_start = key_length + 1
                has_separator = True
                break
            if c in WHITESPACE:
                value_start = key_length + 1
                break
        if c == BACKSLASH:
            preceding_backslash = not preceding_backslash
        else:
            preceding_backslash = False
        key_length += 1

    while value_start < limit:
        c = chars[value_start]
        if c not in WHITESPACE:
            if not has_separator and c in KEY_VALUE_SEPARATORS:
                has_separator = True
            else:
                break
        value_start += 1

    return EntrySplit(key_length, value_start, has_separator)


def parse_entry(
    chars: CharBuffer,
    limit: int,
    *,
    line_number: int = 0,
) -> tuple[str, str] | None:
    """Decode one logical line into a (key, value) pair.

    Args:
        chars: Logical line content
        limit: Number of valid code points in ``chars``
        line_number: Physical line number for diagnostics (0 if unknown)

    Returns:
        Decoded (key, value), or None for an empty line

    Raises:
        MalformedEscapeError: If the key or value has a bad \\uXXXX escape

    Example:
        >>> parse_entry("greeting = Hello\\\\tworld", 23)
        ('greeting', 'Hello\\tworld')
    """
    if limit <= 0:
        return None
    split = split_entry(chars, limit)
    key = load_convert(chars, 0, split.key_length, line_number=line_number)
    value = load_convert(
        chars, split.value_start, limit - split.value_start, line_number=line_number
    )
    return key, value


class PropertiesParser:
    """Loads decoded entries from a LineReader into a mapping.

    Stateless between loads; one instance can serve any number of readers.

    Attributes:
        max_line_length: Line buffer limit for readers created by parse()/parse_bytes()
    """

    __slots__ = ("_max_line_length",)

    def __init__(self, *, max_line_length: int | None = None) -> None:
        """Initialize parser.

        Args:
            max_line_length: Maximum logical line length for readers this
                parser creates itself (default: MAX_LINE_LENGTH)
        """
        self._max_line_length = max_line_length

    @property
    def max_line_length(self) -> int | None:
        """Line buffer limit passed to internally created readers."""
        return self._max_line_length

    def iter_entries(self, reader: LineReader) -> Iterator[tuple[str, str]]:
        """Yield decoded (key, value) pairs until the reader is exhausted.

        Raises:
            MalformedEscapeError: On the first bad \\uXXXX escape
        """
        buffer = reader.line_buffer
        while (limit := reader.read_line()) != END_OF_INPUT:
            entry = parse_entry(buffer, limit, line_number=reader.line_number)
            if entry is not None:
                yield entry

    def load(self, reader: LineReader, destination: PropertySink) -> int:
        """Insert every entry from ``reader`` into ``destination``.

        Later duplicates overwrite earlier ones. Entries inserted before a
        malformed escape stay in ``destination``.

        Returns:
            Number of entries inserted (including overwrites)

        Raises:
            MalformedEscapeError: On the first bad \\uXXXX escape
        """
        count = 0
        seen: set[str] = set()
        try:
            for key, value in self.iter_entries(reader):
                if key in seen:
                    logger.warning(
                        "Duplicate key '%s' on line %d overwrites earlier value",
                        key,
                        reader.line_number,
                    )
                seen.add(key)
                destination[key] = value
                count += 1
                logger.debug("Loaded property: %s", key)
        except MalformedEscapeError as e:
            logger.error("Load aborted after %d entries: %s", count, e.diagnostic or e)
            raise
        logger.info("Loaded %d entries from %s source", count, reader.source_kind)
        return count

    def parse(self, text: str) -> dict[str, str]:
        """Parse properties text into a new dict."""
        reader = LineReader.from_source(
            CharSource.from_text(text), max_line_length=self._max_line_length
        )
        result: dict[str, str] = {}
        self.load(reader, result)
        return result

    def parse_bytes(self, data: bytes) -> dict[str, str]:
        """Parse ISO-8859-1 encoded properties bytes into a new dict."""
        reader = LineReader.from_source(
            ByteSource.from_bytes(data), max_line_length=self._max_line_length
        )
        result: dict[str, str] = {}
        self.load(reader, result)
        return result

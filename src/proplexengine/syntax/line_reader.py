"""Logical line assembly for .properties input.

The LineReader turns a raw Source into logical lines, one at a time:

- Comment lines (first non-blank character ``#`` or ``!``) are dropped
- Blank lines are dropped
- Leading whitespace (space, tab, form feed) is trimmed
- A physical line ending in an odd number of backslashes is joined with
  the next physical line, whose leading whitespace is also trimmed
- CR, LF and CRLF all terminate a physical line

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Fully supported (counted as one terminator)
    - CR-only (Classic Mac, \\r): Fully supported

Buffers:
    The logical line is written into a reusable LineBuffer owned by the
    reader. ``read_line()`` returns the length of the valid prefix; content
    past that length is stale and must not be interpreted.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from proplexengine.constants import (
    BACKSLASH,
    COMMENT_MARKERS,
    END_OF_INPUT,
    INPUT_CHUNK_CAPACITY,
    LINE_BUFFER_INITIAL_CAPACITY,
    LINE_TERMINATORS,
    MAX_LINE_LENGTH,
    WHITESPACE,
)
from proplexengine.diagnostics import (
    ErrorTemplate,
    PropertiesConfigurationError,
    PropertiesLineTooLongError,
)
from proplexengine.enums import SourceKind
from proplexengine.syntax.source import (
    BinaryReadable,
    ByteSource,
    CharSource,
    Source,
    TextReadable,
)

__all__ = ["LineBuffer", "LineReader"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LineBuffer:
    """Growable code point buffer with explicit capacity.

    Capacity starts at LINE_BUFFER_INITIAL_CAPACITY and doubles whenever
    the buffer fills up, clamped to ``max_length``.

    Mutability Note:
        Intentionally mutable. The same buffer is reused for every logical
        line produced by one LineReader.

    Attributes:
        max_length: Largest capacity the buffer may grow to
    """

    max_length: int = MAX_LINE_LENGTH
    _chars: list[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate the initial storage.

        Raises:
            ValueError: If max_length is less than 1
        """
        if self.max_length < 1:
            msg = f"LineBuffer.max_length must be >= 1, got {self.max_length}"
            raise ValueError(msg)
        self._chars = [""] * min(LINE_BUFFER_INITIAL_CAPACITY, self.max_length)

    @property
    def capacity(self) -> int:
        """Number of code points the buffer can currently hold."""
        return len(self._chars)

    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def store(self, index: int, char: str) -> None:
        """Write ``char`` at ``index`` (must be below capacity)."""
        self._chars[index] = char

    def grow(self) -> bool:
        """Double the capacity, clamped to max_length.

        Existing content is preserved.

        Returns:
            False if the buffer is already at max_length, True otherwise
        """
        current = len(self._chars)
        new_capacity = min(current * 2, self.max_length)
        if new_capacity <= current:
            return False
        self._chars.extend([""] * (new_capacity - current))
        return True

    def text(self, start: int, end: int) -> str:
        """Return the code points in ``[start, end)`` as a string."""
        return "".join(self._chars[start:end])


class LineReader:
    """Streaming assembler of logical lines.

    Exactly one source is bound at construction and never swapped. A reader
    is not reusable across sources.

    Example:
        >>> import io
        >>> reader = LineReader(stream=io.BytesIO(b"# c\\nkey = a\\\\\\n   b\\n"))
        >>> length = reader.read_line()
        >>> reader.line_buffer.text(0, length)
        'key = ab'
        >>> reader.read_line()
        -1

    Attributes:
        source: The bound Source variant
        line_buffer: Reusable buffer holding the last logical line
    """

    __slots__ = (
        "_chunk",
        "_limit",
        "_line_number",
        "_offset",
        "_previous",
        "_terminators",
        "line_buffer",
        "source",
    )

    def __init__(
        self,
        *,
        stream: BinaryReadable | None = None,
        reader: TextReadable | None = None,
        max_line_length: int | None = None,
    ) -> None:
        """Bind the reader to a byte stream or a character stream.

        If both are given the byte stream is used.

        Args:
            stream: Binary stream; bytes are decoded as ISO-8859-1
            reader: Text stream
            max_line_length: Maximum logical line length in code points
                (default: MAX_LINE_LENGTH)

        Raises:
            PropertiesConfigurationError: If neither stream nor reader is given
        """
        source: Source
        if stream is not None:
            source = ByteSource(stream)
        elif reader is not None:
            source = CharSource(reader)
        else:
            raise PropertiesConfigurationError(ErrorTemplate.source_missing())
        self.source = source
        self.line_buffer = LineBuffer(
            max_line_length if max_line_length is not None else MAX_LINE_LENGTH
        )
        self._chunk = ""
        self._offset = 0
        self._limit = 0
        self._terminators = 0
        self._previous = ""
        self._line_number = 0
        logger.debug("LineReader bound to %s source", source.kind)

    @classmethod
    def from_source(cls, source: Source, *, max_line_length: int | None = None) -> LineReader:
        """Create a reader over an existing Source variant."""
        match source:
            case ByteSource(stream=stream):
                return cls(stream=stream, max_line_length=max_line_length)
            case CharSource(reader=reader):
                return cls(reader=reader, max_line_length=max_line_length)

    @property
    def source_kind(self) -> SourceKind:
        """Kind of the bound source."""
        return self.source.kind

    @property
    def line_number(self) -> int:
        """Physical line (1-indexed) on which the last returned logical line started.

        0 before any line has been returned.
        """
        return self._line_number

    def _fill(self) -> int:
        """Refill the input chunk from the source.

        Returns:
            Number of code points read (0 at end of input)
        """
        self._chunk = self.source.read(INPUT_CHUNK_CAPACITY)
        self._offset = 0
        self._limit = len(self._chunk)
        return self._limit

    def read_line(self) -> int:  # noqa: PLR0912 - single-pass state machine
        """Assemble the next logical line into ``line_buffer``.

        Returns:
            Length of the logical line, or END_OF_INPUT when no lines remain

        Raises:
            PropertiesLineTooLongError: If the logical line outgrows max_line_length
        """
        buffer = self.line_buffer
        length = 0
        line_start = 0
        is_new_line = True
        skip_whitespace = True
        is_comment_line = False
        appended_line_begin = False
        preceding_backslash = False
        skip_lf = False

        while True:
            if self._offset >= self._limit and self._fill() <= 0:
                if length == 0 or is_comment_line:
                    return END_OF_INPUT
                self._line_number = line_start
                # An unescaped backslash right before EOF has nothing to join.
                return length - 1 if preceding_backslash else length

            c = self._chunk[self._offset]
            self._offset += 1

            if c == "\n":
                if self._previous != "\r":
                    self._terminators += 1
            elif c == "\r":
                self._terminators += 1
            self._previous = c

            if skip_lf:
                skip_lf = False
                if c == "\n":
                    continue

            if skip_whitespace:
                if c in WHITESPACE:
                    continue
                if not appended_line_begin and c in LINE_TERMINATORS:
                    continue
                skip_whitespace = False
                appended_line_begin = False

            if is_new_line:
                is_new_line = False
                if c in COMMENT_MARKERS:
                    is_comment_line = True
                    continue

            if c not in LINE_TERMINATORS:
                if is_comment_line:
                    continue
                if length == buffer.capacity:
                    raise PropertiesLineTooLongError(
                        ErrorTemplate.line_too_long(buffer.max_length, line_start)
                    )
                if line_start == 0:
                    line_start = self._terminators + 1
                buffer.store(length, c)
                length += 1
                if length == buffer.capacity:
                    buffer.grow()
                # Toggle, so an escaped backslash cancels the escape.
                if c == BACKSLASH:
                    preceding_backslash = not preceding_backslash
                else:
                    preceding_backslash = False
                continue

            # Reached end of a physical line.
            if is_comment_line or length == 0:
                is_comment_line = False
                is_new_line = True
                skip_whitespace = True
                line_start = 0
                length = 0
                continue

            if self._offset >= self._limit and self._fill() <= 0:
                self._line_number = line_start
                return length - 1 if preceding_backslash else length

            if preceding_backslash:
                # Continuation: drop the backslash, trim the next line's indent.
                length -= 1
                skip_whitespace = True
                appended_line_begin = True
                preceding_backslash = False
                if c == "\r":
                    skip_lf = True
            else:
                self._line_number = line_start
                return length

    def __iter__(self) -> Iterator[str]:
        """Yield each remaining logical line as a string."""
        while (length := self.read_line()) != END_OF_INPUT:
            yield self.line_buffer.text(0, length)

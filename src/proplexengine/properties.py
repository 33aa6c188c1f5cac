"""Properties mapping with a defaults chain.

A Properties object is a mutable string-keyed mapping that can delegate
lookups to another Properties object (its defaults). Loading methods feed
decoded entries from the syntax layer straight into the mapping.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping

from proplexengine.syntax.line_reader import LineReader
from proplexengine.syntax.parser import PropertiesParser
from proplexengine.syntax.source import BinaryReadable, ByteSource, CharSource, TextReadable

__all__ = ["Properties"]


class Properties(MutableMapping[str, object]):
    """String-keyed property table with optional defaults.

    Mapping operations (``[]``, ``in``, ``len``, iteration) only see this
    object's own entries. ``get_property`` and ``property_names`` also
    consult the defaults chain.

    Values loaded from text are always ``str``. Other values can be stored
    through ``props[key] = value``; ``get_property`` and
    ``string_property_names`` ignore them.

    Example:
        >>> defaults = Properties()
        >>> defaults.loads("color = blue\\nsize = 10")
        >>> props = Properties(defaults)
        >>> props.loads("color = red")
        >>> props.get_property("color"), props.get_property("size")
        ('red', '10')
        >>> props.get_property("missing", "n/a")
        'n/a'
    """

    __slots__ = ("_entries", "_parser", "defaults")

    def __init__(
        self,
        defaults: Properties | None = None,
        *,
        max_line_length: int | None = None,
    ) -> None:
        """Initialize an empty property table.

        Args:
            defaults: Fallback table consulted by get_property()
            max_line_length: Maximum logical line length when loading
        """
        self._entries: dict[str, object] = {}
        self._parser = PropertiesParser(max_line_length=max_line_length)
        self.defaults = defaults

    # Mapping protocol

    def __getitem__(self, key: str) -> object:
        return self._entries[key]

    def __setitem__(self, key: str, value: object) -> None:
        self._entries[key] = value

    def __delitem__(self, key: str) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Properties({self._entries!r}, defaults={self.defaults!r})"

    # Property access

    def get_property(self, key: str, default: str | None = None) -> str | None:
        """Look up a string property, searching the defaults chain.

        Args:
            key: Property key
            default: Returned when no string value exists anywhere in the chain

        Returns:
            The stored string value, else the defaults' value, else ``default``
        """
        value = self._entries.get(key)
        if isinstance(value, str):
            return value
        if self.defaults is not None:
            return self.defaults.get_property(key, default)
        return default

    def set_property(self, key: str, value: str) -> object | None:
        """Store a property.

        Returns:
            The previous value for ``key``, or None
        """
        previous = self._entries.get(key)
        self._entries[key] = value
        return previous

    def property_names(self) -> set[str]:
        """All keys in this table and its defaults chain."""
        names: dict[str, object] = {}
        self._enumerate(names)
        return set(names)

    def string_property_names(self) -> set[str]:
        """Keys with a string value in this table or its defaults chain."""
        names: dict[str, str] = {}
        self._enumerate_strings(names)
        return set(names)

    def _enumerate(self, into: dict[str, object]) -> None:
        if self.defaults is not None:
            self.defaults._enumerate(into)  # noqa: SLF001 - same class
        into.update(self._entries)

    def _enumerate_strings(self, into: dict[str, str]) -> None:
        if self.defaults is not None:
            self.defaults._enumerate_strings(into)  # noqa: SLF001 - same class
        for key, value in self._entries.items():
            if isinstance(key, str) and isinstance(value, str):
                into[key] = value

    # Loading

    def load(self, stream: BinaryReadable) -> None:
        """Load entries from a binary stream (ISO-8859-1 with \\uXXXX escapes).

        Raises:
            MalformedEscapeError: On a bad \\uXXXX escape; entries from
                earlier lines remain loaded
        """
        self._parser.load(self._reader_for(ByteSource(stream)), self)

    def load_from_reader(self, reader: TextReadable) -> None:
        """Load entries from a text stream.

        Raises:
            MalformedEscapeError: On a bad \\uXXXX escape
        """
        self._parser.load(self._reader_for(CharSource(reader)), self)

    def loads(self, text: str) -> None:
        """Load entries from a string."""
        self._parser.load(self._reader_for(CharSource.from_text(text)), self)

    def load_bytes(self, data: bytes) -> None:
        """Load entries from ISO-8859-1 encoded bytes."""
        self._parser.load(self._reader_for(ByteSource.from_bytes(data)), self)

    def _reader_for(self, source: ByteSource | CharSource) -> LineReader:
        return LineReader.from_source(source, max_line_length=self._parser.max_line_length)

"""Properties syntax package.

Provides the raw sources, the logical line reader, escape decoding and the
key/value parser. Separate from the Properties mapping to enable tooling
(linters, converters) that only needs decoded entries.

Python 3.13+.
"""

from .escapes import classify_hex_digit, load_convert
from .line_reader import LineBuffer, LineReader
from .parser import EntrySplit, PropertiesParser, PropertySink, parse_entry, split_entry
from .source import ByteSource, CharSource, Source

__all__ = [
    "ByteSource",
    "CharSource",
    "EntrySplit",
    "LineBuffer",
    "LineReader",
    "PropertiesParser",
    "PropertySink",
    "Source",
    "classify_hex_digit",
    "load_convert",
    "parse",
    "parse_bytes",
    "parse_entry",
    "split_entry",
]


def parse(text: str) -> dict[str, str]:
    """Parse properties text into a dict.

    Convenience function for PropertiesParser().parse().

    Example:
        >>> from proplexengine.syntax import parse
        >>> parse("greeting = Hello")
        {'greeting': 'Hello'}
    """
    return PropertiesParser().parse(text)


def parse_bytes(data: bytes) -> dict[str, str]:
    """Parse ISO-8859-1 encoded properties bytes into a dict.

    Example:
        >>> from proplexengine.syntax import parse_bytes
        >>> parse_bytes(b"name=caf\\\\u00e9")
        {'name': 'café'}
    """
    return PropertiesParser().parse_bytes(data)

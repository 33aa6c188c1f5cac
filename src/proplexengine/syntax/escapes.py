"""Escape decoding for keys and values.

Recognized escapes:

    \\uXXXX   UTF-16 code unit from exactly four hex digits
    \\t \\r \\n \\f   TAB, CR, LF, FORM FEED
    \\<any>   The character itself (\\\\, \\#, \\=, \\:, \\<space>, ...)

A NUL character outside an escape ends decoding of the substring early.
Decoded surrogate pairs (``\\uD83D\\uDE00``) are combined into a single
code point; unpaired surrogates are kept as-is.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn, Protocol, TypeAlias

from proplexengine.constants import BACKSLASH, NUL
from proplexengine.diagnostics import ErrorTemplate, MalformedEscapeError

__all__ = [
    "CharBuffer",
    "Digit",
    "HexLetterLower",
    "HexLetterUpper",
    "Other",
    "classify_hex_digit",
    "load_convert",
]

_SIMPLE_ESCAPES = {"t": "\t", "r": "\r", "n": "\n", "f": "\f"}


class CharBuffer(Protocol):
    """Indexable sequence of single-character strings (str or LineBuffer)."""

    def __getitem__(self, index: int, /) -> str: ...


@dataclass(frozen=True, slots=True)
class Digit:
    """Hex digit 0-9."""

    value: int


@dataclass(frozen=True, slots=True)
class HexLetterLower:
    """Hex digit a-f."""

    value: int


@dataclass(frozen=True, slots=True)
class HexLetterUpper:
    """Hex digit A-F."""

    value: int


@dataclass(frozen=True, slots=True)
class Other:
    """Not a hex digit."""


HexClass: TypeAlias = Digit | HexLetterLower | HexLetterUpper | Other


def classify_hex_digit(char: str) -> HexClass:
    """Classify a character for \\uXXXX decoding.

    Only ASCII digits and letters qualify; other Unicode digits are Other.

    Example:
        >>> classify_hex_digit("7")
        Digit(value=7)
        >>> classify_hex_digit("b")
        HexLetterLower(value=11)
        >>> classify_hex_digit("F")
        HexLetterUpper(value=15)
        >>> classify_hex_digit("g")
        Other()
    """
    if "0" <= char <= "9":
        return Digit(ord(char) - ord("0"))
    if "a" <= char <= "f":
        return HexLetterLower(10 + ord(char) - ord("a"))
    if "A" <= char <= "F":
        return HexLetterUpper(10 + ord(char) - ord("A"))
    return Other()


def _join_surrogates(text: str) -> str:
    """Combine UTF-16 surrogate pairs into code points, keeping lone surrogates."""
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def load_convert(
    chars: CharBuffer,
    offset: int,
    length: int,
    *,
    line_number: int = 0,
) -> str:
    """Decode escape sequences in ``chars[offset:offset + length]``.

    Args:
        chars: Logical line content
        offset: Start of the key or value substring
        length: Number of code points in the substring
        line_number: Physical line number for diagnostics (0 if unknown)

    Returns:
        Decoded text

    Raises:
        MalformedEscapeError: If a \\u escape has a non-hex digit or fewer
            than four characters remain in the substring

    Example:
        >>> load_convert("a\\\\tb\\\\u0041", 0, 10)
        'a\\tbA'
    """
    end = offset + length
    out: list[str] = []
    has_surrogate = False
    pos = offset
    while pos < end:
        char = chars[pos]
        pos += 1
        if char != BACKSLASH:
            if char == NUL:
                break
            out.append(char)
            continue

        if pos >= end:
            # Lone trailing backslash escapes nothing.
            break
        escape_start = pos - 1
        char = chars[pos]
        pos += 1
        if char != "u":
            out.append(_SIMPLE_ESCAPES.get(char, char))
            continue

        value = 0
        for _ in range(4):
            if pos >= end:
                _raise_malformed(chars, escape_start, end, line_number)
            match classify_hex_digit(chars[pos]):
                case Digit(digit) | HexLetterLower(digit) | HexLetterUpper(digit):
                    value = (value << 4) + digit
                case Other():
                    _raise_malformed(chars, escape_start, min(pos + 1, end), line_number)
            pos += 1
        if 0xD800 <= value <= 0xDFFF:
            has_surrogate = True
        out.append(chr(value))

    text = "".join(out)
    return _join_surrogates(text) if has_surrogate else text


def _raise_malformed(chars: CharBuffer, start: int, stop: int, line_number: int) -> NoReturn:
    escape = "".join(chars[i] for i in range(start, stop))
    raise MalformedEscapeError(
        ErrorTemplate.malformed_unicode_escape(escape, start, line_number),
        escape=escape,
        offset=start,
        line_number=line_number,
    )

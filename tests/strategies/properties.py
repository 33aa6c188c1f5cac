"""Hypothesis strategies for .properties text.

Provides keys, values, comment and blank lines, line terminators, and a
test-only encoder producing the escaped on-disk form of a key or value.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - props_terminator={lf|crlf|cr}: Line terminator variant
    - props_filler={comment_hash|comment_bang|blank}: Non-entry line kind
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

_SIMPLE_ESCAPES = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}

# Characters needing a backslash to keep their literal meaning.
_STRUCTURAL = "=:#!\\"

SAFE_KEY_CHARS = string.ascii_letters + string.digits + "._-"
SAFE_VALUE_CHARS = string.ascii_letters + string.digits + "._-/"

LINE_TERMINATORS = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}


def encode_text(text: str, *, is_key: bool) -> str:
    """Escape ``text`` so that decoding it yields ``text`` again.

    Every non-printable or non-ASCII character becomes a \\uXXXX escape
    (as a surrogate pair above U+FFFF). Spaces are escaped everywhere in
    keys and only at the start of values.
    """
    out: list[str] = []
    for index, char in enumerate(text):
        code = ord(char)
        if char == " ":
            out.append("\\ " if is_key or index == 0 else " ")
        elif char in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[char])
        elif char in _STRUCTURAL:
            out.append("\\" + char)
        elif code > 0xFFFF:
            code -= 0x10000
            out.append(f"\\u{0xD800 + (code >> 10):04X}\\u{0xDC00 + (code & 0x3FF):04X}")
        elif code < 0x20 or code > 0x7E:
            out.append(f"\\u{code:04X}")
        else:
            out.append(char)
    return "".join(out)


def encode_entry(key: str, value: str) -> str:
    """Encode one entry as a single physical line without terminator."""
    return f"{encode_text(key, is_key=True)}={encode_text(value, is_key=False)}"


# Any text without lone surrogates (paired \\u escapes recombine on decode).
unicode_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    max_size=40,
)

simple_keys = st.text(alphabet=SAFE_KEY_CHARS, min_size=1, max_size=20)
simple_values = st.text(alphabet=SAFE_VALUE_CHARS, max_size=30)

latin1_text = st.text(
    alphabet=st.characters(max_codepoint=0xFF, blacklist_characters="\r\n"),
    max_size=60,
)


@composite
def line_terminators(draw: st.DrawFn) -> str:
    """Draw one of LF, CRLF, CR."""
    name = draw(st.sampled_from(sorted(LINE_TERMINATORS)))
    event(f"props_terminator={name}")
    return LINE_TERMINATORS[name]


@composite
def filler_lines(draw: st.DrawFn) -> str:
    """Generate a comment or blank line (no terminator).

    Comments may end in backslashes, which must not continue them.
    """
    kind = draw(st.sampled_from(["comment_hash", "comment_bang", "blank"]))
    event(f"props_filler={kind}")
    indent = draw(st.text(alphabet=" \t\f", max_size=4))
    if kind == "blank":
        return indent
    marker = "#" if kind == "comment_hash" else "!"
    body = draw(
        st.text(
            alphabet=st.characters(blacklist_categories=("Cs",), blacklist_characters="\r\n"),
            max_size=30,
        )
    )
    return indent + marker + body


@composite
def simple_entries(draw: st.DrawFn) -> dict[str, str]:
    """Generate a small dict of plain ASCII entries."""
    return draw(st.dictionaries(simple_keys, simple_values, max_size=8))


@composite
def separators(draw: st.DrawFn) -> str:
    """Generate an ``=``/``:``/whitespace separator with optional padding."""
    pad_before = draw(st.text(alphabet=" \t\f", max_size=3))
    pad_after = draw(st.text(alphabet=" \t\f", max_size=3))
    mark = draw(st.sampled_from(["=", ":", ""]))
    if mark == "" and pad_before == "" and pad_after == "":
        pad_before = " "
    return pad_before + mark + pad_after

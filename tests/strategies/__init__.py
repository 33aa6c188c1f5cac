"""Hypothesis strategies for PropLexEngine property-based testing.

Strategies are organized by domain:

- properties: keys, values, comment/blank lines, terminators, and the
  test-only escape encoder used by round-trip properties

Usage:
    from tests.strategies import encode_entry, line_terminators
"""

from .properties import (
    LINE_TERMINATORS,
    SAFE_KEY_CHARS,
    SAFE_VALUE_CHARS,
    encode_entry,
    encode_text,
    filler_lines,
    latin1_text,
    line_terminators,
    separators,
    simple_entries,
    simple_keys,
    simple_values,
    unicode_text,
)

__all__ = [
    "LINE_TERMINATORS",
    "SAFE_KEY_CHARS",
    "SAFE_VALUE_CHARS",
    "encode_entry",
    "encode_text",
    "filler_lines",
    "latin1_text",
    "line_terminators",
    "separators",
    "simple_entries",
    "simple_keys",
    "simple_values",
    "unicode_text",
]

"""Property-based tests for .properties parsing.

Round-trips entries through the escape encoder, and checks terminator
equivalence, continuation parity, filler lines and byte/char agreement.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from hypothesis import assume, event, given
from hypothesis import strategies as st

from proplexengine import MalformedEscapeError
from proplexengine.constants import INPUT_CHUNK_CAPACITY
from proplexengine.syntax import parse, parse_bytes
from tests.strategies import (
    LINE_TERMINATORS,
    encode_entry,
    filler_lines,
    latin1_text,
    line_terminators,
    separators,
    simple_entries,
    simple_keys,
    simple_values,
    unicode_text,
)


def _outcome(parse_fn: Callable[[Any], dict[str, str]], data: str | bytes) -> object:
    """Parse result, or the exception type for malformed input."""
    try:
        return parse_fn(data)
    except MalformedEscapeError:
        return MalformedEscapeError


class TestRoundTrip:
    """Encoded entries decode back to the original key and value."""

    @given(key=unicode_text, value=unicode_text)
    def test_single_entry(self, key: str, value: str) -> None:
        assert parse(encode_entry(key, value)) == {key: value}

    @given(
        entries=st.dictionaries(unicode_text, unicode_text, max_size=6),
        terminator=line_terminators(),
    )
    def test_many_entries(self, entries: dict[str, str], terminator: str) -> None:
        event(f"entry_count={len(entries)}")
        text = terminator.join(encode_entry(k, v) for k, v in entries.items())

        assert parse(text) == entries

    @given(text=latin1_text)
    def test_reencoding_parsed_output_is_stable(self, text: str) -> None:
        try:
            first = parse(text)
        except MalformedEscapeError:
            event("outcome=malformed")
            assume(False)
        event(f"outcome={'empty' if not first else 'entries'}")
        reencoded = "\n".join(encode_entry(k, v) for k, v in first.items())

        assert parse(reencoded) == first


class TestLineStructure:
    """Comments, blank lines, separators and terminators."""

    @given(
        fillers=st.lists(filler_lines(), max_size=6),
        terminator=line_terminators(),
    )
    def test_filler_lines_produce_no_entries(self, fillers: list[str], terminator: str) -> None:
        assert parse(terminator.join(fillers)) == {}

    @given(
        entries=simple_entries(),
        fillers=st.lists(filler_lines(), min_size=1, max_size=4),
    )
    def test_fillers_between_entries_are_ignored(
        self, entries: dict[str, str], fillers: list[str]
    ) -> None:
        lines: list[str] = []
        for index, (key, value) in enumerate(entries.items()):
            lines.append(fillers[index % len(fillers)])
            lines.append(f"{key}={value}")

        assert parse("\n".join(lines)) == entries

    @given(entries=simple_entries())
    def test_all_terminators_equivalent(self, entries: dict[str, str]) -> None:
        results = [
            parse(terminator.join(f"{k}={v}" for k, v in entries.items()))
            for terminator in LINE_TERMINATORS.values()
        ]

        assert results[0] == results[1] == results[2] == entries

    @given(key=simple_keys, value=simple_values, separator=separators())
    def test_separator_forms(self, key: str, value: str, separator: str) -> None:
        """Any separator spelling yields the same entry."""
        assert parse(f"{key}{separator}{value}") == {key: value}


class TestContinuation:
    """Backslash parity decides whether a line continues."""

    @given(
        key=simple_keys,
        head=simple_values,
        tail=simple_keys,
        backslashes=st.integers(min_value=1, max_value=6),
        terminator=line_terminators(),
        indent=st.text(alphabet=" \t\f", max_size=4),
    )
    def test_backslash_parity(
        self,
        key: str,
        head: str,
        tail: str,
        backslashes: int,
        terminator: str,
        indent: str,
    ) -> None:
        assume(tail != key)
        run = "\\" * backslashes
        text = f"{key}={head}{run}{terminator}{indent}{tail}"

        result = parse(text)

        if backslashes % 2:
            event("parity=odd")
            assert result == {key: head + "\\" * (backslashes // 2) + tail}
        else:
            event("parity=even")
            assert result == {key: head + "\\" * (backslashes // 2), tail: ""}

    @pytest.mark.parametrize("padding", range(INPUT_CHUNK_CAPACITY - 12, INPUT_CHUNK_CAPACITY + 4))
    def test_continuation_across_chunk_boundary(self, padding: int) -> None:
        text = "#" + "x" * padding + "\r\nk=a\\\r\n  b\r\n"

        assert parse(text) == {"k": "ab"}


class TestSourceAgreement:
    """Byte and character sources agree on ISO-8859-1 text."""

    @given(text=latin1_text)
    def test_bytes_match_chars(self, text: str) -> None:
        assert _outcome(parse_bytes, text.encode("latin-1")) == _outcome(parse, text)

    @given(lines=st.lists(latin1_text, max_size=5), terminator=line_terminators())
    def test_multiline_bytes_match_chars(self, lines: list[str], terminator: str) -> None:
        text = terminator.join(lines)

        assert _outcome(parse_bytes, text.encode("latin-1")) == _outcome(parse, text)

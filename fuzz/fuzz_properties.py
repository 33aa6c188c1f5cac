#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: properties - Line Assembly, Escapes & Source Agreement
# Intentional: This header is intentionally placed for dynamic plugin discovery.
# CRITICAL: DO NOT REMOVE THIS HEADER - REQUIRED FOR PLUGIN DISCOVERY
# FUZZ_PLUGIN_HEADER_END
"""Properties Parser Fuzzer (Atheris).

Targets: proplexengine.syntax.parser.PropertiesParser
Feeds arbitrary input through the byte and character sources and checks
that both agree, and that only MalformedEscapeError escapes the parser.

Built for Python 3.13+.
"""

from __future__ import annotations

import atexit
import io
import json
import logging
import sys
from typing import TypeAlias

# --- PEP 695 Type Aliases ---
FuzzStats: TypeAlias = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0, "malformed": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("proplexengine").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["proplexengine"]):
    from proplexengine.diagnostics import MalformedEscapeError
    from proplexengine.syntax.line_reader import LineReader
    from proplexengine.syntax.parser import PropertiesParser

_STRUCTURAL = ["=", ":", " ", "\t", "\f", "\\", "#", "!", "\r", "\n", "\r\n", "\\u", "\x00"]


def _parse_outcome(parser: PropertiesParser, data: bytes | str) -> dict[str, str] | str:
    try:
        if isinstance(data, bytes):
            return parser.parse_bytes(data)
        return parser.parse(data)
    except MalformedEscapeError as e:
        return f"malformed:{e.escape}:{e.line_number}"


def _record_finding(msg: str) -> None:
    # Counted by the handler in test_one_input.
    raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: byte/char agreement and line reader invariants."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    # 1. Build input: raw bytes interleaved with structural tokens
    pieces: list[str] = []
    for _ in range(fdp.ConsumeIntInRange(0, 32)):
        if fdp.ConsumeBool():
            pieces.append(fdp.PickValueInList(_STRUCTURAL))
        else:
            pieces.append(fdp.ConsumeBytes(8).decode("latin-1"))
    text = "".join(pieces)

    parser = PropertiesParser()

    # 2. Byte and character sources must agree on ISO-8859-1 input
    try:
        from_chars = _parse_outcome(parser, text)
        from_bytes = _parse_outcome(parser, text.encode("latin-1"))
        if isinstance(from_chars, str):
            _fuzz_stats["malformed"] = int(_fuzz_stats["malformed"]) + 1
        if from_chars != from_bytes:
            _record_finding(f"Byte/char mismatch: {from_chars!r} != {from_bytes!r}")

        # 3. Logical lines never carry terminators or leading whitespace
        for line in LineReader(reader=io.StringIO(text, newline="")):
            if "\r" in line or "\n" in line:
                _record_finding(f"Terminator inside logical line: {line!r}")
            if line and line[0] in " \t\f":
                _record_finding(f"Untrimmed logical line: {line!r}")

    except RecursionError:
        pass
    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()

"""Shared constants for PropLexEngine.

This module provides centralized configuration constants used across the
syntax layer and the loaders. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Buffer sizes: Input chunk and line buffer capacities
- Input limits: DoS prevention via size constraints
- Character classes: Characters with structural meaning in .properties files

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Buffer sizes
    "INPUT_CHUNK_CAPACITY",
    "LINE_BUFFER_INITIAL_CAPACITY",
    # Input limits
    "MAX_LINE_LENGTH",
    "MAX_SOURCE_SIZE",
    # Sentinels
    "END_OF_INPUT",
    # Character classes
    "WHITESPACE",
    "LINE_TERMINATORS",
    "COMMENT_MARKERS",
    "KEY_VALUE_SEPARATORS",
    "BACKSLASH",
    "NUL",
]

# ============================================================================
# BUFFER SIZES
# ============================================================================

# Number of raw units (bytes or characters) requested from a Source per refill.
INPUT_CHUNK_CAPACITY: int = 8192

# Starting capacity of the reusable logical-line buffer. Doubles on overflow.
LINE_BUFFER_INITIAL_CAPACITY: int = 1024

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Upper clamp for line buffer growth (largest signed 32-bit length).
# Doubling past this value is clamped; a full buffer at the clamp cannot grow.
MAX_LINE_LENGTH: int = 2**31 - 1

# Default maximum source size in bytes for file loading (10 MB).
# Prevents DoS attacks via unbounded memory allocation from large files.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# SENTINELS
# ============================================================================

# Returned by LineReader.read_line() once no logical lines remain.
END_OF_INPUT: int = -1

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

WHITESPACE: str = " \t\f"
LINE_TERMINATORS: str = "\r\n"
COMMENT_MARKERS: str = "#!"
KEY_VALUE_SEPARATORS: str = "=:"
BACKSLASH: str = "\\"

# Terminates escape decoding of a key or value substring.
NUL: str = "\x00"

"""PropLexEngine - streaming parser for .properties configuration text.

Reads the line-oriented key/value format with ``#``/``!`` comments,
``=``/``:``/whitespace separators, backslash line continuation and
``\\uXXXX`` escapes, reproducing the legacy semantics exactly.

Public API:
    Properties - Mutable property table with a defaults chain
    LineReader - Logical line assembler over a byte or character stream
    PropertiesParser - Key/value splitting and escape decoding
    parse_properties - Parse text to a dict
    parse_properties_bytes - Parse ISO-8859-1 bytes to a dict
    load_file - Load a .properties file into a Properties object

Exceptions:
    PropertiesError - Base exception class
    PropertiesConfigurationError - Reader constructed without a source
    PropertiesSyntaxError - Unrecoverable input error
    MalformedEscapeError - Bad \\uXXXX escape
    PropertiesLoadError - File loader rejected the path or size

Submodules:
    proplexengine.syntax - Sources, line reader, escape decoding, parser
    proplexengine.diagnostics - Error types, codes and formatting
    proplexengine.loading - File-based loaders
"""

from .diagnostics import (
    MalformedEscapeError,
    PropertiesConfigurationError,
    PropertiesError,
    PropertiesLineTooLongError,
    PropertiesLoadError,
    PropertiesSyntaxError,
)
from .loading import PathPropertiesLoader, load_file
from .properties import Properties
from .syntax import LineReader, PropertiesParser
from .syntax import parse as parse_properties
from .syntax import parse_bytes as parse_properties_bytes

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("proplexengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LineReader",
    "MalformedEscapeError",
    "PathPropertiesLoader",
    "Properties",
    "PropertiesConfigurationError",
    "PropertiesError",
    "PropertiesLineTooLongError",
    "PropertiesLoadError",
    "PropertiesParser",
    "PropertiesSyntaxError",
    "__version__",
    "load_file",
    "parse_properties",
    "parse_properties_bytes",
]

"""Quickstart example for proplexengine.

This example demonstrates loading .properties text, the defaults chain,
file loading, and structured error diagnostics.
"""

import io
import tempfile
from pathlib import Path

from proplexengine import (
    MalformedEscapeError,
    PathPropertiesLoader,
    Properties,
    PropertiesLoadError,
    parse_properties,
)
from proplexengine.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Parse text to a dict
print("=" * 50)
print("Example 1: Parse Text")
print("=" * 50)

entries = parse_properties("""
# Server settings
host = localhost
port: 8080
greeting   Hello\\tWorld
banner = Welcome to \\
         the server
""")
for key, value in entries.items():
    print(f"{key!r} -> {value!r}")
# Output:
# 'host' -> 'localhost'
# 'port' -> '8080'
# 'greeting' -> 'Hello\tWorld'
# 'banner' -> 'Welcome to the server'

# Example 2: Defaults chain
print("\n" + "=" * 50)
print("Example 2: Defaults Chain")
print("=" * 50)

defaults = Properties()
defaults.loads("timeout = 30\nretries = 3\n")

settings = Properties(defaults)
settings.loads("timeout = 5\n")

print(settings.get_property("timeout"))  # Output: 5
print(settings.get_property("retries"))  # Output: 3
print(settings.get_property("missing", "n/a"))  # Output: n/a
print(sorted(settings.property_names()))  # Output: ['retries', 'timeout']

# Example 3: Byte streams are ISO-8859-1
print("\n" + "=" * 50)
print("Example 3: Byte Streams")
print("=" * 50)

props = Properties()
props.load(io.BytesIO(b"city = K\xf6ln\nsnowman = \\u2603\n"))
print(props["city"])  # Output: Köln
print(props["snowman"])  # Output: ☃

# Example 4: Loading files from a base directory
print("\n" + "=" * 50)
print("Example 4: File Loading")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    Path(tmpdir, "app.properties").write_bytes(b"name = demo\nversion = 1.0\n")
    loader = PathPropertiesLoader(tmpdir)
    app = loader.load("app.properties")
    print(dict(app))  # Output: {'name': 'demo', 'version': '1.0'}

    try:
        loader.load("../outside.properties")
    except PropertiesLoadError as e:
        print(f"Rejected: {e.diagnostic}")
        # Output: Rejected: Path traversal sequence in resource_id: '../outside.properties'

# Example 5: Malformed escapes
print("\n" + "=" * 50)
print("Example 5: Error Diagnostics")
print("=" * 50)

broken = Properties()
try:
    broken.loads("ok = 1\nbad = \\u12zz\n")
except MalformedEscapeError as e:
    print(e)
    if e.diagnostic is not None:
        print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))
print(dict(broken))  # Output: {'ok': '1'}

"""File-based loading of .properties resources.

Provides a one-shot file loader and a directory-rooted loader with
path-traversal protection. Both resolve a path to a binary stream and
delegate to the byte-source loading path, so files are always read as
ISO-8859-1 with ``\\uXXXX`` escapes.

Components:
    load_file - Load one file into a (new or existing) Properties object
    PathPropertiesLoader - Loads resource ids relative to a fixed base directory

XML property files are not supported and are rejected up front.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from proplexengine.constants import MAX_SOURCE_SIZE
from proplexengine.diagnostics import ErrorTemplate, PropertiesLoadError
from proplexengine.properties import Properties

__all__ = ["PathPropertiesLoader", "load_file"]

logger = logging.getLogger(__name__)

_XML_SUFFIX = ".xml"


def load_file(
    path: str | os.PathLike[str],
    *,
    properties: Properties | None = None,
    max_source_size: int | None = None,
) -> Properties:
    """Load a .properties file.

    Args:
        path: File to read
        properties: Target table; a new Properties is created if omitted
        max_source_size: Maximum file size in bytes (default: 10 MB).
            Set to 0 to disable the limit (not recommended).

    Returns:
        The Properties object the entries were loaded into

    Raises:
        PropertiesLoadError: If the path names an XML file or the file
            exceeds max_source_size
        MalformedEscapeError: On a bad \\uXXXX escape
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read

    Example:
        >>> props = load_file("config/app.properties")  # doctest: +SKIP
        >>> props.get_property("db.url")  # doctest: +SKIP
        'jdbc:postgresql://localhost/app'
    """
    path_str = os.fspath(path)
    if path_str.lower().endswith(_XML_SUFFIX):
        raise PropertiesLoadError(ErrorTemplate.unsupported_format(path_str), path=path_str)

    limit = MAX_SOURCE_SIZE if max_source_size is None else max_source_size
    file_path = Path(path_str)
    size = file_path.stat().st_size
    if limit and size > limit:
        raise PropertiesLoadError(
            ErrorTemplate.source_too_large(path_str, size, limit), path=path_str
        )

    target = properties if properties is not None else Properties()
    with file_path.open("rb") as stream:
        target.load(stream)
    logger.info("Loaded properties file %s (%d bytes)", path_str, size)
    return target


@dataclass(frozen=True, slots=True)
class PathPropertiesLoader:
    """File system loader rooted at a base directory.

    Security:
        Resource ids containing "..", absolute paths, or leading path
        separators are rejected. The resolved path must also stay inside
        the base directory (symlinks are resolved before the check).

    Example:
        >>> loader = PathPropertiesLoader("config")
        >>> props = loader.load("app.properties")  # doctest: +SKIP
        # Loads from: config/app.properties

    Attributes:
        base_dir: Directory resource ids are resolved against
        max_source_size: Maximum file size in bytes (None for the default)
    """

    base_dir: str
    max_source_size: int | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved base directory."""
        object.__setattr__(self, "_resolved_root", Path(self.base_dir).resolve())

    @staticmethod
    def _validate_resource_id(resource_id: str) -> None:
        """Validate resource_id for path traversal attacks.

        Raises:
            PropertiesLoadError: If resource_id contains unsafe path components
        """
        reason = None
        if not resource_id:
            reason = "Empty path"
        elif resource_id.strip() != resource_id:
            reason = "Leading/trailing whitespace"
        elif Path(resource_id).is_absolute() or resource_id.startswith(("/", "\\")):
            reason = "Absolute path"
        elif ".." in resource_id:
            reason = "Path traversal sequence"
        if reason is not None:
            raise PropertiesLoadError(
                ErrorTemplate.unsafe_path(resource_id, reason), path=resource_id
            )

    def _is_safe_path(self, full_path: Path) -> bool:
        """Check that the resolved path lies within the base directory."""
        try:
            full_path.resolve().relative_to(self._resolved_root)
        except ValueError:
            return False
        return True

    def describe_path(self, resource_id: str) -> str:
        """Return human-readable path for diagnostics."""
        return f"{self.base_dir}/{resource_id}"

    def load(self, resource_id: str, *, properties: Properties | None = None) -> Properties:
        """Load ``base_dir/resource_id``.

        Args:
            resource_id: Relative file name (e.g. 'app.properties', 'db/pool.properties')
            properties: Target table; a new Properties is created if omitted

        Returns:
            The Properties object the entries were loaded into

        Raises:
            PropertiesLoadError: On an unsafe resource id, an XML file, or
                a file above the size limit
            FileNotFoundError: If the file doesn't exist
        """
        self._validate_resource_id(resource_id)
        full_path = self._resolved_root / resource_id
        if not self._is_safe_path(full_path):
            raise PropertiesLoadError(
                ErrorTemplate.unsafe_path(resource_id, "Resolved path escapes base directory"),
                path=resource_id,
            )
        logger.debug("Loading %s", self.describe_path(resource_id))
        return load_file(
            full_path, properties=properties, max_source_size=self.max_source_size
        )

"""Filesystem capability consumed by the module path index.

Paths crossing this boundary are posix-normalised strings so that index
lookups compare equal regardless of the host platform.
"""

import logging
import posixpath
from pathlib import Path
from typing import Protocol, runtime_checkable

from suggest_members.core.exceptions import FileReadError

logger = logging.getLogger(__name__)


def normalize_path(value: str) -> str:
    """Use forward slashes throughout."""
    return value.replace("\\", "/")


def dirname(value: str) -> str:
    """Parent directory of a normalised path; the root is its own parent."""
    return posixpath.dirname(normalize_path(value).rstrip("/") or "/")


def join_path(*segments: str) -> str:
    """Join path segments with forward slashes."""
    return normalize_path(posixpath.join(*segments))


@runtime_checkable
class Filesystem(Protocol):
    """The three filesystem operations the index needs."""

    def file_exists(self, path: str) -> bool: ...

    def read_file(self, path: str) -> str: ...

    def list_directories(self, path: str) -> list[str]: ...


class LocalFilesystem:
    """Filesystem backed by the local disk via pathlib."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def file_exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_file(self, path: str) -> str:
        """Read a text file.

        Raises:
            FileReadError: If the file is missing or unreadable
        """
        try:
            return Path(path).read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path, str(e)) from e

    def list_directories(self, path: str) -> list[str]:
        """Names of the immediate child directories of ``path``, sorted."""
        try:
            return sorted(child.name for child in Path(path).iterdir() if child.is_dir())
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return []

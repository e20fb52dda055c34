"""
Package Manifest Parsing

Pydantic model and helpers for reading dependency names out of package
manifests. A malformed field never fails the whole manifest: it degrades to
empty. Only a document that is not a JSON object is rejected.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from suggest_members.core.constants import DEPENDENCY_SECTIONS, MANIFEST_FILE_NAME
from suggest_members.core.exceptions import FileReadError, ManifestParseError

from .filesystem import Filesystem, dirname, join_path, normalize_path

logger = logging.getLogger(__name__)


__all__ = [
    "PackageManifest",
    "dependency_names",
    "find_nearest_manifest",
    "parse_manifest",
    "read_manifest_name",
]


class PackageManifest(BaseModel):
    """The parts of a package manifest the index reads."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str | None = None
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")
    peer_dependencies: dict[str, str] = Field(default_factory=dict, alias="peerDependencies")
    optional_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="optionalDependencies",
    )

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str | None:
        """Keep only non-empty string names."""
        if isinstance(v, str) and v.strip():
            return v.strip()
        return None

    @field_validator(
        "dependencies",
        "dev_dependencies",
        "peer_dependencies",
        "optional_dependencies",
        mode="before",
    )
    @classmethod
    def validate_section(cls, v: Any) -> dict[str, str]:
        """Degrade a malformed dependency section to the entries that make sense."""
        if not isinstance(v, dict):
            return {}
        return {
            key: value if isinstance(value, str) else str(value)
            for key, value in v.items()
            if isinstance(key, str) and key
        }

    def section(self, key: str) -> dict[str, str]:
        """Dependency section by its manifest key, e.g. ``devDependencies``."""
        field_name = {
            "dependencies": "dependencies",
            "devDependencies": "dev_dependencies",
            "peerDependencies": "peer_dependencies",
            "optionalDependencies": "optional_dependencies",
        }[key]
        return getattr(self, field_name)


def parse_manifest(content: str, path: str = MANIFEST_FILE_NAME) -> PackageManifest:
    """
    Parse manifest text.

    Args:
        content: Raw manifest file content
        path: Manifest path, used in error messages

    Returns:
        The parsed manifest

    Raises:
        ManifestParseError: If the content is not a JSON object
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestParseError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ManifestParseError(path, f"expected a JSON object, got {type(data).__name__}")

    return PackageManifest.model_validate(data)


def dependency_names(manifest: PackageManifest) -> list[str]:
    """Union of dependency keys across all sections, first occurrence order."""
    names: list[str] = []
    seen: set[str] = set()
    for section in DEPENDENCY_SECTIONS:
        for name in manifest.section(section):
            if name not in seen:
                seen.add(name)
                names.append(name)
    return names


def find_nearest_manifest(
    fs: Filesystem,
    start_dir: str,
    manifest_file_name: str = MANIFEST_FILE_NAME,
) -> str | None:
    """Walk from ``start_dir`` up to the filesystem root looking for a manifest."""
    current_dir = normalize_path(start_dir)
    parent_dir = dirname(current_dir)

    while current_dir != parent_dir:
        candidate = join_path(current_dir, manifest_file_name)
        if fs.file_exists(candidate):
            return candidate
        current_dir = parent_dir
        parent_dir = dirname(current_dir)

    root_candidate = join_path(current_dir, manifest_file_name)
    return root_candidate if fs.file_exists(root_candidate) else None


def read_manifest_name(fs: Filesystem, manifest_path: str) -> str | None:
    """Read only the ``name`` field of a manifest; None on any failure."""
    try:
        manifest = parse_manifest(fs.read_file(manifest_path), manifest_path)
    except (FileReadError, ManifestParseError) as e:
        logger.debug("Skipping sibling manifest: %s", e)
        return None
    return manifest.name

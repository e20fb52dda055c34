"""
Module Path Index

Per-compilation-unit index of local source files and every package name
reachable from them, so module specifiers can be validated with in-memory
set lookups instead of a type-checker query per import.

Package names come from three places:
- the nearest manifest of every source directory (and of the unit's base
  directory), covering monorepo packages whose own manifest holds the
  dependencies rather than the workspace root;
- all dependency sections of those manifests;
- the ``name`` of every sibling package next to each manifest's directory,
  which recovers workspace packages never listed as dependencies.

Anything these miss (path aliases, exotic resolution) is left to
``can_resolve_module``, a thin delegate to the unit's own resolver.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from suggest_members.config import Settings, get_settings
from suggest_members.core.constants import DECLARATION_SUFFIXES, SUPPORTED_EXTENSIONS
from suggest_members.core.exceptions import FileReadError, ManifestParseError

from .compilation_unit import CompilationUnit
from .filesystem import Filesystem, LocalFilesystem, dirname, join_path, normalize_path
from .manifests import (
    dependency_names,
    find_nearest_manifest,
    parse_manifest,
    read_manifest_name,
)

logger = logging.getLogger(__name__)


__all__ = [
    "ModulePathIndex",
    "ModulePathIndexCache",
    "build_module_path_index",
    "is_supported_file",
]


@dataclass(frozen=True)
class ModulePathIndex:
    """Read-only index of local files and reachable package names."""
    local_files: tuple[str, ...] = ()
    package_names: tuple[str, ...] = ()
    can_resolve_module: Callable[[str, str], bool] | None = field(default=None, compare=False)
    local_file_set: frozenset[str] = field(init=False, repr=False)
    package_name_set: frozenset[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "local_file_set", frozenset(self.local_files))
        object.__setattr__(self, "package_name_set", frozenset(self.package_names))

    def has_local_file(self, path: str) -> bool:
        return normalize_path(path) in self.local_file_set

    def has_package(self, name: str) -> bool:
        return name in self.package_name_set

    def files_in_directory(self, directory: str) -> list[str]:
        """Local files whose parent directory is exactly ``directory``."""
        directory = normalize_path(directory).rstrip("/") or "/"
        return [path for path in self.local_files if dirname(path) == directory]

    def resolves(self, module_path: str, containing_file: str) -> bool:
        """Last-resort resolution through the unit's own module resolver."""
        if self.can_resolve_module is None:
            return False
        return self.can_resolve_module(module_path, containing_file)


def is_supported_file(file_path: str) -> bool:
    """Check whether a file has one of the indexed extensions."""
    return file_path.endswith(SUPPORTED_EXTENSIONS)


def _is_declaration_file(file_path: str) -> bool:
    return file_path.endswith(DECLARATION_SUFFIXES)


def _collect_manifest_paths(
    fs: Filesystem,
    start_dirs: list[str],
    manifest_file_name: str,
) -> list[str]:
    """Nearest manifest of each start directory, each manifest once."""
    seen: set[str] = set()
    result: list[str] = []
    for directory in start_dirs:
        found = find_nearest_manifest(fs, directory, manifest_file_name)
        if found and found not in seen:
            seen.add(found)
            result.append(found)
    return result


def _collect_dependency_names(fs: Filesystem, manifest_paths: list[str]) -> list[str]:
    names: list[str] = []
    for manifest_path in manifest_paths:
        try:
            manifest = parse_manifest(fs.read_file(manifest_path), manifest_path)
        except (FileReadError, ManifestParseError) as e:
            logger.warning("Skipping manifest: %s", e)
            continue
        names.extend(dependency_names(manifest))
    return names


def _discover_workspace_package_names(
    fs: Filesystem,
    manifest_paths: list[str],
    manifest_file_name: str,
    vendor_directory: str,
) -> list[str]:
    """Names of sibling packages living next to each manifest's package directory."""
    names: list[str] = []
    visited_parents: set[str] = set()

    for manifest_path in manifest_paths:
        package_dir = dirname(manifest_path)
        parent_dir = dirname(package_dir)
        if parent_dir in visited_parents:
            continue
        visited_parents.add(parent_dir)

        for child in fs.list_directories(parent_dir):
            if child == vendor_directory:
                continue
            sibling_manifest = join_path(parent_dir, child, manifest_file_name)
            if not fs.file_exists(sibling_manifest):
                continue
            name = read_manifest_name(fs, sibling_manifest)
            if name:
                names.append(name)

    return names


def _make_resolver(unit: CompilationUnit) -> Callable[[str, str], bool]:
    def can_resolve_module(module_path: str, containing_file: str) -> bool:
        try:
            return unit.resolve_module_name(module_path, containing_file) is not None
        except Exception as e:
            logger.debug("Module resolver failed for '%s': %s", module_path, e)
            return False

    return can_resolve_module


def build_module_path_index(
    unit: CompilationUnit,
    fs: Filesystem | None = None,
    *,
    settings: Settings | None = None,
) -> ModulePathIndex:
    """
    Build the module path index for one compilation unit.

    Args:
        unit: The compilation unit to index
        fs: Filesystem used for manifest discovery (local disk by default)
        settings: Manifest and vendor directory names (global settings by default)

    Returns:
        A read-only ModulePathIndex
    """
    fs = fs or LocalFilesystem()
    settings = settings or get_settings()
    vendor_segment = f"/{settings.vendor_directory}/"

    local_files: dict[str, None] = {}
    source_dirs: dict[str, None] = {}

    for source_file in unit.get_source_files():
        normalized = normalize_path(source_file.file_name)
        if source_file.is_declaration_file or _is_declaration_file(normalized):
            continue
        if vendor_segment in f"/{normalized}":
            continue
        if is_supported_file(normalized):
            local_files[normalized] = None
        source_dirs[dirname(normalized)] = None

    start_dirs = [*source_dirs, normalize_path(unit.get_current_directory())]
    manifest_paths = _collect_manifest_paths(fs, start_dirs, settings.manifest_file_name)

    package_names: dict[str, None] = {}
    for name in _collect_dependency_names(fs, manifest_paths):
        package_names[name] = None
    for name in _discover_workspace_package_names(
        fs, manifest_paths, settings.manifest_file_name, settings.vendor_directory,
    ):
        package_names[name] = None

    logger.info(
        "Module path index built: %d local files, %d packages from %d manifests",
        len(local_files),
        len(package_names),
        len(manifest_paths),
    )

    return ModulePathIndex(
        local_files=tuple(local_files),
        package_names=tuple(package_names),
        can_resolve_module=_make_resolver(unit),
    )


class ModulePathIndexCache:
    """
    One index per compilation unit, keyed by the unit's identity.

    Content is never hashed: a recompiled unit is a new object and gets a
    new index. The owner drops entries for replaced units with
    ``invalidate``.
    """

    def __init__(
        self,
        builder: Callable[[CompilationUnit], ModulePathIndex] = build_module_path_index,
    ):
        self._builder = builder
        self._entries: dict[int, tuple[CompilationUnit, ModulePathIndex]] = {}

    def get(self, unit: CompilationUnit) -> ModulePathIndex:
        """Return the cached index for ``unit``, building it on first use."""
        entry = self._entries.get(id(unit))
        if entry is not None and entry[0] is unit:
            return entry[1]

        index = self._builder(unit)
        # Holding the unit keeps its id from being reused while cached
        self._entries[id(unit)] = (unit, index)
        return index

    def invalidate(self, unit: CompilationUnit) -> bool:
        """Drop the entry for ``unit``; returns whether one existed."""
        entry = self._entries.get(id(unit))
        if entry is None or entry[0] is not unit:
            return False
        del self._entries[id(unit)]
        return True

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, unit: object) -> bool:
        entry = self._entries.get(id(unit))
        return entry is not None and entry[0] is unit

    def __len__(self) -> int:
        return len(self._entries)

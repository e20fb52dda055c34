"""
Workspace discovery.

Builds and caches the per-compilation-unit module path index from source
files and package manifests.
"""

from .compilation_unit import CompilationUnit, SourceFile, StaticCompilationUnit
from .filesystem import Filesystem, LocalFilesystem, dirname, join_path, normalize_path
from .manifests import (
    PackageManifest,
    dependency_names,
    find_nearest_manifest,
    parse_manifest,
    read_manifest_name,
)
from .module_path_index import (
    ModulePathIndex,
    ModulePathIndexCache,
    build_module_path_index,
    is_supported_file,
)

__all__ = [
    "CompilationUnit",
    "Filesystem",
    "LocalFilesystem",
    "ModulePathIndex",
    "ModulePathIndexCache",
    "PackageManifest",
    "SourceFile",
    "StaticCompilationUnit",
    "build_module_path_index",
    "dependency_names",
    "dirname",
    "find_nearest_manifest",
    "is_supported_file",
    "join_path",
    "normalize_path",
    "parse_manifest",
    "read_manifest_name",
]

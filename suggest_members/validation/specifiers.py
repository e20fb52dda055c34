"""
Module Specifier Utilities

Classification and normalisation of import specifiers. Specifiers are
posix paths; relative ones start with ``./``, ``../`` or ``/``.
"""

import posixpath
import re
from enum import Enum

from suggest_members.core.constants import SCRIPT_EXTENSIONS
from suggest_members.workspace.filesystem import normalize_path

__all__ = [
    "BUILTIN_MODULES",
    "SpecifierKind",
    "classify_specifier",
    "extract_package_name",
    "is_builtin_module",
    "is_protocol_specifier",
    "is_relative_specifier",
    "resolve_relative",
    "strip_known_extension",
    "to_relative_specifier",
]

# Node.js core modules, importable bare or with the "node:" scheme
BUILTIN_MODULES = frozenset({
    "assert",
    "assert/strict",
    "async_hooks",
    "buffer",
    "child_process",
    "cluster",
    "console",
    "constants",
    "crypto",
    "dgram",
    "diagnostics_channel",
    "dns",
    "dns/promises",
    "domain",
    "events",
    "fs",
    "fs/promises",
    "http",
    "http2",
    "https",
    "inspector",
    "module",
    "net",
    "os",
    "path",
    "path/posix",
    "path/win32",
    "perf_hooks",
    "process",
    "punycode",
    "querystring",
    "readline",
    "readline/promises",
    "repl",
    "stream",
    "stream/promises",
    "stream/web",
    "string_decoder",
    "timers",
    "timers/promises",
    "tls",
    "trace_events",
    "tty",
    "url",
    "util",
    "util/types",
    "v8",
    "vm",
    "wasi",
    "worker_threads",
    "zlib",
})

# "node:fs", "data:text/javascript,...", "https://esm.sh/x" and the like
_PROTOCOL_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")


class SpecifierKind(Enum):
    """How a module specifier is resolved."""
    EMPTY = "EMPTY"
    RELATIVE = "RELATIVE"
    PACKAGE = "PACKAGE"
    BUILTIN = "BUILTIN"
    PROTOCOL = "PROTOCOL"


def is_relative_specifier(value: str) -> bool:
    return value.startswith(("./", "../", "/")) or value in (".", "..")


def is_protocol_specifier(value: str) -> bool:
    return _PROTOCOL_PREFIX.match(value) is not None


def is_builtin_module(value: str) -> bool:
    if value.startswith("node:"):
        value = value[len("node:"):]
    return value in BUILTIN_MODULES


def classify_specifier(value: str) -> SpecifierKind:
    """Decide which resolution strategy applies to ``value``."""
    if not value.strip():
        return SpecifierKind.EMPTY
    if is_relative_specifier(value):
        return SpecifierKind.RELATIVE
    if is_protocol_specifier(value):
        return SpecifierKind.PROTOCOL
    if is_builtin_module(value):
        return SpecifierKind.BUILTIN
    return SpecifierKind.PACKAGE


def extract_package_name(specifier: str) -> str:
    """
    Package part of a bare specifier.

    >>> extract_package_name("@scope/pkg/sub/path")
    '@scope/pkg'
    >>> extract_package_name("lodash/fp")
    'lodash'
    """
    parts = specifier.split("/")
    if specifier.startswith("@"):
        return "/".join(parts[:2]) if len(parts) >= 2 and parts[1] else ""
    return parts[0]


def strip_known_extension(file_path: str) -> str:
    """Drop a script extension, leaving asset extensions in place."""
    for extension in SCRIPT_EXTENSIONS:
        if file_path.endswith(extension):
            return file_path[: -len(extension)]
    return file_path


def resolve_relative(containing_file: str, specifier: str) -> str:
    """Absolute normalised path of a relative ``specifier`` seen from ``containing_file``."""
    base_dir = posixpath.dirname(normalize_path(containing_file))
    return posixpath.normpath(posixpath.join(base_dir, normalize_path(specifier)))


def to_relative_specifier(from_dir: str, target: str) -> str:
    """Render ``target`` as a ``./`` or ``../`` specifier relative to ``from_dir``."""
    relative = normalize_path(posixpath.relpath(target, from_dir))
    if relative.startswith(("./", "../")):
        return relative
    return f"./{relative}"

"""Compilation unit capability.

The host (a linter with a type checker behind it) owns the real compilation
unit. The index only needs its source file list, its base directory and a
module resolver, so that is all this protocol asks for.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class SourceFile:
    """A file that is part of a compilation unit."""
    file_name: str
    is_declaration_file: bool = False


@runtime_checkable
class CompilationUnit(Protocol):
    """What the module path index needs to know about a compilation unit."""

    def get_source_files(self) -> Sequence[SourceFile]: ...

    def get_current_directory(self) -> str: ...

    def resolve_module_name(self, module_path: str, containing_file: str) -> str | None:
        """Resolved file for ``module_path`` imported from ``containing_file``, or None."""
        ...


@dataclass(eq=False)
class StaticCompilationUnit:
    """
    A compilation unit described by plain data.

    Useful for hosts without a compiler object. ``resolver`` stands in for
    the compiler's module resolution; without one nothing resolves.
    Equality is identity, so two units with the same files are still
    distinct cache keys.
    """
    source_files: Sequence[SourceFile]
    current_directory: str
    resolver: Callable[[str, str], str | None] | None = field(default=None)

    def get_source_files(self) -> Sequence[SourceFile]:
        return self.source_files

    def get_current_directory(self) -> str:
        return self.current_directory

    def resolve_module_name(self, module_path: str, containing_file: str) -> str | None:
        if self.resolver is None:
            return None
        return self.resolver(module_path, containing_file)

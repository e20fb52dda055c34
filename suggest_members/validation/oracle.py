"""
Type Oracle Capability

The type checker is an external collaborator. Validators receive it as an
object satisfying ``TypeOracle`` and treat every answer as advisory: any
method may raise, and validators degrade to "no diagnostic" when it does.

``object_type`` and ``location`` are opaque handles owned by the host
(e.g. a checker type and an AST node); they are only passed back.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class SymbolKind(Enum):
    """Where a suggested symbol lives."""
    MEMBER = "MEMBER"
    EXPORT = "EXPORT"
    NAME = "NAME"


@dataclass(frozen=True)
class SymbolRef:
    """Reference to a symbol whose type signature is wanted.

    ``owner`` is the object type for members, the module path for exports
    and the scope location for names.
    """
    kind: SymbolKind
    name: str
    owner: Any = None
    containing_file: str | None = None


@runtime_checkable
class TypeOracle(Protocol):
    """Questions the validators ask the type checker."""

    async def get_properties_of_type(self, object_type: Any) -> list[str]: ...

    async def get_type_name(self, object_type: Any) -> str | None: ...

    async def get_exports_of_module(self, module_path: str, containing_file: str) -> list[str]: ...

    async def get_module_type_name(self, module_path: str, containing_file: str) -> str | None: ...

    async def get_type_signature(self, symbol: SymbolRef) -> str | None: ...

    async def resolve_module_path(self, specifier: str, containing_file: str) -> str | None: ...

    async def get_names_in_scope(self, location: Any) -> list[str]: ...

"""
Shared pytest fixtures and configuration for all tests.

Provides:
- FakeTypeOracle: an in-memory TypeOracle with fixed property/export lists
- workspace: a factory writing monorepo layouts (manifests + sources) to tmp_path
- fresh settings for every test
"""

import json
from pathlib import Path
from typing import Any

import pytest

from suggest_members.config import Settings, reset_settings
from suggest_members.core.exceptions import OracleUnavailableError, SignatureEnrichmentError
from suggest_members.validation.oracle import SymbolKind, SymbolRef
from suggest_members.workspace import SourceFile, StaticCompilationUnit


class FakeTypeOracle:
    """TypeOracle backed by dictionaries.

    ``properties`` maps an object type handle (any hashable) to its property
    names, ``exports`` maps a module path to its export names and
    ``signatures`` maps ``(kind, name)`` to a signature string. Types or
    modules missing from the maps make the oracle raise, like a checker
    without type information.
    """

    def __init__(
        self,
        properties: dict[Any, list[str]] | None = None,
        exports: dict[str, list[str]] | None = None,
        signatures: dict[tuple[SymbolKind, str], str] | None = None,
        type_names: dict[Any, str] | None = None,
        module_type_names: dict[str, str] | None = None,
        names_in_scope: list[str] | None = None,
        failing_signatures: set[str] | None = None,
    ):
        self.properties = properties or {}
        self.exports = exports or {}
        self.signatures = signatures or {}
        self.type_names = type_names or {}
        self.module_type_names = module_type_names or {}
        self.names_in_scope = names_in_scope
        self.failing_signatures = failing_signatures or set()
        self.signature_requests: list[SymbolRef] = []

    async def get_properties_of_type(self, object_type: Any) -> list[str]:
        if object_type not in self.properties:
            raise OracleUnavailableError(f"No type information for {object_type!r}")
        return list(self.properties[object_type])

    async def get_type_name(self, object_type: Any) -> str | None:
        return self.type_names.get(object_type)

    async def get_exports_of_module(self, module_path: str, containing_file: str) -> list[str]:
        if module_path not in self.exports:
            raise OracleUnavailableError(f"Cannot resolve {module_path}")
        return list(self.exports[module_path])

    async def get_module_type_name(self, module_path: str, containing_file: str) -> str | None:
        return self.module_type_names.get(module_path)

    async def get_type_signature(self, symbol: SymbolRef) -> str | None:
        self.signature_requests.append(symbol)
        if symbol.name in self.failing_signatures:
            raise SignatureEnrichmentError(f"Signature of {symbol.name} unavailable")
        return self.signatures.get((symbol.kind, symbol.name))

    async def resolve_module_path(self, specifier: str, containing_file: str) -> str | None:
        return f"/resolved/{specifier}" if specifier in self.exports else None

    async def get_names_in_scope(self, location: Any) -> list[str]:
        if self.names_in_scope is None:
            raise OracleUnavailableError("No scope information")
        return list(self.names_in_scope)


class Workspace:
    """Writes files under a root directory and builds compilation units over them."""

    def __init__(self, root: Path):
        self.root = root

    def path(self, relative: str) -> str:
        return (self.root / relative).as_posix()

    def write(self, relative: str, content: str = "") -> str:
        target = self.root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target.as_posix()

    def manifest(self, relative_dir: str, **fields: Any) -> str:
        relative = f"{relative_dir}/package.json" if relative_dir else "package.json"
        return self.write(relative, json.dumps(fields))

    def unit(
        self,
        files: list[str],
        current_directory: str = "",
        resolver=None,
    ) -> StaticCompilationUnit:
        return StaticCompilationUnit(
            source_files=[SourceFile(self.path(f), f.endswith(".d.ts")) for f in files],
            current_directory=self.path(current_directory) if current_directory else self.root.as_posix(),
            resolver=resolver,
        )


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings rebuilt from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    # Nested one level so sibling discovery from the root manifest only sees "repo"
    root = tmp_path / "repo"
    root.mkdir()
    return Workspace(root)


@pytest.fixture
def oracle_factory():
    return FakeTypeOracle


@pytest.fixture
def fake_oracle() -> FakeTypeOracle:
    return FakeTypeOracle(
        properties={
            "User": ["name", "age", "createdAt"],
            "Storage": ["getItem", "setItem", "removeItem", "clear", "length"],
        },
        exports={
            "react": ["useState", "useEffect", "useMemo", "useCallback", "default"],
            "effect": ["pipe", "flow", "Effect"],
        },
        signatures={
            (SymbolKind.MEMBER, "getItem"): "(key: string) => string | null",
            (SymbolKind.MEMBER, "name"): "string",
            (SymbolKind.EXPORT, "pipe"): "{ <A>(a: A): A; <A, B = never>(a: A, ab: (a: A) => B): B; }",
            (SymbolKind.EXPORT, "useState"): "<S>(initialState: S) => [S, Dispatch<S>]",
        },
        type_names={"User": "User", "Storage": "Storage"},
        module_type_names={"effect": 'typeof import("effect")'},
        names_in_scope=["formatGreeting", "console", "userName"],
    )

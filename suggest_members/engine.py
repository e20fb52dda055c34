"""
Suggestion Engine

Entry point for hosts. Holds the injected type oracle, the filesystem used
for manifest discovery, the settings, and the per-compilation-unit module
path index cache; every validation delegates to the standalone functions in
``suggest_members.validation``.
"""

import logging
from collections.abc import Sequence
from typing import Any

from .config import Settings, get_settings
from .suggestions import Candidate, ScoredCandidate, rank_candidates
from .validation import (
    TypeOracle,
    ValidationResult,
    format_validation_message,
    validate_export,
    validate_import,
    validate_member_access,
    validate_missing_name,
    validate_module_path,
)
from .workspace import (
    CompilationUnit,
    Filesystem,
    LocalFilesystem,
    ModulePathIndex,
    ModulePathIndexCache,
    build_module_path_index,
)

logger = logging.getLogger(__name__)


class SuggestionEngine:
    """Validates references and produces "did you mean" diagnostics."""

    def __init__(
        self,
        oracle: TypeOracle | None = None,
        filesystem: Filesystem | None = None,
        settings: Settings | None = None,
    ):
        self.oracle = oracle
        self.filesystem = filesystem or LocalFilesystem()
        self.settings = settings or get_settings()

        # One module path index per compilation unit, owned by this engine
        self.index_cache = ModulePathIndexCache(
            lambda unit: build_module_path_index(
                unit, self.filesystem, settings=self.settings,
            ),
        )

    @property
    def _ranking(self) -> dict[str, Any]:
        return {
            "max_suggestions": self.settings.max_suggestions,
            "min_score": self.settings.min_similarity_score,
        }

    # Module path index

    def get_module_path_index(self, unit: CompilationUnit) -> ModulePathIndex:
        """Index for ``unit``, built on first use."""
        return self.index_cache.get(unit)

    def invalidate(self, unit: CompilationUnit) -> bool:
        """Forget the index of a replaced compilation unit."""
        dropped = self.index_cache.invalidate(unit)
        if dropped:
            logger.debug("Dropped module path index for replaced compilation unit")
        return dropped

    # Validations

    def validate_module_path(
        self,
        requested_path: str,
        containing_file: str,
        unit: CompilationUnit,
    ) -> ValidationResult:
        """Validate an import specifier against the unit's module path index."""
        return validate_module_path(
            requested_path,
            containing_file,
            self.get_module_path_index(unit),
            **self._ranking,
        )

    async def validate_member_access(
        self,
        property_name: str,
        object_type: Any,
        containing_file: str | None = None,
    ) -> ValidationResult:
        """Validate ``obj.<property_name>`` where ``obj`` has ``object_type``."""
        if self.oracle is None:
            return ValidationResult.valid()
        return await validate_member_access(
            property_name,
            object_type,
            self.oracle,
            containing_file=containing_file,
            **self._ranking,
        )

    async def validate_import(
        self,
        import_name: str,
        module_path: str,
        containing_file: str,
    ) -> ValidationResult:
        """Validate ``import { <import_name> } from "<module_path>"``."""
        if self.oracle is None:
            return ValidationResult.valid()
        return await validate_import(
            import_name, module_path, containing_file, self.oracle, **self._ranking,
        )

    async def validate_export(
        self,
        export_name: str,
        module_path: str,
        containing_file: str,
    ) -> ValidationResult:
        """Validate ``export { <export_name> } from "<module_path>"``."""
        if self.oracle is None:
            return ValidationResult.valid()
        return await validate_export(
            export_name, module_path, containing_file, self.oracle, **self._ranking,
        )

    async def validate_missing_name(
        self,
        name: str,
        location: Any,
        containing_file: str | None = None,
    ) -> ValidationResult:
        """Validate an identifier the host's scope analysis could not resolve."""
        if self.oracle is None:
            return ValidationResult.valid()
        return await validate_missing_name(
            name,
            location,
            self.oracle,
            containing_file=containing_file,
            **self._ranking,
        )

    # Helpers

    def suggest(self, query: str, domain: Sequence[Candidate | str]) -> list[ScoredCandidate]:
        """Rank an arbitrary candidate domain with the engine's settings."""
        return rank_candidates(query, domain, **self._ranking)

    def format_message(self, result: ValidationResult) -> str:
        """Diagnostic text for ``result``; empty for Valid results."""
        return format_validation_message(result, self.settings.max_suggestions)

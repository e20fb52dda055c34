"""
Import/Export Validator

Validates named imports (``import { useStae } from "react"``) and named
re-exports (``export { saveRe1f } from "./hooks"``) against the exports the
type oracle reports for the target module.
"""

import logging
from collections.abc import Callable

from suggest_members.core.constants import MAX_SUGGESTIONS, MIN_SIMILARITY_SCORE
from suggest_members.core.decorators import track_validation
from suggest_members.suggestions import rank_candidates

from .candidates import is_valid_export_candidate, is_valid_import_candidate
from .enrichment import enrich_with_signatures
from .models import ContextKind, ValidationContext, ValidationResult
from .oracle import SymbolKind, SymbolRef, TypeOracle

logger = logging.getLogger(__name__)


__all__ = ["validate_export", "validate_import"]


async def _module_type_name(
    oracle: TypeOracle,
    module_path: str,
    containing_file: str,
) -> str | None:
    try:
        return await oracle.get_module_type_name(module_path, containing_file)
    except Exception as e:
        logger.debug("Module type name unavailable for '%s': %s", module_path, e)
        return None


async def _validate_module_binding(
    name: str,
    module_path: str,
    containing_file: str,
    oracle: TypeOracle,
    *,
    kind: ContextKind,
    is_valid_candidate: Callable[[str, str], bool],
    max_suggestions: int,
    min_score: float,
) -> ValidationResult:
    if not name or not module_path:
        return ValidationResult.valid()

    try:
        resolved = await oracle.resolve_module_path(module_path, containing_file)
        if resolved is None:
            # Unresolvable modules belong to the module path check
            logger.debug("Module '%s' does not resolve; skipping '%s'", module_path, name)
            return ValidationResult.valid()
        exports = await oracle.get_exports_of_module(module_path, containing_file)
    except Exception as e:
        logger.debug("Skipping validation of '%s' from '%s': %s", name, module_path, e)
        return ValidationResult.valid()

    if name in exports:
        return ValidationResult.valid()

    candidates = [export for export in exports if is_valid_candidate(export, name)]
    suggestions = rank_candidates(
        name, candidates, max_suggestions=max_suggestions, min_score=min_score,
    )
    if not suggestions:
        return ValidationResult.valid()

    async def fetch_signature(export_name: str) -> str | None:
        return await oracle.get_type_signature(
            SymbolRef(
                kind=SymbolKind.EXPORT,
                name=export_name,
                owner=module_path,
                containing_file=containing_file,
            ),
        )

    enriched = await enrich_with_signatures(suggestions, fetch_signature)
    type_name = await _module_type_name(oracle, module_path, containing_file)

    return ValidationResult.invalid(
        query=name,
        context=ValidationContext(kind=kind, type_name=type_name, module_path=module_path),
        suggestions=enriched,
    )


@track_validation("import")
async def validate_import(
    import_name: str,
    module_path: str,
    containing_file: str,
    oracle: TypeOracle,
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> ValidationResult:
    """
    Validate a named import.

    ``default`` stays a valid suggestion for imports, since
    ``import { default as x }`` is legal.

    Returns:
        Valid, or Invalid with suggestions. Oracle failures yield Valid.
    """
    return await _validate_module_binding(
        import_name,
        module_path,
        containing_file,
        oracle,
        kind=ContextKind.IMPORT,
        is_valid_candidate=is_valid_import_candidate,
        max_suggestions=max_suggestions,
        min_score=min_score,
    )


@track_validation("export")
async def validate_export(
    export_name: str,
    module_path: str,
    containing_file: str,
    oracle: TypeOracle,
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> ValidationResult:
    """
    Validate a named re-export.

    Returns:
        Valid, or Invalid with suggestions. Oracle failures yield Valid.
    """
    return await _validate_module_binding(
        export_name,
        module_path,
        containing_file,
        oracle,
        kind=ContextKind.EXPORT,
        is_valid_candidate=is_valid_export_candidate,
        max_suggestions=max_suggestions,
        min_score=min_score,
    )

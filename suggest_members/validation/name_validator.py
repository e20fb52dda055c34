"""
Missing Name Validator

Suggests in-scope identifiers for a reference that resolved to nothing.
"""

import logging
from typing import Any

from suggest_members.core.constants import MAX_SUGGESTIONS, MIN_SIMILARITY_SCORE
from suggest_members.core.decorators import track_validation
from suggest_members.suggestions import rank_candidates

from .candidates import is_valid_identifier_candidate
from .enrichment import enrich_with_signatures
from .models import ContextKind, ValidationContext, ValidationResult
from .oracle import SymbolKind, SymbolRef, TypeOracle

logger = logging.getLogger(__name__)


__all__ = ["validate_missing_name"]


@track_validation("missing-name")
async def validate_missing_name(
    name: str,
    location: Any,
    oracle: TypeOracle,
    *,
    containing_file: str | None = None,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> ValidationResult:
    """
    Validate an unresolved identifier.

    The host only calls this for references its scope analysis could not
    resolve; the oracle's scope listing is still consulted first, so a name
    that exists (e.g. a global the scope analysis missed) stays Valid.

    Returns:
        Valid, or Invalid with suggestions. Oracle failures yield Valid.
    """
    if not name:
        return ValidationResult.valid()

    try:
        names_in_scope = await oracle.get_names_in_scope(location)
    except Exception as e:
        logger.debug("Skipping missing name validation of '%s': %s", name, e)
        return ValidationResult.valid()

    if name in names_in_scope:
        return ValidationResult.valid()

    candidates = [
        candidate for candidate in names_in_scope
        if is_valid_identifier_candidate(candidate, name)
    ]
    suggestions = rank_candidates(
        name, candidates, max_suggestions=max_suggestions, min_score=min_score,
    )
    if not suggestions:
        return ValidationResult.valid()

    async def fetch_signature(candidate: str) -> str | None:
        return await oracle.get_type_signature(
            SymbolRef(
                kind=SymbolKind.NAME,
                name=candidate,
                owner=location,
                containing_file=containing_file,
            ),
        )

    enriched = await enrich_with_signatures(suggestions, fetch_signature)
    return ValidationResult.invalid(
        query=name,
        context=ValidationContext(kind=ContextKind.MISSING_NAME),
        suggestions=enriched,
    )

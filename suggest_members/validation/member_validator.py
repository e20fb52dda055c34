"""
Member Access Validator

Validates property accesses (``obj.nmae``) against the properties the type
oracle reports for the object's type.
"""

import logging
from dataclasses import dataclass
from typing import Any

from suggest_members.core.constants import MAX_SUGGESTIONS, MIN_SIMILARITY_SCORE
from suggest_members.core.decorators import track_validation
from suggest_members.suggestions import rank_candidates

from .candidates import is_valid_identifier_candidate
from .enrichment import enrich_with_signatures
from .models import ContextKind, ValidationContext, ValidationResult
from .oracle import SymbolKind, SymbolRef, TypeOracle

logger = logging.getLogger(__name__)


__all__ = ["MemberAccess", "validate_member_access", "validate_member_accesses"]


@dataclass
class MemberAccess:
    """A property access found by the host's AST traversal."""
    property_name: str
    object_type: Any
    containing_file: str | None = None


async def _type_name(oracle: TypeOracle, object_type: Any) -> str | None:
    try:
        return await oracle.get_type_name(object_type)
    except Exception as e:
        logger.debug("Type name unavailable: %s", e)
        return None


@track_validation("member")
async def validate_member_access(
    property_name: str,
    object_type: Any,
    oracle: TypeOracle,
    *,
    containing_file: str | None = None,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> ValidationResult:
    """
    Validate a single property access.

    Args:
        property_name: The accessed property
        object_type: Host handle for the object's type, passed to the oracle
        oracle: Type oracle
        containing_file: File containing the access, for logging and signatures
        max_suggestions: Suggestion cap
        min_score: Minimum similarity score

    Returns:
        Valid, or Invalid with suggestions. Oracle failures yield Valid.
    """
    if not property_name:
        return ValidationResult.valid()

    try:
        properties = await oracle.get_properties_of_type(object_type)
    except Exception as e:
        logger.debug("Skipping member validation of '%s': %s", property_name, e)
        return ValidationResult.valid()

    names = list(dict.fromkeys(properties))
    if property_name in names:
        return ValidationResult.valid()

    candidates = [name for name in names if is_valid_identifier_candidate(name, property_name)]
    suggestions = rank_candidates(
        property_name, candidates, max_suggestions=max_suggestions, min_score=min_score,
    )
    if not suggestions:
        return ValidationResult.valid()

    async def fetch_signature(name: str) -> str | None:
        return await oracle.get_type_signature(
            SymbolRef(
                kind=SymbolKind.MEMBER,
                name=name,
                owner=object_type,
                containing_file=containing_file,
            ),
        )

    enriched = await enrich_with_signatures(suggestions, fetch_signature)
    type_name = await _type_name(oracle, object_type)

    return ValidationResult.invalid(
        query=property_name,
        context=ValidationContext(kind=ContextKind.MEMBER, type_name=type_name),
        suggestions=enriched,
    )


async def validate_member_accesses(
    accesses: list[MemberAccess],
    oracle: TypeOracle,
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> list[ValidationResult]:
    """Validate member accesses one after another, in order."""
    results = []
    for access in accesses:
        result = await validate_member_access(
            access.property_name,
            access.object_type,
            oracle,
            containing_file=access.containing_file,
            max_suggestions=max_suggestions,
            min_score=min_score,
        )
        results.append(result)
    return results

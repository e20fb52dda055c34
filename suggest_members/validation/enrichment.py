"""Attach type signatures to ranked suggestions."""

import logging
from collections.abc import Awaitable, Callable

from suggest_members.core.exceptions import SignatureEnrichmentError
from suggest_members.suggestions.models import ScoredCandidate

logger = logging.getLogger(__name__)


__all__ = ["enrich_with_signatures"]


async def enrich_with_signatures(
    suggestions: list[ScoredCandidate],
    fetch_signature: Callable[[str], Awaitable[str | None]],
) -> list[ScoredCandidate]:
    """
    Fetch a signature for each suggestion, in rank order.

    A failed fetch leaves that one suggestion without a signature; it never
    drops the suggestion or aborts the others.

    Args:
        suggestions: Ranked suggestions
        fetch_signature: Async function mapping a name to its signature

    Returns:
        The same suggestions, with signatures where available
    """
    enriched = []
    for suggestion in suggestions:
        try:
            signature = await fetch_signature(suggestion.name)
        except SignatureEnrichmentError as e:
            logger.debug("No signature for '%s': %s", suggestion.name, e)
            signature = None
        except Exception as e:
            logger.warning("Signature lookup for '%s' failed: %s", suggestion.name, e)
            signature = None
        enriched.append(suggestion.with_signature(signature) if signature else suggestion)
    return enriched

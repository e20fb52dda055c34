"""
Candidate Ranker

Turns a candidate domain into a capped, deterministically ordered
suggestion list. Callers filter the domain with their own "valid candidate"
predicate first; the ranker only scores, sorts and truncates.
"""

import logging
from collections.abc import Iterable, Sequence

from suggest_members.core.constants import MAX_SUGGESTIONS, MIN_SIMILARITY_SCORE

from .models import Candidate, ScoredCandidate, SuggestionSet
from .similarity import similarity_score

logger = logging.getLogger(__name__)


__all__ = ["find_similar_names", "rank_candidates"]


def _as_candidate(item: Candidate | str) -> Candidate:
    return item if isinstance(item, Candidate) else Candidate(name=item)


def rank_candidates(
    query: str,
    domain: Iterable[Candidate | str],
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> SuggestionSet:
    """
    Rank candidates by similarity to ``query``.

    Candidates equal to the query, empty names and repeated names (after the
    first occurrence) are dropped. Remaining candidates are scored and kept
    only when the score is strictly above ``min_score``. The result is
    sorted by descending score; ties keep the original domain order, then
    fall back to the name.

    Args:
        query: The name the user wrote
        domain: Known-valid names, as Candidate objects or plain strings
        max_suggestions: Cap on the number of suggestions returned
        min_score: Minimum similarity score (exclusive)

    Returns:
        Ranked suggestions; empty when nothing qualifies
    """
    if not query or max_suggestions <= 0:
        return []

    seen: set[str] = set()
    scored: list[tuple[float, int, str, Candidate]] = []

    for index, item in enumerate(domain):
        candidate = _as_candidate(item)
        name = candidate.name
        if not name or name == query or name in seen:
            continue
        seen.add(name)

        score = similarity_score(query, name)
        if score <= min_score:
            continue
        scored.append((score, index, name, candidate))

    scored.sort(key=lambda entry: (-entry[0], entry[1], entry[2]))

    suggestions = [
        ScoredCandidate(name=name, score=score, signature=candidate.signature)
        for score, _, name, candidate in scored[:max_suggestions]
    ]
    logger.debug(
        "Ranked %d of %d candidates for '%s'", len(suggestions), len(seen), query,
    )
    return suggestions


def find_similar_names(
    query: str,
    names: Sequence[str],
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> list[str]:
    """Convenience wrapper returning only the suggested names."""
    ranked = rank_candidates(
        query, names, max_suggestions=max_suggestions, min_score=min_score,
    )
    return [suggestion.name for suggestion in ranked]

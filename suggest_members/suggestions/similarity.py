"""
Similarity Scoring

Normalized edit-distance scoring of a query against one candidate name.
Scores live in [0, 1]; 1.0 means identical strings.
"""

from suggest_members.core.constants import MIN_SIMILARITY_SCORE

__all__ = ["MIN_SIMILARITY_SCORE", "edit_distance", "is_similar", "similarity_score"]


def edit_distance(s1: str, s2: str) -> int:
    """
    Calculate the optimal string alignment distance between two strings.

    This is the Levenshtein distance extended with transposition of two
    adjacent characters, so ``nmae`` is a single edit away from ``name``.
    Each insertion, deletion, substitution or transposition costs 1.
    Comparison is case-sensitive.

    Args:
        s1: First string
        s2: Second string

    Returns:
        The edit distance as an integer
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Three rows: two back (for transpositions), previous and current
    before_previous: list[int] = []
    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1, start=1):
        current_row = [i] + [0] * len(s2)
        for j, c2 in enumerate(s2, start=1):
            cost = 0 if c1 == c2 else 1
            current_row[j] = min(
                previous_row[j] + 1,  # deletion
                current_row[j - 1] + 1,  # insertion
                previous_row[j - 1] + cost,  # substitution
            )
            if i > 1 and j > 1 and c1 == s2[j - 2] and s1[i - 2] == c2:
                current_row[j] = min(current_row[j], before_previous[j - 2] + 1)
        before_previous = previous_row
        previous_row = current_row

    return previous_row[-1]


def similarity_score(query: str, candidate: str) -> float:
    """
    Score ``candidate`` against ``query``.

    Returns ``1 - distance / max(len(query), len(candidate))``. Empty inputs
    score 0.0 so they never qualify.
    """
    if not query or not candidate:
        return 0.0
    longest = max(len(query), len(candidate))
    return 1.0 - edit_distance(query, candidate) / longest


def is_similar(
    query: str,
    candidate: str,
    min_score: float = MIN_SIMILARITY_SCORE,
) -> bool:
    """Check whether ``candidate`` scores strictly above ``min_score``."""
    return similarity_score(query, candidate) > min_score

"""
Suggestion ranking.

Provides the similarity scorer and the candidate ranker shared by every
validation context.
"""

from .models import Candidate, ScoredCandidate, SuggestionSet
from .ranker import find_similar_names, rank_candidates
from .similarity import edit_distance, is_similar, similarity_score

__all__ = [
    "Candidate",
    "ScoredCandidate",
    "SuggestionSet",
    "edit_distance",
    "find_similar_names",
    "is_similar",
    "rank_candidates",
    "similarity_score",
]

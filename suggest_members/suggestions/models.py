"""Data models for candidates and ranked suggestions."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Candidate:
    """A name known to be valid in some context, with an optional signature."""
    name: str
    signature: str | None = None


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate that survived ranking, with its similarity score."""
    name: str
    score: float
    signature: str | None = None

    def with_signature(self, signature: str | None) -> "ScoredCandidate":
        """Return a copy of this suggestion carrying ``signature``."""
        return replace(self, signature=signature)


SuggestionSet = list[ScoredCandidate]

"""Tests for candidate ranking."""

from suggest_members.suggestions import Candidate, rank_candidates
from suggest_members.suggestions.ranker import find_similar_names


REACT_EXPORTS = ["useState", "useEffect", "useMemo", "useCallback", "default"]


class TestRankCandidates:
    """Test rank_candidates ordering, filtering and capping."""

    def test_best_match_first(self):
        ranked = rank_candidates("useStae", REACT_EXPORTS)

        assert ranked[0].name == "useState"
        assert ranked[0].score == 0.875

    def test_sorted_by_descending_score(self):
        ranked = rank_candidates("useStae", REACT_EXPORTS)

        scores = [suggestion.score for suggestion in ranked]
        assert scores == sorted(scores, reverse=True)
        assert all(score > 0.4 for score in scores)

    def test_capped_at_max_suggestions(self):
        domain = [f"item{i}" for i in range(10)]

        ranked = rank_candidates("item", domain)

        assert len(ranked) == 5

    def test_ties_keep_domain_order(self):
        domain = [f"item{i}" for i in range(10)]

        ranked = rank_candidates("item", domain, max_suggestions=3)

        assert [s.name for s in ranked] == ["item0", "item1", "item2"]

    def test_deterministic(self):
        first = rank_candidates("useStae", REACT_EXPORTS)
        second = rank_candidates("useStae", REACT_EXPORTS)

        assert first == second

    def test_empty_query_returns_nothing(self):
        assert rank_candidates("", REACT_EXPORTS) == []

    def test_empty_domain_returns_nothing(self):
        assert rank_candidates("useStae", []) == []

    def test_non_positive_cap_returns_nothing(self):
        assert rank_candidates("useStae", REACT_EXPORTS, max_suggestions=0) == []

    def test_query_itself_is_never_suggested(self):
        ranked = rank_candidates("name", ["name", "nmae"])

        assert [s.name for s in ranked] == ["nmae"]

    def test_duplicates_collapse(self):
        ranked = rank_candidates("name", ["nmae", "nmae", "", "nam"])

        assert [s.name for s in ranked] == ["nmae", "nam"]

    def test_below_threshold_dropped(self):
        assert rank_candidates("abc", ["xyz", "qrs"]) == []

    def test_custom_threshold(self):
        ranked = rank_candidates("useStae", REACT_EXPORTS, min_score=0.8)

        assert [s.name for s in ranked] == ["useState"]

    def test_candidate_signature_carried(self):
        domain = [Candidate(name="getItem", signature="(key: string) => string | null")]

        ranked = rank_candidates("get1Item", domain)

        assert ranked[0].signature == "(key: string) => string | null"


class TestFindSimilarNames:
    """Test the names-only wrapper."""

    def test_returns_names(self):
        assert find_similar_names("useStae", REACT_EXPORTS)[0] == "useState"

    def test_respects_cap(self):
        names = find_similar_names("item", [f"item{i}" for i in range(10)], max_suggestions=2)

        assert names == ["item0", "item1"]

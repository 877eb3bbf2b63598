"""Tests for ranking boosts."""

import pytest

from iconsearch.models.icon import FuzzyMatch, IconRecord
from iconsearch.search.ranking import (
    EXACT_NAME_BOOST,
    EXACT_TAG_BOOST,
    NAME_PREFIX_BOOST,
    QUERY_PREFIX_BOOST,
    TAG_PREFIX_BOOST,
    compute_boost,
    name_boost,
    rank_matches,
    tag_boost,
)


def match(name: str, score: float, index: int = 0, tags=()) -> FuzzyMatch:
    return FuzzyMatch(index=index, record=IconRecord(name=name, tags=tuple(tags)), score=score)


class TestBoostConstants:
    """The tuned constants are part of observable ranking behavior."""

    def test_values(self):
        assert EXACT_NAME_BOOST == -1.0
        assert NAME_PREFIX_BOOST == -0.5
        assert QUERY_PREFIX_BOOST == -0.3
        assert EXACT_TAG_BOOST == -0.4
        assert TAG_PREFIX_BOOST == -0.2


class TestNameBoost:
    """Tests for name-based boosts."""

    def test_exact(self):
        assert name_boost("car", "car") == EXACT_NAME_BOOST

    def test_name_starts_with_query(self):
        assert name_boost("cart", "car") == NAME_PREFIX_BOOST

    def test_query_starts_with_name(self):
        assert name_boost("car", "carpet") == QUERY_PREFIX_BOOST

    def test_no_relation(self):
        assert name_boost("scar", "car") == 0.0


class TestTagBoost:
    """Tests for tag-based boosts."""

    def test_exact_tag(self):
        """Test exact tag match (case-insensitive)."""
        assert tag_boost(["House", "building"], "house") == EXACT_TAG_BOOST

    def test_exact_tag_does_not_also_count_as_prefix(self):
        """Test exact and prefix tag boosts don't both apply."""
        assert tag_boost(["house", "household"], "house") == EXACT_TAG_BOOST

    def test_tag_prefix(self):
        assert tag_boost(["household"], "house") == TAG_PREFIX_BOOST

    def test_no_tags(self):
        assert tag_boost([], "house") == 0.0


class TestComputeBoost:
    """Tests for combined boosts."""

    def test_name_and_tag_boosts_stack(self):
        """Test name and tag adjustments add up."""
        record = IconRecord(name="car", tags=("car", "vehicle"))
        assert compute_boost(record, "car") == pytest.approx(EXACT_NAME_BOOST + EXACT_TAG_BOOST)

    def test_tag_only(self):
        record = IconRecord(name="home", tags=("house",))
        assert compute_boost(record, "house") == EXACT_TAG_BOOST


class TestRankMatches:
    """Tests for rank_matches."""

    def test_exact_name_beats_better_raw_score(self):
        """Test boosts can overturn raw fuzzy order."""
        candidates = rank_matches(
            [match("cart", 0.0, 0), match("car", 0.2, 1)],
            "car",
        )
        assert [c.name for c in candidates] == ["car", "cart"]
        assert candidates[0].adjusted_score == pytest.approx(0.2 + EXACT_NAME_BOOST)
        assert candidates[0].raw_score == 0.2
        assert candidates[0].boost == EXACT_NAME_BOOST

    def test_query_is_lowercased_and_trimmed(self):
        """Test boosts compare against the normalized query."""
        candidates = rank_matches([match("car", 0.1)], "  CAR ")
        assert candidates[0].boost == EXACT_NAME_BOOST

    def test_stable_on_ties(self):
        """Test equal adjusted scores keep input order."""
        candidates = rank_matches(
            [match("bus", 0.1, 0), match("van", 0.1, 1), match("cab", 0.1, 2)],
            "zz",
        )
        assert [c.name for c in candidates] == ["bus", "van", "cab"]

    def test_empty(self):
        assert rank_matches([], "car") == []

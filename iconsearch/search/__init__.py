"""Icon search package: metadata store, fuzzy matcher, ranking and engine."""

from iconsearch.search.engine import IconSearchEngine
from iconsearch.search.matcher import FuzzyIndex, MatcherOptions
from iconsearch.search.ranking import compute_boost, rank_matches
from iconsearch.search.store import IconIndex, IconMetadataStore, build_records

__all__ = [
    "FuzzyIndex",
    "IconIndex",
    "IconMetadataStore",
    "IconSearchEngine",
    "MatcherOptions",
    "build_records",
    "compute_boost",
    "rank_matches",
]

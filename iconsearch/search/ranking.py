"""
Ranking Boosts

Fuzzy scores alone can't tell "car" from "cart" for the query "car": both
contain it perfectly. Boosts push exact and prefix relationships ahead.

| condition                        | adjustment     |
|----------------------------------|----------------|
| name equals query                | -1.0           |
| else name starts with query      | -0.5           |
| else query starts with name      | -0.3           |
| a tag equals query               | -0.4 (stacks)  |
| else a tag starts with query     | -0.2 (stacks)  |

All comparisons are case-insensitive. Adjusted score = fuzzy score + boosts,
lower is better.

The constants were tuned by hand against real queries. Changing them changes
which icon wins ambiguous queries.
"""

from typing import Iterable

from iconsearch.models.icon import FuzzyMatch, IconRecord, ScoredCandidate


EXACT_NAME_BOOST = -1.0
NAME_PREFIX_BOOST = -0.5
QUERY_PREFIX_BOOST = -0.3
EXACT_TAG_BOOST = -0.4
TAG_PREFIX_BOOST = -0.2


def name_boost(name: str, query_lower: str) -> float:
    name = name.lower()
    if name == query_lower:
        return EXACT_NAME_BOOST
    if name.startswith(query_lower):
        return NAME_PREFIX_BOOST
    if query_lower.startswith(name):
        return QUERY_PREFIX_BOOST
    return 0.0


def tag_boost(tags: Iterable[str], query_lower: str) -> float:
    lowered = [tag.lower() for tag in tags]
    if any(tag == query_lower for tag in lowered):
        return EXACT_TAG_BOOST
    if any(tag.startswith(query_lower) for tag in lowered):
        return TAG_PREFIX_BOOST
    return 0.0


def compute_boost(record: IconRecord, query_lower: str) -> float:
    """Total adjustment for one record; name and tag boosts stack."""
    return name_boost(record.name, query_lower) + tag_boost(record.tags, query_lower)


def rank_matches(matches: Iterable[FuzzyMatch], query: str) -> list[ScoredCandidate]:
    """
    Apply boosts and order candidates best first.

    The sort is stable, so equal adjusted scores keep the matcher's order.
    """
    query_lower = query.strip().lower()

    candidates = []
    for match in matches:
        boost = compute_boost(match.record, query_lower)
        candidates.append(
            ScoredCandidate(
                name=match.record.name,
                raw_score=match.score,
                adjusted_score=match.score + boost,
                boost=boost,
            )
        )

    candidates.sort(key=lambda c: c.adjusted_score)
    return candidates

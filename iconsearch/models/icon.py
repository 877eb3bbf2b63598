"""
Icon Data Models

These models define the shapes flowing through the icon search engine:
1. IconRecord - one entry of the tag corpus (read-only reference data)
2. FieldMatch / FuzzyMatch - what the fuzzy matcher found for a record
3. ScoredCandidate - a match after ranking boosts were applied

DESIGN DECISION: Records are frozen. The index hands them out to callers,
and a frozen model means no caller can mutate the shared index through them.
Names and tags are stored exactly as the corpus spells them.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)


class IconRecord(BaseModel):
    """
    One icon in the corpus.

    `name` is the primary key, the corpus key verbatim. `tags` are synonyms
    and categories that widen recall; order is preserved, duplicates allowed.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Unique icon identifier, as keyed in the corpus"
    )
    tags: tuple[str, ...] = Field(
        default=(),
        description="Synonyms and categories, compared case-insensitively"
    )

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        tag = tag.lower()
        return any(t.lower() == tag for t in self.tags)

    def to_dict(self) -> dict:
        """Plain-data view handed to UI callers."""
        return {"name": self.name, "tags": list(self.tags)}


class FieldMatch(BaseModel):
    """A single field value that matched the query."""
    model_config = ConfigDict(frozen=True)

    key: str  # "name" or "tags"
    value: str
    score: float = Field(..., ge=0.0, le=1.0)
    norm: float = Field(..., gt=0.0, le=1.0)
    start: int = Field(default=0, ge=0)
    end: int = Field(default=0, ge=0)


class FuzzyMatch(BaseModel):
    """
    A record accepted by the fuzzy matcher.

    `index` is the record's position in the corpus; the matcher uses it
    to break ties so result order is deterministic.
    """
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0)
    record: IconRecord
    score: float = Field(..., ge=0.0, le=1.0)
    matches: tuple[FieldMatch, ...] = ()


class ScoredCandidate(BaseModel):
    """
    A fuzzy match after ranking boosts.

    Lower scores are more relevant. Lives for one search call only.
    """

    name: str
    raw_score: float
    adjusted_score: float
    boost: float = 0.0

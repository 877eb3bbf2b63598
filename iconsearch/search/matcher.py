"""
Fuzzy Matcher

Approximate matching of a free-text query against every icon's name and
tags. Scores run from 0 (perfect) to 1 (no resemblance); lower is better.

How a record is scored:
1. Each field value (the name, and each tag separately) is compared to the
   query. When the query fits inside the value we take the best-aligned
   window (partial ratio); when the query is longer, the edit distance
   between the whole strings is charged per query character.
   Field score = (1 - similarity) + distance of the window from `location`
   divided by `distance`.
2. A field value counts as a match only if its score is within `threshold`
   and the aligned window is at least `min_match_char_length` long.
3. A record matches if any field matched. Its score is the product of the
   matched field scores, each raised to (key weight * field norm), where
   norm = 1/sqrt(word count) so long multi-word tags weigh less. A perfect
   field (score 0) contributes machine epsilon instead of zeroing the product.

Results come back ordered by (score, corpus position).
"""

import math
import sys
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field
from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

from iconsearch.config.settings import SearchSettings
from iconsearch.models.icon import FieldMatch, FuzzyMatch, IconRecord


EPSILON = sys.float_info.epsilon

NAME_KEY = "name"
TAGS_KEY = "tags"


class MatcherOptions(BaseModel):
    """Tuning knobs for the fuzzy matcher."""
    model_config = ConfigDict(frozen=True)

    threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    name_weight: float = Field(default=0.5, gt=0.0)
    tags_weight: float = Field(default=0.5, gt=0.0)
    min_match_char_length: int = Field(default=2, ge=1)
    location: int = Field(default=0, ge=0)
    distance: int = Field(default=100, ge=1)

    @classmethod
    def from_settings(cls, settings: SearchSettings) -> "MatcherOptions":
        return cls(
            threshold=settings.threshold,
            name_weight=settings.name_weight,
            tags_weight=settings.tags_weight,
            min_match_char_length=settings.min_match_char_length,
            location=settings.location,
            distance=settings.distance,
        )

    def normalized_weights(self) -> dict[str, float]:
        """Key weights scaled to sum to 1."""
        total = self.name_weight + self.tags_weight
        return {
            NAME_KEY: self.name_weight / total,
            TAGS_KEY: self.tags_weight / total,
        }


def field_norm(value: str) -> float:
    """1/sqrt(number of words), rounded to 3 places."""
    token_count = len(value.split()) or 1
    return round(1 / math.sqrt(token_count), 3)


class _FieldEntry:
    """A field value prepared for matching."""

    __slots__ = ("key", "weight", "value", "text", "norm")

    def __init__(self, key: str, weight: float, value: str):
        self.key = key
        self.weight = weight
        self.value = value
        self.text = value.lower()
        self.norm = field_norm(value)


class FuzzyIndex:
    """
    Searchable view over a fixed list of icon records.

    Built once per corpus; field values are lowercased and normed up front
    so a query only pays for the comparisons.
    """

    def __init__(
        self,
        records: Iterable[IconRecord],
        options: Optional[MatcherOptions] = None,
    ):
        self._options = options or MatcherOptions()
        self._records: tuple[IconRecord, ...] = tuple(records)

        weights = self._options.normalized_weights()
        self._entries: list[list[_FieldEntry]] = []
        for record in self._records:
            entries = [_FieldEntry(NAME_KEY, weights[NAME_KEY], record.name)]
            entries.extend(
                _FieldEntry(TAGS_KEY, weights[TAGS_KEY], tag)
                for tag in record.tags
                if tag
            )
            self._entries.append(entries)

    @property
    def options(self) -> MatcherOptions:
        return self._options

    def __len__(self) -> int:
        return len(self._records)

    def _match_field(self, pattern: str, entry: _FieldEntry) -> Optional[FieldMatch]:
        """Score one field value against the (lowercased) pattern."""
        text = entry.text
        options = self._options

        if text == pattern:
            similarity, start, end = 1.0, 0, len(text)
        elif len(pattern) <= len(text):
            alignment = fuzz.partial_ratio_alignment(pattern, text)
            if alignment is None:
                return None
            similarity = alignment.score / 100
            start, end = alignment.dest_start, alignment.dest_end
        else:
            errors = Levenshtein.distance(pattern, text)
            similarity = max(0.0, 1.0 - errors / len(pattern))
            start, end = 0, len(text)

        if end - start < options.min_match_char_length:
            return None

        proximity = abs(start - options.location) / options.distance
        score = min(1.0, (1.0 - similarity) + proximity)
        if score > options.threshold:
            return None

        return FieldMatch(
            key=entry.key,
            value=entry.value,
            score=score,
            norm=entry.norm,
            start=start,
            end=end,
        )

    @staticmethod
    def _combine(matches: list[FieldMatch], weights: list[float]) -> float:
        total = 1.0
        for match, weight in zip(matches, weights):
            score = EPSILON if match.score == 0 else match.score
            total *= score ** (weight * match.norm)
        return total

    def search(self, query: str) -> list[FuzzyMatch]:
        """
        Find every record resembling the query.

        Returns matches sorted best first; ties keep corpus order.
        """
        pattern = query.strip().lower()
        if len(pattern) < self._options.min_match_char_length:
            return []

        results: list[FuzzyMatch] = []
        for index, (record, entries) in enumerate(zip(self._records, self._entries)):
            matched: list[FieldMatch] = []
            weights: list[float] = []
            for entry in entries:
                field_match = self._match_field(pattern, entry)
                if field_match is not None:
                    matched.append(field_match)
                    weights.append(entry.weight)

            if not matched:
                continue

            results.append(
                FuzzyMatch(
                    index=index,
                    record=record,
                    score=self._combine(matched, weights),
                    matches=tuple(matched),
                )
            )

        results.sort(key=lambda m: (m.score, m.index))
        return results

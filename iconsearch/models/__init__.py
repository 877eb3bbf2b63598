"""
Data Models Package

Pydantic models for icon records, match results and search events.
"""

from iconsearch.models.icon import (
    FieldMatch,
    FuzzyMatch,
    IconRecord,
    ScoredCandidate,
)
from iconsearch.models.events import (
    EventSeverity,
    SearchEvent,
    SearchEventBuilder,
    SearchEventType,
)

__all__ = [
    # Icon models
    "FieldMatch",
    "FuzzyMatch",
    "IconRecord",
    "ScoredCandidate",
    # Event models
    "EventSeverity",
    "SearchEvent",
    "SearchEventBuilder",
    "SearchEventType",
]

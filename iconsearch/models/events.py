"""
Search Event Models

Every significant thing the engine does produces a SearchEvent:
corpus loads (and failed loads), searches, suggestion scans, lookup misses.

DESIGN DECISION: Corpus failures are swallowed so the UI degrades to
"no results". Recording them as events keeps that silent policy observable
(logs locally, and to whatever sink the host injects).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class SearchEventType(str, Enum):
    """Types of events recorded by the search engine."""

    # Corpus lifecycle
    CORPUS_LOADED = "corpus_loaded"
    CORPUS_LOAD_FAILED = "corpus_load_failed"

    # Queries
    SEARCH_EXECUTED = "search_executed"
    SUGGESTIONS_GENERATED = "suggestions_generated"
    ICON_LOOKUP_MISSED = "icon_lookup_missed"


class EventSeverity(str, Enum):
    """Severity level for search events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class SearchEvent(BaseModel):
    """A single search engine event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )
    event_type: SearchEventType = Field(
        ...,
        description="Type of event"
    )
    severity: EventSeverity = Field(
        default=EventSeverity.INFO,
        description="Event severity"
    )
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_type: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "description": self.description,
            "details": self.details,
            "error_type": self.error_type,
            "error_message": self.error_message,
        }


class SearchEventBuilder:
    """
    Helper class to build search events with common patterns.

    Usage:
        event = SearchEventBuilder.corpus_loaded(icon_count=1500, source="file")
        event = SearchEventBuilder.corpus_load_failed(error, source="http")
    """

    @staticmethod
    def corpus_loaded(icon_count: int, source: str) -> SearchEvent:
        return SearchEvent(
            event_type=SearchEventType.CORPUS_LOADED,
            description=f"Loaded {icon_count} icons with metadata",
            details={
                "icon_count": icon_count,
                "source": source,
            },
        )

    @staticmethod
    def corpus_load_failed(error: BaseException, source: str) -> SearchEvent:
        return SearchEvent(
            event_type=SearchEventType.CORPUS_LOAD_FAILED,
            severity=EventSeverity.ERROR,
            description="Failed to load icon metadata, falling back to empty index",
            details={"source": source},
            error_type=type(error).__name__,
            error_message=str(error)[:500],
        )

    @staticmethod
    def search_executed(
        query: str,
        limit: int,
        match_count: int,
        result_count: int,
    ) -> SearchEvent:
        return SearchEvent(
            event_type=SearchEventType.SEARCH_EXECUTED,
            severity=EventSeverity.DEBUG,
            description=f"Search returned {result_count} icons",
            details={
                "query": query,
                "limit": limit,
                "match_count": match_count,
                "result_count": result_count,
            },
        )

    @staticmethod
    def suggestions_generated(query: str, suggestion_count: int) -> SearchEvent:
        return SearchEvent(
            event_type=SearchEventType.SUGGESTIONS_GENERATED,
            severity=EventSeverity.DEBUG,
            description=f"Generated {suggestion_count} suggestions",
            details={
                "query": query,
                "suggestion_count": suggestion_count,
            },
        )

    @staticmethod
    def icon_lookup_missed(name: str) -> SearchEvent:
        return SearchEvent(
            event_type=SearchEventType.ICON_LOOKUP_MISSED,
            severity=EventSeverity.DEBUG,
            description=f"Unknown icon requested: {name[:200]}",
            details={"name": name},
        )

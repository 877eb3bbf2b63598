"""
Search Event Logger

DESIGN DECISION: The engine never raises on a broken corpus; it returns
empty results instead. That makes logging the only place a failure shows
up, so every significant step goes through here.

The event logger:
- Always logs locally through structlog
- Forwards to an injected sink when one is configured
- Never lets a sink failure reach the caller
"""

from typing import Optional

import structlog

from iconsearch.audit.sink import SearchEventSink
from iconsearch.models.events import (
    EventSeverity,
    SearchEvent,
    SearchEventBuilder,
)


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class SearchEventLogger:
    """
    Central event logging for the icon search engine.

    Logs events both to:
    1. Structured local log (for debugging)
    2. The injected sink (for telemetry and tests)
    """

    def __init__(
        self,
        sink: Optional[SearchEventSink] = None,
    ):
        """
        Initialize event logger.

        Args:
            sink: Destination for events.
                  If None, only logs locally.
        """
        self._sink = sink
        self._logger = structlog.get_logger("iconsearch")

    @property
    def sink(self) -> Optional[SearchEventSink]:
        return self._sink

    async def log(self, event: SearchEvent) -> bool:
        """
        Log a search event.

        Always logs locally. Forwards to the sink if available.

        Returns True if the sink write succeeded (or no sink configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == EventSeverity.ERROR:
            self._logger.error("search_event", **log_dict)
        elif event.severity == EventSeverity.WARNING:
            self._logger.warning("search_event", **log_dict)
        elif event.severity == EventSeverity.DEBUG:
            self._logger.debug("search_event", **log_dict)
        else:
            self._logger.info("search_event", **log_dict)

        if self._sink:
            try:
                return await self._sink.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "event_sink_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    async def log_corpus_loaded(self, icon_count: int, source: str) -> None:
        """Log a successful corpus load."""
        await self.log(SearchEventBuilder.corpus_loaded(icon_count, source))

    async def log_corpus_load_failed(self, error: BaseException, source: str) -> None:
        """Log a failed corpus load (the store fell back to empty)."""
        await self.log(SearchEventBuilder.corpus_load_failed(error, source))

    async def log_search_executed(
        self,
        query: str,
        limit: int,
        match_count: int,
        result_count: int,
    ) -> None:
        """Log a completed search."""
        await self.log(
            SearchEventBuilder.search_executed(query, limit, match_count, result_count)
        )

    async def log_suggestions_generated(self, query: str, suggestion_count: int) -> None:
        """Log a suggestion scan."""
        await self.log(SearchEventBuilder.suggestions_generated(query, suggestion_count))

    async def log_icon_lookup_missed(self, name: str) -> None:
        """Log a metadata lookup for an unknown icon."""
        await self.log(SearchEventBuilder.icon_lookup_missed(name))

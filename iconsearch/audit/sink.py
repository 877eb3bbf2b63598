"""
Event Sinks

A sink is wherever the host wants search events to end up besides the
local log: a telemetry pipeline, a metrics bridge, or a list in a test.
"""

from abc import ABC, abstractmethod
from typing import Optional

from iconsearch.models.events import SearchEvent, SearchEventType


class SearchEventSink(ABC):
    """
    Abstract destination for search events.

    Events are append-only.
    """

    @abstractmethod
    async def append_event(self, event: SearchEvent) -> bool:
        """
        Append a search event.

        Args:
            event: The event to record

        Returns:
            True if recorded successfully
        """
        pass


class InMemoryEventSink(SearchEventSink):
    """Keeps events in a list. Handy for asserting on swallowed failures."""

    def __init__(self):
        self.events: list[SearchEvent] = []

    async def append_event(self, event: SearchEvent) -> bool:
        self.events.append(event)
        return True

    def of_type(self, event_type: SearchEventType) -> list[SearchEvent]:
        return [e for e in self.events if e.event_type == event_type]

    def last(self) -> Optional[SearchEvent]:
        return self.events[-1] if self.events else None

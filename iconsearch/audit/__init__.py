"""Search event logging package."""

from iconsearch.audit.logger import SearchEventLogger
from iconsearch.audit.sink import InMemoryEventSink, SearchEventSink

__all__ = ["InMemoryEventSink", "SearchEventLogger", "SearchEventSink"]

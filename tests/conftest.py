"""Shared fixtures for icon search tests."""

import pytest

from iconsearch.audit import InMemoryEventSink, SearchEventLogger
from iconsearch.config.settings import SearchSettings
from iconsearch.orchestrator import IconSearchService
from iconsearch.services.corpus import InMemoryCorpusProvider


VEHICLE_CORPUS = {
    "car": ["automobile", "vehicle", "transport"],
    "cart": ["shopping", "trolley"],
}

HOME_CORPUS = {
    "home": ["house", "building"],
}


@pytest.fixture
def event_sink() -> InMemoryEventSink:
    return InMemoryEventSink()


@pytest.fixture
def event_logger(event_sink) -> SearchEventLogger:
    return SearchEventLogger(event_sink)


@pytest.fixture
def make_service(event_logger):
    """Build a fresh service over an in-memory corpus."""

    def _make(data=None, error=None, delay=0.0, settings=None):
        provider = InMemoryCorpusProvider(data, error=error, delay=delay)
        service = IconSearchService(
            provider,
            settings=settings or SearchSettings(),
            event_logger=event_logger,
        )
        return service, provider

    return _make

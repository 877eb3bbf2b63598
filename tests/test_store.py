"""Tests for the icon metadata store."""

import asyncio

import pytest

from iconsearch.audit import InMemoryEventSink, SearchEventLogger
from iconsearch.models.events import SearchEventType
from iconsearch.search.store import IconIndex, IconMetadataStore, build_records
from iconsearch.services.corpus import (
    CorpusFormatError,
    CorpusUnavailableError,
    InMemoryCorpusProvider,
)

from tests.conftest import HOME_CORPUS, VEHICLE_CORPUS


def make_store(provider, sink=None) -> IconMetadataStore:
    return IconMetadataStore(provider, event_logger=SearchEventLogger(sink))


class TestBuildRecords:
    """Tests for turning a corpus document into records."""

    def test_keeps_document_order(self):
        records = build_records({"zap": [], "car": ["vehicle"], "home": []})
        assert [r.name for r in records] == ["zap", "car", "home"]
        assert records[1].tags == ("vehicle",)

    def test_keeps_names_and_tags_verbatim(self):
        """Test distinct keys stay distinct and nothing is rewritten."""
        records = build_records({
            "Car_Front": [" House ", "vehicle"],
            "car-front": ["auto"],
        })
        assert [r.name for r in records] == ["Car_Front", "car-front"]
        assert records[0].tags == (" House ", "vehicle")
        assert records[1].tags == ("auto",)


class TestIconIndex:
    """Tests for IconIndex."""

    def test_empty(self):
        index = IconIndex.empty()
        assert len(index) == 0
        assert index.by_name == {}
        assert index.fuzzy.search("car") == []


class TestIconMetadataStore:
    """Tests for loading and accessors."""

    @pytest.mark.asyncio
    async def test_load_is_lazy(self):
        """Test nothing is fetched until first use."""
        provider = InMemoryCorpusProvider(VEHICLE_CORPUS)
        store = make_store(provider)
        assert store.is_loaded is False
        assert provider.fetch_count == 0

        await store.ensure_loaded()
        assert store.is_loaded is True
        assert provider.fetch_count == 1

    @pytest.mark.asyncio
    async def test_load_is_memoized(self):
        """Test repeated calls reuse the same index."""
        provider = InMemoryCorpusProvider(VEHICLE_CORPUS)
        store = make_store(provider)

        first = await store.ensure_loaded()
        second = await store.ensure_loaded()
        await store.get_all_icon_names()

        assert first is second
        assert provider.fetch_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_loads_coalesce(self):
        """Test callers arriving mid-load share one fetch."""
        provider = InMemoryCorpusProvider(VEHICLE_CORPUS, delay=0.05)
        store = make_store(provider)

        indexes = await asyncio.gather(*(store.ensure_loaded() for _ in range(10)))

        assert provider.fetch_count == 1
        assert all(index is indexes[0] for index in indexes)

    @pytest.mark.asyncio
    async def test_get_all_icon_names(self):
        """Test names come back in corpus order."""
        store = make_store(InMemoryCorpusProvider({**VEHICLE_CORPUS, **HOME_CORPUS}))
        assert await store.get_all_icon_names() == ["car", "cart", "home"]

    @pytest.mark.asyncio
    async def test_get_icon_metadata(self):
        """Test metadata lookup for a known icon."""
        store = make_store(InMemoryCorpusProvider(HOME_CORPUS))
        record = await store.get_icon_metadata("home")
        assert record is not None
        assert record.to_dict() == {"name": "home", "tags": ["house", "building"]}

    @pytest.mark.asyncio
    async def test_get_icon_metadata_unknown(self):
        """Test unknown icons give None and a recorded miss."""
        sink = InMemoryEventSink()
        store = make_store(InMemoryCorpusProvider(HOME_CORPUS), sink)

        assert await store.get_icon_metadata("nonexistent-icon") is None
        assert len(sink.of_type(SearchEventType.ICON_LOOKUP_MISSED)) == 1

    @pytest.mark.asyncio
    async def test_corpus_keys_are_kept_as_written(self):
        """Test keys differing only in spelling are separate icons."""
        store = make_store(InMemoryCorpusProvider({
            "Car_Front": [" House ", "vehicle"],
            "car-front": ["auto"],
        }))

        assert await store.get_all_icon_names() == ["Car_Front", "car-front"]

        record = await store.get_icon_metadata("Car_Front")
        assert record is not None
        assert record.tags == (" House ", "vehicle")
        assert (await store.get_icon_metadata("car-front")).tags == ("auto",)
        assert await store.get_icon_metadata("CarFront") is None

    @pytest.mark.asyncio
    async def test_successful_load_is_recorded(self):
        sink = InMemoryEventSink()
        store = make_store(InMemoryCorpusProvider(VEHICLE_CORPUS), sink)

        await store.ensure_loaded()

        loaded = sink.of_type(SearchEventType.CORPUS_LOADED)
        assert len(loaded) == 1
        assert loaded[0].details == {"icon_count": 2, "source": "memory"}


class TestCorpusFailure:
    """A failed load degrades to an empty index, never an exception."""

    @pytest.mark.asyncio
    async def test_unavailable_source(self):
        """Test an unreachable source leaves a valid empty store."""
        sink = InMemoryEventSink()
        error = CorpusUnavailableError("Failed to load tags: 404")
        store = make_store(InMemoryCorpusProvider(error=error), sink)

        index = await store.ensure_loaded()

        assert len(index) == 0
        assert store.is_loaded is True
        assert store.load_error is error
        assert await store.get_all_icon_names() == []
        assert await store.get_icon_metadata("car") is None

        failures = sink.of_type(SearchEventType.CORPUS_LOAD_FAILED)
        assert len(failures) == 1
        assert failures[0].error_type == "CorpusUnavailableError"
        assert failures[0].error_message == "Failed to load tags: 404"

    @pytest.mark.asyncio
    async def test_malformed_document(self):
        """Test a document of the wrong shape is a recorded format error."""
        sink = InMemoryEventSink()
        store = make_store(InMemoryCorpusProvider(["car", "cart"]), sink)

        assert await store.get_all_icon_names() == []
        assert isinstance(store.load_error, CorpusFormatError)
        assert len(sink.of_type(SearchEventType.CORPUS_LOAD_FAILED)) == 1

    @pytest.mark.asyncio
    async def test_unexpected_error(self):
        """Test any exception from the provider is contained."""
        store = make_store(InMemoryCorpusProvider(error=RuntimeError("boom")))
        assert await store.get_all_icon_names() == []
        assert isinstance(store.load_error, RuntimeError)

    @pytest.mark.asyncio
    async def test_failure_is_not_retried(self):
        """Test the empty index sticks for the life of the store."""
        provider = InMemoryCorpusProvider(error=CorpusUnavailableError("down"))
        store = make_store(provider)

        await store.ensure_loaded()
        await store.ensure_loaded()

        assert provider.fetch_count == 1

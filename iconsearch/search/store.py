"""
Icon Metadata Store

Owns the icon index: loads the corpus once, builds the name lookup and the
fuzzy index, and serves read-only accessors.

DESIGN DECISION: A broken corpus never breaks the caller.
If the provider fails (unreachable, malformed), the store settles on an
EMPTY index, records the failure, and every later search returns nothing
until a new store is built. The UI shows "no results" either way.

Concurrency: the first caller starts the load as a task; anyone arriving
while it runs awaits the same task. The provider is asked exactly once.
"""

import asyncio
from typing import Optional

from iconsearch.audit import SearchEventLogger
from iconsearch.models.icon import IconRecord
from iconsearch.search.matcher import FuzzyIndex, MatcherOptions
from iconsearch.services.corpus import CorpusDocument, CorpusProvider


class IconIndex:
    """
    Immutable index over the loaded corpus.

    `records` keeps corpus order; `by_name` is the O(1) lookup;
    `fuzzy` is what the search engine matches against.
    """

    def __init__(
        self,
        records: list[IconRecord],
        options: Optional[MatcherOptions] = None,
    ):
        self.records: tuple[IconRecord, ...] = tuple(records)
        self.by_name: dict[str, IconRecord] = {r.name: r for r in self.records}
        self.fuzzy = FuzzyIndex(self.records, options)

    @classmethod
    def empty(cls, options: Optional[MatcherOptions] = None) -> "IconIndex":
        return cls([], options)

    def __len__(self) -> int:
        return len(self.records)


def build_records(document: CorpusDocument) -> list[IconRecord]:
    """
    Turn a corpus document into icon records.

    Keys and tags are kept exactly as written, in document order.
    """
    return [IconRecord(name=name, tags=tuple(tags)) for name, tags in document.items()]


class IconMetadataStore:
    """
    Lazily loaded, memoized icon metadata.

    One instance per service. Tests build a fresh store per case.
    """

    def __init__(
        self,
        provider: CorpusProvider,
        options: Optional[MatcherOptions] = None,
        event_logger: Optional[SearchEventLogger] = None,
    ):
        self._provider = provider
        self._options = options or MatcherOptions()
        self._event_logger = event_logger or SearchEventLogger()
        self._index: Optional[IconIndex] = None
        self._load_task: Optional[asyncio.Task] = None
        self._load_error: Optional[BaseException] = None

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def load_error(self) -> Optional[BaseException]:
        """The failure that emptied the index, if any."""
        return self._load_error

    async def _load(self) -> IconIndex:
        source = self._provider.source_name
        try:
            document = await self._provider.fetch_corpus()
            index = IconIndex(build_records(document), self._options)
        except Exception as e:
            # Fallback to empty metadata
            self._load_error = e
            self._index = IconIndex.empty(self._options)
            await self._event_logger.log_corpus_load_failed(e, source)
            return self._index

        self._index = index
        await self._event_logger.log_corpus_loaded(len(index), source)
        return index

    async def ensure_loaded(self) -> IconIndex:
        """
        Return the index, loading it on first use.

        Never raises for corpus problems; a failed load yields an empty index.
        """
        if self._index is not None:
            return self._index

        if self._load_task is None:
            self._load_task = asyncio.ensure_future(self._load())

        # A caller that gives up must not cancel the load for everyone else
        return await asyncio.shield(self._load_task)

    async def get_all_icon_names(self) -> list[str]:
        """All icon names in corpus order."""
        index = await self.ensure_loaded()
        return [record.name for record in index.records]

    async def get_icon_metadata(self, name: str) -> Optional[IconRecord]:
        """Look up one icon by exact name. Returns None for unknown icons."""
        index = await self.ensure_loaded()

        record = index.by_name.get(name)
        if record is None:
            await self._event_logger.log_icon_lookup_missed(name)
        return record

    async def get_records(self) -> tuple[IconRecord, ...]:
        """All records in corpus order."""
        index = await self.ensure_loaded()
        return index.records

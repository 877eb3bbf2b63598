"""
Icon Search Service

Ties the components together and exposes the public query surface used by
the category and payment-method forms:

1. search_icons         - ranked fuzzy search
2. get_all_icon_names   - every icon in the corpus
3. get_icon_metadata    - one icon's name and tags
4. get_search_suggestions - tag vocabulary completion
5. pick_icons           - what the icon picker shows for its current input

DESIGN DECISION: The corpus source is chosen here, once, from settings.
Nothing below this layer knows whether the corpus came from disk or HTTP.
"""

from typing import Optional

from iconsearch.audit import SearchEventLogger
from iconsearch.config import Settings, get_settings
from iconsearch.config.settings import CorpusSettings, SearchSettings
from iconsearch.models.icon import IconRecord
from iconsearch.search import IconMetadataStore, IconSearchEngine, MatcherOptions
from iconsearch.services.corpus import (
    CorpusProvider,
    HttpCorpusProvider,
    LocalFileCorpusProvider,
)


class IconSearchService:
    """
    Public icon search surface.

    One instance owns one store; build a new service to pick up a new corpus.
    """

    def __init__(
        self,
        provider: CorpusProvider,
        settings: Optional[SearchSettings] = None,
        event_logger: Optional[SearchEventLogger] = None,
    ):
        self._settings = settings or SearchSettings()
        self._event_logger = event_logger or SearchEventLogger()
        self._store = IconMetadataStore(
            provider,
            options=MatcherOptions.from_settings(self._settings),
            event_logger=self._event_logger,
        )
        self._engine = IconSearchEngine(
            self._store,
            settings=self._settings,
            event_logger=self._event_logger,
        )

    @property
    def store(self) -> IconMetadataStore:
        return self._store

    @property
    def engine(self) -> IconSearchEngine:
        return self._engine

    async def search_icons(self, query: str, limit: Optional[int] = None) -> list[str]:
        return await self._engine.search_icons(query, limit)

    async def get_all_icon_names(self) -> list[str]:
        return await self._store.get_all_icon_names()

    async def get_icon_metadata(self, name: str) -> Optional[IconRecord]:
        return await self._store.get_icon_metadata(name)

    async def get_search_suggestions(
        self,
        partial_query: str,
        limit: Optional[int] = None,
    ) -> list[str]:
        return await self._engine.get_search_suggestions(partial_query, limit)

    async def pick_icons(self, query: str, limit: Optional[int] = None) -> list[str]:
        """
        Icons for the picker grid.

        Blank input shows the popular icons (only those the corpus knows,
        unless the corpus is empty); anything else is a ranked search.
        """
        if query.strip():
            return await self.search_icons(query, limit)

        popular = self._settings.popular_icons_list
        names = await self._store.get_all_icon_names()
        if names:
            known = set(names)
            popular = [name for name in popular if name in known]

        if limit is not None:
            popular = popular[:max(limit, 0)]
        return popular


def create_corpus_provider(settings: CorpusSettings) -> CorpusProvider:
    """Pick the corpus provider the settings ask for."""
    if settings.source == "http":
        return HttpCorpusProvider(
            settings.url,
            timeout_seconds=settings.timeout_seconds,
            max_attempts=settings.max_attempts,
        )
    return LocalFileCorpusProvider(settings.path)


def create_icon_search_service(
    settings: Optional[Settings] = None,
    event_logger: Optional[SearchEventLogger] = None,
) -> IconSearchService:
    """
    Factory function to create the icon search service.

    Args:
        settings: Settings to use. Defaults to the cached global settings.
        event_logger: Event logger to use. Defaults to local-only logging.
    """
    settings = settings or get_settings()

    return IconSearchService(
        create_corpus_provider(settings.corpus),
        settings=settings.search,
        event_logger=event_logger,
    )

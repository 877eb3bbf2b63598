"""
Icon Search Engine

Turns free-text queries into ranked icon identifiers.

Flow for search_icons:
1. Blank query → [] (the store is not touched)
2. Ensure the store is loaded
3. Fuzzy match against names and tags
4. Apply ranking boosts, stable sort
5. Truncate to the limit, return names only
"""

from typing import Optional

from iconsearch.audit import SearchEventLogger
from iconsearch.config.settings import SearchSettings
from iconsearch.search.ranking import rank_matches
from iconsearch.search.store import IconMetadataStore


class IconSearchEngine:
    """
    Search and suggestions over an icon metadata store.

    Never raises for empty input or a failed corpus; both give [].
    """

    def __init__(
        self,
        store: IconMetadataStore,
        settings: Optional[SearchSettings] = None,
        event_logger: Optional[SearchEventLogger] = None,
    ):
        self._store = store
        self._settings = settings or SearchSettings()
        self._event_logger = event_logger or SearchEventLogger()

    @property
    def store(self) -> IconMetadataStore:
        return self._store

    async def search_icons(self, query: str, limit: Optional[int] = None) -> list[str]:
        """
        Search for icons using natural language and fuzzy matching.

        Args:
            query: The search query
            limit: Maximum number of results (default from settings, 50)

        Returns:
            Matching icon names, most relevant first
        """
        if limit is None:
            limit = self._settings.default_limit
        limit = max(limit, 0)

        query = query.strip()
        if not query:
            return []

        index = await self._store.ensure_loaded()

        matches = index.fuzzy.search(query)
        candidates = rank_matches(matches, query)
        results = [candidate.name for candidate in candidates[:limit]]

        await self._event_logger.log_search_executed(
            query=query,
            limit=limit,
            match_count=len(matches),
            result_count=len(results),
        )
        return results

    async def get_search_suggestions(
        self,
        partial_query: str,
        limit: Optional[int] = None,
    ) -> list[str]:
        """
        Suggest search terms from the tag vocabulary.

        Collects tags containing the partial query (case-insensitive, spaces
        included as typed), other than the query itself, in corpus order
        without duplicates.

        Args:
            partial_query: What the user has typed so far
            limit: Maximum number of suggestions (default from settings, 5)
        """
        if limit is None:
            limit = self._settings.suggestion_limit
        limit = max(limit, 0)

        if not partial_query.strip():
            return []

        records = await self._store.get_records()

        query_lower = partial_query.lower()
        # dict as an ordered set
        suggestions: dict[str, None] = {}
        for record in records:
            for tag in record.tags:
                tag_lower = tag.lower()
                if query_lower in tag_lower and tag_lower != query_lower:
                    suggestions.setdefault(tag, None)

        results = list(suggestions)[:limit]

        await self._event_logger.log_suggestions_generated(partial_query, len(results))
        return results

"""In-memory corpus provider, for tests and for hosts that already hold the data."""

import asyncio
from typing import Any, Optional

from iconsearch.services.corpus.interface import (
    CorpusDocument,
    CorpusProvider,
    validate_corpus_document,
)


class InMemoryCorpusProvider(CorpusProvider):
    """
    Serves a corpus held in memory.

    Pass `error` to simulate a failing source. `fetch_count` tells tests
    how many times the store actually asked for the corpus; `delay` keeps
    a fetch in flight long enough to exercise concurrent callers.
    """

    source_name = "memory"

    def __init__(
        self,
        data: Optional[Any] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self._data = data if data is not None else {}
        self._error = error
        self._delay = delay
        self.fetch_count = 0

    async def fetch_corpus(self) -> CorpusDocument:
        self.fetch_count += 1

        if self._delay:
            await asyncio.sleep(self._delay)

        if self._error is not None:
            raise self._error

        # Validated copy, callers can't reach back into our data
        return {name: list(tags) for name, tags in validate_corpus_document(self._data).items()}

"""Services package."""

from iconsearch.services.corpus import (
    CorpusError,
    CorpusFormatError,
    CorpusProvider,
    CorpusUnavailableError,
    HttpCorpusProvider,
    InMemoryCorpusProvider,
    LocalFileCorpusProvider,
)

__all__ = [
    "CorpusError",
    "CorpusFormatError",
    "CorpusProvider",
    "CorpusUnavailableError",
    "HttpCorpusProvider",
    "InMemoryCorpusProvider",
    "LocalFileCorpusProvider",
]

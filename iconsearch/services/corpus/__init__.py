"""
Corpus Providers Package

Abstract interface and concrete sources for the icon tag corpus.
"""

from iconsearch.services.corpus.interface import (
    CorpusDocument,
    CorpusError,
    CorpusFormatError,
    CorpusProvider,
    CorpusUnavailableError,
    validate_corpus_document,
)
from iconsearch.services.corpus.local_file import LocalFileCorpusProvider
from iconsearch.services.corpus.http_source import HttpCorpusProvider
from iconsearch.services.corpus.memory import InMemoryCorpusProvider

__all__ = [
    # Interface
    "CorpusDocument",
    "CorpusProvider",
    "validate_corpus_document",
    # Exceptions
    "CorpusError",
    "CorpusFormatError",
    "CorpusUnavailableError",
    # Implementations
    "HttpCorpusProvider",
    "InMemoryCorpusProvider",
    "LocalFileCorpusProvider",
]

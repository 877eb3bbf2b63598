"""
Abstract Corpus Provider Interface

DESIGN DECISION: The icon tag corpus can come from a file on disk (server
side, tests) or from an HTTP resource (browser-facing deployments). Both sit
behind one interface so that:
1. The store and ranking logic never branch on the environment
2. Tests inject an in-memory provider
3. The choice of source is made once, at composition time

The corpus document is a JSON object: icon name -> array of tag strings.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import TypeAdapter, ValidationError


CorpusDocument = dict[str, list[str]]

_DOCUMENT_ADAPTER = TypeAdapter(CorpusDocument)


class CorpusProvider(ABC):
    """
    Abstract source of the icon tag corpus.

    Implementations only retrieve and decode. They raise CorpusError
    subclasses on failure; recovering from those is the store's job.
    """

    # Short label used in logs and events
    source_name: str = "unknown"

    @abstractmethod
    async def fetch_corpus(self) -> CorpusDocument:
        """
        Retrieve the corpus document.

        Returns:
            Mapping of icon name to its tags, in document order

        Raises:
            CorpusUnavailableError: If the source cannot be read
            CorpusFormatError: If the content is not a valid corpus document
        """
        pass


def validate_corpus_document(raw: Any) -> CorpusDocument:
    """
    Check that decoded JSON has the corpus shape.

    Strings are not coerced: a tag list of numbers is a format error,
    not a list of "1", "2".
    """
    try:
        return _DOCUMENT_ADAPTER.validate_python(raw, strict=True)
    except ValidationError as e:
        raise CorpusFormatError(
            f"Corpus document must map icon names to lists of strings: "
            f"{e.error_count()} validation error(s)"
        ) from e


class CorpusError(Exception):
    """Base exception for corpus retrieval."""
    pass


class CorpusUnavailableError(CorpusError):
    """The corpus source could not be read."""
    pass


class CorpusFormatError(CorpusError):
    """The corpus content is not a valid corpus document."""
    pass

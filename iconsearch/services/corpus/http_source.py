"""
HTTP Corpus Provider

Fetches the tags JSON document over HTTP, the way a browser-facing
deployment serves it (e.g. GET /tags.json from the static site).

Transport errors (connection refused, timeouts) are retried with backoff.
A non-success status is NOT retried: the resource is missing or broken,
and asking again will not fix it.
"""

from typing import Optional

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from iconsearch.services.corpus.interface import (
    CorpusDocument,
    CorpusFormatError,
    CorpusProvider,
    CorpusUnavailableError,
    validate_corpus_document,
)


class HttpCorpusProvider(CorpusProvider):
    """Corpus provider backed by an HTTP GET."""

    source_name = "http"

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        max_attempts: int = 3,
        client: Optional[httpx.AsyncClient] = None,
        retry_wait: Optional[wait_base] = None,
    ):
        """
        Initialize HTTP provider.

        Args:
            url: Location of the tags JSON document
            timeout_seconds: Per-request timeout when the provider owns the client
            max_attempts: Total attempts on transport errors
            client: Shared client to use instead of a per-fetch one
            retry_wait: Backoff strategy between attempts
        """
        self._url = url
        self._timeout = timeout_seconds
        self._max_attempts = max_attempts
        self._client = client
        self._retry_wait = retry_wait or wait_exponential(multiplier=1, min=2, max=10)

    @property
    def url(self) -> str:
        return self._url

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._max_attempts),
                wait=self._retry_wait,
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    return await client.get(self._url)
        except httpx.HTTPError as e:
            raise CorpusUnavailableError(f"Failed to fetch tags from {self._url}: {e}")

    async def fetch_corpus(self) -> CorpusDocument:
        if self._client is not None:
            response = await self._get(self._client)
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await self._get(client)

        if not response.is_success:
            raise CorpusUnavailableError(f"Failed to load tags: {response.status_code}")

        try:
            raw = response.json()
        except ValueError as e:
            raise CorpusFormatError(f"Tags response from {self._url} is not valid JSON: {e}")

        return validate_corpus_document(raw)

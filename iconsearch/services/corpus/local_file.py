"""
Local File Corpus Provider

Reads the tags JSON document from disk. Used server side, in tests and
whenever the corpus ships with the package.
"""

import asyncio
import json
from pathlib import Path
from typing import Union

from iconsearch.services.corpus.interface import (
    CorpusDocument,
    CorpusFormatError,
    CorpusProvider,
    CorpusUnavailableError,
    validate_corpus_document,
)


class LocalFileCorpusProvider(CorpusProvider):
    """Corpus provider backed by a JSON file."""

    source_name = "file"

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise CorpusUnavailableError(f"Corpus file not found: {self._path}")
        except UnicodeDecodeError as e:
            raise CorpusFormatError(f"Corpus file {self._path} is not valid UTF-8: {e}")
        except OSError as e:
            raise CorpusUnavailableError(f"Failed to read corpus file {self._path}: {e}")

    async def fetch_corpus(self) -> CorpusDocument:
        # File IO runs in a worker thread to keep the event loop free
        content = await asyncio.to_thread(self._read)

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorpusFormatError(f"Corpus file {self._path} is not valid JSON: {e}")

        return validate_corpus_document(raw)

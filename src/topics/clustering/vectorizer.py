"""
Vocabulary accumulation and per-document term counting.
"""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

from src.core.tokenizer import tokenize

from .models import Document, IngestError, VocabularyBuilder


class Vectorizer:
    """
    Builds Documents from files and records their terms in a shared vocabulary.

    The vocabulary builder is passed in explicitly and only ever grows.
    """

    def __init__(
        self,
        vocabulary: VocabularyBuilder,
        min_term_length: int = 5,
        normalize: Callable[[Union[bytes, str]], list[str]] = tokenize,
    ):
        self.vocabulary = vocabulary
        self.min_term_length = min_term_length
        self.normalize = normalize

    def count_terms(self, raw: Union[bytes, str]) -> dict[str, int]:
        """Count normalized terms, discarding those shorter than min_term_length."""
        return dict(Counter(
            term for term in self.normalize(raw)
            if len(term) >= self.min_term_length
        ))

    def _read(self, path: Path) -> Document:
        """Read and count one file without touching the vocabulary."""
        try:
            raw = Path(path).read_bytes()
        except OSError as e:
            raise IngestError(path, e) from e
        return Document(path=Path(path), features=self.count_terms(raw))

    def ingest(self, path: Path) -> Document:
        """
        Read one file into a Document and add its terms to the vocabulary.

        Raises:
            IngestError: If the file cannot be read
        """
        doc = self._read(path)
        self.vocabulary.update(doc.features)
        return doc

    def ingest_all(
        self,
        paths: Iterable[Path],
        workers: int = 1,
        on_error: Optional[Callable[[IngestError], None]] = None,
    ) -> list[Document]:
        """
        Ingest many files, skipping unreadable ones.

        With workers > 1, files are read and counted on a thread pool and the
        vocabulary is merged afterwards in input order, so the result matches
        a serial run.

        Args:
            paths: Files to ingest, in corpus order
            workers: Thread count for reading/tokenizing
            on_error: Called with each IngestError (errors are not raised)

        Returns:
            Successfully ingested documents, in input order
        """
        paths = list(paths)

        def attempt(path: Path) -> Union[Document, IngestError]:
            try:
                return self._read(path)
            except IngestError as e:
                return e

        if workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                outcomes = list(pool.map(attempt, paths))
        else:
            outcomes = [attempt(path) for path in paths]

        documents = []
        for outcome in outcomes:
            if isinstance(outcome, IngestError):
                if on_error is not None:
                    on_error(outcome)
                continue
            self.vocabulary.update(outcome.features)
            documents.append(outcome)
        return documents

"""
Data models for k-means topic clustering.

Documents own sparse term counts and a mutable cluster assignment.
Centroids are dense mean vectors laid out over a frozen Vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional

import numpy as np


# Assignment sentinel used before the first assignment pass
UNASSIGNED: Optional[int] = None


class TopicsError(Exception):
    """Base class for clustering errors."""


class IngestError(TopicsError):
    """A document could not be read; it is dropped from the corpus."""

    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Could not read {self.path}: {cause}")


class InsufficientDataError(TopicsError):
    """Too few documents to cluster into the requested number of clusters."""

    def __init__(self, document_count: int, cluster_count: int):
        self.document_count = document_count
        self.cluster_count = cluster_count
        super().__init__(
            f"Not enough documents to cluster: {document_count} "
            f"(need at least 3 and more than {cluster_count})"
        )


@dataclass
class Document:
    """A source file with its term counts and cluster assignment."""

    path: Path
    features: dict[str, int] = field(default_factory=dict)  # term -> raw count
    cluster_id: Optional[int] = UNASSIGNED

    @property
    def assigned(self) -> bool:
        return self.cluster_id is not UNASSIGNED

    def count(self, term: str) -> int:
        return self.features.get(term, 0)


@dataclass
class Centroid:
    """Mean feature vector of a cluster plus its member count."""

    vector: np.ndarray           # Dense, aligned to Vocabulary.terms
    size: int = 0

    def weight(self, term: str, vocabulary: Vocabulary) -> float:
        """Weight of a term; 0.0 for terms outside the vocabulary."""
        if term not in vocabulary:
            return 0.0
        return float(self.vector[vocabulary.index(term)])

    def features(self, vocabulary: Vocabulary) -> dict[str, float]:
        """Sparse view: nonzero terms only."""
        return {
            term: float(value)
            for term, value in zip(vocabulary.terms, self.vector)
            if value != 0
        }


class VocabularyBuilder:
    """Accumulates the set of distinct terms seen during ingestion."""

    def __init__(self):
        self._terms: set[str] = set()

    def add(self, term: str) -> None:
        self._terms.add(term)

    def update(self, terms: Iterable[str]) -> None:
        self._terms.update(terms)

    def __contains__(self, term: str) -> bool:
        return term in self._terms

    def __len__(self) -> int:
        return len(self._terms)

    def freeze(self) -> Vocabulary:
        """Snapshot the current terms into an immutable Vocabulary."""
        return Vocabulary(self._terms)


class Vocabulary:
    """
    Immutable, ordered set of terms.

    Terms are sorted so that column indices (and therefore tie ordering in
    reports) do not depend on ingestion order.
    """

    def __init__(self, terms: Iterable[str]):
        self._terms: tuple[str, ...] = tuple(sorted(set(terms)))
        self._index: dict[str, int] = {t: i for i, t in enumerate(self._terms)}

    @property
    def terms(self) -> tuple[str, ...]:
        return self._terms

    def index(self, term: str) -> int:
        return self._index[term]

    def __contains__(self, term: str) -> bool:
        return term in self._index

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def vectorize(self, features: dict[str, float]) -> np.ndarray:
        """Dense vector for a sparse term mapping. Missing terms are 0."""
        vector = np.zeros(len(self._terms), dtype=np.float64)
        for term, count in features.items():
            vector[self._index[term]] = count
        return vector

    def matrix(self, documents: list[Document]) -> np.ndarray:
        """Stack dense document vectors into an (n_documents, n_terms) array."""
        if not documents:
            return np.zeros((0, len(self._terms)), dtype=np.float64)
        return np.vstack([self.vectorize(doc.features) for doc in documents])

"""
Topic clustering runner.

Core flow: discover → ingest → cluster → report.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from src.core.corpus import discover
from src.core.logger import RunLogger

from .clustering import (
    Centroid,
    Document,
    IngestError,
    InsufficientDataError,
    IterationStats,
    Vectorizer,
    Vocabulary,
    VocabularyBuilder,
    cluster,
)
from .config import TopicsConfig
from .report import render, summarize


@dataclass
class RunResult:
    """Outcome of a completed clustering run."""

    documents: list[Document]
    vocabulary: Vocabulary
    centroids: list[Centroid]
    iterations: int
    converged: bool
    failed: list[IngestError] = field(default_factory=list)

    def report(self, top_n: int = 15, max_documents: int = 20) -> str:
        return render(self.documents, self.vocabulary, self.centroids, top_n, max_documents)


class TopicsRunner:
    """
    Runs one clustering pass over a directory of text files.

    Ingestion errors are reported and skipped. InsufficientDataError is
    logged and re-raised; no result is produced in that case.
    """

    def __init__(
        self,
        config: TopicsConfig,
        logger: Optional[RunLogger] = None,
        rng: Optional[random.Random] = None,
    ):
        config.validate()
        self.config = config
        self.logger = logger
        if rng is None:
            rng = random.Random(config.seed)
        self.rng = rng

    def _log(self, message: str) -> None:
        if self.config.verbose:
            print(message)

    def _on_ingest_error(self, error: IngestError) -> None:
        # Always shown: dropped files are user-visible diagnostics
        print(error)
        if self.logger:
            self.logger.log_ingest_error(str(error.path), str(error.cause))

    def ingest(self) -> tuple[list[Document], Vocabulary, list[IngestError]]:
        """Discover and vectorize the corpus, then freeze its vocabulary."""
        paths = discover(Path(self.config.root_directory), self.config.file_suffix)
        self._log(f"Found {len(paths)} files matching '{self.config.file_suffix}' "
                  f"under {self.config.root_directory}")

        failed: list[IngestError] = []

        def on_error(error: IngestError) -> None:
            failed.append(error)
            self._on_ingest_error(error)

        builder = VocabularyBuilder()
        vectorizer = Vectorizer(builder, min_term_length=self.config.min_term_length)
        documents = vectorizer.ingest_all(paths, workers=self.config.workers, on_error=on_error)
        vocabulary = builder.freeze()

        self._log(f"Ingested {len(documents)} documents, {len(vocabulary)} distinct terms"
                  + (f" ({len(failed)} unreadable)" if failed else ""))
        if self.logger:
            self.logger.log_corpus(len(documents), len(vocabulary), len(failed))

        return documents, vocabulary, failed

    def _on_iteration(self, stats: IterationStats) -> None:
        self._log(f"  Iteration {stats.iteration}: {stats.reassigned} reassigned")
        if self.logger:
            self.logger.log_iteration(stats.iteration, stats.reassigned, stats.sizes)

    def run(self) -> RunResult:
        """
        Run the full pipeline.

        Raises:
            FileNotFoundError: If the corpus root does not exist
            InsufficientDataError: If the corpus is too small for cluster_count
        """
        if self.logger:
            self.logger.log_run_start(self.config.to_dict())

        documents, vocabulary, failed = self.ingest()

        history: list[IterationStats] = []

        def on_iteration(stats: IterationStats) -> None:
            history.append(stats)
            self._on_iteration(stats)

        self._log(f"Clustering into {self.config.cluster_count} clusters "
                  f"(max {self.config.max_iterations} iterations)...")
        try:
            centroids = cluster(
                self.config.cluster_count,
                documents,
                vocabulary,
                rng=self.rng,
                max_iterations=self.config.max_iterations,
                on_iteration=on_iteration,
            )
        except InsufficientDataError as e:
            if self.logger:
                self.logger.log_clustering_error(str(e))
            raise

        converged = bool(history) and history[-1].converged
        self._log(f"{'Converged' if converged else 'Stopped'} after {len(history)} iterations")

        result = RunResult(
            documents=documents,
            vocabulary=vocabulary,
            centroids=centroids,
            iterations=len(history),
            converged=converged,
            failed=failed,
        )

        if self.logger:
            self.logger.log_run_end(
                iterations=result.iterations,
                converged=result.converged,
                clusters=summarize(
                    documents, vocabulary, centroids,
                    top_n=self.config.top_terms,
                    max_documents=self.config.max_documents,
                ),
            )

        return result

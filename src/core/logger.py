"""
Structured logging for clustering runs.

Single JSONL file with typed events for streaming and analysis.

Event types:
- run_start: Config
- ingest_error: Unreadable file (document dropped)
- corpus: Documents ingested, vocabulary size
- iteration: Reassignments and cluster sizes per k-means pass
- clustering_error: Run aborted (e.g. insufficient data)
- run_end: Iterations, convergence, cluster summaries
"""

import json
from pathlib import Path
from datetime import datetime
from typing import Any, Optional


class RunLogger:
    def __init__(self, output_dir: Path):
        """
        Initialize logger for a run.

        Args:
            output_dir: Directory for the log file (created if missing)
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = self.output_dir / "run.jsonl"

        # Open file in append mode
        self.file_handle = open(self.log_file, 'a')

    def _write_event(self, event_type: str, data: dict[str, Any]) -> None:
        """Write typed event to JSONL log."""
        event = {
            "type": event_type,
            "timestamp": datetime.now().isoformat(),
            **data
        }
        self.file_handle.write(json.dumps(event) + '\n')
        self.file_handle.flush()  # Ensure streaming writes

    def log_run_start(self, config: dict[str, Any]) -> None:
        """
        Log run initialization.

        Args:
            config: Run configuration parameters
        """
        self._write_event("run_start", {"config": config})

    def log_ingest_error(self, path: str, message: str) -> None:
        """Log a file that could not be read."""
        self._write_event("ingest_error", {
            "path": path,
            "message": message,
        })

    def log_corpus(self, num_documents: int, vocabulary_size: int, num_failed: int) -> None:
        """
        Log corpus ingestion summary.

        Args:
            num_documents: Documents successfully ingested
            vocabulary_size: Distinct terms across the corpus
            num_failed: Files dropped due to read errors
        """
        self._write_event("corpus", {
            "num_documents": num_documents,
            "vocabulary_size": vocabulary_size,
            "num_failed": num_failed,
        })

    def log_iteration(self, iteration: int, reassigned: int, sizes: list[int]) -> None:
        """
        Log one k-means pass.

        Args:
            iteration: 1-based pass number
            reassigned: Documents that changed cluster
            sizes: Member count per cluster
        """
        self._write_event("iteration", {
            "iteration": iteration,
            "reassigned": reassigned,
            "sizes": sizes,
        })

    def log_clustering_error(self, message: str, error_type: str = "abort") -> None:
        """Log an error that stopped clustering."""
        self._write_event("clustering_error", {
            "message": message,
            "error_type": error_type,
        })

    def log_run_end(
        self,
        iterations: int,
        converged: bool,
        clusters: list[dict],
        max_terms: Optional[int] = 5,
    ) -> None:
        """
        Log run completion.

        Args:
            iterations: Passes executed
            converged: Whether the last pass reassigned nothing
            clusters: Cluster summaries (id, size, top_terms, documents)
            max_terms: Top terms kept per cluster in the log (None = all)
        """
        # Keep log lines small: only a few terms and a document count
        logged_clusters = []
        for c in clusters:
            terms = c.get("top_terms", [])
            if max_terms is not None:
                terms = terms[:max_terms]
            logged_clusters.append({
                "id": c["id"],
                "size": c["size"],
                "top_terms": [t["term"] for t in terms],
                "num_documents_listed": len(c.get("documents", [])),
            })

        self._write_event("run_end", {
            "iterations": iterations,
            "converged": converged,
            "clusters": logged_clusters,
        })

    def close(self) -> None:
        """Close log file."""
        if hasattr(self, 'file_handle') and self.file_handle:
            self.file_handle.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

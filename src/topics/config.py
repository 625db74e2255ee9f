"""
Configuration for topic clustering runs.
"""

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

import yaml

__all__ = [
    "TopicsConfig",
    "load_config",
]


@dataclass
class TopicsConfig:
    """Configuration for a clustering run."""

    # Corpus
    root_directory: str = "."
    file_suffix: str = ".md"
    min_term_length: int = 5
    workers: int = 1             # Threads used to read/tokenize files

    # Clustering
    cluster_count: int = 50
    max_iterations: int = 20
    seed: Optional[int] = None   # None = unseeded, results vary run to run

    # Report
    top_terms: int = 15
    max_documents: int = 20      # Per cluster; <= 0 lists all

    # Output
    log_dir: Optional[str] = None  # JSONL event log; None disables
    verbose: bool = True

    def validate(self) -> None:
        """Raise ValueError for settings the clustering run cannot use."""
        if self.cluster_count < 1:
            raise ValueError(f"cluster_count must be >= 1, got {self.cluster_count}")
        if self.min_term_length < 0:
            raise ValueError(f"min_term_length must be >= 0, got {self.min_term_length}")
        if self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.top_terms < 0:
            raise ValueError(f"top_terms must be >= 0, got {self.top_terms}")

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TopicsConfig":
        """Create from dict, filtering out unknown keys."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


def load_config(config_path: Path) -> TopicsConfig:
    """
    Load a YAML config file, merging it over defaults.

    Args:
        config_path: Path to a YAML mapping of TopicsConfig fields

    Returns:
        TopicsConfig with file values applied

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a YAML mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    merged = TopicsConfig().to_dict()
    merged.update(data)
    return TopicsConfig.from_dict(merged)

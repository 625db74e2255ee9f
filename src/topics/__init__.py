"""
Topics - k-means clustering of text files by vocabulary.

Groups a directory of documents into a fixed number of clusters and
summarizes each cluster's characteristic terms.
"""

from .config import TopicsConfig, load_config
from .runner import TopicsRunner, RunResult

__all__ = ["TopicsConfig", "load_config", "TopicsRunner", "RunResult"]

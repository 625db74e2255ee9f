"""
K-means clustering of text documents over raw term counts.

Vectorizer builds Documents and the shared Vocabulary; the algorithm module
runs the assignment/update loop.
"""

from .models import (
    Document,
    Centroid,
    Vocabulary,
    VocabularyBuilder,
    TopicsError,
    IngestError,
    InsufficientDataError,
    UNASSIGNED,
)
from .vectorizer import Vectorizer
from .algorithm import (
    IterationStats,
    squared_distance,
    initial_centroids,
    assign,
    update,
    cluster,
    MAX_ITERATIONS,
    MIN_DOCUMENTS,
)

__all__ = [
    # Models
    "Document",
    "Centroid",
    "Vocabulary",
    "VocabularyBuilder",
    "TopicsError",
    "IngestError",
    "InsufficientDataError",
    "UNASSIGNED",
    # Vectorizer
    "Vectorizer",
    # Algorithm
    "IterationStats",
    "squared_distance",
    "initial_centroids",
    "assign",
    "update",
    "cluster",
    "MAX_ITERATIONS",
    "MIN_DOCUMENTS",
]

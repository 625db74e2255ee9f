"""
K-means clustering over bag-of-words vectors.

Random-seed initialization followed by alternating assignment/update steps
until no document changes cluster or the iteration budget runs out.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .models import (
    Centroid,
    Document,
    InsufficientDataError,
    Vocabulary,
    UNASSIGNED,
)


MAX_ITERATIONS = 20
MIN_DOCUMENTS = 3


@dataclass
class IterationStats:
    """Progress report for one pass of the k-means loop."""

    iteration: int               # 1-based
    reassigned: int              # Documents whose cluster changed
    sizes: list[int]             # Member count per cluster after this pass

    @property
    def converged(self) -> bool:
        return self.reassigned == 0


def squared_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Squared Euclidean distance between two dense vectors."""
    diff = a - b
    return float(np.dot(diff, diff))


def initial_centroids(
    matrix: np.ndarray,
    k: int,
    rng: random.Random,
) -> list[Centroid]:
    """Pick k distinct document vectors uniformly at random as starting means."""
    indices = rng.sample(range(matrix.shape[0]), k)
    return [Centroid(vector=matrix[i].copy(), size=0) for i in indices]


def distance_matrix(matrix: np.ndarray, centroids: list[Centroid]) -> np.ndarray:
    """(n_documents, k) squared distances from every document to every centroid."""
    distances = np.empty((matrix.shape[0], len(centroids)), dtype=np.float64)
    for j, centroid in enumerate(centroids):
        # Exact differences rather than |x|^2 + |c|^2 - 2x.c, so equal
        # distances compare equal and ties resolve by index.
        diff = matrix - centroid.vector
        distances[:, j] = np.einsum("ij,ij->i", diff, diff)
    return distances


def assign(
    documents: list[Document],
    matrix: np.ndarray,
    centroids: list[Centroid],
) -> int:
    """
    Move every document to its nearest centroid.

    Ties go to the lowest centroid index (np.argmin returns the first minimum).

    Returns:
        Number of documents whose assignment changed
    """
    nearest = np.argmin(distance_matrix(matrix, centroids), axis=1)

    changed = 0
    for doc, cluster_id in zip(documents, nearest):
        cluster_id = int(cluster_id)
        if doc.cluster_id != cluster_id:
            doc.cluster_id = cluster_id
            changed += 1
    return changed


def update(
    documents: list[Document],
    matrix: np.ndarray,
    centroids: list[Centroid],
) -> None:
    """
    Recompute each centroid as the mean of its members.

    A cluster with no members keeps its previous vector and reports size 0.
    """
    labels = np.array(
        [doc.cluster_id if doc.assigned else -1 for doc in documents]
    )
    for j, centroid in enumerate(centroids):
        members = labels == j
        size = int(members.sum())
        centroid.size = size
        if size > 0:
            centroid.vector = matrix[members].sum(axis=0) / size


def cluster(
    k: int,
    documents: list[Document],
    vocabulary: Vocabulary,
    rng: Optional[random.Random] = None,
    max_iterations: int = MAX_ITERATIONS,
    on_iteration: Optional[Callable[[IterationStats], None]] = None,
) -> list[Centroid]:
    """
    Cluster documents into k groups.

    Results depend on the random seeds; k-means only finds a local optimum.
    Final assignments are written to each Document's cluster_id.

    Args:
        k: Number of clusters
        documents: Corpus (feature vectors must only use vocabulary terms)
        vocabulary: Frozen vocabulary defining the vector layout
        rng: Random source for seed selection (default: unseeded)
        max_iterations: Hard bound on assignment/update passes
        on_iteration: Called after every pass with its statistics

    Returns:
        k centroids, indexed by cluster id

    Raises:
        ValueError: If k < 1
        InsufficientDataError: If there are fewer than 3 documents or not
            more documents than clusters
    """
    if k < 1:
        raise ValueError(f"Cluster count must be positive, got {k}")
    if len(documents) < MIN_DOCUMENTS or len(documents) <= k:
        raise InsufficientDataError(len(documents), k)

    if rng is None:
        rng = random.Random()

    matrix = vocabulary.matrix(documents)
    centroids = initial_centroids(matrix, k, rng)

    # Fresh start, so the first pass always counts as a change
    for doc in documents:
        doc.cluster_id = UNASSIGNED

    for iteration in range(1, max_iterations + 1):
        reassigned = assign(documents, matrix, centroids)
        if reassigned:
            update(documents, matrix, centroids)

        if on_iteration is not None:
            on_iteration(IterationStats(
                iteration=iteration,
                reassigned=reassigned,
                sizes=[c.size for c in centroids],
            ))

        if not reassigned:
            break

    return centroids

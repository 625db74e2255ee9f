"""
Cluster summaries: characteristic terms and member documents per cluster.
"""

from __future__ import annotations

from .clustering.models import Centroid, Document, Vocabulary


def top_terms(
    centroid: Centroid,
    vocabulary: Vocabulary,
    n: int = 15,
) -> list[tuple[str, float]]:
    """Highest-weighted terms of a centroid, ties kept in vocabulary order."""
    ranked = sorted(
        zip(vocabulary.terms, centroid.vector.tolist()),
        key=lambda pair: pair[1],
        reverse=True,
    )
    return ranked[:n]


def cluster_members(
    documents: list[Document],
    cluster_id: int,
    limit: int = 20,
) -> list[Document]:
    """Documents assigned to a cluster, in corpus order (limit <= 0 = all)."""
    members = [doc for doc in documents if doc.cluster_id == cluster_id]
    if limit > 0:
        members = members[:limit]
    return members


def summarize(
    documents: list[Document],
    vocabulary: Vocabulary,
    centroids: list[Centroid],
    top_n: int = 15,
    max_documents: int = 20,
) -> list[dict]:
    """JSON-serializable per-cluster summary."""
    return [
        {
            "id": i,
            "size": centroid.size,
            "top_terms": [
                {"term": term, "weight": weight}
                for term, weight in top_terms(centroid, vocabulary, top_n)
            ],
            "documents": [
                str(doc.path)
                for doc in cluster_members(documents, i, max_documents)
            ],
        }
        for i, centroid in enumerate(centroids)
    ]


def render(
    documents: list[Document],
    vocabulary: Vocabulary,
    centroids: list[Centroid],
    top_n: int = 15,
    max_documents: int = 20,
) -> str:
    """
    Human-readable report.

    Example:
        Clustered 6 docs with 3 words into 2 clusters
        Cluster 0, 2 documents
            Top words:
            alpha	4.50
            Documents:
            docs/a.md
    """
    lines = [
        f"Clustered {len(documents)} docs with {len(vocabulary)} words "
        f"into {len(centroids)} clusters"
    ]
    for i, centroid in enumerate(centroids):
        lines.append(f"Cluster {i}, {centroid.size} documents")
        lines.append("    Top words:")
        for term, weight in top_terms(centroid, vocabulary, top_n):
            lines.append(f"    {term}\t{weight:.2f}")
        lines.append("    Documents:")
        for doc in cluster_members(documents, i, max_documents):
            lines.append(f"    {doc.path}")
    return "\n".join(lines)

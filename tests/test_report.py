"""
Test cluster summaries and report rendering.
"""

import numpy as np

from src.topics.clustering import Centroid, Document, Vocabulary
from src.topics.report import cluster_members, render, summarize, top_terms


def make_result():
    vocab = Vocabulary(["alpha", "beta", "delta", "gamma"])
    centroids = [
        Centroid(vector=np.array([4.5, 0.0, 1.0, 1.0]), size=2),
        Centroid(vector=np.array([0.0, 5.5, 0.0, 0.0]), size=1),
    ]
    docs = [
        Document(path="docs/a.md", cluster_id=0),
        Document(path="docs/b.md", cluster_id=1),
        Document(path="docs/c.md", cluster_id=0),
    ]
    return docs, vocab, centroids


def test_top_terms():
    """Terms ranked by weight, ties in vocabulary order, capped at n."""
    print("Testing top_terms...")

    docs, vocab, centroids = make_result()
    ranked = top_terms(centroids[0], vocab, n=3)
    assert ranked == [("alpha", 4.5), ("delta", 1.0), ("gamma", 1.0)]
    print(f"  ✓ {ranked}")

    assert len(top_terms(centroids[0], vocab, n=15)) == len(vocab)
    print("  ✓ n larger than vocabulary is capped")


def test_cluster_members():
    """Members listed in corpus order up to the limit."""
    print("\nTesting cluster_members...")

    docs, vocab, centroids = make_result()
    assert [d.path for d in cluster_members(docs, 0)] == ["docs/a.md", "docs/c.md"]
    assert [d.path for d in cluster_members(docs, 0, limit=1)] == ["docs/a.md"]
    assert len(cluster_members(docs, 0, limit=0)) == 2
    assert cluster_members(docs, 5) == []
    print("  ✓ Order and limit respected")


def test_render():
    print("\nTesting render...")

    docs, vocab, centroids = make_result()
    text = render(docs, vocab, centroids, top_n=2, max_documents=20)
    lines = text.splitlines()

    assert lines[0] == "Clustered 3 docs with 4 words into 2 clusters"
    assert lines[1] == "Cluster 0, 2 documents"
    assert lines[2] == "    Top words:"
    assert lines[3] == "    alpha\t4.50"
    assert "    docs/c.md" in lines
    assert "Cluster 1, 1 documents" in lines
    print(text)


def test_summarize():
    print("\nTesting summarize...")

    docs, vocab, centroids = make_result()
    summary = summarize(docs, vocab, centroids, top_n=1, max_documents=1)

    assert summary[0] == {
        "id": 0,
        "size": 2,
        "top_terms": [{"term": "alpha", "weight": 4.5}],
        "documents": ["docs/a.md"],
    }
    assert summary[1]["top_terms"][0]["term"] == "beta"
    print("  ✓ JSON-ready summary")


def run_all_tests():
    """Run all report tests."""
    print("=" * 60)
    print("REPORT VALIDATION")
    print("=" * 60)
    print()

    test_top_terms()
    test_cluster_members()
    test_render()
    test_summarize()

    print()
    print("=" * 60)
    print("✅ ALL REPORT TESTS PASSED")
    print("=" * 60)


if __name__ == "__main__":
    run_all_tests()

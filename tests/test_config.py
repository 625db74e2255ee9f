"""
Test configuration loading and the run logger.
"""

import json
import tempfile
from pathlib import Path

import pytest

from src.core.logger import RunLogger
from src.topics.config import TopicsConfig, load_config


def test_defaults():
    print("Testing default config...")

    config = TopicsConfig()
    assert config.cluster_count == 50
    assert config.min_term_length == 5
    assert config.file_suffix == ".md"
    assert config.max_iterations == 20
    config.validate()
    print("  ✓ Defaults valid")


def test_load_yaml():
    """YAML values override defaults; unknown keys are ignored."""
    print("\nTesting load_config...")

    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "topics.yaml"
        path.write_text("cluster_count: 8\nfile_suffix: .txt\nseed: 42\nunknown: true\n")
        config = load_config(path)

        assert config.cluster_count == 8
        assert config.file_suffix == ".txt"
        assert config.seed == 42
        assert config.min_term_length == 5
        print("  ✓ Merged over defaults")

        empty = Path(tmpdir) / "empty.yaml"
        empty.write_text("")
        assert load_config(empty) == TopicsConfig()
        print("  ✓ Empty file gives defaults")

        bad = Path(tmpdir) / "bad.yaml"
        bad.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_config(bad)
        print("  ✓ Non-mapping rejected")

        with pytest.raises(FileNotFoundError):
            load_config(Path(tmpdir) / "missing.yaml")
        print("  ✓ Missing file rejected")


def test_round_trip_dict():
    config = TopicsConfig(cluster_count=3, log_dir="runs")
    assert TopicsConfig.from_dict(config.to_dict()) == config


@pytest.mark.parametrize("field,value", [
    ("cluster_count", 0),
    ("min_term_length", -1),
    ("max_iterations", 0),
    ("workers", 0),
    ("top_terms", -1),
])
def test_validate_rejects(field, value):
    config = TopicsConfig(**{field: value})
    with pytest.raises(ValueError):
        config.validate()


def test_run_logger():
    """Events are appended as typed JSON lines."""
    print("\nTesting RunLogger...")

    with tempfile.TemporaryDirectory() as tmpdir:
        log_dir = Path(tmpdir) / "logs"
        with RunLogger(log_dir) as logger:
            logger.log_run_start(TopicsConfig().to_dict())
            logger.log_ingest_error("docs/x.md", "permission denied")
            logger.log_corpus(num_documents=5, vocabulary_size=40, num_failed=1)
            logger.log_iteration(1, 5, [3, 2])
            logger.log_run_end(
                iterations=2,
                converged=True,
                clusters=[{
                    "id": 0,
                    "size": 3,
                    "top_terms": [{"term": f"t{i}", "weight": 1.0} for i in range(8)],
                    "documents": ["a", "b", "c"],
                }],
            )

        events = [json.loads(line) for line in (log_dir / "run.jsonl").read_text().splitlines()]

    assert [e["type"] for e in events] == ["run_start", "ingest_error", "corpus", "iteration", "run_end"]
    assert all("timestamp" in e for e in events)
    assert events[0]["config"]["cluster_count"] == 50
    assert events[3]["sizes"] == [3, 2]
    assert events[4]["clusters"][0]["top_terms"] == ["t0", "t1", "t2", "t3", "t4"]
    assert events[4]["clusters"][0]["num_documents_listed"] == 3
    print(f"  ✓ {len(events)} events written")


def run_all_tests():
    """Run all config tests."""
    print("=" * 60)
    print("CONFIG VALIDATION")
    print("=" * 60)
    print()

    test_defaults()
    test_load_yaml()
    test_round_trip_dict()
    test_run_logger()

    print()
    print("=" * 60)
    print("✅ ALL CONFIG TESTS PASSED")
    print("=" * 60)


if __name__ == "__main__":
    run_all_tests()

#!/usr/bin/env python3
"""
Topics CLI - cluster a directory of text files into topical groups.

Usage:
    python scripts/topics.py ./docs
    python scripts/topics.py ./docs --ext .txt --clusters 8 --seed 42
    python scripts/topics.py ./docs --config topics.yaml --log-dir ./runs
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.logger import RunLogger
from src.topics.clustering import InsufficientDataError
from src.topics.config import TopicsConfig, load_config
from src.topics.runner import TopicsRunner


def build_config(args) -> TopicsConfig:
    """Config file (if any) with command-line overrides applied."""
    config = load_config(Path(args.config)) if args.config else TopicsConfig()

    config.root_directory = args.root
    if args.ext is not None:
        config.file_suffix = args.ext
    if args.min_word is not None:
        config.min_term_length = args.min_word
    if args.clusters is not None:
        config.cluster_count = args.clusters
    if args.iterations is not None:
        config.max_iterations = args.iterations
    if args.seed is not None:
        config.seed = args.seed
    if args.top_terms is not None:
        config.top_terms = args.top_terms
    if args.max_docs is not None:
        config.max_documents = args.max_docs
    if args.workers is not None:
        config.workers = args.workers
    if args.log_dir is not None:
        config.log_dir = args.log_dir
    if args.quiet:
        config.verbose = False

    config.validate()
    return config


def run(config: TopicsConfig) -> int:
    """Run clustering and print the report."""
    logger = RunLogger(Path(config.log_dir)) if config.log_dir else None
    try:
        runner = TopicsRunner(config, logger=logger)
        try:
            result = runner.run()
        except InsufficientDataError as e:
            print(e)
            return 1

        print(result.report(top_n=config.top_terms, max_documents=config.max_documents))
        return 0
    finally:
        if logger:
            logger.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Cluster text files into topics with k-means over word counts"
    )
    parser.add_argument("root", help="Directory to search recursively")
    parser.add_argument("--ext", help="File suffix filter (default: .md)")
    parser.add_argument("--min-word", type=int, help="Minimum stemmed word length (default: 5)")
    parser.add_argument("--clusters", "-k", type=int, help="Number of clusters (default: 50)")
    parser.add_argument("--iterations", type=int, help="Maximum k-means iterations (default: 20)")
    parser.add_argument("--seed", type=int, help="Random seed for centroid initialization")
    parser.add_argument("--top-terms", type=int, help="Top words shown per cluster (default: 15)")
    parser.add_argument("--max-docs", type=int, help="Documents listed per cluster (default: 20)")
    parser.add_argument("--workers", type=int, help="Threads for reading files (default: 1)")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--log-dir", help="Write JSONL event log to this directory")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print the report")

    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Configuration error: {e}")
        return 2

    try:
        return run(config)
    except FileNotFoundError as e:
        print(e)
        return 2


if __name__ == "__main__":
    sys.exit(main())

"""CLI tool for extracting feature vectors from WCNF (MaxSAT) instances."""

import argparse
import csv
import json
import logging
import sys
from typing import Dict, List, Optional

from wcnffeat.features.wcnf_instance import base_feature_names, extract_base_features
from wcnffeat.global_params import ExtractionConfig, REPLAY_MODES, WCNFFEAT_DEBUG
from wcnffeat.utils.exceptions import WcnfFeatException

logger = logging.getLogger(__name__)


def write_csv(records: Dict[str, Dict[str, float]], out) -> None:
    names = base_feature_names()
    writer = csv.writer(out)
    writer.writerow(["instance"] + names)
    for instance, record in records.items():
        writer.writerow([instance] + [repr(record[name]) for name in names])


def write_json(records: Dict[str, Dict[str, float]], out) -> None:
    json.dump(records, out, indent=2)
    out.write("\n")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for feature extraction CLI."""
    parser = argparse.ArgumentParser(
        description="Extract structural feature vectors from WCNF instances",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("files", nargs="*", help="WCNF files (.wcnf, optionally .gz/.bz2/.xz/.lzma)")

    parser.add_argument(
        "--names",
        action="store_true",
        help="Print the feature names in vector order and exit"
    )

    parser.add_argument(
        "--format",
        type=str,
        choices=["csv", "json"],
        default="csv",
        help="Output format (default: csv)"
    )

    parser.add_argument(
        "--replay",
        type=str,
        choices=list(REPLAY_MODES),
        default="reopen",
        help="Second pass strategy: re-read the file or replay it from memory (default: reopen)"
    )

    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Run the clause and graph extractors concurrently"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="DEBUG" if WCNFFEAT_DEBUG else "WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)"
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.names:
        for name in base_feature_names():
            print(name)
        return 0

    if not args.files:
        parser.error("at least one WCNF file is required")

    config = ExtractionConfig(replay=args.replay, parallel=args.parallel)
    records: Dict[str, Dict[str, float]] = {}
    failed = 0
    for filename in args.files:
        try:
            records[filename] = extract_base_features(filename, config)
        except WcnfFeatException as e:
            logger.error("Failed to extract features from %s: %s", filename, e)
            failed += 1

    if args.format == "json":
        write_json(records, sys.stdout)
    else:
        write_csv(records, sys.stdout)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

"""CLI tool for batch frequency scoring of a split, labeled image dataset.

Usage:
    frequency-screener
    frequency-screener path/to/dataset
    frequency-screener path/to/dataset --pair test/fake --pair test/real
    frequency-screener path/to/dataset --ext .jpg --ext .png --progress
"""

import argparse
import logging
import sys
from typing import List, Optional

from tqdm import tqdm

from frequency_screener.constants import DEFAULT_DATASET_ROOT, DEFAULT_EXTENSIONS
from frequency_screener.dataset import DatasetConfig, DatasetIterator, SplitLabel
from frequency_screener.errors import DatasetIOError, FrequencyScreenerError
from frequency_screener.frequency_detector import FrequencyScreener
from frequency_screener.report import format_score_line, format_section_header

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the batch driver."""
    parser = argparse.ArgumentParser(
        prog="frequency-screener",
        description="Score images in <root>/<split>/<label>/ by high/low frequency energy ratio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  frequency-screener
  frequency-screener data/ --pair test/fake --pair test/real
  frequency-screener data/ --ext .jpg --ext .png --progress
        """,
    )

    parser.add_argument(
        "root",
        nargs="?",
        default=DEFAULT_DATASET_ROOT,
        help=f"Dataset root directory (default: '{DEFAULT_DATASET_ROOT}')",
    )

    parser.add_argument(
        "--pair",
        action="append",
        type=SplitLabel.parse,
        metavar="SPLIT/LABEL",
        help="Split/label directory to score; repeatable "
        "(default: train/fake, train/real, test/fake, test/real)",
    )

    parser.add_argument(
        "--ext",
        action="append",
        metavar="EXT",
        help=f"Accepted file extension, case-sensitive; repeatable (default: {' '.join(DEFAULT_EXTENSIONS)})",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr (default: WARNING)",
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr for each split/label directory",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config_kwargs = {"root": args.root}
    if args.pair:
        config_kwargs["pairs"] = tuple(args.pair)
    if args.ext:
        config_kwargs["extensions"] = tuple(args.ext)

    try:
        config = DatasetConfig(**config_kwargs)
        screener = FrequencyScreener(extensions=config.extensions)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    dataset = DatasetIterator(config, loader=screener.loader)

    num_scored = 0
    try:
        for pair in config.pairs:
            print(format_section_header(pair))
            results = screener.score_pair(dataset, pair)
            if args.progress:
                results = tqdm(results, desc=str(pair), unit="img")
            for result in results:
                print(format_score_line(result.name, result.score))
                num_scored += 1
    except DatasetIOError as e:
        logger.error(f"Dataset I/O failure at {e.path}: {e}")
        return 1
    except FrequencyScreenerError as e:
        logger.error(f"Scoring failed: {e}")
        return 1

    logger.info(f"Scored {num_scored} images across {len(config.pairs)} directories")
    return 0


if __name__ == "__main__":
    sys.exit(main())

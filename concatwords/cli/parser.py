"""Command-line interface for concatwords."""

import argparse
from multiprocessing import cpu_count

from concatwords.utils import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="concatwords",
        description="Find the longest words made entirely of shorter words from the same list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze a word list file (one word per line)
  %(prog)s wordsforproblem.txt

  # Analyze several files, each reported separately
  %(prog)s words1.txt words2.txt -v

  # Read words from standard input
  cat words.txt | %(prog)s

  # Sanity check on the built-in example list
  %(prog)s --test

  # Parallel run with component breakdown and a summary report
  %(prog)s words.txt -j 4 --show-components --reports ./reports

Example config.json:
{
  "inputs": ["wordsforproblem.txt"],
  "jobs": 4,
  "chunk_size": 5000,
  "tie_break": "scan",
  "show_components": true,
  "verbose": true
}
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        default=[],
        metavar="FILE",
        help="Word list files (default: read standard input)",
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Alternative word sources
    parser.add_argument(
        "--test",
        action="store_true",
        help="Run on the built-in example word list",
    )
    parser.add_argument(
        "--english-words",
        action="store_true",
        help="Analyze the english-words web2 dictionary",
    )

    # Parameters
    parser.add_argument(
        "--tie-break",
        type=str,
        choices=["scan", "lexicographic"],
        default="scan",
        help="Resolve equal-length results by scan order or alphabetically",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=Constants.DEFAULT_CHUNK_SIZE,
        help="Words per worker task in parallel mode",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on words with characters outside a-z instead of skipping them",
    )

    # Output
    parser.add_argument(
        "--show-components",
        action="store_true",
        help="Print the component words of the reported results",
    )
    parser.add_argument(
        "--reports",
        type=str,
        help="Directory to generate summary reports (creates timestamped subdirectories)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        default=1,
        help=f"Number of parallel workers (default: 1, available CPUs: {cpu_count()})",
    )

    return parser

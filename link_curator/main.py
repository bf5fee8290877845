#!/usr/bin/env python3
"""Main entry point for the link curator.

Usage:
    python -m link_curator.main        # Scrape, validate and write the feed
    python -m link_curator.main -v     # Same, with debug logging
"""

import argparse
import sys

from link_curator.agent.runner import run


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments. If None, uses sys.argv.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="link-curator",
        description="Link Curator - scrape, validate and publish a curated links feed",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging output",
    )

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the link curator.

    Args:
        args: Command line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parsed = parse_args(args)
    return run(verbose=parsed.verbose)


if __name__ == "__main__":
    sys.exit(main())

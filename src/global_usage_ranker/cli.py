"""CLI entry point for the global variable usage ranker."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from .analyzer import analyze_directory
from .errors import RankerError, UsageError
from .output import display_ranking

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rank the global variables of a Python source tree by how often they are used"
    )
    parser.add_argument(
        "-dir",
        "--dir",
        dest="directory",
        required=True,
        help="Root directory to scan for .py files",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging output",
    )
    return parser.parse_args()


def validate_directory(directory: str) -> Path:
    """Turn the -dir value into a path, rejecting an empty value.

    Raises:
        UsageError: If directory is empty
    """
    if not directory:
        msg = "Input -dir"
        raise UsageError(msg)
    return Path(directory)


def main() -> None:
    """Run the CLI application."""
    console = Console()
    args = parse_args()

    # Configure logging
    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        logger.debug("Debug logging enabled")

    try:
        root = validate_directory(args.directory)
        result = analyze_directory(root)
    except RankerError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    display_ranking(console, result)


if __name__ == "__main__":
    main()

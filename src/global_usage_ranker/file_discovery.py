"""Discovery of the source files to analyse under a root directory."""

import logging
from pathlib import Path

from global_usage_ranker.errors import FilesystemError

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "**/*.py"


def find_source_files(root: Path, pattern: str = DEFAULT_PATTERN) -> tuple[Path, ...]:
    """Find every file under root matching a glob pattern, at any depth.

    The result is sorted so that repeated runs over an unchanged tree see the
    files in the same order.

    Args:
        root: Directory to search
        pattern: Glob pattern relative to root (default: all .py files)

    Returns:
        Sorted tuple of matching regular files

    Raises:
        FilesystemError: If root is missing, is not a directory, or cannot be listed
    """
    if not root.exists():
        msg = f"Directory {root} does not exist"
        raise FilesystemError(msg)

    if not root.is_dir():
        msg = f"{root} is not a directory"
        raise FilesystemError(msg)

    try:
        # glob swallows PermissionError on an unreadable root
        next(root.iterdir(), None)
        files = tuple(sorted(path for path in root.glob(pattern) if path.is_file()))
    except OSError as e:
        msg = f"Cannot list {root}: {e}"
        raise FilesystemError(msg) from e

    logger.debug("Found %d file(s) matching %r under %s", len(files), pattern, root)
    return files

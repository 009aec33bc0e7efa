"""Error types raised by the global variable usage ranker.

Every error aborts the run: nothing below the CLI catches these.
"""

from pathlib import Path


class RankerError(Exception):
    """Base class for all errors reported to the user."""


class UsageError(RankerError):
    """Required command-line input is missing or empty."""


class FilesystemError(RankerError):
    """The directory to scan cannot be enumerated."""


class SourceParseError(RankerError):
    """A source file could not be read or is not valid Python."""

    def __init__(self, file_path: Path | str, reason: str, line_number: int | None = None) -> None:
        """Initialize with the failing file and a short reason."""
        self.file_path = Path(file_path)
        self.reason = reason
        self.line_number = line_number
        location = f"{file_path}:{line_number}" if line_number is not None else str(file_path)
        super().__init__(f"{location}: {reason}")

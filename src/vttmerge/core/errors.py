from __future__ import annotations

from pathlib import Path


class MergeError(Exception):
    """Base error for the vttmerge pipeline."""


class DirectoryReadError(MergeError):
    """Raised when the input folder is missing or cannot be listed."""


class FileReadError(MergeError):
    """Raised when an input subtitle file cannot be opened or decoded."""


class OutputWriteError(MergeError):
    """Raised when the merged SRT file cannot be created or written."""


class MalformedTimingLineError(MergeError):
    """Raised when a timing line does not split into start and end fields."""

    def __init__(self, line: str, line_number: int, source: Path | None = None) -> None:
        self.line = line
        self.line_number = line_number
        self.source = source
        location = f"{source}:{line_number}" if source is not None else f"line {line_number}"
        super().__init__(f"Malformed timing line at {location}: {line!r}")

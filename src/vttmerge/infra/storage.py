from __future__ import annotations

import logging
from pathlib import Path

from vttmerge.core.errors import DirectoryReadError, FileReadError

logger = logging.getLogger(__name__)


def list_input_files(folder: Path, suffix: str) -> list[Path]:
    """Return regular files directly inside ``folder`` whose suffix is exactly ``suffix``."""
    if not folder.exists():
        raise DirectoryReadError(f"Input folder not found: {folder}")
    if not folder.is_dir():
        raise DirectoryReadError(f"Input path is not a directory: {folder}")
    try:
        entries = sorted(folder.iterdir())
    except OSError as exc:
        raise DirectoryReadError(f"Cannot read input folder {folder}: {exc}") from exc

    files: list[Path] = []
    for entry in entries:
        if entry.suffix != suffix:
            continue
        if not entry.is_file():
            logger.debug("Skipping non-file entry %s", entry)
            continue
        files.append(entry)
    return files


def read_text_lines(path: Path, encoding: str) -> list[str]:
    try:
        with path.open(encoding=encoding, newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"Cannot read subtitle file {path}: {exc}") from exc
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]

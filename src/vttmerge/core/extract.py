from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from vttmerge.core.errors import MalformedTimingLineError
from vttmerge.infra.storage import read_text_lines
from vttmerge.schemas.cue import Cue

logger = logging.getLogger(__name__)

TIMING_MARKER = "-->"
TIMING_SEPARATOR = " --> "
STRUCTURAL_PREFIXES: tuple[str, ...] = ("NOTE", "WEBVTT", "X-TIMESTAMP-MAP")


def vtt_to_srt_timecode(value: str) -> str:
    """Convert a WebVTT timecode (HH:MM:SS.mmm) to SRT punctuation (HH:MM:SS,mmm)."""
    return value.replace(".", ",")


def is_structural_line(line: str) -> bool:
    """True for blank lines and header/comment lines that never carry cue text."""
    return not line.strip() or line.startswith(STRUCTURAL_PREFIXES)


def _parse_timing_line(line: str, line_number: int, source: Path | None) -> tuple[str, str]:
    parts = line.split(TIMING_SEPARATOR)
    if len(parts) < 2:
        raise MalformedTimingLineError(line, line_number, source)
    return parts[0].strip(), parts[1].strip()


def _build_cue(start: str, end: str, text: list[str]) -> Cue:
    return Cue(
        start=vtt_to_srt_timecode(start),
        end=vtt_to_srt_timecode(end),
        text=tuple(text),
    )


def extract_cues(lines: Iterable[str], source: Path | None = None) -> Iterator[Cue]:
    """Yield cues from the lines of one WebVTT file.

    A cue is emitted once it has at least one text line; timing lines
    with no text before the next timing line (or end of input) are
    dropped.
    """
    start = ""
    end = ""
    text: list[str] = []
    for line_number, line in enumerate(lines, start=1):
        if TIMING_MARKER in line:
            if text:
                yield _build_cue(start, end, text)
            elif start or end:
                logger.debug("Dropping empty cue %s --> %s in %s", start, end, source)
            start, end = _parse_timing_line(line, line_number, source)
            text = []
        elif not is_structural_line(line):
            text.append(line)
    if text:
        yield _build_cue(start, end, text)
    elif start or end:
        logger.debug("Dropping trailing empty cue %s --> %s in %s", start, end, source)


def read_vtt_cues(path: Path, encoding: str = "utf-8-sig") -> list[Cue]:
    cues = list(extract_cues(read_text_lines(path, encoding), source=path))
    logger.info("Extracted %d cues from %s", len(cues), path)
    return cues

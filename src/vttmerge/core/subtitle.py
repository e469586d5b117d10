from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from vttmerge.core.errors import OutputWriteError
from vttmerge.schemas.cue import Cue


def sort_cues(cues: Iterable[Cue]) -> list[Cue]:
    """Order cues by ``(start, end, text)`` compared as strings."""
    return sorted(cues)


def format_srt(cues: Iterable[Cue]) -> str:
    """Render cues as SRT blocks in the order given, numbered from 1."""
    lines: list[str] = []
    for index, cue in enumerate(cues, start=1):
        lines.append(str(index))
        lines.append(f"{cue.start} --> {cue.end}")
        lines.extend(cue.text)
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


def write_srt(cues: Iterable[Cue], output_path: Path) -> list[Cue]:
    """Sort cues and write them to an SRT file; return the cues in written order."""
    ordered = sort_cues(cues)
    try:
        output_path.write_text(format_srt(ordered), encoding="utf-8", newline="\n")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write {output_path}: {exc}") from exc
    return ordered

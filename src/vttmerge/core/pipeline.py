from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from vttmerge.core.collect import CueCollector
from vttmerge.core.extract import read_vtt_cues
from vttmerge.core.subtitle import write_srt
from vttmerge.infra.config import AppConfig
from vttmerge.infra.storage import list_input_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeRequest:
    folder: Path
    config: AppConfig


@dataclass(frozen=True)
class MergeProgress:
    completed: int
    total: int
    input_path: Path
    extracted: int
    added: int


MergeProgressCallback = Callable[[MergeProgress], None]


@dataclass(frozen=True)
class MergeResult:
    output_path: Path
    files: int
    extracted: int
    unique: int

    @property
    def duplicates(self) -> int:
        return self.extracted - self.unique


def merge_folder(
    request: MergeRequest,
    *,
    on_progress: MergeProgressCallback | None = None,
) -> MergeResult:
    """Merge every input file in the folder into one sorted, deduplicated SRT file.

    The first unreadable file or malformed timing line aborts the run
    before the output file is touched.
    """
    files = list_input_files(request.folder, request.config.input_suffix)
    collector = CueCollector()
    extracted = 0
    for completed, input_path in enumerate(files, start=1):
        cues = read_vtt_cues(input_path, request.config.encoding)
        added = collector.extend(cues)
        extracted += len(cues)
        if on_progress is not None:
            on_progress(
                MergeProgress(
                    completed=completed,
                    total=len(files),
                    input_path=input_path,
                    extracted=len(cues),
                    added=added,
                )
            )

    output_path = request.folder / request.config.output_name
    written = write_srt(collector.cues(), output_path)
    logger.info(
        "Wrote %d unique cues from %d files to %s (%d duplicates dropped)",
        len(written),
        len(files),
        output_path,
        extracted - len(written),
    )
    return MergeResult(
        output_path=output_path,
        files=len(files),
        extracted=extracted,
        unique=len(written),
    )

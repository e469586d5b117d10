from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cue:
    """One subtitle display unit.

    Equality and hashing cover every field, so a Cue is its own
    deduplication key. Ordering compares ``(start, end, text)`` as
    strings, which is chronological only for zero-padded timecodes.
    """

    start: str
    end: str
    text: tuple[str, ...]

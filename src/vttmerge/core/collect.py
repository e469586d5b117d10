from __future__ import annotations

from collections.abc import Iterable

from vttmerge.schemas.cue import Cue


class CueCollector:
    """Pool of cues from every input file, one entry per distinct cue value."""

    def __init__(self) -> None:
        self._cues: set[Cue] = set()

    def add(self, cue: Cue) -> bool:
        """Insert ``cue``; return False when an equal cue was already present."""
        if cue in self._cues:
            return False
        self._cues.add(cue)
        return True

    def extend(self, cues: Iterable[Cue]) -> int:
        """Insert every cue and return how many were new."""
        return sum(1 for cue in cues if self.add(cue))

    def cues(self) -> frozenset[Cue]:
        return frozenset(self._cues)

    def __len__(self) -> int:
        return len(self._cues)

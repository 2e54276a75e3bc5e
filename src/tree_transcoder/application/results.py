"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tree_transcoder.errors import FileTaskError


@dataclass(frozen=True)
class FileTaskResult:
    """Outcome of one file task."""

    source_path: Path
    destination_path: Path
    bytes_written: int = 0
    error: FileTaskError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class TreeRunReport:
    """Aggregate outcome of a tree-mode run, drained at the join barrier."""

    source_root: Path
    destination_root: Path
    encoding: str
    directories: int
    results: tuple[FileTaskResult, ...] = ()

    @property
    def succeeded(self) -> tuple[FileTaskResult, ...]:
        return tuple(result for result in self.results if result.ok)

    @property
    def failures(self) -> tuple[FileTaskResult, ...]:
        return tuple(result for result in self.results if not result.ok)

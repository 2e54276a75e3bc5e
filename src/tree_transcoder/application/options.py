"""Typed run configuration shared across use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tree_transcoder.decoders.builtins import DEFAULT_ENCODING


@dataclass(frozen=True)
class RunOptions:
    """Immutable configuration for one transcoding run.

    ``source_file`` set selects single-file mode; otherwise the run mirrors
    ``source_dir`` into ``destination_dir``.
    """

    source_dir: Path
    destination_dir: Path
    encoding: str = DEFAULT_ENCODING
    source_file: Path | None = None
    max_workers: int | None = None

    @property
    def single_file(self) -> bool:
        return self.source_file is not None

"""Public path-based transcoding API (delegates to application use-cases)."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from tree_transcoder.application.results import TreeRunReport
from tree_transcoder.application.use_cases import build_run_options
from tree_transcoder.application.use_cases import transcode_file
from tree_transcoder.application.use_cases import transcode_tree
from tree_transcoder.decoders.builtins import DEFAULT_ENCODING
from tree_transcoder.types import PathInput


def _absolute(path: PathInput) -> Path:
    return Path(os.path.abspath(path))


def transcode_file_to_utf8(
    source_file: PathInput,
    encoding: str = DEFAULT_ENCODING,
) -> bytes:
    """Return the UTF-8 transcoding of one legacy-encoded file."""
    source = _absolute(source_file)
    options = build_run_options(
        source_dir=source.parent,
        destination_dir=source.parent,
        encoding=encoding,
        source_file=source,
    )
    return transcode_file(options)


def transcode_tree_to_utf8(
    source_dir: PathInput,
    destination_dir: PathInput,
    encoding: str = DEFAULT_ENCODING,
    max_workers: Optional[int] = None,
) -> TreeRunReport:
    """Mirror ``source_dir`` into ``destination_dir`` as UTF-8.

    ``destination_dir`` is removed and recreated first.
    """
    options = build_run_options(
        source_dir=_absolute(source_dir),
        destination_dir=_absolute(destination_dir),
        encoding=encoding,
        max_workers=max_workers,
    )
    return transcode_tree(options)

"""Error taxonomy for transcoding runs."""

from __future__ import annotations

from pathlib import Path

from tree_transcoder.types import TaskStage


class TranscodeError(Exception):
    """Base class for all errors raised by ``tree_transcoder``."""

    exit_code = 1


class ConfigurationError(TranscodeError):
    """Unknown encoding or invalid run options."""


class FilesystemSetupError(TranscodeError):
    """Source root is unusable or the destination root cannot be prepared."""


class TraversalError(TranscodeError):
    """A directory could not be listed while walking the source tree."""


class DecodeError(TranscodeError):
    """Input bytes are not valid under the declared source encoding.

    Parameters
    ----------
    encoding : str
        Registry name of the encoding used for decoding.
    start : int
        Offset of the first offending byte.
    end : int
        Offset just past the offending bytes.
    reason : str
        Codec-provided reason.
    """

    def __init__(self, encoding: str, start: int, end: int, reason: str) -> None:
        super().__init__(
            f"cannot decode bytes {start}-{end} as {encoding}: {reason}"
        )
        self.encoding = encoding
        self.start = start
        self.end = end
        self.reason = reason


class FileTaskError(TranscodeError):
    """A single file could not be read, decoded or written."""

    def __init__(
        self,
        source_path: Path,
        stage: TaskStage,
        detail: str,
        destination_path: Path | None = None,
    ) -> None:
        super().__init__(f"{source_path}: {stage} failed: {detail}")
        self.source_path = source_path
        self.destination_path = destination_path
        self.stage = stage
        self.detail = detail

"""Application use-cases orchestrating transcoding runs."""

from __future__ import annotations

import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from tree_transcoder.application.options import RunOptions
from tree_transcoder.application.ports import DecoderLookup
from tree_transcoder.application.results import FileTaskResult, TreeRunReport
from tree_transcoder.decoders.base import Decoder
from tree_transcoder.decoders.builtins import DEFAULT_ENCODING
from tree_transcoder.decoders.registry import create_default_registry
from tree_transcoder.errors import (
    ConfigurationError,
    DecodeError,
    FileTaskError,
    TraversalError,
)
from tree_transcoder.infrastructure.filesystem import (
    ensure_disjoint_roots,
    make_mirror_directory,
    mirror_path,
    reset_destination_root,
    source_root_mode,
    walk_tree,
    write_file,
)
from tree_transcoder.schemas import FileRunConfig, TreeRunConfig
from tree_transcoder.transform import transcode_bytes
from tree_transcoder.types import TaskStage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileTask:
    """One file to transcode from ``source_path`` to ``destination_path``."""

    source_path: Path
    destination_path: Path
    decoder: Decoder


def run_file_task(task: FileTask) -> FileTaskResult:
    """Read, transcode and write one file.

    Failures are returned in the result rather than raised, so that one bad
    file never disturbs its siblings or the walk.
    """
    try:
        data = task.source_path.read_bytes()
    except OSError as exc:
        return _failed(task, "read", exc)
    try:
        converted = transcode_bytes(data, task.decoder)
    except DecodeError as exc:
        return _failed(task, "decode", exc)
    try:
        written = write_file(task.destination_path, converted)
    except OSError as exc:
        try:
            task.destination_path.unlink(missing_ok=True)
        except OSError as cleanup_exc:
            logger.warning(
                "cannot remove partial file %s: %s", task.destination_path, cleanup_exc
            )
        return _failed(task, "write", exc)
    return FileTaskResult(
        source_path=task.source_path,
        destination_path=task.destination_path,
        bytes_written=written,
    )


def _failed(task: FileTask, stage: TaskStage, exc: Exception) -> FileTaskResult:
    error = FileTaskError(
        task.source_path, stage, str(exc), destination_path=task.destination_path
    )
    error.__cause__ = exc
    return FileTaskResult(
        source_path=task.source_path,
        destination_path=task.destination_path,
        error=error,
    )


def transcode_file(
    options: RunOptions,
    *,
    registry: DecoderLookup | None = None,
) -> bytes:
    """Use-case: transcode a single file and return its UTF-8 bytes.

    Every failure is terminal: there is no partial success in this mode.

    Raises
    ------
    ConfigurationError
        If options are invalid or the encoding is unknown.
    FileTaskError
        If the file cannot be read.
    DecodeError
        If the file content is invalid under the encoding.
    """
    if not options.single_file:
        raise ConfigurationError("Single-file mode requires a source file.")
    try:
        config = FileRunConfig(
            source_file=options.source_file,
            encoding=options.encoding,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid single-file parameters: {exc}") from exc

    logger.info("transform file mode")
    logger.info("src: %s [%s]", config.source_file, config.encoding)

    decoder = (registry or create_default_registry()).get(config.encoding)
    try:
        data = config.source_file.read_bytes()
    except OSError as exc:
        raise FileTaskError(config.source_file, "read", str(exc)) from exc
    return transcode_bytes(data, decoder)


def transcode_tree(
    options: RunOptions,
    *,
    registry: DecoderLookup | None = None,
) -> TreeRunReport:
    """Use-case: mirror a source tree into a freshly recreated destination.

    Directories are created inline by the walking thread; each file is
    submitted to a thread pool without waiting. The pool's context exit is the
    join barrier: it returns only after every submitted task has finished,
    including when the walk itself fails.

    Parameters
    ----------
    options : RunOptions
        Run configuration; ``max_workers`` bounds the pool.
    registry : DecoderLookup | None, optional
        Encoding lookup, defaults to :func:`create_default_registry`.

    Returns
    -------
    TreeRunReport
        Per-file outcomes. File failures are reported here, never raised.

    Raises
    ------
    ConfigurationError
        If options are invalid or the encoding is unknown. Raised before any
        filesystem mutation.
    FilesystemSetupError
        If the source root is unusable or the destination cannot be reset.
    TraversalError
        If a directory cannot be listed or mirrored during the walk.
    """
    try:
        config = TreeRunConfig(
            source_dir=options.source_dir,
            destination_dir=options.destination_dir,
            encoding=options.encoding,
            max_workers=options.max_workers,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid tree-mode parameters: {exc}") from exc

    source_root = Path(os.path.abspath(config.source_dir))
    destination_root = Path(os.path.abspath(config.destination_dir))
    logger.info("transform directory mode")
    logger.info("src: %s dst: %s [%s]", source_root, destination_root, config.encoding)

    decoder = (registry or create_default_registry()).get(config.encoding)
    mode = source_root_mode(source_root)
    ensure_disjoint_roots(source_root, destination_root)
    reset_destination_root(destination_root, mode)

    exclude = destination_root if source_root in destination_root.parents else None
    directories = 0
    futures: list[Future[FileTaskResult]] = []
    try:
        with ThreadPoolExecutor(
            max_workers=config.max_workers, thread_name_prefix="transcode"
        ) as executor:
            for entry in walk_tree(source_root, exclude=exclude):
                logger.info("%s", entry.path)
                target = mirror_path(entry.path, source_root, destination_root)
                if entry.is_dir:
                    make_mirror_directory(target, entry.mode)
                    directories += 1
                elif entry.is_special:
                    logger.warning("skipping special file %s", entry.path)
                else:
                    task = FileTask(
                        source_path=entry.path,
                        destination_path=target,
                        decoder=decoder,
                    )
                    futures.append(executor.submit(run_file_task, task))
    except TraversalError:
        # Pool exit already joined; report finished tasks before the fatal error.
        for future in futures:
            result = future.result()
            if result.error is not None:
                logger.error("%s", result.error)
        raise

    return TreeRunReport(
        source_root=source_root,
        destination_root=destination_root,
        encoding=config.encoding,
        directories=directories,
        results=tuple(future.result() for future in futures),
    )


def build_run_options(
    *,
    source_dir: Path,
    destination_dir: Path,
    encoding: str = DEFAULT_ENCODING,
    source_file: Path | None = None,
    max_workers: int | None = None,
) -> RunOptions:
    """Build typed run options from command/API params."""
    return RunOptions(
        source_dir=source_dir,
        destination_dir=destination_dir,
        encoding=encoding,
        source_file=source_file,
        max_workers=max_workers,
    )

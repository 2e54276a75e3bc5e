"""Filesystem helpers for mirroring a source tree into a destination root."""

from __future__ import annotations

import logging
import os
import shutil
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from tree_transcoder.errors import FilesystemSetupError, TraversalError

logger = logging.getLogger(__name__)

FILE_MODE = 0o666


@dataclass(frozen=True)
class TreeEntry:
    """One entry produced by :func:`walk_tree`."""

    path: Path
    mode: int
    is_dir: bool
    is_special: bool = False


def source_root_mode(source_root: Path) -> int:
    """Return permission bits of the source root.

    Raises
    ------
    FilesystemSetupError
        If the root cannot be stat'ed or is not a directory.
    """
    try:
        st = source_root.stat()
    except OSError as exc:
        raise FilesystemSetupError(f"cannot access source root {source_root}: {exc}") from exc
    if not stat.S_ISDIR(st.st_mode):
        raise FilesystemSetupError(f"source root {source_root} is not a directory")
    return stat.S_IMODE(st.st_mode)


def ensure_disjoint_roots(source_root: Path, destination_root: Path) -> None:
    """Reject a destination that contains (or is) the source root."""
    if source_root == destination_root or destination_root in source_root.parents:
        raise FilesystemSetupError(
            f"destination {destination_root} contains source {source_root}; "
            "clearing it would destroy the input"
        )


def reset_destination_root(destination_root: Path, mode: int) -> None:
    """Remove ``destination_root`` recursively and recreate it empty.

    A missing destination is not an error.

    Raises
    ------
    FilesystemSetupError
        If the old destination cannot be removed or the new one created.
    """
    try:
        if destination_root.is_dir() and not destination_root.is_symlink():
            shutil.rmtree(destination_root)
        else:
            destination_root.unlink(missing_ok=True)
    except OSError as exc:
        raise FilesystemSetupError(
            f"cannot clear destination {destination_root}: {exc}"
        ) from exc

    try:
        os.mkdir(destination_root, mode)
    except OSError as exc:
        raise FilesystemSetupError(
            f"cannot create destination {destination_root}: {exc}"
        ) from exc


def walk_tree(root: Path, *, exclude: Path | None = None) -> Iterator[TreeEntry]:
    """Walk ``root`` depth-first in pre-order, entries sorted by name.

    The root itself is not yielded. Directories are yielded before their
    children are listed, so a consumer can act on a directory entry before
    any descendant is visited. Symlinks are reported, never followed.

    Parameters
    ----------
    root : Path
        Directory to walk.
    exclude : Path | None, optional
        Subtree to skip entirely.

    Raises
    ------
    TraversalError
        If a directory cannot be listed or an entry cannot be stat'ed.
    """
    try:
        with os.scandir(root) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)
    except OSError as exc:
        raise TraversalError(f"cannot list directory {root}: {exc}") from exc

    for entry in entries:
        path = Path(entry.path)
        if exclude is not None and path == exclude:
            logger.info("skipping destination subtree %s", path)
            continue
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as exc:
            raise TraversalError(f"cannot stat {path}: {exc}") from exc

        mode = stat.S_IMODE(st.st_mode)
        if stat.S_ISDIR(st.st_mode):
            yield TreeEntry(path=path, mode=mode, is_dir=True)
            yield from walk_tree(path, exclude=exclude)
        elif stat.S_ISREG(st.st_mode) or stat.S_ISLNK(st.st_mode):
            yield TreeEntry(path=path, mode=mode, is_dir=False)
        else:
            yield TreeEntry(path=path, mode=mode, is_dir=False, is_special=True)


def mirror_path(path: Path, source_root: Path, destination_root: Path) -> Path:
    """Map a path under ``source_root`` to the same place under ``destination_root``."""
    return destination_root / path.relative_to(source_root)


def make_mirror_directory(path: Path, mode: int) -> None:
    """Create a mirrored directory with the source directory's permission bits."""
    try:
        os.makedirs(path, mode, exist_ok=True)
    except OSError as exc:
        raise TraversalError(f"cannot create directory {path}: {exc}") from exc


def write_file(path: Path, data: bytes) -> int:
    """Write ``data`` to ``path`` with fixed ``FILE_MODE`` permissions."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)
    return len(data)

#!/usr/bin/env python3
"""
tree_transcoder.cli.cli

Typer-based CLI for transcoding legacy-encoded text into UTF-8.

Examples
--------
Mirror the current directory into ``./output`` as UTF-8:

    tree-transcode

Mirror a GB18030 tree with at most 8 concurrent file tasks:

    tree-transcode -s legacy/ -d utf8/ -enc GB18030 -w 8

Print one file as UTF-8:

    tree-transcode -sf notes.txt
"""

from __future__ import annotations

import logging
import os
import traceback
from pathlib import Path

import typer

from tree_transcoder.application.results import TreeRunReport
from tree_transcoder.decoders.builtins import DEFAULT_ENCODING
from tree_transcoder.errors import TranscodeError

app = typer.Typer(
    name="tree-transcode",
    help="Transcode a GBK-family text tree (or a single file) into UTF-8.",
    add_completion=False,
)

PACKAGE_LOGGER = "tree_transcoder"


# -----------------------------
# Logging / error utilities
# -----------------------------
class _EchoHandler(logging.Handler):
    """Route package log records through ``typer.echo``."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=record.levelno >= logging.WARNING)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    """Attach a single echo handler to the package logger.

    Parameters
    ----------
    verbose : bool
        ``INFO`` progress lines when set, warnings and errors only otherwise.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler, _EchoHandler):
            package_logger.removeHandler(handler)
    handler = _EchoHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO if verbose else logging.WARNING)


def _print_transcode_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that ended the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _report_tree_run(report: TreeRunReport, verbose: bool) -> None:
    """Print file-task failures (always) and a summary (verbose only)."""
    for result in report.failures:
        typer.echo(f"✗ {result.error}", err=True)
    if verbose:
        typer.echo(
            f"✓ Transcoded {len(report.succeeded)}/{len(report.results)} files "
            f"in {report.directories} directories into {report.destination_root}"
        )


def _list_encodings(value: bool) -> None:
    """Print registered encoding names and exit."""
    if not value:
        return
    from tree_transcoder.decoders.registry import create_default_registry

    for name in create_default_registry().names():
        typer.echo(name)
    raise typer.Exit()


def _absolute(path: Path) -> Path:
    return Path(os.path.abspath(path))


# -----------------------------
# Command
# -----------------------------
@app.command()
def transcode_cmd(
    source_dir: Path | None = typer.Option(
        None,
        "-s",
        "--source",
        help="Source directory. Defaults to the current working directory.",
    ),
    destination_dir: Path | None = typer.Option(
        None,
        "-d",
        "--dest",
        help="Destination directory, recreated on every run. Defaults to ./output.",
    ),
    encoding: str = typer.Option(
        DEFAULT_ENCODING,
        "-enc",
        "--encoding",
        help="Source encoding name (case-sensitive): GBK, GB18030 or UTF8.",
    ),
    source_file: Path | None = typer.Option(
        None,
        "-sf",
        "--source-file",
        help="Transcode this single file to standard output instead of a tree.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Print progress lines."),
    max_workers: int | None = typer.Option(
        None,
        "-w",
        "--max-workers",
        min=1,
        help="Maximum concurrent file tasks. Defaults to the thread pool's own cap.",
    ),
    list_encodings: bool = typer.Option(
        False,
        "--list-encodings",
        callback=_list_encodings,
        is_eager=True,
        help="List supported encodings and exit.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Transcode a source tree, or a single file, into UTF-8.

    Notes
    -----
    - Tree mode destroys and recreates the destination directory.
    - Files that fail to read, decode or write are reported on standard error
      and left out of the destination; they do not change the exit status.
    """
    del list_encodings
    _configure_logging(verbose)

    cwd = Path.cwd()
    source_dir = _absolute(source_dir if source_dir is not None else cwd)
    destination_dir = _absolute(
        destination_dir if destination_dir is not None else cwd / "output"
    )

    try:
        from tree_transcoder import api

        if source_file is not None:
            data = api.transcode_file_to_utf8(_absolute(source_file), encoding=encoding)
            typer.echo(data)
            return

        report = api.transcode_tree_to_utf8(
            source_dir,
            destination_dir,
            encoding=encoding,
            max_workers=max_workers,
        )
        _report_tree_run(report, verbose)
    except TranscodeError as exc:
        raise typer.Exit(code=_print_transcode_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_transcode_error(exc, debug))


if __name__ == "__main__":
    app()

"""End-to-end smoke tests for the installed console script."""

from __future__ import annotations

import subprocess
from pathlib import Path

import tree_transcoder


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert tree_transcoder.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["tree-transcode", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "UTF-8" in result.stdout


def test_cli_single_file_roundtrip(tmp_path: Path) -> None:
    """Single-file mode writes UTF-8 plus a newline and exits 0."""
    source = tmp_path / "legacy.txt"
    source.write_bytes("世界".encode("gbk"))

    result = subprocess.run(
        ["tree-transcode", "-sf", str(source)],
        capture_output=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout == "世界\n".encode("utf-8")


def test_cli_missing_source_root_fails_cleanly(tmp_path: Path) -> None:
    result = subprocess.run(
        ["tree-transcode", "-s", str(tmp_path / "missing"), "-d", str(tmp_path / "out")],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode != 0
    assert "FilesystemSetupError" in result.stderr
    assert not (tmp_path / "out").exists()


def test_cli_single_file_invalid_bytes_prints_nothing(tmp_path: Path) -> None:
    """Undecodable input leaves stdout empty and exits non-zero."""
    source = tmp_path / "broken.txt"
    source.write_bytes(b"\xff\xfe\xfd")

    result = subprocess.run(
        ["tree-transcode", "-sf", str(source), "-enc", "GBK"],
        capture_output=True,
        check=False,
    )

    assert result.returncode != 0
    assert result.stdout == b""
    assert b"DecodeError" in result.stderr

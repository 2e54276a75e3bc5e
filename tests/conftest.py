"""Shared pytest configuration, marker assignment and tree fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


INVALID_GBK = b"\xff\xfe\x00\x81"


@pytest.fixture
def gbk_tree(tmp_path: Path) -> Path:
    """Source tree with two valid GBK files and one undecodable file.

    Layout::

        src/a.txt        "你好" (GBK)
        src/b.bin        invalid bytes
        src/sub/c.txt    "世界" (GBK)
    """
    root = tmp_path / "src"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_bytes("你好".encode("gbk"))
    (root / "b.bin").write_bytes(INVALID_GBK)
    (root / "sub" / "c.txt").write_bytes("世界".encode("gbk"))
    return root

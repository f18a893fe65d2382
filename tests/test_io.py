"""Tests for the local filesystem collaborator."""

from __future__ import annotations

from pathlib import Path

from strata.io import LocalFilesystem


def test_local_filesystem_queries(tmp_path: Path) -> None:
    fs = LocalFilesystem()
    (tmp_path / "dir").mkdir()
    (tmp_path / "file.txt").write_text("x", encoding="utf-8")

    assert fs.exists(tmp_path / "file.txt")
    assert fs.is_readable(tmp_path / "file.txt")
    assert fs.is_dir(tmp_path / "dir")
    assert not fs.is_dir(tmp_path / "file.txt")
    assert not fs.exists(tmp_path / "missing")
    assert sorted(fs.list_entries(tmp_path)) == ["dir", "file.txt"]
    assert fs.list_entries(tmp_path / "missing") == []

"""Shared pytest fixtures for module trees and instrumented collaborators."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from pathlib import Path

import pytest

from strata.io import LocalFilesystem


class CountingFilesystem(LocalFilesystem):
    """Local filesystem that counts every call by method name."""

    def __init__(self) -> None:
        self.calls: Counter[str] = Counter()

    def exists(self, path: Path) -> bool:
        self.calls["exists"] += 1
        return super().exists(path)

    def is_readable(self, path: Path) -> bool:
        self.calls["is_readable"] += 1
        return super().is_readable(path)

    def is_dir(self, path: Path) -> bool:
        self.calls["is_dir"] += 1
        return super().is_dir(path)

    def list_entries(self, path: Path) -> list[str]:
        self.calls["list_entries"] += 1
        return super().list_entries(path)

    @property
    def total(self) -> int:
        return sum(self.calls.values())


def _write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) below ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture()
def write_tree() -> Callable[[Path, dict[str, str]], Path]:
    """Return a helper that writes a dict of files below a directory."""
    return _write_tree


@pytest.fixture()
def counting_fs() -> CountingFilesystem:
    """Return a filesystem that records how often each call was made."""
    return CountingFilesystem()


@pytest.fixture()
def two_modules(tmp_path: Path) -> tuple[Path, Path]:
    """Two module roots that both provide ``layout.php``; only ``app`` has ``home.php``."""
    app = _write_tree(
        tmp_path / "app",
        {"layout.php": "app layout", "home.php": "app home"},
    )
    lib = _write_tree(
        tmp_path / "lib",
        {"layout.php": "lib layout", "widget.php": "lib widget"},
    )
    return app, lib


@pytest.fixture()
def route_tree(tmp_path: Path) -> Path:
    """Route files for extension negotiation: ``foo/bar.json.php``, ``foo/bar.php``, ``foo/boo.json.php``."""
    return _write_tree(
        tmp_path / "routes",
        {
            "foo/bar.json.php": "",
            "foo/bar.php": "",
            "foo/boo.json.php": "",
        },
    )


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """A project with its own template/app dirs plus two vendor packages."""
    root = tmp_path / "project"
    _write_tree(
        root,
        {
            "template/layout.php": "base layout",
            "app/index.py": "",
            "app/users.py": "",
            "app/users.json.py": "",
            "vendor/acme/blog/template/layout.php": "blog layout",
            "vendor/acme/blog/template/post.php": "blog post",
            "vendor/acme/blog/app/posts.py": "",
            "vendor/Zeta/Shop/template/cart.php": "shop cart",
            "vendor/README.md": "",
            "vendor/acme/NOTES.txt": "",
        },
    )
    return root

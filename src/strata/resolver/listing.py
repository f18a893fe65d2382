"""Ordered listing of route files inside a module directory."""

from __future__ import annotations

from pathlib import Path

from strata.io import Filesystem


def list_route_files(
    fs: Filesystem,
    directory: Path,
    suffix: str,
    index_name: str,
    *,
    recursive: bool = True,
) -> list[Path]:
    """List files ending in ``suffix`` below ``directory``.

    Within one directory ``index_name`` comes first, then the other files
    sorted case-insensitively. Files of subdirectories follow the directory's
    own files, so shallow routes are always bound before deeper ones.
    """
    files: list[Path] = []
    subdirs: list[Path] = []
    for name in fs.list_entries(directory):
        entry = directory / name
        if fs.is_dir(entry):
            if recursive:
                subdirs.append(entry)
        elif name.endswith(suffix):
            files.append(entry)

    files.sort(key=lambda path: (path.name != index_name, path.name.casefold(), path.name))
    subdirs.sort(key=lambda path: (path.name.casefold(), path.name))

    for subdir in subdirs:
        files.extend(list_route_files(fs, subdir, suffix, index_name))
    return files

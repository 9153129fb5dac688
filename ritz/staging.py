"""Adding files to the index."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from .index import INDEX_PATH, load_index, save_index
from .objects import object_path, sha1_hex, write_object
from .repo import require_initialized


def add_file(path: str | Path, index: dict[str, str]) -> str:
    """Store the file at ``path`` as an object, record it in ``index``, return its hash."""
    content = Path(path).read_bytes()
    sha = sha1_hex(content)
    write_object(object_path(sha), content)
    index[os.path.relpath(path, ".")] = sha
    return sha


def _walk_files(directory: str | Path) -> Iterator[str]:
    """Yield every non-directory path below ``directory`` in lexical order."""
    with os.scandir(directory) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(entry.path)
        else:
            yield entry.path


def add_path(path: str | Path, index: dict[str, str]) -> None:
    """Add a file, or every file below a directory, to ``index``."""
    target = Path(path)
    if not target.is_dir():
        target.stat()
        add_file(target, index)
        return
    for file_path in _walk_files(target):
        add_file(file_path, index)


def add(paths: list[str]) -> list[tuple[str, OSError]]:
    """Stage ``paths`` and save the index; return the paths that failed with their errors."""
    require_initialized()
    index = load_index(INDEX_PATH)
    failures: list[tuple[str, OSError]] = []
    for path in paths:
        try:
            add_path(path, index)
        except OSError as error:
            failures.append((path, error))
    save_index(INDEX_PATH, index)
    return failures
"""The staging index: a mapping of file paths to object hashes."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from pathlib import Path

from .repo import RitzError

INDEX_PATH = Path(".ritz", "index")


def load_index(path: str | Path) -> dict[str, str]:
    """Read the index at ``path``; a missing file gives an empty index."""
    try:
        content = Path(path).read_text()
    except OSError:
        return {}
    index: dict[str, str] = {}
    for line in content.split("\n"):
        if not line:
            continue
        parts = line.split(" ")
        if len(parts) < 2:
            raise RitzError(f"malformed index line: {line!r}")
        index[parts[1]] = parts[0]
    return index


def save_index(path: str | Path, index: Mapping[str, str]) -> None:
    """Write ``index`` to ``path`` as ``<hash> <file>`` lines."""
    lines = (f"{sha} {name}" for name, sha in sorted(index.items()))
    Path(path).write_text("\n".join(lines))


def _walk_files(root: str) -> Iterator[str]:
    """Yield file paths under ``root`` depth first, in lexical order."""
    with os.scandir(root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        path = os.path.normpath(os.path.join(root, entry.name))
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_files(path)
        else:
            yield path


def untracked_files(index: Mapping[str, str]) -> list[str]:
    """Return files under the current directory that are not in ``index``."""
    return [
        path
        for path in _walk_files(".")
        if not path.startswith(".ritz") and path not in index
    ]
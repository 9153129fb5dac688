"""Comparing a working file with its staged version."""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field
from difflib import SequenceMatcher
from enum import IntEnum
from pathlib import Path

from .index import INDEX_PATH, load_index
from .objects import read_object
from .repo import RitzError, require_initialized

NO_COMMITTED_VERSION = "(no committed version)"


class DiffOp(IntEnum):
    """Kind of a diff fragment."""

    DELETE = -1
    EQUAL = 0
    INSERT = 1


Diff = tuple[DiffOp, str]


@dataclass(frozen=True)
class DiffResult:
    """Both versions of a file and the differences between them."""

    current: str
    committed: str
    diffs: list[Diff] = field(default_factory=list)
    committed_error: str | None = None

    def render(self) -> str:
        """Return the comparison as printed text."""
        lines = [f"Current file content: {self.current}"]
        if self.committed_error is not None:
            lines.append(f"Error reading committed file: {self.committed_error}")
        lines.append(f"Committed file content: {self.committed}")
        lines.append(pretty_diff(self.diffs))
        return "\n".join(lines) + "\n"


def read_committed_file(file_path: str) -> bytes:
    """Return the staged content of ``file_path``."""
    index = load_index(INDEX_PATH)
    sha = index.get(file_path)
    if sha is None:
        raise RitzError("file not found in index")
    return read_object(sha)


def _append(diffs: list[Diff], op: DiffOp, text: str) -> None:
    if diffs and diffs[-1][0] == op:
        diffs[-1] = (op, diffs[-1][1] + text)
    else:
        diffs.append((op, text))


def diff_texts(old_text: str, new_text: str) -> list[Diff]:
    """Return character-level differences turning ``old_text`` into ``new_text``."""
    diffs: list[Diff] = []
    matcher = SequenceMatcher(None, old_text, new_text, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            _append(diffs, DiffOp.EQUAL, old_text[i1:i2])
            continue
        if i2 > i1:
            _append(diffs, DiffOp.DELETE, old_text[i1:i2])
        if j2 > j1:
            _append(diffs, DiffOp.INSERT, new_text[j1:j2])
    return diffs


def pretty_diff(diffs: list[Diff]) -> str:
    """Render diffs with insertions in green and deletions in red."""
    parts = []
    for op, text in diffs:
        if op is DiffOp.INSERT:
            parts.append(f"\x1b[32m{text}\x1b[0m")
        elif op is DiffOp.DELETE:
            parts.append(f"\x1b[31m{text}\x1b[0m")
        else:
            parts.append(text)
    return "".join(parts)


def diff(file_path: str) -> DiffResult:
    """Compare the working copy of ``file_path`` with its staged version."""
    require_initialized()
    current = Path(file_path).read_bytes().decode(errors="replace")
    error: str | None = None
    try:
        committed = read_committed_file(file_path).decode(errors="replace")
    except (RitzError, OSError, zlib.error) as exc:
        error = str(exc)
        committed = NO_COMMITTED_VERSION
    return DiffResult(
        current=current,
        committed=committed,
        diffs=diff_texts(committed, current),
        committed_error=error,
    )
"""Comparing the working tree, the index and the last commit."""

from __future__ import annotations

import zlib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .index import INDEX_PATH, load_index, untracked_files
from .objects import read_object, sha1_hex
from .repo import RITZ_DIR, require_initialized

HEAD_PATH = RITZ_DIR / "HEAD"


@dataclass(frozen=True)
class StatusReport:
    """The state of the repository as reported by ``status``."""

    initial: bool
    to_be_committed: list[str] = field(default_factory=list)
    untracked: list[str] = field(default_factory=list)
    not_staged: list[str] = field(default_factory=list)
    branch: str = "master"

    def render(self) -> str:
        """Return the report as printed text."""
        lines = [f"On branch {self.branch}"]
        if self.initial:
            lines.append("\nInitial commit\n")
        if self.to_be_committed:
            lines.append("\nChanges to be committed:")
            lines.append('  (use "ritz reset HEAD <file>..." to unstage)')
            lines.extend(f"\tnew file: {name}" for name in self.to_be_committed)
        elif self.initial:
            if self.untracked:
                lines.append("\nUntracked files:")
                lines.append(
                    '  (use "ritz add <file>..." to include in what will be committed)'
                )
                lines.extend(f"\t{name}" for name in self.untracked)
            else:
                lines.append(
                    "\nnothing added to commit but untracked files present "
                    '(use "ritz add" to track)'
                )
        else:
            lines.append("\nnothing to commit, working tree clean")
        if self.not_staged:
            lines.append("\nChanges not staged for commit:")
            lines.append('  (use "ritz add <file>..." to update what will be committed)')
            lines.extend(f"\tmodified: {name}" for name in self.not_staged)
        return "\n".join(lines) + "\n"


def head_commit() -> str:
    """Return the commit hash HEAD resolves to, or an empty string."""
    try:
        content = HEAD_PATH.read_text()
        ref = content.removeprefix("ref: ").strip()
        return (RITZ_DIR / ref).read_text().strip()
    except OSError:
        return ""


def _read_text_object(sha: str) -> str | None:
    if len(sha) < 3:
        return None
    try:
        return read_object(sha).decode(errors="replace")
    except (OSError, zlib.error):
        return None


def object_hash_from_tree(tree_hash: str, file_path: str) -> str:
    """Return the hash recorded for ``file_path`` in a tree, or an empty string."""
    content = _read_text_object(tree_hash)
    if content is None:
        return ""
    for line in content.split("\n"):
        if not line.endswith("\t" + file_path):
            continue
        _, _, rest = line.partition(" ")
        sha, sep, name = rest.partition("\t")
        if sep and name == file_path:
            return sha
    return ""


def object_hash_from_commit(commit_hash: str, file_path: str) -> str:
    """Return the hash of ``file_path`` in a commit's tree, or an empty string."""
    content = _read_text_object(commit_hash)
    if content is None:
        return ""
    for line in content.split("\n"):
        if line.startswith("tree "):
            tree_hash = line.removeprefix("tree ")
            return object_hash_from_tree(tree_hash, file_path) if tree_hash else ""
    return ""


def changes_to_be_committed(index: Mapping[str, str], head: str) -> list[str]:
    """Return indexed files whose content differs from the ``head`` commit."""
    if not head:
        return sorted(index)
    return [
        name
        for name, sha in sorted(index.items())
        if object_hash_from_commit(head, name) != sha
    ]


def changes_not_staged(index: Mapping[str, str]) -> list[str]:
    """Return indexed files whose working copy differs from the index."""
    changed = []
    for name, sha in sorted(index.items()):
        try:
            content = Path(name).read_bytes()
        except OSError:
            continue
        if sha1_hex(content) != sha:
            changed.append(name)
    return changed


def status() -> StatusReport:
    """Build a report of staged, unstaged and untracked files."""
    require_initialized()
    index = load_index(INDEX_PATH)
    head = head_commit()
    to_commit = changes_to_be_committed(index, head)
    untracked = untracked_files(index) if not head and not to_commit else []
    return StatusReport(
        initial=not head,
        to_be_committed=to_commit,
        untracked=untracked,
        not_staged=changes_not_staged(index),
    )
"""Recording the staged index as a commit."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .index import INDEX_PATH, load_index
from .objects import object_path, sha1_hex, write_object
from .repo import RITZ_DIR, require_initialized

MASTER_REF = "refs/heads/master"
_AUTHOR = "Your Name <you@example.com> 0 +0000"


@dataclass(frozen=True)
class CommitResult:
    """What a commit produced."""

    branch: str
    commit_hash: str
    tree_hash: str
    message: str
    files: list[str] = field(default_factory=list)

    def summary(self) -> str:
        """Return the report printed after committing."""
        lines = [
            f"[{self.branch} (root-commit) {self.commit_hash}] {self.message}",
            f" {len(self.files)} file(s) changed",
        ]
        lines.extend(f" create mode 100644 {name}" for name in self.files)
        return "\n".join(lines)


def create_tree_object(index: Mapping[str, str]) -> str:
    """Store a tree object listing every entry of ``index``; return its hash."""
    content = "\n".join(
        f"100644 {sha}\t{name}" for name, sha in sorted(index.items())
    ).encode()
    tree_hash = sha1_hex(content)
    write_object(object_path(tree_hash), content)
    return tree_hash


def create_commit_object(tree_hash: str, message: str) -> str:
    """Store a commit object pointing at ``tree_hash``; return its hash."""
    content = (
        f"tree {tree_hash}\n"
        f"author {_AUTHOR}\n"
        f"committer {_AUTHOR}\n\n"
        f"{message}\n"
    ).encode()
    commit_hash = sha1_hex(content)
    write_object(object_path(commit_hash), content)
    return commit_hash


def update_ref(ref_name: str, commit_hash: str) -> None:
    """Point the reference ``ref_name`` at ``commit_hash``."""
    (RITZ_DIR / ref_name).write_text(commit_hash)


def commit(message: str) -> CommitResult:
    """Commit the current index with ``message``."""
    require_initialized()
    index = load_index(INDEX_PATH)
    tree_hash = create_tree_object(index)
    commit_hash = create_commit_object(tree_hash, message)
    update_ref(MASTER_REF, commit_hash)
    return CommitResult(
        branch="master",
        commit_hash=commit_hash,
        tree_hash=tree_hash,
        message=message,
        files=sorted(index),
    )
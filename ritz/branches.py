"""Branch references and switching between them."""

from __future__ import annotations

import os
from pathlib import Path

from .repo import RitzError

BRANCH_DIR = Path(".ritz", "refs", "heads")
HEAD_PATH = Path(".ritz", "HEAD")
_HEAD_PREFIX = "ref: refs/heads/"


def current_branch() -> str:
    """Return the name of the branch HEAD points to."""
    return HEAD_PATH.read_text().strip().removeprefix(_HEAD_PREFIX)


def list_branches() -> list[tuple[str, bool]]:
    """Return ``(name, is_current)`` for every branch, sorted by name."""
    names = sorted(entry.name for entry in BRANCH_DIR.iterdir())
    current = current_branch()
    return [(name, name == current) for name in names]


def create_branch(branch_name: str) -> None:
    """Create a branch whose reference holds the current HEAD content."""
    branch_path = BRANCH_DIR / branch_name
    if branch_path.exists():
        raise RitzError(f"branch '{branch_name}' already exists")
    branch_path.write_bytes(HEAD_PATH.read_bytes())


def delete_branch(branch_name: str) -> None:
    """Delete an existing branch."""
    branch_path = BRANCH_DIR / branch_name
    if not branch_path.exists():
        raise RitzError(f"branch '{branch_name}' does not exist")
    branch_path.unlink()


def rename_branch(old_name: str, new_name: str) -> None:
    """Rename an existing branch to a name not yet taken."""
    old_path = BRANCH_DIR / old_name
    new_path = BRANCH_DIR / new_name
    if not old_path.exists():
        raise RitzError(f"branch '{old_name}' does not exist")
    if new_path.exists():
        raise RitzError(f"branch '{new_name}' already exists")
    os.rename(old_path, new_path)


def checkout_branch(branch_name: str) -> bool:
    """Point HEAD at ``branch_name``; return False if it was already checked out."""
    if not (BRANCH_DIR / branch_name).exists():
        raise RitzError(f"branch '{branch_name}' does not exist")
    if current_branch() == branch_name:
        return False
    HEAD_PATH.write_text(f"{_HEAD_PREFIX}{branch_name}")
    return True


def create_and_checkout_branch(branch_name: str) -> bool:
    """Create ``branch_name`` and switch to it."""
    create_branch(branch_name)
    return checkout_branch(branch_name)